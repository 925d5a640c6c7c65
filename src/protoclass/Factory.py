#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .ArgParser import ArgParser
from .Env import Env
from .Installer import Installer
from .Klass import Klass
from .Linker import Linker
from .Log import Log
from .Obj import Obj


class Factory(Obj):
    """Builds class values from create() arguments.

    Order of work: classify arguments, allocate a bare class with a no-op
    init, link to the parent (if any), install instance members against the
    parent's table, install static members, then seal the member table.
    """

    def __init__(self, detect=None):
        super().__init__()
        if detect is None:
            detect = Env.cur().config("detect")
        self._installer = Installer(detect)
        self._log = Log.get("protoclass")

    def installer(self):
        return self._installer

    def create(self, *args):
        """Create a class.

        Args may be:
            ()                          root class
            (parent)                    subclass with no new members
            (members)                   root class with instance members
            (parent, members)           subclass with instance members
            (members, statics)          root class with instance and static members
            (parent, members, statics)  subclass with both

        Returns:
            New Klass

        Raises:
            InvalidArgumentsErr: if args match none of the shapes above
        """
        desc = ArgParser.parse(args)

        klass = Klass()
        if desc.parent() is not None:
            Linker.link(desc.parent(), klass)
        if desc.members() is not None:
            self._installer.install(klass.members(), desc.members(), klass.super_())
        if desc.statics() is not None:
            self._installer.install(klass._statics, desc.statics())
        klass.seal()

        self._log.debug(f"created {klass} from {desc}")
        return klass
