#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from types import MappingProxyType

from .MemberTable import MemberTable
from .Obj import Obj


def _noop_init(self, *args, **kwargs):
    pass


class Klass(Obj):
    """A constructible class value built by create().

    Calling a Klass allocates an Instance, looks up 'init' through the
    member table chain and calls it with the constructor arguments. Static
    members hang off the Klass itself and are readable as attributes
    (methods defined here take precedence) or through statics().
    """

    def __init__(self):
        super().__init__()
        self._members = MemberTable(None, self)
        self._members.set("init", _noop_init)
        self._statics = {}
        self._super = None
        self._parent = None

    #################################################################
    # Construction
    #################################################################

    def __call__(self, *args, **kwargs):
        from .Instance import Instance
        instance = Instance(self)
        init = getattr(instance, "init", None)
        if callable(init):
            init(*args, **kwargs)
        return instance

    #################################################################
    # Accessors
    #################################################################

    def members(self):
        """Member table used for instance lookups"""
        return self._members

    def super_(self):
        """Parent's member table for manual super dispatch, None for roots.

        Example:
            B.super_()["greet"](self)
        """
        return self._super

    def parent(self):
        return self._parent

    def statics(self):
        """Read-only view of the static members"""
        return MappingProxyType(self._statics)

    def inheritance(self):
        """This class followed by its ancestors"""
        result = []
        k = self
        while k is not None:
            result.append(k)
            k = k._parent
        return result

    def fits(self, that):
        """Check if this class is that class or inherits from it"""
        return any(k is that for k in self.inheritance())

    def seal(self):
        self._members.seal()
        return self

    #################################################################
    # Python protocol
    #################################################################

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        statics = self.__dict__.get("_statics")
        if statics is not None and name in statics:
            return statics[name]
        from .Err import UnknownSlotErr
        raise UnknownSlotErr.make(f"{self}.{name}")

    def __instancecheck__(self, obj):
        from .Instance import Instance
        return isinstance(obj, Instance) and obj._klass.fits(self)
