#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Descriptor(Obj):
    """Classified arguments of one create() call.

    Holds the optional parent class, instance members and static members.
    Built by ArgParser and discarded once the class is constructed.
    """

    def __init__(self, parent=None, members=None, statics=None):
        super().__init__()
        self._parent = parent
        self._members = members
        self._statics = statics

    def parent(self):
        return self._parent

    def members(self):
        return self._members

    def statics(self):
        return self._statics

    def to_str(self):
        parts = []
        if self._parent is not None:
            parts.append(f"parent={self._parent}")
        if self._members is not None:
            parts.append(f"members={list(self._members)}")
        if self._statics is not None:
            parts.append(f"statics={list(self._statics)}")
        return f"Descriptor({', '.join(parts)})"
