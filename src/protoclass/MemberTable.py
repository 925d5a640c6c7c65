#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj

# Marks "no entry" so members may legitimately hold None
_MISSING = object()


class MemberTable(Obj):
    """Named implementations owned by one class.

    A table delegates lookups for names it does not define to its base
    table (the parent class's table). The base is fixed at construction and
    entries are never copied down the chain. Once the owning class is fully
    built the table is sealed and further writes raise ReadonlyErr.
    """

    def __init__(self, base=None, klass=None):
        super().__init__()
        self._base = base
        self._klass = klass
        self._slots = {}
        self._sealed = False

    #################################################################
    # Identity
    #################################################################

    def base(self):
        """Delegation parent or None for a root table"""
        return self._base

    def klass(self):
        """Identity link naming the owning class"""
        return self._klass

    def is_sealed(self):
        return self._sealed

    def seal(self):
        self._sealed = True
        return self

    #################################################################
    # Lookup
    #################################################################

    def _lookup(self, name):
        table = self
        while table is not None:
            val = table._slots.get(name, _MISSING)
            if val is not _MISSING:
                return val
            table = table._base
        return _MISSING

    def get(self, name, defVal=None):
        """Get member by name, walking the delegation chain"""
        val = self._lookup(name)
        return defVal if val is _MISSING else val

    def find(self, name, checked=True):
        """Find member by name.

        Args:
            name: Member name
            checked: If True, raise UnknownSlotErr if not found

        Returns:
            Implementation or None
        """
        val = self._lookup(name)
        if val is not _MISSING:
            return val
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{self._owner_name()}.{name}")
        return None

    def has(self, name):
        return self._lookup(name) is not _MISSING

    def has_own(self, name):
        return name in self._slots

    def own_names(self):
        """Names defined directly on this table"""
        return list(self._slots)

    #################################################################
    # Mutation
    #################################################################

    def set(self, name, val):
        if self._sealed:
            from .Err import ReadonlyErr
            raise ReadonlyErr(f"{self._owner_name()} is sealed, cannot set '{name}'")
        self._slots[name] = val
        return self

    #################################################################
    # Python protocol
    #################################################################

    def __getitem__(self, name):
        val = self._lookup(name)
        if val is _MISSING:
            raise KeyError(name)
        return val

    def __setitem__(self, name, val):
        self.set(name, val)

    def __contains__(self, name):
        return self.has(name)

    def __iter__(self):
        return iter(self.own_names())

    def __len__(self):
        return len(self._slots)

    def _owner_name(self):
        return str(self._klass) if self._klass is not None else "MemberTable"

    def to_str(self):
        return f"MemberTable({self._owner_name()})"
