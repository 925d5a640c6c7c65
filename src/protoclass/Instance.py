#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Installer import bind

_MISSING = object()


class Instance:
    """Object produced by calling a Klass.

    Own data fields live in the instance __dict__. Any other attribute is
    resolved through the class's member table, with plain functions bound
    to this instance. The 'super' attribute only exists while a wrapped
    method is running.

    The Python-level surface is kept to dunders and one private slot so
    member names do not collide with it.
    """

    __slots__ = ("_klass", "__dict__")

    def __init__(self, klass):
        object.__setattr__(self, "_klass", klass)

    def __getattr__(self, name):
        if name == "_klass" or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        table = self._klass._members
        impl = table.get(name, _MISSING)
        if impl is not _MISSING:
            return bind(impl, self)
        if name == "constructor":
            return table.klass()
        from .Err import UnknownSlotErr
        raise UnknownSlotErr.make(f"{self._klass}.{name}")

    def __str__(self):
        to_str = self._klass._members.get("to_str")
        if callable(to_str):
            return str(bind(to_str, self)())
        return self.__repr__()

    def __repr__(self):
        return f"<{self._klass} instance>"

