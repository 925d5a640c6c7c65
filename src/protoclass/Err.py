#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Err(Exception, Obj):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        Obj.__init__(self)
        self._msg = msg
        self._cause = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def to_str(self):
        name = type(self).__name__
        if self._msg:
            return f"{name}: {self._msg}"
        return name

    def __str__(self):
        return self.to_str()


class ArgErr(Err):
    """Argument error"""
    pass


class InvalidArgumentsErr(ArgErr, TypeError):
    """Arguments passed to create() match no recognized shape.

    Also a TypeError, so callers written against the usual Python contract
    for bad argument types keep working.
    """

    @staticmethod
    def make_shape(args):
        kinds = ", ".join(type(a).__name__ for a in args)
        return InvalidArgumentsErr(f"Invalid arguments: ({kinds})")


class InitializationConflictErr(Err):
    """The class registry was initialized a second time"""
    pass


class UnknownSlotErr(Err, AttributeError):
    """Unknown slot error - thrown when member lookup fails"""
    pass


class ReadonlyErr(Err):
    """Modification of a sealed member table"""
    pass
