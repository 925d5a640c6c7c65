#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# Classical single inheritance with super dispatch over delegating member tables

from .Obj import Obj
from .Err import (
    Err,
    ArgErr,
    InvalidArgumentsErr,
    InitializationConflictErr,
    UnknownSlotErr,
    ReadonlyErr,
)
from .Log import Log, LogLevel, LogRec
from .Env import Env

from .Descriptor import Descriptor
from .MemberTable import MemberTable
from .Klass import Klass
from .Instance import Instance
from .ArgParser import ArgParser
from .Linker import Linker
from .Installer import Installer, uses_super
from .Factory import Factory
from .Registry import Registry

__version__ = "1.0.0"

Class = Registry.init()


def create(*args):
    """Create a class through the process registry"""
    return Class.create(*args)


__all__ = [
    "Class",
    "create",
    "uses_super",
    "Klass",
    "Instance",
    "MemberTable",
    "Registry",
    "Factory",
    "Err",
    "ArgErr",
    "InvalidArgumentsErr",
    "InitializationConflictErr",
    "UnknownSlotErr",
    "ReadonlyErr",
    "Log",
    "LogLevel",
    "Env",
]
