#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from collections.abc import Mapping

from .Descriptor import Descriptor
from .Err import InvalidArgumentsErr
from .Klass import Klass


class ArgParser:
    """Classifies the positional arguments of create().

    Accepted shapes:
        ()                          -> empty
        (parent)                    -> parent
        (members)                   -> members
        (parent, members)           -> parent, members
        (members, statics)          -> members, statics
        (parent, members, statics)  -> all three; extra arguments ignored

    The parent must be a Klass built by create(); other callables own no
    member table to delegate to and are rejected. Anything else raises
    InvalidArgumentsErr before any class is allocated.
    """

    @staticmethod
    def parse(args):
        args = tuple(args)
        n = len(args)

        if n == 0:
            return Descriptor()

        if n == 1:
            if ArgParser.is_parent(args[0]):
                return Descriptor(parent=args[0])
            if ArgParser.is_members(args[0]):
                return Descriptor(members=args[0])
            raise InvalidArgumentsErr.make_shape(args)

        if n == 2:
            if ArgParser.is_parent(args[0]) and ArgParser.is_members(args[1]):
                return Descriptor(parent=args[0], members=args[1])
            if ArgParser.is_members(args[0]) and ArgParser.is_members(args[1]):
                return Descriptor(members=args[0], statics=args[1])
            raise InvalidArgumentsErr.make_shape(args)

        if not (ArgParser.is_parent(args[0])
                and ArgParser.is_members(args[1])
                and ArgParser.is_members(args[2])):
            raise InvalidArgumentsErr.make_shape(args[:3])
        return Descriptor(parent=args[0], members=args[1], statics=args[2])

    @staticmethod
    def is_parent(obj):
        """Return true if obj can be used as a parent class"""
        return isinstance(obj, Klass)

    @staticmethod
    def is_members(obj):
        """Return true if obj is a member mapping"""
        return isinstance(obj, Mapping)
