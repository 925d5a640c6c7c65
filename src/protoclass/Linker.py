#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .MemberTable import MemberTable


class Linker:
    """Links a new class's member table to its parent's."""

    @staticmethod
    def link(parent, child):
        """Give child a fresh table delegating to parent's table.

        The new table's identity link names child, and child keeps a
        reference to the parent's table for super resolution. The parent
        class and its table are left untouched.

        Args:
            parent: Parent Klass
            child: Newly allocated Klass

        Returns:
            child
        """
        base = parent._members
        child._members = MemberTable(base, child)
        child._super = base
        child._parent = parent
        return child
