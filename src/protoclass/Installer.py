#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import functools
import inspect
import types

from .Log import Log

# Instance attribute holding the implementation one level up
SUPER_SLOT = "super"

# Text the source scan looks for
SUPER_TOKEN = "." + SUPER_SLOT

# Explicit marker attribute set by @uses_super
MARKER = "__uses_super__"

# Detection modes
SCAN = "scan"
MARKER_ONLY = "marker"

_MISSING = object()


def uses_super(fn):
    """Declare that fn calls self.super(), so it is wrapped when it overrides."""
    setattr(fn, MARKER, True)
    return fn


def bind(impl, receiver):
    """Bind plain functions to receiver, return anything else unchanged"""
    if isinstance(impl, types.FunctionType):
        return types.MethodType(impl, receiver)
    return impl


class Installer:
    """Copies members into a target table, wrapping super-calling overrides.

    A member is wrapped when a parent table is supplied, the member is
    callable, it uses super, and the target already exposes a callable of
    the same name. Everything else is stored as-is.
    """

    def __init__(self, detect=SCAN):
        if detect not in (SCAN, MARKER_ONLY):
            from .Err import ArgErr
            raise ArgErr(f"Unknown detect mode: {detect}")
        self._detect = detect
        self._log = Log.get("protoclass")

    def detect(self):
        return self._detect

    def install(self, target, members, parent_table=None):
        """Install members into target.

        Args:
            target: MemberTable or dict to write into
            members: Mapping of name to implementation or value
            parent_table: Parent's MemberTable; omit for static members

        Returns:
            target
        """
        for name, val in members.items():
            if (parent_table is not None
                    and callable(val)
                    and self.uses_super(val)
                    and callable(target.get(name))):
                self._log.debug(f"wrap '{name}' against {parent_table}")
                target[name] = Installer.wrap(name, val, parent_table)
            else:
                target[name] = val
        return target

    def uses_super(self, fn):
        """Return true if fn is declared or detected to call super.

        In scan mode this is a best-effort textual check: any '.super' in the
        source counts, including ones inside comments, strings or closures
        that never run. Such false positives only add a pass-through wrapper.
        """
        if getattr(fn, MARKER, False):
            return True
        if self._detect != SCAN:
            return False
        return Installer.scan(fn)

    @staticmethod
    def scan(fn):
        try:
            source = inspect.getsource(fn)
        except (OSError, TypeError):
            return Installer._scan_code(getattr(fn, "__code__", None))
        return SUPER_TOKEN in source

    @staticmethod
    def _scan_code(code):
        # Source unavailable (exec'd or REPL code): use attribute names instead
        if code is None:
            return False
        if SUPER_SLOT in code.co_names:
            return True
        return any(Installer._scan_code(c) for c in code.co_consts
                   if isinstance(c, types.CodeType))

    @staticmethod
    def wrap(name, fn, parent_table):
        """Bracket fn so self.super is the parent's implementation of name.

        The previous slot value is saved before the call and put back
        afterwards on every exit path, so nested and reentrant wrapped calls
        unwind in call-stack order. fn receives the receiver exactly as an
        unwrapped member would. Generator and async overrides are not
        supported: the slot is restored before their bodies run.
        """
        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            fields = vars(self)
            saved = fields.get(SUPER_SLOT, _MISSING)
            fields[SUPER_SLOT] = bind(parent_table.get(name), self)
            try:
                return bind(fn, self)(*args, **kwargs)
            finally:
                if saved is _MISSING:
                    fields.pop(SUPER_SLOT, None)
                else:
                    fields[SUPER_SLOT] = saved

        wrapper.__super_name__ = name
        return wrapper
