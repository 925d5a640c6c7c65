#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Env import Env
from .Err import InitializationConflictErr
from .Factory import Factory
from .Log import Log, LogLevel
from .Obj import Obj


class Registry(Obj):
    """Process-wide entry point for creating classes.

    Exactly one registry may be initialized per process. The package
    initializes it on import; initializing again raises
    InitializationConflictErr.
    """

    _cur = None

    def __init__(self, factory=None):
        super().__init__()
        self._factory = factory if factory is not None else Factory()

    #################################################################
    # Static Registration
    #################################################################

    @staticmethod
    def init(namespace=None, name="Class"):
        """Initialize the process registry.

        Args:
            namespace: Optional dict (such as a module's globals()) to
                       publish the registry into under name
            name: Key used when publishing into namespace

        Returns:
            The new Registry

        Raises:
            InitializationConflictErr: if a registry is already initialized
                or namespace already defines name
        """
        if Registry._cur is not None:
            raise InitializationConflictErr("Class registry has already been initialized")
        if namespace is not None and name in namespace:
            raise InitializationConflictErr(f"The '{name}' name has already been defined")

        log = Log.get("protoclass")
        log.level(LogLevel.from_str(Env.cur().config("log_level"), False) or LogLevel.info)

        registry = Registry()
        Registry._cur = registry
        if namespace is not None:
            namespace[name] = registry
        log.debug(f"registry initialized, detect={registry.factory().installer().detect()}")
        return registry

    @staticmethod
    def cur(checked=True):
        """Get the initialized registry"""
        if Registry._cur is None and checked:
            from .Err import Err
            raise Err("Class registry is not initialized")
        return Registry._cur

    @staticmethod
    def is_init():
        return Registry._cur is not None

    #################################################################
    # Instance Methods
    #################################################################

    def factory(self):
        return self._factory

    def create(self, *args):
        """Create a class - see Factory.create"""
        return self._factory.create(*args)
