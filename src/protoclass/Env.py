#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os

from .Obj import Obj


class Env(Obj):
    """Process environment - configuration for the class runtime"""

    _instance = None

    # Prefix for configuration environment variables
    PREFIX = "PROTOCLASS_"

    # Known keys and their defaults
    _DEFAULTS = {
        "detect": "scan",
        "log_level": "info",
    }

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def config(self, key, defVal=None):
        """Get a configuration value.

        Args:
            key: Config key such as 'detect' or 'log_level'
            defVal: Default value if not found; falls back to the built-in
                    default for known keys

        Returns:
            Config value or default
        """
        val = os.environ.get(Env.PREFIX + key.upper())
        if val is not None and val.strip():
            return val.strip()
        if defVal is not None:
            return defVal
        return Env._DEFAULTS.get(key)
