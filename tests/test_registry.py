"""
Unit tests for the process registry and configuration

The registry is initialized once when the package is imported; a second
initialization is a fatal conflict.
"""

import pytest

import protoclass
from protoclass import (
    Env,
    Err,
    Factory,
    InitializationConflictErr,
    Klass,
    Log,
    LogLevel,
    Registry,
)


@pytest.fixture
def fresh_registry(monkeypatch):
    """Pretend no registry has been initialized yet"""
    monkeypatch.setattr(Registry, "_cur", None)
    log = Log.get("protoclass")
    old_level = log.level()
    yield
    log.level(old_level)


class TestRegistry:
    """One-time registration guard"""

    def test_package_initialized_registry(self):
        assert Registry.is_init()
        assert Registry.cur() is protoclass.Class

    def test_second_init_conflicts(self):
        with pytest.raises(InitializationConflictErr):
            Registry.init()

    def test_conflict_is_err(self):
        with pytest.raises(Err):
            Registry.init()

    def test_create_entry_point(self):
        K = protoclass.create({"a": 1})
        assert isinstance(K, Klass)
        assert isinstance(Registry.cur().create(), Klass)

    def test_publish_into_namespace(self, fresh_registry):
        namespace = {}
        registry = Registry.init(namespace)
        assert namespace["Class"] is registry
        assert Registry.cur() is registry
        assert isinstance(namespace["Class"].create(), Klass)

    def test_namespace_name_taken(self, fresh_registry):
        namespace = {"Class": object()}
        with pytest.raises(InitializationConflictErr):
            Registry.init(namespace)
        assert not Registry.is_init()

    def test_custom_name(self, fresh_registry):
        namespace = {"Class": 1}
        registry = Registry.init(namespace, name="Klasses")
        assert namespace["Klasses"] is registry

    def test_cur_unchecked(self, fresh_registry):
        assert Registry.cur(False) is None
        with pytest.raises(Err):
            Registry.cur()

    def test_log_level_from_env(self, fresh_registry, monkeypatch):
        monkeypatch.setenv("PROTOCLASS_LOG_LEVEL", "warn")
        Registry.init()
        assert Log.get("protoclass").level() == LogLevel.warn

    def test_bad_log_level_falls_back(self, fresh_registry, monkeypatch):
        monkeypatch.setenv("PROTOCLASS_LOG_LEVEL", "loud")
        Registry.init()
        assert Log.get("protoclass").level() == LogLevel.info


class TestEnv:
    """PROTOCLASS_* environment configuration"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PROTOCLASS_DETECT", raising=False)
        assert Env.cur().config("detect") == "scan"
        assert Env.cur().config("unknown") is None
        assert Env.cur().config("unknown", "x") == "x"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PROTOCLASS_DETECT", " marker ")
        assert Env.cur().config("detect") == "marker"

    def test_factory_reads_detect(self, monkeypatch):
        monkeypatch.setenv("PROTOCLASS_DETECT", "marker")
        assert Factory().installer().detect() == "marker"
        assert Factory(detect="scan").installer().detect() == "scan"

    def test_singleton(self):
        assert Env.cur() is Env.cur()


class TestLog:
    """Log wrapper over the logging module"""

    def test_levels(self):
        assert LogLevel.from_str("DEBUG") is LogLevel.debug
        assert LogLevel.from_str("nope", False) is None
        assert LogLevel.debug < LogLevel.err
        with pytest.raises(Err):
            LogLevel.from_str("nope")

    def test_get_returns_registered(self):
        assert Log.get("protoclass") is Log.find("protoclass")
        assert Log.find("never.made", False) is None

    def test_invalid_name(self):
        with pytest.raises(Err):
            Log("bad name!")

    def test_duplicate_registration(self):
        with pytest.raises(Err):
            Log("protoclass")

    def test_level_filters_handlers(self):
        log = Log("test.filter", register=False)
        records = []
        Log.add_handler(records.append)
        try:
            log.level("warn")
            log.info("hidden")
            log.warn("shown")
            log.level(LogLevel.silent)
            log.err("silenced")
        finally:
            Log.remove_handler(records.append)
        assert [r.msg() for r in records] == ["shown"]
        assert records[0].to_str() == "[warn] [test.filter] shown"

    def test_handler_must_be_callable(self):
        with pytest.raises(Err):
            Log.add_handler("not callable")
