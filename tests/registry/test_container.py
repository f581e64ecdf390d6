"""Tests for lifecycle_manager.registry.container - reference registry.

Covers registration, singleton/transient resolution, the cradle view and
conformance to the Registry protocol.
"""

import pytest

from lifecycle_manager.core.errors import ComponentNotFoundError
from lifecycle_manager.core.protocols import Registry
from lifecycle_manager.registry import (
    Container,
    Cradle,
    Lifetime,
    Registration,
    as_class,
    as_function,
    as_value,
)


class Config:
    def __init__(self, cradle):
        self.dsn = "sqlite://"


class Database:
    def __init__(self, cradle):
        self.config = cradle.config


class TestRegister:
    def test_registrations_expose_metadata(self):
        c = Container()
        c.register("db", as_class(Database, async_init="connect", tags=["storage"]))
        reg = c.registrations["db"]
        assert isinstance(reg, Registration)
        assert reg.async_init == "connect"
        assert reg.tags == ("storage",)

    def test_registrations_read_only(self):
        c = Container()
        c.register("x", as_value(1))
        with pytest.raises(TypeError):
            c.registrations["y"] = Registration()  # type: ignore[index]

    def test_duplicate_rejected(self):
        c = Container()
        c.register("x", as_value(1))
        with pytest.raises(ValueError, match="already registered"):
            c.register("x", as_value(2))

    def test_override_replaces_cached_instance(self):
        c = Container()
        c.register("x", as_value(1))
        assert c.resolve("x") == 1
        c.register("x", as_value(2), override=True)
        assert c.resolve("x") == 2

    def test_register_is_chainable(self):
        c = Container().register("a", as_value(1)).register("b", as_value(2))
        assert len(c) == 2
        assert "a" in c and "b" in c


class TestResolve:
    def test_singleton_cached(self):
        c = Container()
        c.register("config", as_class(Config))
        assert c.resolve("config") is c.resolve("config")

    def test_transient_new_each_time(self):
        c = Container()
        c.register("config", as_class(Config, lifetime=Lifetime.TRANSIENT))
        assert c.resolve("config") is not c.resolve("config")

    def test_factory_receives_cradle(self):
        c = Container()
        c.register("config", as_class(Config))
        c.register("db", as_class(Database))
        assert c.resolve("db").config is c.resolve("config")

    def test_as_function(self):
        c = Container()
        c.register("n", as_function(lambda cradle: 41 + 1))
        assert c.resolve("n") == 42

    def test_lazy_construction(self):
        c = Container()
        c.register("config", as_class(Config))
        assert c.is_resolved("config") is False
        c.resolve("config")
        assert c.is_resolved("config") is True

    def test_unknown_name(self):
        c = Container()
        c.register("db", as_value(object()))
        with pytest.raises(ComponentNotFoundError, match="Available: db"):
            c.resolve("ghost")


class TestCradle:
    def test_attribute_and_item_access(self):
        c = Container()
        c.register("config", as_class(Config))
        assert isinstance(c.cradle, Cradle)
        assert c.cradle.config is c.cradle["config"]

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            Container().cradle.ghost

    def test_unknown_item(self):
        with pytest.raises(ComponentNotFoundError):
            Container().cradle["ghost"]

    def test_iteration_and_membership(self):
        c = Container()
        c.register("a", as_value(1))
        c.register("b", as_value(2))
        assert list(c.cradle) == ["a", "b"]
        assert "a" in c.cradle


class TestRegistryProtocol:
    def test_container_satisfies_protocol(self):
        assert isinstance(Container(), Registry)
