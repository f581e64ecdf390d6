"""Tests for lifecycle_manager.registry.registration."""

import dataclasses

import pytest

from lifecycle_manager.registry.registration import MISSING, InitConfig, Registration


class TestRegistrationDefaults:
    def test_defaults(self):
        reg = Registration()
        assert reg.enabled is MISSING
        assert reg.async_init is None
        assert reg.async_init_priority == 1
        assert reg.async_dispose is None
        assert reg.async_dispose_priority == 1
        assert reg.eager_inject is None
        assert reg.tags == ()

    def test_frozen(self):
        reg = Registration()
        with pytest.raises(dataclasses.FrozenInstanceError):
            reg.enabled = False  # type: ignore[misc]


class TestEnabled:
    @pytest.mark.parametrize("value", [MISSING, True, None, 0, "no"])
    def test_anything_but_false_is_enabled(self, value):
        assert Registration(enabled=value).is_enabled is True

    def test_false_is_disabled(self):
        assert Registration(enabled=False).is_enabled is False

    def test_absent_vs_explicit_none(self):
        assert Registration().has_enabled is False
        assert Registration(enabled=None).has_enabled is True


class TestTags:
    def test_list_normalised_to_tuple(self):
        reg = Registration(tags=["queue", "high-priority"])
        assert reg.tags == ("queue", "high-priority")

    def test_string_rejected(self):
        with pytest.raises(TypeError):
            Registration(tags="queue")

    def test_superset_match(self):
        reg = Registration(tags=["queue", "high-priority"])
        assert reg.has_tags(["queue"])
        assert reg.has_tags(["high-priority", "queue"])
        assert reg.has_tags([])
        assert not reg.has_tags(["queue", "low-priority"])


class TestInitConfig:
    def test_defaults(self):
        config = InitConfig()
        assert config.method is True
        assert config.non_blocking is False

    def test_structured_init_is_truthy(self):
        assert Registration(async_init=InitConfig(non_blocking=True)).async_init


class TestMissing:
    def test_singleton_and_falsy(self):
        assert type(MISSING)() is MISSING
        assert not MISSING
        assert repr(MISSING) == "MISSING"
