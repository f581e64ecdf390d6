"""Tests for lifecycle_manager.orchestration.validation."""

import pytest

from lifecycle_manager.core.errors import ConfigValidationError
from lifecycle_manager.orchestration.validation import validate_registrations
from lifecycle_manager.registry import Container, as_value


class TestValidateRegistrations:
    @pytest.mark.parametrize("value", [None, 0, 1, "true", "false"])
    def test_non_bool_rejected(self, value):
        c = Container()
        c.register("dependency1", as_value(object(), enabled=value))

        with pytest.raises(ConfigValidationError) as exc_info:
            validate_registrations(c)

        assert exc_info.value.registration == "dependency1"
        assert 'Invalid config for dependency1. "enabled" field' in str(exc_info.value)

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_accepted(self, value):
        c = Container()
        c.register("dependency1", as_value(object(), enabled=value))
        validate_registrations(c)

    def test_absent_accepted(self):
        c = Container()
        c.register("dependency1", as_value(object()))
        validate_registrations(c)

    def test_first_offender_reported(self):
        c = Container()
        c.register("ok", as_value(1, enabled=True))
        c.register("bad1", as_value(2, enabled="yes"))
        c.register("bad2", as_value(3, enabled=None))

        with pytest.raises(ConfigValidationError, match="bad1"):
            validate_registrations(c)

    def test_does_not_resolve(self):
        c = Container()
        c.register("x", as_value(1, enabled=None))

        with pytest.raises(ConfigValidationError):
            validate_registrations(c)

        assert c.is_resolved("x") is False
