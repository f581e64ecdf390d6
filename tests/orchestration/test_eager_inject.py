"""Tests for lifecycle_manager.orchestration.eager - eager materialization."""

import pytest

from lifecycle_manager.core.errors import MissingMethodError
from lifecycle_manager.orchestration.eager import eager_inject
from tests._support.components import Bare, component


class TestEagerInject:
    def test_constructs_flagged_components(self, container, recorder):
        container.register("eager", component("eager", eager_inject=True))
        container.register("lazy", component("lazy"))

        eager_inject(container)

        assert recorder.names("construct") == ["eager"]

    def test_calls_named_method(self, container, recorder):
        container.register("eager", component("eager", eager_inject="warm_up"))

        eager_inject(container)

        assert recorder.events == [("construct", "eager"), ("warm_up", "eager")]

    def test_disabled_not_constructed(self, container, recorder):
        container.register("eager", component("eager", eager_inject=True, enabled=False))
        eager_inject(container)
        assert recorder.events == []

    def test_each_component_processed_once(self, container, recorder):
        for name in ("a", "b", "c"):
            container.register(name, component(name, eager_inject="warm_up"))

        eager_inject(container)

        assert recorder.names("warm_up") == ["a", "b", "c"]
        assert recorder.names("construct") == ["a", "b", "c"]

    def test_missing_named_method(self, container):
        container.register("bare", component("bare", Bare, eager_inject="warm_up"))
        with pytest.raises(MissingMethodError, match="warm_up"):
            eager_inject(container)
