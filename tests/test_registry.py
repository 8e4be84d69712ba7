"""
Tests for the pattern registry.
"""

import pytest

from catalog.errors import DuplicateRegistration, NotFound
from catalog.patterns import ALL_DEMOS
from catalog.patterns.adapter import AdapterDemo
from catalog.patterns.state import StateDemo
from catalog.registry import PatternRegistry, build_registry, default_registry

EXPECTED_NAMES = [
    "adapter",
    "bridge",
    "composite",
    "proxy",
    "facade",
    "decorator",
    "chain",
    "strategy",
    "visitor",
    "observer",
    "command",
    "iterator",
    "interpreter",
    "state",
    "mediator",
    "template_method",
    "memento",
    "builder",
    "abstract_factory",
    "prototype",
    "factory_method",
    "singleton",
]


class TestRegistration:
    """Test register/get semantics."""

    def test_register_and_get(self):
        registry = PatternRegistry()
        demo = AdapterDemo()
        registry.register("adapter", demo)

        assert registry.get("adapter") is demo
        assert "adapter" in registry
        assert len(registry) == 1

    def test_duplicate_registration_fails(self):
        registry = PatternRegistry()
        registry.register("adapter", AdapterDemo())

        with pytest.raises(DuplicateRegistration):
            registry.register("adapter", AdapterDemo())

    def test_duplicate_does_not_replace_original(self):
        registry = PatternRegistry()
        original = AdapterDemo()
        registry.register("adapter", original)

        with pytest.raises(DuplicateRegistration):
            registry.register("adapter", StateDemo())
        assert registry.get("adapter") is original

    def test_get_unknown_fails_with_not_found(self):
        registry = PatternRegistry()

        with pytest.raises(NotFound) as exc_info:
            registry.get("nonexistent")
        assert exc_info.value.kind == "NotFound"

    def test_sealed_registry_rejects_registration(self):
        registry = PatternRegistry()
        registry.seal()

        assert registry.is_sealed
        with pytest.raises(RuntimeError):
            registry.register("adapter", AdapterDemo())


class TestListing:
    """Test lazy, ordered, restartable listing."""

    def test_names_in_registration_order(self):
        registry = PatternRegistry()
        registry.register("state", StateDemo())
        registry.register("adapter", AdapterDemo())

        assert list(registry.list_names()) == ["state", "adapter"]

    def test_listing_is_lazy_and_restartable(self):
        registry = build_registry()
        first = registry.list_names()

        assert next(first) == "adapter"
        assert list(registry.list_names()) == EXPECTED_NAMES
        assert len(list(first)) == len(EXPECTED_NAMES) - 1

    def test_describe_returns_summaries(self, registry):
        summaries = registry.describe()

        assert list(summaries) == EXPECTED_NAMES
        assert all(summaries.values())


class TestDefaultRegistry:
    """Test the process-wide registry."""

    def test_contains_all_22_patterns(self):
        assert list(default_registry.list_names()) == EXPECTED_NAMES
        assert len(ALL_DEMOS) == 22

    def test_is_sealed(self):
        assert default_registry.is_sealed

    def test_names_are_unique(self):
        names = [demo.name for demo in ALL_DEMOS]
        assert len(names) == len(set(names))
