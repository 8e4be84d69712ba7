"""
Pytest configuration and shared fixtures for catalog tests.
"""

import logging

import pytest

from catalog.effects import EffectLog
from catalog.observability.hooks import EventHookRegistry
from catalog.observability.logging import ROOT_LOGGER_NAME
from catalog.registry import build_registry
from catalog.runner import DemoRunner


# =========================================================================
# Core Fixtures
# =========================================================================


@pytest.fixture
def effects() -> EffectLog:
    """Provide an empty effect log."""
    return EffectLog()


@pytest.fixture
def hooks() -> EventHookRegistry:
    """Provide an isolated hook registry."""
    return EventHookRegistry()


@pytest.fixture
def registry():
    """Provide a freshly built, sealed registry with the full catalog."""
    return build_registry()


@pytest.fixture
def runner(registry, hooks) -> DemoRunner:
    """Provide a runner wired to isolated registry and hooks."""
    return DemoRunner(registry=registry, hook_registry=hooks, session_id="test-session")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer environment variables out of config and CLI tests."""
    monkeypatch.delenv("CATALOG_CONFIG", raising=False)
    monkeypatch.delenv("CATALOG_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging during a test."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
