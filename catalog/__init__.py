"""
Design pattern catalog.

This package provides self-contained demonstrations of the Gang-of-Four
design patterns, a registry to look them up by name and a runner that
collects the ordered effects each demonstration produces.
"""

from catalog.config import CatalogConfig
from catalog.effects import EffectLog
from catalog.errors import (
    DuplicateRegistration,
    EmptyHistory,
    InvalidInput,
    InvalidTransition,
    NotFound,
    PatternError,
    Unauthorized,
)
from catalog.observability import (
    DemoEvent,
    DemoLogger,
    EventHookRegistry,
    configure_logging,
    default_hook_registry,
    get_logger,
)
from catalog.patterns import ALL_DEMOS, PatternDemo
from catalog.registry import PatternRegistry, build_registry, default_registry
from catalog.runner import DemoRunner, RunResult

__all__ = [
    # Core components
    "CatalogConfig",
    "EffectLog",
    "PatternDemo",
    "ALL_DEMOS",
    "PatternRegistry",
    "build_registry",
    "default_registry",
    "DemoRunner",
    "RunResult",
    # Errors
    "PatternError",
    "NotFound",
    "InvalidTransition",
    "Unauthorized",
    "EmptyHistory",
    "DuplicateRegistration",
    "InvalidInput",
    # Observability
    "DemoEvent",
    "DemoLogger",
    "EventHookRegistry",
    "configure_logging",
    "default_hook_registry",
    "get_logger",
]
