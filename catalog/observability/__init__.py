"""
Observability module for the pattern catalog.

This module provides structured logging and event hooks for monitoring
and debugging demonstration runs.
"""

from .hooks import (
    DemoEvent,
    EventData,
    EventHookRegistry,
    default_hook_registry,
)
from .logging import DemoLogger, configure_logging, get_logger

__all__ = [
    # Logging
    "DemoLogger",
    "configure_logging",
    "get_logger",
    # Hooks
    "DemoEvent",
    "EventData",
    "EventHookRegistry",
    "default_hook_registry",
]
