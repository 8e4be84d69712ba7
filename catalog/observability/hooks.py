"""
Event hooks for the pattern catalog.

This module provides an event hook system that lets external code
subscribe to demonstration lifecycle events for monitoring, tracing and
custom integrations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from catalog.observability.logging import get_logger


class DemoEvent(Enum):
    """Event types that can be hooked into."""

    DEMO_START = "demo_start"
    DEMO_END = "demo_end"
    DEMO_ERROR = "demo_error"
    EFFECT_EMITTED = "effect_emitted"
    CUSTOM = "custom"


@dataclass
class EventData:
    """Data payload for an event.

    Attributes:
        event: The event type
        timestamp: When the event occurred
        pattern: Name of the pattern (if applicable)
        session_id: Session identifier
        data: Additional event-specific data
        error: Error information (if applicable)
        duration_ms: Duration of the operation (if applicable)
    """

    event: DemoEvent
    timestamp: datetime = field(default_factory=datetime.now)
    pattern: Optional[str] = None
    session_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[Exception] = None
    duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert event data to dictionary.

        Returns:
            Dictionary representation of the event
        """
        result: Dict[str, Any] = {
            "event": self.event.value,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.pattern:
            result["pattern"] = self.pattern
        if self.session_id:
            result["session_id"] = self.session_id
        if self.data:
            result["data"] = self.data
        if self.error:
            result["error"] = str(self.error)
        if self.duration_ms is not None:
            result["duration_ms"] = self.duration_ms

        return result


HookCallback = Callable[[EventData], None]

_logger = get_logger("hooks")


class EventHookRegistry:
    """Registry for event hooks.

    Usage:
        registry = EventHookRegistry()
        registry.on(DemoEvent.DEMO_START, my_callback)
        registry.on_all(my_universal_callback)
        registry.trigger(DemoEvent.DEMO_START, pattern="adapter")
        registry.off(DemoEvent.DEMO_START, my_callback)
    """

    def __init__(self) -> None:
        """Initialize an empty hook registry."""
        self._hooks: Dict[DemoEvent, List[HookCallback]] = {}
        self._global_hooks: List[HookCallback] = []
        self._enabled: bool = True

    def on(self, event: DemoEvent, callback: HookCallback) -> None:
        """Subscribe to a specific event.

        Args:
            event: Event type to subscribe to
            callback: Function to call when event occurs
        """
        if event not in self._hooks:
            self._hooks[event] = []
        if callback not in self._hooks[event]:
            self._hooks[event].append(callback)

    def on_all(self, callback: HookCallback) -> None:
        """Subscribe to all events."""
        if callback not in self._global_hooks:
            self._global_hooks.append(callback)

    def off(self, event: DemoEvent, callback: HookCallback) -> None:
        """Unsubscribe from a specific event."""
        if event in self._hooks and callback in self._hooks[event]:
            self._hooks[event].remove(callback)

    def off_all(self, callback: HookCallback) -> None:
        """Unsubscribe from all events."""
        if callback in self._global_hooks:
            self._global_hooks.remove(callback)

    def clear(self, event: Optional[DemoEvent] = None) -> None:
        """Clear hooks for an event or all events.

        Args:
            event: Specific event to clear, or None for all
        """
        if event:
            self._hooks[event] = []
        else:
            self._hooks.clear()
            self._global_hooks.clear()

    def trigger(
        self,
        event: DemoEvent,
        data: Optional[EventData] = None,
        **kwargs: Any,
    ) -> None:
        """Trigger an event and call all registered callbacks.

        Args:
            event: Event type to trigger
            data: Event data (created from kwargs if not provided)
            **kwargs: Arguments to create EventData if data not provided.
                      Known fields (pattern, session_id, error, duration_ms)
                      are passed directly; all others go into the 'data' dict.
        """
        if not self._enabled:
            return

        if data is None:
            known_fields = {"pattern", "session_id", "error", "duration_ms"}
            event_kwargs: Dict[str, Any] = {"event": event}
            extra_data: Dict[str, Any] = {}

            for key, value in kwargs.items():
                if key in known_fields:
                    event_kwargs[key] = value
                else:
                    extra_data[key] = value

            if extra_data:
                event_kwargs["data"] = extra_data

            data = EventData(**event_kwargs)

        for callback in self._hooks.get(event, []) + self._global_hooks:
            try:
                callback(data)
            except (TypeError, ValueError, RuntimeError, AttributeError) as exc:
                # Hook errors never break a run
                _logger.warning(
                    f"Hook {getattr(callback, '__name__', callback)!r} failed: {exc}",
                    pattern=data.pattern,
                )

    def enable(self) -> None:
        """Enable event triggering."""
        self._enabled = True

    def disable(self) -> None:
        """Disable event triggering (hooks won't be called)."""
        self._enabled = False

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def list_hooks(self, event: Optional[DemoEvent] = None) -> Dict[str, int]:
        """List registered hooks.

        Args:
            event: Specific event to list, or None for all

        Returns:
            Dictionary of event -> hook count
        """
        if event:
            return {event.value: len(self._hooks.get(event, []))}

        result = {e.value: len(hooks) for e, hooks in self._hooks.items()}
        result["_global"] = len(self._global_hooks)
        return result


default_hook_registry = EventHookRegistry()
