"""
Observer pattern: a publisher fanning app events out to listeners.
"""

from typing import Any, Callable, List

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo

Listener = Callable[[str], None]


class EventPublisher:
    """Delivers each event to the current subscribers in subscription order.

    The subscriber list is copied before delivery, so listeners that
    subscribe or unsubscribe during a publish take effect from the next one.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, event: str) -> int:
        """Deliver ``event``; returns the number of listeners notified."""
        listeners = list(self._listeners)
        for listener in listeners:
            listener(event)
        return len(listeners)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)


class BadgeCounter:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects
        self.count = 0

    def __call__(self, event: str) -> None:
        self.count += 1
        self._effects.emit(f"badge: {self.count} ({event})")


class BannerPresenter:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def __call__(self, event: str) -> None:
        self._effects.emit(f"banner: {event}")


class AnalyticsRecorder:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def __call__(self, event: str) -> None:
        self._effects.emit(f"analytics: {event}")


class ObserverDemo(PatternDemo):
    name = "observer"
    summary = "Badge, banner and analytics listeners receive published events in order"
    default_inputs = {"events": ["new message", "friend request"]}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        publisher = EventPublisher()
        badge = BadgeCounter(effects)
        banner = BannerPresenter(effects)
        publisher.subscribe(badge)
        publisher.subscribe(banner)
        publisher.subscribe(AnalyticsRecorder(effects))

        for event in inputs["events"]:
            publisher.publish(str(event))

        publisher.unsubscribe(banner)
        effects.emit("banner unsubscribed")
        publisher.publish("app backgrounded")
