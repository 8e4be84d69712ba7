"""
Singleton pattern: one analytics tracker per process.

The instance lives in an explicit ProcessScoped holder: created on first
use under a lock, never torn down. Concurrent first access from several
threads still constructs exactly one object.
"""

import concurrent.futures
import threading
from typing import Any, Callable, Generic, List, Optional, TypeVar

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo

T = TypeVar("T")


class ProcessScoped(Generic[T]):
    """Lazily created, process-wide value."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._instance: Optional[T] = None

    @property
    def initialized(self) -> bool:
        return self._instance is not None

    def get(self) -> T:
        instance = self._instance
        if instance is None:
            with self._lock:
                # Double-checked: another thread may have won the race
                if self._instance is None:
                    self._instance = self._factory()
                instance = self._instance
        return instance


class AnalyticsTracker:
    """Buffers analytics events for the whole app."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.events: List[str] = []

    def track(self, event: str) -> None:
        with self._lock:
            self.events.append(event)

    @classmethod
    def get_instance(cls) -> "AnalyticsTracker":
        return _TRACKER.get()


_TRACKER: ProcessScoped[AnalyticsTracker] = ProcessScoped(AnalyticsTracker)


class SingletonDemo(PatternDemo):
    name = "singleton"
    summary = "Every caller, on any thread, gets the same analytics tracker"
    default_inputs = {"threads": 4, "event": "app_open"}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        first = AnalyticsTracker.get_instance()
        second = AnalyticsTracker.get_instance()
        effects.emit(f"sequential calls same instance: {first is second}")

        workers = max(1, int(inputs["threads"]))
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(AnalyticsTracker.get_instance) for _ in range(workers)]
            ids = {id(future.result()) for future in futures}
        effects.emit(f"{workers} threads saw {len(ids)} instance(s)")

        first.track(str(inputs["event"]))
        effects.emit(f"tracked {inputs['event']!r} on the shared tracker")
