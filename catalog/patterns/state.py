"""
State pattern: the lifecycle of a background file download.

Transitions are declared in one table. Any (state, event) pair not in the
table raises InvalidTransition and leaves the current state unchanged.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from catalog.effects import EffectLog
from catalog.errors import InvalidInput, InvalidTransition
from catalog.patterns.base import PatternDemo


class DownloadState(Enum):
    IDLE = "idle"
    DOWNLOADING = "downloading"
    PAUSED = "paused"
    COMPLETED = "completed"
    FAILED = "failed"


class DownloadEvent(Enum):
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    FINISH = "finish"
    FAIL = "fail"
    RETRY = "retry"


TRANSITIONS: Dict[Tuple[DownloadState, DownloadEvent], DownloadState] = {
    (DownloadState.IDLE, DownloadEvent.START): DownloadState.DOWNLOADING,
    (DownloadState.DOWNLOADING, DownloadEvent.PAUSE): DownloadState.PAUSED,
    (DownloadState.DOWNLOADING, DownloadEvent.FINISH): DownloadState.COMPLETED,
    (DownloadState.DOWNLOADING, DownloadEvent.FAIL): DownloadState.FAILED,
    (DownloadState.PAUSED, DownloadEvent.RESUME): DownloadState.DOWNLOADING,
    (DownloadState.PAUSED, DownloadEvent.FAIL): DownloadState.FAILED,
    (DownloadState.FAILED, DownloadEvent.RETRY): DownloadState.DOWNLOADING,
}

TransitionListener = Callable[[DownloadState, DownloadEvent, DownloadState], None]


class Download:
    """Context object whose behavior depends on its current state."""

    def __init__(
        self,
        url: str,
        transitions: Optional[Dict[Tuple[DownloadState, DownloadEvent], DownloadState]] = None,
        on_transition: Optional[TransitionListener] = None,
    ) -> None:
        self.url = url
        self.state = DownloadState.IDLE
        self.history: List[DownloadState] = [self.state]
        self._transitions = TRANSITIONS if transitions is None else transitions
        self._on_transition = on_transition

    def allowed_events(self) -> List[DownloadEvent]:
        return [event for (state, event) in self._transitions if state == self.state]

    def can(self, event: DownloadEvent) -> bool:
        return (self.state, event) in self._transitions

    def handle(self, event: DownloadEvent) -> DownloadState:
        """Apply ``event`` and return the new state.

        Raises:
            InvalidTransition: If the table has no entry for (state, event)
        """
        target = self._transitions.get((self.state, event))
        if target is None:
            raise InvalidTransition(
                f"cannot {event.value} while {self.state.value}"
            )
        previous, self.state = self.state, target
        self.history.append(target)
        if self._on_transition is not None:
            self._on_transition(previous, event, target)
        return target

    @property
    def is_terminal(self) -> bool:
        return not self.allowed_events()


def parse_event(name: str) -> DownloadEvent:
    try:
        return DownloadEvent(name.lower())
    except ValueError:
        raise InvalidInput(f"unknown download event {name!r}") from None


class StateDemo(PatternDemo):
    name = "state"
    summary = "A download moves through an explicit transition table"
    default_inputs = {
        "url": "https://cdn.example.com/app-update.zip",
        "events": ["start", "pause", "resume", "fail", "retry", "finish"],
    }

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        download = Download(
            str(inputs["url"]),
            on_transition=lambda old, event, new: effects.emit(
                f"{old.value} -({event.value})-> {new.value}"
            ),
        )
        for name in inputs["events"]:
            download.handle(parse_event(str(name)))
        effects.emit(f"final: {download.state.value}")
