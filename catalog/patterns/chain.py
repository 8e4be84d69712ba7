"""
Chain of Responsibility pattern: sign-up field validation.

Handlers are plain objects held in an ordered list by ValidationChain
rather than linked through a handler base class. A handler returns an
outcome to claim the request, or None to forward it to the next one.
"""

# pylint: disable=too-few-public-methods

import re
from typing import Any, Iterable, List, Optional, Protocol

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo

UNHANDLED = "unhandled"

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")


class Handler(Protocol):
    name: str

    def handle(self, value: str) -> Optional[str]: ...


class EmptyCheck:
    name = "EmptyCheck"

    def handle(self, value: str) -> Optional[str]:
        return "empty" if not value.strip() else None


class LengthCheck:
    name = "LengthCheck"

    def __init__(self, min_length: int = 8) -> None:
        self.min_length = min_length

    def handle(self, value: str) -> Optional[str]:
        return "too-short" if len(value) < self.min_length else None


class EmailCheck:
    name = "EmailCheck"

    def handle(self, value: str) -> Optional[str]:
        return "valid" if EMAIL_RE.match(value) else None


class ValidationChain:
    """Runs handlers in order until one claims the value."""

    def __init__(self, handlers: Iterable[Handler]) -> None:
        self.handlers: List[Handler] = list(handlers)

    def handle(self, value: str, effects: Optional[EffectLog] = None) -> str:
        """Return the first handler's outcome, or UNHANDLED if none claims it.

        Args:
            value: Input to validate
            effects: Optional log receiving one line per handler consulted
        """
        for handler in self.handlers:
            outcome = handler.handle(value)
            if outcome is not None:
                if effects is not None:
                    effects.emit(f"{handler.name} handled")
                return outcome
            if effects is not None:
                effects.emit(f"{handler.name} passed")
        return UNHANDLED


def default_chain(min_length: int = 8) -> ValidationChain:
    return ValidationChain([EmptyCheck(), LengthCheck(min_length=min_length), EmailCheck()])


class ChainDemo(PatternDemo):
    name = "chain"
    summary = "Empty, length and email checks handle or forward a sign-up field"
    default_inputs = {
        "values": ["", "short", "good.email@example.com", "no-at-sign-here"],
        "min_length": 8,
    }

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        chain = default_chain(int(inputs["min_length"]))
        for value in inputs["values"]:
            effects.emit(chain.handle(str(value)))
