"""
Error taxonomy for the pattern catalog.

Every failure a demonstration can report is a PatternError subclass. The
runner recovers these into a RunResult; anything else is a programming
error and propagates.
"""

from typing import List, Optional


class PatternError(Exception):
    """Base class for typed catalog failures.

    Attributes:
        kind: Stable error kind name shown to CLI users
        effects: Effects recorded before the failure (filled in by the demo)
    """

    kind = "PatternError"

    def __init__(self, message: str, effects: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.effects: List[str] = list(effects or [])

    def describe(self) -> str:
        """One-line human readable description."""
        return f"{self.kind}: {self.message}"


class NotFound(PatternError):
    """Raised when a named pattern, strategy, recipient or prototype is unknown."""

    kind = "NotFound"


class InvalidTransition(PatternError):
    """Raised when a state machine is asked for an illegal transition."""

    kind = "InvalidTransition"


class Unauthorized(PatternError):
    """Raised when a protection proxy denies access."""

    kind = "Unauthorized"


class EmptyHistory(PatternError):
    """Raised on undo/redo with nothing to act on."""

    kind = "EmptyHistory"


class DuplicateRegistration(PatternError):
    """Raised when a name is registered twice."""

    kind = "DuplicateRegistration"


class InvalidInput(PatternError):
    """Raised when demo inputs are malformed."""

    kind = "InvalidInput"
