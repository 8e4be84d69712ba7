"""
Effect log shared by pattern demonstrations.

This module provides the EffectLog class, an append-only ordered record of
the observable side effects a demonstration performs.
"""

from typing import Callable, Iterable, Iterator, List, Optional

EffectListener = Callable[[str], None]


class EffectLog:
    """Append-only, ordered log of observable effects.

    Effects are plain strings with no timestamps; only their order matters.

    Usage:
        effects = EffectLog()
        effects.emit("payment processed via XML")
        assert effects.snapshot() == ["payment processed via XML"]
    """

    def __init__(self, listener: Optional[EffectListener] = None) -> None:
        """Initialize an empty log.

        Args:
            listener: Optional callback invoked with every emitted effect
        """
        self._entries: List[str] = []
        self._listener = listener

    def emit(self, effect: str) -> None:
        """Append one effect.

        Args:
            effect: Effect description
        """
        self._entries.append(effect)
        if self._listener is not None:
            self._listener(effect)

    def extend(self, effects: Iterable[str]) -> None:
        """Append several effects in order."""
        for effect in effects:
            self.emit(effect)

    def snapshot(self) -> List[str]:
        """Return a copy of the effects recorded so far."""
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, effect: object) -> bool:
        return effect in self._entries

    def __repr__(self) -> str:
        return f"EffectLog({len(self._entries)} effects)"
