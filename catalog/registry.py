"""
Pattern registry.

This module provides the PatternRegistry class mapping pattern names to
their demonstrations, and the process-wide default registry built from
every demo in catalog.patterns.
"""

from typing import Dict, Iterable, Iterator, Optional

from catalog.errors import DuplicateRegistration, NotFound
from catalog.observability.logging import get_logger
from catalog.patterns import ALL_DEMOS, PatternDemo

_logger = get_logger("registry")


class PatternRegistry:
    """Registry of pattern demonstrations keyed by unique name.

    The registry is filled at startup and then sealed; after that it is
    read-only.

    Usage:
        registry = PatternRegistry()
        registry.register("adapter", AdapterDemo())
        registry.seal()
        demo = registry.get("adapter")
    """

    def __init__(self) -> None:
        """Initialize an empty, unsealed registry."""
        self._demos: Dict[str, PatternDemo] = {}
        self._sealed = False

    def register(self, name: str, demo: PatternDemo) -> None:
        """Register a demonstration under ``name``.

        Args:
            name: Unique pattern name
            demo: Demonstration instance

        Raises:
            DuplicateRegistration: If ``name`` is already registered
            RuntimeError: If the registry has been sealed
        """
        if self._sealed:
            raise RuntimeError(f"Registry is sealed; cannot register '{name}'")
        if name in self._demos:
            raise DuplicateRegistration(f"pattern '{name}' is already registered")
        self._demos[name] = demo
        _logger.debug(f"Registered pattern: {name}", pattern=name)

    def register_demo(self, demo: PatternDemo) -> None:
        """Register a demonstration under its own name."""
        self.register(demo.name, demo)

    def get(self, name: str) -> PatternDemo:
        """Look up a demonstration.

        Raises:
            NotFound: If no pattern is registered under ``name``
        """
        try:
            return self._demos[name]
        except KeyError:
            raise NotFound(f"unknown pattern '{name}'") from None

    def list_names(self) -> Iterator[str]:
        """Lazily yield registered names in registration order.

        Each call returns a new generator.
        """
        return (name for name in list(self._demos))

    def describe(self) -> Dict[str, str]:
        """Get pattern names mapped to their one-line summaries."""
        return {name: demo.summary for name, demo in self._demos.items()}

    def seal(self) -> None:
        self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def __contains__(self, name: object) -> bool:
        return name in self._demos

    def __len__(self) -> int:
        return len(self._demos)


def build_registry(demos: Optional[Iterable[PatternDemo]] = None) -> PatternRegistry:
    """Build and seal a registry.

    Args:
        demos: Demonstrations to register (defaults to the full catalog)

    Returns:
        Sealed PatternRegistry
    """
    registry = PatternRegistry()
    for demo in demos if demos is not None else (cls() for cls in ALL_DEMOS):
        registry.register_demo(demo)
    registry.seal()
    return registry


# Process-wide registry, built once on import
default_registry = build_registry()
