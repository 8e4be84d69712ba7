"""
Base class for pattern demonstrations.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from catalog.effects import EffectLog, EffectListener
from catalog.errors import InvalidInput, PatternError


class PatternDemo(ABC):
    """Abstract base class for a single pattern demonstration.

    Subclasses set ``name``, ``summary`` and ``default_inputs`` and implement
    ``demonstrate``. Demos keep no state between runs, so one instance can be
    registered once and run any number of times.
    """

    # pylint: disable=too-few-public-methods

    name: ClassVar[str] = ""
    summary: ClassVar[str] = ""
    default_inputs: ClassVar[Dict[str, Any]] = {}

    def run(
        self,
        inputs: Optional[Mapping[str, Any]] = None,
        listener: Optional[EffectListener] = None,
    ) -> List[str]:
        """Run the demonstration.

        Args:
            inputs: Overrides for ``default_inputs``
            listener: Optional callback receiving each effect as it is emitted

        Returns:
            The ordered effects emitted by the demonstration

        Raises:
            PatternError: With ``effects`` holding everything recorded up to
                and including the failure event
        """
        merged = dict(self.default_inputs)
        merged.update(inputs or {})
        unknown = sorted(set(merged) - set(self.default_inputs))

        effects = EffectLog(listener)
        try:
            if unknown:
                raise InvalidInput(f"unknown inputs for {self.name}: {unknown}")
            try:
                self.demonstrate(effects, **merged)
            except (TypeError, ValueError) as exc:
                # Inputs of the wrong shape surface as conversion or iteration errors
                raise InvalidInput(f"bad inputs for {self.name}: {exc}") from exc
        except PatternError as err:
            effects.emit(f"error: {err.kind}")
            err.effects = effects.snapshot()
            raise
        return effects.snapshot()

    @abstractmethod
    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        """Exercise the pattern, recording observable effects.

        Args:
            effects: Log to append effects to
            **inputs: Demo inputs merged over ``default_inputs``
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
