"""
Demonstration runner.

This module provides the DemoRunner class, which resolves a pattern by name,
runs its demonstration and returns the ordered effects as a RunResult.
Typed catalog failures are recovered into the result; the registry is never
modified by a run.
"""

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from catalog.errors import PatternError
from catalog.observability.hooks import DemoEvent, EventHookRegistry, default_hook_registry
from catalog.observability.logging import DemoLogger, get_logger
from catalog.registry import PatternRegistry, default_registry


@dataclass
class RunResult:
    """Outcome of one demonstration run.

    Attributes:
        name: Pattern name that was requested
        effects: Ordered effects (partial effects when the run failed)
        error: Typed failure, or None on success
    """

    name: str
    effects: List[str] = field(default_factory=list)
    error: Optional[PatternError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name, "ok": self.ok, "effects": list(self.effects)}
        if self.error is not None:
            result["error"] = {"kind": self.error.kind, "message": self.error.message}
        return result


class DemoRunner:
    """Runs registered pattern demonstrations.

    Usage:
        runner = DemoRunner()
        result = runner.run("adapter")
        for effect in result.effects:
            print(effect)
    """

    def __init__(
        self,
        registry: Optional[PatternRegistry] = None,
        hook_registry: Optional[EventHookRegistry] = None,
        session_id: Optional[str] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Pattern registry (defaults to the process-wide one)
            hook_registry: Event hook registry for observability
            session_id: Session identifier for logging/tracing
        """
        self._registry = default_registry if registry is None else registry
        self._hooks = default_hook_registry if hook_registry is None else hook_registry
        self.session_id = session_id or str(uuid.uuid4())
        self._logger: DemoLogger = get_logger(name="runner", session_id=self.session_id)

    @property
    def registry(self) -> PatternRegistry:
        return self._registry

    def list_patterns(self) -> List[str]:
        return list(self._registry.list_names())

    def run(self, name: str, inputs: Optional[Mapping[str, Any]] = None) -> RunResult:
        """Run one demonstration, recovering typed failures.

        Args:
            name: Pattern name
            inputs: Demo inputs overriding its defaults

        Returns:
            RunResult with the ordered effects, or the error and partial effects
        """
        try:
            return RunResult(name=name, effects=self.run_or_raise(name, inputs))
        except PatternError as err:
            return RunResult(name=name, effects=list(err.effects), error=err)

    def run_or_raise(self, name: str, inputs: Optional[Mapping[str, Any]] = None) -> List[str]:
        """Run one demonstration and propagate its failure.

        Raises:
            PatternError: NotFound for unknown names, or the demo's own failure
        """
        start_time = time.perf_counter()
        self._hooks.trigger(DemoEvent.DEMO_START, pattern=name, session_id=self.session_id)
        self._logger.info(f"Running demo: {name}", pattern=name, extra=dict(inputs or {}))

        def on_effect(effect: str) -> None:
            self._hooks.trigger(
                DemoEvent.EFFECT_EMITTED,
                pattern=name,
                session_id=self.session_id,
                effect=effect,
            )

        try:
            demo = self._registry.get(name)
            effects = demo.run(inputs, listener=on_effect)
        except PatternError as err:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self._hooks.trigger(
                DemoEvent.DEMO_ERROR,
                pattern=name,
                session_id=self.session_id,
                error=err,
                duration_ms=duration_ms,
                kind=err.kind,
            )
            self._logger.info(
                f"Demo failed: {err.describe()}",
                pattern=name,
                duration_ms=duration_ms,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._hooks.trigger(
            DemoEvent.DEMO_END,
            pattern=name,
            session_id=self.session_id,
            duration_ms=duration_ms,
            effects=len(effects),
        )
        self._logger.info(
            f"Completed demo: {name}",
            pattern=name,
            duration_ms=duration_ms,
            extra={"effects": len(effects)},
        )
        return effects

    def run_all(
        self, inputs_by_name: Optional[Mapping[str, Mapping[str, Any]]] = None
    ) -> Dict[str, RunResult]:
        """Run every registered demonstration in registration order.

        Args:
            inputs_by_name: Optional per-pattern inputs

        Returns:
            Dictionary of pattern name -> RunResult
        """
        inputs_by_name = inputs_by_name or {}
        return {
            name: self.run(name, inputs_by_name.get(name))
            for name in self._registry.list_names()
        }
