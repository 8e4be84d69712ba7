"""
Prototype pattern: cloning preconfigured screen templates.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List

from catalog.effects import EffectLog
from catalog.errors import InvalidInput, NotFound
from catalog.patterns.base import PatternDemo


@dataclass
class ScreenTemplate:
    title: str
    theme: str = "light"
    sections: List[str] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    def clone(self, **overrides: Any) -> "ScreenTemplate":
        """Deep copy, then apply attribute overrides."""
        duplicate = copy.deepcopy(self)
        for key, value in overrides.items():
            if not hasattr(duplicate, key):
                raise InvalidInput(f"ScreenTemplate has no field {key!r}")
            setattr(duplicate, key, copy.deepcopy(value))
        return duplicate


class PrototypeRegistry:
    def __init__(self) -> None:
        self._prototypes: Dict[str, ScreenTemplate] = {}

    def register(self, name: str, prototype: ScreenTemplate) -> None:
        self._prototypes[name] = prototype

    def unregister(self, name: str) -> None:
        self._prototypes.pop(name, None)

    def clone(self, name: str, **overrides: Any) -> ScreenTemplate:
        try:
            prototype = self._prototypes[name]
        except KeyError:
            raise NotFound(f"no prototype named {name!r}") from None
        return prototype.clone(**overrides)

    def names(self) -> List[str]:
        return list(self._prototypes)


def default_prototypes() -> PrototypeRegistry:
    registry = PrototypeRegistry()
    registry.register(
        "onboarding",
        ScreenTemplate("Welcome", sections=["hero", "features", "cta"], options={"skippable": True}),
    )
    registry.register(
        "settings",
        ScreenTemplate("Settings", theme="system", sections=["account", "privacy"]),
    )
    return registry


class PrototypeDemo(PatternDemo):
    name = "prototype"
    summary = "Screens are deep-cloned from registered templates and customised"
    default_inputs = {"prototype": "onboarding", "title": "Welcome back", "extra_section": "whats-new"}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        registry = default_prototypes()
        name = str(inputs["prototype"])
        clone = registry.clone(name, title=str(inputs["title"]))
        clone.sections.append(str(inputs["extra_section"]))

        original = registry.clone(name)
        effects.emit(f"clone: {clone.title} sections={clone.sections}")
        effects.emit(f"original: {original.title} sections={original.sections}")
        effects.emit(f"shared sections: {clone.sections is original.sections}")
