"""
Composite pattern: a screen's view hierarchy rendered through one interface.
"""

from typing import Any, Iterable, List

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo


class View:
    """Common interface for leaves and containers."""

    def __init__(self, name: str) -> None:
        self.name = name

    def render(self, effects: EffectLog, depth: int = 0) -> None:
        raise NotImplementedError

    def count(self) -> int:
        return 1


class Label(View):
    def __init__(self, name: str, text: str) -> None:
        super().__init__(name)
        self.text = text

    def render(self, effects: EffectLog, depth: int = 0) -> None:
        effects.emit(f"{'  ' * depth}label {self.name}: {self.text}")


class Button(View):
    def render(self, effects: EffectLog, depth: int = 0) -> None:
        effects.emit(f"{'  ' * depth}button {self.name}")


class ViewGroup(View):
    """Container rendering itself, then its children in insertion order."""

    def __init__(self, name: str, children: Iterable[View] = ()) -> None:
        super().__init__(name)
        self.children: List[View] = list(children)

    def add(self, child: View) -> "ViewGroup":
        self.children.append(child)
        return self

    def remove(self, child: View) -> None:
        self.children.remove(child)

    def render(self, effects: EffectLog, depth: int = 0) -> None:
        effects.emit(f"{'  ' * depth}group {self.name}")
        for child in self.children:
            child.render(effects, depth + 1)

    def count(self) -> int:
        return 1 + sum(child.count() for child in self.children)


def build_profile_screen(username: str) -> ViewGroup:
    header = ViewGroup("header", [Label("title", username), Button("settings")])
    actions = ViewGroup("actions", [Button("follow"), Button("message")])
    return ViewGroup("profile", [header, Label("bio", "Hello!"), actions])


class CompositeDemo(PatternDemo):
    name = "composite"
    summary = "Leaf views and view groups render through the same interface"
    default_inputs = {"username": "ada"}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        screen = build_profile_screen(str(inputs["username"]))
        screen.render(effects)
        effects.emit(f"total views: {screen.count()}")
