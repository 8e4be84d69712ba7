"""
Memento pattern: undo for a note editor.

Snapshot exposes nothing about the editor state it wraps and cannot be
mutated; only NoteEditor reads it back. EditorHistory, the caretaker,
stores and hands out snapshots by position.
"""

# pylint: disable=protected-access

from dataclasses import dataclass, replace
from typing import Any, List

from catalog.effects import EffectLog
from catalog.errors import EmptyHistory, NotFound
from catalog.patterns.base import PatternDemo


@dataclass(frozen=True)
class EditorState:
    title: str = ""
    body: str = ""
    cursor: int = 0


class Snapshot:
    """Opaque token for one captured EditorState."""

    __slots__ = ("_state",)

    def __init__(self, state: EditorState) -> None:
        object.__setattr__(self, "_state", state)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("snapshots are immutable")

    def __repr__(self) -> str:
        return "Snapshot(<opaque>)"


class NoteEditor:
    """Originator."""

    def __init__(self, title: str = "") -> None:
        self._state = EditorState(title=title)

    @property
    def state(self) -> EditorState:
        return self._state

    def type(self, text: str) -> None:
        state = self._state
        body = state.body[: state.cursor] + text + state.body[state.cursor :]
        self._state = replace(state, body=body, cursor=state.cursor + len(text))

    def move_cursor(self, position: int) -> None:
        self._state = replace(self._state, cursor=max(0, min(position, len(self._state.body))))

    def rename(self, title: str) -> None:
        self._state = replace(self._state, title=title)

    def save(self) -> Snapshot:
        return Snapshot(self._state)

    def restore(self, snapshot: Snapshot) -> None:
        self._state = snapshot._state


class EditorHistory:
    """Caretaker: a positional stack of snapshots."""

    def __init__(self) -> None:
        self._snapshots: List[Snapshot] = []

    def push(self, snapshot: Snapshot) -> int:
        self._snapshots.append(snapshot)
        return len(self._snapshots) - 1

    def get(self, index: int) -> Snapshot:
        try:
            return self._snapshots[index]
        except IndexError:
            raise NotFound(f"no snapshot at position {index}") from None

    def pop(self) -> Snapshot:
        if not self._snapshots:
            raise EmptyHistory("no snapshot to restore")
        return self._snapshots.pop()

    def __len__(self) -> int:
        return len(self._snapshots)


class MementoDemo(PatternDemo):
    name = "memento"
    summary = "A note editor saves opaque snapshots and restores them on undo"
    default_inputs = {"title": "Groceries", "edits": ["milk", ", eggs", ", bread"], "undo": 2}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        editor = NoteEditor(str(inputs["title"]))
        history = EditorHistory()

        for text in inputs["edits"]:
            history.push(editor.save())
            editor.type(str(text))
            effects.emit(f"typed {text!r} -> {editor.state.body!r}")

        for _ in range(int(inputs["undo"])):
            editor.restore(history.pop())
            effects.emit(f"restored -> {editor.state.body!r}")
