"""
Tests for the Memento pattern.
"""

import pytest

from catalog.errors import EmptyHistory, NotFound
from catalog.patterns.memento import EditorHistory, EditorState, MementoDemo, NoteEditor


@pytest.fixture
def editor():
    editor = NoteEditor("Todo")
    editor.type("call mom")
    return editor


class TestSnapshot:
    def test_restore_of_save_is_identity(self, editor):
        before = editor.state
        snapshot = editor.save()
        editor.type(", buy milk")
        editor.rename("Errands")
        editor.move_cursor(0)

        editor.restore(snapshot)

        assert editor.state == before

    def test_snapshot_is_immutable(self, editor):
        snapshot = editor.save()

        with pytest.raises(AttributeError):
            snapshot._state = EditorState("hacked")
        with pytest.raises(AttributeError):
            snapshot.title = "hacked"

    def test_snapshot_is_opaque(self, editor):
        snapshot = editor.save()

        assert "call mom" not in repr(snapshot)
        assert not hasattr(snapshot, "body")

    def test_snapshot_unaffected_by_later_edits(self, editor):
        snapshot = editor.save()
        editor.type("!")
        editor.restore(snapshot)

        assert editor.state.body == "call mom"


class TestEditor:
    def test_type_at_cursor(self, editor):
        editor.move_cursor(4)
        editor.type(" your")

        assert editor.state.body == "call your mom"
        assert editor.state.cursor == 9

    def test_cursor_is_clamped(self, editor):
        editor.move_cursor(100)
        assert editor.state.cursor == len("call mom")

        editor.move_cursor(-3)
        assert editor.state.cursor == 0


class TestHistory:
    def test_pop_on_empty(self):
        with pytest.raises(EmptyHistory):
            EditorHistory().pop()

    def test_get_by_position(self, editor):
        history = EditorHistory()
        first = history.push(editor.save())
        editor.type("!")
        history.push(editor.save())

        editor.restore(history.get(first))

        assert editor.state.body == "call mom"
        assert len(history) == 2

    def test_get_unknown_position(self):
        with pytest.raises(NotFound):
            EditorHistory().get(3)

    def test_pop_is_last_in_first_out(self, editor):
        history = EditorHistory()
        history.push(editor.save())
        editor.type("!")
        history.push(editor.save())
        editor.type("?")

        editor.restore(history.pop())
        assert editor.state.body == "call mom!"
        editor.restore(history.pop())
        assert editor.state.body == "call mom"


class TestMementoDemo:
    def test_default_effects(self):
        assert MementoDemo().run() == [
            "typed 'milk' -> 'milk'",
            "typed ', eggs' -> 'milk, eggs'",
            "typed ', bread' -> 'milk, eggs, bread'",
            "restored -> 'milk, eggs'",
            "restored -> 'milk'",
        ]

    def test_undo_past_the_start(self):
        with pytest.raises(EmptyHistory) as exc_info:
            MementoDemo().run({"edits": ["a"], "undo": 2})
        assert exc_info.value.effects[-1] == "error: EmptyHistory"
