"""
Tests for the Command pattern.

Tests cover:
- execute/undo round trips on the document
- Macro commands undo in reverse and roll back on failure
- History stacks (EmptyHistory, redo cleared by a new command)
- The cancellable upload command
"""

import concurrent.futures

import pytest

from catalog.errors import EmptyHistory, InvalidInput
from catalog.patterns.command import (
    CommandDemo,
    CommandHistory,
    DeleteText,
    Document,
    InsertText,
    MacroCommand,
    NoteServer,
    UploadNoteCommand,
    parse_step,
)


@pytest.fixture
def document():
    return Document("Hello world")


class TestUndo:
    @pytest.mark.parametrize(
        "make_command",
        [
            lambda doc: InsertText(doc, "big ", 6),
            lambda doc: InsertText(doc, "!"),
            lambda doc: DeleteText(doc, 0, 6),
            lambda doc: MacroCommand([InsertText(doc, "> ", 0), DeleteText(doc, 2, 5)]),
        ],
    )
    def test_execute_then_undo_restores_text(self, document, make_command):
        command = make_command(document)
        command.execute()
        assert document.text != "Hello world"

        command.undo()
        assert document.text == "Hello world"

    def test_macro_undoes_in_reverse(self, document):
        macro = MacroCommand([InsertText(document, "A", 0), InsertText(document, "B", 0)])
        macro.execute()
        assert document.text == "BAHello world"

        macro.undo()
        assert document.text == "Hello world"

    def test_macro_rolls_back_on_failure(self, document):
        macro = MacroCommand([InsertText(document, "ok ", 0), DeleteText(document, 50, 3)])

        with pytest.raises(InvalidInput):
            macro.execute()
        assert document.text == "Hello world"

    def test_insert_out_of_range(self, document):
        with pytest.raises(InvalidInput):
            InsertText(document, "x", 99).execute()


class TestHistory:
    def test_undo_on_empty_history(self):
        with pytest.raises(EmptyHistory):
            CommandHistory().undo()

    def test_redo_on_empty_history(self):
        with pytest.raises(EmptyHistory):
            CommandHistory().redo()

    def test_undo_then_redo(self, document):
        history = CommandHistory()
        history.execute(InsertText(document, "!"))
        history.undo()

        assert document.text == "Hello world"
        assert history.can_redo

        history.redo()
        assert document.text == "Hello world!"
        assert not history.can_redo

    def test_new_command_clears_redo(self, document):
        history = CommandHistory()
        history.execute(InsertText(document, "!"))
        history.undo()
        history.execute(InsertText(document, "?"))

        assert not history.can_redo
        with pytest.raises(EmptyHistory):
            history.redo()

    def test_failed_command_is_not_recorded(self, document):
        history = CommandHistory()

        with pytest.raises(InvalidInput):
            history.execute(DeleteText(document, 0, 100))
        assert not history.can_undo


class TestParseStep:
    def test_insert(self, document):
        parse_step("insert:0:>> ", document).execute()
        assert document.text == ">> Hello world"

    def test_delete(self, document):
        parse_step("delete:5:6", document).execute()
        assert document.text == "Hello"

    @pytest.mark.parametrize("step", ["insert:x:text", "delete:1", "rotate:3"])
    def test_malformed(self, document, step):
        with pytest.raises(InvalidInput):
            parse_step(step, document)


class TestUpload:
    def test_upload_completes(self, effects):
        server = NoteServer(effects)
        upload = UploadNoteCommand(Document("draft"), server, effects)
        upload.execute()

        assert server.notes == {"note-1": "draft"}
        assert effects.snapshot() == ["uploaded 5 chars as note-1", "upload complete: note-1"]

    def test_cancel_before_start(self, effects):
        server = NoteServer(effects)
        upload = UploadNoteCommand(Document("draft"), server, effects)

        assert upload.cancel()
        upload.execute()

        assert server.notes == {}
        assert effects.snapshot() == ["cancelled"]

    def test_cancel_after_completion_is_a_no_op(self, effects):
        upload = UploadNoteCommand(Document("draft"), NoteServer(effects), effects)
        upload.execute()

        assert not upload.cancel()
        assert "cancelled" not in effects

    def test_undo_and_redo_upload(self, effects):
        server = NoteServer(effects)
        history = CommandHistory()
        history.execute(UploadNoteCommand(Document("draft"), server, effects))
        history.undo()
        assert server.notes == {}

        history.redo()
        assert server.notes == {"note-1": "draft"}
        assert effects.snapshot().count("upload complete: note-1") == 2

    def test_upload_on_executor(self, effects):
        server = NoteServer(effects)
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
            upload = UploadNoteCommand(Document("draft"), server, effects, executor=executor)
            upload.execute()

        assert upload.task.result().succeeded
        assert server.notes == {"note-1": "draft"}


class TestCommandDemo:
    def test_default_effects(self):
        assert CommandDemo().run() == [
            "insert 'Hello' -> 'Hello'",
            "insert ' world' -> 'Hello world'",
            "undo insert ' world' -> 'Hello'",
            "redo insert ' world' -> 'Hello world'",
            "macro '# '..'!' -> '# Hello world!'",
            "undo macro '# '..'!' -> 'Hello world'",
            "delete 6@0 -> 'world'",
            "uploaded 5 chars as note-1",
            "upload complete: note-1",
        ]

    def test_cancelled_upload(self):
        effects = CommandDemo().run({"cancel_upload": True})

        assert effects[-1] == "cancelled"
        assert "upload complete: note-1" not in effects

    def test_undo_with_empty_history_is_recorded(self):
        with pytest.raises(EmptyHistory) as exc_info:
            CommandDemo().run({"steps": ["undo"]})
        assert exc_info.value.effects == ["error: EmptyHistory"]
