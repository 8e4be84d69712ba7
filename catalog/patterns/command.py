"""
Command pattern: undoable edits on a note, plus a cancellable upload command.

CommandHistory keeps two stacks. Executing a new command clears the redo
stack; undo and redo on an empty stack raise EmptyHistory.
"""

# pylint: disable=too-few-public-methods

import concurrent.futures
from typing import Any, Dict, Iterable, List, Optional, Protocol

from catalog.effects import EffectLog
from catalog.errors import EmptyHistory, InvalidInput
from catalog.patterns.base import PatternDemo
from catalog.tasks import CancellationToken, Task, TaskOutcome


class Document:
    """Receiver: the note being edited."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def insert(self, position: int, text: str) -> None:
        self.text = self.text[:position] + text + self.text[position:]

    def delete(self, position: int, length: int) -> str:
        removed = self.text[position : position + length]
        self.text = self.text[:position] + self.text[position + length :]
        return removed


class Command(Protocol):
    label: str

    def execute(self) -> None: ...

    def undo(self) -> None: ...


class InsertText:
    def __init__(self, document: Document, text: str, position: Optional[int] = None) -> None:
        """Insert ``text`` at ``position``; None appends at execution time."""
        self._document = document
        self._text = text
        self._position = position
        self._applied_at: Optional[int] = None
        self.label = f"insert {text!r}"

    def execute(self) -> None:
        length = len(self._document.text)
        position = length if self._position is None else self._position
        if not 0 <= position <= length:
            raise InvalidInput(f"insert position {position} outside 0..{length}")
        self._document.insert(position, self._text)
        self._applied_at = position

    def undo(self) -> None:
        if self._applied_at is not None:
            self._document.delete(self._applied_at, len(self._text))
            self._applied_at = None


class DeleteText:
    def __init__(self, document: Document, position: int, length: int) -> None:
        self._document = document
        self._position = position
        self._length = length
        self._removed: Optional[str] = None
        self.label = f"delete {length}@{position}"

    def execute(self) -> None:
        end = self._position + self._length
        if self._position < 0 or self._length < 0 or end > len(self._document.text):
            raise InvalidInput(f"delete range {self._position}..{end} outside the document")
        self._removed = self._document.delete(self._position, self._length)

    def undo(self) -> None:
        if self._removed is not None:
            self._document.insert(self._position, self._removed)
            self._removed = None


class MacroCommand:
    """Runs children in order and undoes them in reverse order.

    If a child fails part way, the children that already ran are undone
    before the error propagates.
    """

    def __init__(self, commands: Iterable[Command], label: str = "macro") -> None:
        self._commands: List[Command] = list(commands)
        self.label = label

    def execute(self) -> None:
        done: List[Command] = []
        try:
            for command in self._commands:
                command.execute()
                done.append(command)
        except Exception:
            for command in reversed(done):
                command.undo()
            raise

    def undo(self) -> None:
        for command in reversed(self._commands):
            command.undo()


class CommandHistory:
    """Invoker maintaining history and redo stacks."""

    def __init__(self) -> None:
        self._history: List[Command] = []
        self._redo: List[Command] = []

    def execute(self, command: Command) -> None:
        command.execute()
        self._history.append(command)
        self._redo.clear()

    def undo(self) -> Command:
        if not self._history:
            raise EmptyHistory("nothing to undo")
        command = self._history.pop()
        command.undo()
        self._redo.append(command)
        return command

    def redo(self) -> Command:
        if not self._redo:
            raise EmptyHistory("nothing to redo")
        command = self._redo.pop()
        command.execute()
        self._history.append(command)
        return command

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)


class NoteServer:
    """In-memory stand-in for the sync backend."""

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects
        self.notes: Dict[str, str] = {}

    def store(self, note_id: str, text: str) -> None:
        self.notes[note_id] = text
        self._effects.emit(f"uploaded {len(text)} chars as {note_id}")

    def delete(self, note_id: str) -> None:
        if self.notes.pop(note_id, None) is not None:
            self._effects.emit(f"deleted remote {note_id}")


class UploadNoteCommand:
    """Uploads a snapshot of the document as a one-shot Task.

    Cancelling before completion emits ``cancelled`` instead of the upload
    result. Undo removes the remote copy if one was stored.
    """

    def __init__(
        self,
        document: Document,
        server: NoteServer,
        effects: EffectLog,
        note_id: str = "note-1",
        executor: Optional[concurrent.futures.Executor] = None,
    ) -> None:
        self._document = document
        self._server = server
        self._effects = effects
        self._note_id = note_id
        self._executor = executor
        self._uploaded = False
        self.label = f"upload {note_id}"
        self.task = self._new_task()

    def cancel(self) -> bool:
        return self.task.cancel()

    def execute(self) -> None:
        # Redo after a successful upload needs a fresh one-shot task
        if self.task.done and self.task.result().succeeded:
            self.task = self._new_task()
        self.task.start(self._executor)
        self.task.result()

    def undo(self) -> None:
        if self._uploaded:
            self._server.delete(self._note_id)
            self._uploaded = False

    def _new_task(self) -> Task[str]:
        task: Task[str] = Task(self._upload, name=self.label)
        task.add_done_callback(self._on_done)
        return task

    def _upload(self, token: CancellationToken) -> str:
        text = self._document.text
        token.raise_if_cancelled()
        self._server.store(self._note_id, text)
        self._uploaded = True
        return self._note_id

    def _on_done(self, outcome: TaskOutcome[str]) -> None:
        if outcome.succeeded:
            self._effects.emit(f"upload complete: {outcome.value}")
        elif outcome.cancelled:
            self._effects.emit("cancelled")
        else:
            self._effects.emit(f"upload failed: {outcome.error}")


def parse_step(step: str, document: Document) -> Command:
    """Build a command from ``insert:<pos>:<text>``, ``append:<text>``,
    ``delete:<pos>:<len>`` or ``macro:<prefix>:<suffix>``."""
    op, _, rest = step.partition(":")
    try:
        if op == "insert":
            position, _, text = rest.partition(":")
            return InsertText(document, text, int(position))
        if op == "append":
            return InsertText(document, rest)
        if op == "delete":
            position, _, length = rest.partition(":")
            return DeleteText(document, int(position), int(length))
        if op == "macro":
            prefix, _, suffix = rest.partition(":")
            return MacroCommand(
                [InsertText(document, prefix, 0), InsertText(document, suffix)],
                label=f"macro {prefix!r}..{suffix!r}",
            )
    except ValueError as exc:
        raise InvalidInput(f"malformed step {step!r}: {exc}") from exc
    raise InvalidInput(f"unknown step {step!r}")


class CommandDemo(PatternDemo):
    name = "command"
    summary = "Undoable note edits with macro commands and a cancellable upload"
    default_inputs = {
        "steps": [
            "insert:0:Hello",
            "append: world",
            "undo",
            "redo",
            "macro:# :!",
            "undo",
            "delete:0:6",
            "upload",
        ],
        "cancel_upload": False,
    }

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        document = Document()
        history = CommandHistory()
        server = NoteServer(effects)

        for step in inputs["steps"]:
            step = str(step)
            if step == "undo":
                command = history.undo()
                effects.emit(f"undo {command.label} -> {document.text!r}")
                continue
            if step == "redo":
                command = history.redo()
                effects.emit(f"redo {command.label} -> {document.text!r}")
                continue
            if step == "upload":
                upload = UploadNoteCommand(document, server, effects)
                if inputs["cancel_upload"]:
                    upload.cancel()
                history.execute(upload)
                continue
            command = parse_step(step, document)
            history.execute(command)
            effects.emit(f"{command.label} -> {document.text!r}")
