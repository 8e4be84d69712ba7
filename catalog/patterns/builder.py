"""
Builder pattern: assembling alert dialogs step by step.
"""

import inspect
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from catalog.effects import EffectLog
from catalog.errors import InvalidInput, NotFound
from catalog.patterns.base import PatternDemo


@dataclass(frozen=True)
class AlertDialog:
    title: str
    message: str = ""
    buttons: Tuple[str, ...] = ()
    icon: Optional[str] = None
    cancelable: bool = True

    def describe(self) -> str:
        parts = [f"dialog {self.title!r}"]
        if self.icon:
            parts.append(f"icon={self.icon}")
        if self.message:
            parts.append(f"message={self.message!r}")
        parts.append(f"buttons=[{', '.join(self.buttons)}]")
        parts.append("cancelable" if self.cancelable else "modal")
        return " ".join(parts)


class AlertDialogBuilder:
    """Fluent builder; build() validates and can be called repeatedly."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> "AlertDialogBuilder":
        self._title: Optional[str] = None
        self._message = ""
        self._buttons: List[str] = []
        self._icon: Optional[str] = None
        self._cancelable = True
        return self

    def title(self, title: str) -> "AlertDialogBuilder":
        self._title = title
        return self

    def message(self, message: str) -> "AlertDialogBuilder":
        self._message = message
        return self

    def button(self, label: str) -> "AlertDialogBuilder":
        self._buttons.append(label)
        return self

    def icon(self, icon: str) -> "AlertDialogBuilder":
        self._icon = icon
        return self

    def cancelable(self, cancelable: bool = True) -> "AlertDialogBuilder":
        self._cancelable = cancelable
        return self

    def build(self) -> AlertDialog:
        """Create the dialog.

        Raises:
            InvalidInput: If no title was set, or a modal dialog has no button
        """
        if not self._title:
            raise InvalidInput("an alert dialog needs a title")
        if not self._cancelable and not self._buttons:
            raise InvalidInput("a modal dialog needs at least one button")
        return AlertDialog(
            title=self._title,
            message=self._message,
            buttons=tuple(self._buttons) or ("OK",),
            icon=self._icon,
            cancelable=self._cancelable,
        )


class DialogDirector:
    """Canned recipes driving a builder."""

    def __init__(self, builder: AlertDialogBuilder) -> None:
        self._builder = builder

    def confirm_delete(self, item: str) -> AlertDialog:
        return (
            self._builder.reset()
            .title("Delete?")
            .message(f"{item} will be removed permanently.")
            .icon("warning")
            .button("Cancel")
            .button("Delete")
            .cancelable(False)
            .build()
        )

    def rate_app(self) -> AlertDialog:
        return (
            self._builder.reset()
            .title("Enjoying the app?")
            .button("Rate now")
            .button("Later")
            .build()
        )

    def make(self, recipe: str, **kwargs: Any) -> AlertDialog:
        recipes = {"confirm_delete": self.confirm_delete, "rate_app": self.rate_app}
        if recipe not in recipes:
            raise NotFound(f"unknown dialog recipe {recipe!r}")
        recipe_fn = recipes[recipe]
        try:
            inspect.signature(recipe_fn).bind(**kwargs)
        except TypeError as exc:
            raise InvalidInput(f"bad arguments for recipe {recipe!r}: {exc}") from None
        return recipe_fn(**kwargs)


class BuilderDemo(PatternDemo):
    name = "builder"
    summary = "Alert dialogs assembled fluently or from director recipes"
    default_inputs = {"title": "Offline", "message": "Changes will sync later.", "item": "photo.jpg"}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        builder = AlertDialogBuilder()
        custom = builder.title(str(inputs["title"] or "")).message(str(inputs["message"])).build()
        effects.emit(custom.describe())

        director = DialogDirector(builder)
        effects.emit(director.make("confirm_delete", item=str(inputs["item"])).describe())
        effects.emit(director.make("rate_app").describe())
