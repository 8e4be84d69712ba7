"""
Abstract Factory pattern: platform widget families.

A screen asks one factory for all of its widgets, so an iOS button is
never paired with an Android switch.
"""

# pylint: disable=too-few-public-methods

from typing import Any, Dict, Protocol, Type

from catalog.effects import EffectLog
from catalog.errors import NotFound
from catalog.patterns.base import PatternDemo


class Button(Protocol):
    platform: str

    def render(self, label: str) -> str: ...


class Switch(Protocol):
    platform: str

    def render(self, on: bool) -> str: ...


class WidgetFactory(Protocol):
    def create_button(self) -> Button: ...

    def create_switch(self) -> Switch: ...


class IOSButton:
    platform = "ios"

    def render(self, label: str) -> str:
        return f"UIButton({label})"


class IOSSwitch:
    platform = "ios"

    def render(self, on: bool) -> str:
        return f"UISwitch(isOn={'true' if on else 'false'})"


class AndroidButton:
    platform = "android"

    def render(self, label: str) -> str:
        return f"MaterialButton({label.upper()})"


class AndroidSwitch:
    platform = "android"

    def render(self, on: bool) -> str:
        return f"SwitchCompat(checked={'true' if on else 'false'})"


class IOSWidgetFactory:
    def create_button(self) -> Button:
        return IOSButton()

    def create_switch(self) -> Switch:
        return IOSSwitch()


class AndroidWidgetFactory:
    def create_button(self) -> Button:
        return AndroidButton()

    def create_switch(self) -> Switch:
        return AndroidSwitch()


FACTORIES: Dict[str, Type[Any]] = {
    "ios": IOSWidgetFactory,
    "android": AndroidWidgetFactory,
}


def factory_for(platform: str) -> WidgetFactory:
    try:
        return FACTORIES[platform.lower()]()
    except KeyError:
        raise NotFound(f"no widget factory for platform {platform!r}") from None


def render_settings_screen(factory: WidgetFactory, effects: EffectLog) -> None:
    """Client code; depends only on the factory interface."""
    switch = factory.create_switch()
    button = factory.create_button()
    effects.emit(f"[{switch.platform}] notifications {switch.render(True)}")
    effects.emit(f"[{button.platform}] {button.render('Save')}")


class AbstractFactoryDemo(PatternDemo):
    name = "abstract_factory"
    summary = "iOS and Android factories produce matching widget families"
    default_inputs = {"platforms": ["ios", "android"]}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        for platform in inputs["platforms"]:
            render_settings_screen(factory_for(str(platform)), effects)
