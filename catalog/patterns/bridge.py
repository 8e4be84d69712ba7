"""
Bridge pattern: notification kinds decoupled from delivery channels.
"""

# pylint: disable=too-few-public-methods

from typing import Any, Protocol

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo


class DeliveryChannel(Protocol):
    """Implementor side of the bridge."""

    name: str

    def deliver(self, recipient: str, text: str) -> None: ...


class PushChannel:
    name = "push"

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def deliver(self, recipient: str, text: str) -> None:
        self._effects.emit(f"push to {recipient}: {text}")


class SmsChannel:
    name = "sms"

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def deliver(self, recipient: str, text: str) -> None:
        # SMS bodies are capped at 160 characters
        self._effects.emit(f"sms to {recipient}: {text[:160]}")


class Notification:
    """Abstraction side; holds a channel instead of subclassing per channel."""

    def __init__(self, channel: DeliveryChannel) -> None:
        self.channel = channel

    def format(self, message: str) -> str:
        return message

    def send(self, recipient: str, message: str) -> None:
        self.channel.deliver(recipient, self.format(message))


class AlertNotification(Notification):
    def format(self, message: str) -> str:
        return f"[ALERT] {message.upper()}"


class ReminderNotification(Notification):
    def format(self, message: str) -> str:
        return f"Reminder: {message}"


class BridgeDemo(PatternDemo):
    name = "bridge"
    summary = "Notification kinds and delivery channels vary independently"
    default_inputs = {"recipient": "+15550100", "message": "battery low"}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        channels = [PushChannel(effects), SmsChannel(effects)]
        for kind in (AlertNotification, ReminderNotification):
            for channel in channels:
                kind(channel).send(inputs["recipient"], inputs["message"])
