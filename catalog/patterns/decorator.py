"""
Decorator pattern: layering compression, encryption and logging onto a message sender.
"""

# pylint: disable=too-few-public-methods

import base64
import zlib
from typing import Any, Protocol

from catalog.effects import EffectLog
from catalog.errors import NotFound
from catalog.patterns.base import PatternDemo


class MessageSender(Protocol):
    def send(self, payload: bytes) -> int: ...


class SocketSender:
    """Innermost sender; stands in for the transport."""

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def send(self, payload: bytes) -> int:
        self._effects.emit(f"send {len(payload)} bytes")
        return len(payload)


class SenderDecorator:
    """Wraps another sender and forwards to it."""

    def __init__(self, inner: MessageSender, effects: EffectLog) -> None:
        self._inner = inner
        self._effects = effects

    def send(self, payload: bytes) -> int:
        return self._inner.send(payload)


class CompressionDecorator(SenderDecorator):
    def send(self, payload: bytes) -> int:
        self._effects.emit("compress")
        return self._inner.send(zlib.compress(payload))


class EncryptionDecorator(SenderDecorator):
    """Toy XOR cipher followed by base64; illustrates the shape only."""

    def __init__(self, inner: MessageSender, effects: EffectLog, key: int = 0x5A) -> None:
        super().__init__(inner, effects)
        self._key = key

    def send(self, payload: bytes) -> int:
        self._effects.emit("encrypt")
        scrambled = bytes(b ^ self._key for b in payload)
        return self._inner.send(base64.b64encode(scrambled))


class LoggingDecorator(SenderDecorator):
    def send(self, payload: bytes) -> int:
        self._effects.emit(f"log outgoing message ({len(payload)} bytes)")
        sent = self._inner.send(payload)
        self._effects.emit(f"log delivered ({sent} bytes on the wire)")
        return sent


DECORATORS = {
    "compress": CompressionDecorator,
    "encrypt": EncryptionDecorator,
    "log": LoggingDecorator,
}


def build_sender(layers: list[str], effects: EffectLog) -> MessageSender:
    """Wrap a SocketSender; ``layers`` lists decorators outermost first."""
    sender: MessageSender = SocketSender(effects)
    for layer in reversed(layers):
        sender = DECORATORS[layer](sender, effects)
    return sender


class DecoratorDemo(PatternDemo):
    name = "decorator"
    summary = "Compression, encryption and logging stack around any sender"
    default_inputs = {"message": "hello from the app", "layers": ["log", "compress", "encrypt"]}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        layers = [str(layer) for layer in inputs["layers"]]
        unknown = [layer for layer in layers if layer not in DECORATORS]
        if unknown:
            raise NotFound(f"unknown decorator(s): {unknown}")
        build_sender(layers, effects).send(str(inputs["message"]).encode("utf-8"))
