"""
Factory Method pattern: each platform service creates its own push transport.
"""

# pylint: disable=too-few-public-methods

from typing import Any, Dict, Protocol, Type

from catalog.effects import EffectLog
from catalog.errors import NotFound
from catalog.patterns.base import PatternDemo


class PushTransport(Protocol):
    def deliver(self, device_token: str, title: str) -> str: ...


class ApnsTransport:
    def deliver(self, device_token: str, title: str) -> str:
        return f"APNs aps.alert={title!r} -> {device_token}"


class FcmTransport:
    def deliver(self, device_token: str, title: str) -> str:
        return f"FCM notification.title={title!r} -> {device_token}"


class NotificationService:
    """Creator. send() is written against PushTransport only."""

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def create_transport(self) -> PushTransport:
        raise NotImplementedError

    def send(self, device_token: str, title: str) -> None:
        transport = self.create_transport()
        self._effects.emit(transport.deliver(device_token, title))


class IOSNotificationService(NotificationService):
    def create_transport(self) -> PushTransport:
        return ApnsTransport()


class AndroidNotificationService(NotificationService):
    def create_transport(self) -> PushTransport:
        return FcmTransport()


SERVICES: Dict[str, Type[NotificationService]] = {
    "ios": IOSNotificationService,
    "android": AndroidNotificationService,
}


class FactoryMethodDemo(PatternDemo):
    name = "factory_method"
    summary = "Platform notification services override the transport factory method"
    default_inputs = {
        "devices": [["ios", "ios-token-1"], ["android", "fcm-token-9"]],
        "title": "Your order shipped",
    }

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        for platform, token in inputs["devices"]:
            service_cls = SERVICES.get(str(platform))
            if service_cls is None:
                raise NotFound(f"no notification service for {platform!r}")
            service_cls(effects).send(str(token), str(inputs["title"]))
