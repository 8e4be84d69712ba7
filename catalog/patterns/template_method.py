"""
Template Method pattern: a fixed network-operation skeleton.

The skeleton is an ordered tuple of step functions (prepare, send, parse,
finish) over a small RequestSpec capability. Concrete operations supply a
spec object instead of subclassing an abstract operation.
"""

# pylint: disable=too-few-public-methods

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from catalog.effects import EffectLog
from catalog.errors import NotFound
from catalog.patterns.base import PatternDemo


class RequestSpec(Protocol):
    """The varying parts of an operation."""

    method: str
    path: str

    def body(self) -> Optional[Dict[str, Any]]: ...

    def parse(self, payload: Dict[str, Any]) -> Any: ...


class Transport(Protocol):
    def send(self, method: str, path: str, body: Optional[str]) -> Dict[str, Any]: ...


class FakeBackend:
    """In-memory API; answers 404 for unknown routes."""

    def __init__(self) -> None:
        self.routes: Dict[tuple, Dict[str, Any]] = {
            ("GET", "/profile"): {"name": "Ada", "followers": 1815},
            ("POST", "/status"): {"accepted": True},
        }

    def send(self, method: str, path: str, body: Optional[str]) -> Dict[str, Any]:
        payload = self.routes.get((method, path))
        if payload is None:
            return {"status": 404, "payload": {}}
        return {"status": 200, "payload": dict(payload)}


@dataclass
class OperationContext:
    spec: RequestSpec
    transport: Transport
    effects: EffectLog
    headers: Dict[str, str] = field(default_factory=dict)
    encoded_body: Optional[str] = None
    response: Dict[str, Any] = field(default_factory=dict)
    result: Any = None


Step = Callable[[OperationContext], None]


def prepare(ctx: OperationContext) -> None:
    ctx.headers = {"Accept": "application/json", "X-Client": "mobile"}
    body = ctx.spec.body()
    ctx.encoded_body = json.dumps(body, sort_keys=True) if body is not None else None
    ctx.effects.emit(f"prepare {ctx.spec.method} {ctx.spec.path}")


def send(ctx: OperationContext) -> None:
    ctx.response = ctx.transport.send(ctx.spec.method, ctx.spec.path, ctx.encoded_body)
    ctx.effects.emit(f"send -> {ctx.response['status']}")


def parse(ctx: OperationContext) -> None:
    if ctx.response["status"] == 404:
        raise NotFound(f"{ctx.spec.method} {ctx.spec.path} returned 404")
    ctx.result = ctx.spec.parse(ctx.response["payload"])
    ctx.effects.emit(f"parse -> {ctx.result}")


def finish(ctx: OperationContext) -> None:
    ctx.effects.emit(f"finish {ctx.spec.path}")


DEFAULT_STEPS: Sequence[Step] = (prepare, send, parse, finish)


class NetworkOperation:
    """Runs a spec through the fixed step sequence."""

    def __init__(
        self,
        spec: RequestSpec,
        transport: Transport,
        steps: Sequence[Step] = DEFAULT_STEPS,
    ) -> None:
        self.spec = spec
        self.transport = transport
        self.steps = tuple(steps)

    def run(self, effects: EffectLog) -> Any:
        ctx = OperationContext(self.spec, self.transport, effects)
        for step in self.steps:
            step(ctx)
        return ctx.result


class FetchProfile:
    method = "GET"
    path = "/profile"

    def body(self) -> Optional[Dict[str, Any]]:
        return None

    def parse(self, payload: Dict[str, Any]) -> str:
        return f"{payload['name']} ({payload['followers']} followers)"


class PostStatus:
    method = "POST"

    def __init__(self, text: str, path: str = "/status") -> None:
        self.text = text
        self.path = path

    def body(self) -> Optional[Dict[str, Any]]:
        return {"text": self.text}

    def parse(self, payload: Dict[str, Any]) -> str:
        return "accepted" if payload.get("accepted") else "rejected"


class TemplateMethodDemo(PatternDemo):
    name = "template_method"
    summary = "Profile and status requests share one prepare/send/parse/finish skeleton"
    default_inputs = {"status": "shipping v2 today", "status_path": "/status"}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        backend = FakeBackend()
        NetworkOperation(FetchProfile(), backend).run(effects)
        NetworkOperation(
            PostStatus(str(inputs["status"]), str(inputs["status_path"])), backend
        ).run(effects)
