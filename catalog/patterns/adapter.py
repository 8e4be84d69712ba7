"""
Adapter pattern: a legacy XML payment gateway behind the modern processor interface.
"""

# pylint: disable=too-few-public-methods

from dataclasses import dataclass
from typing import Any, Protocol
from xml.etree import ElementTree

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo


@dataclass(frozen=True)
class PaymentRequest:
    order_id: str
    amount: float
    currency: str = "USD"


@dataclass(frozen=True)
class PaymentResult:
    order_id: str
    approved: bool
    channel: str


class PaymentProcessor(Protocol):
    """Capability every checkout flow depends on."""

    def execute(self, request: PaymentRequest) -> PaymentResult: ...


class LegacyXmlGateway:
    """Old gateway that only speaks XML documents."""

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def process_xml(self, payload: str) -> str:
        doc = ElementTree.fromstring(payload)
        order_id = doc.findtext("order")
        amount = float(doc.findtext("amount") or 0)
        self._effects.emit("payment processed via XML")
        response = ElementTree.Element("response")
        ElementTree.SubElement(response, "order").text = order_id
        ElementTree.SubElement(response, "status").text = "APPROVED" if amount > 0 else "DECLINED"
        return ElementTree.tostring(response, encoding="unicode")


class JsonPaymentProcessor:
    """Modern processor implementing the interface natively."""

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def execute(self, request: PaymentRequest) -> PaymentResult:
        self._effects.emit("payment processed via JSON")
        return PaymentResult(request.order_id, request.amount > 0, "json")


class XmlPaymentAdapter:
    """Adapts LegacyXmlGateway to PaymentProcessor.

    Every execute() is exactly one process_xml() call; only the request and
    response shapes are translated.
    """

    def __init__(self, gateway: LegacyXmlGateway) -> None:
        self._gateway = gateway

    def execute(self, request: PaymentRequest) -> PaymentResult:
        payment = ElementTree.Element("payment")
        ElementTree.SubElement(payment, "order").text = request.order_id
        # Full precision, no rounding
        ElementTree.SubElement(payment, "amount").text = repr(request.amount)
        ElementTree.SubElement(payment, "currency").text = request.currency
        payload = ElementTree.tostring(payment, encoding="unicode")
        response = ElementTree.fromstring(self._gateway.process_xml(payload))
        return PaymentResult(
            order_id=response.findtext("order") or request.order_id,
            approved=response.findtext("status") == "APPROVED",
            channel="xml",
        )


class AdapterDemo(PatternDemo):
    """Checkout pays through both processors with the same call."""

    name = "adapter"
    summary = "Legacy XML payment gateway adapted to the modern processor interface"
    default_inputs = {"order_id": "order-1001", "amount": 42.0}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        request = PaymentRequest(str(inputs["order_id"]), float(inputs["amount"]))
        processors: list[PaymentProcessor] = [
            XmlPaymentAdapter(LegacyXmlGateway(effects)),
            JsonPaymentProcessor(effects),
        ]
        for processor in processors:
            result = processor.execute(request)
            verdict = "approved" if result.approved else "declined"
            effects.emit(f"{result.order_id} {verdict} ({result.channel})")
