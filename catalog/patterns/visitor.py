"""
Visitor pattern: operations over analytics events without touching the event classes.

Dispatch follows the ``visit_<snake_case_class>`` naming convention;
visitors may define ``generic_visit`` as a fallback.
"""

import re
from dataclasses import dataclass
from typing import Any, List

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


class AnalyticsEvent:
    def accept(self, visitor: "EventVisitor") -> Any:
        method_name = "visit_" + _CAMEL_RE.sub("_", type(self).__name__).lower()
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)


@dataclass
class ScreenView(AnalyticsEvent):
    screen: str


@dataclass
class ButtonTap(AnalyticsEvent):
    button: str
    screen: str


@dataclass
class Purchase(AnalyticsEvent):
    sku: str
    cents: int


class EventVisitor:
    def generic_visit(self, event: AnalyticsEvent) -> Any:
        raise NotImplementedError(f"{type(self).__name__} cannot visit {type(event).__name__}")


class ExportVisitor(EventVisitor):
    """Serializes each event to a compact line."""

    def visit_screen_view(self, event: ScreenView) -> str:
        return f"screen_view screen={event.screen}"

    def visit_button_tap(self, event: ButtonTap) -> str:
        return f"button_tap button={event.button} screen={event.screen}"

    def visit_purchase(self, event: Purchase) -> str:
        return f"purchase sku={event.sku} cents={event.cents}"


class RevenueVisitor(EventVisitor):
    """Sums purchase revenue; every other event counts as zero."""

    def __init__(self) -> None:
        self.total_cents = 0

    def visit_purchase(self, event: Purchase) -> int:
        self.total_cents += event.cents
        return event.cents

    def generic_visit(self, event: AnalyticsEvent) -> int:
        return 0


SESSION: List[AnalyticsEvent] = [
    ScreenView("home"),
    ButtonTap("buy", "product"),
    Purchase("pro-upgrade", 499),
    Purchase("sticker-pack", 99),
]


class VisitorDemo(PatternDemo):
    name = "visitor"
    summary = "Export and revenue visitors walk the same analytics events"
    default_inputs: dict = {}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        exporter = ExportVisitor()
        for event in SESSION:
            effects.emit(event.accept(exporter))

        revenue = RevenueVisitor()
        for event in SESSION:
            event.accept(revenue)
        effects.emit(f"revenue: {revenue.total_cents} cents")
