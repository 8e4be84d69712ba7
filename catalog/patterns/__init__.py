"""
Design pattern demonstrations.

Each module in this package is self-contained and importable on its own;
ALL_DEMOS lists one demo class per pattern in catalog order.
"""

from catalog.patterns.abstract_factory import AbstractFactoryDemo
from catalog.patterns.adapter import AdapterDemo
from catalog.patterns.base import PatternDemo
from catalog.patterns.bridge import BridgeDemo
from catalog.patterns.builder import BuilderDemo
from catalog.patterns.chain import ChainDemo
from catalog.patterns.command import CommandDemo
from catalog.patterns.composite import CompositeDemo
from catalog.patterns.decorator import DecoratorDemo
from catalog.patterns.facade import FacadeDemo
from catalog.patterns.factory_method import FactoryMethodDemo
from catalog.patterns.interpreter import InterpreterDemo
from catalog.patterns.iterator import IteratorDemo
from catalog.patterns.mediator import MediatorDemo
from catalog.patterns.memento import MementoDemo
from catalog.patterns.observer import ObserverDemo
from catalog.patterns.prototype import PrototypeDemo
from catalog.patterns.proxy import ProxyDemo
from catalog.patterns.singleton import SingletonDemo
from catalog.patterns.state import StateDemo
from catalog.patterns.strategy import StrategyDemo
from catalog.patterns.template_method import TemplateMethodDemo
from catalog.patterns.visitor import VisitorDemo

ALL_DEMOS = (
    # Structural
    AdapterDemo,
    BridgeDemo,
    CompositeDemo,
    ProxyDemo,
    FacadeDemo,
    DecoratorDemo,
    # Behavioral
    ChainDemo,
    StrategyDemo,
    VisitorDemo,
    ObserverDemo,
    CommandDemo,
    IteratorDemo,
    InterpreterDemo,
    StateDemo,
    MediatorDemo,
    TemplateMethodDemo,
    MementoDemo,
    # Creational
    BuilderDemo,
    AbstractFactoryDemo,
    PrototypeDemo,
    FactoryMethodDemo,
    SingletonDemo,
)

__all__ = ["ALL_DEMOS", "PatternDemo"] + [demo.__name__ for demo in ALL_DEMOS]
