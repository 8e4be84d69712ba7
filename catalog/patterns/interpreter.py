"""
Interpreter pattern: a small search language for the contacts screen.

Grammar (keywords are case-insensitive, NOT binds tighter than AND, AND
tighter than OR):

    query   := or_expr
    or_expr := and_expr ("OR" and_expr)*
    and_expr:= not_expr ("AND" not_expr)*
    not_expr:= "NOT" not_expr | primary
    primary := WORD | "(" or_expr ")"

A WORD matches a contact whose name or any tag contains it.
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Protocol, Sequence

from catalog.effects import EffectLog
from catalog.errors import InvalidInput
from catalog.patterns.base import PatternDemo

TOKEN_RE = re.compile(r"\s*(\(|\)|[^\s()]+)")
KEYWORDS = {"AND", "OR", "NOT"}


@dataclass(frozen=True)
class Contact:
    name: str
    tags: Sequence[str] = field(default_factory=tuple)


class Expression(Protocol):
    def interpret(self, contact: Contact) -> bool: ...


@dataclass(frozen=True)
class Term:
    word: str

    def interpret(self, contact: Contact) -> bool:
        needle = self.word.lower()
        return needle in contact.name.lower() or any(needle in tag.lower() for tag in contact.tags)

    def __str__(self) -> str:
        return self.word


@dataclass(frozen=True)
class Not:
    operand: Expression

    def interpret(self, contact: Contact) -> bool:
        return not self.operand.interpret(contact)

    def __str__(self) -> str:
        return f"NOT {self.operand}"


@dataclass(frozen=True)
class And:
    left: Expression
    right: Expression

    def interpret(self, contact: Contact) -> bool:
        return self.left.interpret(contact) and self.right.interpret(contact)

    def __str__(self) -> str:
        return f"({self.left} AND {self.right})"


@dataclass(frozen=True)
class Or:
    left: Expression
    right: Expression

    def interpret(self, contact: Contact) -> bool:
        return self.left.interpret(contact) or self.right.interpret(contact)

    def __str__(self) -> str:
        return f"({self.left} OR {self.right})"


def tokenize(query: str) -> List[str]:
    tokens: List[str] = []
    position = 0
    query = query.rstrip()
    while position < len(query):
        match = TOKEN_RE.match(query, position)
        if match is None:
            raise InvalidInput(f"cannot tokenize {query[position:]!r}")
        tokens.append(match.group(1))
        position = match.end()
    return tokens


class Parser:
    """Recursive-descent parser producing an Expression tree."""

    def __init__(self, query: str) -> None:
        self._tokens = tokenize(query)
        self._pos = 0

    def parse(self) -> Expression:
        if not self._tokens:
            raise InvalidInput("empty query")
        expr = self._or()
        if self._pos != len(self._tokens):
            raise InvalidInput(f"unexpected token {self._tokens[self._pos]!r}")
        return expr

    def _peek(self) -> str:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else ""

    def _take(self) -> str:
        token = self._peek()
        if not token:
            raise InvalidInput("unexpected end of query")
        self._pos += 1
        return token

    def _or(self) -> Expression:
        expr = self._and()
        while self._peek().upper() == "OR":
            self._take()
            expr = Or(expr, self._and())
        return expr

    def _and(self) -> Expression:
        expr = self._not()
        while self._peek().upper() == "AND":
            self._take()
            expr = And(expr, self._not())
        return expr

    def _not(self) -> Expression:
        if self._peek().upper() == "NOT":
            self._take()
            return Not(self._not())
        return self._primary()

    def _primary(self) -> Expression:
        token = self._take()
        if token == "(":
            expr = self._or()
            if self._take() != ")":
                raise InvalidInput("missing closing parenthesis")
            return expr
        if token == ")" or token.upper() in KEYWORDS:
            raise InvalidInput(f"unexpected token {token!r}")
        return Term(token)


def parse(query: str) -> Expression:
    return Parser(query).parse()


def search(query: str, contacts: Sequence[Contact]) -> List[Contact]:
    expr = parse(query)
    return [contact for contact in contacts if expr.interpret(contact)]


ADDRESS_BOOK = (
    Contact("Alice Moreau", ("work", "paris")),
    Contact("Bob Stone", ("family",)),
    Contact("Carol Alvarez", ("work", "madrid")),
    Contact("Dan Alder", ("gym",)),
)


class InterpreterDemo(PatternDemo):
    name = "interpreter"
    summary = "Boolean contact-search queries parsed into expression trees"
    default_inputs = {"queries": ["work AND NOT paris", "al OR bob", "NOT (work OR gym)"]}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        for query in inputs["queries"]:
            expr = parse(str(query))
            matches = [contact.name for contact in ADDRESS_BOOK if expr.interpret(contact)]
            effects.emit(f"{expr} => {', '.join(matches) or '(none)'}")
