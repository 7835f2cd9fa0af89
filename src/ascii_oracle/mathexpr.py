"""Arithmetic expression evaluation without eval.

Grammar, lowest precedence first::

    expr    := term (("+" | "-") term)*
    term    := unary (("*" | "/") unary)*
    unary   := ("+" | "-") unary | power
    power   := primary (("^" | "**") unary)?
    primary := NUMBER | CONSTANT | FUNCTION "(" expr ("," expr)* ")" | "(" expr ")"

Power is right-associative and binds tighter than unary minus, so ``-2^2``
is ``-4`` and ``2^3^2`` is ``512``. Trigonometric functions take radians.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass

from ascii_oracle.errors import ExpressionError

DECIMAL_PLACES = 6
MAX_NESTING = 64

_TOKEN_RE = re.compile(r"\s*(?:(?P<number>\d+\.?\d*|\.\d+)|(?P<name>[a-z]+)|(?P<op>\*\*|[-+*/^(),]))")

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}

FUNCTIONS: dict[str, tuple[int, Callable[..., float]]] = {
    "sqrt": (1, math.sqrt),
    "sin": (1, math.sin),
    "cos": (1, math.cos),
    "tan": (1, math.tan),
    "log": (1, math.log10),
    "ln": (1, math.log),
    "abs": (1, abs),
    "pow": (2, math.pow),
}


@dataclass(frozen=True)
class _Token:
    kind: str  # number|name|op|end
    text: str
    position: int


def _lex(expression: str) -> list[_Token]:
    tokens: list[_Token] = []
    position = 0
    text = expression.rstrip()
    while position < len(text):
        match = _TOKEN_RE.match(text, position)
        if match is None or match.end() == position:
            raise ExpressionError("Invalid expression")
        kind = match.lastgroup or "op"
        tokens.append(_Token(kind=kind, text=match.group(kind), position=match.start(kind)))
        position = match.end()
    tokens.append(_Token(kind="end", text="", position=len(text)))
    return tokens


class _Parser:
    def __init__(self, tokens: list[_Token]) -> None:
        self._tokens = tokens
        self._index = 0
        self._depth = 0

    @property
    def _current(self) -> _Token:
        return self._tokens[self._index]

    def _advance(self) -> _Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _accept(self, *ops: str) -> str | None:
        token = self._current
        if token.kind == "op" and token.text in ops:
            self._index += 1
            return token.text
        return None

    def _expect(self, op: str) -> None:
        if self._accept(op) is None:
            raise ExpressionError(f"Expected '{op}' at position {self._current.position}")

    def parse(self) -> float:
        value = self._expr()
        if self._current.kind != "end":
            raise ExpressionError(f"Unexpected '{self._current.text}' at position {self._current.position}")
        return value

    def _expr(self) -> float:
        value = self._term()
        while (op := self._accept("+", "-")) is not None:
            rhs = self._term()
            value = value + rhs if op == "+" else value - rhs
        return value

    def _term(self) -> float:
        value = self._unary()
        while (op := self._accept("*", "/")) is not None:
            rhs = self._unary()
            if op == "*":
                value *= rhs
                continue
            if rhs == 0:
                raise ExpressionError("Division by zero")
            value /= rhs
        return value

    def _unary(self) -> float:
        # Every nested paren, sign, exponent and call argument passes through here.
        self._depth += 1
        if self._depth > MAX_NESTING:
            raise ExpressionError("Expression too deeply nested")
        try:
            if self._accept("-") is not None:
                return -self._unary()
            if self._accept("+") is not None:
                return self._unary()
            return self._power()
        finally:
            self._depth -= 1

    def _power(self) -> float:
        base = self._primary()
        if self._accept("^", "**") is not None:
            exponent = self._unary()
            return _apply("power", math.pow, base, exponent)
        return base

    def _primary(self) -> float:
        token = self._current
        if token.kind == "number":
            self._advance()
            return float(token.text)

        if token.kind == "name":
            self._advance()
            if token.text in CONSTANTS:
                return CONSTANTS[token.text]
            if token.text in FUNCTIONS:
                return self._call(token.text)
            raise ExpressionError("Invalid expression")

        if self._accept("(") is not None:
            value = self._expr()
            self._expect(")")
            return value

        if token.kind == "end":
            raise ExpressionError("Unexpected end of expression")
        raise ExpressionError(f"Unexpected '{token.text}' at position {token.position}")

    def _call(self, name: str) -> float:
        arity, func = FUNCTIONS[name]
        self._expect("(")
        arguments = [self._expr()]
        while self._accept(",") is not None:
            arguments.append(self._expr())
        self._expect(")")
        if len(arguments) != arity:
            raise ExpressionError(f"{name}() takes {arity} argument{'s' if arity != 1 else ''}")
        return _apply(name, func, *arguments)


def _apply(name: str, func: Callable[..., float], *arguments: float) -> float:
    try:
        return float(func(*arguments))
    except (ValueError, OverflowError) as exc:
        raise ExpressionError(f"Math error in {name}: {exc!s}") from exc


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression using the fixed function table.

    Raises:
        ExpressionError: If the expression has characters or names outside the
            allow-list, is malformed, or has no finite value.
    """

    cleaned = expression.strip().lower()
    if not cleaned:
        raise ExpressionError("Empty expression")
    value = _Parser(_lex(cleaned)).parse()
    if not math.isfinite(value):
        raise ExpressionError("Result is not a finite number")
    return value


def format_number(value: float) -> str:
    """Print integral values without decimals, others with trailing zeros stripped."""

    if not math.isfinite(value):
        raise ExpressionError("Result is not a finite number")
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.{DECIMAL_PLACES}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
