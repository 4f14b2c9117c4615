"""
Tokenizer and evaluator for the unit-algebra mini-language.

    expression := term (('+' | '-') NUMBER)*
    term       := factor (('*' | '/' | <whitespace>) factor)*
    factor     := (SYMBOL | NUMBER) [('^' | '**') ['+' | '-'] INTEGER]

Multiplication and division share one precedence level and associate to
the left, so ``g cm / hour / min`` is ``((g*cm)/hour)/min``. Exponents bind
tighter than either. The trailing ``+``/``-`` terms give offset units such
as ``K - 273.15``.
"""

from typing import Callable, List, Optional, Tuple
import math
import re

from ..core.errors import NumericError, UnitSyntaxError
from ..core.units import Unit


NUMBER_PATTERN = r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
SYMBOL_PATTERN = r"[A-Za-z][A-Za-z_0-9]*"

_TOKEN_RE = re.compile(
    r"\s*(?:"
    rf"(?P<number>{NUMBER_PATTERN})"
    rf"|(?P<symbol>{SYMBOL_PATTERN})"
    r"|(?P<op>\*\*|[*/^+\-])"
    r"|(?P<error>\S)"
    r")?"
)

Token = Tuple[str, str, int]
Lookup = Callable[[str], Unit]


def tokenize(text: str) -> List[Token]:
    """Split ``text`` into (kind, text, position) tokens.

    Kinds are ``number``, ``symbol`` and ``op``. Whitespace is dropped;
    the parser treats two adjacent operands as an implicit product.
    """
    tokens = []
    pos = 0
    while True:
        match = _TOKEN_RE.match(text, pos)
        kind = match.lastgroup
        if kind is None:
            break
        if kind == 'error':
            raise UnitSyntaxError(
                f"Unexpected character '{match.group(kind)}'", text, match.start(kind)
            )
        tokens.append((kind, match.group(kind), match.start(kind)))
        pos = match.end()
    if text[pos:].strip():
        raise UnitSyntaxError("Unexpected trailing input", text, pos)
    return tokens


def parse_number(text: str, source: Optional[str] = None) -> float:
    """Convert a numeric literal, rejecting values that overflow to inf."""
    try:
        value = float(text)
    except ValueError:
        raise NumericError(f"Invalid numeric literal '{text}'") from None
    if not math.isfinite(value):
        where = f" in '{source}'" if source else ""
        raise NumericError(f"Numeric literal '{text}' is out of range{where}")
    return value


class _ExpressionParser:

    def __init__(self, text: str, lookup: Lookup):
        self.text = text
        self.lookup = lookup
        self.tokens = tokenize(text)
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise UnitSyntaxError("Unexpected end of expression", self.text, len(self.text))
        self.index += 1
        return token

    def parse(self) -> Unit:
        if not self.tokens:
            raise UnitSyntaxError("Empty unit expression", self.text)

        unit = self.term()

        token = self.peek()
        while token is not None and token[0] == 'op' and token[1] in '+-':
            self.advance()
            kind, text, position = self.advance()
            if kind != 'number':
                raise UnitSyntaxError(f"Expected a numeric offset, found '{text}'", self.text, position)
            offset = parse_number(text, self.text)
            unit = unit.shifted(offset if token[1] == '+' else -offset)
            token = self.peek()

        if token is not None:
            raise UnitSyntaxError(f"Unexpected '{token[1]}'", self.text, token[2])
        return unit

    def term(self) -> Unit:
        unit = self.factor()
        while True:
            token = self.peek()
            if token is None:
                return unit
            kind, text, _ = token
            if kind == 'op' and text == '*':
                self.advance()
                unit = unit * self.factor()
            elif kind == 'op' and text == '/':
                self.advance()
                unit = unit / self.factor()
            elif kind in ('symbol', 'number'):
                unit = unit * self.factor()
            else:
                return unit

    def factor(self) -> Unit:
        kind, text, position = self.advance()
        if kind == 'symbol':
            unit = self.lookup(text)
        elif kind == 'number':
            value = parse_number(text, self.text)
            if value == 0.0:
                raise NumericError(f"Zero scale factor in '{self.text}'")
            unit = Unit(value)
        else:
            raise UnitSyntaxError(
                f"Expected a unit symbol or number, found '{text}'", self.text, position
            )

        token = self.peek()
        if token is not None and token[0] == 'op' and token[1] in ('^', '**'):
            self.advance()
            unit = unit ** self.exponent()
        return unit

    def exponent(self) -> int:
        sign = 1
        kind, text, position = self.advance()
        if kind == 'op' and text in '+-':
            sign = -1 if text == '-' else 1
            kind, text, position = self.advance()
        if kind != 'number':
            raise UnitSyntaxError(f"Exponent must be an integer, found '{text}'", self.text, position)
        if not text.isdigit():
            raise UnitSyntaxError(f"Non-integer exponent '{text}'", self.text, position)
        return sign * int(text)


def parse_expression(expression: str, lookup: Lookup) -> Unit:
    """
    Evaluate a unit expression into a single Unit.

    Parameters
    ----------
    expression : str
        Unit algebra such as ``"kg m^2 / s^2"`` or ``"K - 273.15"``
    lookup : callable
        Maps a symbol to its Unit; raises UnknownSymbolError for unknown symbols

    Returns
    -------
    Unit
        Combined scale, dimensions and optional offset
    """
    return _ExpressionParser(expression, lookup).parse()


def resolve(expression: str, registry) -> Unit:
    """Evaluate ``expression`` against the symbols of ``registry``."""
    return parse_expression(expression, registry.get_unit)
