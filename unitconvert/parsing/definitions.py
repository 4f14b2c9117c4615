"""
Parsers for definition lines (``[coefficient] name = expression``) and
quantity literals (``<number> <unit-expression>``).
"""

from typing import NamedTuple, Optional, Tuple
import re

from ..core.errors import NumericError, UnitSyntaxError
from .expression import NUMBER_PATTERN, SYMBOL_PATTERN, parse_number


SIGNED_NUMBER_PATTERN = rf"[+-]?{NUMBER_PATTERN}"

_LHS_RE = re.compile(
    rf"\s*(?:(?P<coefficient>{SIGNED_NUMBER_PATTERN})\s*)?(?P<name>{SYMBOL_PATTERN})\s*"
)
_BASE_RE = re.compile(r"\[\s*(?P<dimension>[A-Za-z_][A-Za-z_0-9]*|1)\s*\]")
_QUANTITY_RE = re.compile(rf"\s*(?P<value>{SIGNED_NUMBER_PATTERN})(?P<unit>.*)", re.DOTALL)

DIMENSIONLESS_SYMBOL = "1"


class Definition(NamedTuple):
    """A syntactically valid definition line, not yet resolved."""
    name: str
    coefficient: float
    expression: str
    dimension: Optional[str] = None

    @property
    def is_base(self) -> bool:
        return self.dimension is not None


def is_valid_symbol(symbol: str) -> bool:
    return re.fullmatch(SYMBOL_PATTERN, symbol) is not None


def is_valid_dimension_symbol(symbol: str) -> bool:
    return _BASE_RE.fullmatch(f"[{symbol}]") is not None


def parse_definition(line: str) -> Definition:
    """
    Split a definition line into its parts.

    ``"1 ft = 12 in"`` gives ``Definition('ft', 1.0, '12 in')`` and
    ``"m = [L]"`` gives ``Definition('m', 1.0, '[L]', dimension='L')``.
    The right-hand side is only checked for shape here; symbols are
    resolved by the registry.
    """
    if line.count('=') != 1:
        raise UnitSyntaxError("A definition needs exactly one '='", line)

    lhs, rhs = line.split('=')
    match = _LHS_RE.fullmatch(lhs)
    if match is None:
        raise UnitSyntaxError("Left-hand side must be '[coefficient] name'", line)

    coefficient = 1.0
    if match.group('coefficient') is not None:
        coefficient = parse_number(match.group('coefficient'), line)
        if coefficient == 0.0:
            raise NumericError(f"Coefficient of zero in '{line}'")

    expression = rhs.strip()
    if not expression:
        raise UnitSyntaxError("Missing right-hand side", line)

    base = _BASE_RE.fullmatch(expression)
    if base is not None:
        if match.group('coefficient') is not None:
            raise UnitSyntaxError("Base unit definitions cannot carry a coefficient", line)
        return Definition(match.group('name'), coefficient, expression, base.group('dimension'))
    if '[' in expression or ']' in expression:
        raise UnitSyntaxError("Malformed dimension symbol", line)

    return Definition(match.group('name'), coefficient, expression)


def split_quantity(text: str) -> Tuple[float, str]:
    """Split ``"100 mile/hour"`` into ``(100.0, "mile/hour")``."""
    match = _QUANTITY_RE.fullmatch(text)
    if match is None:
        raise UnitSyntaxError("Quantity must start with a number", text)
    unit = match.group('unit').strip()
    if not unit:
        raise UnitSyntaxError("Quantity is missing a unit expression", text)
    return parse_number(match.group('value'), text), unit
