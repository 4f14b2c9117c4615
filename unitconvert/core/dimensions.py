"""
Dimension vectors: sparse maps from base-dimension symbol to integer exponent.
"""

from typing import Dict, Iterable, Mapping, Tuple, Union
from dataclasses import dataclass
import numbers


DimensionItems = Tuple[Tuple[str, int], ...]


def _canonicalize(powers: Union[Mapping[str, int], Iterable[Tuple[str, int]]]) -> DimensionItems:
    if isinstance(powers, Mapping):
        powers = powers.items()

    merged: Dict[str, int] = {}
    for symbol, exponent in powers:
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            if isinstance(exponent, numbers.Real) and float(exponent).is_integer():
                exponent = int(exponent)
            else:
                raise TypeError(
                    f"Dimension exponents must be integers, got {exponent!r} for '{symbol}'"
                )
        merged[symbol] = merged.get(symbol, 0) + int(exponent)

    return tuple(sorted((s, e) for s, e in merged.items() if e != 0))


@dataclass(frozen=True)
class Dimensions:
    """
    A point in the space of orthogonal base dimensions.

    The vector is stored canonically: zero exponents are dropped and the
    remaining entries are sorted by symbol, so two vectors are compatible
    exactly when they compare equal. Multiplying units adds exponents,
    dividing subtracts them and raising to a power scales them:

        >>> L, T = Dimensions.of(L=1), Dimensions.of(T=1)
        >>> L / T ** 2
        Dimensions(L=1, T=-2)
    """
    exponents: DimensionItems = ()

    def __post_init__(self):
        object.__setattr__(self, 'exponents', _canonicalize(self.exponents))

    @classmethod
    def of(cls, **powers: int) -> 'Dimensions':
        return cls(tuple(powers.items()))

    @classmethod
    def base(cls, symbol: str) -> 'Dimensions':
        """The unit vector along the dimension ``symbol``."""
        return cls(((symbol, 1),))

    def __mul__(self, other: 'Dimensions') -> 'Dimensions':
        if not isinstance(other, Dimensions):
            return NotImplemented
        if not other.exponents:
            return self
        if not self.exponents:
            return other
        return Dimensions(self.exponents + other.exponents)

    def __truediv__(self, other: 'Dimensions') -> 'Dimensions':
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self * other.inverse()

    def __pow__(self, power: int) -> 'Dimensions':
        if isinstance(power, bool) or not isinstance(power, numbers.Integral):
            raise TypeError(f"Dimensions can only be raised to integer powers, got {power!r}")
        return Dimensions(tuple((s, e * power) for s, e in self.exponents))

    def inverse(self) -> 'Dimensions':
        return Dimensions(tuple((s, -e) for s, e in self.exponents))

    def is_dimensionless(self) -> bool:
        return not self.exponents

    def as_dict(self) -> Dict[str, int]:
        return dict(self.exponents)

    def __getitem__(self, symbol: str) -> int:
        return dict(self.exponents).get(symbol, 0)

    def __iter__(self):
        return iter(self.exponents)

    def __repr__(self) -> str:
        inner = ", ".join(f"{s}={e}" for s, e in self.exponents)
        return f"Dimensions({inner})"

    def __str__(self) -> str:
        if not self.exponents:
            return "[1]"
        parts = [s if e == 1 else f"{s}^{e}" for s, e in self.exponents]
        return "[" + " ".join(parts) + "]"


DIMENSIONLESS = Dimensions()
