"""
Units: a scale factor relative to the coherent base units, a dimension
vector and an optional additive offset.
"""

from typing import Optional, Union
import math
import numbers

from .dimensions import Dimensions, DIMENSIONLESS
from .errors import NumericError, OffsetUnitError


def _checked_scale(scale: float) -> float:
    if not math.isfinite(scale) or scale == 0.0:
        raise NumericError(f"Unit scale factor {scale!r} is not representable")
    return scale


class Unit:
    """
    A physical unit.

    ``scale`` is the size of the unit compared to the unit built from base
    units only, so a magnitude ``x`` in this unit equals ``x * scale`` in
    base units. ``offset`` is expressed in this unit's own scale and is the
    value that must be subtracted to make the unit absolute (degC has an
    offset of -273.15 relative to K).
    """

    __slots__ = ('scale', 'dimensions', 'offset')

    def __init__(self, scale: float = 1.0, dimensions: Dimensions = DIMENSIONLESS,
                 offset: Optional[float] = None):
        object.__setattr__(self, 'scale', float(scale))
        object.__setattr__(self, 'dimensions', dimensions)
        object.__setattr__(self, 'offset', None if offset is None else float(offset))

    def __setattr__(self, name, value):
        raise AttributeError(f"Unit is immutable; cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Unit is immutable; cannot delete '{name}'")

    @property
    def is_offset(self) -> bool:
        return self.offset is not None

    def _require_plain(self, other: 'Unit', operation: str):
        if self.is_offset or other.is_offset:
            raise OffsetUnitError(
                f"Cannot {operation} offset units; use a delta unit instead"
            )

    def __mul__(self, other: Union['Unit', float]) -> 'Unit':
        if isinstance(other, numbers.Real):
            return self.scaled(other)
        if not isinstance(other, Unit):
            return NotImplemented
        self._require_plain(other, "multiply")
        try:
            scale = self.scale * other.scale
        except OverflowError as e:
            raise NumericError(str(e)) from e
        return Unit(_checked_scale(scale), self.dimensions * other.dimensions)

    def __rmul__(self, other: float) -> 'Unit':
        if isinstance(other, numbers.Real):
            return self.scaled(other)
        return NotImplemented

    def __truediv__(self, other: Union['Unit', float]) -> 'Unit':
        if isinstance(other, numbers.Real):
            if other == 0:
                raise NumericError("Cannot divide a unit by zero")
            offset = None if self.offset is None else self.offset * other
            return Unit(_checked_scale(self.scale / other), self.dimensions, offset)
        if not isinstance(other, Unit):
            return NotImplemented
        self._require_plain(other, "divide")
        return Unit(_checked_scale(self.scale / other.scale),
                    self.dimensions / other.dimensions)

    def __pow__(self, power: int) -> 'Unit':
        if power == 1:
            return self
        if self.is_offset:
            raise OffsetUnitError("Cannot raise offset units to a power; use a delta unit instead")
        try:
            scale = self.scale ** power
        except (OverflowError, ZeroDivisionError) as e:
            raise NumericError(f"Unit scale {self.scale!r} raised to {power}: {e}") from e
        return Unit(_checked_scale(scale), self.dimensions ** power)

    def scaled(self, factor: float) -> 'Unit':
        """Return this unit multiplied by a pure number.

        For offset units the offset is rescaled as well, since it is
        expressed in the unit's own scale.
        """
        scale = _checked_scale(self.scale * factor)
        offset = None if self.offset is None else self.offset / factor
        return Unit(scale, self.dimensions, offset)

    def shifted(self, offset: float) -> 'Unit':
        """Return a unit with the same scale and ``offset`` added to its offset."""
        return Unit(self.scale, self.dimensions, (self.offset or 0.0) + offset)

    def base(self) -> 'Unit':
        """The coherent unit (scale 1, no offset) with the same dimensions."""
        return Unit(1.0, self.dimensions)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return (self.scale == other.scale and self.dimensions == other.dimensions
                and self.offset == other.offset)

    def __hash__(self):
        return hash((self.scale, self.dimensions, self.offset))

    def __repr__(self) -> str:
        if self.is_offset:
            return f"Unit({self.scale!r}, {self.dimensions}, offset={self.offset!r})"
        return f"Unit({self.scale!r}, {self.dimensions})"


DIMENSIONLESS_UNIT = Unit()
