"""
Quantities: immutable (magnitude, unit) values bound to the registry that
produced them.
"""

from typing import Optional, Union
import math
import numbers

import numpy as np

from .dimensions import Dimensions
from .errors import DimensionMismatchError, NumericError, RegistryMismatchError
from .units import Unit


Magnitude = Union[float, np.ndarray]


def _as_magnitude(value) -> Magnitude:
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, (np.ndarray, list, tuple)):
        # private read-only copy; callers' arrays and value() results cannot alter it
        array = np.array(value, dtype=float)
        array.setflags(write=False)
        return array
    raise TypeError(f"Quantity magnitude must be a real number or array, got {type(value).__name__}")


def _rescale(magnitude: Magnitude, source: Unit, target: Unit) -> Magnitude:
    factor = source.scale / target.scale
    if source.offset is None and target.offset is None:
        if isinstance(magnitude, float):
            value = magnitude * factor
            if not math.isfinite(value) and math.isfinite(magnitude):
                raise NumericError(f"Conversion of {magnitude!r} overflowed")
            return value
        with np.errstate(over='ignore', invalid='ignore'):
            value = magnitude * factor
    else:
        with np.errstate(over='ignore', invalid='ignore'):
            value = (magnitude - (source.offset or 0.0)) * factor + (target.offset or 0.0)
        if isinstance(magnitude, float):
            if not math.isfinite(value) and math.isfinite(magnitude):
                raise NumericError(f"Conversion of {magnitude!r} overflowed")
            return float(value)

    if np.any(np.isfinite(magnitude) & ~np.isfinite(value)):
        raise NumericError("Conversion overflowed for some elements")
    return value


class Quantity:
    """
    A physical quantity with a magnitude and a unit.

    Quantities are immutable; :meth:`to` returns a new instance. A quantity
    created by a :class:`~unitconvert.registry.UnitRegistry` remembers that
    registry so it can resolve string targets such as ``"mile/hour"``.
    Magnitudes are floats or numpy arrays, so a whole array is converted
    with one call.
    """

    __slots__ = ('_magnitude', '_unit', '_registry', '_label')

    # make ndarray * Quantity defer to Quantity.__rmul__
    __array_ufunc__ = None

    def __init__(self, value: Union[float, np.ndarray], unit: Unit,
                 registry=None, label: Optional[str] = None):
        self._magnitude = _as_magnitude(value)
        self._unit = unit
        self._registry = registry
        self._label = label

    def value(self) -> Magnitude:
        """Return the magnitude in the unit this quantity is expressed in.

        Array magnitudes are returned read-only.
        """
        return self._magnitude

    @property
    def magnitude(self) -> Magnitude:
        return self._magnitude

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def dimensions(self) -> Dimensions:
        return self._unit.dimensions

    @property
    def registry(self):
        return self._registry

    @property
    def label(self) -> Optional[str]:
        """The unit expression this quantity was created with or converted to."""
        return self._label

    def _resolve_registry(self, registry):
        if registry is None:
            return self._registry
        if self._registry is not None and registry is not self._registry:
            raise RegistryMismatchError(
                "Quantity belongs to a different unit registry; "
                "convert it with the registry that created it"
            )
        return registry

    def _target_unit(self, target: Union[str, Unit], registry):
        if isinstance(target, Unit):
            return target, None
        if isinstance(target, str):
            if registry is None:
                raise RegistryMismatchError(
                    f"Cannot convert to '{target}': quantity is not bound to a unit registry"
                )
            return registry.make_unit(target), target.strip()
        raise TypeError(f"Conversion target must be a unit expression or Unit, got {type(target).__name__}")

    def to(self, target: Union[str, Unit], registry=None) -> 'Quantity':
        """
        Convert to another unit with the same dimensions.

        Parameters
        ----------
        target : str or Unit
            Unit expression (parsed by the quantity's registry) or a Unit
        registry : UnitRegistry, optional
            Must be the registry that created this quantity if given

        Returns
        -------
        Quantity
            New quantity with the target unit
        """
        registry = self._resolve_registry(registry)
        unit, label = self._target_unit(target, registry)
        if unit.dimensions != self._unit.dimensions:
            raise DimensionMismatchError(self._unit.dimensions, unit.dimensions)
        return Quantity(_rescale(self._magnitude, self._unit, unit), unit, self._registry, label)

    def to_base_units(self) -> 'Quantity':
        """Express the quantity in coherent base units (scale 1, no offset)."""
        base = self._unit.base()
        return Quantity(_rescale(self._magnitude, self._unit, base), base, self._registry)

    def is_compatible(self, other: Union['Quantity', Unit, str]) -> bool:
        """Check whether this quantity can be converted to ``other``."""
        if isinstance(other, Quantity):
            return other.dimensions == self.dimensions
        unit, _ = self._target_unit(other, self._registry)
        return unit.dimensions == self.dimensions

    def _combined_registry(self, other: 'Quantity'):
        if (self._registry is not None and other._registry is not None
                and self._registry is not other._registry):
            raise RegistryMismatchError("Cannot combine quantities from different unit registries")
        return self._registry if self._registry is not None else other._registry

    def _same_unit_operand(self, other, operation: str) -> Magnitude:
        if not isinstance(other, Quantity):
            raise TypeError(f"Can only {operation} Quantity and Quantity")
        self._combined_registry(other)
        if other.dimensions != self.dimensions:
            raise DimensionMismatchError(self.dimensions, other.dimensions, operation)
        return _rescale(other._magnitude, other._unit, self._unit)

    def __add__(self, other: 'Quantity') -> 'Quantity':
        converted = self._same_unit_operand(other, "add")
        return Quantity(self._magnitude + converted, self._unit,
                        self._combined_registry(other), self._label)

    def __sub__(self, other: 'Quantity') -> 'Quantity':
        converted = self._same_unit_operand(other, "subtract")
        return Quantity(self._magnitude - converted, self._unit,
                        self._combined_registry(other), self._label)

    def __mul__(self, other: Union['Quantity', float, np.ndarray]) -> 'Quantity':
        if isinstance(other, (numbers.Real, np.ndarray)):
            return Quantity(self._magnitude * other, self._unit, self._registry, self._label)
        if isinstance(other, Quantity):
            return Quantity(self._magnitude * other._magnitude, self._unit * other._unit,
                            self._combined_registry(other))
        return NotImplemented

    def __rmul__(self, other: Union[float, np.ndarray]) -> 'Quantity':
        if isinstance(other, (numbers.Real, np.ndarray)):
            return Quantity(other * self._magnitude, self._unit, self._registry, self._label)
        return NotImplemented

    def __truediv__(self, other: Union['Quantity', float, np.ndarray]) -> 'Quantity':
        if isinstance(other, (numbers.Real, np.ndarray)):
            return Quantity(self._magnitude / other, self._unit, self._registry, self._label)
        if isinstance(other, Quantity):
            return Quantity(self._magnitude / other._magnitude, self._unit / other._unit,
                            self._combined_registry(other))
        return NotImplemented

    def __rtruediv__(self, other: Union[float, np.ndarray]) -> 'Quantity':
        if isinstance(other, (numbers.Real, np.ndarray)):
            return Quantity(other / self._magnitude, self._unit ** -1, self._registry)
        return NotImplemented

    def __pow__(self, power: int) -> 'Quantity':
        if isinstance(power, bool) or not isinstance(power, numbers.Integral):
            raise TypeError(f"Quantities can only be raised to integer powers, got {power!r}")
        return Quantity(self._magnitude ** power, self._unit ** power, self._registry)

    def __neg__(self) -> 'Quantity':
        return Quantity(-self._magnitude, self._unit, self._registry, self._label)

    def __repr__(self) -> str:
        unit = repr(self._label) if self._label is not None else repr(self._unit)
        return f"Quantity({self._magnitude!r}, {unit})"

    def __str__(self) -> str:
        if self._label is None:
            return repr(self)
        return f"{self._magnitude} {self._label}"
