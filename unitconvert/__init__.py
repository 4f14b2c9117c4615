"""
unitconvert - Runtime Physical Unit Conversions
===============================================

Build a registry of units from plain text definitions and convert
quantities between any units that share the same dimensions.

Main Features:
- Unit algebra parser: products, quotients, integer powers, coefficients
- Incremental registry with forward-reference and redefinition checks
- Offset units (degC, degF) and optional SI prefix resolution
- Array-valued quantities through numpy
- A lazily built global registry with a large default unit set

Example:
    >>> from unitconvert import UnitRegistry
    >>> ureg = UnitRegistry()
    >>> ureg.define_unit("m = [L]")
    >>> ureg.define_unit("s = [T]")
    >>> ureg.define_unit("km = 1000 m")
    >>> ureg.make_quantity("2.5 km/s").to("m/s").value()
    2500.0
"""

__version__ = "0.1.0"
__author__ = "unitconvert Development Team"

from .core import (
    Dimensions,
    Unit,
    Quantity,
    UnitConvertError,
    UnitWarning,
    UnitSyntaxError,
    UnknownSymbolError,
    DuplicateSymbolError,
    DimensionMismatchError,
    NumericError,
    OffsetUnitError,
    RegistryMismatchError,
    DefinitionLoadError,
)
from .parsing import resolve
from .registry import UnitRegistry, UnitDefinition, get_global_registry
from .functions import (
    get_magnitude_in_unit,
    convert_string,
    have_same_dimensions,
    add_unit_definition,
)

__all__ = [
    'Dimensions',
    'Unit',
    'Quantity',
    'UnitRegistry',
    'UnitDefinition',
    'get_global_registry',
    'resolve',
    'get_magnitude_in_unit',
    'convert_string',
    'have_same_dimensions',
    'add_unit_definition',
    'UnitConvertError',
    'UnitWarning',
    'UnitSyntaxError',
    'UnknownSymbolError',
    'DuplicateSymbolError',
    'DimensionMismatchError',
    'NumericError',
    'OffsetUnitError',
    'RegistryMismatchError',
    'DefinitionLoadError',
]
