from .dimensions import Dimensions, DIMENSIONLESS
from .units import Unit, DIMENSIONLESS_UNIT
from .quantity import Quantity
from .errors import (
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

__all__ = [
    'Dimensions', 'DIMENSIONLESS', 'Unit', 'DIMENSIONLESS_UNIT', 'Quantity',
    'UnitConvertError', 'UnitWarning', 'UnitSyntaxError', 'UnknownSymbolError',
    'DuplicateSymbolError', 'DimensionMismatchError', 'NumericError',
    'OffsetUnitError', 'RegistryMismatchError', 'DefinitionLoadError',
]
