"""
String-in, string-out helpers that work against the global unit registry.
"""

from .core.errors import NumericError, UnitSyntaxError
from .registry import get_global_registry


def get_magnitude_in_unit(quantity: str, new_unit: str) -> float:
    """
    Convert a quantity literal and return only the new magnitude.

    >>> round(get_magnitude_in_unit("100 mph", "m/s"), 6)
    44.704
    """
    registry = get_global_registry()
    return registry.make_quantity(quantity).to(new_unit).value()


def convert_string(quantity: str, new_unit: str) -> str:
    """Convert a quantity literal and format the result as ``"<value> <unit>"``."""
    return f"{get_magnitude_in_unit(quantity, new_unit)} {new_unit.strip()}"


def have_same_dimensions(first: str, second: str) -> bool:
    """Check whether two unit expressions (or quantity literals) are convertible."""
    registry = get_global_registry()
    return _dimensions_of(registry, first) == _dimensions_of(registry, second)


def add_unit_definition(definition: str) -> bool:
    """Add a definition line such as ``"1 smoot = 67 in"`` to the global registry."""
    get_global_registry().define_unit(definition)
    return True


def _dimensions_of(registry, text: str):
    try:
        return registry.make_unit(text).dimensions
    except (UnitSyntaxError, NumericError):
        # literals such as "-40 degC" or "0 m" are not valid unit expressions
        return registry.make_quantity(text).dimensions
