from .unit_registry import UnitRegistry, UnitDefinition
from .global_registry import get_global_registry, DEFAULT_DEFINITIONS_FILE
from .prefixes import SI_PREFIXES

__all__ = [
    'UnitRegistry', 'UnitDefinition', 'get_global_registry',
    'DEFAULT_DEFINITIONS_FILE', 'SI_PREFIXES',
]
