"""
The unit registry: an ordered symbol table built up one definition at a time.
"""

from typing import Dict, Iterator, List, Optional, Union
from dataclasses import dataclass
from pathlib import Path
import logging
import warnings

from ..core.dimensions import Dimensions
from ..core.errors import (
    DefinitionLoadError,
    DuplicateSymbolError,
    UnitConvertError,
    UnitSyntaxError,
    UnitWarning,
    UnknownSymbolError,
)
from ..core.quantity import Quantity
from ..core.units import Unit
from ..parsing.definitions import (
    DIMENSIONLESS_SYMBOL,
    is_valid_dimension_symbol,
    is_valid_symbol,
    parse_definition,
    split_quantity,
)
from ..parsing.expression import parse_expression, parse_number
from .prefixes import split_prefix


logger = logging.getLogger(__name__)

# parsed expressions kept per registry before the cache is flushed
_CACHE_SIZE = 4096


@dataclass(frozen=True)
class UnitDefinition:
    """A registered symbol and the unit it resolved to."""
    symbol: str
    unit: Unit
    expression: str
    coefficient: float = 1.0
    is_base: bool = False

    @property
    def scale(self) -> float:
        return self.unit.scale

    @property
    def dimensions(self) -> Dimensions:
        return self.unit.dimensions

    @property
    def offset(self) -> Optional[float]:
        return self.unit.offset


class UnitRegistry:
    """
    Symbol table of named units.

    Units are added with :meth:`define_base_unit`, :meth:`define_unit` or
    :meth:`load_definitions`. A definition may only refer to symbols that
    are already registered, and symbols can never be redefined or removed,
    so the table cannot contain cycles.

    Parameters
    ----------
    definitions : str, optional
        Definitions text loaded at construction
    definitions_file : str or Path, optional
        File of definitions loaded at construction (before ``definitions``)
    si_prefixes : bool
        Resolve unknown symbols such as ``km`` as SI-prefixed registered units

    Examples
    --------
    >>> ureg = UnitRegistry()
    >>> ureg.define_unit("m = [L]")
    >>> ureg.define_unit("s = [T]")
    >>> ureg.define_unit("1 km = 1000 m")
    >>> ureg.make_quantity("36 km/s").to("m/s").value()
    36000.0
    """

    def __init__(self, definitions: Optional[str] = None,
                 definitions_file: Optional[Union[str, Path]] = None,
                 si_prefixes: bool = False):
        self.si_prefixes = si_prefixes
        self._units: Dict[str, UnitDefinition] = {}
        self._base_dimensions: Dict[str, str] = {}
        self._cache: Dict[str, Unit] = {}

        if definitions_file is not None:
            self.load_definitions_file(definitions_file)
        if definitions is not None:
            self.load_definitions(definitions)

    def _check_new(self, symbol: str):
        if not is_valid_symbol(symbol):
            raise UnitSyntaxError(f"Invalid unit symbol '{symbol}'")
        if symbol in self._units:
            raise DuplicateSymbolError(symbol)

    def _insert(self, definition: UnitDefinition):
        self._units[definition.symbol] = definition
        # prefixed readings resolved before this definition may now be shadowed
        self._cache.clear()
        logger.debug("Defined unit %s = %s", definition.symbol, definition.expression)

    def define_base_unit(self, symbol: str, dimension_symbol: str):
        """
        Register ``symbol`` as the coherent unit of the dimension ``dimension_symbol``.

        The first unit declared for a dimension introduces it. Later units for
        the same dimension become aliases with scale 1. The dimension symbol
        ``"1"`` declares a dimensionless unit.
        """
        self._check_new(symbol)
        if not is_valid_dimension_symbol(dimension_symbol):
            raise UnitSyntaxError(f"Invalid dimension symbol '{dimension_symbol}'")

        expression = f"[{dimension_symbol}]"
        if dimension_symbol == DIMENSIONLESS_SYMBOL:
            self._insert(UnitDefinition(symbol, Unit(), expression))
            return

        unit = Unit(1.0, Dimensions.base(dimension_symbol))
        existing = self._base_dimensions.get(dimension_symbol)
        if existing is not None:
            warnings.warn(
                f"Dimension [{dimension_symbol}] already has base unit '{existing}'; "
                f"'{symbol}' is registered as an alias",
                UnitWarning,
                stacklevel=2,
            )
            self._insert(UnitDefinition(symbol, unit, expression))
            return

        self._base_dimensions[dimension_symbol] = symbol
        self._insert(UnitDefinition(symbol, unit, expression, is_base=True))

    def define_unit(self, definition: str):
        """
        Add a unit from a definition line.

        Accepts ``[coefficient] name = expression`` (``"1 mile = 5280 ft"``,
        ``"100 cm = m"``, ``"degC = K - 273.15"``) and the base-unit form
        ``name = [dimension]``. The registry is unchanged if the line fails
        to parse or resolve.
        """
        parsed = parse_definition(definition)
        if parsed.is_base:
            self.define_base_unit(parsed.name, parsed.dimension)
            return

        self._check_new(parsed.name)
        unit = self.make_unit(parsed.expression)
        if parsed.coefficient != 1.0:
            unit = unit / parsed.coefficient
        self._insert(UnitDefinition(parsed.name, unit, parsed.expression, parsed.coefficient))

    def load_definitions(self, text: str) -> int:
        """
        Apply :meth:`define_unit` to every line of ``text``.

        Blank lines and lines starting with ``#`` are skipped. Loading stops
        at the first failing line with a DefinitionLoadError carrying the line
        number; definitions before it stay registered.

        Returns
        -------
        int
            Number of definitions added
        """
        count = 0
        for line_number, line in enumerate(text.splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith('#'):
                continue
            try:
                self.define_unit(stripped)
            except UnitConvertError as e:
                raise DefinitionLoadError(line_number, line, e) from e
            count += 1
        logger.debug("Loaded %d unit definitions", count)
        return count

    def load_definitions_file(self, path: Union[str, Path]) -> int:
        """Load a definitions file; see :meth:`load_definitions`."""
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
        count = self.load_definitions(text)
        logger.debug("Loaded %d unit definitions from %s", count, path)
        return count

    def lookup(self, symbol: str) -> Optional[UnitDefinition]:
        """Return the definition registered under ``symbol``, if any."""
        return self._units.get(symbol)

    def get_unit(self, symbol: str) -> Unit:
        """Return the unit for a single symbol, trying SI prefixes if enabled."""
        definition = self._units.get(symbol)
        if definition is not None:
            return definition.unit
        if self.si_prefixes:
            for power, remainder in split_prefix(symbol):
                definition = self._units.get(remainder)
                if definition is not None:
                    if power > 0:
                        return definition.unit * 10 ** power
                    return definition.unit / 10 ** -power
        raise UnknownSymbolError(symbol)

    def make_unit(self, expression: str) -> Unit:
        """Parse a unit expression such as ``"kg m^2 / s^2"`` into a Unit."""
        unit = self._cache.get(expression)
        if unit is None:
            unit = parse_expression(expression, self.get_unit)
            if len(self._cache) >= _CACHE_SIZE:
                self._cache.clear()
            self._cache[expression] = unit
        return unit

    def make_quantity(self, value: Union[str, float], unit: Optional[str] = None) -> Quantity:
        """
        Create a quantity bound to this registry.

        Parameters
        ----------
        value : str, float or array
            Either a full literal such as ``"100 mile/hour"`` (with ``unit``
            omitted) or the magnitude
        unit : str, optional
            Unit expression for ``value``

        Returns
        -------
        Quantity
        """
        if unit is None:
            if not isinstance(value, str):
                raise TypeError("make_quantity needs a unit expression unless given a quantity string")
            value, unit = split_quantity(value)
        elif isinstance(value, str):
            value = parse_number(value.strip())
        unit = unit.strip()
        return Quantity(value, self.make_unit(unit), self, unit)

    def convert(self, quantity: Quantity, target: Union[str, Unit]) -> Quantity:
        """Convert ``quantity``, which must have been created by this registry."""
        return quantity.to(target, registry=self)

    @property
    def base_dimensions(self) -> List[str]:
        """Dimension symbols introduced by base units, in definition order."""
        return list(self._base_dimensions)

    def symbols(self) -> List[str]:
        """Registered symbols in definition order."""
        return list(self._units)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"<UnitRegistry: {len(self._units)} units>"
