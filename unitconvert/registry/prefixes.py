"""
SI prefixes, used to read symbols such as ``km`` or ``microsecond`` as
scaled versions of registered units.
"""

from typing import Iterator, Tuple

SI_PREFIXES = {
    'Y': 24, 'yotta': 24,
    'Z': 21, 'zetta': 21,
    'E': 18, 'exa': 18,
    'P': 15, 'peta': 15,
    'T': 12, 'tera': 12,
    'G': 9, 'giga': 9,
    'M': 6, 'mega': 6,
    'k': 3, 'kilo': 3,
    'h': 2, 'hecto': 2,
    'da': 1, 'deca': 1,
    'd': -1, 'deci': -1,
    'c': -2, 'centi': -2,
    'm': -3, 'milli': -3,
    'u': -6, 'micro': -6,
    'n': -9, 'nano': -9,
    'p': -12, 'pico': -12,
    'f': -15, 'femto': -15,
    'a': -18, 'atto': -18,
    'z': -21, 'zepto': -21,
    'y': -24, 'yocto': -24,
}

# longest first so 'da' is tried before 'd' and 'milli' before 'm'
_BY_LENGTH = sorted(SI_PREFIXES.items(), key=lambda item: -len(item[0]))


def split_prefix(symbol: str) -> Iterator[Tuple[int, str]]:
    """Yield every (power of ten, remainder) reading of ``symbol``."""
    for prefix, power in _BY_LENGTH:
        if len(symbol) > len(prefix) and symbol.startswith(prefix):
            yield power, symbol[len(prefix):]
