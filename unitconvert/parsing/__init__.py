from .expression import tokenize, parse_expression, resolve
from .definitions import Definition, parse_definition, split_quantity

__all__ = [
    'tokenize', 'parse_expression', 'resolve',
    'Definition', 'parse_definition', 'split_quantity',
]
