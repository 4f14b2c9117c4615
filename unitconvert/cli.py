"""
Command-line unit converter.

Usage:
    uc "100 mile/hour" "m/s"
    uc "0 degC" degF --value-only
    uc "3 smoot" m --define "1 smoot = 67 in"
"""

from typing import List, Optional
import argparse
import logging
import sys

from .core.errors import UnitConvertError
from .registry import UnitRegistry, get_global_registry


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='uc',
        description='A command line application for doing unit conversions.',
    )
    parser.add_argument('from_quantity', metavar='FROM_QUANTITY',
                        help='Quantity to convert, e.g. "100 mile/hour"')
    parser.add_argument('to_unit', metavar='TO_UNIT',
                        help='Unit to convert to, e.g. "m/s"')
    parser.add_argument('--value-only', action='store_true',
                        help='Only print the value, not the unit string')
    parser.add_argument('--definitions', metavar='FILE',
                        help='Use a private registry loaded from FILE instead of the default units')
    parser.add_argument('--define', metavar='LINE', action='append', default=[],
                        help='Extra unit definition, e.g. "1 smoot = 67 in" (repeatable)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log registry activity')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        if args.definitions:
            registry = UnitRegistry(definitions_file=args.definitions, si_prefixes=True)
        else:
            registry = get_global_registry()
        for line in args.define:
            registry.define_unit(line)

        quantity = registry.make_quantity(args.from_quantity).to(args.to_unit)
    except (UnitConvertError, OSError) as e:
        print(f"There was an error converting {args.from_quantity} to {args.to_unit}",
              file=sys.stderr)
        print(f"Error Message: {e}", file=sys.stderr)
        return 1

    if args.value_only:
        print(quantity.value())
    else:
        print(f"{quantity.value()} {args.to_unit}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
