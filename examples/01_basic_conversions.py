"""
Example: Runtime Unit Conversions
=================================

This example builds a small registry from definition lines, converts
quantities between units, and shows the bundled global registry with
temperatures, SI prefixes and array magnitudes.
"""

import numpy as np
from unitconvert import UnitRegistry, get_global_registry, UnitConvertError

print("Unit Conversion Examples")
print("=" * 50)

# Example 1: A registry built from scratch
print("\nExample 1: Defining Units")
print("-" * 40)

ureg = UnitRegistry()
ureg.define_base_unit("m", "L")
ureg.define_base_unit("g", "M")
ureg.define_base_unit("s", "T")

for line in ["cm = 0.01 m", "1 in = 2.54 cm", "1 ft = 12 in", "1 mile = 5280 ft",
             "1 min = 60 s", "1 hour = 60 min", "1 mph = 1 mile/hour"]:
    ureg.define_unit(line)

print(f"Registry: {ureg}")
print(f"Symbols: {', '.join(ureg.symbols())}")

speed = ureg.make_quantity("100 mph")
print(f"{speed} = {speed.to('m/s').value():.3f} m/s")
print(f"Dimensions of mph: {speed.dimensions}")

# Example 2: Definitions must refer to existing units
print("\n\nExample 2: Errors")
print("-" * 40)

for line in ["furlong = 220 yd", "cm = 10 mm", "x = m^1.5"]:
    try:
        ureg.define_unit(line)
    except UnitConvertError as e:
        print(f"{line!r}: {type(e).__name__}: {e}")

try:
    speed.to("s")
except UnitConvertError as e:
    print(f"mph -> s: {e}")

# Example 3: The global registry
print("\n\nExample 3: Default Units")
print("-" * 40)

units = get_global_registry()
print(f"Loaded {len(units)} units")

for quantity, target in [("1 hp", "W"), ("1 atm", "psi"), ("2 pound", "carat"),
                         ("3 GHz", "1/s"), ("250 mL", "floz")]:
    value = units.make_quantity(quantity).to(target).value()
    print(f"  {quantity:>8} = {value:.6g} {target}")

# Example 4: Temperatures and arrays
print("\n\nExample 4: Temperature Arrays")
print("-" * 40)

celsius = units.make_quantity(np.array([-40.0, 0.0, 37.0, 100.0]), "degC")
print(f"degC: {celsius.value()}")
print(f"degF: {celsius.to('degF').value()}")
print(f"K:    {celsius.to('K').value()}")
