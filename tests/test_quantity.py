import pytest
import numpy as np
from unitconvert import UnitRegistry, Quantity, Unit, Dimensions
from unitconvert.core.errors import (
    DimensionMismatchError,
    NumericError,
    OffsetUnitError,
    RegistryMismatchError,
)


DEFINITIONS = """
cm = [L]
g = [M]
s = [T]
K = [THETA]
m = 100 cm
km = 1000 m
kg = 1000 g
min = 60 s
hour = 60 min
N = kg m / s^2
J = N m
erg = g cm^2 / s^2
R = 5 K / 9
degC = K - 273.15
degF = R - 459.67
huge = 1e300 m
"""


class TestQuantity:

    def setup_method(self):
        """Set up a registry with cgs base units"""
        self.ureg = UnitRegistry(definitions=DEFINITIONS)
        self.Q_ = self.ureg.make_quantity

    def test_conversion_returns_new_quantity(self):
        q = self.Q_("1.5 km")
        converted = q.to("m")

        assert converted.value() == pytest.approx(1500)
        assert converted.label == "m"
        assert q.value() == 1.5
        assert q.label == "km"

    def test_conversion_to_same_unit(self):
        assert self.Q_("7 m").to("m").value() == 7.0

    def test_conversion_to_unit_object(self):
        target = self.ureg.make_unit("km")
        converted = self.Q_("250 m").to(target)

        assert converted.value() == pytest.approx(0.25)
        assert converted.unit == target
        assert converted.label is None

    def test_round_trip(self):
        """Converting there and back gives the original magnitude"""
        q = self.Q_("3.7 km/hour")
        back = q.to("cm/s").to("km/hour")
        assert back.value() == pytest.approx(3.7, rel=1e-12)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            self.Q_("1 J").to("N")

    def test_to_base_units(self):
        """1 J in cgs base units is 1e7 erg"""
        base = self.Q_("1 J").to_base_units()

        assert base.value() == pytest.approx(1e7)
        assert base.unit.scale == 1.0
        assert base.dimensions == Dimensions.of(L=2, M=1, T=-2)
        assert self.Q_("1 J").to("erg").value() == pytest.approx(1e7)

    def test_is_compatible(self):
        q = self.Q_("1 J")

        assert q.is_compatible("erg")
        assert q.is_compatible(self.Q_("3 N m"))
        assert not q.is_compatible("N")
        assert not q.is_compatible(self.ureg.make_unit("kg"))

    def test_overflow_is_reported(self):
        with pytest.raises(NumericError):
            self.Q_("1e300 huge").to("cm")

    def test_unbound_quantity(self):
        q = Quantity(2.0, Unit(100.0, Dimensions.of(L=1)))

        assert q.to(Unit(1.0, Dimensions.of(L=1))).value() == pytest.approx(200)
        with pytest.raises(RegistryMismatchError):
            q.to("cm")

    def test_invalid_magnitude(self):
        with pytest.raises(TypeError):
            Quantity("12", Unit())

    def test_units_are_immutable(self):
        """Units shared by the registry cannot be modified"""
        unit = self.ureg.lookup("m").unit

        with pytest.raises(AttributeError):
            unit.scale = 5.0
        with pytest.raises(AttributeError):
            unit.offset = 1.0
        with pytest.raises(AttributeError):
            del unit.dimensions
        assert self.Q_("1 m").to("cm").value() == pytest.approx(100)

    def test_repr_and_str(self):
        q = self.Q_("3 m")

        assert repr(q) == "Quantity(3.0, 'm')"
        assert str(q) == "3.0 m"


class TestTemperature:

    def setup_method(self):
        self.ureg = UnitRegistry(definitions=DEFINITIONS)
        self.Q_ = self.ureg.make_quantity

    @pytest.mark.parametrize("value, source, target, expected", [
        (0, "degC", "degF", 32.0),
        (100, "degC", "degF", 212.0),
        (-40, "degC", "degF", -40.0),
        (100, "degC", "K", 373.15),
        (0, "K", "degC", -273.15),
        (32, "degF", "degC", 0.0),
        (491.67, "R", "degF", 32.0),
    ])
    def test_absolute_temperatures(self, value, source, target, expected):
        result = self.Q_(value, source).to(target).value()
        assert result == pytest.approx(expected, abs=1e-9)

    def test_offset_units_cannot_be_combined(self):
        with pytest.raises(OffsetUnitError):
            self.ureg.make_unit("degC / s")
        with pytest.raises(OffsetUnitError):
            self.ureg.make_unit("degC^2")

    def test_scaled_offset_unit(self):
        """A coefficient on an offset unit rescales its offset"""
        self.ureg.define_unit("2 half_degC = degC")
        assert self.Q_("0 half_degC").to("K").value() == pytest.approx(273.15)
        assert self.Q_("200 half_degC").to("degC").value() == pytest.approx(100)


class TestArrays:

    def setup_method(self):
        self.ureg = UnitRegistry(definitions=DEFINITIONS)

    def test_array_conversion(self):
        distances = self.ureg.make_quantity(np.array([1.0, 2.5, 10.0]), "km")
        converted = distances.to("m")

        np.testing.assert_allclose(converted.value(), [1000.0, 2500.0, 10000.0])
        assert isinstance(converted.value(), np.ndarray)

    def test_array_is_copied_on_construction(self):
        """Changing the source array afterwards does not change the quantity"""
        data = np.array([1.0, 2.0])
        q = self.ureg.make_quantity(data, "m")
        data[0] = 99.0

        assert q.value()[0] == 1.0
        np.testing.assert_allclose(q.to("cm").value(), [100.0, 200.0])

    def test_array_magnitudes_are_read_only(self):
        q = self.ureg.make_quantity(np.array([1.0, 2.0]), "m")

        for magnitude in [q.value(), q.to("cm").value(), (q * 2).value(), (q + q).value()]:
            with pytest.raises(ValueError):
                magnitude[0] = 42.0
        assert q.to("cm").value()[0] == pytest.approx(100.0)

    def test_array_temperatures(self):
        temps = self.ureg.make_quantity([-40, 0, 100], "degC").to("degF")
        np.testing.assert_allclose(temps.value(), [-40.0, 32.0, 212.0])

    def test_array_overflow(self):
        q = self.ureg.make_quantity(np.array([1.0, 1e300]), "huge")
        with pytest.raises(NumericError):
            q.to("cm")

    def test_array_with_nan_is_passed_through(self):
        converted = self.ureg.make_quantity([np.nan, 1.0], "m").to("cm")

        assert np.isnan(converted.value()[0])
        assert converted.value()[1] == pytest.approx(100)

    def test_ndarray_times_quantity(self):
        q = np.array([1.0, 2.0]) * self.ureg.make_quantity(3, "m")

        assert isinstance(q, Quantity)
        np.testing.assert_allclose(q.to("cm").value(), [300.0, 600.0])


class TestArithmetic:

    def setup_method(self):
        self.ureg = UnitRegistry(definitions=DEFINITIONS)
        self.Q_ = self.ureg.make_quantity

    def test_add_converts_to_left_unit(self):
        total = self.Q_("1 km") + self.Q_("250 m")

        assert total.value() == pytest.approx(1.25)
        assert total.label == "km"

    def test_subtract(self):
        assert (self.Q_("1 hour") - self.Q_("30 min")).to("min").value() == pytest.approx(30)

    def test_add_mismatched_dimensions(self):
        with pytest.raises(DimensionMismatchError):
            self.Q_("1 m") + self.Q_("1 s")
        with pytest.raises(TypeError):
            self.Q_("1 m") + 1

    def test_quantities_from_different_registries(self):
        other = UnitRegistry(definitions=DEFINITIONS)
        with pytest.raises(RegistryMismatchError):
            self.Q_("1 m") + other.make_quantity("1 m")

    def test_multiply_and_divide(self):
        force = self.Q_("2 kg") * self.Q_("3 m") / self.Q_("1 s") ** 2

        assert force.dimensions == self.ureg.make_unit("N").dimensions
        assert force.to("N").value() == pytest.approx(6)

    def test_scalar_operations(self):
        q = self.Q_("4 m")

        assert (q * 2).value() == 8.0
        assert (2 * q).value() == 8.0
        assert (q / 2).value() == 2.0
        assert (-q).value() == -4.0
        inverse = 1 / q
        assert inverse.dimensions == Dimensions.of(L=-1)
        assert inverse.to("1 / cm").value() == pytest.approx(0.0025)

    def test_non_integer_power(self):
        with pytest.raises(TypeError):
            self.Q_("4 m") ** 0.5
