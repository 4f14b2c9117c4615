import pytest
from unitconvert.core.dimensions import Dimensions, DIMENSIONLESS


class TestDimensions:

    def test_dimensions_equality(self):
        dim1 = Dimensions.of(L=1, M=1, T=-2)
        dim2 = Dimensions.of(T=-2, M=1, L=1)
        dim3 = Dimensions.of(L=2, M=1, T=-2)

        assert dim1 == dim2
        assert dim1 != dim3

    def test_zero_exponents_are_dropped(self):
        assert Dimensions.of(L=1, T=0) == Dimensions.of(L=1)
        assert Dimensions({'L': 1, 'T': 0}).exponents == (('L', 1),)

    def test_dimensions_multiplication(self):
        """Multiplying units adds exponents"""
        dim1 = Dimensions.of(L=1, T=-1)
        dim2 = Dimensions.of(L=1, T=-1)

        assert dim1 * dim2 == Dimensions.of(L=2, T=-2)

    def test_dimensions_division(self):
        """Dividing units subtracts exponents"""
        dim1 = Dimensions.of(L=2, T=-2)
        dim2 = Dimensions.of(L=1, T=-1)

        assert dim1 / dim2 == Dimensions.of(L=1, T=-1)

    def test_dimensions_power(self):
        dim = Dimensions.of(L=1, T=-1)

        assert dim ** 2 == Dimensions.of(L=2, T=-2)
        assert dim ** -1 == Dimensions.of(L=-1, T=1)
        assert dim ** 0 == DIMENSIONLESS

    def test_inverse(self):
        dim = Dimensions.of(M=1, L=2, T=-3)
        assert dim.inverse() == Dimensions.of(M=-1, L=-2, T=3)
        assert (dim * dim.inverse()).is_dimensionless()

    def test_dimensionless(self):
        dim1 = Dimensions()
        dim2 = Dimensions.of(L=1, T=-1)
        dim3 = dim2 / dim2

        assert dim1.is_dimensionless()
        assert not dim2.is_dimensionless()
        assert dim3.is_dimensionless()
        assert dim3 == DIMENSIONLESS

    def test_user_defined_dimension_symbols(self):
        info = Dimensions.base('information')
        rate = info / Dimensions.base('T')

        assert rate['information'] == 1
        assert rate['T'] == -1
        assert rate['L'] == 0

    def test_integer_valued_floats_are_accepted(self):
        assert Dimensions({'L': 2.0}) == Dimensions.of(L=2)

    def test_fractional_exponents_rejected(self):
        with pytest.raises(TypeError):
            Dimensions({'L': 1.5})
        with pytest.raises(TypeError):
            Dimensions.of(L=1) ** 0.5

    def test_hashable(self):
        velocity = Dimensions.of(L=1, T=-1)
        lookup = {velocity: 'velocity'}

        assert lookup[Dimensions.of(T=-1, L=1)] == 'velocity'

    def test_string_forms(self):
        accel = Dimensions.of(L=1, T=-2)

        assert str(accel) == "[L T^-2]"
        assert repr(accel) == "Dimensions(L=1, T=-2)"
        assert str(DIMENSIONLESS) == "[1]"
        assert accel.as_dict() == {'L': 1, 'T': -2}
