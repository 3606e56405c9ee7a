"""
test_complex_number.py
"""
import math
import pytest
from src.complex_number import Complex


def test_plus_and_minus():
    """
    Addition and subtraction are component-wise.
    """
    a = Complex(1.5, -2.0)
    b = Complex(0.25, 4.0)
    assert a.plus(b) == Complex(1.75, 2.0)
    assert a.minus(b) == Complex(1.25, -6.0)
    assert a + b == a.plus(b)
    assert a - b == a.minus(b)


@pytest.mark.parametrize('a, b, expected', [
    (Complex(1, 2), Complex(3, 4), Complex(-5, 10)),
    (Complex(0, 1), Complex(0, 1), Complex(-1, 0)),
    (Complex(2, 0), Complex(-3, 0), Complex(-6, 0)),
    (Complex(0, 0), Complex(7, -7), Complex(0, 0)),
])
def test_times(a, b, expected):
    """
    Multiplication follows (a + bi)(c + di) = (ac - bd) + (bc + ad)i.
    """
    assert a.times(b) == expected
    assert a * b == expected


def test_times_matches_builtin_complex():
    """
    Products agree with Python's complex type.
    """
    for re1, im1, re2, im2 in [(0.1, 0.7, -0.3, 1.9), (-2.0, -1.5, 1e-3, 3.0)]:
        product = Complex(re1, im1).times(Complex(re2, im2))
        expected = complex(re1, im1) * complex(re2, im2)
        assert product.real == pytest.approx(expected.real)
        assert product.imaginary == pytest.approx(expected.imag)


def test_divide():
    """
    Division undoes multiplication for exactly representable values.
    """
    a = Complex(-5, 10)
    b = Complex(3, 4)
    assert a.divide(b) == Complex(1, 2)
    assert a / b == Complex(1, 2)


def test_divide_by_zero():
    """
    Dividing by a zero-modulus value fails instead of returning a number.
    """
    with pytest.raises(ZeroDivisionError):
        Complex(1, 1).divide(Complex(0, 0))


def test_modulus():
    """
    The modulus is the Euclidean length and never negative.
    """
    assert Complex(3, 4).modulus() == 5.0
    assert abs(Complex(-3, -4)) == 5.0
    assert Complex().modulus() == 0.0
    assert Complex(1, 1).modulus() == math.sqrt(2)


def test_modulus_overflow_is_infinite():
    """
    Very large components give an infinite modulus rather than an error.
    """
    assert Complex(1e200, 1e200).modulus() == math.inf


def test_immutable():
    """
    Values cannot be changed in place and operations return new values.
    """
    a = Complex(1, 1)
    with pytest.raises(AttributeError):
        a.real = 2.0
    a.plus(Complex(1, 1))
    assert a == Complex(1, 1)


def test_str():
    assert str(Complex(1.5, -2.0)) == '1.5 + -2.0i'
