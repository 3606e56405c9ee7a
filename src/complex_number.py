"""
complex_number.py
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """
    Immutable complex number with IEEE double components.
    """
    real: float = 0.0
    imaginary: float = 0.0

    def plus(self, other):
        """
        Complex addition.
        """
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def minus(self, other):
        """
        Complex subtraction.
        """
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def times(self, other):
        """
        Complex multiplication.
        """
        return Complex(
            self.real * other.real - self.imaginary * other.imaginary,
            self.imaginary * other.real + self.real * other.imaginary
        )

    def divide(self, other):
        """
        Complex division. Raises ZeroDivisionError when the divisor has zero modulus.
        """
        denominator = other.real * other.real + other.imaginary * other.imaginary
        return Complex(
            (self.real * other.real + self.imaginary * other.imaginary) / denominator,
            (self.imaginary * other.real - self.real * other.imaginary) / denominator
        )

    def modulus(self):
        """
        Absolute value of the number.
        """
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    __add__ = plus
    __sub__ = minus
    __mul__ = times
    __truediv__ = divide
    __abs__ = modulus

    def __str__(self):
        return f'{self.real} + {self.imaginary}i'
