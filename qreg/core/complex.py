"""Complex number value type."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

from qreg.core.config import DEFAULT_CONFIG
from qreg.core.errors import DivisionByZero
from qreg.core.field import FieldElement

# Hashing rounds to this many decimals, the granularity of the equality window.
_HASH_DECIMALS = 9


@dataclass(frozen=True, eq=False)
class Complex(FieldElement):
    """
    Immutable complex number.

    Equality is tolerant: two values are equal when both their real and
    imaginary parts differ by less than 1e-9. Hashing is bucketed at the
    same granularity, so only exactly equal values are guaranteed to share
    a hash; do not use tolerance-equal values as dictionary keys.
    """
    re: float = 0.0
    im: float = 0.0

    @classmethod
    def zero(cls) -> Complex:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1.0, 0.0)

    @classmethod
    def from_builtin(cls, value: Any) -> Complex:
        if isinstance(value, Complex):
            return value
        if isinstance(value, FieldElement):
            value = value.to_builtin()
        z = complex(value)
        return cls(z.real, z.imag)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> Complex:
        return cls(r * math.cos(theta), r * math.sin(theta))

    def to_builtin(self) -> complex:
        return complex(self.re, self.im)

    def plus(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def minus(self, other: Complex) -> Complex:
        return Complex(self.re - other.re, self.im - other.im)

    def times(self, other: Complex) -> Complex:
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def times_scalar(self, s: float) -> Complex:
        return Complex(self.re * s, self.im * s)

    def divide(self, other: Complex) -> Complex:
        denominator = other.re * other.re + other.im * other.im
        if denominator == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        numerator = self.times(other.conjugate())
        return Complex(numerator.re / denominator, numerator.im / denominator)

    def divide_scalar(self, s: float) -> Complex:
        if s == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return Complex(self.re / s, self.im / s)

    def inverse(self) -> Complex:
        """Multiplicative inverse: conjugate / |z|²."""
        denominator = self.re * self.re + self.im * self.im
        if denominator == 0:
            raise DivisionByZero("Zero has no inverse")
        return Complex(self.re / denominator, -self.im / denominator)

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im)

    def modulus(self) -> float:
        return math.hypot(self.re, self.im)

    def modulus_squared(self) -> float:
        return self.re * self.re + self.im * self.im

    def normalize(self) -> Complex:
        """Unit-modulus complex with the same argument."""
        return self.divide_scalar(self.modulus())

    def is_close(self, other: Complex, tol: float = DEFAULT_CONFIG.equality_tolerance) -> bool:
        return abs(self.re - other.re) < tol and abs(self.im - other.im) < tol

    def __abs__(self) -> float:
        return self.modulus()

    def __complex__(self) -> complex:
        return self.to_builtin()

    def __eq__(self, other) -> bool:
        if isinstance(other, numbers.Number) and not isinstance(other, Complex):
            other = Complex.from_builtin(other)
        if not isinstance(other, Complex):
            return NotImplemented
        return self.is_close(other)

    def __hash__(self) -> int:
        return hash((round(self.re, _HASH_DECIMALS), round(self.im, _HASH_DECIMALS)))

    def __str__(self) -> str:
        sign = "-" if math.copysign(1.0, self.im) < 0 else "+"
        return f"{self.re:.6g} {sign} {abs(self.im):.6g}i"
