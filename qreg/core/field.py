"""
Field-like element abstraction for the linear algebra layer.

Matrix and Vector only rely on the capability set declared by
FieldElement, so the algebra can be exercised with the simple Real field
as well as with Complex.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Type, TypeVar

from qreg.core.config import DEFAULT_CONFIG
from qreg.core.errors import DivisionByZero, MissingArgument

F = TypeVar("F", bound="FieldElement")


class FieldElement(ABC):
    """Capability set a matrix cell type has to provide."""

    @classmethod
    @abstractmethod
    def zero(cls: Type[F]) -> F:
        """Additive identity."""

    @classmethod
    @abstractmethod
    def one(cls: Type[F]) -> F:
        """Multiplicative identity."""

    @classmethod
    @abstractmethod
    def from_builtin(cls: Type[F], value: Any) -> F:
        """Build an element from a Python or numpy number."""

    @abstractmethod
    def to_builtin(self) -> Any:
        """Convert to the closest Python number."""

    @abstractmethod
    def plus(self: F, other: F) -> F:
        pass

    @abstractmethod
    def times(self: F, other: F) -> F:
        pass

    @abstractmethod
    def times_scalar(self: F, s: float) -> F:
        pass

    @abstractmethod
    def inverse(self: F) -> F:
        pass

    @abstractmethod
    def is_close(self: F, other: F, tol: float = DEFAULT_CONFIG.equality_tolerance) -> bool:
        pass

    def negative(self: F) -> F:
        return self.times_scalar(-1)

    def minus(self: F, other: F) -> F:
        return self.plus(other.negative())

    def divide(self: F, other: F) -> F:
        return self.times(other.inverse())

    def divide_scalar(self: F, s: float) -> F:
        if s == 0:
            raise DivisionByZero("Cannot divide by a zero scalar")
        return self.times_scalar(1 / s)

    def power(self: F, p: int) -> F:
        """
        Raise to an integer power.

        A negative exponent computes the positive power then inverts it;
        p == 0 returns the multiplicative identity.
        """
        if p == 0:
            return type(self).one()
        ret = self
        for _ in range(abs(p) - 1):
            ret = ret.times(self)
        return ret.inverse() if p < 0 else ret

    def conjugate(self: F) -> F:
        return self

    def copy(self: F) -> F:
        return self

    # Operators

    def _coerce(self, other: Any):
        if other is None:
            raise MissingArgument("Operand cannot be None")
        if isinstance(other, type(self)):
            return other
        if isinstance(other, numbers.Number):
            return type(self).from_builtin(other)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.plus(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.minus(self)

    def __mul__(self, other):
        if isinstance(other, numbers.Real) and not isinstance(other, FieldElement):
            return self.times_scalar(other)
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.times(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, numbers.Real) and not isinstance(other, FieldElement):
            return self.divide_scalar(other)
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, p: int):
        if not isinstance(p, numbers.Integral):
            return NotImplemented
        return self.power(int(p))

    def __neg__(self):
        return self.negative()


@dataclass(frozen=True, eq=False)
class Real(FieldElement):
    """Real numbers as a field, used to test the algebra layer on its own."""
    value: float = 0.0

    @classmethod
    def zero(cls) -> Real:
        return cls(0.0)

    @classmethod
    def one(cls) -> Real:
        return cls(1.0)

    @classmethod
    def from_builtin(cls, value: Any) -> Real:
        if isinstance(value, Real):
            return value
        if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
            raise TypeError(f"Cannot build a Real from {value!r}")
        return cls(float(value))

    def to_builtin(self) -> float:
        return self.value

    def plus(self, other: Real) -> Real:
        return Real(self.value + other.value)

    def times(self, other: Real) -> Real:
        return Real(self.value * other.value)

    def times_scalar(self, s: float) -> Real:
        return Real(self.value * s)

    def inverse(self) -> Real:
        if self.value == 0:
            raise DivisionByZero("Zero has no inverse")
        return Real(1 / self.value)

    def is_close(self, other: Real, tol: float = DEFAULT_CONFIG.equality_tolerance) -> bool:
        return abs(self.value - other.value) < tol

    def __float__(self) -> float:
        return self.value

    def __eq__(self, other) -> bool:
        if isinstance(other, numbers.Real):
            other = Real(float(other))
        if not isinstance(other, Real):
            return NotImplemented
        return self.is_close(other)

    def __hash__(self) -> int:
        return hash(round(self.value, 9))

    def __str__(self) -> str:
        return f"{self.value:g}"
