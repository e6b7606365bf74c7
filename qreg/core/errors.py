"""Error kinds raised by qreg.

Every error derives from QregError and from the builtin exception that
matches its meaning, so callers can catch either.
"""

from __future__ import annotations


class QregError(Exception):
    """Base class for all qreg errors."""


class InvalidDimension(QregError, ValueError):
    """A size is non-positive, not a power of two, or a table is ragged."""


class IndexOutOfRange(QregError, IndexError):
    """A coordinate or qubit index lies outside its bounds."""


class DimensionMismatch(QregError, ValueError):
    """Operand shapes are incompatible, or a gate does not fit its qubits."""


class InvalidState(QregError, ValueError):
    """An amplitude vector or qubit state breaks the unit-norm invariant."""


class DuplicateIndex(QregError, ValueError):
    """A qubit index is repeated in a multi-qubit call."""


class MissingArgument(QregError, TypeError):
    """A required matrix, vector or value was omitted."""


class DivisionByZero(QregError, ZeroDivisionError):
    """Division by a zero scalar or a zero field element."""
