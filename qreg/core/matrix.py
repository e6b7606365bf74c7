"""
Generic dense matrices and vectors over a field-like element type.

Cells are addressed as (x, y) = (column, row). A Vector wraps a one-column
or one-row Matrix together with its orientation instead of inheriting from
Matrix, so arithmetic results can be re-wrapped without override chains.
"""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any, Generic, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar, Union

import numpy as np

from qreg.core.complex import Complex
from qreg.core.errors import (
    DimensionMismatch,
    DivisionByZero,
    IndexOutOfRange,
    InvalidDimension,
    MissingArgument,
)
from qreg.core.field import FieldElement

T = TypeVar("T", bound=FieldElement)


class Orientation(Enum):
    """Orientation of a vector."""
    COLUMN = "column"
    ROW = "row"

    def flipped(self) -> Orientation:
        return Orientation.ROW if self is Orientation.COLUMN else Orientation.COLUMN


def _require(value: Any, what: str) -> None:
    if value is None:
        raise MissingArgument(f"The {what} cannot be None")


class Matrix(Generic[T]):
    """
    Rectangular table of field elements with every cell populated.

    Arithmetic validates shapes before allocating the result, so a failed
    operation never exposes a partial matrix.
    """

    def __init__(self, width: int, height: int, field: Type[T] = Complex):
        if width <= 0 or height <= 0:
            raise InvalidDimension(
                f"Matrix dimensions must be positive, got {width}x{height}"
            )
        self._field = field
        zero = field.zero()
        self._rows: List[List[T]] = [[zero] * width for _ in range(height)]
        self._frozen = False

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], field: Optional[Type[T]] = None) -> Matrix[T]:
        """
        Build a matrix from explicit row-major content.

        Args:
            rows: Non-empty sequence of equally long, non-empty rows
            field: Element type; inferred from the first cell when omitted,
                defaulting to Complex for plain Python numbers

        Returns:
            A new matrix holding the given cells
        """
        _require(rows, "rows")
        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidDimension("Matrix content cannot be empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimension(
                    f"Row {y} has length {len(row)}, expected {width}"
                )
        if field is None:
            first = rows[0][0]
            field = type(first) if isinstance(first, FieldElement) else Complex
        ret = cls(width, len(rows), field)
        ret._rows = [[_to_field(field, v) for v in row] for row in rows]
        return ret

    @classmethod
    def from_numpy(cls, array: np.ndarray, field: Type[T] = Complex) -> Matrix[T]:
        array = np.asarray(array)
        if array.ndim != 2:
            raise InvalidDimension(f"Expected a 2-D array, got shape {array.shape}")
        return cls.from_rows(array.tolist(), field)

    @classmethod
    def identity(cls, size: int, field: Type[T] = Complex) -> Matrix[T]:
        ret = cls(size, size, field)
        one = field.one()
        for i in range(size):
            ret._rows[i][i] = one
        return ret

    # Shape and cell access

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def shape(self) -> tuple:
        """(height, width), the numpy convention."""
        return (self.height, self.width)

    @property
    def field(self) -> Type[T]:
        return self._field

    def is_square(self) -> bool:
        return self.width == self.height

    def _check_coordinates(self, x: int, y: int) -> None:
        if not 0 <= x < self.width:
            raise IndexOutOfRange(f"x coordinate {x} out of range [0, {self.width})")
        if not 0 <= y < self.height:
            raise IndexOutOfRange(f"y coordinate {y} out of range [0, {self.height})")

    def get_cell(self, x: int, y: int) -> T:
        self._check_coordinates(x, y)
        return self._rows[y][x]

    def set_cell(self, x: int, y: int, value: Any) -> None:
        _require(value, "cell value")
        if self._frozen:
            raise TypeError("Cannot modify a frozen matrix")
        self._check_coordinates(x, y)
        self._rows[y][x] = _to_field(self._field, value)

    def rows(self) -> List[List[T]]:
        """Row-major copy of the cells."""
        return [list(row) for row in self._rows]

    def column_vector(self, c: int) -> Vector[T]:
        if not 0 <= c < self.width:
            raise IndexOutOfRange(f"Column {c} out of range [0, {self.width})")
        return Vector.from_values([row[c] for row in self._rows], Orientation.COLUMN, self._field)

    def row_vector(self, r: int) -> Vector[T]:
        if not 0 <= r < self.height:
            raise IndexOutOfRange(f"Row {r} out of range [0, {self.height})")
        return Vector.from_values(self._rows[r], Orientation.ROW, self._field)

    # Arithmetic

    def _check_same_shape(self, m: Matrix[T]) -> None:
        if self.width != m.width or self.height != m.height:
            raise DimensionMismatch(
                f"Shapes differ: {self.width}x{self.height} vs {m.width}x{m.height}"
            )

    def _build(self, rows: List[List[T]]) -> Matrix[T]:
        ret = Matrix.__new__(Matrix)
        ret._field = self._field
        ret._rows = rows
        ret._frozen = False
        return ret

    def plus(self, m: Union[Matrix[T], Vector[T]]) -> Matrix[T]:
        _require(m, "other matrix")
        m = _as_matrix(m)
        self._check_same_shape(m)
        return self._build([
            [a.plus(b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._rows, m._rows)
        ])

    def minus(self, m: Union[Matrix[T], Vector[T]]) -> Matrix[T]:
        _require(m, "other matrix")
        return self.plus(_as_matrix(m).negative())

    def times(self, m: Union[Matrix[T], Vector[T]]) -> Union[Matrix[T], Vector[T]]:
        """
        Matrix product self × m.

        A column vector operand yields a column vector result.
        """
        _require(m, "other matrix")
        if isinstance(m, Vector):
            result = self.times(m.as_matrix())
            if m.orientation is Orientation.COLUMN:
                return Vector._wrap(result, Orientation.COLUMN)
            return result
        if self.width != m.height:
            raise DimensionMismatch(
                f"Left width {self.width} must equal right height {m.height}"
            )
        zero = self._field.zero()
        rows = []
        for y in range(self.height):
            row = []
            for x in range(m.width):
                acc = zero
                for i in range(self.width):
                    acc = acc.plus(self._rows[y][i].times(m._rows[i][x]))
                row.append(acc)
            rows.append(row)
        return self._build(rows)

    def times_scalar(self, s: float) -> Matrix[T]:
        return self._build([[v.times_scalar(s) for v in row] for row in self._rows])

    def divide_scalar(self, s: float) -> Matrix[T]:
        if s == 0:
            raise DivisionByZero("Cannot divide a matrix by zero")
        return self.times_scalar(1 / s)

    def negative(self) -> Matrix[T]:
        return self.times_scalar(-1)

    def transpose(self) -> Matrix[T]:
        return self._build([list(col) for col in zip(*self._rows)])

    def conjugate_transpose(self) -> Matrix[T]:
        return self._build([[v.conjugate() for v in col] for col in zip(*self._rows)])

    def is_close(self, m: Matrix[T], tol: Optional[float] = None) -> bool:
        if self.width != m.width or self.height != m.height:
            return False
        for row_a, row_b in zip(self._rows, m._rows):
            for a, b in zip(row_a, row_b):
                close = a.is_close(b) if tol is None else a.is_close(b, tol)
                if not close:
                    return False
        return True

    def copy(self) -> Matrix[T]:
        return self._build(self.rows())

    def freeze(self) -> Matrix[T]:
        """Make the matrix read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def to_numpy(self) -> np.ndarray:
        return np.array([[v.to_builtin() for v in row] for row in self._rows])

    # Operators

    def __add__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.minus(other)

    def __matmul__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.times(other)

    def __mul__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return self.times_scalar(s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return self.divide_scalar(s)

    def __neg__(self):
        return self.negative()

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector):
            other = other.as_matrix()
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.width}x{self.height}, field={self._field.__name__})"

    def __str__(self) -> str:
        cells = [[str(v) for v in row] for row in self._rows]
        col_width = max(len(c) for row in cells for c in row)
        lines = ["  ".join(c.rjust(col_width) for c in row) for row in cells]
        if len(lines) == 1:
            return f"[ {lines[0]} ]"
        out = []
        for y, line in enumerate(lines):
            if y == 0:
                out.append(f"┌ {line} ┐")
            elif y == len(lines) - 1:
                out.append(f"└ {line} ┘")
            else:
                out.append(f"│ {line} │")
        return "\n".join(out)


class Vector(Generic[T]):
    """
    One-dimensional matrix with an orientation.

    Coordinate i maps to cell (0, i) for a column vector and to (i, 0) for
    a row vector.
    """

    def __init__(self, length: int, orientation: Orientation = Orientation.COLUMN,
                 field: Type[T] = Complex):
        if orientation is Orientation.COLUMN:
            self._matrix = Matrix(1, length, field)
        else:
            self._matrix = Matrix(length, 1, field)
        self._orientation = orientation

    @classmethod
    def from_values(cls, values: Iterable[Any], orientation: Orientation = Orientation.COLUMN,
                    field: Optional[Type[T]] = None) -> Vector[T]:
        _require(values, "values")
        values = list(values)
        if not values:
            raise InvalidDimension("A vector needs at least one coordinate")
        if orientation is Orientation.COLUMN:
            matrix = Matrix.from_rows([[v] for v in values], field)
        else:
            matrix = Matrix.from_rows([values], field)
        return cls._wrap(matrix, orientation)

    @classmethod
    def _wrap(cls, matrix: Matrix[T], orientation: Orientation) -> Vector[T]:
        expected = matrix.width if orientation is Orientation.COLUMN else matrix.height
        if expected != 1:
            raise DimensionMismatch(
                f"A {orientation.value} vector cannot wrap a {matrix.width}x{matrix.height} matrix"
            )
        ret = cls.__new__(cls)
        ret._matrix = matrix
        ret._orientation = orientation
        return ret

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def field(self) -> Type[T]:
        return self._matrix.field

    def __len__(self) -> int:
        return self.length

    @property
    def length(self) -> int:
        if self._orientation is Orientation.COLUMN:
            return self._matrix.height
        return self._matrix.width

    def get(self, i: int) -> T:
        if self._orientation is Orientation.COLUMN:
            return self._matrix.get_cell(0, i)
        return self._matrix.get_cell(i, 0)

    def set(self, i: int, value: Any) -> None:
        if self._orientation is Orientation.COLUMN:
            self._matrix.set_cell(0, i, value)
        else:
            self._matrix.set_cell(i, 0, value)

    def __getitem__(self, i: int) -> T:
        return self.get(i)

    def __setitem__(self, i: int, value: Any) -> None:
        self.set(i, value)

    def __iter__(self) -> Iterator[T]:
        for i in range(self.length):
            yield self.get(i)

    def as_matrix(self) -> Matrix[T]:
        return self._matrix

    def _rewrap(self, matrix: Matrix[T]) -> Vector[T]:
        return Vector._wrap(matrix, self._orientation)

    def plus(self, other: Union[Vector[T], Matrix[T]]) -> Vector[T]:
        return self._rewrap(self._matrix.plus(other))

    def minus(self, other: Union[Vector[T], Matrix[T]]) -> Vector[T]:
        return self._rewrap(self._matrix.minus(other))

    def times(self, other: Union[Vector[T], Matrix[T]]) -> Union[Vector[T], Matrix[T]]:
        """Product self × other; a row vector times a matrix stays a row vector."""
        result = self._matrix.times(_as_matrix(other))
        if self._orientation is Orientation.ROW and result.height == 1:
            return Vector._wrap(result, Orientation.ROW)
        return result

    def times_scalar(self, s: float) -> Vector[T]:
        return self._rewrap(self._matrix.times_scalar(s))

    def divide_scalar(self, s: float) -> Vector[T]:
        return self._rewrap(self._matrix.divide_scalar(s))

    def negative(self) -> Vector[T]:
        return self._rewrap(self._matrix.negative())

    def transpose(self) -> Vector[T]:
        return Vector._wrap(self._matrix.transpose(), self._orientation.flipped())

    def conjugate_transpose(self) -> Vector[T]:
        return Vector._wrap(self._matrix.conjugate_transpose(), self._orientation.flipped())

    def is_close(self, other: Vector[T], tol: Optional[float] = None) -> bool:
        return self._orientation is other._orientation and self._matrix.is_close(other._matrix, tol)

    def copy(self) -> Vector[T]:
        return self._rewrap(self._matrix.copy())

    def to_numpy(self) -> np.ndarray:
        return self._matrix.to_numpy().reshape(-1)

    def __add__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.minus(other)

    def __matmul__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.times(other)

    def __mul__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return self.times_scalar(s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return self.divide_scalar(s)

    def __neg__(self):
        return self.negative()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector(length={self.length}, {self._orientation.value}, field={self.field.__name__})"

    def __str__(self) -> str:
        return str(self._matrix)


def _as_matrix(m: Union[Matrix[T], Vector[T]]) -> Matrix[T]:
    return m.as_matrix() if isinstance(m, Vector) else m


def _to_field(field: Type[T], value: Any) -> T:
    if value is None:
        raise MissingArgument("Matrix cells cannot be None")
    if isinstance(value, field):
        return value
    return field.from_builtin(value)
