"""Standalone single-qubit state."""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Union

import numpy as np

from qreg.core.complex import Complex
from qreg.core.config import DEFAULT_CONFIG, SimulatorConfig
from qreg.core.errors import DimensionMismatch, InvalidState, MissingArgument
from qreg.core.matrix import Matrix, Orientation, Vector


class Qubit:
    """
    Two-level state alpha|0> + beta|1>, independent of any register.

    The pair always satisfies |alpha|² + |beta|² ≈ 1 within the configured
    norm tolerance.
    """

    def __init__(self, alpha: Any, beta: Any, config: Optional[SimulatorConfig] = None):
        if alpha is None or beta is None:
            raise MissingArgument("Both alpha and beta are required")
        self.config = config or DEFAULT_CONFIG
        alpha = Complex.from_builtin(alpha)
        beta = Complex.from_builtin(beta)
        norm = alpha.modulus_squared() + beta.modulus_squared()
        if not self.config.is_unit_norm(norm):
            raise InvalidState(f"|alpha|² + |beta|² = {norm:.6f}, expected 1")
        self._alpha = alpha
        self._beta = beta

    @classmethod
    def zero(cls, config: Optional[SimulatorConfig] = None) -> Qubit:
        return cls(Complex.one(), Complex.zero(), config)

    @classmethod
    def one(cls, config: Optional[SimulatorConfig] = None) -> Qubit:
        return cls(Complex.zero(), Complex.one(), config)

    @classmethod
    def plus(cls, config: Optional[SimulatorConfig] = None) -> Qubit:
        s = 1 / math.sqrt(2)
        return cls(Complex(s, 0.0), Complex(s, 0.0), config)

    @property
    def alpha(self) -> Complex:
        return self._alpha

    @property
    def beta(self) -> Complex:
        return self._beta

    def probability_zero(self) -> float:
        return self._alpha.modulus_squared()

    def probability_one(self) -> float:
        return self._beta.modulus_squared()

    def to_vector(self) -> Vector[Complex]:
        return Vector.from_values([self._alpha, self._beta], Orientation.COLUMN, Complex)

    def apply(self, gate: Union[Matrix[Any], np.ndarray, Sequence[Sequence[Any]]]) -> Qubit:
        """
        Replace the state by gate × (alpha, beta).

        Args:
            gate: 2x2 unitary, as a Matrix over any field, a numpy array
                or nested rows of numbers

        Returns:
            self, for chaining
        """
        if gate is None:
            raise MissingArgument("A gate matrix is required")
        if not isinstance(gate, Matrix):
            gate = Matrix.from_numpy(np.asarray(gate), Complex)
        elif gate.field is not Complex:
            gate = Matrix.from_numpy(gate.to_numpy(), Complex)
        if gate.width != 2 or gate.height != 2:
            raise DimensionMismatch(
                f"A single-qubit gate must be 2x2, got {gate.width}x{gate.height}"
            )
        result = gate.times(self.to_vector())
        self._alpha, self._beta = result[0], result[1]
        return self

    def random_draw(self, rng: np.random.Generator) -> bool:
        """
        Measure in the computational basis.

        Draws r uniformly in [0, 1); the outcome is 1 iff r > |alpha|². The
        qubit then collapses onto the drawn basis state.

        Returns:
            True if 1 was drawn, False otherwise
        """
        if rng is None:
            raise MissingArgument("A random generator is required")
        outcome = bool(rng.random() > self.probability_zero())
        if outcome:
            self._alpha, self._beta = Complex.zero(), Complex.one()
        else:
            self._alpha, self._beta = Complex.one(), Complex.zero()
        return outcome

    def copy(self) -> Qubit:
        ret = Qubit.__new__(Qubit)
        ret.config = self.config
        ret._alpha = self._alpha
        ret._beta = self._beta
        return ret

    def __eq__(self, other) -> bool:
        if not isinstance(other, Qubit):
            return NotImplemented
        return self._alpha == other._alpha and self._beta == other._beta

    __hash__ = None

    def __repr__(self) -> str:
        return f"Qubit(alpha={self._alpha}, beta={self._beta})"

    def __str__(self) -> str:
        return f"({self._alpha})|0> + ({self._beta})|1>"
