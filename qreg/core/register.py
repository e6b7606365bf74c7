"""
State-vector register engine.

The register owns a dense vector of 2**n complex amplitudes. Basis index i
is read as an n-bit string whose most significant bit is the highest qubit
index, so qubit q is bit q of i. Every gate path and the measurement use
this ordering.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from qreg.core.complex import Complex
from qreg.core.config import DEFAULT_CONFIG, SimulatorConfig
from qreg.core.errors import (
    DimensionMismatch,
    DuplicateIndex,
    IndexOutOfRange,
    InvalidDimension,
    InvalidState,
    MissingArgument,
)
from qreg.core.matrix import Matrix, Orientation, Vector
from qreg.core.qubit import Qubit

logger = logging.getLogger(__name__)

GateLike = Union[Matrix[Complex], np.ndarray, Sequence[Sequence[Any]]]


def _is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


class QubitRegister:
    """
    Register of n qubits stored as a state vector.

    Usage:
        reg = QubitRegister(2)
        reg.apply(H, 1).apply(CNOT, 0, 1)
        bits = reg.copy().random_draw(np.random.default_rng(7))

    Mutating calls validate every precondition before touching the
    amplitudes, so a failed call leaves the register unchanged. The engine
    does no locking; a register must not be shared between threads.
    """

    def __init__(self, num_qubits: int, config: Optional[SimulatorConfig] = None):
        self.config = config or DEFAULT_CONFIG
        num_qubits = operator.index(num_qubits)
        self._check_qubit_count(num_qubits)
        self._amplitudes = np.zeros(1 << num_qubits, dtype=np.complex128)
        self._amplitudes[0] = 1.0
        self._num_qubits = num_qubits
        logger.debug("Created %d-qubit register in |0...0>", num_qubits)

    @classmethod
    def from_amplitudes(cls, values: Union[Vector[Complex], Iterable[Any], np.ndarray],
                        config: Optional[SimulatorConfig] = None) -> QubitRegister:
        """
        Build a register from an explicit amplitude vector.

        Args:
            values: Vector, numpy array or iterable of Complex / Python numbers
            config: Tolerances; DEFAULT_CONFIG when omitted

        Returns:
            A register holding a copy of the amplitudes

        Raises:
            InvalidDimension: length is not a power of two >= 2
            InvalidState: squared norm differs from 1 by more than the tolerance
        """
        if values is None:
            raise MissingArgument("An amplitude vector is required")
        config = config or DEFAULT_CONFIG
        if isinstance(values, Vector):
            amplitudes = values.to_numpy().astype(np.complex128)
        elif isinstance(values, np.ndarray):
            amplitudes = np.array(values, dtype=np.complex128).reshape(-1)
        else:
            amplitudes = np.array([complex(Complex.from_builtin(v)) for v in values],
                                  dtype=np.complex128)

        length = amplitudes.shape[0]
        if length < 2 or not _is_power_of_two(length):
            raise InvalidDimension(
                f"Amplitude vector length must be a power of two >= 2, got {length}"
            )
        num_qubits = length.bit_length() - 1

        ret = cls.__new__(cls)
        ret.config = config
        ret._check_qubit_count(num_qubits)
        norm = float(np.vdot(amplitudes, amplitudes).real)
        if not config.is_unit_norm(norm):
            raise InvalidState(f"Sum of squared amplitudes is {norm:.6f}, expected 1")
        ret._amplitudes = amplitudes
        ret._num_qubits = num_qubits
        logger.debug("Created %d-qubit register from explicit amplitudes", num_qubits)
        return ret

    def _check_qubit_count(self, num_qubits: int) -> None:
        if num_qubits < 1:
            raise InvalidDimension(f"A register needs at least one qubit, got {num_qubits}")
        if num_qubits > self.config.max_dense_qubits:
            raise InvalidDimension(
                f"{num_qubits} qubits exceeds max_dense_qubits={self.config.max_dense_qubits}"
            )

    # Reads

    @property
    def num_qubits(self) -> int:
        return self._num_qubits

    def size(self) -> int:
        """Number of qubits n, from the exact bit length of N = 2**n."""
        return self._amplitudes.shape[0].bit_length() - 1

    @property
    def dimension(self) -> int:
        return self._amplitudes.shape[0]

    def _check_basis_index(self, i: int) -> int:
        i = operator.index(i)
        if not 0 <= i < self.dimension:
            raise IndexOutOfRange(f"Basis index {i} out of range [0, {self.dimension})")
        return i

    def _check_qubit(self, q: int) -> int:
        q = operator.index(q)
        if not 0 <= q < self._num_qubits:
            raise IndexOutOfRange(f"Qubit index {q} out of range [0, {self._num_qubits})")
        return q

    def proba(self, i: int) -> float:
        """Probability |amplitude[i]|² of basis state i."""
        i = self._check_basis_index(i)
        a = self._amplitudes[i]
        return float(a.real * a.real + a.imag * a.imag)

    def probabilities(self) -> np.ndarray:
        return np.abs(self._amplitudes) ** 2

    def norm(self) -> float:
        """Sum of squared amplitude moduli."""
        return float(np.vdot(self._amplitudes, self._amplitudes).real)

    def amplitude(self, i: int) -> Complex:
        i = self._check_basis_index(i)
        return Complex.from_builtin(self._amplitudes[i])

    @property
    def amplitudes(self) -> Vector[Complex]:
        """Column vector snapshot of the amplitudes."""
        return Vector.from_values(self._amplitudes.tolist(), Orientation.COLUMN, Complex)

    def as_numpy(self) -> np.ndarray:
        return self._amplitudes.copy()

    def qubit(self, q: int) -> Qubit:
        """
        Marginal two-level state of qubit q.

        alpha sums the amplitudes whose bit q is 0, beta those whose bit q
        is 1, and the pair is renormalised. The result only describes the
        qubit faithfully when it is not entangled with the rest.
        """
        q = self._check_qubit(q)
        pairs = self._amplitudes.reshape(-1, 2, 1 << q)
        alpha = complex(pairs[:, 0, :].sum())
        beta = complex(pairs[:, 1, :].sum())
        norm = abs(alpha) ** 2 + abs(beta) ** 2
        if norm == 0:
            raise InvalidState(f"Qubit {q} has no separable marginal in this state")
        scale = math.sqrt(norm)
        return Qubit(alpha / scale, beta / scale, self.config)

    # Gates

    @staticmethod
    def _gate_array(gate: GateLike) -> np.ndarray:
        if gate is None:
            raise MissingArgument("A gate matrix is required")
        if isinstance(gate, Matrix):
            u = gate.to_numpy().astype(np.complex128)
        else:
            u = np.asarray(gate, dtype=np.complex128)
        if u.ndim != 2:
            raise DimensionMismatch(f"A gate must be a 2-D matrix, got shape {u.shape}")
        return u

    def apply(self, gate: GateLike, *qubit_indices: Union[int, Sequence[int]]) -> QubitRegister:
        """
        Apply a gate to one or more qubits.

        A single index takes the dedicated single-qubit path, several
        indices the general k-qubit path. Indices may also be passed as a
        single list, tuple or 1-D array.

        Returns:
            self, for chaining
        """
        if (len(qubit_indices) == 1
                and isinstance(qubit_indices[0], (list, tuple, np.ndarray))):
            qubit_indices = tuple(qubit_indices[0])
        if not qubit_indices:
            raise MissingArgument("At least one qubit index is required")
        if len(qubit_indices) == 1:
            return self.apply_single(gate, qubit_indices[0])
        return self.apply_multi(gate, qubit_indices)

    def apply_single(self, gate: GateLike, qubit: int) -> QubitRegister:
        """
        Apply a 2x2 gate to one qubit.

        With offset = 2**qubit, the indices whose bit `qubit` is clear come
        in runs of `offset` consecutive values separated by gaps of
        `offset`; each such i is paired with i + offset. Viewing the vector
        as (blocks, 2, offset) lines those pairs up along the middle axis,
        and every pair is replaced by gate × pair in place.
        """
        u = self._gate_array(gate)
        if u.shape != (2, 2):
            raise DimensionMismatch(f"A single-qubit gate must be 2x2, got {u.shape}")
        qubit = self._check_qubit(qubit)

        pairs = self._amplitudes.reshape(-1, 2, 1 << qubit)
        pairs[...] = np.einsum("ij,bjk->bik", u, pairs)
        logger.debug("Applied 2x2 gate to qubit %d", qubit)
        return self

    def apply_multi(self, gate: GateLike, qubit_indices: Sequence[int]) -> QubitRegister:
        """
        Apply a 2**k x 2**k gate to k ascending, distinct qubits.

        The local index of a basis state is sum_j bit(i, qubits[j]) << j:
        the lowest chosen qubit is the least significant local bit. Basis
        states that agree on every untouched bit form one group of 2**k
        states, and the gate acts on each group independently.

        Group bases are found by inserting zero bits at the chosen
        positions into 0 .. N/2**k - 1, and a per-call table gives each
        local coordinate's offset from its base. Gather, multiply and
        scatter then run as one matrix product.
        """
        if qubit_indices is None:
            raise MissingArgument("Qubit indices are required")
        u = self._gate_array(gate)
        qubits = tuple(operator.index(q) for q in qubit_indices)
        if not qubits:
            raise MissingArgument("At least one qubit index is required")

        rows, cols = u.shape
        if rows != cols or not _is_power_of_two(rows):
            raise InvalidDimension(f"A gate must be square with power-of-two side, got {u.shape}")
        if rows > self.dimension:
            raise DimensionMismatch(
                f"A {rows}x{rows} gate does not fit a {self._num_qubits}-qubit register"
            )
        if rows != 1 << len(qubits):
            raise DimensionMismatch(
                f"A {rows}x{rows} gate cannot act on {len(qubits)} qubit(s)"
            )
        for q in qubits:
            self._check_qubit(q)
        if len(set(qubits)) != len(qubits):
            raise DuplicateIndex(f"Qubit indices must be distinct, got {qubits}")
        if any(a > b for a, b in zip(qubits, qubits[1:])):
            raise IndexOutOfRange(f"Qubit indices must be in ascending order, got {qubits}")

        k = len(qubits)
        bases = np.arange(self.dimension >> k, dtype=np.int64)
        for q in qubits:
            low = bases & ((1 << q) - 1)
            bases = ((bases >> q) << (q + 1)) | low

        local = np.arange(1 << k, dtype=np.int64)
        offsets = np.zeros(1 << k, dtype=np.int64)
        for j, q in enumerate(qubits):
            offsets |= ((local >> j) & 1) << q

        index = bases[:, None] + offsets[None, :]
        self._amplitudes[index] = self._amplitudes[index] @ u.T
        logger.debug("Applied %dx%d gate to qubits %s", rows, rows, qubits)
        return self

    # Measurement

    def _bits(self, i: int) -> Tuple[bool, ...]:
        return tuple(bool((i >> q) & 1) for q in reversed(range(self._num_qubits)))

    def random_draw(self, rng: np.random.Generator) -> Tuple[bool, ...]:
        """
        Projective measurement of the whole register.

        Draws r uniformly in [0, 1) and selects the first basis index whose
        cumulative probability reaches r, clamped to the last index. For
        r == 0 the first index with non-zero probability is selected
        instead, so a zero-probability state is never drawn. The register
        collapses onto that basis state.

        Args:
            rng: Caller-supplied generator, e.g. np.random.default_rng(seed)

        Returns:
            n booleans, most significant bit (highest qubit) first
        """
        if rng is None:
            raise MissingArgument("A random generator is required")
        r = rng.random()
        cumulative = np.cumsum(self.probabilities())
        side = "right" if r == 0.0 else "left"
        i = int(np.searchsorted(cumulative, r, side=side))
        i = min(i, self.dimension - 1)

        self._amplitudes[:] = 0
        self._amplitudes[i] = 1.0
        logger.debug("Measured basis state %d (r=%.6f)", i, r)
        return self._bits(i)

    def random_draw_qubits(self, rng: np.random.Generator) -> Tuple[bool, ...]:
        """
        Draw every qubit independently from its own marginal probability.

        The register is not collapsed. Correlations between qubits are
        lost, so this only agrees with random_draw for unentangled states.

        Returns:
            n booleans, most significant bit first
        """
        if rng is None:
            raise MissingArgument("A random generator is required")
        probabilities = self.probabilities()
        indices = np.arange(self.dimension)
        bits = []
        for q in reversed(range(self._num_qubits)):
            p_one = float(probabilities[((indices >> q) & 1) == 1].sum())
            bits.append(bool(rng.random() < p_one))
        return tuple(bits)

    # Copy, comparison and rendering

    def copy(self) -> QubitRegister:
        ret = QubitRegister.__new__(QubitRegister)
        ret.config = self.config
        ret._amplitudes = self._amplitudes.copy()
        ret._num_qubits = self._num_qubits
        return ret

    def is_close(self, other: QubitRegister, tol: Optional[float] = None) -> bool:
        if self.dimension != other.dimension:
            return False
        tol = self.config.equality_tolerance if tol is None else tol
        diff = self._amplitudes - other._amplitudes
        return bool(np.all(np.abs(diff.real) < tol) and np.all(np.abs(diff.imag) < tol))

    def __eq__(self, other) -> bool:
        if not isinstance(other, QubitRegister):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"QubitRegister(num_qubits={self._num_qubits}, norm={self.norm():.6f})"

    def __str__(self) -> str:
        return str(self.amplitudes)
