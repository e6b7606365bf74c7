"""
Random states and gates for tests and experiments.

All functions take an explicit numpy Generator.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from scipy.stats import unitary_group

from qreg.core.complex import Complex
from qreg.core.config import SimulatorConfig
from qreg.core.errors import InvalidDimension
from qreg.core.matrix import Matrix
from qreg.core.qubit import Qubit
from qreg.core.register import QubitRegister


def _random_amplitudes(count: int, rng: np.random.Generator) -> np.ndarray:
    """
    Random normalised amplitudes.

    [0, 1] is split at 2*count - 1 sorted uniform points; the square roots
    of the resulting gaps, with random signs, are the real and imaginary
    parts. The squared parts sum to 1 by construction.
    """
    bounds = np.sort(rng.random(2 * count - 1))
    gaps = np.diff(np.concatenate(([0.0], bounds, [1.0])))
    parts = np.sqrt(gaps) * rng.choice([-1.0, 1.0], size=2 * count)
    return parts[0::2] + 1j * parts[1::2]


def random_qubit(rng: np.random.Generator, config: Optional[SimulatorConfig] = None) -> Qubit:
    alpha, beta = _random_amplitudes(2, rng)
    return Qubit(alpha, beta, config)


def random_register(
    num_qubits: int,
    rng: np.random.Generator,
    config: Optional[SimulatorConfig] = None
) -> QubitRegister:
    if num_qubits <= 0:
        raise InvalidDimension(f"A register needs at least one qubit, got {num_qubits}")
    return QubitRegister.from_amplitudes(_random_amplitudes(1 << num_qubits, rng), config)


def random_unitary(dim: int, rng: np.random.Generator) -> np.ndarray:
    """Haar-random dim x dim unitary."""
    if dim < 2:
        raise InvalidDimension(f"Unitary dimension must be >= 2, got {dim}")
    return unitary_group.rvs(dim, random_state=rng)


def random_gate(num_qubits: int, rng: np.random.Generator) -> Matrix[Complex]:
    """Haar-random gate on num_qubits qubits, as a Matrix."""
    return Matrix.from_numpy(random_unitary(1 << num_qubits, rng), Complex)
