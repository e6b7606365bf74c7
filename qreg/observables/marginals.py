"""
Marginal distribution extraction from a register.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from qreg.core.errors import DuplicateIndex, IndexOutOfRange
from qreg.core.register import QubitRegister

# Full distributions are enumerated bitstring by bitstring.
MAX_DISTRIBUTION_QUBITS = 20


def _check_qubit(register: QubitRegister, q: int) -> None:
    if not 0 <= q < register.num_qubits:
        raise IndexOutOfRange(f"Qubit index {q} out of range [0, {register.num_qubits})")


def extract_marginals(
    register: QubitRegister,
    qubits: Optional[List[int]] = None
) -> Dict[int, np.ndarray]:
    """
    Extract marginal probability distributions for specified qubits.

    Args:
        register: Source register, left untouched
        qubits: Qubit indices (default: all)

    Returns:
        Dictionary mapping qubit -> [p(0), p(1)] probability array
    """
    if qubits is None:
        qubits = list(range(register.num_qubits))
    probabilities = register.probabilities()
    indices = np.arange(register.dimension)

    marginals = {}
    for q in qubits:
        _check_qubit(register, q)
        p_one = float(probabilities[((indices >> q) & 1) == 1].sum())
        marginals[q] = np.array([1.0 - p_one, p_one])

    return marginals


def extract_joint_marginal(
    register: QubitRegister,
    qubit_a: int,
    qubit_b: int
) -> np.ndarray:
    """
    Extract joint probability distribution P(q_a, q_b).

    Returns:
        2x2 array where [i,j] = P(q_a=i, q_b=j)
    """
    if qubit_a == qubit_b:
        raise DuplicateIndex("qubit_a and qubit_b must differ")
    for q in (qubit_a, qubit_b):
        _check_qubit(register, q)
    probabilities = register.probabilities()
    indices = np.arange(register.dimension)
    bits_a = (indices >> qubit_a) & 1
    bits_b = (indices >> qubit_b) & 1

    joint = np.zeros((2, 2))
    np.add.at(joint, (bits_a, bits_b), probabilities)
    return joint


def extract_bitstring_distribution(register: QubitRegister) -> Dict[str, float]:
    """
    Full probability distribution over bitstrings.

    Bitstrings are written most significant bit (highest qubit) first, the
    same order random_draw reports.
    """
    n = register.num_qubits
    if n > MAX_DISTRIBUTION_QUBITS:
        raise ValueError(f"Cannot compute full distribution for {n} qubits. "
                        "Use sampling instead.")

    probabilities = register.probabilities()
    return {
        format(i, f'0{n}b'): float(p)
        for i, p in enumerate(probabilities)
    }
