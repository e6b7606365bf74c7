"""
Bitstring sampling for qreg.

Every sample measures an independent copy, so the source state is never
collapsed.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Tuple, Union

import numpy as np

from qreg.core.complex import Complex
from qreg.core.errors import IndexOutOfRange
from qreg.core.matrix import Matrix
from qreg.core.qubit import Qubit
from qreg.core.register import QubitRegister

GateStep = Union[Matrix[Complex], np.ndarray]
RegisterStep = Tuple[GateStep, Sequence[int]]


def _bits_to_string(bits: Sequence[bool]) -> str:
    return ''.join('1' if b else '0' for b in bits)


def sample_bitstrings(
    register: QubitRegister,
    num_samples: int,
    rng: np.random.Generator
) -> List[str]:
    """
    Sample bitstrings from the register.

    Args:
        register: Source register, left untouched
        num_samples: Number of bitstrings to sample
        rng: Random generator shared by all draws

    Returns:
        List of sampled bitstrings, most significant bit first
    """
    if num_samples < 0:
        raise ValueError(f"num_samples must be >= 0, got {num_samples}")

    samples = []
    for _ in range(num_samples):
        bits = register.copy().random_draw(rng)
        samples.append(_bits_to_string(bits))

    return samples


def estimate_counts(
    register: QubitRegister,
    num_samples: int,
    rng: np.random.Generator
) -> Dict[str, int]:
    """
    Sample and return counts.

    Returns:
        Dictionary mapping bitstring -> count
    """
    samples = sample_bitstrings(register, num_samples, rng)
    return dict(Counter(samples))


def count_register_outcomes(
    register: QubitRegister,
    circuit: Sequence[RegisterStep],
    num_samples: int,
    rng: np.random.Generator,
    position: int
) -> int:
    """
    Count draws where the bit at `position` is 1.

    Each trial copies the register, applies the gate steps (gate, qubits)
    in order, then measures. `position` indexes the drawn tuple, so 0 is
    the highest qubit.
    """
    ctr = 0
    for _ in range(num_samples):
        trial = register.copy()
        for gate, qubits in circuit:
            trial.apply(gate, *qubits)
        if trial.random_draw(rng)[position]:
            ctr += 1
    return ctr


def count_ones(
    qubit: Qubit,
    gates: Sequence[GateStep],
    num_samples: int,
    rng: np.random.Generator
) -> int:
    """Count "1" outcomes over trials of copy, apply gates, measure."""
    ctr = 0
    for _ in range(num_samples):
        trial = qubit.copy()
        for gate in gates:
            trial.apply(gate)
        if trial.random_draw(rng):
            ctr += 1
    return ctr


def correlation_failures(
    register: QubitRegister,
    qubit_a: int,
    qubit_b: int,
    num_samples: int,
    rng: np.random.Generator
) -> int:
    """
    Number of draws in which the two qubits disagree.

    For a Bell pair the result is always zero.
    """
    n = register.num_qubits
    for q in (qubit_a, qubit_b):
        if not 0 <= q < n:
            raise IndexOutOfRange(f"Qubit index {q} out of range [0, {n})")
    failures = 0
    for _ in range(num_samples):
        bits = register.copy().random_draw(rng)
        if bits[n - 1 - qubit_a] != bits[n - 1 - qubit_b]:
            failures += 1
    return failures


def roughly_equal(
    ctr1: int,
    ctr2: int,
    trials: int,
    threshold: float = 0.05
) -> bool:
    """True when two outcome counters differ by at most trials * threshold."""
    margin = int(trials * threshold)
    return abs(ctr1 - ctr2) <= margin


def counts_to_marginals(counts: Dict[str, int]) -> Dict[int, float]:
    """
    Estimate P(qubit = 1) for every qubit from measurement counts.

    Returns:
        Dictionary mapping qubit index -> estimated probability of 1
    """
    total = sum(counts.values())
    if total == 0:
        return {}
    n = len(next(iter(counts)))
    estimates = {}
    for q in range(n):
        ones = sum(c for bitstring, c in counts.items() if bitstring[n - 1 - q] == '1')
        estimates[q] = ones / total
    return estimates
