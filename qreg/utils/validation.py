"""
Validation utilities for qreg.

Compares the register engine against a dense tensor-product reference and,
when installed, against Qiskit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from qreg.core.register import GateLike, QubitRegister
from qreg.utils.random_states import random_register, random_unitary

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of validating the engine against a reference simulation."""
    max_error: float
    passed: bool
    threshold: float
    details: Dict[str, Any] = field(default_factory=dict)


def embed_operator(gate: GateLike, qubits: Sequence[int], num_qubits: int) -> np.ndarray:
    """
    Full 2**n x 2**n operator of a gate acting on `qubits`.

    Built as kron(I, gate) in a reordered basis where the chosen qubits
    occupy the low bits (qubits[j] at bit j) and the untouched qubits the
    high bits, then permuted back to the global basis.
    """
    u = QubitRegister._gate_array(gate)
    k = len(qubits)
    rest = [q for q in range(num_qubits) if q not in qubits]
    op = np.kron(np.eye(1 << (num_qubits - k), dtype=np.complex128), u)

    indices = np.arange(1 << num_qubits)
    reordered = np.zeros_like(indices)
    for j, q in enumerate(list(qubits) + rest):
        reordered |= ((indices >> q) & 1) << j
    return op[np.ix_(reordered, reordered)]


def tensor_product_reference(
    register: QubitRegister,
    gate: GateLike,
    qubits: Sequence[int]
) -> np.ndarray:
    """Amplitudes after applying the gate through the full operator."""
    return embed_operator(gate, qubits, register.num_qubits) @ register.as_numpy()


def validate_against_reference(
    register: QubitRegister,
    circuit: Sequence[Tuple[GateLike, Sequence[int]]],
    threshold: float = 1e-9
) -> ValidationResult:
    """
    Run a gate sequence through the engine and through the dense reference.

    Args:
        register: Initial state, left untouched
        circuit: Sequence of (gate, qubit indices)
        threshold: Maximum allowed amplitude error

    Returns:
        ValidationResult with comparison data
    """
    engine = register.copy()
    expected = register.as_numpy()
    for gate, qubits in circuit:
        engine.apply(gate, *qubits)
        expected = embed_operator(gate, qubits, register.num_qubits) @ expected

    max_error = float(np.max(np.abs(engine.as_numpy() - expected)))
    passed = max_error <= threshold
    logger.info("Reference validation: %d gates, max error %.3e, %s",
                len(circuit), max_error, "passed" if passed else "failed")
    return ValidationResult(
        max_error=max_error,
        passed=passed,
        threshold=threshold,
        details={"num_qubits": register.num_qubits, "num_gates": len(circuit)},
    )


def validate_against_qiskit(
    register: QubitRegister,
    circuit: Sequence[Tuple[GateLike, Sequence[int]]],
    threshold: float = 1e-9
) -> ValidationResult:
    """
    Same comparison as validate_against_reference, using Qiskit's Statevector.

    Qiskit orders operator subsystems little-endian, so qargs[0] is the
    least significant local bit, which is the ordering QubitRegister uses.
    """
    try:
        from qiskit.quantum_info import Operator, Statevector
    except ImportError:
        raise ImportError("Qiskit required for validation")

    engine = register.copy()
    sv = Statevector(register.as_numpy())
    for gate, qubits in circuit:
        engine.apply(gate, *qubits)
        sv = sv.evolve(Operator(QubitRegister._gate_array(gate)), qargs=list(qubits))

    max_error = float(np.max(np.abs(engine.as_numpy() - sv.data)))
    passed = max_error <= threshold
    logger.info("Qiskit validation: %d gates, max error %.3e, %s",
                len(circuit), max_error, "passed" if passed else "failed")
    return ValidationResult(
        max_error=max_error,
        passed=passed,
        threshold=threshold,
        details={"num_qubits": register.num_qubits, "num_gates": len(circuit)},
    )


def random_circuit(
    num_qubits: int,
    depth: int,
    rng: np.random.Generator,
    max_gate_qubits: int = 3
) -> List[Tuple[np.ndarray, Tuple[int, ...]]]:
    """
    Random gate sequence on random ascending qubit subsets.

    Subsets are drawn without regard to adjacency, so non-contiguous
    targets are common.
    """
    circuit = []
    for _ in range(depth):
        k = int(rng.integers(1, min(max_gate_qubits, num_qubits) + 1))
        qubits = tuple(sorted(int(q) for q in rng.choice(num_qubits, size=k, replace=False)))
        circuit.append((random_unitary(1 << k, rng), qubits))
    return circuit


def quick_validation(
    num_qubits: int = 5,
    depth: int = 10,
    seed: int = 42
) -> ValidationResult:
    """
    Quick validation with a random circuit.

    Useful for sanity checking an installation.
    """
    rng = np.random.default_rng(seed)
    register = random_register(num_qubits, rng)
    circuit = random_circuit(num_qubits, depth, rng)
    return validate_against_reference(register, circuit)
