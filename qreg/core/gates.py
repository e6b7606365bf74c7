"""
Constant gate matrices.

The register engine accepts any unitary, these constants only cover the
usual catalog. Both the numpy arrays and the Matrix values are read-only.
For two-qubit gates the first qubit passed to QubitRegister.apply is the
least significant local bit, so CNOT applied to (target, control) flips
the target when the control is set.
"""

from __future__ import annotations

import numpy as np

from qreg.core.complex import Complex
from qreg.core.matrix import Matrix


def _readonly(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


PAULI_I = _readonly(np.array([[1, 0], [0, 1]], dtype=np.complex128))
PAULI_X = _readonly(np.array([[0, 1], [1, 0]], dtype=np.complex128))
PAULI_Y = _readonly(np.array([[0, -1j], [1j, 0]], dtype=np.complex128))
PAULI_Z = _readonly(np.array([[1, 0], [0, -1]], dtype=np.complex128))
HADAMARD = _readonly(np.array([[1, 1], [1, -1]], dtype=np.complex128) / np.sqrt(2))

# Basis order |q_hi q_lo>: 00, 01, 10, 11. Control is the high local bit.
CNOT_MATRIX = _readonly(np.array([
    [1, 0, 0, 0],
    [0, 1, 0, 0],
    [0, 0, 0, 1],
    [0, 0, 1, 0]
], dtype=np.complex128))

SWAP_MATRIX = _readonly(np.array([
    [1, 0, 0, 0],
    [0, 0, 1, 0],
    [0, 1, 0, 0],
    [0, 0, 0, 1]
], dtype=np.complex128))


I2 = Matrix.from_numpy(PAULI_I, Complex).freeze()
X = Matrix.from_numpy(PAULI_X, Complex).freeze()
Y = Matrix.from_numpy(PAULI_Y, Complex).freeze()
Z = Matrix.from_numpy(PAULI_Z, Complex).freeze()
H = Matrix.from_numpy(HADAMARD, Complex).freeze()
CNOT = Matrix.from_numpy(CNOT_MATRIX, Complex).freeze()
SWAP = Matrix.from_numpy(SWAP_MATRIX, Complex).freeze()
