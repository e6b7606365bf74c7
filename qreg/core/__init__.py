"""Core qreg components: scalar and matrix algebra, gates, qubits and registers."""

from qreg.core.complex import Complex
from qreg.core.config import DEFAULT_CONFIG, SimulatorConfig
from qreg.core.errors import (
    DimensionMismatch,
    DivisionByZero,
    DuplicateIndex,
    IndexOutOfRange,
    InvalidDimension,
    InvalidState,
    MissingArgument,
    QregError,
)
from qreg.core.field import FieldElement, Real
from qreg.core.gates import CNOT, H, I2, SWAP, X, Y, Z
from qreg.core.matrix import Matrix, Orientation, Vector
from qreg.core.qubit import Qubit
from qreg.core.register import QubitRegister

__all__ = [
    # Scalars
    "Complex",
    "FieldElement",
    "Real",
    # Linear algebra
    "Matrix",
    "Vector",
    "Orientation",
    # Gates
    "I2",
    "X",
    "Y",
    "Z",
    "H",
    "CNOT",
    "SWAP",
    # States
    "Qubit",
    "QubitRegister",
    # Configuration
    "SimulatorConfig",
    "DEFAULT_CONFIG",
    # Errors
    "QregError",
    "InvalidDimension",
    "IndexOutOfRange",
    "DimensionMismatch",
    "InvalidState",
    "DuplicateIndex",
    "MissingArgument",
    "DivisionByZero",
]
