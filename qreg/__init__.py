"""
qreg - dense state-vector simulation of qubit registers.

Complex amplitudes, unitary gates on arbitrary qubit subsets, and
projective measurement.
"""

from qreg.core.complex import Complex
from qreg.core.matrix import Matrix, Vector
from qreg.core.qubit import Qubit
from qreg.core.register import QubitRegister

__version__ = "0.1.0"
__all__ = ["Complex", "Matrix", "Vector", "Qubit", "QubitRegister"]
