"""Utility functions for qreg."""

from qreg.utils.random_states import random_qubit, random_register, random_unitary
from qreg.utils.validation import validate_against_reference

__all__ = ["random_qubit", "random_register", "random_unitary", "validate_against_reference"]
