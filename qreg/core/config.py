"""Numeric tolerances and limits shared by the simulator."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SimulatorConfig:
    """
    Tolerances used when comparing and validating states.

    Attributes:
        equality_tolerance: Per-component window for tolerant equality
        norm_tolerance: Allowed deviation of the squared norm from 1
        max_dense_qubits: Largest register that may be allocated
    """
    equality_tolerance: float = 1e-9
    norm_tolerance: float = 1e-3
    max_dense_qubits: int = 24

    def __post_init__(self):
        if self.equality_tolerance <= 0 or self.norm_tolerance <= 0:
            raise ValueError("Tolerances must be positive")
        if self.max_dense_qubits < 1:
            raise ValueError(f"max_dense_qubits must be >= 1, got {self.max_dense_qubits}")

    def with_overrides(self, **overrides) -> SimulatorConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def is_unit_norm(self, squared_norm: float) -> bool:
        return abs(squared_norm - 1.0) < self.norm_tolerance


DEFAULT_CONFIG = SimulatorConfig()
