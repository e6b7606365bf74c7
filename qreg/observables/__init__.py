"""Observable computation components."""

from qreg.observables.marginals import extract_marginals
from qreg.observables.sampler import estimate_counts, sample_bitstrings

__all__ = ["extract_marginals", "estimate_counts", "sample_bitstrings"]
