"""
twisterkit: a small Mersenne Twister facade
- Seeded or entropy-seeded construction
- Uniform integer / real and normal sampling
- In-place reseeding
- Move-only ownership of the engine state
- Goodness-of-fit diagnostics for drawn samples
"""

from .utils import make_engine, entropy_seed
from .generator import RandomTwister, EmptyGeneratorError, swap
from .stats import (
    uniformity_pvalue,
    discrete_uniformity_pvalue,
    normality_pvalue,
    mean_zscore,
)

__all__ = [
    "RandomTwister",
    "EmptyGeneratorError",
    "swap",
    "make_engine",
    "entropy_seed",
    "uniformity_pvalue",
    "discrete_uniformity_pvalue",
    "normality_pvalue",
    "mean_zscore",
]

__version__ = "2026.10.0"
