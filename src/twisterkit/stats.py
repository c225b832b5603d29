from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from scipy.stats import chisquare, kstest, norm, uniform

Samples = Union[Sequence[float], np.ndarray]


def _as_samples(samples: Samples) -> NDArray[np.float64]:
    arr = np.asarray(samples, dtype=float).ravel()
    if arr.size == 0:
        raise ValueError("need at least one sample")
    return arr


def uniformity_pvalue(samples: Samples, low: float, high: float) -> float:
    """
    Kolmogorov-Smirnov p-value of continuous samples against U(low, high).

    Small values (e.g. < 1e-3) mean the samples are unlikely to be uniform.
    """
    x = _as_samples(samples)
    res = kstest(x, uniform(loc=low, scale=high - low).cdf)
    return float(res.pvalue)


def discrete_uniformity_pvalue(samples: Samples, low: int, high: int) -> float:
    """
    Chi-square p-value of integer samples against the discrete uniform on [low, high].

    Every value in the range is one bin, so keep ``high - low`` small compared
    with the number of samples (at least ~5 expected hits per bin).
    """
    x = np.asarray(samples).ravel()
    if x.size == 0:
        raise ValueError("need at least one sample")
    if not np.issubdtype(x.dtype, np.integer) and np.any(x != np.round(x)):
        raise ValueError("samples must be integers")
    if x.min() < low or x.max() > high:
        raise ValueError(f"samples fall outside [{low}, {high}]")
    counts = np.bincount((x - low).astype(np.int64), minlength=high - low + 1)
    res = chisquare(counts)
    return float(res.pvalue)


def normality_pvalue(samples: Samples, mean: float = 0.0, sigma: float = 1.0) -> float:
    """Kolmogorov-Smirnov p-value of the samples against N(mean, sigma**2)."""
    x = _as_samples(samples)
    res = kstest(x, norm(loc=mean, scale=sigma).cdf)
    return float(res.pvalue)


def mean_zscore(samples: Samples, mean: float, sigma: float) -> float:
    """
    z-score of the sample mean:

        z = (mean(x) - mean) / (sigma / sqrt(n))

    |z| < 4 is comfortably within sampling noise.
    """
    x = _as_samples(samples)
    return float((x.mean() - mean) / (sigma / np.sqrt(x.size)))
