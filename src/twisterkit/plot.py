from __future__ import annotations

from typing import Any, Callable
import numpy as np
import matplotlib.pyplot as plt


def plot_samples(
    samples: np.ndarray,
    density: Callable[[np.ndarray], np.ndarray] | None = None,
    bins: int = 50,
    ax: Any | None = None,
) -> Any:
    """
    Histogram the samples as a density; optionally overlay the expected pdf.
    """
    if ax is None:
        fig, ax = plt.subplots()
        _ = fig  # silence linters if unused
    x = np.asarray(samples, dtype=float).ravel()
    ax.hist(x, bins=bins, density=True, alpha=0.6, label=f"samples (n={x.size})")
    if density is not None:
        grid = np.linspace(x.min(), x.max(), 400)
        ax.plot(grid, density(grid), label="expected")
    ax.set_xlabel("value")
    ax.set_ylabel("density")
    ax.legend()
    return ax
