from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np
from numpy.typing import DTypeLike, NDArray

from .utils import coerce_seed, entropy_seed, make_engine

logger = logging.getLogger(__name__)

DEFAULT_MEAN = 0.0
DEFAULT_SIGMA = 1.0

Size = Union[None, int, tuple[int, ...]]

_REAL_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def _float32_bounds(low: float, high: float) -> tuple[np.float32, np.float32]:
    """Smallest and largest float32 values inside the real interval [low, high]."""
    lo = np.float32(low)
    if float(lo) < low:
        lo = np.nextafter(lo, np.float32(np.inf))
    hi = np.float32(high)
    if float(hi) > high:
        hi = np.nextafter(hi, np.float32(-np.inf))
    if lo > hi:
        raise ValueError(f"no float32 value lies in [{low}, {high}]")
    return lo, hi


class EmptyGeneratorError(RuntimeError):
    """Raised when a moved-from RandomTwister is asked to draw or reseed."""


class RandomTwister:
    """
    Convenience wrapper around a Mersenne Twister engine.

    Assumptions
    -----------
    - Cryptographic-quality randomness is not needed.
    - Holding ~2.5 kB of engine state per instance is acceptable.
    - An unsigned 32-bit seed carries enough entropy.

    If any of these do not hold, use ``secrets`` or ``numpy.random`` directly.

    Ownership
    ---------
    An instance exclusively owns its engine. Copying and pickling raise
    ``TypeError``; use ``moved_from``, ``move_from`` or ``swap`` to relocate
    the engine. A moved-from instance owns nothing and raises
    ``EmptyGeneratorError`` on use until it receives an engine again.

    Not thread-safe: use one instance per thread.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            self._seed = entropy_seed()
            logger.debug("seeding from OS entropy: %d", self._seed)
        else:
            self._seed = coerce_seed(seed)
        self._engine: Optional[np.random.Generator] = make_engine(self._seed)

    # --- ownership -----------------------------------------------------------

    @classmethod
    def moved_from(cls, other: "RandomTwister") -> "RandomTwister":
        """Build a new instance that takes over ``other``'s engine; ``other`` is emptied."""
        new = cls.__new__(cls)
        new._engine, other._engine = other._engine, None
        new._seed, other._seed = other._seed, None
        logger.debug("moved engine into new instance %#x", id(new))
        return new

    def move_from(self, other: "RandomTwister") -> "RandomTwister":
        """
        Take ``other``'s engine, dropping the one held so far.

        ``other`` is left empty. Moving an instance onto itself changes nothing.
        """
        if other is self:
            return self
        tmp = type(self).moved_from(other)
        self.swap(tmp)
        return self

    def swap(self, other: "RandomTwister") -> None:
        """Exchange engines with ``other``."""
        self._engine, other._engine = other._engine, self._engine
        self._seed, other._seed = other._seed, self._seed

    @property
    def owns_engine(self) -> bool:
        """Whether this instance currently holds an engine."""
        return self._engine is not None

    @property
    def seed(self) -> Optional[int]:
        """Last seed applied to the engine, or None once moved from."""
        return self._seed

    def _require_engine(self) -> np.random.Generator:
        if self._engine is None:
            raise EmptyGeneratorError(
                "RandomTwister no longer owns an engine (it was moved from)"
            )
        return self._engine

    def __copy__(self) -> "RandomTwister":
        raise TypeError("RandomTwister is not copyable; use RandomTwister.moved_from")

    def __deepcopy__(self, memo: dict) -> "RandomTwister":
        raise TypeError("RandomTwister is not copyable; use RandomTwister.moved_from")

    def __getstate__(self) -> dict:
        raise TypeError("RandomTwister state cannot be serialised")

    def __repr__(self) -> str:
        if self._engine is None:
            return "RandomTwister(<moved-from>)"
        return f"RandomTwister(seed={self._seed})"

    # --- seeding -------------------------------------------------------------

    def reseed(self, seed: int) -> None:
        """Reset the engine in place; the following draws depend only on ``seed``."""
        engine = self._require_engine()
        value = coerce_seed(seed)
        engine.bit_generator.state = np.random.MT19937(value).state
        self._seed = value
        logger.debug("reseeded engine with %d", value)

    # --- sampling ------------------------------------------------------------

    def uniform_int(
        self, low: int, high: int, size: Size = None, dtype: DTypeLike = np.int64
    ) -> Union[int, NDArray[np.integer]]:
        """
        Integer in [low, high], every value equally likely.

        ``low <= high`` is the caller's responsibility. Pass ``dtype`` to pick
        the integer type of array results; scalar draws are returned as ``int``.
        Bounds above ``2**63 - 1`` need ``dtype=np.uint64``; the default int64
        makes numpy reject them with ``ValueError``.
        """
        if not np.issubdtype(np.dtype(dtype), np.integer):
            raise TypeError(f"uniform_int needs an integer dtype, got {np.dtype(dtype)}")
        out = self._require_engine().integers(
            low, high, size=size, dtype=dtype, endpoint=True
        )
        if size is None:
            return int(out)
        return out

    def uniform_real(
        self, low: float, high: float, size: Size = None, dtype: DTypeLike = np.float64
    ) -> Union[float, NDArray[np.floating]]:
        """
        Float drawn uniformly from the real interval [low, high].

        The draw is uniform in real value, not over representable floats: a
        sub-interval of [0, 100] near 0 is hit as often as one of equal width
        near 100, even though doubles are denser near 0.

        With ``dtype=np.float32`` results are kept within the float32 values
        that lie inside [low, high]; ``ValueError`` is raised if there are none.
        """
        dt = np.dtype(dtype)
        if dt not in _REAL_DTYPES:
            raise ValueError(f"uniform_real supports float32 and float64, got {dt}")
        out = np.asarray(
            self._require_engine().uniform(low, high, size=size), dtype=dt
        )
        if dt == np.float32:
            # rounding to float32 may step outside [low, high]
            out = np.clip(out, *_float32_bounds(low, high))
        if size is None:
            return float(out)
        return out

    def uniform_probability(self, size: Size = None) -> Union[float, NDArray[np.float64]]:
        """Shorthand for ``uniform_real(0.0, 1.0)``."""
        return self.uniform_real(0.0, 1.0, size=size)

    def normal_real(
        self, mean: float = DEFAULT_MEAN, sigma: float = DEFAULT_SIGMA, size: Size = None
    ) -> Union[float, NDArray[np.float64]]:
        """Draw from N(mean, sigma**2); the default is a standard normal."""
        out = self._require_engine().normal(loc=mean, scale=sigma, size=size)
        if size is None:
            return float(out)
        return out


def swap(lhs: RandomTwister, rhs: RandomTwister) -> None:
    """Exchange the engines of two generators."""
    lhs.swap(rhs)
