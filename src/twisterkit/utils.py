from __future__ import annotations

import logging
import numbers

import numpy as np

logger = logging.getLogger(__name__)

# Seeds carry an unsigned long's worth of entropy.
SEED_MASK = 0xFFFFFFFF


def coerce_seed(seed: object) -> int:
    """Validate a user seed and reduce it to an unsigned 32-bit value."""
    if not isinstance(seed, numbers.Integral):
        raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
    value = int(seed)
    if value < 0:
        raise ValueError(f"seed must be non-negative, got {value}")
    return value & SEED_MASK


def entropy_seed() -> int:
    """Draw a fresh 32-bit seed from the operating system's entropy source."""
    return int(np.random.SeedSequence().generate_state(1, dtype=np.uint32)[0])


def make_engine(seed: int) -> np.random.Generator:
    """Create an MT19937-backed Generator for an already validated seed.

    The Mersenne Twister state is ~2.5 kB; a failed allocation raises
    MemoryError, which is left to the caller.
    """
    engine = np.random.Generator(np.random.MT19937(seed))
    logger.debug("created MT19937 engine with seed %d", seed)
    return engine
