"""
Seed entropy sources.

Noise generators never reach for a process-wide random generator. When a
seed is not supplied, one is drawn from an EntropySource handed to the
factory, so tests can pass a SeededEntropy and get repeatable seeds.
"""

import secrets
from typing import Optional, Protocol

import numpy as np

# Seeds are drawn in [0, INT32_MAX)
INT32_MAX = 2**31 - 1


class EntropySource(Protocol):
    """Anything that can hand out a fresh noise seed."""

    def draw_seed(self) -> int:
        ...


class SystemEntropy:
    """Seeds from the operating system's entropy pool."""

    def draw_seed(self) -> int:
        return secrets.randbits(32) % INT32_MAX


class SeededEntropy:
    """
    Deterministic entropy backed by NumPy's default generator.

    Two instances built from the same seed hand out the same
    sequence of noise seeds.
    """

    def __init__(self, seed: int):
        self._rng = np.random.default_rng(seed)
        # Number of seeds handed out so far
        self.call_count = 0

    def draw_seed(self) -> int:
        self.call_count += 1
        return int(self._rng.integers(0, INT32_MAX))


def resolve_entropy(entropy: Optional[EntropySource] = None) -> EntropySource:
    """
    Return the given entropy source, or system entropy if none was given.

    Args:
        entropy: Optional caller-supplied source

    Returns:
        EntropySource instance
    """
    if entropy is None:
        return SystemEntropy()
    return entropy
