#!/usr/bin/env python3
"""
Random Source for Language Generation
=====================================
Single uniform random source shared by every generation engine.

Unseeded instances draw from secrets.SystemRandom() (the OS entropy pool).
Seeded instances use a private random.Random so a whole language can be
reproduced from one integer.

Usage:
    from conlangkit.generators.entropy import TrueRandom, get_rng

    rng = TrueRandom(seed=42)
    rng.choice(['p', 't', 'k'])
"""

import random as _random
import secrets
from typing import Any, Optional, Sequence


# =============================================================================
# Random Number Generator
# =============================================================================

class TrueRandom:
    """
    Uniform random source used by the phonology, lexicon and syntax engines.

    Wraps either secrets.SystemRandom (default) or a seeded random.Random.
    Only uniform draws are exposed; the generators never need weights.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        if seed is None:
            self._rng = secrets.SystemRandom()
        else:
            self._rng = _random.Random(seed)

    @property
    def seeded(self) -> bool:
        return self.seed is not None

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self._rng.random() < probability


# Global instance
_true_random = TrueRandom()


def get_rng(seed: Optional[int] = None) -> TrueRandom:
    """Get the shared random source, or a fresh seeded one."""
    if seed is not None:
        return TrueRandom(seed)
    return _true_random


__all__ = [
    'TrueRandom',
    'get_rng',
]
