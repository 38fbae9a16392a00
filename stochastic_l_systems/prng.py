"""
Pseudorandom number generator used to choose between stochastic productions.

A small xorshift128 generator with four 32-bit words of state. It can be
seeded from a timer or, when reproducible runs are wanted (tests, debugging),
from a fixed integer.
"""

import logging
import random
import time
from typing import List, Optional, Protocol

logger = logging.getLogger(__name__)

MASK32 = 0xFFFFFFFF


class UniformSource(Protocol):
    """Anything that can hand out uniform samples in [0, 1]."""

    def next_float01(self) -> float:
        ...


class XorShift128:
    """
    xorshift128 PRNG.

    Args:
        seed: Seed value. None or a negative number means "unspecified" and
            seeds from the high-resolution timer.
    """

    def __init__(self, seed: Optional[int] = None):
        self.state: List[int] = [0, 0, 0, 0]
        self.seed_value: int = 0
        self.seed(seed)

    def seed(self, value: Optional[int] = None) -> int:
        """
        (Re)seed the generator.

        The four state words are drawn from a Mersenne Twister seeded with
        the given value, so equal seeds give equal sequences.

        Returns:
            int: The seed actually used.
        """
        if value is None or value < 0:
            value = time.perf_counter_ns() & 0x7FFF

        seeder = random.Random(value)
        self.state = [seeder.getrandbits(32) for _ in range(4)]

        # xorshift never leaves the all-zero state
        if not any(self.state):
            self.state[0] = 1

        self.seed_value = value
        logger.debug("PRNG seeded with %d", value)
        return value

    def next_uint(self) -> int:
        """Return a pseudorandom unsigned 32-bit integer."""
        w = self.state
        s = w[3]
        s ^= (s << 11) & MASK32
        s ^= s >> 8

        w[3] = w[2]
        w[2] = w[1]
        w[1] = w[0]

        s ^= w[0]
        s ^= w[0] >> 19

        w[0] = s
        return s

    def next_uint_in_range(self, lo: int, hi: int) -> int:
        """Return a pseudorandom integer r with lo <= r <= hi."""
        return self.next_uint() % (hi - lo + 1) + lo

    def next_float01(self) -> float:
        """Return a pseudorandom float in [0, 1]."""
        return self.next_uint() / MASK32
