import logging
import math
import os
import random
from enum import Enum

import numpy as np

logger = logging.getLogger("mcbench.rng")


class RandomSource(Enum):
    LCG = "lcg"
    JDK = "jdk"
    MT = "mt19937"
    PCG_64 = "pcg64"
    PCG_64_DXSM = "pcg64dxsm"
    PHILOX = "philox"
    SFC_64 = "sfc64"

    @classmethod
    def from_name(cls, name):
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(s.name for s in cls)
            raise ValueError(f"Unknown random source: {name} (expected one of {valid})") from None


class UniformRandomProvider:
    def __init__(self, source):
        self.source = source
        self._next_gaussian = None

    def next_double(self):
        raise NotImplementedError

    def next_gaussian(self):
        # Marsaglia polar method, second variate of each pair is cached
        if self._next_gaussian is not None:
            value = self._next_gaussian
            self._next_gaussian = None
            return value

        while True:
            v1 = 2.0 * self.next_double() - 1.0
            v2 = 2.0 * self.next_double() - 1.0
            s = v1 * v1 + v2 * v2
            if 0.0 < s < 1.0:
                break

        multiplier = math.sqrt(-2.0 * math.log(s) / s)
        self._next_gaussian = v2 * multiplier
        return v1 * multiplier

    def next_doubles(self, n):
        n = max(n, 0)
        return np.fromiter((self.next_double() for _ in range(n)), dtype=np.float64, count=n)

    def __str__(self):
        return self.source.name


# Linear Congruential Generator - same formula across all languages
class LCG(UniformRandomProvider):
    def __init__(self, seed):
        super().__init__(RandomSource.LCG)
        self.seed = seed & 0xFFFFFFFF

    def next_double(self):
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return (self.seed & 0x7FFFFFFF) / 0x80000000


class JDKRandom(UniformRandomProvider):
    def __init__(self, seed):
        super().__init__(RandomSource.JDK)
        self._rng = random.Random(seed)

    def next_double(self):
        return self._rng.random()

    def next_gaussian(self):
        return self._rng.gauss(0.0, 1.0)


class NumpyRandom(UniformRandomProvider):
    def __init__(self, source, bit_generator):
        super().__init__(source)
        self._generator = np.random.Generator(bit_generator)

    def next_double(self):
        return float(self._generator.random())

    def next_gaussian(self):
        return float(self._generator.standard_normal())

    def next_doubles(self, n):
        return self._generator.random(max(n, 0))


NUMPY_SEED_MASK = 2**128 - 1

_BIT_GENERATORS = {
    RandomSource.MT: np.random.MT19937,
    RandomSource.PCG_64: np.random.PCG64,
    RandomSource.PCG_64_DXSM: np.random.PCG64DXSM,
    RandomSource.PHILOX: np.random.Philox,
    RandomSource.SFC_64: np.random.SFC64,
}


def create(source, seed=None):
    if isinstance(source, str):
        source = RandomSource.from_name(source)

    if source is RandomSource.LCG:
        if seed is None:
            seed = int.from_bytes(os.urandom(4), "little")
        provider = LCG(seed)
    elif source is RandomSource.JDK:
        provider = JDKRandom(seed)
    else:
        # numpy bit generators only take non-negative seeds
        if seed is not None:
            seed &= NUMPY_SEED_MASK
        provider = NumpyRandom(source, _BIT_GENERATORS[source](seed))

    logger.debug("Created %s provider (seed=%s)", source.name, seed)
    return provider
