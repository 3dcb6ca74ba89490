# Integral over [0, 1)^d as the fraction of uniform points inside the region
import logging
import math

from rng import create

logger = logging.getLogger("mcbench.quadrature")


class MonteCarloIntegration:
    def __init__(self, source, dimension, seed=None):
        if dimension < 1:
            raise ValueError(f"Dimension must be at least 1, got {dimension}")
        self.rng = create(source, seed)
        self.dimension = dimension
        self.inside = 0
        self.total = 0

    def integrate(self, n):
        result = 0.0
        self.inside = 0
        self.total = 0

        while self.total < n:
            if self.is_inside(self.generate_u01()):
                self.inside += 1

            self.total += 1
            result = self.inside / self.total

        logger.debug("%s: %d/%d points inside", self.rng, self.inside, self.total)
        return result

    def is_inside(self, point):
        raise NotImplementedError

    def generate_u01(self):
        return [self.rng.next_double() for _ in range(self.dimension)]


class RegionIntegration(MonteCarloIntegration):
    def __init__(self, source, dimension, predicate, seed=None):
        super().__init__(source, dimension, seed)
        self.predicate = predicate

    def is_inside(self, point):
        return self.predicate(point)


class ComputePi(MonteCarloIntegration):
    DIMENSION = 2

    def __init__(self, source, seed=None):
        super().__init__(source, self.DIMENSION, seed)

    def compute(self, num_points):
        return 4 * self.integrate(num_points)

    def is_inside(self, point):
        r2 = point[0] * point[0] + point[1] * point[1]
        return r2 <= 1


def compute_pi_error(source, num_points, seed=None):
    pi_mc = ComputePi(source, seed).compute(num_points)
    error = abs(pi_mc - math.pi)
    print(f"After generating {ComputePi.DIMENSION * num_points} random numbers, "
          f"the error on pi is {error}")
    return pi_mc
