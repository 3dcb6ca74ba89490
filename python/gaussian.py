import logging
import time

from config import GAUSSIAN_NUM_SAMPLES
from rng import RandomSource, create

logger = logging.getLogger("mcbench.gaussian")


class Sink:
    """Consumes generated values so every draw is observed."""

    def __init__(self):
        self.count = 0
        self.last = None

    def consume(self, value):
        self.count += 1
        self.last = value


def run_gaussian_sampler(num_samples=GAUSSIAN_NUM_SAMPLES, rng=None, sink=None):
    if rng is None:
        rng = create(RandomSource.JDK)
    if sink is None:
        sink = Sink()

    start_time = time.time()
    for _ in range(num_samples):
        sink.consume(rng.next_gaussian())
    elapsed = (time.time() - start_time) * 1000

    logger.info("%d Gaussian samples from %s in %.2fms", sink.count, rng, elapsed)
    return elapsed
