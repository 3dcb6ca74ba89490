import logging
import time

from config import MAX_NAME_WIDTH
from gaussian import Sink
from rng import RandomSource, create

logger = logging.getLogger("mcbench.generation")


def time_next_double(rng, num_values, sink):
    start_time = time.time()
    for _ in range(num_values):
        sink.consume(rng.next_double())
    return (time.time() - start_time) * 1000


def compare_sources(num_values, sources=None, seed=None):
    if sources is None:
        sources = list(RandomSource)

    sink = Sink()
    timings = {}
    print(f"{'next_double()':<{MAX_NAME_WIDTH}} {num_values} values")
    for source in sources:
        rng = create(source, seed)
        elapsed = time_next_double(rng, num_values, sink)
        timings[str(rng)] = elapsed
        print(f"{str(rng):<{MAX_NAME_WIDTH}} {elapsed:.2f}ms")

    logger.debug("Consumed %d values", sink.count)
    return timings
