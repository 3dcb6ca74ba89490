import logging
import math
from multiprocessing import Pool

from config import BASE_SEED, SEED_STRIDE
from rng import create

logger = logging.getLogger("mcbench.monte_carlo")


def count_inside(rng, samples):
    inside = 0
    for _ in range(samples):
        x = rng.next_double()
        y = rng.next_double()
        if x*x + y*y <= 1.0:
            inside += 1
    return inside


def compute_pi(rng, num_points):
    if num_points <= 0:
        return 0.0

    pi = 4 * count_inside(rng, num_points) / num_points
    print(f"pi={pi}")
    return pi


def monte_carlo_worker(args):
    samples, source, seed = args
    return count_inside(create(source, seed), samples)


def monte_carlo_operation(total_samples, num_workers, source, seed=None):
    if num_workers < 1:
        raise ValueError(f"Number of workers must be at least 1, got {num_workers}")
    if seed is None:
        seed = BASE_SEED

    samples_per_worker = total_samples // num_workers
    remainder = total_samples % num_workers

    tasks = []
    for i in range(num_workers):
        samples = samples_per_worker
        if i == num_workers - 1:
            samples += remainder
        tasks.append((samples, source, seed + i * SEED_STRIDE))

    with Pool(processes=num_workers) as pool:
        results = pool.map(monte_carlo_worker, tasks)

    total_inside = sum(results)
    pi_estimate = 4.0 * total_inside / total_samples if total_samples > 0 else 0.0
    logger.info("%d workers finished: %s", num_workers, results)

    print(f"Monte Carlo Pi Estimation")
    print(f"Total samples: {total_samples}")
    print(f"Points inside circle: {total_inside}")
    print(f"Pi estimate: {pi_estimate:.6f}")
    print(f"Error: {math.pi - pi_estimate:.6f}")
    return pi_estimate
