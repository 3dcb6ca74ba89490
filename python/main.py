#!/usr/bin/env python3
import sys
import time

from config import GAUSSIAN_NUM_SAMPLES, get_log_file, get_log_level, get_seed
from gaussian import run_gaussian_sampler
from generation import compare_sources
from logging_config import setup_logging
from monte_carlo import compute_pi, monte_carlo_operation
from quadrature import compute_pi_error
from rng import RandomSource, create
from visual_check import save_points

COMMANDS = {
    "pi": "<num_points> <source>",
    "estimate-pi": "<num_points> <source> [workers]",
    "gaussian": "[num_samples]",
    "generation": "<num_values> [source ...]",
    "visual": "<output_image> <num_points> <source>",
    "sources": "",
}


def usage(prog):
    print(f"Usage: {prog} <command> [args]")
    for name, args in COMMANDS.items():
        print(f"  {name} {args}".rstrip())


def run(command, args, seed):
    if command == "pi":
        num_points = int(args[0])
        compute_pi_error(args[1], num_points, seed)

    elif command == "estimate-pi":
        num_points = int(args[0])
        source = RandomSource.from_name(args[1])
        num_workers = int(args[2]) if len(args) > 2 else 1

        start_time = time.time()
        if num_workers == 1:
            compute_pi(create(source, seed), num_points)
        else:
            monte_carlo_operation(num_points, num_workers, source, seed)
        print(f"Pi estimation took {(time.time() - start_time) * 1000:.2f}ms")

    elif command == "gaussian":
        num_samples = int(args[0]) if args else GAUSSIAN_NUM_SAMPLES
        elapsed = run_gaussian_sampler(num_samples, create(RandomSource.JDK, seed))
        print(f"Gaussian sampling took {elapsed:.2f}ms")

    elif command == "generation":
        num_values = int(args[0])
        sources = [RandomSource.from_name(name) for name in args[1:]] or None
        compare_sources(num_values, sources, seed)

    elif command == "visual":
        output_path = args[0]
        num_points = int(args[1])
        save_points(create(args[2], seed), num_points, output_path)
        print(f"Saved {num_points} points to {output_path}")

    elif command == "sources":
        for source in RandomSource:
            print(source.name)


def main(argv=None):
    if argv is None:
        argv = sys.argv
    prog = argv[0]

    if len(argv) < 2 or argv[1].lower() not in COMMANDS:
        usage(prog)
        sys.exit(1)

    command = argv[1].lower()
    args = argv[2:]
    required = sum(1 for a in COMMANDS[command].split() if a.startswith("<"))
    if len(args) < required:
        print(f"Usage: {prog} {command} {COMMANDS[command]}")
        sys.exit(1)

    try:
        setup_logging(get_log_level(), get_log_file())
        run(command, args, get_seed())
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
