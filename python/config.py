"""
Defaults shared by the probes and the command line.

MCBENCH_SEED, MCBENCH_LOG_LEVEL and MCBENCH_LOG_FILE in the environment
override the seed used by CLI runs, the logging level and the log file.
"""
import logging
import os

GAUSSIAN_NUM_SAMPLES = 10_000_000
PI_NUM_POINTS = 5_000_000
VISUAL_IMAGE_SIZE = 512

# Parallel pi workers are seeded BASE_SEED + i * SEED_STRIDE
BASE_SEED = 12345
SEED_STRIDE = 67890

MAX_NAME_WIDTH = 20


def get_seed():
    value = os.environ.get("MCBENCH_SEED")
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"MCBENCH_SEED must be an integer, got {value!r}") from None


def get_log_level():
    name = os.environ.get("MCBENCH_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in MCBENCH_LOG_LEVEL: {name}")
    return level


def get_log_file():
    return os.environ.get("MCBENCH_LOG_FILE") or None
