import logging

import numpy as np
from PIL import Image

from config import VISUAL_IMAGE_SIZE

logger = logging.getLogger("mcbench.visual_check")

INSIDE_COLOR = (200, 30, 30)
OUTSIDE_COLOR = (30, 60, 200)
BACKGROUND = 255


def render_points(rng, num_points, size=VISUAL_IMAGE_SIZE):
    if size < 1:
        raise ValueError(f"Image size must be positive, got {size}")

    x = rng.next_doubles(num_points)
    y = rng.next_doubles(num_points)
    inside = x*x + y*y <= 1.0

    # Origin at the bottom-left corner
    cols = np.minimum((x * size).astype(np.int64), size - 1)
    rows = size - 1 - np.minimum((y * size).astype(np.int64), size - 1)

    img_array = np.full((size, size, 3), BACKGROUND, dtype=np.uint8)
    img_array[rows[inside], cols[inside]] = INSIDE_COLOR
    img_array[rows[~inside], cols[~inside]] = OUTSIDE_COLOR

    logger.debug("Rendered %d points (%d inside) from %s", num_points, int(inside.sum()), rng)
    return Image.fromarray(img_array)


def save_points(rng, num_points, output_path, size=VISUAL_IMAGE_SIZE):
    img = render_points(rng, num_points, size)
    img.save(output_path)
    return img
