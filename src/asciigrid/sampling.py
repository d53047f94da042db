import numpy as np
from loguru import logger
from PIL import Image

from asciigrid.engine import Strategy


def sample_pixels(image: Image.Image, strategy: Strategy) -> np.ndarray:
    """Copy an image into a dense (height, width, 4) uint8 RGBA grid, one row per task."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    source = np.asarray(image)
    height, width = source.shape[:2]
    if height == 0 or width == 0:
        raise ValueError(f"Source image must not be empty, got {width}x{height}")

    pixels = np.empty((height, width, 4), dtype=np.uint8)

    def fill_row(y: int) -> None:
        # each task writes only its own row
        pixels[y, :, :] = source[y, :, :]

    strategy.map(fill_row, range(height))
    logger.debug("Sampled {}x{} source pixels", width, height)
    return pixels
