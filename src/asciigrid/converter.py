from pathlib import Path

import numpy as np
from loguru import logger
from PIL import Image, UnidentifiedImageError

from asciigrid.charsets import DensityRamp, classify
from asciigrid.config import ConversionOptions
from asciigrid.dimensions import TargetGrid, resolve_dimensions
from asciigrid.engine import get_strategy
from asciigrid.errors import DecodeError
from asciigrid.model import AsciiArt
from asciigrid.reduction import reduce_grid
from asciigrid.sampling import sample_pixels


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image, turning Pillow's failures into DecodeError."""
    try:
        image = Image.open(path)
        image.load()
    except (OSError, UnidentifiedImageError) as exc:
        raise DecodeError(f"Cannot decode {path}: {exc}") from exc
    return image


def _to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit integer images (I, I;16, ...) down to L; Pillow's convert would clip them."""
    samples = np.asarray(image).astype(np.int64) >> 8
    return Image.fromarray(np.clip(samples, 0, 255).astype(np.uint8), "L")


def _prepare(image: Image.Image, grayscale: bool) -> Image.Image:
    if image.mode.startswith("I"):
        image = _to_8bit(image)
    # grayscale keeps alpha so transparency still darkens the result
    if grayscale:
        return image.convert("RGBA").convert("LA").convert("RGBA")
    if image.mode == "RGBA":
        return image
    return image.convert("RGBA")


def image_to_art(
    image: Image.Image | str | Path,
    options: ConversionOptions | None = None,
    ramp: DensityRamp | None = None,
    grid: TargetGrid | None = None,
) -> AsciiArt:
    """Run the full pipeline on one image.

    ``grid`` overrides the sizing in ``options``; frame sequences pass the
    grid resolved for their first frame.
    """
    if options is None:
        options = ConversionOptions()
    if ramp is None:
        ramp = DensityRamp.preset(options.ramp)
    if not isinstance(image, Image.Image):
        with load_image(image) as opened:
            return image_to_art(opened, options, ramp=ramp, grid=grid)

    strategy = get_strategy(options.parallel, options.workers)
    pixels = sample_pixels(_prepare(image, options.grayscale), strategy)
    source_height, source_width = pixels.shape[:2]
    if grid is None:
        grid = resolve_dimensions(options.width, options.height, source_width, source_height)
    logger.debug("Source {}x{}, target grid {}x{}", source_width, source_height, grid.width, grid.height)

    cells = reduce_grid(pixels, grid, strategy, grayscale=options.grayscale)
    return classify(cells, ramp, invert=options.invert, uniform=options.uniform, colour=options.colour)


def image_to_ascii(
    image: Image.Image | str | Path,
    width: int | None = None,
    height: int | None = None,
    invert: bool = False,
    colour: bool = False,
    uniform: bool = False,
    parallel: bool = True,
    ramp: DensityRamp | None = None,
) -> str:
    options = ConversionOptions(
        width=width, height=height, invert=invert, colour=colour, uniform=uniform, parallel=parallel
    )
    return image_to_art(image, options, ramp=ramp).render()
