from collections.abc import Iterator
from pathlib import Path

from loguru import logger
from PIL import Image, ImageSequence

from asciigrid.charsets import DensityRamp
from asciigrid.config import ConversionOptions
from asciigrid.converter import image_to_art, load_image
from asciigrid.dimensions import resolve_dimensions
from asciigrid.model import AsciiArt


def pick_frames(total: int, count: int | None) -> list[int]:
    """Indices of ``count`` frames spread evenly over ``total``; all of them when count is None."""
    if count is None or count >= total:
        return list(range(total))
    if count < 1:
        raise ValueError(f"Frame count must be positive, got {count}")
    return [i * total // count for i in range(count)]


def frames_to_art(
    image: Image.Image | str | Path,
    options: ConversionOptions | None = None,
    count: int | None = None,
    ramp: DensityRamp | None = None,
) -> Iterator[AsciiArt]:
    """Convert every selected frame of a multi-frame image.

    The grid is resolved once from the first frame so every frame has the same shape.
    """
    if options is None:
        options = ConversionOptions()
    if not isinstance(image, Image.Image):
        with load_image(image) as opened:
            yield from frames_to_art(opened, options, count=count, ramp=ramp)
        return

    total = getattr(image, "n_frames", 1)
    wanted = set(pick_frames(total, count))
    grid = resolve_dimensions(options.width, options.height, image.width, image.height)
    logger.info("Converting {} of {} frames at {}x{}", len(wanted), total, grid.width, grid.height)

    for index, frame in enumerate(ImageSequence.Iterator(image)):
        if index in wanted:
            yield image_to_art(frame, options, ramp=ramp, grid=grid)


def save_frames(frames: Iterator[AsciiArt], directory: str | Path) -> int:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    written = 0
    for written, art in enumerate(frames, start=1):
        art.save(directory / f"frame_{written:05d}.txt")
    return written
