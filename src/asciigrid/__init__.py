from loguru import logger

from asciigrid.charsets import DensityRamp
from asciigrid.config import ConversionOptions
from asciigrid.converter import image_to_art, image_to_ascii, load_image
from asciigrid.dimensions import TargetGrid, resolve_dimensions
from asciigrid.errors import AsciiGridError, DecodeError
from asciigrid.model import AsciiArt, Cell, ColorChar

logger.disable("asciigrid")

__all__ = [
    "AsciiArt",
    "AsciiGridError",
    "Cell",
    "ColorChar",
    "ConversionOptions",
    "DecodeError",
    "DensityRamp",
    "TargetGrid",
    "image_to_art",
    "image_to_ascii",
    "load_image",
    "resolve_dimensions",
]
