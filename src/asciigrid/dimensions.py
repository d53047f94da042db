import math
from dataclasses import dataclass

# Terminal character cells are about twice as tall as they are wide.
CELL_ASPECT = 2


@dataclass(frozen=True)
class TargetGrid:
    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Target grid must be at least 1x1, got {self.width}x{self.height}")


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: int, upper: int) -> int:
    return max(1, min(value, upper))


def resolve_dimensions(
    width: int | None,
    height: int | None,
    source_width: int,
    source_height: int,
) -> TargetGrid:
    """Work out the character grid for a source image.

    A missing dimension is derived from the given one, corrected for the
    tall shape of terminal cells. When both are given each is only clamped
    to its source bound, with no aspect correction.
    """
    if source_width < 1 or source_height < 1:
        raise ValueError(f"Source image must not be empty, got {source_width}x{source_height}")
    for name, value in (("width", width), ("height", height)):
        if value is not None and value < 1:
            raise ValueError(f"Target {name} must be positive, got {value}")

    if width is None and height is None:
        return TargetGrid(source_width, source_height)
    if height is None:
        derived = _round(width * (source_height / source_width) / CELL_ASPECT)
        return TargetGrid(_clamp(width, source_width), _clamp(derived, source_height))
    if width is None:
        derived = _round(height * (source_width / source_height) * CELL_ASPECT)
        return TargetGrid(_clamp(derived, source_width), _clamp(height, source_height))
    return TargetGrid(_clamp(width, source_width), _clamp(height, source_height))
