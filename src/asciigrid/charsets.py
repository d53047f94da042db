from __future__ import annotations

from dataclasses import dataclass

from asciigrid.model import AsciiArt, Cell, ColorChar

# Ramps run from least to most ink.
STANDARD = " .:-=+*#%@"
DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"
BLOCKS = " ░▒▓█"
SIMPLE = " .oO@"

PRESETS = {
    "standard": STANDARD,
    "detailed": DETAILED,
    "blocks": BLOCKS,
    "simple": SIMPLE,
}


@dataclass(frozen=True)
class DensityRamp:
    chars: str

    def __post_init__(self):
        if len(self.chars) < 2:
            raise ValueError(f"Density ramp needs at least 2 characters, got {len(self.chars)}")

    @classmethod
    def preset(cls, name: str) -> DensityRamp:
        try:
            return cls(PRESETS[name])
        except KeyError:
            raise ValueError(f"Unknown ramp {name!r}, expected one of {', '.join(sorted(PRESETS))}") from None

    def __len__(self) -> int:
        return len(self.chars)

    @property
    def densest(self) -> str:
        return self.chars[-1]

    def index(self, luminance: int, invert: bool = False) -> int:
        """floor(luminance / 256 * N), read from the other end when inverted."""
        n = len(self.chars)
        idx = min(max(luminance * n // 256, 0), n - 1)
        return n - 1 - idx if invert else idx

    def select(self, luminance: int, invert: bool = False, uniform: bool = False) -> str:
        if uniform:
            return self.densest
        return self.chars[self.index(luminance, invert)]


def classify(
    cells: list[list[Cell]],
    ramp: DensityRamp,
    invert: bool = False,
    uniform: bool = False,
    colour: bool = False,
) -> AsciiArt:
    """Pick a character for every cell, keeping its colour only when colour output is on."""
    if uniform and not colour:
        raise ValueError("uniform characters only make sense with colour output")
    return AsciiArt(
        [
            [ColorChar(ramp.select(cell.luminance, invert, uniform), cell.colour if colour else None) for cell in row]
            for row in cells
        ]
    )
