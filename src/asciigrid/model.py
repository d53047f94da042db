from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from asciigrid.terminal import RESET, fg_escape

RGB = tuple[int, int, int]

WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)


@dataclass(frozen=True)
class Cell:
    """Averaged luminance (0-255) and colour of one source window."""

    luminance: int
    colour: RGB


@dataclass(frozen=True)
class ColorChar:
    char: str
    colour: RGB | None = None

    @property
    def invisible(self) -> bool:
        """A black space draws nothing on a terminal."""
        return self.char == " " and self.colour == BLACK

    def encode(self) -> str:
        if self.colour is None:
            return self.char
        return f"{fg_escape(*self.colour)}{self.char}{RESET}"


@dataclass
class AsciiArt:
    rows: list[list[ColorChar]]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def render(self) -> str:
        lines = []
        for row in self.rows:
            # invisible cells are dropped rather than coloured
            lines.append("".join(c.encode() for c in row if not c.invisible))
        return "\n".join(lines)

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.render(), encoding="utf-8")

    def __str__(self) -> str:
        return self.render()
