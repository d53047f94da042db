from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from asciigrid.charsets import PRESETS


class ConversionOptions(BaseModel):
    """Settings for one conversion."""

    width: int | None = Field(default=None, ge=1, description="Target width in characters. Derived from height when omitted.")
    height: int | None = Field(default=None, ge=1, description="Target height in characters. Derived from width when omitted.")
    invert: bool = Field(default=False, description="Swap which end of the density ramp represents dark.")
    colour: bool = Field(default=False, description="Wrap each character in a 24-bit foreground colour escape.")
    uniform: bool = Field(default=False, description="Use the densest character everywhere; requires colour.")
    parallel: bool = Field(default=True, description="Sample and reduce rows on a thread pool.")
    workers: int | None = Field(default=None, ge=1, description="Thread pool size. Defaults to the executor's choice.")
    ramp: str = Field(default="standard", description="Name of the density ramp preset.", examples=sorted(PRESETS))

    @model_validator(mode="after")
    def _check_flags(self) -> ConversionOptions:
        if self.uniform and not self.colour:
            raise ValueError("uniform requires colour")
        if self.ramp not in PRESETS:
            raise ValueError(f"unknown ramp {self.ramp!r}")
        return self

    @property
    def grayscale(self) -> bool:
        return not self.colour
