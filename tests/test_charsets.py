import pytest

from asciigrid.charsets import BLOCKS, PRESETS, STANDARD, DensityRamp, classify
from asciigrid.model import Cell, ColorChar


def test_index_endpoints():
    ramp = DensityRamp(STANDARD)
    assert ramp.index(0) == 0
    assert ramp.index(255) == 9
    assert ramp.index(128) == 5


def test_invert_reverses_index():
    ramp = DensityRamp(STANDARD)
    assert ramp.index(0, invert=True) == 9
    assert ramp.index(255, invert=True) == 0
    for luminance in range(256):
        assert ramp.index(luminance) + ramp.index(luminance, invert=True) == 9


def test_index_is_monotonic():
    ramp = DensityRamp(BLOCKS)
    indices = [ramp.index(luminance) for luminance in range(256)]
    assert indices == sorted(indices)
    assert set(indices) == set(range(len(BLOCKS)))


def test_select_black_and_white():
    ramp = DensityRamp(STANDARD)
    assert ramp.select(0) == " "
    assert ramp.select(255) == "@"
    assert ramp.select(0, invert=True) == "@"
    assert ramp.select(255, invert=True) == " "


def test_uniform_always_densest():
    ramp = DensityRamp(STANDARD)
    assert {ramp.select(luminance, uniform=True) for luminance in range(256)} == {"@"}
    assert ramp.select(255, invert=True, uniform=True) == "@"


def test_short_ramp_rejected():
    with pytest.raises(ValueError, match="at least 2"):
        DensityRamp("#")


def test_presets():
    for name, chars in PRESETS.items():
        assert DensityRamp.preset(name).chars == chars
    with pytest.raises(ValueError, match="Unknown ramp"):
        DensityRamp.preset("nope")


def test_classify_without_colour_drops_colour():
    art = classify([[Cell(0, (1, 2, 3)), Cell(255, (4, 5, 6))]], DensityRamp(STANDARD))
    assert art.rows == [[ColorChar(" "), ColorChar("@")]]


def test_classify_with_colour_keeps_colour():
    art = classify([[Cell(128, (1, 2, 3))]], DensityRamp(STANDARD), colour=True)
    assert art.rows == [[ColorChar("+", (1, 2, 3))]]


def test_classify_uniform_requires_colour():
    with pytest.raises(ValueError, match="colour"):
        classify([[Cell(0, (0, 0, 0))]], DensityRamp(STANDARD), uniform=True)
