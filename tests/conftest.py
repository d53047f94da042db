import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def random_image():
    """Deterministic noisy RGBA image with some transparency."""
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(37, 53, 4), dtype=np.uint8)
    return Image.fromarray(arr, "RGBA")


@pytest.fixture
def gradient_image():
    """Opaque horizontal grey ramp from black to white, 64x16."""
    arr = np.zeros((16, 64, 4), dtype=np.uint8)
    arr[:, :, :3] = np.linspace(0, 255, 64, dtype=np.uint8)[None, :, None]
    arr[:, :, 3] = 255
    return Image.fromarray(arr, "RGBA")
