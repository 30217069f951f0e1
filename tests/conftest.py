import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def make_image(colors, width, height):
    arr = np.array(colors, dtype=np.uint8).reshape(height, width, 3)
    return Image.fromarray(arr, mode="RGB")


@pytest.fixture
def red_blue_image():
    return make_image([RED, RED, BLUE, BLUE], 2, 2)


@pytest.fixture
def four_color_image():
    colors = [(255, 0, 0), (0, 128, 0), (20, 20, 200), (240, 240, 90)]
    pixels = [colors[(x // 2 + y) % 4] for y in range(4) for x in range(4)]
    return make_image(pixels, 4, 4)


@pytest.fixture
def noisy_image():
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(12, 16, 3), dtype=np.uint8)
    return Image.fromarray(arr, mode="RGB")


@pytest.fixture
def lab_points():
    rng = np.random.default_rng(1)
    centers = np.array([[30.0, 10.0, -20.0], [70.0, -30.0, 40.0], [50.0, 50.0, 0.0]])
    return np.concatenate([c + rng.normal(scale=2.0, size=(100, 3)) for c in centers])
