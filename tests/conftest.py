import numpy as np
import pytest

from tdesktop_theme_generator.extraction import ExtractedColor


def solid_array(rgb, size=(20, 20)):
    height, width = size
    return np.full((height, width, len(rgb)), rgb, dtype=np.uint8)


def banded_array(colors, band_height=10, width=30):
    """Stack horizontal bands of solid color, top to bottom."""
    return np.concatenate(
        [solid_array(rgb, (band_height, width)) for rgb in colors], axis=0
    )


@pytest.fixture
def red_blue_image():
    return banded_array([(255, 0, 0), (0, 0, 255)], band_height=20, width=40)


@pytest.fixture
def near_white_image():
    return solid_array((252, 252, 251), (40, 40))


@pytest.fixture
def transparent_image():
    return solid_array((200, 30, 30, 0), (16, 16))


@pytest.fixture
def blue_yellow_colors():
    return [ExtractedColor.from_rgb((0, 0, 255)), ExtractedColor.from_rgb((255, 255, 0))]
