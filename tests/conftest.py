"""
Pytest configuration and shared fixtures for Skin64 tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import numpy as np
import pytest

from S64_Libs.SkinEditingLib.skin_models import Region, SkinCanvas


def pattern_color(x, y):
    """Opaque color unique to each pixel position of a 64x64 canvas."""
    return (x * 4, y * 4, 128, 255)


def paint_pattern(canvas, region):
    for yy in range(region.y, region.y + region.height):
        for xx in range(region.x, region.x + region.width):
            canvas.set_pixel(xx, yy, pattern_color(xx, yy))


def clear_region(canvas, region):
    for yy in range(region.y, region.y + region.height):
        for xx in range(region.x, region.x + region.width):
            canvas.set_pixel(xx, yy, (0, 0, 0, 0))


def flip(array):
    """Horizontal flip of a (height, width, channels) array."""
    return array[:, ::-1]


@pytest.fixture
def pattern_canvas():
    """
    Provide a factory for canvases with a unique opaque color per pixel.

    Returns:
        Callable (width, height) -> SkinCanvas
    """
    def _make(width, height):
        canvas = SkinCanvas.blank(width, height)
        paint_pattern(canvas, Region(0, 0, width, height))
        return canvas
    return _make


@pytest.fixture
def legacy_skin(pattern_canvas):
    """Fully opaque 64x32 classic skin."""
    return pattern_canvas(64, 32)


@pytest.fixture
def slim_legacy_skin(legacy_skin):
    """64x32 skin with 2px slim notches on the right arm cap and side panels."""
    clear_region(legacy_skin, Region(50, 16, 2, 4))
    clear_region(legacy_skin, Region(54, 20, 2, 12))
    return legacy_skin


@pytest.fixture
def right_only_skin():
    """64x64 skin with opaque rows 0-31 and nothing drawn below."""
    canvas = SkinCanvas.blank(64, 64)
    paint_pattern(canvas, Region(0, 0, 64, 32))
    return canvas


@pytest.fixture
def pixels():
    """Provide a helper returning a canvas's pixels as a numpy array."""
    def _pixels(canvas):
        return np.asarray(canvas.to_array())
    return _pixels
