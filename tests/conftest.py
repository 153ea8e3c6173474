"""
Shared pytest fixtures for the ChromaColor test suite.

Contributors should install the package in editable mode (`pip install -e .[test]`) so that
imports resolve the same way locally and in CI.
"""

import pytest

from ChromaColor import Illuminant, RGBColor, XYZColor


@pytest.fixture
def daylight_illuminants():
    """The CIE daylight series, which is what most adaptation round trips are checked against."""
    return [Illuminant.D50, Illuminant.D55, Illuminant.D65, Illuminant.D75]


@pytest.fixture
def representative_rgbs():
    """8-bit colors covering black, white, grays, saturated primaries and both sides of the sRGB
    gamma threshold (channel value 10 is linear-branch, 11 is power-branch)."""
    return [
        RGBColor(0, 0, 0),
        RGBColor(255, 255, 255),
        RGBColor(128, 128, 128),
        RGBColor(10, 10, 10),
        RGBColor(11, 11, 11),
        RGBColor(45, 28, 156),
        RGBColor(254, 23, 55),
        RGBColor(12, 240, 96),
        RGBColor(255, 0, 0),
        RGBColor(0, 255, 0),
        RGBColor(0, 0, 255),
    ]


@pytest.fixture
def in_gamut_xyzs():
    """XYZ colors that lie inside the sRGB gamut under their illuminant."""
    return [
        XYZColor(0.2, 0.25, 0.3, Illuminant.D65),
        XYZColor(0.3, 0.3, 0.25, Illuminant.D50),
        XYZColor(0.0750, 0.0379, 0.3178, Illuminant.D65),
    ]
