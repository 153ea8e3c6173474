"""
test_terminal.py
----------------

Tests for the truecolor escape sequences used to preview colors in a terminal.
"""

from ChromaColor import Illuminant, RGBColor, XYZColor
from ChromaColor.Visualization.Terminal import WriteColor, WriteColoredStr, XYZSweepRow


def test_colored_str():
    assert WriteColoredStr(RGBColor(1, 2, 3), "hi") == "\x1b[38;2;1;2;3mhi\x1b[39m"


def test_color_square_sets_both_layers():
    assert WriteColor(RGBColor(244, 182, 33)) == "\x1b[48;2;244;182;33m\x1b[38;2;244;182;33m■\x1b[39m\x1b[49m"


def test_method_matches_function():
    rgb = RGBColor(12, 240, 96)
    assert rgb.write_colored_str("text") == WriteColoredStr(rgb, "text")
    assert rgb.write_color() == WriteColor(rgb)


def test_any_color_is_rendered_through_rgb():
    xyz = XYZColor(0.41874, 0.21967, 0.05649, Illuminant.D65)
    assert xyz.write_color() == WriteColor(RGBColor(254, 23, 55))
    assert xyz.write_colored_str("x") == "\x1b[38;2;254;23;55mx\x1b[39m"


def test_sweep_row_has_one_square_per_column():
    row = XYZSweepRow(0.3, 0.5, [Illuminant.D65], 12)
    assert row.count("■") == 12
    assert row.startswith(XYZColor(0.3, 0.5, 0.0, Illuminant.D65).write_color())
    assert row.endswith(XYZColor(0.3, 0.5, 11 * 0.9 / 12, Illuminant.D65).write_color())


def test_sweep_row_bands_tag_each_illuminant():
    row = XYZSweepRow(0.3, 0.5, [Illuminant.D50, Illuminant.D75], 10)
    expected = "".join(XYZColor(0.3, 0.5, j * 0.9 / 10, Illuminant.D50 if j < 5 else Illuminant.D75).write_color()
                       for j in range(10))
    assert row == expected
