from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ChromaColor.Color.RGBColor import RGBColor
    from ChromaColor.Observer import Illuminant

ESC = "\x1b["
RESET_FG = f"{ESC}39m"
RESET_BG = f"{ESC}49m"
SQUARE = "■"


def Foreground(rgb: RGBColor) -> str:
    return f"{ESC}38;2;{rgb.r};{rgb.g};{rgb.b}m"


def Background(rgb: RGBColor) -> str:
    return f"{ESC}48;2;{rgb.r};{rgb.g};{rgb.b}m"


def WriteColoredStr(rgb: RGBColor, text: str) -> str:
    """
    Wrap text in 24-bit escape codes so that it prints in the given foreground color.

    :param rgb: color of the text
    :param text: the text to color
    """
    return f"{Foreground(rgb)}{text}{RESET_FG}"


def WriteColor(rgb: RGBColor) -> str:
    """
    A square with both foreground and background set to the color, so it prints as a solid block.

    :param rgb: color of the block
    """
    return f"{Background(rgb)}{Foreground(rgb)}{SQUARE}{RESET_FG}{RESET_BG}"


def XYZSweepRow(x: float, y: float, illuminants: list[Illuminant], width: int) -> str:
    """
    One row of solid squares sweeping Z from 0 to 0.9 across width columns at fixed X and Y.

    The columns are split into equal bands, one per illuminant, and each band tags the same
    coordinates with its own illuminant.

    :param x: X value of every square in the row
    :param y: Y value of every square in the row
    :param illuminants: illuminants of the bands, left to right
    :param width: number of columns in the full sweep
    """
    from ChromaColor.Color.XYZColor import XYZColor

    band_width = width // len(illuminants)
    row = ""
    for k, illuminant in enumerate(illuminants):
        for j in range(k * band_width, (k + 1) * band_width):
            row += XYZColor(x, y, j * 0.9 / width, illuminant).write_color()
    return row
