from enum import Enum
from typing import Type

from ChromaColor.Color.Color import Color, REFERENCE_ILLUMINANT
from ChromaColor.Color.LinearRGBColor import LinearRGBColor
from ChromaColor.Color.RGBColor import RGBColor
from ChromaColor.Color.XYZColor import XYZColor
from ChromaColor.Observer import Illuminant


class ColorSpaceType(Enum):
    """The color representations that colors can be converted between, by name.
    """
    XYZ = "xyz"  # CIE 1931 XYZ, tagged with an illuminant
    SRGB = "srgb"  # 8-bit gamma-encoded sRGB
    LINEAR_SRGB = "linear_srgb"  # sRGB before gamma encoding

    def __str__(self):
        return self.value

    @property
    def color_class(self) -> Type[Color]:
        return _COLOR_CLASSES[self]


_COLOR_CLASSES = {
    ColorSpaceType.XYZ: XYZColor,
    ColorSpaceType.SRGB: RGBColor,
    ColorSpaceType.LINEAR_SRGB: LinearRGBColor,
}


def ConvertColor(color: Color, to_space: str | ColorSpaceType,
                 illuminant: Illuminant = REFERENCE_ILLUMINANT) -> Color:
    """
    Convert a color to the representation named by to_space.

    Parameters:
        color (Color): color to convert
        to_space (str or ColorSpaceType): target representation
        illuminant (Illuminant, optional): illuminant of the result if the target is XYZ, since XYZ
            colors carry one. Ignored for other targets.

    Returns:
        Color: the converted color
    """
    if isinstance(to_space, str):
        to_space = ColorSpaceType(to_space.lower())

    if to_space == ColorSpaceType.XYZ:
        return color.to_xyz(illuminant).color_adapt(illuminant)
    return color.convert(to_space.color_class)
