from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ChromaColor.Color.Color import Color, CoordinateOf
from ChromaColor.Color.XYZColor import XYZColor
from ChromaColor.ColorMath.Conversion import LinearSRGBToXYZ, XYZToLinearSRGB
from ChromaColor.Observer import Illuminant
from ChromaColor.Utils.CustomTypes import Coordinate


@dataclass(frozen=True)
class LinearRGBColor(Color):
    """
    sRGB without gamma encoding: channel values are proportional to emitted light. White is (1, 1, 1)
    under D65. Values are not clamped, so colors outside the sRGB gamut survive a round trip.

    Because the channels are linear in light, the default coordinate mix is the physically meaningful
    one, which RGBColor's integer averaging only approximates.
    """
    r: float
    g: float
    b: float

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> LinearRGBColor:
        # sRGB assumes D65
        xyz_d65 = xyz.color_adapt(Illuminant.D65)
        return cls.from_coord(XYZToLinearSRGB(xyz_d65.to_array()))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        converted = XYZColor.from_array(LinearSRGBToXYZ(self.to_coord()), Illuminant.D65)
        return converted.color_adapt(illuminant)

    def to_coord(self) -> Coordinate:
        return np.array([self.r, self.g, self.b])

    @classmethod
    def from_coord(cls, coord: Coordinate) -> LinearRGBColor:
        r, g, b = (float(v) for v in CoordinateOf(coord))
        return cls(r, g, b)
