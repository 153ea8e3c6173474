from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ChromaColor.Color.Color import Color
from ChromaColor.ColorMath.ChromaticAdaptation import AdaptXYZ
from ChromaColor.Observer import Illuminant
from ChromaColor.Utils.CustomTypes import Coordinate

# absolute per-component tolerance for approximate comparisons
XYZ_TOLERANCE = 0.001


@dataclass(frozen=True)
class XYZColor(Color):
    """
    A point in the CIE 1931 XYZ color space.

    Any point in XYZ is technically valid, but colors are treated as normalized so that Y = 1 is the
    white point of whatever illuminant is being worked with.

        x (float): roughly the long-wavelength ("red") receptors. Usually between 0 and 1.
        y (float): roughly the middle-wavelength receptors; by construction this is exactly luminance.
        z (float): roughly the short-wavelength ("blue") receptors. Usually between 0 and 1.
        illuminant (Illuminant): the lighting environment the color is assumed to be seen in. XYZ
            itself is independent of lighting, but to answer "how would this look under a different
            light?" the illuminant has to be tracked. Use color_adapt to change it, never
            dataclasses.replace.
    """
    x: float
    y: float
    z: float
    illuminant: Illuminant

    @classmethod
    def from_array(cls, xyz, illuminant: Illuminant) -> XYZColor:
        x, y, z = (float(v) for v in xyz)
        return cls(x, y, z, illuminant)

    @classmethod
    def white_point(cls, illuminant: Illuminant) -> XYZColor:
        """Pure white in the given light environment."""
        return cls.from_array(illuminant.white_point(), illuminant)

    def to_array(self) -> Coordinate:
        return np.array([self.x, self.y, self.z])

    def color_adapt(self, illuminant: Illuminant) -> XYZColor:
        """Re-express this color as it would be perceived under a different illuminant, using the
        Bradford chromatic adaptation transform.

        Adapting to the illuminant the color already has returns this exact object.
        """
        if illuminant == self.illuminant:
            return self
        return XYZColor.from_array(AdaptXYZ(self.to_array(), self.illuminant, illuminant), illuminant)

    def approx_equal(self, other: XYZColor) -> bool:
        """True if all coordinates are within 0.001 of each other. Illuminants are not compared."""
        return bool(np.all(np.abs(self.to_array() - other.to_array()) <= XYZ_TOLERANCE))

    def approx_visually_equal(self, other: XYZColor) -> bool:
        """True if other would look the same as this color: other is adapted to this color's
        illuminant and then compared with approx_equal.
        """
        return self.approx_equal(other.color_adapt(self.illuminant))

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> XYZColor:
        return xyz

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        # conversion never adapts implicitly; call color_adapt for that
        return self

    def mix(self, other: XYZColor) -> XYZColor:
        """Midpoint of two XYZ colors. The other color is first adapted to this color's illuminant,
        and the result is tagged with this color's illuminant, so a.mix(b) and b.mix(a) are visually
        equal but may carry different illuminants.
        """
        self._check_mixable(other)
        other_c = other.color_adapt(self.illuminant)
        mixed = (self.to_array() + other_c.to_array()) / 2.0
        return XYZColor.from_array(mixed, self.illuminant)
