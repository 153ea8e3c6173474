from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Type, TypeVar

import numpy as np

from ChromaColor.Observer import Illuminant
from ChromaColor.Utils.CustomTypes import Coordinate

if TYPE_CHECKING:
    from ChromaColor.Color.XYZColor import XYZColor

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Color")

# Illuminant used as the hub for conversions between two non-XYZ colors. D50 gives the least error
# for spaces like CIELAB, but any illuminant works if each type's to_xyz/from_xyz round-trips.
REFERENCE_ILLUMINANT = Illuminant.D50


class Color(ABC):
    """
    Any color representation that can be converted to and from CIE 1931 XYZ.

    Every concrete color only needs to know how to get to XYZ and back; conversion between any two
    representations goes through XYZ, so there are no pairwise conversion functions.

    Mixing is the midpoint of two colors in some projection into three-dimensional space. Colors that
    can be mapped losslessly to a Coordinate (by implementing to_coord / from_coord) get that behavior
    for free. Colors where the projection loses information (an illuminant, integer rounding) must
    override mix instead.

    Note that the midpoint depends on the representation: a.mix(b) can be very different from
    a.convert(X).mix(b.convert(X)). For that reason only colors of the same type can be mixed,
    otherwise a.mix(b) and b.mix(a) could disagree. Also, computer displays mix additively, so yellow
    and blue mix to gray rather than to green as paints would.
    """

    @classmethod
    @abstractmethod
    def from_xyz(cls: Type[T], xyz: XYZColor) -> T:
        """Converts from a color in CIE 1931 XYZ to this color type."""

    @abstractmethod
    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        """Converts this color to CIE 1931 XYZ, expressed under the given illuminant. Most color types
        carry no illuminant of their own, so it has to be supplied. D50 or D65 is a good choice for
        most applications.
        """

    def convert(self, target: Type[T], reference: Illuminant = REFERENCE_ILLUMINANT) -> T:
        """Converts this color to a different color type.

        Args:
            target (Type[T]): the Color subclass to convert to
            reference (Illuminant, optional): the illuminant used for the intermediate XYZ color. The
                result does not depend on it beyond floating point error. Defaults to D50.

        Returns:
            T: the converted color
        """
        logger.debug("Converting %r to %s via XYZ under %s", self, target.__name__, reference)
        return target.from_xyz(self.to_xyz(reference))

    def to_coord(self) -> Coordinate:
        """Projects this color losslessly into 3D space, if the type supports it."""
        raise NotImplementedError(f"{type(self).__name__} has no coordinate embedding")

    @classmethod
    def from_coord(cls: Type[T], coord: Coordinate) -> T:
        """Inverse of to_coord."""
        raise NotImplementedError(f"{cls.__name__} has no coordinate embedding")

    def mix(self: T, other: T) -> T:
        """Returns the midpoint of two colors of the same type.

        Given two colors that project to (a1, b1, c1) and (a2, b2, c2), returns the color that projects
        to ((a1 + a2) / 2, (b1 + b2) / 2, (c1 + c2) / 2).

        Raises:
            TypeError: other is not the same type of color
            NotImplementedError: the type has no coordinate embedding and does not override mix
        """
        self._check_mixable(other)
        mixed = (self.to_coord() + other.to_coord()) / 2.0
        return type(self).from_coord(mixed)

    def _check_mixable(self, other: Color) -> None:
        if type(other) is not type(self):
            raise TypeError(f"Cannot mix {type(self).__name__} with {type(other).__name__}; "
                            f"convert one of them first")

    def write_colored_str(self, text: str) -> str:
        """Wraps text in terminal escape codes that print it in this color. Needs a truecolor
        terminal.
        """
        from ChromaColor.Color.RGBColor import RGBColor
        from ChromaColor.Visualization.Terminal import WriteColoredStr
        return WriteColoredStr(self.convert(RGBColor), text)

    def write_color(self) -> str:
        """A square of this color, with both foreground and background set, for truecolor terminals."""
        from ChromaColor.Color.RGBColor import RGBColor
        from ChromaColor.Visualization.Terminal import WriteColor
        return WriteColor(self.convert(RGBColor))


def CoordinateOf(values) -> Coordinate:
    """Builds a Coordinate from any 3 numbers."""
    coord = np.asarray(values, dtype=np.float64)
    if coord.shape != (3,):
        raise ValueError(f"A coordinate needs exactly 3 components, got shape {coord.shape}")
    return coord
