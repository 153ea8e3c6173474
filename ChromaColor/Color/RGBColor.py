from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from ChromaColor.Color import Parsing
from ChromaColor.Color.Color import Color
from ChromaColor.Color.LinearRGBColor import LinearRGBColor
from ChromaColor.Color.XYZColor import XYZColor
from ChromaColor.ColorMath.Conversion import GammaEncodeSRGB, LinearizeSRGB, QuantizeChannels
from ChromaColor.Observer import Illuminant


@dataclass(frozen=True)
class RGBColor(Color):
    """
    A gamma-encoded sRGB color with 8 bits per channel. sRGB is always interpreted against D65.

        r (int): red channel in [0, 255]
        g (int): green channel in [0, 255]
        b (int): blue channel in [0, 255]
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name, value in zip("rgb", (self.r, self.g, self.b)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Channel {name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be between 0 and 255, got {value}")
        # normalize numpy integers so equality and hashing behave like plain ints
        object.__setattr__(self, "r", int(self.r))
        object.__setattr__(self, "g", int(self.g))
        object.__setattr__(self, "b", int(self.b))

    @classmethod
    def from_tuple(cls, rgb: tuple[int, int, int]) -> RGBColor:
        r, g, b = rgb
        return cls(r, g, b)

    def to_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_tuple())

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self):
        return self.to_hex()

    @classmethod
    def from_hex_code(cls, hex_code: str) -> RGBColor:
        """Accepts "#rgb", "#rrggbb", "rgb" and "rrggbb". Raises RGBParseError on bad syntax."""
        return cls.from_tuple(Parsing.ParseHexCode(hex_code))

    @classmethod
    def from_color_name(cls, name: str) -> RGBColor:
        """The color for an X11/CSS color name, ignoring case. Raises RGBParseError if unknown."""
        return cls.from_tuple(Parsing.ParseColorName(name))

    @classmethod
    def from_rgb_function(cls, text: str) -> RGBColor:
        """Parses "rgb(r, g, b)". Raises RGBParseError on bad syntax or out of range channels."""
        return cls.from_tuple(Parsing.ParseRGBFunction(text))

    @classmethod
    def parse(cls, text: str) -> RGBColor:
        """Parses a hex code, color name or rgb() function, whichever the text looks like."""
        return cls.from_tuple(Parsing.ParseColor(text))

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> RGBColor:
        # https://en.wikipedia.org/wiki/SRGB#Specification_of_the_transformation
        linear = LinearRGBColor.from_xyz(xyz).to_coord()
        return cls.from_tuple(QuantizeChannels(GammaEncodeSRGB(linear)))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        linear = LinearizeSRGB(np.array(self.to_tuple()) / 255.0)
        return LinearRGBColor.from_coord(linear).to_xyz(illuminant)

    def mix(self, other: RGBColor) -> RGBColor:
        """Averages each channel, rounding down.

        This averages the gamma-encoded values, which is only an approximation of mixing light. For
        the physically linear midpoint, mix the LinearRGBColor conversions instead.
        """
        self._check_mixable(other)
        r, g, b = ((c1 + c2) // 2 for c1, c2 in zip(self, other))
        return RGBColor(r, g, b)

    def write_colored_str(self, text: str) -> str:
        from ChromaColor.Visualization.Terminal import WriteColoredStr
        return WriteColoredStr(self, text)

    def write_color(self) -> str:
        from ChromaColor.Visualization.Terminal import WriteColor
        return WriteColor(self)
