from .Color import Color, REFERENCE_ILLUMINANT
from .XYZColor import XYZColor
from .LinearRGBColor import LinearRGBColor
from .RGBColor import RGBColor
from .Parsing import RGBParseError
