# Chroma Color - colorimetric conversion and chromatic adaptation for Python
from .Observer import Illuminant
from .Color.Color import Color, REFERENCE_ILLUMINANT
from .Color.XYZColor import XYZColor
from .Color.RGBColor import RGBColor
from .Color.LinearRGBColor import LinearRGBColor
from .Color.Parsing import RGBParseError
from .ColorSpace import ColorSpaceType, ConvertColor
from .Utils.CustomTypes import *
