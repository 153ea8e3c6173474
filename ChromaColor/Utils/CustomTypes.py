import numpy as np
import numpy.typing as npt

from enum import Enum

# A point in some 3D projection of a color space. Plain numpy arrays give us component-wise
# addition and scalar division, which is all that mixing needs.
Coordinate = npt.NDArray[np.float64]


class RGBParseErrorKind(Enum):
    """
    The ways a string can fail to describe an RGB color.
        INVALID_HEX_SYNTAX: wrong length or non-hex characters in a hex code
        INVALID_FUNC_SYNTAX: a malformed rgb(...) function
        OUT_OF_RANGE: the syntax was fine but a channel is outside 0-255, as in "rgb(554, 23, 553)"
        INVALID_X11_NAME: the color name is not in the X11/CSS table
    """
    INVALID_HEX_SYNTAX = 0
    INVALID_FUNC_SYNTAX = 1
    OUT_OF_RANGE = 2
    INVALID_X11_NAME = 3
