import logging

import numpy as np
import numpy.typing as npt
from colour.models import RGB_COLOURSPACE_sRGB

logger = logging.getLogger(__name__)

# sRGB primaries against a D65 white, as tabulated in IEC 61966-2-1
M_LINEAR_SRGB_TO_XYZ = RGB_COLOURSPACE_sRGB.matrix_RGB_to_XYZ

# note how the diagonals are large: X, Y, Z roughly correspond to R, G, B
M_XYZ_TO_LINEAR_SRGB = RGB_COLOURSPACE_sRGB.matrix_XYZ_to_RGB

SRGB_ENCODED_THRESHOLD = 0.04045
SRGB_LINEAR_THRESHOLD = 0.0031308


def LinearizeSRGB(encoded: npt.ArrayLike) -> npt.NDArray:
    """
    Undo the sRGB gamma encoding.

    :param encoded: gamma-encoded channel values in [0, 1], any shape
    :return: linear light intensities with the same shape
    """
    x = np.asarray(encoded, dtype=np.float64)
    return np.where(x <= SRGB_ENCODED_THRESHOLD,
                    x / 12.92,
                    np.power((np.maximum(x, SRGB_ENCODED_THRESHOLD) + 0.055) / 1.055, 2.4))


def GammaEncodeSRGB(linear: npt.ArrayLike) -> npt.NDArray:
    """
    Apply the sRGB gamma encoding.

    :param linear: linear light intensities, any shape
    :return: gamma-encoded values with the same shape. Nothing is clamped here.
    """
    x = np.asarray(linear, dtype=np.float64)
    # np.maximum keeps the unused branch away from fractional powers of negatives
    return np.where(x <= SRGB_LINEAR_THRESHOLD,
                    12.92 * x,
                    1.055 * np.power(np.maximum(x, SRGB_LINEAR_THRESHOLD), 1 / 2.4) - 0.055)


def LinearSRGBToXYZ(rgb: npt.ArrayLike) -> npt.NDArray:
    """
    Linear sRGB to D65-relative XYZ.

    :param rgb: length 3 array, or Nx3 array, of linear sRGB values
    """
    return np.asarray(rgb, dtype=np.float64) @ M_LINEAR_SRGB_TO_XYZ.T


def XYZToLinearSRGB(xyz: npt.ArrayLike) -> npt.NDArray:
    """
    D65-relative XYZ to linear sRGB. Out of gamut colors give values outside [0, 1].

    :param xyz: length 3 array, or Nx3 array, of XYZ values
    """
    return np.asarray(xyz, dtype=np.float64) @ M_XYZ_TO_LINEAR_SRGB.T


def QuantizeChannels(encoded: npt.ArrayLike) -> tuple[int, int, int]:
    """
    Clamp gamma-encoded channels to [0, 1] and scale them to the nearest 8-bit integer.

    Values outside the sRGB gamut are clipped, not rejected.

    :param encoded: length 3 array of gamma-encoded values
    """
    encoded = np.asarray(encoded, dtype=np.float64)
    clipped = np.clip(encoded, 0.0, 1.0)
    if not np.array_equal(clipped, encoded):
        logger.debug("Clipping out of gamut channels %s", encoded)
    # round half up, not numpy's half-to-even
    r, g, b = (int(v) for v in np.floor(clipped * 255 + 0.5))
    return r, g, b
