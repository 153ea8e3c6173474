import logging

import numpy as np
import numpy.typing as npt

from colour.adaptation import CAT_BRADFORD

from ChromaColor.Observer import Illuminant

logger = logging.getLogger(__name__)

# XYZ -> Bradford cone response ("sharpened" RGB)
M_XYZ_TO_BRADFORD = np.asarray(CAT_BRADFORD, dtype=np.float64)

# Bradford -> XYZ. Tabulated rather than np.linalg.inv(M_XYZ_TO_BRADFORD) so that both directions
# use the published coefficients
M_BRADFORD_TO_XYZ = np.array([
    [0.986993, -0.147054, 0.159963],
    [0.432305, 0.518360, 0.049291],
    [-0.008529, 0.040043, 0.968487]
])


def BradfordTransform(xyz: npt.NDArray) -> npt.NDArray:
    """
    Transform an XYZ triple into Bradford cone response space.

    :param xyz: length 3 array of XYZ coordinates
    """
    return M_XYZ_TO_BRADFORD @ np.asarray(xyz, dtype=np.float64)


def InverseBradfordTransform(rgb: npt.NDArray) -> npt.NDArray:
    """
    Transform a Bradford cone response triple back into XYZ.

    :param rgb: length 3 array of Bradford cone responses
    """
    return M_BRADFORD_TO_XYZ @ np.asarray(rgb, dtype=np.float64)


def AdaptXYZ(xyz: npt.NDArray, source: Illuminant, target: Illuminant) -> npt.NDArray:
    """
    Chromatically adapt an XYZ triple from one illuminant to another with the Bradford transform.

    :param xyz: length 3 array of XYZ coordinates under `source`
    :param source: illuminant the coordinates are currently relative to
    :param target: illuminant to express the coordinates under
    :return: length 3 array of XYZ coordinates under `target`. If the illuminants match, the input
        values are returned untouched.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    if source == target:
        return xyz

    logger.debug("Adapting %s from %s to %s", xyz, source, target)
    # wr here stands for "white reference", i.e., the one we're converting to
    rgb = BradfordTransform(xyz)
    rgb_w = BradfordTransform(source.white_point())
    rgb_wr = BradfordTransform(target.white_point())

    # total adaptation (D = 1). White points are normalized to Y = 1, so no luminance factor is
    # needed and the whole transform is linear
    rgb_c = rgb * (rgb_wr / rgb_w)
    return InverseBradfordTransform(rgb_c)
