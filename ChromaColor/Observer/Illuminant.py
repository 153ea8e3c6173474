from enum import Enum
from functools import lru_cache

import numpy as np
import numpy.typing as npt

from colour import CCS_ILLUMINANTS, xy_to_XYZ

STANDARD_OBSERVER = "CIE 1931 2 Degree Standard Observer"


class Illuminant(Enum):
    """Standard CIE illuminants. Each value is the key of the illuminant in the colour-science
    chromaticity table for the CIE 1931 2 degree standard observer.
    """
    A = "A"  # incandescent / tungsten
    B = "B"  # direct noon sunlight (deprecated)
    C = "C"  # average daylight (deprecated)
    D50 = "D50"  # horizon light, ICC profile connection space
    D55 = "D55"  # mid-morning / mid-afternoon daylight
    D60 = "D60"
    D65 = "D65"  # noon daylight, sRGB white
    D75 = "D75"  # north sky daylight
    E = "E"  # equal energy
    F2 = "FL2"  # cool white fluorescent
    F7 = "FL7"  # broad-band daylight fluorescent
    F11 = "FL11"  # narrow tri-band fluorescent

    def __str__(self):
        return self.name

    def white_point(self) -> npt.NDArray:
        """The XYZ coordinates of white under this illuminant, normalized so that Y = 1.

        Returns:
            npt.NDArray: length 3 array (a fresh copy, safe to modify)
        """
        return _white_point(self.value).copy()

    @staticmethod
    def from_name(name: str) -> 'Illuminant':
        """Look up an illuminant by name, ignoring case. Fluorescent illuminants are accepted both as
        "F2" and as "FL2".

        Raises:
            ValueError: the name is not a known illuminant
        """
        key = name.strip().upper()
        if key in Illuminant.__members__:
            return Illuminant[key]
        for illuminant in Illuminant:
            if illuminant.value == key:
                return illuminant
        raise ValueError(f"Illuminant {name} not found.")


@lru_cache(maxsize=None)
def _white_point(key: str) -> npt.NDArray:
    xy = CCS_ILLUMINANTS[STANDARD_OBSERVER][key]
    xyz = np.asarray(xy_to_XYZ(xy), dtype=np.float64)
    # xy_to_XYZ already gives Y = 1, but keep the invariant exact
    return xyz / xyz[1]
