"""
test_illuminant.py
------------------

Tests for the illuminant registry: white point normalization and name lookup.
"""

import numpy as np
import pytest

from ChromaColor import Illuminant


class TestWhitePoints:
    @pytest.mark.parametrize("illuminant", list(Illuminant))
    def test_luminance_is_normalized(self, illuminant):
        assert illuminant.white_point()[1] == 1.0

    @pytest.mark.parametrize("illuminant", list(Illuminant))
    def test_white_point_is_positive_triple(self, illuminant):
        wp = illuminant.white_point()
        assert wp.shape == (3,)
        assert np.all(wp > 0)

    def test_tabulated_values(self):
        np.testing.assert_allclose(Illuminant.D65.white_point(), [0.95047, 1.0, 1.08883], atol=1e-3)
        np.testing.assert_allclose(Illuminant.D50.white_point(), [0.96422, 1.0, 0.82521], atol=1e-3)
        np.testing.assert_allclose(Illuminant.E.white_point(), [1.0, 1.0, 1.0], atol=1e-12)

    def test_white_point_is_a_copy(self):
        wp = Illuminant.D65.white_point()
        wp[0] = 42.0
        assert Illuminant.D65.white_point()[0] != 42.0


class TestFromName:
    @pytest.mark.parametrize("name, expected", [
        ("D65", Illuminant.D65),
        ("d50", Illuminant.D50),
        (" a ", Illuminant.A),
        ("F2", Illuminant.F2),
        ("fl11", Illuminant.F11),
    ])
    def test_known_names(self, name, expected):
        assert Illuminant.from_name(name) is expected

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError):
            Illuminant.from_name("D99")

    def test_str_is_member_name(self):
        assert str(Illuminant.F7) == "F7"
