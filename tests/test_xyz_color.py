"""
test_xyz_color.py
-----------------

Tests for XYZColor as a value type: equality, the identity conversion, and illuminant-aware mixing.
"""

import dataclasses

import pytest

from ChromaColor import Illuminant, RGBColor, XYZColor


class TestValueSemantics:
    def test_is_immutable(self):
        xyz = XYZColor(0.1, 0.2, 0.3, Illuminant.D65)
        with pytest.raises(dataclasses.FrozenInstanceError):
            xyz.x = 0.5

    def test_equality_includes_illuminant(self):
        assert XYZColor(0.1, 0.2, 0.3, Illuminant.D65) == XYZColor(0.1, 0.2, 0.3, Illuminant.D65)
        assert XYZColor(0.1, 0.2, 0.3, Illuminant.D65) != XYZColor(0.1, 0.2, 0.3, Illuminant.D50)

    def test_approx_equal_ignores_small_errors(self):
        a = XYZColor(0.1, 0.2, 0.3, Illuminant.D65)
        assert a.approx_equal(XYZColor(0.1005, 0.1995, 0.3009, Illuminant.D65))
        assert not a.approx_equal(XYZColor(0.102, 0.2, 0.3, Illuminant.D65))

    def test_white_point(self):
        wp = XYZColor.white_point(Illuminant.D75)
        assert wp.illuminant == Illuminant.D75
        assert wp.y == 1.0
        assert isinstance(wp.x, float)


class TestXYZConversion:
    def test_to_xyz_is_identity(self):
        xyz = XYZColor(0.4, 0.6, 0.2, Illuminant.D65)
        # conversion does not adapt, whatever illuminant is asked for
        assert xyz.to_xyz(Illuminant.D50) is xyz

    def test_from_xyz_is_identity(self):
        xyz = XYZColor(0.4, 0.6, 0.2, Illuminant.A)
        assert XYZColor.from_xyz(xyz) is xyz

    def test_convert_to_self_keeps_illuminant(self):
        xyz = XYZColor(0.4, 0.6, 0.2, Illuminant.D65)
        assert xyz.convert(XYZColor) == xyz


class TestMixXYZ:
    def test_midpoint_is_exact(self):
        # powers of 2 in the denominators keep this free of floating point error
        c1 = XYZColor(0.5, 0.25, 0.75, Illuminant.D65)
        c2 = XYZColor(0.625, 0.375, 0.5, Illuminant.D65)
        c3 = XYZColor(0.75, 0.5, 0.25, Illuminant.D65)
        assert c1.mix(c3) == c2
        assert c3.mix(c1) == c2

    def test_mix_with_itself(self):
        c = XYZColor(0.3, 0.2, 0.1, Illuminant.A)
        assert c.mix(c) == c

    def test_different_illuminants_take_the_first(self):
        a = XYZColor(0.4, 0.5, 0.6, Illuminant.D50)
        b = XYZColor(0.3, 0.2, 0.1, Illuminant.D75)
        assert a.mix(b).illuminant == Illuminant.D50
        assert b.mix(a).illuminant == Illuminant.D75

    def test_different_illuminants_commute_visually(self):
        a = XYZColor(0.4, 0.5, 0.6, Illuminant.D50)
        b = XYZColor(0.3, 0.2, 0.1, Illuminant.D75)
        assert a.mix(b).approx_visually_equal(b.mix(a))
        assert b.mix(a).approx_visually_equal(a.mix(b))

    def test_other_is_adapted_first(self):
        a = XYZColor(0.4, 0.5, 0.6, Illuminant.D50)
        b = XYZColor(0.3, 0.2, 0.1, Illuminant.D75)
        b_c = b.color_adapt(Illuminant.D50)
        mixed = a.mix(b)
        assert mixed.x == pytest.approx((a.x + b_c.x) / 2)
        assert mixed.y == pytest.approx((a.y + b_c.y) / 2)
        assert mixed.z == pytest.approx((a.z + b_c.z) / 2)

    def test_cannot_mix_with_other_types(self):
        with pytest.raises(TypeError):
            XYZColor(0.4, 0.5, 0.6, Illuminant.D65).mix(RGBColor(1, 2, 3))
