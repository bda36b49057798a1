"""Tests for the XYZ, Lab and Oklab transforms."""

import math

import pytest

from colorcore.chromatic import (
    D50_WHITE,
    XYZD50,
    XYZD65,
    LCHValues,
    Lab,
    Oklab,
    OKLCHValues,
    lab_to_lch,
    lab_to_xyz_d50,
    lch_to_lab,
    linear_srgb_to_oklab,
    linear_srgb_to_xyz_d65,
    normalize_hue,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    xyz_d50_to_d65,
    xyz_d50_to_lab,
    xyz_d65_to_d50,
    xyz_d65_to_linear_srgb,
)


class TestXYZ:

    @pytest.mark.unit
    def test_white_maps_to_d65_white(self):
        xyz = linear_srgb_to_xyz_d65(1.0, 1.0, 1.0)
        assert isinstance(xyz, XYZD65)
        assert xyz.x == pytest.approx(0.95047, abs=1e-6)
        assert xyz.y == pytest.approx(1.0, abs=1e-6)
        assert xyz.z == pytest.approx(1.08883, abs=1e-6)

    @pytest.mark.unit
    def test_bradford_adapts_white_point(self):
        xyz = xyz_d65_to_d50(XYZD65(0.95047, 1.0, 1.08883))
        assert isinstance(xyz, XYZD50)
        for value, white in zip(xyz, D50_WHITE):
            assert value == pytest.approx(white, abs=1e-5)

    @pytest.mark.unit
    @pytest.mark.parametrize("rgb", [(1.0, 0.0, 0.0), (0.2, 0.5, 0.9), (0.0, 0.0, 0.0)])
    def test_round_trip_through_d50(self, rgb):
        xyz = xyz_d50_to_d65(xyz_d65_to_d50(linear_srgb_to_xyz_d65(*rgb)))
        for out, expected in zip(xyz_d65_to_linear_srgb(xyz), rgb):
            assert out == pytest.approx(expected, abs=1e-5)


class TestLab:

    @pytest.mark.unit
    def test_reference_white_is_lightness_100(self):
        lab = xyz_d50_to_lab(XYZD50(*D50_WHITE))
        assert lab.lightness == pytest.approx(100.0)
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.unit
    def test_black_uses_linear_branch(self):
        assert xyz_d50_to_lab(XYZD50(0.0, 0.0, 0.0)) == pytest.approx((0.0, 0.0, 0.0))

    @pytest.mark.unit
    @pytest.mark.parametrize("xyz", [(0.5, 0.4, 0.3), (0.001, 0.002, 0.001), (0.9, 0.95, 0.7)])
    def test_round_trip(self, xyz):
        back = lab_to_xyz_d50(xyz_d50_to_lab(XYZD50(*xyz)))
        assert tuple(back) == pytest.approx(xyz, abs=1e-9)


class TestPolar:

    @pytest.mark.unit
    def test_lch_of_positive_axes(self):
        lch = lab_to_lch(Lab(50.0, 3.0, 4.0))
        assert lch.chroma == pytest.approx(5.0)
        assert lch.hue == pytest.approx(math.degrees(math.atan2(4.0, 3.0)))

    @pytest.mark.unit
    def test_negative_angles_are_shifted(self):
        assert lab_to_lch(Lab(50.0, 0.0, -10.0)).hue == pytest.approx(270.0)

    @pytest.mark.unit
    def test_achromatic_hue_is_zero(self):
        assert lab_to_lch(Lab(50.0, 0.0, 0.0)).hue == 0.0

    @pytest.mark.unit
    def test_negative_zero_hue_is_positive_zero(self):
        hue = lab_to_lch(Lab(50.0, 1.0, -0.0)).hue
        assert hue == 0.0
        assert math.copysign(1.0, hue) == 1.0

    @pytest.mark.unit
    def test_lch_to_lab(self):
        lab = lch_to_lab(LCHValues(60.0, 10.0, 90.0))
        assert lab.lightness == 60.0
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(10.0)

    @pytest.mark.unit
    def test_oklch_polar_round_trip(self):
        oklab = Oklab(0.6, -0.05, 0.08)
        oklch = oklab_to_oklch(oklab)
        assert isinstance(oklch, OKLCHValues)
        assert 0.0 <= oklch.hue < 360.0
        assert tuple(oklch_to_oklab(oklch)) == pytest.approx(tuple(oklab))


class TestNormalizeHue:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "degrees,expected",
        [(0.0, 0.0), (360.0, 0.0), (-30.0, 330.0), (725.0, 5.0), (-1e-20, 0.0)],
    )
    def test_wraps_into_range(self, degrees, expected):
        assert normalize_hue(degrees) == pytest.approx(expected)
        assert 0.0 <= normalize_hue(degrees) < 360.0

    @pytest.mark.unit
    def test_negative_zero(self):
        assert math.copysign(1.0, normalize_hue(-0.0)) == 1.0


class TestOklab:

    @pytest.mark.unit
    def test_red_reference_value(self):
        oklab = linear_srgb_to_oklab(1.0, 0.0, 0.0)
        assert oklab.lightness == pytest.approx(0.627955, abs=1e-5)
        assert oklab.a == pytest.approx(0.224863, abs=1e-5)
        assert oklab.b == pytest.approx(0.125846, abs=1e-5)

    @pytest.mark.unit
    def test_white_is_achromatic(self):
        oklab = linear_srgb_to_oklab(1.0, 1.0, 1.0)
        assert oklab.lightness == pytest.approx(1.0, abs=1e-6)
        assert oklab.a == pytest.approx(0.0, abs=1e-6)
        assert oklab.b == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.unit
    @pytest.mark.parametrize("rgb", [(0.3, 0.6, 0.1), (0.0, 0.0, 0.0), (1.2, -0.1, 0.5)])
    def test_round_trip_including_out_of_gamut(self, rgb):
        back = oklab_to_linear_srgb(linear_srgb_to_oklab(*rgb))
        assert tuple(back) == pytest.approx(rgb, abs=1e-6)
