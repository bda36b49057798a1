"""Tests for the color value models and coercion."""

import math
import random

import pytest
from pydantic import ValidationError

from colorcore import (
    HSLA,
    LCH,
    ColorFormat,
    ColorSpaceConversionError,
    ColorStringFormat,
    ColorValue,
    ensure_color_value,
)
from colorcore.numeric import clamp, to_byte


class TestColorValue:

    @pytest.mark.unit
    def test_out_of_range_components_are_kept(self):
        color = ColorValue(red=1.2, green=-0.1, blue=0.5)
        assert color.red == 1.2
        assert color.green == -0.1

    @pytest.mark.unit
    def test_opacity_is_alpha(self):
        assert ColorValue(red=0, green=0, blue=0, alpha=0.3).opacity == 0.3

    @pytest.mark.unit
    def test_from_hex(self):
        color = ColorValue.from_hex(0x336699, alpha=0.5)
        assert (color.red, color.green, color.blue, color.alpha) == pytest.approx(
            (0x33 / 255, 0x66 / 255, 0x99 / 255, 0.5)
        )

    @pytest.mark.unit
    def test_format_accepts_every_selector(self):
        color = ColorValue(red=1, green=0, blue=0)
        assert color.format("rgbLegacy") == "rgb(255, 0, 0)"
        assert color.format(ColorFormat.RGB) == "rgb(255 0 0)"
        assert color.format(ColorStringFormat.hex(is_uppercased=True)) == "#FF0000"

    @pytest.mark.unit
    def test_is_immutable(self):
        color = ColorValue(red=0, green=0, blue=0)
        with pytest.raises(ValidationError):
            color.red = 1.0

    @pytest.mark.unit
    def test_random_avoids_black_and_white(self, rng):
        for _ in range(50):
            color = ColorValue.random_avoiding_black_and_white(rng)
            hsb = color.to_hsb()
            assert hsb.saturation >= 0.5 - 1e-9
            assert hsb.brightness >= 0.5 - 1e-9
            assert color.alpha == 1.0

    @pytest.mark.unit
    def test_random_is_reproducible_with_a_seeded_source(self):
        first = ColorValue.random_avoiding_black_and_white(random.Random(7))
        second = ColorValue.random_avoiding_black_and_white(random.Random(7))
        assert first == second


class TestNumeric:

    @pytest.mark.unit
    def test_clamp(self):
        assert clamp(2.0, 0.0, 1.0) == 1.0
        assert clamp(-1.0, 0.0, 1.0) == 0.0
        assert clamp(0.25, 0.0, 1.0) == 0.25

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [(0.0, 0), (1.0, 255), (0.5, 128), (1.5, 255), (-0.5, 0)])
    def test_to_byte(self, value, expected):
        assert to_byte(value) == expected


class TestEnsureColorValue:

    @pytest.mark.unit
    def test_color_value_passes_through(self):
        color = ColorValue(red=0.1, green=0.2, blue=0.3)
        assert ensure_color_value(color) is color

    @pytest.mark.unit
    def test_sequence(self):
        assert ensure_color_value((1, 0, 0)) == ColorValue(red=1.0, green=0.0, blue=0.0)
        assert ensure_color_value([0, 0, 1, 0.5]).alpha == 0.5

    @pytest.mark.unit
    def test_mapping(self):
        color = ensure_color_value({"red": 0.5, "green": 0.25, "blue": 1})
        assert color == ColorValue(red=0.5, green=0.25, blue=1.0, alpha=1.0)

    @pytest.mark.unit
    def test_models_are_converted(self):
        green = ensure_color_value(HSLA(hue=1 / 3, saturation=1.0, lightness=0.5))
        assert (green.red, green.green, green.blue) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)
        white = ensure_color_value(LCH(lightness=100.0, chroma=0.0, hue=0.0))
        assert (white.red, white.green, white.blue) == pytest.approx((1.0, 1.0, 1.0), abs=1e-3)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [
            (1, 2),
            (1, 2, 3, 4, 5),
            "red",
            b"\x00\x00\x00",
            42,
            None,
            {"red": 1, "green": 0},
            ("a", "b", "c"),
            (math.nan, 0, 0),
            ColorValue(red=math.inf, green=0, blue=0),
        ],
    )
    def test_rejects(self, value):
        with pytest.raises(ColorSpaceConversionError):
            ensure_color_value(value)

    @pytest.mark.unit
    def test_error_carries_value(self):
        with pytest.raises(ColorSpaceConversionError) as excinfo:
            ensure_color_value("red")
        assert excinfo.value.value == "red"
        assert "Cannot convert 'red'" in str(excinfo.value)
