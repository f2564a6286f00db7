import pytest

from visodom.colormaps import (
    make_jet_3b,
    make_rainbow_3b,
    make_rainbow_f3,
    make_red_green_3b,
)
from visodom.settings import get_settings, reset_settings


def test_rainbow_f3_negative_is_white():
    assert make_rainbow_f3(-1.0, 1.0) == (1.0, 1.0, 1.0)


@pytest.mark.parametrize("value", [0.0, 0.3, 1.2, 2.5, 4.9, 10.1])
def test_rainbow_f3_components_sum_to_one(value):
    assert sum(make_rainbow_f3(value, 1.0)) == pytest.approx(1.0)


@pytest.mark.parametrize("value", [0.25, 1.5, 2.75])
def test_rainbow_f3_has_period_three(value):
    assert make_rainbow_f3(value + 3.0, 1.0) == pytest.approx(make_rainbow_f3(value, 1.0))


def test_rainbow_f3_scale_multiplies_value():
    assert make_rainbow_f3(0.5, 2.0) == pytest.approx(make_rainbow_f3(1.0, 1.0))


def test_rainbow_default_scale_comes_from_settings():
    try:
        get_settings().free_debug_param3 = 2.0
        assert make_rainbow_f3(0.6) == pytest.approx(make_rainbow_f3(1.2, 1.0))
        assert make_rainbow_3b(0.6) == make_rainbow_3b(1.2, 1.0)
    finally:
        reset_settings()


def test_rainbow_3b_zero_is_white():
    assert make_rainbow_3b(0.0, 1.0) == (255, 255, 255)


def test_rainbow_3b_integer_band_one_is_green():
    assert make_rainbow_3b(1.0, 1.0) == (0, 255, 0)


@pytest.mark.parametrize("value", [0.1, 0.9, 1.4, 2.2, 5.6])
def test_rainbow_3b_channels_in_range(value):
    assert all(0 <= c <= 255 for c in make_rainbow_3b(value, 1.0))


def test_jet_clamps_at_ends():
    assert make_jet_3b(0.0) == (128, 0, 0)
    assert make_jet_3b(-2.0) == (128, 0, 0)
    assert make_jet_3b(1.0) == (0, 0, 128)
    assert make_jet_3b(3.0) == (0, 0, 128)


@pytest.mark.parametrize("value", [i / 20 + 0.01 for i in range(20)])
def test_jet_channels_in_range(value):
    assert all(0 <= c <= 255 for c in make_jet_3b(value))


def test_red_green_ends():
    assert make_red_green_3b(-1.0) == (0, 0, 255)
    assert make_red_green_3b(2.0) == (0, 255, 0)
    assert make_red_green_3b(0.5) == (0, 255, 255)


def test_red_green_green_rises_red_falls():
    colours = [make_red_green_3b(i / 10) for i in range(11)]
    greens = [c[1] for c in colours]
    reds = [c[2] for c in colours]
    assert greens == sorted(greens)
    assert reds == sorted(reds, reverse=True)
    assert all(c[0] == 0 for c in colours)