"""Colour maps used to visualise depths, residuals and similar scalar values."""

from __future__ import annotations

import math

from visodom.settings import get_settings

WHITE_F = (1.0, 1.0, 1.0)
WHITE_B = (255, 255, 255)


def make_rainbow_f3(value: float, scale: float | None = None) -> tuple[float, float, float]:
    """Map ``value * scale`` to a float RGB colour cycling red, green, blue with period 3.

    ``scale`` defaults to the ``free_debug_param3`` setting. Negative values give white.
    """
    if scale is None:
        scale = get_settings().free_debug_param3
    v = value * scale
    if not math.isfinite(v) or v < 0:
        return WHITE_F
    whole = int(v)
    frac = v - whole
    band = whole % 3
    if band == 0:
        return (1.0 - frac, frac, 0.0)
    if band == 1:
        return (0.0, 1.0 - frac, frac)
    return (frac, 0.0, 1.0 - frac)


def make_rainbow_3b(value: float, scale: float | None = None) -> tuple[int, int, int]:
    """Byte version of :func:`make_rainbow_f3`; values that are not positive give white."""
    if scale is None:
        scale = get_settings().free_debug_param3
    v = value * scale
    if not v > 0 or math.isinf(v):
        return WHITE_B
    whole = int(v)
    frac = v - whole
    band = whole % 3
    if band == 0:
        return (int(255 * (1 - frac)), int(255 * frac), 0)
    if band == 1:
        return (0, int(255 * (1 - frac)), int(255 * frac))
    return (int(255 * frac), 0, int(255 * (1 - frac)))


def make_jet_3b(value: float) -> tuple[int, int, int]:
    """Map ``value`` in [0, 1] to a jet colour in byte channels; out-of-range values are clamped."""
    if value <= 0:
        return (128, 0, 0)
    if value >= 1:
        return (0, 0, 128)
    if math.isnan(value):
        return WHITE_B
    band = int(value * 8)
    frac = value * 8 - band
    if band == 0:
        return (int(255 * (0.5 + 0.5 * frac)), 0, 0)
    if band == 1:
        return (255, int(255 * (0.5 * frac)), 0)
    if band == 2:
        return (255, int(255 * (0.5 + 0.5 * frac)), 0)
    if band == 3:
        return (int(255 * (1 - 0.5 * frac)), 255, int(255 * (0.5 * frac)))
    if band == 4:
        return (int(255 * (0.5 - 0.5 * frac)), 255, int(255 * (0.5 + 0.5 * frac)))
    if band == 5:
        return (0, int(255 * (1 - 0.5 * frac)), 255)
    if band == 6:
        return (0, int(255 * (0.5 - 0.5 * frac)), 255)
    if band == 7:
        return (0, 0, int(255 * (1 - 0.5 * frac)))
    return WHITE_B


def make_red_green_3b(value: float) -> tuple[int, int, int]:
    """Map 0 to red, 0.5 to yellow and 1 to green (channels in BGR order)."""
    if value < 0:
        return (0, 0, 255)
    if value < 0.5:
        return (0, int(255 * 2 * value), 255)
    if value < 1:
        return (0, 255, int(255 - 255 * 2 * (value - 0.5)))
    return (0, 255, 0)