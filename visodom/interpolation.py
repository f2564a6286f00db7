"""Bilinear and bicubic sampling of images at sub-pixel positions.

Images are numpy arrays of shape (height, width) or (height, width, channels).
Neighbouring pixels are addressed in row-major order. A neighbour to the right
of the last column is the first pixel of the next row. A neighbour outside the
image raises IndexError.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np


def _flat(mat: Any, dtype=np.float64) -> tuple[np.ndarray, int]:
    arr = np.asarray(mat)
    if arr.ndim < 2:
        raise ValueError(f"expected an image of at least two dimensions, got shape {arr.shape}")
    height, width = arr.shape[:2]
    return arr.reshape((height * width,) + arr.shape[2:]).astype(dtype, copy=False), width


def _first_channel(mat: Any) -> np.ndarray:
    arr = np.asarray(mat)
    return arr[..., 0] if arr.ndim == 3 else arr


def _at(flat: np.ndarray, index: int):
    if not 0 <= index < len(flat):
        raise IndexError(f"sample position reaches pixel {index}, outside the image")
    return flat[index]


def _row(flat: np.ndarray, start: int) -> list:
    return [_at(flat, start + k) for k in range(4)]


def _result(value):
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value, dtype=np.float64)


def _corners(flat: np.ndarray, width: int, x: float, y: float):
    ix, iy = int(x), int(y)
    dx, dy = x - ix, y - iy
    base = ix + iy * width
    tl = _at(flat, base)
    tr = _at(flat, base + 1)
    bl = _at(flat, base + width)
    br = _at(flat, base + width + 1)
    return (tl, tr, bl, br), (base, dx, dy)


def _blend(corners, dx: float, dy: float):
    tl, tr, bl, br = corners
    dxdy = dx * dy
    return dxdy * br + (dy - dxdy) * bl + (dx - dxdy) * tr + (1 - dx - dy + dxdy) * tl


def interpolate_bilinear(mat: Any, x: float, y: float):
    """Bilinearly interpolate ``mat`` at (x, y); per channel for multi-channel images."""
    flat, width = _flat(mat)
    corners, (_, dx, dy) = _corners(flat, width, x, y)
    return _result(_blend(corners, dx, dy))


def _over_flags(over: Any, width: int, base: int) -> list[bool]:
    flags, over_width = _flat(over, dtype=bool)
    if over_width != width:
        raise ValueError("flag image and image differ in width")
    return [
        bool(_at(flags, base)),
        bool(_at(flags, base + 1)),
        bool(_at(flags, base + width)),
        bool(_at(flags, base + width + 1)),
    ]


def interpolate_bilinear_and(mat: Any, over: Any, x: float, y: float):
    """Interpolate like :func:`interpolate_bilinear`; also return whether all four flags are set."""
    flat, width = _flat(mat)
    corners, (base, dx, dy) = _corners(flat, width, x, y)
    return _result(_blend(corners, dx, dy)), all(_over_flags(over, width, base))


def interpolate_bilinear_or(mat: Any, over: Any, x: float, y: float):
    """Interpolate like :func:`interpolate_bilinear`; also return whether any of the four flags is set."""
    flat, width = _flat(mat)
    corners, (base, dx, dy) = _corners(flat, width, x, y)
    return _result(_blend(corners, dx, dy)), any(_over_flags(over, width, base))


def interpolate_bilinear_with_gradient(mat: Any, x: float, y: float) -> tuple[float, float, float]:
    """Return (value, d/dx, d/dy) of the bilinear interpolant; uses channel 0 of multi-channel images."""
    flat, width = _flat(_first_channel(mat))
    (tl, tr, bl, br), (_, dx, dy) = _corners(flat, width, x, y)
    top = dx * tr + (1 - dx) * tl
    bottom = dx * br + (1 - dx) * bl
    left = dy * bl + (1 - dy) * tl
    right = dy * br + (1 - dy) * tr
    return float(dx * right + (1 - dx) * left), float(right - left), float(bottom - top)


def cubic(p: Sequence[float], x: float):
    """Cubic (Catmull-Rom) interpolation between p[1] (x=0) and p[2] (x=1)."""
    p0, p1, p2, p3 = p
    return p1 + 0.5 * x * (
        p2 - p0 + x * (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3 + x * (3.0 * (p1 - p2) + p3 - p0))
    )


def cubic_with_derivative(p: Sequence[float], x: float) -> tuple[float, float]:
    """Return the value and the derivative of :func:`cubic` at ``x``."""
    p0, p1, p2, p3 = p
    c1 = 0.5 * (p2 - p0)
    c2 = p0 - 2.5 * p1 + 2.0 * p2 - 0.5 * p3
    c3 = 0.5 * (3.0 * (p1 - p2) + p3 - p0)
    xx = x * x
    return p1 + x * c1 + xx * c2 + xx * x * c3, c1 + x * 2.0 * c2 + xx * 3.0 * c3


def _rows(flat: np.ndarray, width: int, x: float, y: float):
    ix, iy = int(x), int(y)
    base = ix + iy * width
    starts = (base - width - 1, base - 1, base + width - 1, base + 2 * width - 1)
    return [_row(flat, s) for s in starts], x - ix, y - iy


def interpolate_bicubic(mat: Any, x: float, y: float):
    """Bicubically interpolate ``mat`` at (x, y) over the surrounding 4x4 pixels."""
    flat, width = _flat(mat)
    rows, dx, dy = _rows(flat, width, x, y)
    values = [cubic(row, dx) for row in rows]
    return _result(cubic(values, dy))


def interpolate_bicubic_with_gradient(mat: Any, x: float, y: float) -> tuple[float, float, float]:
    """Return (value, d/dx, d/dy) of the bicubic interpolant; uses channel 0 of multi-channel images."""
    flat, width = _flat(_first_channel(mat))
    rows, dx, dy = _rows(flat, width, x, y)
    values, grads = zip(*(cubic_with_derivative(row, dx) for row in rows))
    value, grad_y = cubic_with_derivative(values, dy)
    return float(value), float(cubic(grads, dy)), float(grad_y)