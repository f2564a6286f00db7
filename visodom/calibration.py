"""Camera intrinsics for every level of the image pyramid."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from visodom.settings import PYR_LEVELS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CalibrationPyramid:
    """Image sizes and camera matrices (with inverses) for pyramid levels 0..levels_used-1."""

    widths: tuple[int, ...]
    heights: tuple[int, ...]
    K: tuple[np.ndarray, ...]
    K_inv: tuple[np.ndarray, ...]

    @property
    def levels_used(self) -> int:
        return len(self.widths)

    @property
    def w_m3(self) -> float:
        return float(self.widths[0] - 3)

    @property
    def h_m3(self) -> float:
        return float(self.heights[0] - 3)

    @property
    def fx(self) -> tuple[float, ...]:
        return tuple(float(k[0, 0]) for k in self.K)

    @property
    def fy(self) -> tuple[float, ...]:
        return tuple(float(k[1, 1]) for k in self.K)

    @property
    def cx(self) -> tuple[float, ...]:
        return tuple(float(k[0, 2]) for k in self.K)

    @property
    def cy(self) -> tuple[float, ...]:
        return tuple(float(k[1, 2]) for k in self.K)

    @property
    def fx_inv(self) -> tuple[float, ...]:
        return tuple(float(k[0, 0]) for k in self.K_inv)

    @property
    def fy_inv(self) -> tuple[float, ...]:
        return tuple(float(k[1, 1]) for k in self.K_inv)

    @property
    def cx_inv(self) -> tuple[float, ...]:
        return tuple(float(k[0, 2]) for k in self.K_inv)

    @property
    def cy_inv(self) -> tuple[float, ...]:
        return tuple(float(k[1, 2]) for k in self.K_inv)


def build_pyramid(
    width: int, height: int, K, max_levels: int = PYR_LEVELS
) -> CalibrationPyramid:
    """Build the calibration pyramid for a ``width`` x ``height`` image with camera matrix ``K``.

    Levels are added while both dimensions are even, the pixel count exceeds 5000
    and fewer than ``max_levels`` levels exist.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width} x {height}")
    if max_levels < 1:
        raise ValueError("at least one pyramid level is required")
    k0 = np.array(K, dtype=np.float64)
    if k0.shape != (3, 3):
        raise ValueError(f"camera matrix must be 3x3, got shape {k0.shape}")

    w_lvl, h_lvl = width, height
    levels = 1
    while w_lvl % 2 == 0 and h_lvl % 2 == 0 and w_lvl * h_lvl > 5000 and levels < max_levels:
        w_lvl //= 2
        h_lvl //= 2
        levels += 1
    logger.info(
        "using pyramid levels 0 to %d. coarsest resolution: %d x %d!", levels - 1, w_lvl, h_lvl
    )
    if w_lvl > 100 and h_lvl > 100:
        logger.warning(
            "using not enough pyramid levels. "
            "Consider scaling to a resolution that is a multiple of a power of 2."
        )
    if levels < 3:
        logger.warning("resolution too low: fewer than three pyramid levels.")

    widths = [width]
    heights = [height]
    matrices = [k0]
    inverses = [np.linalg.inv(k0)]
    cx0, cy0 = k0[0, 2], k0[1, 2]
    for level in range(1, levels):
        widths.append(width >> level)
        heights.append(height >> level)
        prev = matrices[-1]
        fx = prev[0, 0] * 0.5
        fy = prev[1, 1] * 0.5
        cx = (cx0 + 0.5) / (1 << level) - 0.5
        cy = (cy0 + 0.5) / (1 << level) - 0.5
        k = np.array([[fx, 0.0, cx], [0.0, fy, cy], [0.0, 0.0, 1.0]])
        matrices.append(k)
        inverses.append(np.linalg.inv(k))

    return CalibrationPyramid(tuple(widths), tuple(heights), tuple(matrices), tuple(inverses))