"""Small numeric types shared across the pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Number of intrinsic camera parameters (fx, fy, cx, cy).
CPARS = 4


@dataclass
class AffLight:
    """Affine brightness transfer: I_frame = exp(a) * I_global + b."""

    a: float = 0.0
    b: float = 0.0

    @staticmethod
    def from_to_vec_exposure(
        exposure_f: float, exposure_t: float, g2f: AffLight, g2t: AffLight
    ) -> np.ndarray:
        """Return the affine factors ``(a, b)`` mapping frame F brightness to frame T.

        A zero exposure on either side means the exposure is unknown; both are
        then treated as 1.
        """
        if exposure_f == 0 or exposure_t == 0:
            exposure_f = exposure_t = 1.0
        a = math.exp(g2t.a - g2f.a) * exposure_t / exposure_f
        b = g2t.b - a * g2f.b
        return np.array([a, b], dtype=np.float64)

    def vec(self) -> np.ndarray:
        """Return the parameters as the vector ``(a, b)``."""
        return np.array([self.a, self.b], dtype=np.float64)