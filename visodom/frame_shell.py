"""Per-frame bookkeeping shared between tracking and mapping."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from visodom.numtypes import AffLight


def _identity_pose() -> np.ndarray:
    return np.eye(4, dtype=np.float64)


@dataclass(eq=False)
class FrameShell:
    """Pose, brightness and statistics of one input frame.

    Poses are rigid transforms stored as 4x4 homogeneous matrices.
    """

    id: int = 0
    incoming_id: int = 0
    timestamp: float = 0.0

    # Set once after tracking.
    cam_to_tracking_ref: np.ndarray = field(default_factory=_identity_pose)
    tracking_ref: FrameShell | None = None

    # Constantly adapted.
    cam_to_world: np.ndarray = field(default_factory=_identity_pose)
    aff_g2l: AffLight = field(default_factory=AffLight)
    pose_valid: bool = True

    # Statistics.
    statistics_outlier_res_on_this: int = 0
    statistics_good_res_on_this: int = 0
    marginalized_at: int = -1
    moved_by_opt: float = 0.0