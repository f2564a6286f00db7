"""Tunable parameters of the odometry pipeline and the static point patterns."""

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PYR_LEVELS = 6
MAX_RES_PER_POINT = 8
NUM_THREADS = 6

# The pattern in use is fixed: the eight-point pattern with padding two.
PATTERN_NUM = 8
PATTERN_INDEX = 8
PATTERN_PADDING = 2


class SolverMode(enum.IntFlag):
    """Flags selecting how the linear system is solved."""

    SVD = 1
    ORTHOGONALIZE_SYSTEM = 2
    ORTHOGONALIZE_POINTMARG = 4
    ORTHOGONALIZE_FULL = 8
    SVD_CUT7 = 16
    REMOVE_POSEPRIOR = 32
    USE_GN = 64
    FIX_LAMBDA = 128
    ORTHOGONALIZE_X = 256
    MOMENTUM = 512
    STEPMOMENTUM = 1024
    ORTHOGONALIZE_X_LATER = 2048


@dataclass
class Settings:
    """All run-time parameters, with their default values."""

    pyr_levels_used: int = PYR_LEVELS

    # When keyframes are taken.
    keyframes_per_second: float = 0.0
    real_time_max_kf: bool = False
    max_shift_weight_t: float = 0.04 * (640 + 480)
    max_shift_weight_r: float = 0.0 * (640 + 480)
    max_shift_weight_rt: float = 0.02 * (640 + 480)
    kf_global_weight: float = 1.0
    max_affine_weight: float = 2.0

    # Priors fixing unobservable dimensions.
    idepth_fix_prior: float = 50.0 * 50.0
    idepth_fix_prior_marg_fac: float = 600.0 * 600.0
    initial_rot_prior: float = 1e11
    initial_trans_prior: float = 1e10
    initial_aff_b_prior: float = 1e14
    initial_aff_a_prior: float = 1e14
    initial_calib_hessian: float = 5e9

    # Linear system solving.
    solver_mode: SolverMode = SolverMode.FIX_LAMBDA | SolverMode.ORTHOGONALIZE_X_LATER
    solver_mode_delta: float = 0.00001
    force_accept_step: bool = True

    # Point activation and marginalisation.
    min_idepth_h_act: float = 100.0
    min_idepth_h_marg: float = 50.0

    desired_immature_density: float = 1500.0
    desired_point_density: float = 2000.0
    min_points_remaining: float = 0.05
    max_log_aff_fac_in_window: float = 0.7

    min_frames: int = 5
    max_frames: int = 7
    min_frame_age: int = 1
    max_opt_iterations: int = 6
    min_opt_iterations: int = 1
    th_opt_iterations: float = 1.2

    # Outlier thresholds on photometric energy.
    outlier_th: float = 12.0 * 12.0
    outlier_th_sum_component: float = 50.0 * 50.0

    pattern: int = 8
    marg_weight_fac: float = 0.5 * 0.5

    re_track_threshold: float = 1.5

    min_good_active_res_for_marg: int = 3
    min_good_res_for_marg: int = 4

    # 0 = nothing, 1 = apply inverse response, 2 = also remove vignette.
    photometric_calibration: int = 2
    use_exposure: bool = True
    affine_opt_mode_a: float = 1e12
    affine_opt_mode_b: float = 1e8

    gamma_weights_pixel_select: int = 1

    huber_th: float = 9.0

    # Adaptive energy threshold.
    frame_energy_th_const_weight: float = 0.5
    frame_energy_th_n: float = 0.7
    frame_energy_th_fac_median: float = 1.5
    overall_energy_th_weight: float = 1.0
    coarse_cutoff_th: float = 20.0

    # Pixel selection.
    min_grad_hist_cut: float = 0.5
    min_grad_hist_add: float = 7.0
    grad_downweight_per_level: float = 0.75
    select_direction_distribution: bool = True

    # Immature point tracking.
    max_pix_search: float = 0.027
    min_trace_quality: float = 3.0
    min_trace_test_radius: int = 2
    gn_its_on_point_activation: int = 3
    trace_stepsize: float = 1.0
    trace_gn_iterations: int = 3
    trace_gn_threshold: float = 0.1
    trace_extra_slack_on_th: float = 1.2
    trace_slack_interval: float = 1.5
    trace_min_improvement_factor: float = 2.0

    # Benchmarking of undistortion settings.
    benchmark_fxfyfac: float = 0.0
    benchmark_width: int = 0
    benchmark_height: int = 0
    benchmark_var_noise: float = 0.0
    benchmark_var_blur_noise: float = 0.0
    benchmark_initializer_slack_factor: float = 1.0
    benchmark_noise_gridsize: int = 3

    free_debug_param1: float = 1.0
    free_debug_param2: float = 1.0
    free_debug_param3: float = 1.0
    free_debug_param4: float = 1.0
    free_debug_param5: float = 1.0

    disable_reconfigure: bool = False
    debug_save_images: bool = False
    multi_threading: bool = True
    disable_all_display: bool = False
    only_log_kf_poses: bool = True
    log_stuff: bool = True

    go_step_by_step: bool = False

    render_display_coarse_tracking_full: bool = False
    render_render_window_frames: bool = True
    render_plot_tracking_full: bool = False
    render_display_3d: bool = True
    render_display_residual: bool = True
    render_display_video: bool = True
    render_display_depth: bool = True

    full_reset_requested: bool = False
    debugout_runquiet: bool = False

    sparsity_factor: int = 5

    def handle_key(self, key: str) -> None:
        """Cycle ``free_debug_param5`` through 0..9 with 'd' (up) and 's' (down)."""
        if key in ("d", "D"):
            self.free_debug_param5 = float(int(self.free_debug_param5 + 1) % 10)
        elif key in ("s", "S"):
            self.free_debug_param5 = float(int(self.free_debug_param5 - 1 + 10) % 10)
        else:
            return
        logger.info("new freeDebugParam5: %f!", self.free_debug_param5)


@dataclass(frozen=True)
class Pattern:
    """A residual pattern: pixel offsets around a point and the border it needs."""

    offsets: tuple[tuple[int, int], ...]
    padding: int

    def __len__(self) -> int:
        return len(self.offsets)

    def __iter__(self):
        return iter(self.offsets)


_SPREAD_9 = ((0, -2), (-1, -1), (1, -1), (-2, 0), (0, 0), (2, 0), (-1, 1), (1, 1), (0, 2))
_SPREAD_13 = _SPREAD_9 + ((-2, -2), (-2, 2), (2, -2), (2, 2))

_STATIC_PATTERNS: tuple[Pattern, ...] = (
    Pattern(((0, 0),), 1),
    Pattern(((0, -1), (-1, 0), (0, 0), (1, 0), (0, 1)), 1),
    Pattern(((-1, -1), (1, 1), (0, 0), (-1, 1), (1, -1)), 1),
    Pattern(
        ((-1, -1), (-1, 0), (-1, 1), (-1, 0), (0, 0), (0, 1), (1, -1), (1, 0), (1, 1)),
        1,
    ),
    Pattern(_SPREAD_9, 2),
    Pattern(_SPREAD_13, 2),
    Pattern(tuple((dx, dy) for dx in range(-2, 3) for dy in range(-2, 3)), 2),
    Pattern(
        _SPREAD_13
        + ((-3, -1), (-3, 1), (3, -1), (3, 1), (1, -3), (-1, -3), (1, 3), (-1, 3)),
        3,
    ),
    Pattern(((0, -2), (-1, -1), (1, -1), (-2, 0), (0, 0), (2, 0), (-1, 1), (0, 2)), 2),
    Pattern(tuple((dx, dy) for dx in range(-4, 5, 2) for dy in range(-4, 5, 2)), 4),
)


def pattern(index: int) -> Pattern:
    """Return the static pattern with the given index (0..9)."""
    if not 0 <= index < len(_STATIC_PATTERNS):
        raise IndexError(f"no pattern with index {index}")
    return _STATIC_PATTERNS[index]


_settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings object."""
    return _settings


def reset_settings() -> Settings:
    """Restore every setting of the process-wide object to its default."""
    defaults = Settings()
    for field in dataclasses.fields(Settings):
        setattr(_settings, field.name, getattr(defaults, field.name))
    return _settings