import numpy as np

from visodom.frame_shell import FrameShell


def test_defaults():
    shell = FrameShell()
    assert shell.id == 0
    assert shell.pose_valid is True
    assert shell.marginalized_at == -1
    assert shell.moved_by_opt == 0
    assert shell.statistics_good_res_on_this == 0
    assert shell.statistics_outlier_res_on_this == 0
    assert shell.tracking_ref is None


def test_poses_start_at_identity():
    shell = FrameShell()
    assert np.array_equal(shell.cam_to_world, np.eye(4))
    assert np.array_equal(shell.cam_to_tracking_ref, np.eye(4))


def test_affine_light_starts_neutral():
    shell = FrameShell()
    assert np.array_equal(shell.aff_g2l.vec(), np.zeros(2))


def test_shells_do_not_share_state():
    first = FrameShell()
    second = FrameShell()
    first.cam_to_world[0, 3] = 5.0
    first.aff_g2l.a = 0.5
    assert second.cam_to_world[0, 3] == 0.0
    assert second.aff_g2l.a == 0.0


def test_tracking_reference_link():
    ref = FrameShell(id=0, timestamp=1.0)
    shell = FrameShell(id=1, incoming_id=10, timestamp=2.0, tracking_ref=ref)
    assert shell.tracking_ref is ref
    assert shell.tracking_ref.timestamp == 1.0
    assert shell.incoming_id == 10