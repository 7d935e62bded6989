import pytest

from evansengine.animation import Animation


def test_defaults_match_source():
    anim = Animation()
    assert anim.current_frame == 0
    assert anim.frame_speed == 6
    assert anim.total_frames == 4
    assert anim.frame_timer == 0.0


def test_walk_advances_after_one_frame_duration():
    anim = Animation()
    anim.handle_walk(True, False, 1.0 / anim.frame_speed)
    assert anim.current_frame == 1
    assert anim.frame_timer == 0.0


def test_walk_accumulates_time_below_threshold():
    anim = Animation()
    anim.handle_walk(True, False, 0.05)
    assert anim.current_frame == 0
    assert anim.frame_timer == pytest.approx(0.05)


def test_walk_wraps_to_first_frame():
    anim = Animation()
    step = 1.0 / anim.frame_speed
    seen = []
    for _ in range(anim.total_frames):
        anim.handle_walk(True, False, step)
        seen.append(anim.current_frame)
    assert seen[-1] == 0
    assert all(0 <= frame < anim.total_frames for frame in seen)


def test_idle_is_slower_than_walk():
    anim = Animation()
    walk_step = 1.0 / anim.frame_speed
    anim.handle_idle(walk_step)
    assert anim.current_frame == 0
    anim.handle_idle(walk_step)
    assert anim.current_frame == 1


def test_walk_with_idle_flag_uses_idle_rate():
    anim = Animation()
    anim.handle_walk(False, True, 0.2)
    assert anim.current_frame == 0
    anim.handle_walk(False, True, 0.1)
    assert anim.current_frame == 1


def test_neither_walking_nor_idle_changes_nothing():
    anim = Animation()
    anim.handle_walk(False, False, 10.0)
    assert anim.current_frame == 0
    assert anim.frame_timer == 0.0