import pytest

from arenakit.geometry import Rect
from arenakit.preset import AnimationData, FloatRect, get_animation_data


@pytest.fixture
def data():
    return get_animation_data(60)


def test_all_animations_present(data):
    expected = {
        f"{kind}_{d}"
        for kind in ("DEFAULT", "WALK", "ATTACK")
        for d in ("DOWN", "RIGHT", "UP", "LEFT")
    } | {"ATTACK", "EXPLOSION"}
    assert set(data) == expected


def test_frequencies_follow_frame_rate(data):
    assert data["DEFAULT_DOWN"].frequency == 60 // 2
    assert data["WALK_LEFT"].frequency == 60 // 8
    assert get_animation_data(120)["ATTACK_UP"].frequency == 120 // 8


def test_default_frames(data):
    anim = data["DEFAULT_RIGHT"]
    assert anim.fclips == [FloatRect(0, 2, 1, 2), FloatRect(6, 2, 1, 2)]
    assert anim.render_mod.x == -0.5
    assert anim.render_mod.y == -1.25
    assert anim.repeat is True


def test_walk_frames_in_a_row(data):
    anim = data["WALK_UP"]
    assert [f.x for f in anim.fclips] == [0, 1, 2, 3]
    assert all(f.y == 4 for f in anim.fclips)


def test_attacks_do_not_repeat(data):
    for name in ("ATTACK_DOWN", "ATTACK_RIGHT", "ATTACK_UP", "ATTACK_LEFT", "ATTACK"):
        assert data[name].repeat is False
    assert data["ATTACK_RIGHT"].fclips[0] == FloatRect(0, 12, 2, 2)
    assert data["ATTACK"].render_mod == FloatRect(-1, -1, 3, 3)


def test_explosion_uses_pixel_clips(data):
    anim = data["EXPLOSION"]
    assert anim.relative is False
    assert anim.fclips == []
    assert len(anim.clips) == 6
    assert anim.clips[0] == Rect(0, 0, 100, 100)
    assert anim.clips[-1] == Rect(0, 500, 100, 100)
    assert anim.render_mod.w == pytest.approx(3.0 * 16 / 100)


def test_calls_return_independent_data():
    first = get_animation_data()
    first["WALK_DOWN"].fclips.clear()
    second = get_animation_data()
    assert len(second["WALK_DOWN"].fclips) == 4


def test_animation_data_defaults():
    anim = AnimationData()
    assert anim.repeat is True
    assert anim.relative is True
    assert anim.clips == [] and anim.fclips == []