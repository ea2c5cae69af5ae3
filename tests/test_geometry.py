import pytest

from arenakit.geometry import (
    Color,
    Position,
    Rect,
    TileSettings,
    Viewport,
    reduce_to_zero,
)


def test_overlapping_rects_intersect_symmetrically():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b) is True
    assert b.intersects(a) is True


def test_touching_edges_do_not_intersect():
    assert Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10)) is False
    assert Rect(0, 0, 10, 10).intersects(Rect(0, 10, 10, 10)) is False


def test_empty_rect_never_intersects():
    assert Rect(2, 2, 0, 5).intersects(Rect(0, 0, 10, 10)) is False
    assert Rect(0, 0, 10, 10).intersects(Rect(2, 2, 5, -1)) is False


def test_contained_rect_intersects():
    assert Rect(0, 0, 100, 100).intersects(Rect(40, 40, 1, 1)) is True


def test_center_of_rect():
    assert Rect(10, 20, 16, 16).center() == Rect(18, 28, 1, 1)


def test_color_equality():
    assert Color(1, 2, 3, 4) == Color(1, 2, 3, 4)
    assert Color() == Color(0, 0, 0, 0)


def test_to_screen_identity_at_unit_scale():
    settings = TileSettings(tile_size_input=16, tile_size_physics=16, tile_size_render=16)
    screen = Rect(5, 7, 100, 100)
    pos = Rect(50, 60, 1, 1)
    assert settings.to_screen(screen, pos) == Rect(50 - 5, 60 - 7, 1, 1)


def test_scale_render_ratio():
    settings = TileSettings(tile_size_physics=16, tile_size_render=32)
    assert settings.scale_render == 2


def test_viewport_whole_covers_screen():
    vp = Viewport(Position.WHOLE, Rect(3, 4, 5, 6))
    rect = vp.compute(800, 600)
    assert rect == Rect(0, 0, 800, 600)
    assert vp.rect == rect


def test_viewport_right_touches_right_edge():
    vp = Viewport(Position.RIGHT, Rect(0, 10, 200, 20))
    rect = vp.compute(800, 600)
    assert rect.x + rect.w == 800
    assert rect.y == 10
    assert rect.y + rect.h + 20 == 600


@pytest.mark.parametrize("pos", [Position.RIGHT_FILL, Position.TOP_FILL, Position.BOTTOM_FILL])
def test_unhandled_positions_fall_back_to_right(pos):
    border = Rect(7, 11, 150, 30)
    expected = Viewport(Position.RIGHT, border).compute(640, 480)
    assert Viewport(pos, border).compute(640, 480) == expected


def test_viewport_left_starts_at_zero():
    rect = Viewport(Position.LEFT, Rect(0, 5, 120, 40)).compute(640, 480)
    assert rect.x == 0
    assert rect.w == 120
    assert rect.h + 40 == 480


def test_viewport_left_fill_leaves_border():
    rect = Viewport(Position.LEFT_FILL, Rect(0, 5, 120, 40)).compute(640, 480)
    assert rect.x == 0
    assert rect.w + 120 == 640


def test_viewport_center_is_symmetric():
    rect = Viewport(Position.CENTER, Rect(0, 0, 200, 0)).compute(800, 600)
    left_gap = rect.x
    right_gap = 800 - (rect.x + rect.w)
    assert left_gap == right_gap


def test_viewport_bottom_has_zero_height():
    rect = Viewport(Position.BOTTOM, Rect(10, 0, 20, 50)).compute(800, 600)
    assert rect.h == 0
    assert rect.y + 50 == 600
    assert rect.x == 10


def test_viewport_top_starts_at_zero():
    rect = Viewport(Position.TOP, Rect(10, 5, 20, 50)).compute(800, 600)
    assert rect.y == 0
    assert rect.x == 10
    assert rect.w + 20 == 800


@pytest.mark.parametrize("value", [5, -5, 0.5, -0.25])
def test_reduce_to_zero_does_not_cross_zero(value):
    assert reduce_to_zero(value, 10) == 0


def test_reduce_to_zero_reduces_magnitude():
    assert reduce_to_zero(7, 2) + 2 == 7
    assert reduce_to_zero(-7, 2) - 2 == -7
    assert reduce_to_zero(0, 3) == 0