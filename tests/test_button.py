import copy

import pytest

from arenakit.button import (
    BUTTON_LEFT,
    BUTTON_RIGHT,
    CLIP_COUNT,
    Button,
    ClipType,
    MouseEvent,
    MouseEventType,
)
from arenakit.geometry import Rect, TileSettings

SETTINGS = TileSettings(tile_size_input=16, tile_size_physics=16, tile_size_render=32)
ORIGIN = Rect(0, 0, 0, 0)


def make():
    return Button.from_clip(Rect(10, 20, 100, 40), Rect(0, 0, 8, 8))


def test_from_scale_layout():
    b = Button.from_scale(Rect(0, 0, 10, 10), 2, 1, SETTINGS)
    assert len(b.clips) == CLIP_COUNT
    assert b.clips[0].x == 0
    assert b.clips[0].w == SETTINGS.tile_size_input * 2
    assert b.clips[0].h == SETTINGS.tile_size_input
    for index, clip in enumerate(b.clips):
        assert clip.x == index * b.clips[0].w
        assert clip.y == 0
        assert (clip.w, clip.h) == (b.clips[0].w, b.clips[0].h)


def test_from_clip_shares_clip():
    clip = Rect(1, 2, 3, 4)
    b = Button.from_clip(Rect(0, 0, 5, 5), clip)
    assert all(c == clip for c in b.clips)


def test_wrong_clip_count():
    with pytest.raises(ValueError):
        Button(Rect(0, 0, 5, 5), [Rect()])


def test_initial_state():
    b = make()
    assert b.state == ClipType.DEFAULT
    assert b.clip == b.clips[ClipType.DEFAULT]


def test_hover_click_release():
    b = make()
    assert b.evaluate(MouseEvent(MouseEventType.MOTION), 50, 30, ORIGIN) == ClipType.HOVER
    down = MouseEvent(MouseEventType.BUTTON_DOWN, BUTTON_LEFT)
    assert b.evaluate(down, 50, 30, ORIGIN) == ClipType.CLICK
    up = MouseEvent(MouseEventType.BUTTON_UP, BUTTON_LEFT)
    assert b.evaluate(up, 50, 30, ORIGIN) == ClipType.HOVER


def test_right_button_keeps_state():
    b = make()
    b.evaluate(MouseEvent(MouseEventType.MOTION), 50, 30, ORIGIN)
    down = MouseEvent(MouseEventType.BUTTON_DOWN, BUTTON_RIGHT)
    assert b.evaluate(down, 50, 30, ORIGIN) == ClipType.HOVER


def test_outside_is_default():
    b = make()
    b.evaluate(MouseEvent(MouseEventType.MOTION), 50, 30, ORIGIN)
    assert b.evaluate(MouseEvent(MouseEventType.MOTION), 500, 30, ORIGIN) == ClipType.DEFAULT


def test_non_mouse_event_is_default():
    b = make()
    b.evaluate(MouseEvent(MouseEventType.MOTION), 50, 30, ORIGIN)
    assert b.evaluate(MouseEvent(MouseEventType.OTHER), 50, 30, ORIGIN) == ClipType.DEFAULT


def test_edges_inclusive():
    b = make()
    pos = b.screen_pos
    event = MouseEvent(MouseEventType.MOTION)
    assert b.evaluate(event, pos.x + pos.w, pos.y + pos.h, ORIGIN) == ClipType.HOVER
    assert b.evaluate(event, pos.x + pos.w + 1, pos.y, ORIGIN) == ClipType.DEFAULT


def test_viewport_offset():
    b = make()
    event = MouseEvent(MouseEventType.MOTION)
    viewport = Rect(200, 0, 300, 300)
    assert b.evaluate(event, 50, 30, viewport) == ClipType.DEFAULT
    assert b.evaluate(event, 250, 30, viewport) == ClipType.HOVER
    assert (b.mouse_x, b.mouse_y) == (250, 30)


def test_text_position_centres():
    b = make()
    pos = b.screen_pos
    text_width = 40
    result = b.text_position(text_width)
    assert result.w == text_width
    assert (result.x - pos.x) * 2 == pos.w - text_width
    assert result.y == pos.y and result.h == pos.h
    assert b.screen_pos == Rect(10, 20, 100, 40)


def test_copy_resets_state():
    b = make()
    b.evaluate(MouseEvent(MouseEventType.MOTION), 50, 30, ORIGIN)
    clone = copy.copy(b)
    assert clone.state == ClipType.DEFAULT
    assert clone.screen_pos == b.screen_pos
    assert clone.clips == b.clips
    clone.screen_pos.x += 1
    assert b.screen_pos.x == 10