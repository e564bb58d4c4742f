import numpy as np

from chip8vm.framebuffer import FrameBuffer


def test_draw_and_collision():
    fb = FrameBuffer()
    assert fb.draw_sprite(0, 0, b"\xF0") is False
    assert [fb.get(x, 0) for x in range(5)] == [True, True, True, True, False]
    # overlapping one pixel turns it off
    assert fb.draw_sprite(3, 0, b"\x80") is True
    assert not fb.get(3, 0)


def test_clip_right_edge():
    fb = FrameBuffer()
    fb.draw_sprite(60, 0, b"\xFF")
    assert fb.lit() == 4
    assert not fb.get(0, 0)


def test_clip_bottom_edge():
    fb = FrameBuffer()
    fb.draw_sprite(0, 30, b"\x80\x80\x80\x80")
    assert fb.lit() == 2
    assert not fb.get(0, 0)


def test_offscreen_origin_draws_nothing_but_is_dirty():
    fb = FrameBuffer()
    fb.consume()
    assert fb.draw_sprite(64, 40, b"\xFF") is False
    assert fb.lit() == 0
    assert fb.dirty


def test_consume_clears_dirty_and_copies():
    fb = FrameBuffer()
    fb.draw_sprite(1, 1, b"\x80")
    frame = fb.consume()
    assert not fb.dirty
    frame[:] = False
    assert fb.get(1, 1)
    assert frame.shape == (32, 64)
    assert frame.dtype == np.bool_


def test_clear():
    fb = FrameBuffer()
    fb.draw_sprite(0, 0, b"\xFF\xFF")
    fb.consume()
    fb.clear()
    assert fb.lit() == 0
    assert fb.dirty
