"""Framebuffer to RGBA conversion for the window renderer (numpy only)."""

import numpy as np

PIXEL_ON = (255, 255, 255)
GRID_MINOR = (64, 64, 64)
GRID_MAJOR = (160, 0, 0)


def render_frame(pixels, scale, grid=False):
    """Turn a (height, width) bool frame into scaled RGBA rows, bottom row first."""
    height, width = pixels.shape
    small = np.zeros((height, width, 4), dtype=np.uint8)
    small[..., 3] = 255
    small[pixels, :3] = PIXEL_ON

    if scale != 1:
        scaled = np.repeat(np.repeat(small, scale, axis=0), scale, axis=1)
    else:
        scaled = small

    if grid and scale > 1:
        # one line per CHIP-8 pixel, red every 8x4 block
        scaled[::scale, :, :3] = GRID_MINOR
        scaled[:, ::scale, :3] = GRID_MINOR
        scaled[::scale * 4, :, :3] = GRID_MAJOR
        scaled[:, ::scale * 8, :3] = GRID_MAJOR

    # pyglet's origin is bottom-left
    return np.ascontiguousarray(scaled[::-1])
