import numpy as np

from .constants import DISPLAY_HEIGHT, DISPLAY_WIDTH


class FrameBuffer:
    """64x32 monochrome display.

    Pixels live in a ``(height, width)`` boolean numpy array indexed
    ``pixels[y, x]``. Sprites are XOR-composed and clipped at the screen
    edges. ``dirty`` is raised by every mutation and lowered only by the
    renderer through :meth:`consume`.
    """

    def __init__(self, width=DISPLAY_WIDTH, height=DISPLAY_HEIGHT):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=bool)
        self.dirty = True

    def clear(self):
        self.pixels[:] = False
        self.dirty = True

    def get(self, x, y):
        return bool(self.pixels[y, x])

    def draw_sprite(self, x, y, rows):
        """XOR ``rows`` (one byte per row, MSB leftmost) onto the screen at (x, y).

        Returns True when any set pixel was turned off.
        """
        self.dirty = True
        rows = bytes(rows)
        if not rows or x >= self.width or y >= self.height:
            return False

        bits = np.unpackbits(np.frombuffer(rows, dtype=np.uint8)).reshape(-1, 8).astype(bool)
        h = min(len(rows), self.height - y)
        w = min(8, self.width - x)
        bits = bits[:h, :w]

        region = self.pixels[y:y + h, x:x + w]
        collision = bool(np.any(region & bits))
        region ^= bits
        return collision

    def snapshot(self):
        return self.pixels.copy()

    def consume(self):
        """Return a copy of the pixels and clear the dirty flag."""
        frame = self.pixels.copy()
        self.dirty = False
        return frame

    def lit(self):
        return int(np.count_nonzero(self.pixels))
