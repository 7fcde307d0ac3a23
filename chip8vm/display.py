import numpy as np

from .config import width, height


class DisplayBuffer:
    """64x32 monochrome framebuffer.

    Pixels are kept in a row-major numpy bool array.  Every write wraps
    its coordinates so sprites running off one edge come back on the
    opposite edge.
    """

    def __init__(self, rows=height, cols=width):
        self.rows = rows
        self.cols = cols
        self.pixels = np.zeros((rows, cols), dtype=bool)

    def set(self, row, col, value):
        """XOR ``value`` into the pixel at (row, col); return 1 on collision."""
        row %= self.rows
        col %= self.cols
        value = bool(value)
        collision = 1 if (self.pixels[row, col] and value) else 0
        self.pixels[row, col] ^= value
        return collision

    def get(self, row, col):
        return bool(self.pixels[row % self.rows, col % self.cols])

    def clear(self):
        self.pixels[:] = False

    def lit_count(self):
        return int(np.count_nonzero(self.pixels))

    def to_rgba(self, scale=1, on=(255, 255, 255), off=(0, 0, 0)):
        """Return an upscaled RGBA frame, bottom row first.

        pyglet's image origin is the lower-left corner, so rows are
        flipped here and the renderer can blit the bytes as-is.
        """
        frame = np.zeros((self.rows, self.cols, 4), dtype=np.uint8)
        frame[..., :3] = off
        frame[self.pixels, :3] = on
        frame[..., 3] = 255
        frame = frame[::-1]
        if scale != 1:
            frame = np.repeat(np.repeat(frame, scale, axis=0), scale, axis=1)
        return frame
