"""64x32 monochrome frame buffer.

Pixels are stored as 32-bit values so a renderer can blit the buffer straight
into an RGB32 image: ``PIXEL_ON`` is opaque white, ``PIXEL_OFF`` is black.
Only CLS (``clear``) and DRW (``draw_sprite``) mutate it; both set ``dirty``
so a renderer can skip frames where nothing changed.
"""
from typing import Iterable, List

WIDTH = 64
HEIGHT = 32
PIXEL_ON = 0xFFFFFFFF
PIXEL_OFF = 0x00000000


class Display:
    def __init__(self):
        self.pixels: List[int] = [PIXEL_OFF] * (WIDTH * HEIGHT)
        self.dirty = True

    def clear(self) -> None:
        self.pixels[:] = [PIXEL_OFF] * (WIDTH * HEIGHT)
        self.dirty = True

    def is_on(self, x: int, y: int) -> bool:
        return self.pixels[y * WIDTH + x] == PIXEL_ON

    def draw_sprite(self, x: int, y: int, sprite: Iterable[int]) -> bool:
        """XOR an 8-pixel-wide sprite onto the screen with its top-left corner at (x, y).

        Each byte of ``sprite`` is one row (row index -> y displacement); its
        most significant bit is the leftmost column (bit index -> x
        displacement). The origin and every covered pixel wrap around the
        screen independently in each axis.

        Returns True if any pixel was switched from on to off.
        """
        ox, oy = x % WIDTH, y % HEIGHT
        self.dirty = True
        collision = False
        for row, byte in enumerate(sprite):
            py = (oy + row) % HEIGHT
            for col in range(8):
                if not (byte >> (7 - col)) & 1:
                    continue
                idx = py * WIDTH + (ox + col) % WIDTH
                if self.pixels[idx] == PIXEL_ON:
                    collision = True
                self.pixels[idx] ^= PIXEL_ON
        return collision

    def rows(self) -> List[List[bool]]:
        """Screen as HEIGHT lists of WIDTH booleans."""
        return [[p == PIXEL_ON for p in self.pixels[r * WIDTH:(r + 1) * WIDTH]]
                for r in range(HEIGHT)]
