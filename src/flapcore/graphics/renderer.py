"""Rasterizes a game frame into an RGB buffer."""

from dataclasses import dataclass
import logging

import numpy as np
from numpy.typing import NDArray

from flapcore.game.models import Frame, PipePair
from flapcore.graphics.primitives import Color, Buffer, new_buffer, fill, draw_rect, draw_circle

logger = logging.getLogger(__name__)


@dataclass
class Palette:
    """Colors used when drawing a frame."""

    sky: Color = (40, 80, 120)
    pipe: Color = (80, 200, 120)
    pipe_edge: Color = (30, 110, 60)
    ground: Color = (60, 40, 20)
    bird: Color = (255, 220, 80)
    bird_eye: Color = (20, 20, 20)
    game_over_tint: Color = (120, 30, 30)


class FrameRenderer:
    """Draws frames read-only; it never mutates the frame it is given.

    The buffer is allocated once per playfield size and reused between
    calls, so callers that keep a buffer must copy it.
    """

    def __init__(self, palette: Palette | None = None) -> None:
        self.palette = palette or Palette()
        self._buffer: Buffer | None = None

    def render(self, frame: Frame) -> NDArray[np.uint8]:
        """Render ``frame`` into a (height, width, 3) uint8 buffer."""
        buffer = self._buffer_for(frame)
        fill(buffer, self.palette.sky)

        for pair in frame.pipes:
            if pair.show:
                self._draw_pair(buffer, pair)

        ground_height = int(frame.ground.height)
        draw_rect(
            buffer, 0, int(frame.height) - ground_height,
            int(frame.width), ground_height, self.palette.ground,
        )

        self._draw_bird(buffer, frame)

        if frame.game_over:
            # Dim everything towards the tint
            tint = np.array(self.palette.game_over_tint, dtype=np.uint16)
            buffer[:] = ((buffer.astype(np.uint16) + tint) // 2).astype(np.uint8)

        return buffer

    def _buffer_for(self, frame: Frame) -> Buffer:
        width, height = int(frame.width), int(frame.height)
        if self._buffer is None or self._buffer.shape[:2] != (height, width):
            logger.debug(f"Allocating render buffer {width}x{height}")
            self._buffer = new_buffer(width, height)
        return self._buffer

    def _draw_pair(self, buffer: Buffer, pair: PipePair) -> None:
        left = int(round(pair.left))
        width = int(pair.width)

        top = pair.top_pipe
        draw_rect(buffer, left, int(top.top), width, int(top.height), self.palette.pipe)
        draw_rect(buffer, left, int(top.top), width, int(top.height), self.palette.pipe_edge, filled=False)

        bottom = pair.bottom_pipe
        draw_rect(buffer, left, int(bottom.top), width, int(bottom.height), self.palette.pipe)
        draw_rect(buffer, left, int(bottom.top), width, int(bottom.height), self.palette.pipe_edge, filled=False)

    def _draw_bird(self, buffer: Buffer, frame: Frame) -> None:
        bird = frame.bird
        x, y, size = int(bird.left), int(round(bird.top)), int(bird.size)
        draw_rect(buffer, x, y, size, size, self.palette.bird)
        eye_radius = max(1, size // 10)
        draw_circle(buffer, x + size * 3 // 4, y + size // 3, eye_radius, self.palette.bird_eye)
