"""Frame driver: turns display refreshes into bounded delta-time values."""

import pygame

from flappy import config
from flappy.entities import clamp


def clamp_delta(seconds, max_delta=config.MAX_FRAME_DELTA):
    """Bound a raw frame delta so a stalled window cannot take a huge step."""
    return clamp(seconds, 0.0, max_delta)


class FrameClock:
    """Wraps pygame's clock and hands out one delta per frame, in seconds.

    `clock` defaults to ``pygame.time.Clock()``; anything with a
    ``tick(fps) -> milliseconds`` method works, which keeps tests off the
    real timer.
    """

    def __init__(self, fps=config.FPS, max_delta=config.MAX_FRAME_DELTA, clock=None):
        self.fps = fps
        self.max_delta = max_delta
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.frame_index = 0
        self.elapsed = 0.0

    def tick(self):
        """Wait for the next frame and return the bounded delta-time."""
        dt = clamp_delta(self.clock.tick(self.fps) / 1000.0, self.max_delta)
        self.frame_index += 1
        self.elapsed += dt
        return dt
