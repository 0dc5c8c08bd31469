"""Timed pipe generation with a randomised gap position."""

import random

from flappy import config
from flappy.entities import Pipe


class PipeSpawner:
    """Emits a new pipe every `interval` seconds of running time.

    The accumulator keeps the leftover after each spawn instead of dropping
    it, so uneven frame times do not drift the long-run spawn rate.

    rng only needs a ``uniform(a, b)`` method; pass a seeded
    ``random.Random`` to make gap placement reproducible.
    """

    def __init__(self, rng=None, interval=config.SPAWN_INTERVAL,
                 preload=config.FIRST_SPAWN_PRELOAD):
        self.rng = rng if rng is not None else random.Random()
        self.interval = interval
        self.preload = preload
        self.accumulator = 0.0

    def reset(self):
        self.accumulator = 0.0

    def prime(self):
        """Preload part of the interval so the first pipe shows up early."""
        self.accumulator = self.interval * self.preload

    def spawn(self):
        """Create a new pipe at the right edge with a random gap centre."""
        gap_y = self.rng.uniform(config.GAP_MIN_Y, config.GAP_MAX_Y)
        return Pipe(config.PIPE_SPAWN_X, gap_y)

    def update(self, dt):
        """Advance the timer and return the pipes that are due this tick."""
        self.accumulator += dt
        spawned = []
        while self.accumulator >= self.interval:
            spawned.append(self.spawn())
            self.accumulator -= self.interval
        return spawned
