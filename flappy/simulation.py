"""
The game simulation: one owned aggregate advanced by `tick(dt)`.

The simulation knows nothing about windows or drawing. A driver feeds it
commands and frame deltas and gets back an immutable `Snapshot` that holds
everything a renderer needs.

Game states
    IDLE     waiting for the first flap or dive; only the wings move
    RUNNING  physics, pipes, scoring and collisions are live
    OVER     frozen until RESTART brings the game back to IDLE
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from flappy import config
from flappy.animation import step_animation
from flappy.clock import clamp_delta
from flappy.collision import first_hit
from flappy.entities import Bird
from flappy.physics import integrate
from flappy.scoring import ScoreBoard, SessionResult
from flappy.spawner import PipeSpawner
from flappy.storage import HighScoreStore

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class Command(enum.Enum):
    FLAP = "flap"
    DIVE = "dive"
    RESTART = "restart"
    # handled by the window loop, ignored by the simulation
    SHARE = "share"
    QUIT = "quit"


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: float
    height: float
    velocity: float
    frame: int


@dataclass(frozen=True)
class ObstacleView:
    x: float
    width: float
    gap_y: float
    gap_size: float
    passed: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame of the game."""

    state: GameState
    player: PlayerView
    obstacles: Tuple[ObstacleView, ...]
    score: int
    high_score: int
    show_card: bool = False
    result: Optional[SessionResult] = None


class Simulation:
    """Owns the bird, the pipes, the score and the game state.

    store: high score store (a `HighScoreStore`); defaults to the JSON file
        named in the config.
    rng: random source for gap placement, anything with ``uniform(a, b)``.
    """

    def __init__(self, store=None, rng=None):
        self.store = store if store is not None else HighScoreStore()
        self.bird = Bird()
        self.pipes = []
        self.spawner = PipeSpawner(rng)
        self.scoreboard = ScoreBoard(self.store)
        self.state = GameState.IDLE
        self.show_card = False
        self.result = None
        self.game_over_listeners = []

    # -----------------------------
    # STATE TRANSITIONS / COMMANDS
    # -----------------------------
    def start(self):
        """IDLE -> RUNNING. The first pipe arrives before a full interval."""
        if self.state is not GameState.IDLE:
            return
        self.state = GameState.RUNNING
        self.spawner.prime()
        logger.debug("Run started")

    def flap(self):
        if self.state is GameState.OVER:
            return
        if self.state is GameState.IDLE:
            self.start()
        self.bird.flap()

    def dive(self):
        if self.state is GameState.OVER:
            return
        if self.state is GameState.IDLE:
            self.start()
        self.bird.dive()

    def restart(self):
        """OVER -> IDLE with a clean board. Does nothing in any other state."""
        if self.state is not GameState.OVER:
            return
        self.pipes.clear()
        self.bird.reset(config.BIRD_START_Y)
        self.scoreboard.reset()
        self.spawner.reset()
        self.show_card = False
        self.result = None
        self.state = GameState.IDLE
        logger.debug("Reset to idle")

    def handle(self, command):
        """Apply one input command. Unknown commands are ignored."""
        if command is Command.FLAP:
            self.flap()
        elif command is Command.DIVE:
            self.dive()
        elif command is Command.RESTART:
            self.restart()

    def add_game_over_listener(self, fn):
        """Call fn(result) every time a run ends."""
        self.game_over_listeners.append(fn)

    def game_over(self):
        self.state = GameState.OVER
        self.result = self.scoreboard.settle()
        self.show_card = True
        logger.info("Game over: score %d, best %d", self.result.score, self.result.high_score)
        for fn in self.game_over_listeners:
            fn(self.result)

    # -----------------------------
    # UPDATE
    # -----------------------------
    def tick(self, dt):
        """Advance the game by dt seconds and return the new snapshot."""
        dt = clamp_delta(dt)
        running = self.state is GameState.RUNNING
        step_animation(self.bird, running, dt)
        if running:
            self._advance(dt)
        return self.snapshot()

    def _advance(self, dt):
        self.pipes.extend(self.spawner.update(dt))

        if integrate(self.bird, dt):
            self.game_over()
            return

        for pipe in self.pipes:
            pipe.update(dt, config.WORLD_SPEED)
            # scoring: the pipe's right edge is behind the bird
            if not pipe.passed and pipe.right < self.bird.x:
                self.scoreboard.record_pass(pipe)

        self.pipes = [p for p in self.pipes if not p.off_screen()]

        if first_hit(self.bird.rect(), self.pipes) is not None:
            self.game_over()

    # -----------------------------
    # SNAPSHOT
    # -----------------------------
    @property
    def score(self):
        return self.scoreboard.score

    @property
    def high_score(self):
        return self.scoreboard.high_score

    def snapshot(self):
        b = self.bird
        return Snapshot(
            state=self.state,
            player=PlayerView(x=b.x, y=b.y, width=b.width, height=b.height,
                              velocity=b.velocity, frame=b.frame),
            obstacles=tuple(
                ObstacleView(x=p.x, width=p.width, gap_y=p.gap_y,
                             gap_size=p.gap_size, passed=p.passed)
                for p in self.pipes
            ),
            score=self.scoreboard.score,
            high_score=self.scoreboard.high_score,
            show_card=self.show_card,
            result=self.result,
        )
