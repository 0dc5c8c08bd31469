"""Score keeping for one session and the high score across sessions."""

import logging
from dataclasses import dataclass

from flappy import config

logger = logging.getLogger(__name__)


def format_score(n, digits=config.SCORE_DIGITS):
    """Zero-pad a score for the scoreboard, e.g. 42 -> '00042'."""
    return str(int(n)).zfill(digits)


@dataclass(frozen=True)
class SessionResult:
    """Final numbers of a finished run, handed to the game-over card."""

    score: int
    high_score: int
    new_record: bool


class ScoreBoard:
    """Current score plus the persisted high score.

    The high score is loaded once when the board is created and only ever
    grows; it is written back when a run ends with a better score.
    """

    def __init__(self, store):
        self.store = store
        self.score = 0
        self.high_score = store.load()

    def reset(self):
        self.score = 0

    def record_pass(self, pipe):
        """Count a pipe the bird has cleared. Each pipe counts at most once."""
        if pipe.passed:
            return False
        pipe.passed = True
        self.score += 1
        return True

    def settle(self):
        """Close the run: update and persist the high score if it was beaten."""
        new_record = self.score > self.high_score
        if new_record:
            self.high_score = self.score
            self.store.save(self.high_score)
            logger.info("New high score: %d", self.high_score)
        return SessionResult(score=self.score, high_score=self.high_score,
                             new_record=new_record)
