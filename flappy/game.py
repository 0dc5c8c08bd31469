"""
The window: wires pygame's display, clock and event queue to the simulation.

Run with ``python -m flappy`` or the ``flappy-bird`` console script.
"""

import logging
import sys

import pygame

from flappy import config
from flappy.clock import FrameClock
from flappy.controls import InputAdapter
from flappy.render import Renderer
from flappy.share import render_share_card, save_share_card
from flappy.simulation import Command, Simulation
from flappy.storage import HighScoreStore, JsonKeyValueStore

logger = logging.getLogger(__name__)


class Game:
    """Holds the window and runs the frame loop around a `Simulation`."""

    def __init__(self, store=None, rng=None, share_dir="."):
        # initialize pygame and create the window
        pygame.init()
        self.screen = pygame.display.set_mode((config.WORLD_WIDTH, config.WORLD_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        self.clock = FrameClock()

        if store is None:
            store = HighScoreStore(JsonKeyValueStore(config.HIGH_SCORE_FILE))
        self.simulation = Simulation(store=store, rng=rng)
        self.renderer = Renderer(self.screen)
        self.input = InputAdapter()

        # share card of the last finished run, rebuilt on every game over
        self.share_dir = share_dir
        self.share_card = None
        self.simulation.add_game_over_listener(self.on_game_over)
        self.running = False

    def on_game_over(self, result):
        self.share_card = render_share_card(result.score, result.high_score)

    def dispatch(self, command):
        """Route one command: window-level ones here, the rest to the simulation."""
        if command is Command.QUIT:
            self.running = False
        elif command is Command.SHARE:
            if self.share_card is not None and self.simulation.show_card:
                save_share_card(self.share_card, self.share_dir)
        else:
            self.simulation.handle(command)

    def run(self):
        """Main loop: one input poll, one simulation tick and one draw per frame."""
        self.running = True
        logger.info("Starting, best score so far %d", self.simulation.high_score)
        try:
            while self.running:
                dt = self.clock.tick()
                for command in self.input.poll():
                    self.dispatch(command)
                if not self.running:
                    break
                snapshot = self.simulation.tick(dt)
                self.renderer.draw(snapshot)
                pygame.display.flip()
        finally:
            logger.info("Stopped after %d frames (%.1f s)", self.clock.frame_index,
                        self.clock.elapsed)
            self.quit()

    def quit(self):
        pygame.quit()


def main():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Game().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
