"""
Share card for a finished run.

The card only reads the final score and best score the simulation has
already settled; building it never changes game state.
"""

import logging
import os
import time

import pygame

from flappy import config
from flappy.render import draw_text
from flappy.scoring import format_score

logger = logging.getLogger(__name__)


def render_share_card(score, high_score, size=config.SHARE_CARD_SIZE):
    """Build the card as an off-screen surface."""
    width, height = size
    card = pygame.Surface(size)
    card.fill((18, 18, 18))

    # vertical fade inside the frame
    inner = pygame.Rect(14, 14, width - 28, height - 28)
    for i in range(inner.height):
        u = i / max(1, inner.height - 1)
        shade = int(60 * (1 - u) + 18 * u)
        pygame.draw.line(card, (shade, shade, shade), (inner.left, inner.top + i),
                         (inner.right - 1, inner.top + i))
    pygame.draw.rect(card, (45, 45, 45), inner, 4)

    draw_text(card, "FLAPPY BIRD", 44, (width // 2, 76), color=(242, 242, 242), center=True)
    draw_text(card, "Score " + format_score(score), 30, (width // 2, 138),
              color=config.MUTED_TEXT, center=True)
    draw_text(card, "Best  " + format_score(high_score), 30, (width // 2, 178),
              color=config.MUTED_TEXT, center=True)
    draw_text(card, "#FlappyBird", 20, (width // 2, height - 52), color=config.FAINT_TEXT,
              center=True)
    draw_text(card, "offline flaps", 20, (width // 2, height - 32), color=config.FAINT_TEXT,
              center=True)
    return card


def share_card_filename(now=None):
    """flappy-bird-<epoch millis>.png"""
    if now is None:
        now = time.time()
    return "%s-%d.png" % (config.SHARE_CARD_PREFIX, int(now * 1000))


def save_share_card(card, directory=".", now=None):
    """Write the card as PNG. Returns the file path, or None if saving failed."""
    path = os.path.join(directory, share_card_filename(now))
    try:
        pygame.image.save(card, path)
    except (pygame.error, OSError) as e:
        logger.warning("Could not save share card to %s: %s", path, e)
        return None
    logger.info("Share card saved to %s", path)
    return path
