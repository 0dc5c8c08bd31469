"""
Drawing of a simulation snapshot with pygame primitives.

The renderer never touches the simulation; it paints whatever `Snapshot` it
is handed. No sprite files are used, so the game stays self-contained.
"""

import math
import random

import pygame

from flappy import config
from flappy.scoring import format_score
from flappy.simulation import GameState

_fonts = {}


def get_font(size):
    """Default pygame font at the given size, created once per size.

    Fonts die with pygame.font.quit(), so the cache starts over whenever the
    font module has to be brought back up.
    """
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    font = _fonts.get(size)
    if font is None:
        font = pygame.font.Font(None, size)
        _fonts[size] = font
    return font


def draw_text(surf, text, size, pos, color=config.TEXT_COLOR, center=False):
    """Convenience to draw text on a surface, anchored top-left or centred."""
    surf_t = get_font(size).render(text, True, color)
    rect = surf_t.get_rect()
    if center:
        rect.center = pos
    else:
        rect.topleft = pos
    surf.blit(surf_t, rect)
    return rect


def make_stars(rng, width=config.WORLD_WIDTH, height=config.WORLD_HEIGHT,
               count=config.STAR_COUNT):
    """Scatter small stars over the upper half of the sky."""
    return [
        (rng.random() * width, rng.random() * (height / 2), 2 if rng.random() > 0.7 else 1)
        for _ in range(count)
    ]


def _rotated_ellipse(cx, cy, rx, ry, angle, pivot, steps=16):
    """Polygon points for an ellipse centred at (cx, cy) rotated about pivot."""
    px, py = pivot
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    points = []
    for i in range(steps):
        t = 2 * math.pi * i / steps
        x = cx + rx * math.cos(t) - px
        y = cy + ry * math.sin(t) - py
        points.append((px + x * cos_a - y * sin_a, py + x * sin_a + y * cos_a))
    return points


def draw_bird(surf, x, y, frame):
    """Draw the bird with its top-left corner at (x, y) and the given wing pose."""
    c = config.BIRD_COLORS
    x, y = int(x), int(y)

    # tail
    pygame.draw.polygon(surf, c["outline"], [(x + 6, y + 18), (x, y + 14), (x, y + 24)])
    pygame.draw.polygon(surf, c["body"], [(x + 6, y + 18), (x + 2, y + 16), (x + 2, y + 22)])

    # body and belly
    pygame.draw.ellipse(surf, c["outline"], (x + 2, y, 48, 36))
    pygame.draw.ellipse(surf, c["body"], (x + 4, y + 2, 44, 32))
    pygame.draw.ellipse(surf, c["belly"], (x + 10, y + 13, 28, 18))

    # wing, rotated around its shoulder
    angle = config.WING_ANGLES[frame % len(config.WING_ANGLES)]
    shoulder = (x + 28, y + 20)
    pygame.draw.polygon(surf, c["outline"],
                        _rotated_ellipse(x + 14, y + 20, 16, 10, angle, shoulder))
    pygame.draw.polygon(surf, c["wing"],
                        _rotated_ellipse(x + 15, y + 20, 14, 8, angle, shoulder))

    # beak
    beak = [(x + 42, y + 18), (x + 52, y + 21), (x + 42, y + 24)]
    pygame.draw.polygon(surf, c["beak"], beak)
    pygame.draw.polygon(surf, c["outline"], beak, 2)

    # eye
    pygame.draw.circle(surf, c["eye"], (x + 36, y + 18), 4)
    pygame.draw.circle(surf, c["highlight"], (x + 35, y + 17), 1)


def draw_obstacle(surf, obstacle, ground_y=config.GROUND_Y):
    """Render the solid parts of a pipe with dark caps along the gap edges."""
    x = int(obstacle.x)
    w = int(obstacle.width)
    gap_half = obstacle.gap_size / 2
    top_h = int(obstacle.gap_y - gap_half)
    bottom_y = int(obstacle.gap_y + gap_half)

    pygame.draw.rect(surf, config.PIPE_COLOR, (x, 0, w, top_h))
    pygame.draw.rect(surf, config.PIPE_COLOR, (x, bottom_y, w, int(ground_y) - bottom_y))

    cap = config.PIPE_CAP_HEIGHT
    pygame.draw.rect(surf, config.PIPE_CAP_COLOR, (x, top_h - cap, w, cap))
    pygame.draw.rect(surf, config.PIPE_CAP_COLOR, (x, bottom_y, w, cap))


class Renderer:
    """Paints snapshots onto a target surface."""

    def __init__(self, surface, rng=None):
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.stars = make_stars(rng if rng is not None else random.Random(),
                                self.width, self.height)

    def draw_background(self):
        surf = self.surface
        surf.fill(config.BACKGROUND)
        pygame.draw.line(surf, config.GROUND_SHADOW, (0, config.GROUND_Y + 6),
                         (self.width, config.GROUND_Y + 6), 2)
        for sx, sy, size in self.stars:
            surf.fill(config.STAR_COLOR, (int(sx), int(sy), size, size))
        pygame.draw.line(surf, config.GROUND_LINE, (0, config.GROUND_Y),
                         (self.width, config.GROUND_Y), 2)

    def draw_hud(self, snapshot):
        draw_text(self.surface, format_score(snapshot.score), 32, (12, 12))
        draw_text(self.surface, "HI " + format_score(snapshot.high_score), 22, (12, 42),
                  color=config.MUTED_TEXT)

    def draw_idle_prompt(self):
        cx, cy = self.width // 2, self.height // 2
        draw_text(self.surface, "FLAPPY BIRD", 48, (cx, cy - 52), center=True)
        draw_text(self.surface, "Press UP to start", 30, (cx, cy), color=config.MUTED_TEXT,
                  center=True)
        draw_text(self.surface, "UP to flap  -  DOWN to dive", 22, (cx, cy + 28),
                  color=config.MUTED_TEXT, center=True)

    def draw_game_over(self, snapshot):
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.surface.blit(overlay, (0, 0))

        cx, cy = self.width // 2, self.height // 2
        result = snapshot.result
        score = result.score if result else snapshot.score
        draw_text(self.surface, "GAME OVER", 56, (cx, cy - 60), center=True)
        draw_text(self.surface, "Score: %d" % score, 34, (cx, cy - 10), center=True)
        if result is not None and result.new_record:
            draw_text(self.surface, "New best!", 26, (cx, cy + 22), color=config.BIRD_COLORS["body"],
                      center=True)
        draw_text(self.surface, "ENTER to restart  -  E to save a share card", 22,
                  (cx, cy + 60), color=config.MUTED_TEXT, center=True)

    def draw(self, snapshot):
        """Draw everything: background, pipes, bird, HUD and overlays."""
        self.draw_background()
        for obstacle in snapshot.obstacles:
            draw_obstacle(self.surface, obstacle)

        # the bird disappears once the run is over
        if snapshot.state is not GameState.OVER:
            p = snapshot.player
            draw_bird(self.surface, p.x, p.y, p.frame)

        self.draw_hud(snapshot)

        if snapshot.state is GameState.IDLE:
            self.draw_idle_prompt()
        elif snapshot.show_card:
            self.draw_game_over(snapshot)
