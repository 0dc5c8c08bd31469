"""Vertical integration for the bird and the two world boundaries."""

from flappy import config
from flappy.entities import clamp


def integrate(bird, dt, gravity=config.GRAVITY, max_velocity=config.MAX_VELOCITY,
              ceiling=config.CEILING_MARGIN, ground=config.GROUND_Y):
    """Advance the bird by dt seconds and apply the ceiling and floor.

    Returns True when the bird reached the ground during this step. The
    ceiling only stops the bird; the ground is fatal and the caller decides
    what that means for the game.
    """
    bird.velocity += gravity * dt
    bird.velocity = clamp(bird.velocity, -max_velocity, max_velocity)
    bird.y += bird.velocity * dt

    # ceiling: hold the bird just under the top edge, no bounce
    if bird.y < ceiling:
        bird.y = ceiling
        bird.velocity = 0.0

    # floor: sit exactly on the ground line
    if bird.y + bird.height >= ground:
        bird.y = ground - bird.height
        return True
    return False
