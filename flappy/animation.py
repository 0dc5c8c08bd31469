"""Wing-flap animation. Runs every tick, whatever the game state."""

from flappy import config


def wing_period(running):
    return config.WING_PERIOD_RUNNING if running else config.WING_PERIOD_IDLE


def step_animation(bird, running, dt):
    """Advance the bird's wing timer and flip to the next frame when due."""
    bird.animation_timer += dt
    if bird.animation_timer >= wing_period(running):
        bird.animation_timer = 0.0
        bird.frame = (bird.frame + 1) % config.WING_FRAMES
