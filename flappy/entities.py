"""
Game objects: the bird the player steers and the pipes it flies through.

Both are plain mutable objects owned by the simulation. They carry no drawing
code; the renderer reads them through snapshots.
"""

from flappy import config


def clamp(v, a, b):
    """Clamp value v between a and b."""
    return max(a, min(b, v))


class Bird:
    """The player's bird: fixed x, free vertical motion and a wing animation.

    Position is the top-left corner of the bird's bounding box and is stored
    as floats for smooth movement.
    """

    def __init__(self, x=config.BIRD_X, y=config.BIRD_START_Y,
                 width=config.BIRD_WIDTH, height=config.BIRD_HEIGHT):
        self.x = float(x)
        self.width = width
        self.height = height
        self.reset(y)

    def reset(self, y=config.BIRD_START_Y):
        """Put the bird back at rest at height y with the wings on frame 0."""
        self.y = float(y)
        self.velocity = 0.0  # vertical velocity (px/sec), positive is down
        self.frame = 0
        self.animation_timer = 0.0

    def flap(self, impulse=config.FLAP_IMPULSE):
        """Replace the current velocity with an upward impulse.

        The impulse is absolute, so two flaps in a row leave the bird at
        exactly the impulse velocity rather than twice it.
        """
        self.velocity = impulse
        self.frame = 0
        self.animation_timer = 0.0

    def dive(self, impulse=config.DIVE_IMPULSE, damping=config.DIVE_DAMPING,
             max_velocity=config.MAX_VELOCITY):
        """Push the bird down by a damped impulse, capped at the fall limit."""
        self.velocity = min(self.velocity + impulse * damping, max_velocity)
        self.frame = 1
        self.animation_timer = 0.0

    @property
    def bottom(self):
        return self.y + self.height

    def rect(self):
        """Return (left, top, right, bottom) for collision checks."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class Pipe:
    """An obstacle column with a single gap, scrolling from right to left."""

    def __init__(self, x, gap_y, width=config.PIPE_WIDTH, gap_size=config.PIPE_GAP):
        self.x = float(x)
        self.width = width
        self.gap_y = float(gap_y)  # vertical centre of the gap
        self.gap_size = gap_size
        self.passed = False  # set once the bird is past the pipe, never cleared

    def update(self, dt, speed=config.WORLD_SPEED):
        """Move pipe left by speed (px/sec)."""
        self.x -= speed * dt

    @property
    def right(self):
        return self.x + self.width

    @property
    def gap_top(self):
        return self.gap_y - self.gap_size / 2

    @property
    def gap_bottom(self):
        return self.gap_y + self.gap_size / 2

    def off_screen(self, limit=config.PIPE_RETIRE_X):
        return self.right <= limit

    def __repr__(self):
        return "Pipe(x=%.1f, gap_y=%.1f, passed=%s)" % (self.x, self.gap_y, self.passed)
