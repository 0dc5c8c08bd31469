from flappy import config
from flappy.entities import Bird, Pipe, clamp


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_bird_starts_centred_and_at_rest():
    bird = Bird()
    assert bird.x == config.BIRD_X
    assert bird.y == config.WORLD_HEIGHT / 2
    assert bird.velocity == 0.0
    assert bird.frame == 0


def test_flap_is_not_cumulative():
    bird = Bird()
    bird.flap()
    bird.frame = 1
    bird.animation_timer = 0.05
    bird.flap()
    assert bird.velocity == config.FLAP_IMPULSE
    assert bird.frame == 0
    assert bird.animation_timer == 0.0


def test_dive_adds_damped_impulse():
    bird = Bird()
    bird.dive()
    assert bird.velocity == config.DIVE_IMPULSE * config.DIVE_DAMPING
    assert bird.frame == 1
    assert bird.animation_timer == 0.0


def test_dive_respects_velocity_limit():
    bird = Bird()
    bird.velocity = 600.0
    bird.dive()
    assert bird.velocity == config.MAX_VELOCITY


def test_bird_rect():
    bird = Bird(x=10, y=20, width=5, height=7)
    assert bird.rect() == (10, 20, 15, 27)


def test_pipe_geometry_and_motion():
    pipe = Pipe(100, gap_y=200, width=64, gap_size=120)
    assert pipe.right == 164
    assert pipe.gap_top == 140
    assert pipe.gap_bottom == 260
    assert pipe.passed is False
    pipe.update(0.5, speed=100)
    assert pipe.x == 50


def test_pipe_off_screen_once_right_edge_passes_limit():
    pipe = Pipe(-80, gap_y=200, width=64)
    assert not pipe.off_screen()
    pipe.update(1.0, speed=4)
    assert pipe.off_screen()
