import random

import pytest

from flappy import config
from flappy.spawner import PipeSpawner


def test_nothing_spawns_before_the_interval(fixed_rng):
    spawner = PipeSpawner(fixed_rng(300), interval=1.8)
    assert spawner.update(1.0) == []
    assert spawner.update(0.5) == []


def test_spawn_keeps_leftover_time(fixed_rng):
    spawner = PipeSpawner(fixed_rng(300), interval=1.8)
    spawner.update(1.0)
    pipes = spawner.update(0.9)
    assert len(pipes) == 1
    assert spawner.accumulator == pytest.approx(0.1)


def test_new_pipe_enters_at_right_edge(fixed_rng):
    rng = fixed_rng(250)
    spawner = PipeSpawner(rng, interval=1.0)
    (pipe,) = spawner.update(1.0)
    assert pipe.x == config.PIPE_SPAWN_X
    assert pipe.width == config.PIPE_WIDTH
    assert pipe.gap_size == config.PIPE_GAP
    assert pipe.gap_y == 250
    assert pipe.passed is False
    assert rng.calls == [(config.GAP_MIN_Y, config.GAP_MAX_Y)]


def test_prime_brings_first_pipe_forward(fixed_rng):
    spawner = PipeSpawner(fixed_rng(300), interval=1.8, preload=0.6)
    spawner.prime()
    assert spawner.accumulator == pytest.approx(1.08)
    assert spawner.update(0.7) == []
    assert len(spawner.update(0.03)) == 1


def test_reset_clears_accumulator(fixed_rng):
    spawner = PipeSpawner(fixed_rng(300))
    spawner.prime()
    spawner.reset()
    assert spawner.accumulator == 0.0


def test_long_step_spawns_every_due_pipe(fixed_rng):
    spawner = PipeSpawner(fixed_rng(300), interval=1.8)
    assert len(spawner.update(3.7)) == 2
    assert spawner.accumulator == pytest.approx(0.1)


def test_spawn_rate_holds_under_uneven_frames(fixed_rng):
    rng = random.Random(3)
    spawner = PipeSpawner(fixed_rng(300), interval=1.8)
    total = 0.0
    count = 0
    while total < 180.0:
        dt = rng.uniform(0.001, config.MAX_FRAME_DELTA)
        total += dt
        count += len(spawner.update(dt))
    assert count == pytest.approx(total / 1.8, abs=1)


def test_gaps_stay_inside_safe_band():
    spawner = PipeSpawner(random.Random(11))
    pipes = [spawner.spawn() for _ in range(200)]
    for pipe in pipes:
        assert config.GAP_MIN_Y <= pipe.gap_y <= config.GAP_MAX_Y
