from flappy.collision import first_hit, hits_pipe, overlaps_horizontally
from flappy.entities import Pipe


def make_pipe(x=100):
    # gap band 140..260
    return Pipe(x, gap_y=200, width=64, gap_size=120)


def test_inside_gap_is_safe():
    assert not hits_pipe((110, 150, 160, 250), make_pipe())


def test_exactly_filling_gap_is_safe():
    assert not hits_pipe((110, 140, 160, 260), make_pipe())


def test_top_above_gap_collides():
    assert hits_pipe((110, 130, 160, 166), make_pipe())


def test_bottom_below_gap_collides():
    assert hits_pipe((110, 230, 160, 270), make_pipe())


def test_no_horizontal_overlap_never_collides():
    pipe = make_pipe()
    assert not hits_pipe((200, 0, 250, 36), pipe)
    assert not hits_pipe((40, 0, 90, 36), pipe)


def test_touching_edges_do_not_overlap():
    pipe = make_pipe()
    assert not overlaps_horizontally((164, 0, 200, 10), pipe)
    assert not overlaps_horizontally((50, 0, 100, 10), pipe)
    assert overlaps_horizontally((163, 0, 200, 10), pipe)


def test_first_hit_returns_first_colliding_pipe():
    a = Pipe(100, gap_y=50, width=64, gap_size=40)
    b = Pipe(110, gap_y=50, width=64, gap_size=40)
    far = Pipe(400, gap_y=50, width=64, gap_size=40)
    rect = (120, 200, 170, 236)
    assert first_hit(rect, [far, a, b]) is a
    assert first_hit(rect, [far]) is None
    assert first_hit(rect, []) is None
