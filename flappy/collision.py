"""
Collision tests between the bird's bounding box and pipes.

A pipe is two solid rectangles, one above and one below its gap. The bird is
safe inside a pipe's column only while its whole box sits within the gap band.
"""


def overlaps_horizontally(rect, pipe):
    left, _top, right, _bottom = rect
    return left < pipe.right and right > pipe.x


def hits_pipe(rect, pipe):
    """Check whether a (left, top, right, bottom) box touches a pipe's solids."""
    if not overlaps_horizontally(rect, pipe):
        return False
    _left, top, _right, bottom = rect
    return top < pipe.gap_top or bottom > pipe.gap_bottom


def first_hit(rect, pipes):
    """Return the first pipe the box collides with, or None."""
    for pipe in pipes:
        if hits_pipe(rect, pipe):
            return pipe
    return None
