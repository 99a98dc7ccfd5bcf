#!/usr/bin/env python3

"""
An opt-in layer that checks shapes before they reach the relations.

The relations themselves never complain about their input: a rect with a
negative size or a circle with a negative radius just gives a strange answer,
and a direction taken from a null vector gives NaN.  The functions in this
module raise an `ApiUsageError` instead.  Like the other debugging checks,
they compile away when python is run with ``-O``.

The ``checked_*`` relations validate every argument and then call the
unchecked relation, e.g. ``checked_contains(Rect((0, 0), (-1, 1)), (0, 0))``
raises instead of returning false.
"""

import math
from .errors import *
from .vector import Vector
from .shapes import Segment, Rect, Circle
from .relations import contains, overlaps, intersects, closest
from .envelopes import envelope_circle, envelope_rect

@debug_only
def require_shape(shape):
    if isinstance(shape, tuple) and len(shape) == 2:
        return
    if not isinstance(shape, (Vector, Segment, Rect, Circle)):
        shape_cls = shape.__class__.__name__
        raise ApiUsageError("""\
                expected a Vector, Segment, Rect, or Circle, but got a
                {shape_cls} instead.""")

@debug_only
def require_finite(point):
    if not all(map(math.isfinite, point)):
        raise ApiUsageError("""\
                {point!r} has a coordinate that isn't finite.

                NaN and infinite coordinates can't be compared meaningfully,
                so every relation involving them will be false or empty.  NaN
                usually comes from normalizing a null vector.""")

@debug_only
def require_direction(vector):
    if not vector:
        raise NullVectorError("""\
                can't take a direction from a null vector.

                The vector has no length, so it doesn't point anywhere.  This
                usually means that a point is being projected onto a circle
                from the circle's own center.""")

@debug_only
def require_valid(shape):
    """
    Raise an ApiUsageError if the given shape is degenerate in a way the
    relations would silently get wrong.
    """
    require_shape(shape)

    if isinstance(shape, (Vector, tuple)):
        require_finite(shape)

    if isinstance(shape, Segment):
        require_finite(shape.start)
        require_finite(shape.end)

        if shape.degenerate:
            raise ApiUsageError("""\
                    {shape!r} has zero length.

                    Segments with the same start and end have no direction,
                    so projecting onto them or testing whether they contain a
                    point is ill-defined.  Use a point instead.""")

    if isinstance(shape, Rect):
        require_finite(shape.pos)
        require_finite(shape.size)

        if shape.width < 0 or shape.height < 0:
            raise ApiUsageError("""\
                    {shape!r} has a negative size.

                    Rects with negative sizes invert every comparison against
                    their edges.  Use Rect.from_corners() to build a rect from
                    two corners in any order.""")

    if isinstance(shape, Circle):
        require_finite(shape.center)

        if not math.isfinite(shape.radius):
            raise ApiUsageError("""\
                    {shape!r} has a radius that isn't finite.

                    A NaN or infinite radius gives meaningless answers from
                    every relation involving the circle.""")

        if shape.radius < 0:
            raise ApiUsageError("""\
                    {shape!r} has a negative radius.""")


def checked(relation):
    """ Return a version of the given relation that validates its arguments
    before calling it. """

    def wrapper(*shapes):
        for shape in shapes:
            require_valid(shape)
        return relation(*shapes)

    wrapper.__name__ = 'checked_{}'.format(relation.name)
    return wrapper

checked_contains = checked(contains)
checked_overlaps = checked(overlaps)
checked_intersects = checked(intersects)
checked_envelope_circle = checked(envelope_circle)
checked_envelope_rect = checked(envelope_rect)

def checked_closest(shape, point):
    require_valid(shape)
    require_valid(point)
    if isinstance(shape, Circle):
        require_direction(Vector.from_tuple(point) - shape.center)
    return closest(shape, point)
