#!/usr/bin/env python3

"""
A compact text notation for shapes, used by the command line interface.

Each shape is written as its kind, a colon, and a comma-separated list of
numbers:

========  ======================  ====================================
Kind      Numbers                 Example
========  ======================  ====================================
point     x, y                    ``point:1,2``
segment   x1, y1, x2, y2          ``segment:0,0,2,2``
rect      x, y, width, height     ``rect:0,0,4,4``
circle    x, y, radius            ``circle:0,0,2``
========  ======================  ====================================

A bare pair of numbers (``1,2``) is also read as a point.
"""

from .errors import *
from .vector import Vector
from .shapes import Segment, Rect, Circle

def _make_point(x, y):
    return Vector(x, y)

def _make_segment(x1, y1, x2, y2):
    return Segment(Vector(x1, y1), Vector(x2, y2))

def _make_rect(x, y, width, height):
    return Rect(Vector(x, y), Vector(width, height))

def _make_circle(x, y, radius):
    return Circle(Vector(x, y), radius)

constructors = {
        'point': (_make_point, 2),
        'segment': (_make_segment, 4),
        'rect': (_make_rect, 4),
        'circle': (_make_circle, 3),
}
aliases = {
        'p': 'point',
        'line': 'segment',
        'seg': 'segment',
        'rectangle': 'rect',
        'c': 'circle',
}

def parse_shape(text):
    """
    Parse a shape written in the notation described above.  Raise an
    ApiUsageError if the text is malformed.
    """
    kind, _, numbers = text.strip().rpartition(':')
    kind = kind.strip().lower() or 'point'
    kind = aliases.get(kind, kind)

    if kind not in constructors:
        known = ', '.join(constructors)
        raise ApiUsageError("""\
                unknown shape '{kind}' in '{text}'.

                Shapes are written as '<kind>:<numbers>', where <kind> is one
                of: {known}.""")

    factory, num_args = constructors[kind]

    try:
        args = [float(x) for x in numbers.split(',')]
    except ValueError:
        raise ApiUsageError("""\
                can't read the numbers in '{text}'.

                The numbers must be separated by commas, with no other text
                between them, e.g. 'circle:0,0,1.5'.""") from None

    if len(args) != num_args:
        num_given = len(args)
        raise ApiUsageError("""\
                expected {num_args} numbers for a {kind}, but got {num_given}.

                Points need x and y, segments need the coordinates of both
                ends, rects need the top-left corner and the size, and circles
                need the center and the radius.""")

    shape = factory(*args)
    debug("parsed '{text}' as {shape!r}")
    return shape

def format_number(x):
    return '{:.10g}'.format(x)

def format_shape(shape):
    """ Write the given shape (or point) in the notation described above. """
    if isinstance(shape, Vector):
        kind, numbers = 'point', shape.tuple
    elif isinstance(shape, Segment):
        kind, numbers = 'segment', shape.start.tuple + shape.end.tuple
    elif isinstance(shape, Rect):
        kind, numbers = 'rect', shape.pos.tuple + shape.size.tuple
    elif isinstance(shape, Circle):
        kind, numbers = 'circle', shape.center.tuple + (shape.radius,)
    else:
        raise ApiUsageError("can't write a {shape.__class__.__name__} as a shape.")

    return '{}:{}'.format(kind, ','.join(map(format_number, numbers)))

def format_result(result):
    """ Write the result of any relation: a boolean, a point, a shape, or a
    list of points (one per line). """
    if isinstance(result, bool):
        return 'true' if result else 'false'
    if isinstance(result, list):
        return '\n'.join(format_shape(x) for x in result)
    return format_shape(result)

