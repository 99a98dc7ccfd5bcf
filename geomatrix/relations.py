#!/usr/bin/env python3

"""
The pairwise relations between points, segments, rects, and circles.

There are four relation families, each callable with any two shapes:

`contains(a, b)`
    True if every point of *b* lies within *a*.  The boundary policy varies by
    pair; see the individual implementations.

`overlaps(a, b)`
    True if the two shapes touch or intersect.  Symmetric.

`intersects(a, b)`
    A list of the points where the boundaries of the two shapes meet.
    Symmetric in the sense that the mirrored call gives the same points.

`closest(shape, point)`
    The point on (or in) *shape* that is nearest to *point*.

Every implementation is also available as a plain function named after the
relation and the shapes it takes, e.g. `overlaps_circle_rect()`.  Calling those
directly skips the type dispatch, which is worthwhile in tight loops.

None of these functions raise when given degenerate shapes.  Zero-length
segments, zero-radius circles and rects with negative sizes give degenerate
results or NaNs, and NaN compares false in every predicate.
"""

import math
from .vector import Vector, eps, clamp
from .shapes import Segment, Rect, Circle
from .dispatch import Relation

contains = Relation('contains')
overlaps = Relation('overlaps')
intersects = Relation('intersects')
closest = Relation('closest')


## Closest point

@closest.register(Vector, Vector)
def closest_point_point(p1, p2):
    return p1

@closest.register(Segment, Vector)
def closest_segment_point(l, p):
    """ Project the point onto the segment, clamping the projection to the
    endpoints.  A degenerate segment returns its start. """
    d = l.vec
    length2 = d.mag2()
    if length2 == 0:
        return l.start
    u = clamp(d.dot(p - l.start) / length2, 0, 1)
    return l.start + d * u

@closest.register(Rect, Vector)
def closest_rect_point(r, p):
    return Vector(clamp(p.x, r.left, r.right), clamp(p.y, r.top, r.bottom))

@closest.register(Circle, Vector)
def closest_circle_point(c, p):
    """ Return the point on the circumference in the direction of *p*.  The
    result is NaN if *p* is the center of the circle. """
    return c.center + (p - c.center).norm() * c.radius


## Points

@contains.register(Vector, Vector)
def contains_point_point(p1, p2):
    # Floating point coordinates rarely compare exactly, so points within eps
    # of each other coincide.
    return (p1 - p2).mag2() < eps

@contains.register(Segment, Vector)
def contains_segment_point(l, p):
    """
    Return true if the point lies on the segment.

    The point must be colinear with the segment (its signed area with the
    segment is within eps of zero) and its projection must fall between the
    endpoints.
    """
    s, e = l.start, l.end
    d = (p.x - s.x) * (e.y - s.y) - (p.y - s.y) * (e.x - s.x)

    if abs(d) < eps:
        length2 = l.length2
        if length2 == 0:
            return contains_point_point(s, p)
        u = l.vec.dot(p - s) / length2
        return 0 <= u <= 1

    return False

@contains.register(Rect, Vector)
def contains_rect_point(r, p):
    # Inclusive on all four edges.
    return (p.x >= r.left and p.y >= r.top and
            p.x <= r.right and p.y <= r.bottom)

@contains.register(Circle, Vector)
def contains_circle_point(c, p):
    # Strict: points on the circumference are not contained.
    return (c.center - p).mag2() < c.radius * c.radius

@overlaps.register(Vector, Vector)
def overlaps_point_point(p1, p2):
    return contains_point_point(p1, p2)

@overlaps.register(Segment, Vector)
def overlaps_segment_point(l, p):
    return contains_segment_point(l, p)

@overlaps.register(Rect, Vector)
def overlaps_rect_point(r, p):
    return contains_rect_point(r, p)

@overlaps.register(Circle, Vector)
def overlaps_circle_point(c, p):
    return contains_circle_point(c, p)

@intersects.register(Vector, Vector)
def intersects_point_point(p1, p2):
    return [p1] if contains_point_point(p1, p2) else []

@intersects.register(Segment, Vector)
def intersects_segment_point(l, p):
    return [p] if contains_segment_point(l, p) else []

@intersects.register(Rect, Vector)
def intersects_rect_point(r, p):
    """ Return the point if it lies on the boundary of the rect. """
    if any(contains_segment_point(side, p) for side in r.sides):
        return [p]
    return []

@intersects.register(Circle, Vector)
def intersects_circle_point(c, p):
    """ Return the point if it lies on the circumference, within eps. """
    if abs((p - c.center).mag2() - c.radius * c.radius) < eps:
        return [p]
    return []


## Segments

def _solve_segments(l1, l2):
    """
    Find where the infinite extensions of the two segments cross.

    Return the crossing as parameters ``(t, s)`` along *l1* and *l2*
    respectively, or None if the segments are parallel.  Colinear segments
    count as parallel.
    """
    r, q = l1.vec, l2.vec
    rd = r.cross(q)

    if rd == 0:
        return None

    ac = l2.start - l1.start
    return ac.cross(q) / rd, ac.cross(r) / rd

@contains.register(Vector, Segment)
def contains_point_segment(p, l):
    return contains_point_point(p, l.start) and contains_point_point(p, l.end)

@contains.register(Segment, Segment)
def contains_segment_segment(l1, l2):
    return contains_segment_point(l1, l2.start) and \
           contains_segment_point(l1, l2.end)

@contains.register(Rect, Segment)
def contains_rect_segment(r, l):
    return contains_rect_point(r, l.start) and contains_rect_point(r, l.end)

@contains.register(Circle, Segment)
def contains_circle_segment(c, l):
    return contains_circle_point(c, l.start) and \
           contains_circle_point(c, l.end)

@overlaps.register(Segment, Segment)
def overlaps_segment_segment(l1, l2):
    """ Return true if the segments cross or touch.  Parallel and colinear
    segments never overlap. """
    solution = _solve_segments(l1, l2)
    if solution is None:
        return False
    t, s = solution
    return 0 <= t <= 1 and 0 <= s <= 1

@overlaps.register(Rect, Segment)
def overlaps_rect_segment(r, l):
    """ Return true if the segment crosses any side of the rect or lies
    inside it. """
    return any(overlaps_segment_segment(side, l) for side in r.sides) or \
           contains_rect_point(r, l.start)

@overlaps.register(Circle, Segment)
def overlaps_circle_segment(c, l):
    nearest = closest_segment_point(l, c.center)
    return (c.center - nearest).mag2() < c.radius * c.radius

@intersects.register(Segment, Segment)
def intersects_segment_segment(l1, l2):
    """
    Return the point where the two segments cross, if they do.

    Parallel segments give no intersection, and neither do colinear segments
    even if they overlap.
    """
    solution = _solve_segments(l1, l2)
    if solution is None:
        return []
    t, s = solution
    if t < 0 or t > 1 or s < 0 or s > 1:
        return []
    return [l1.point(t)]

@intersects.register(Rect, Segment)
def intersects_rect_segment(r, l):
    """ Return the points where the segment crosses the sides of the rect,
    in side order (top, right, bottom, left).  A segment through a corner
    reports that corner once for each side it touches. """
    points = []
    for side in r.sides:
        points += intersects_segment_segment(side, l)
    return points

@intersects.register(Circle, Segment)
def intersects_circle_segment(c, l):
    """
    Return the points where the segment crosses the circumference, ordered
    from the start of the segment.

    A tangent segment gives one point.  A degenerate segment is treated as a
    point.
    """
    d = l.vec
    f = l.start - c.center
    a = d.dot(d)

    if a == 0:
        return intersects_circle_point(c, l.start)

    b = 2 * f.dot(d)
    k = f.dot(f) - c.radius * c.radius
    discriminant = b * b - 4 * a * k

    if discriminant < 0:
        return []
    elif discriminant == 0:
        roots = [-b / (2 * a)]
    else:
        root = math.sqrt(discriminant)
        roots = [(-b - root) / (2 * a), (-b + root) / (2 * a)]

    # Rounding can push a root that belongs at an endpoint just past it, so
    # roots within eps of the segment are snapped onto it.

    points = []
    for t in roots:
        u = clamp(t, 0, 1)
        if u == t or contains_point_point(l.point(t), l.point(u)):
            points.append(l.point(u))
    return points


## Rects

def _cross_edges(first, second):
    # Both edges are axis-aligned, so a crossing is just a pair of interval
    # tests.  Parallel edges never cross.
    for horizontal, vertical in (first, second), (second, first):
        if horizontal.start.y != horizontal.end.y:
            continue
        if vertical.start.x != vertical.end.x:
            continue

        x, y = vertical.start.x, horizontal.start.y
        x_lo, x_hi = sorted((horizontal.start.x, horizontal.end.x))
        y_lo, y_hi = sorted((vertical.start.y, vertical.end.y))

        if x_lo <= x <= x_hi and y_lo <= y <= y_hi:
            yield Vector(x, y)

@contains.register(Vector, Rect)
def contains_point_rect(p, r):
    return all(contains_point_point(p, v) for v in r.vertices)

@contains.register(Segment, Rect)
def contains_segment_rect(l, r):
    return all(contains_segment_point(l, v) for v in r.vertices)

@contains.register(Rect, Rect)
def contains_rect_rect(r1, r2):
    # The far edges are strict, so a rect touching the right or bottom edge
    # isn't inside.
    return (r2.left >= r1.left and r2.top >= r1.top and
            r2.right < r1.right and r2.bottom < r1.bottom)

@contains.register(Circle, Rect)
def contains_circle_rect(c, r):
    return all(contains_circle_point(c, v) for v in r.vertices)

@overlaps.register(Rect, Rect)
def overlaps_rect_rect(r1, r2):
    # Touching edges count as overlapping.
    return (r1.left < r2.right and r1.right >= r2.left and
            r1.top < r2.bottom and r1.bottom >= r2.top)

@overlaps.register(Circle, Rect)
def overlaps_circle_rect(c, r):
    """
    Return true if the rect comes closer to the center of the circle than
    its radius.

    Degenerate rects can make the distance to the nearest point NaN.  That
    distance is taken to be zero, so such rects overlap every circle.
    """
    o = (closest_rect_point(r, c.center) - c.center).mag2()
    if math.isnan(o):
        o = 0
    return o - c.radius * c.radius < 0

@intersects.register(Rect, Rect)
def intersects_rect_rect(r1, r2):
    """
    Return the points where the boundaries of the two rects cross.

    The points are ordered by the sides of the first rect (top, right,
    bottom, left) and each point is reported once.  Edges that lie on top of
    each other only contribute their corners.
    """
    points = []
    for side in r1.sides:
        for other in r2.sides:
            for point in _cross_edges(side, other):
                if point not in points:
                    points.append(point)
    return points

@intersects.register(Circle, Rect)
def intersects_circle_rect(c, r):
    """
    Return the points where the circumference crosses the sides of the rect,
    ordered by side (top, right, bottom, left).  Each point is reported once,
    even if it's a corner.
    """
    # Nothing to find if the rect is out of reach, or if every corner is
    # inside the circle by more than eps.  Corners within eps of the
    # circumference are on it, as for intersects(circle, point).

    r2 = c.radius * c.radius
    nearest = closest_rect_point(r, c.center)
    if (nearest - c.center).mag2() - r2 >= eps:
        return []
    if all(r2 - (v - c.center).mag2() >= eps for v in r.vertices):
        return []

    # The same corner can come out of both of its sides with slightly
    # different rounding.

    points = []
    for side in r.sides:
        for point in intersects_circle_segment(c, side):
            if not any(contains_point_point(q, point) for q in points):
                points.append(point)
    return points


## Circles

@contains.register(Vector, Circle)
def contains_point_circle(p, c):
    return contains_point_point(p, c.center) and c.radius * c.radius < eps

@contains.register(Segment, Circle)
def contains_segment_circle(l, c):
    return contains_segment_point(l, c.center) and c.radius * c.radius < eps

@contains.register(Rect, Circle)
def contains_rect_circle(r, c):
    # Inclusive, like points in rects.
    x, y = c.center
    return (x - c.radius >= r.left and y - c.radius >= r.top and
            x + c.radius <= r.right and y + c.radius <= r.bottom)

@contains.register(Circle, Circle)
def contains_circle_circle(c1, c2):
    r1, r2 = c1.radius, c2.radius
    return r1 >= r2 and (c1.center - c2.center).mag2() <= (r1 - r2) * (r1 - r2)

@overlaps.register(Circle, Circle)
def overlaps_circle_circle(c1, c2):
    r = c1.radius + c2.radius
    return (c1.center - c2.center).mag2() <= r * r

@intersects.register(Circle, Circle)
def intersects_circle_circle(c1, c2):
    """
    Return the points where the two circumferences cross.

    Separate, nested and concentric circles give no points and tangent
    circles give one.  Otherwise the point on the `Vector.perp()` side of the
    line from the first center to the second comes first.
    """
    delta = c2.center - c1.center
    d2 = delta.mag2()
    r1, r2 = c1.radius, c2.radius

    if d2 == 0 or d2 > (r1 + r2) ** 2 or d2 < (r1 - r2) ** 2:
        return []

    d = math.sqrt(d2)
    a = (r1 * r1 - r2 * r2 + d2) / (2 * d)
    h2 = r1 * r1 - a * a
    base = c1.center + delta * (a / d)

    if h2 <= 0:
        return [base]

    offset = delta.perp() * (math.sqrt(h2) / d)
    return [base + offset, base - offset]


## Mirrors

overlaps_point_segment = overlaps.register_mirror(Segment, Vector)
overlaps_point_rect = overlaps.register_mirror(Rect, Vector)
overlaps_point_circle = overlaps.register_mirror(Circle, Vector)
overlaps_segment_rect = overlaps.register_mirror(Rect, Segment)
overlaps_segment_circle = overlaps.register_mirror(Circle, Segment)
overlaps_rect_circle = overlaps.register_mirror(Circle, Rect)

intersects_point_segment = intersects.register_mirror(Segment, Vector)
intersects_point_rect = intersects.register_mirror(Rect, Vector)
intersects_point_circle = intersects.register_mirror(Circle, Vector)
intersects_segment_rect = intersects.register_mirror(Rect, Segment)
intersects_segment_circle = intersects.register_mirror(Circle, Segment)
intersects_rect_circle = intersects.register_mirror(Circle, Rect)

