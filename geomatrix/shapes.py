#!/usr/bin/env python3

""" The shapes module provides ways to represent the three two-dimensional
shapes the relations understand: line segments, axis-aligned rectangles, and
circles.  Simple points are represented using vectors, so they are not
considered in this module.

The vertical axis is assumed to increase going down the screen.  This only
matters for attributes that explicitly refer to the "top" or the "bottom" of a
rectangle.

All of the shape classes are immutable.  Invariants like non-negative sizes
and radii are expected but not enforced; see `geomatrix.validation` for an
opt-in layer that checks them. """

import math
from .vector import Vector, _cast_anything_to_vector, sgn

class Segment:
    """
    Represent a directed line segment from *start* to *end*.

    Degenerate segments (where start == end) can be created.  They have zero
    length and the relations handle them without raising, but the results may
    be degenerate too.
    """

    @staticmethod
    def from_points(start, end):
        """ Create a line segment between the two given points. """
        return Segment(start, end)

    @staticmethod
    def from_direction(start, direction):
        """ Create a line segment from the given point and direction. """
        start = _cast_anything_to_vector(start)
        return Segment(start, start + direction)


    def __init__(self, start=Vector(), end=Vector()):
        self.__start = _cast_anything_to_vector(start)
        self.__end = _cast_anything_to_vector(end)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self.points == other.points

    def __hash__(self):
        return hash((Segment, self.points))

    def __repr__(self):
        return "Segment({0.start!r}, {0.end!r})".format(self)

    def __reduce__(self):
        return Segment, self.points

    def move(self, displacement):
        """ Return a segment that is offset from this one. """
        return Segment(self.start + displacement, self.end + displacement)

    @property
    def start(self):
        return self.__start

    @property
    def end(self):
        return self.__end

    @property
    def points(self):
        return self.__start, self.__end

    @property
    def vec(self):
        """ The displacement from the start of the segment to its end. """
        return self.__end - self.__start

    @property
    def length(self):
        return self.vec.mag()

    @property
    def length2(self):
        return self.vec.mag2()

    @property
    def degenerate(self):
        return self.__start == self.__end

    @property
    def center(self):
        return self.point(0.5)

    def point(self, dist):
        """
        Return the point the fraction *dist* of the way along this segment.

        Values outside [0, 1] extrapolate past the endpoints along the
        segment's infinite extension.
        """
        return self.__start + self.vec * dist

    def side(self, point):
        """
        Classify the given point relative to the infinite extension of this
        segment.

        Return +1 if the point is to the left of the direction of travel (in
        a y-up frame), -1 if it's to the right, and 0 if it's colinear.
        """
        point = _cast_anything_to_vector(point)
        return sgn(self.vec.cross(point - self.__start))


class Rect:
    """
    Represent an axis-aligned rectangle with a position (its top-left
    corner) and a size.

    The four sides are derived segments, indexed 0-3 clockwise from the
    position: top, right, bottom, left.  The top and bottom edges run left to
    right and the left and right edges run top to bottom.
    """

    @staticmethod
    def from_size(width, height):
        return Rect(Vector(0, 0), Vector(width, height))

    @staticmethod
    def from_corners(first, second):
        first = _cast_anything_to_vector(first)
        second = _cast_anything_to_vector(second)
        top_left = first.min(second)
        return Rect(top_left, abs(second - first))

    @staticmethod
    def from_center(center, width, height):
        center = _cast_anything_to_vector(center)
        size = Vector(width, height)
        return Rect(center - size / 2, size)

    @staticmethod
    def from_points(*points):
        points = [_cast_anything_to_vector(p) for p in points]
        left = min(p.x for p in points); top = min(p.y for p in points)
        right = max(p.x for p in points); bottom = max(p.y for p in points)
        return Rect(Vector(left, top), Vector(right - left, bottom - top))

    @staticmethod
    def from_union(*rects):
        left = min(x.left for x in rects); top = min(x.top for x in rects)
        right = max(x.right for x in rects); bottom = max(x.bottom for x in rects)
        return Rect(Vector(left, top), Vector(right - left, bottom - top))

    @staticmethod
    def from_intersection(*rects):
        """ Return the region shared by all the given rects, or None if they
        don't all overlap.  Rects that share only an edge give a rect with
        zero width or height. """
        left = max(x.left for x in rects); top = max(x.top for x in rects)
        right = min(x.right for x in rects); bottom = min(x.bottom for x in rects)

        if left > right or top > bottom:
            return None

        return Rect(Vector(left, top), Vector(right - left, bottom - top))


    def __init__(self, pos=Vector(0, 0), size=Vector(1, 1)):
        self.__pos = _cast_anything_to_vector(pos)
        self.__size = _cast_anything_to_vector(size)

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return self.pos == other.pos and self.size == other.size

    def __hash__(self):
        return hash((Rect, self.pos, self.size))

    def __repr__(self):
        return "Rect({0.pos!r}, {0.size!r})".format(self)

    def __reduce__(self):
        return Rect, (self.pos, self.size)

    def move(self, displacement):
        """ Return a rect that is offset from this one. """
        return Rect(self.pos + displacement, self.size)

    def grow(self, padding):
        """ Return a rect that is larger than this one by the given padding on
        all sides. """
        return Rect(self.pos - (padding, padding),
                    self.size + (2 * padding, 2 * padding))

    def shrink(self, padding):
        """ Return a rect that is smaller than this one by the given padding on
        all sides.  No attempt is made to stop the size from going negative. """
        return self.grow(-padding)


    @property
    def pos(self):
        return self.__pos

    @property
    def size(self):
        return self.__size

    @property
    def left(self):
        return self.__pos.x

    @property
    def top(self):
        return self.__pos.y

    @property
    def right(self):
        return self.__pos.x + self.__size.x

    @property
    def bottom(self):
        return self.__pos.y + self.__size.y

    @property
    def width(self):
        return self.__size.x

    @property
    def height(self):
        return self.__size.y

    @property
    def center(self):
        return self.__pos + self.__size * 0.5

    @property
    def area(self):
        return self.__size.area()

    @property
    def perimeter(self):
        return 2 * (self.__size.x + self.__size.y)

    @property
    def top_left(self):
        return self.__pos

    @property
    def top_right(self):
        return Vector(self.right, self.top)

    @property
    def bottom_right(self):
        return self.__pos + self.__size

    @property
    def bottom_left(self):
        return Vector(self.left, self.bottom)

    @property
    def vertices(self):
        return (self.top_left, self.top_right,
                self.bottom_right, self.bottom_left)

    @property
    def top_edge(self):
        return Segment(self.top_left, self.top_right)

    @property
    def right_edge(self):
        return Segment(self.top_right, self.bottom_right)

    @property
    def bottom_edge(self):
        return Segment(self.bottom_left, self.bottom_right)

    @property
    def left_edge(self):
        return Segment(self.top_left, self.bottom_left)

    @property
    def sides(self):
        return (self.top_edge, self.right_edge,
                self.bottom_edge, self.left_edge)

    def side(self, i):
        """ Return the i-th side, counting clockwise from the top.  The index
        wraps around, so side(4) is the top again. """
        return self.sides[i % 4]


class Circle:
    """ Represent a circle with just a center and a radius.  A circle with a
    radius of zero is a degenerate point. """

    def __init__(self, center=Vector(0, 0), radius=0):
        self.__center = _cast_anything_to_vector(center)
        self.__radius = radius

    def __eq__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return (self.center == other.center and
                self.radius == other.radius)

    def __hash__(self):
        return hash((Circle, self.center, self.radius))

    def __repr__(self):
        return "Circle({0.center!r}, {0.radius!r})".format(self)

    def __reduce__(self):
        return Circle, (self.center, self.radius)

    def grow(self, padding):
        """ Return a circle with a larger radius than this one. """
        return Circle(self.center, self.radius + padding)

    def shrink(self, padding):
        """ Return a circle with a smaller radius than this one. """
        return self.grow(-padding)

    def move(self, displacement):
        """ Return a circle that is offset from this one. """
        return Circle(self.center + displacement, self.radius)

    @property
    def center(self):
        return self.__center

    @property
    def radius(self):
        return self.__radius

    @property
    def area(self):
        return math.pi * self.__radius * self.__radius

    @property
    def perimeter(self):
        return 2 * math.pi * self.__radius

    circumference = perimeter

