#!/usr/bin/env python3

""" The smallest circle or rect of a fixed kind that bounds a given shape. """

from .vector import Vector
from .shapes import Segment, Rect, Circle
from .dispatch import Relation

envelope_circle = Relation('envelope_circle', arity=1)
envelope_rect = Relation('envelope_rect', arity=1)


@envelope_circle.register(Vector)
def envelope_circle_point(p):
    return Circle(p, 0)

@envelope_circle.register(Segment)
def envelope_circle_segment(l):
    return Circle(l.point(0.5), l.length / 2)

@envelope_circle.register(Rect)
def envelope_circle_rect(r):
    # The diagonal is a diameter of the circumscribed circle.
    return envelope_circle_segment(Segment(r.pos, r.pos + r.size))

@envelope_circle.register(Circle)
def envelope_circle_circle(c):
    return c


@envelope_rect.register(Vector)
def envelope_rect_point(p):
    return Rect(p, Vector(0, 0))

@envelope_rect.register(Segment)
def envelope_rect_segment(l):
    return Rect(l.start.min(l.end), abs(l.start - l.end))

@envelope_rect.register(Rect)
def envelope_rect_rect(r):
    return r

@envelope_rect.register(Circle)
def envelope_rect_circle(c):
    r = c.radius
    return Rect(c.center - Vector(r, r), Vector(2 * r, 2 * r))

