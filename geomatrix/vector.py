#!/usr/bin/env python3

""" The vector module provides an immutable two-dimensional vector and the
handful of numeric helpers the relations are built on.  Vectors double as
points: there is no separate point class. """

import math
import operator

eps = 1e-3

def sgn(x):
    """ Return -1, 0, or +1 depending on the sign of *x*.  NaN gives 0. """
    return (0 < x) - (x < 0)

def clamp(x, low, high):
    """ Forces *x* into the range between *low* and *high*.  In other words,
    returns *low* if *x* < *low*, returns *high* if *x* > *high*, and returns
    *x* otherwise.  The upper bound is applied last, so it wins when the
    bounds cross.  NaN passes through unchanged. """
    return min(max(x, low), high)


def _cast_anything_to_vector(input):
    if isinstance(input, Vector):
        return input
    try:
        x, y = input
    except (TypeError, ValueError):
        raise VectorCastError(input)
    return Vector(x, y)

def _overload_left_side(f, scalar_ok=False):
    def operator(self, other):
        try: x, y = other.x, other.y
        except AttributeError: pass
        else: return Vector(f(self.x, x), f(self.y, y))

        if isinstance(other, tuple) and len(other) == 2:
            x, y = other
            return Vector(f(self.x, x), f(self.y, y))

        # Zero is treated as a special case, because the built-in sum()
        # function expects to be able to add zero to things.

        if scalar_ok or (isinstance(other, int) and other == 0):
            return Vector(f(self.x, other), f(self.y, other))

        return NotImplemented

    return operator

def _overload_right_side(f, scalar_ok=False):
    def operator(self, other):
        if isinstance(other, tuple) and len(other) == 2:
            x, y = other
            return Vector(f(x, self.x), f(y, self.y))

        if scalar_ok or (isinstance(other, int) and other == 0):
            return Vector(f(other, self.x), f(other, self.y))

        return NotImplemented

    return operator

def _safe_divide(numerator, denominator):
    # Reproduce IEEE-754 division instead of raising ZeroDivisionError, so
    # degenerate input flows through as inf or NaN.
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or numerator != numerator:
            return math.nan
        return math.copysign(math.inf, numerator)

def _rounding(f):
    # math.floor() and math.ceil() raise on NaN and inf, and always return
    # ints.  Pass non-finite values through and keep floats as floats.
    def rounded(x):
        if isinstance(x, float):
            return float(f(x)) if math.isfinite(x) else x
        return f(x)
    return rounded

def _trigonometry(f):
    # math.cos() and math.sin() raise on infinite angles.
    def trig(angle):
        return math.nan if math.isinf(angle) else f(angle)
    return trig

_floor = _rounding(math.floor)
_ceil = _rounding(math.ceil)
_cos = _trigonometry(math.cos)
_sin = _trigonometry(math.sin)


class Vector:
    """
    Represent a two-dimensional vector.

    Vectors are immutable value types.  Equality is exact and component-wise,
    which means floating point rounding error is not accounted for; use
    `geomatrix.contains()` to test whether two points coincide within `eps`.
    Any numeric type that supports the usual float operations can be used for
    the coordinates.
    """

    __slots__ = ('__x', '__y')

    @staticmethod
    def null():
        """ Return a null vector. """
        return Vector(0, 0)

    @staticmethod
    def from_radians(angle):
        """ Create a unit vector that makes the given angle with the x-axis. """
        return Vector(_cos(angle), _sin(angle))

    @staticmethod
    def from_degrees(angle):
        """ Create a unit vector that makes the given angle with the x-axis. """
        return Vector.from_radians(angle * math.pi / 180)

    @staticmethod
    def from_tuple(coordinates):
        """ Create a vector from a two element tuple. """
        return _cast_anything_to_vector(coordinates)

    @staticmethod
    def from_scalar(scalar):
        """ Create a vector with both coordinates set to the given value. """
        return Vector(scalar, scalar)


    def __init__(self, x=0, y=0):
        self.__x = x
        self.__y = y

    def __repr__(self):
        return "Vector({!r}, {!r})".format(self.__x, self.__y)

    def __str__(self):
        return "<{:.2f}, {:.2f}>".format(self.__x, self.__y)

    def __iter__(self):
        """ Iterate over this vectors coordinates. """
        yield self.__x; yield self.__y

    def __getitem__(self, i):
        return self.tuple[i]

    def __len__(self):
        return 2

    def __bool__(self):
        """ Return true if the vector is not degenerate. """
        return self.__x != 0 or self.__y != 0

    def __eq__(self, other):
        """ Return true if this vector is exactly the same as the argument.
        Floating point rounding error is completely unaccounted for. """
        try:
            x, y = _cast_anything_to_vector(other)
        except VectorCastError:
            return NotImplemented
        return self.__x == x and self.__y == y

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash(self.tuple)

    def __neg__(self):
        return Vector(-self.__x, -self.__y)

    def __abs__(self):
        return Vector(abs(self.__x), abs(self.__y))

    def __reduce__(self):
        return Vector, self.tuple


    # Binary Operators (fold)
    __add__ = _overload_left_side(operator.add)
    __radd__ = _overload_right_side(operator.add)

    __sub__ = _overload_left_side(operator.sub)
    __rsub__ = _overload_right_side(operator.sub)

    __mul__ = _overload_left_side(operator.mul, scalar_ok=True)
    __rmul__ = _overload_right_side(operator.mul, scalar_ok=True)

    __truediv__ = _overload_left_side(_safe_divide, scalar_ok=True)
    __rtruediv__ = _overload_right_side(_safe_divide, scalar_ok=True)

    __floordiv__ = _overload_left_side(operator.floordiv, scalar_ok=True)
    __rfloordiv__ = _overload_right_side(operator.floordiv, scalar_ok=True)


    @property
    def x(self):
        return self.__x

    @property
    def y(self):
        return self.__y

    @property
    def tuple(self):
        """ Return the vector as a tuple. """
        return self.__x, self.__y

    def area(self):
        """ Return the product of the two coordinates, i.e. the area of a rect
        with this vector as its size. """
        return self.__x * self.__y

    def mag(self):
        """ Calculate the length of this vector. """
        return math.sqrt(self.mag2())

    def mag2(self):
        """ Calculate the square of the length of this vector.  This avoids
        the square root, so prefer it whenever lengths are only compared. """
        return self.__x * self.__x + self.__y * self.__y

    def norm(self):
        """
        Return a unit vector parallel to this one.

        The null vector has no direction, so normalizing it gives a vector of
        NaNs rather than an exception.  Use
        `geomatrix.validation.require_direction()` beforehand if that matters.
        """
        r = _safe_divide(1, self.mag())
        return Vector(self.__x * r, self.__y * r)

    def perp(self):
        """ Return this vector rotated by 90 degrees.  The result is not
        normalized. """
        return Vector(-self.__y, self.__x)

    def floor(self):
        return Vector(_floor(self.__x), _floor(self.__y))

    def ceil(self):
        return Vector(_ceil(self.__x), _ceil(self.__y))

    def min(self, other):
        """ Return the component-wise minimum of this vector and the argument. """
        other = _cast_anything_to_vector(other)
        return Vector(min(self.__x, other.x), min(self.__y, other.y))

    def max(self, other):
        """ Return the component-wise maximum of this vector and the argument. """
        other = _cast_anything_to_vector(other)
        return Vector(max(self.__x, other.x), max(self.__y, other.y))

    def dot(self, other):
        """ Return the dot product of the given vectors. """
        other = _cast_anything_to_vector(other)
        return self.__x * other.x + self.__y * other.y

    def cross(self, other):
        """ Return the perp product of the given vectors.  The perp product is
        just a cross product where the third dimension is taken to be zero and
        the result is returned as a scalar.  Its sign tells which side of this
        vector the argument points to. """
        other = _cast_anything_to_vector(other)
        return self.__x * other.y - self.__y * other.x

    def cartesian(self):
        """ Interpret this vector as (radius, angle) and return the equivalent
        cartesian vector. """
        r, theta = self.__x, self.__y
        return Vector(_cos(theta) * r, _sin(theta) * r)

    def polar(self):
        """ Return this vector as (radius, angle), with the angle in radians. """
        return Vector(self.mag(), math.atan2(self.__y, self.__x))

    def clamp(self, low, high):
        """ Force each coordinate into the range given by *low* and *high*.
        The lower bound is applied first, so the upper bound wins when the
        bounds cross. """
        return self.max(low).min(high)

    def lerp(self, target, t):
        """ Return the point the fraction *t* of the way from this vector to
        *target*.  Values of *t* outside [0, 1] extrapolate. """
        target = _cast_anything_to_vector(target)
        return self * (1 - t) + target * t

    def get_distance(self, other):
        """ Return the Euclidean distance between the two vectors. """
        return (_cast_anything_to_vector(other) - self).mag()


class VectorCastError(Exception):
    """ Thrown when an inappropriate object is used as a vector. """

    def __init__(self, object):
        Exception.__init__(self, "Could not cast %s to vector." % type(object))

