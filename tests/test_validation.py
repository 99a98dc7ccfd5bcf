from geomatrix.validation import *
from test_helpers import *

def test_valid_shapes_pass():
    for shape in [Vector(1, 2), (1, 2), Segment((0, 0), (1, 1)),
                  Rect((0, 0), (0, 0)), Rect((0, 0), (2, 3)),
                  Circle((0, 0), 0), Circle((1, 1), 2)]:
        require_valid(shape)

def test_not_a_shape():
    with raises_api_usage_error("expected a Vector, Segment, Rect, or Circle, but got a str instead"):
        require_valid("circle")

    with raises_api_usage_error("but got a tuple instead"):
        require_valid((1, 2, 3))

def test_non_finite_coordinates():
    with raises_api_usage_error("has a coordinate that isn't finite"):
        require_valid(Vector(math.nan, 0))

    with raises_api_usage_error("isn't finite"):
        require_valid(Segment((0, 0), (math.inf, 1)))

    with raises_api_usage_error("isn't finite"):
        require_valid(Rect((0, 0), (1, math.nan)))

    with raises_api_usage_error("isn't finite"):
        require_valid(Circle((math.nan, 0), 1))

def test_degenerate_segment():
    with raises_api_usage_error("has zero length"):
        require_valid(Segment((1, 1), (1, 1)))

def test_negative_rect():
    with raises_api_usage_error("has a negative size", "Rect.from_corners()"):
        require_valid(Rect((0, 0), (-1, 1)))

    with raises_api_usage_error("has a negative size"):
        require_valid(Rect((0, 0), (1, -1)))

def test_negative_radius():
    with raises_api_usage_error("has a negative radius"):
        require_valid(Circle((0, 0), -1))

def test_non_finite_radius():
    with raises_api_usage_error("has a radius that isn't finite"):
        require_valid(Circle((0, 0), math.nan))

    with raises_api_usage_error("has a radius that isn't finite"):
        require_valid(Circle((0, 0), math.inf))

    with raises_api_usage_error("has a radius that isn't finite"):
        require_valid(Circle((0, 0), -math.inf))

def test_null_direction():
    require_direction(Vector(1, 0))

    with pytest.raises(NullVectorError):
        require_direction(Vector(0, 0))

def test_checked_relations():
    r, c = Rect((0, 0), (2, 2)), Circle((3, 1), 1.5)

    assert checked_contains(r, Vector(1, 1))
    assert checked_contains(r, (1, 1))
    assert checked_overlaps(c, r)
    assert checked_intersects(r, Segment((1, -1), (1, 3))) == [Vector(1, 0), Vector(1, 2)]
    assert checked_closest(c, Vector(5, 1)) == Vector(4.5, 1)
    assert checked_envelope_circle(Segment((0, 0), (4, 0))) == Circle((2, 0), 2)
    assert checked_envelope_rect(c) == Rect((1.5, -0.5), (3, 3))

    assert checked_contains.__name__ == 'checked_contains'

def test_checked_relations_reject_degenerate_input():
    # The unchecked relations quietly return an answer...
    assert not contains(Rect((0, 0), (-1, 1)), Vector(0, 0))
    assert is_nan_vector(closest(Circle((1, 1), 1), Vector(1, 1)))

    # ...but the checked ones complain.
    with raises_api_usage_error("has a negative size"):
        checked_contains(Rect((0, 0), (-1, 1)), Vector(0, 0))

    with raises_api_usage_error("can't take a direction from a null vector"):
        checked_closest(Circle((1, 1), 1), Vector(1, 1))

    with raises_api_usage_error("has zero length"):
        checked_closest(Segment((1, 1), (1, 1)), Vector(0, 0))

    with raises_api_usage_error("has a negative radius"):
        checked_envelope_rect(Circle((0, 0), -2))

