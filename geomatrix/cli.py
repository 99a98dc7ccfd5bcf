#!/usr/bin/env python3

from .errors import *
from . import relations, envelopes, validation
from .notation import parse_shape, format_result

def main(argv=None):
    """
Evaluate a geometric relation between shapes.

Usage:
    geomatrix (contains|overlaps|intersects) <shape> <other> [-u] [-v...]
    geomatrix closest <shape> <point> [-u] [-v...]
    geomatrix envelope (circle|rect) <shape> [-u] [-v...]

Arguments:
    <shape>, <other>
        A shape written as '<kind>:<numbers>'.  The kinds and the numbers they
        take are:

            point:x,y
            segment:x1,y1,x2,y2
            rect:x,y,width,height
            circle:x,y,radius

    <point>
        The point to project onto <shape>, written as 'point:x,y' or just 'x,y'.

Options:
    -u --unchecked
        Skip the checks that reject negative sizes and radii, zero-length
        segments, and other degenerate input.  Degenerate shapes then give
        whatever answer the geometry works out to, which may involve NaN.
    -v --verbose
        Log more information about what's happening.  You can specify this
        option several times to get more and more information.

The result is printed on stdout: 'true' or 'false' for predicates, one point
per line for intersections, and a shape for closest points and envelopes.
    """
    import sys, docopt, logging, nonstdlib

    args = docopt.docopt(main.__doc__.strip(), argv)
    logging.basicConfig(
            format='%(levelname)s: %(name)s: %(message)s',
            level=nonstdlib.verbosity(args['--verbose']),
    )

    try:
        shapes = [parse_shape(args['<shape>'])]
        for key in ('<other>', '<point>'):
            if args[key] is not None:
                shapes.append(parse_shape(args[key]))

        function = choose_relation(args)
        info("evaluating {function.__name__} on {shapes}")
        result = function(*shapes)

    except ApiUsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(format_result(result))
    return 0

def choose_relation(args):
    if args['envelope']:
        name = 'envelope_circle' if args['circle'] else 'envelope_rect'
        module = envelopes
    else:
        name = next(x for x in ('contains', 'overlaps', 'intersects', 'closest')
                if args[x])
        module = relations

    if args['--unchecked']:
        return getattr(module, name)
    else:
        return getattr(validation, 'checked_' + name)

