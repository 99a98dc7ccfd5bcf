#!/usr/bin/env python3

from .errors import *
from .vector import Vector

class Relation:
    """
    Choose the implementation of a geometric relation based on the types of
    its arguments.

    Implementations are registered for a specific tuple of argument types
    using the `register()` decorator.  Symmetric relations only need one
    implementation per unordered pair: `register_mirror()` makes the swapped
    pair call the same function with its arguments reversed.  Calling the
    relation looks up the exact argument types in a dictionary, so dispatch
    costs one hash lookup.  Subclasses and 2-tuples (which are treated as
    points) are resolved once and then cached.
    """

    def __init__(self, name, arity=2):
        self.name = self.__name__ = name
        self.arity = arity
        self._implementations = {}
        self._resolved = {}

    def __repr__(self):
        return '<Relation {}>'.format(self.name)

    def __call__(self, *args):
        key = tuple(type(x) for x in args)

        try:
            function = self._resolved[key]
        except KeyError:
            function = self._resolve(key, args)

        return function(*args)

    def register(self, *types):
        assert len(types) == self.arity, \
                "{} takes {} shapes.".format(self.name, self.arity)

        def decorator(function):
            self._add(types, function)
            return function

        return decorator

    def register_mirror(self, first_cls, second_cls):
        """
        Implement ``relation(second, first)`` by calling ``relation(first,
        second)``, which must already be registered.
        """
        assert self.arity == 2
        function = self._implementations[first_cls, second_cls]

        def mirror(second, first):
            return function(first, second)

        mirror.__name__ = '{}_mirror'.format(function.__name__)
        mirror.__doc__ = function.__doc__
        self._add((second_cls, first_cls), mirror)
        return mirror

    def supports(self, *types):
        return tuple(types) in self._implementations

    @property
    def signatures(self):
        return list(self._implementations)

    def _add(self, types, function):
        name = self.name
        signature = ', '.join(x.__name__ for x in types)
        assert types not in self._implementations, \
                "{}({}) registered twice.".format(name, signature)

        debug("registering {name}({signature}): {function.__name__}")
        self._implementations[types] = function
        self._resolved[types] = function

    def _resolve(self, key, args):
        import itertools

        def candidates(cls):
            if issubclass(cls, tuple):
                yield Vector
            yield from cls.__mro__

        for types in itertools.product(*map(candidates, key)):
            if types in self._implementations:
                break
        else:
            name = self.name
            shapes = ', '.join(x.__name__ for x in key)
            raise ApiUsageError("""\
                    {name}() doesn't know how to handle ({shapes}).

                    The arguments to {name}() must be points (Vector objects
                    or 2-tuples), Segment, Rect, or Circle objects.  Use
                    {name}.signatures to see which combinations are
                    supported.""")

        function = self._implementations[types]

        # Tuples have to be converted into vectors on every call, so wrap the
        # implementation before caching it.

        if any(issubclass(cls, tuple) for cls in key):
            inner = function

            def function(*args):
                return inner(*(
                    Vector.from_tuple(x) if isinstance(x, tuple) else x
                    for x in args))

        debug("resolved {self.name}{key} to {types}")
        self._resolved[key] = function
        return function

