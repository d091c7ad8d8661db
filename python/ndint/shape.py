"""Immutable array shapes."""

import itertools
import operator
from functools import reduce

from .point import Point


def _as_sequence(values):
    # Accept both Shape(2, 3) and Shape((2, 3)).
    if len(values) == 1 and not isinstance(values[0], int):
        try:
            return tuple(values[0])
        except TypeError:
            return values
    return tuple(values)


class Shape:
    """Ordered sequence of positive axis sizes.

    Parameters
    ----------
    *dims : int or iterable of int
        Axis sizes, given either as separate arguments or as one iterable.

    Attributes
    ----------
    ndim : int
        Number of axes.
    size : int
        Product of all axis sizes.

    Raises
    ------
    ValueError
        If no axis is given or an axis size is below 1.
    TypeError
        If an axis size is not an integer.

    Examples
    --------
    >>> from ndint import Shape
    >>> s = Shape(2, 3)
    >>> s.ndim, s.size, s.dim(1)
    (2, 6, 3)
    """

    __slots__ = ("_dims", "_size")

    def __init__(self, *dims):
        dims = tuple(operator.index(d) for d in _as_sequence(dims))
        if not dims:
            raise ValueError("shape must have ndim >= 1")
        for i, d in enumerate(dims):
            if d < 1:
                raise ValueError(f"axis {i} has non-positive size {d}")
        object.__setattr__(self, "_dims", dims)
        object.__setattr__(self, "_size", reduce(operator.mul, dims, 1))

    def __setattr__(self, name, value):
        raise AttributeError("Shape is immutable")

    @property
    def ndim(self):
        return len(self._dims)

    @property
    def size(self):
        return self._size

    def dim(self, i):
        """Size of axis ``i``."""
        return self._dims[i]

    def as_tuple(self):
        return self._dims

    def points(self):
        """Iterate every in-bounds point in row-major order.

        The last axis varies fastest, which matches the layout of the flat
        storage: the n-th point yielded addresses linear index n.

        Yields
        ------
        Point
        """
        for coords in itertools.product(*(range(d) for d in self._dims)):
            yield Point(coords)

    def __len__(self):
        return len(self._dims)

    def __iter__(self):
        return iter(self._dims)

    def __getitem__(self, i):
        return self._dims[i]

    def __eq__(self, other):
        if isinstance(other, Shape):
            return self._dims == other._dims
        if isinstance(other, tuple):
            return self._dims == other
        return NotImplemented

    def __hash__(self):
        return hash(self._dims)

    def __repr__(self):
        return f"Shape{self._dims}"
