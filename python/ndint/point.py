"""Coordinate tuples addressing single array elements."""

import operator


class Point:
    """Ordered sequence of integer coordinates, one per axis.

    A point carries no bounds: coordinates may be negative or arbitrarily
    large. Whether it is valid is decided by the array it indexes.

    Parameters
    ----------
    *coords : int or iterable of int
        Coordinates, given either as separate arguments or as one iterable.

    Raises
    ------
    TypeError
        If a coordinate is not an integer.
    """

    __slots__ = ("_coords",)

    def __init__(self, *coords):
        if len(coords) == 1 and not isinstance(coords[0], int):
            try:
                coords = tuple(coords[0])
            except TypeError:
                pass
        object.__setattr__(self, "_coords", tuple(operator.index(c) for c in coords))

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    @property
    def ndim(self):
        return len(self._coords)

    def dim(self, i):
        """Coordinate along axis ``i``."""
        return self._coords[i]

    def as_tuple(self):
        return self._coords

    def __len__(self):
        return len(self._coords)

    def __iter__(self):
        return iter(self._coords)

    def __getitem__(self, i):
        return self._coords[i]

    def __eq__(self, other):
        if isinstance(other, Point):
            return self._coords == other._coords
        if isinstance(other, tuple):
            return self._coords == other
        return NotImplemented

    def __hash__(self):
        return hash(self._coords)

    def __repr__(self):
        return f"Point{self._coords}"
