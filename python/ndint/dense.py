"""Dense integer N-dimensional arrays.

This module exposes `NDArray`, a fixed-shape array of 32-bit signed integers
stored as one flat, row-major numpy buffer.

Notes
-----
- The buffer lives in a `_Storage` handle that is separate from the array
  handle. `copy` clones the storage; `view` builds a second `NDArray` around
  the very same storage, so the two handles are indistinguishable aliases.
- Every operation validates its operands before touching storage, so a
  failing call never leaves a partial update behind.
- Arithmetic wraps on overflow like the host 32-bit integer type.
"""

import logging
import operator

import numpy as np

from . import _runtime
from .errors import CoordinateOutOfRange, DimensionMismatch
from .point import Point
from .shape import Shape

logger = logging.getLogger(__name__)

DTYPE = np.int32
_INT_MIN = int(np.iinfo(DTYPE).min)
_SPAN = 1 << np.iinfo(DTYPE).bits


def _wrap(value):
    # two's-complement wrap into the element range
    value = operator.index(value)
    return (value - _INT_MIN) % _SPAN + _INT_MIN


def _as_shape(shape):
    return shape if isinstance(shape, Shape) else Shape(shape)


class _Storage:
    """Flat buffer shared by an array and all views taken from it."""

    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data

    @classmethod
    def allocate(cls, size, fill):
        logger.debug("allocating %d-element %s storage filled with %d", size, DTYPE.__name__, fill)
        return cls(np.full(size, fill, dtype=DTYPE))


class NDArray:
    """Dense, fixed-shape integer array.

    Instances are normally obtained from `NDArray.zeros`, `NDArray.ones`,
    `ndint.asarray`, or from `copy`/`view`/`dot` on an existing array.

    Parameters
    ----------
    storage : _Storage
        Backing store; its length must equal ``shape.size``.
    shape : Shape
        Array shape.

    Attributes
    ----------
    shape : Shape
        Array shape.
    ndim : int
        Number of axes.
    size : int
        Number of elements.

    Examples
    --------
    >>> from ndint import NDArray, Point, Shape
    >>> a = NDArray.zeros(Shape(2, 3))
    >>> a.set(Point(1, 2), 7)
    >>> a.at(Point(1, 2))
    7
    >>> v = a.view()
    >>> v.set(Point(0, 0), 5)
    >>> a.at(Point(0, 0))
    5
    """

    __slots__ = ("_storage", "_shape")

    def __init__(self, storage, shape):
        shape = _as_shape(shape)
        if storage.data.ndim != 1 or storage.data.size != shape.size:
            raise ValueError(
                f"storage of {storage.data.size} elements does not fit shape {shape.as_tuple()}"
            )
        self._storage = storage
        self._shape = shape

    @classmethod
    def zeros(cls, shape):
        """New array of the given shape with every element set to 0."""
        shape = _as_shape(shape)
        return cls(_Storage.allocate(shape.size, 0), shape)

    @classmethod
    def ones(cls, shape):
        """New array of the given shape with every element set to 1."""
        shape = _as_shape(shape)
        return cls(_Storage.allocate(shape.size, 1), shape)

    @property
    def shape(self):
        return self._shape

    @property
    def ndim(self):
        return self._shape.ndim

    @property
    def size(self):
        return int(self._storage.data.size)

    def dim(self, i):
        """Size of axis ``i``."""
        return self._shape.dim(i)

    def _linear_index(self, point):
        if not isinstance(point, Point):
            point = Point(point)
        if point.ndim != self.ndim:
            raise DimensionMismatch(
                self.ndim,
                point.ndim,
                message=f"Point rank does not match array rank: {self.ndim} vs. {point.ndim}",
            )
        index = 0
        for axis, (c, d) in enumerate(zip(point, self._shape)):
            if c < 0 or c >= d:
                raise CoordinateOutOfRange(axis)
            index = index * d + c
        return index

    def at(self, point):
        """Read the element addressed by ``point``.

        Raises
        ------
        DimensionMismatch
            If ``point.ndim != self.ndim``.
        CoordinateOutOfRange
            For the first axis whose coordinate is negative or too large.
        """
        return int(self._storage.data[self._linear_index(point)])

    def set(self, point, value):
        """Overwrite the element addressed by ``point``.

        The write is visible through every view sharing this storage. Values
        outside the 32-bit range are wrapped.

        Raises
        ------
        DimensionMismatch, CoordinateOutOfRange
            As for `at`.
        TypeError
            If ``value`` is not an integer.
        """
        index = self._linear_index(point)
        self._storage.data[index] = _wrap(value)

    def copy(self):
        """Return an array with an independent copy of the storage."""
        logger.debug("copying %d-element storage", self.size)
        return NDArray(_Storage(self._storage.data.copy()), self._shape)

    def view(self):
        """Return another handle on the same storage and shape.

        No storage is allocated. Reads and writes through the returned array
        and through ``self`` are interchangeable.
        """
        logger.debug("creating view of %d-element storage", self.size)
        return NDArray(self._storage, self._shape)

    def shares_storage(self, other):
        """Whether ``other`` aliases this array's storage."""
        return isinstance(other, NDArray) and other._storage is self._storage

    def add(self, other):
        """Accumulate ``other`` into this array in place.

        With equal ranks the shapes must match and elements are summed
        pairwise. When ``other`` has exactly one axis fewer, its axes must
        match the leading axes of this array, and each of its values is
        added along the whole trailing axis at that leading position.

        Parameters
        ----------
        other : NDArray
            Right-hand operand.

        Raises
        ------
        DimensionMismatch
            If the ranks differ by anything but 0 or 1, or a compared axis
            size differs.
        TypeError
            If ``other`` is not an `NDArray`.
        """
        if not isinstance(other, NDArray):
            raise TypeError("other must be NDArray")
        if other.ndim != self.ndim and other.ndim + 1 != self.ndim:
            raise DimensionMismatch(self.ndim, other.ndim)
        for i in range(other.ndim):
            if self.dim(i) != other.dim(i):
                raise DimensionMismatch(self.dim(i), other.dim(i))

        target = self._storage.data
        source = other._storage.data
        if other.ndim == self.ndim:
            np.add(target, source, out=target)
        else:
            leading = other._shape.as_tuple()
            block = target.reshape(leading + (self.dim(self.ndim - 1),))
            np.add(block, source.reshape(leading + (1,)), out=block)

    def dot(self, other):
        """Matrix product with a 2D matrix or a 1D column vector.

        Parameters
        ----------
        other : NDArray
            Matrix of shape ``(k, m)`` or vector of shape ``(k,)`` where
            ``k == self.dim(1)``.

        Returns
        -------
        NDArray
            New array of shape ``(self.dim(0), m)``, or ``(self.dim(0), 1)``
            for a vector operand.

        Raises
        ------
        DimensionMismatch
            If this array is not 2D, ``other`` has more than two axes, or the
            inner sizes differ.
        TypeError
            If ``other`` is not an `NDArray`.
        """
        if not isinstance(other, NDArray):
            raise TypeError("other must be NDArray")
        if self.ndim != 2:
            raise DimensionMismatch(2, self.ndim)
        if other.ndim > 2 or other.dim(0) != self.dim(1):
            raise DimensionMismatch(self.dim(1), other.dim(0))

        rows, inner = self.dim(0), self.dim(1)
        cols = 1 if other.ndim == 1 else other.dim(1)
        logger.debug("dot (%d, %d) x (%d, %d)", rows, inner, inner, cols)
        left = self._storage.data.reshape(rows, inner)
        right = other._storage.data.reshape(inner, cols)
        product = np.matmul(left, right)
        storage = _Storage(np.ascontiguousarray(product, dtype=DTYPE).reshape(-1))
        return NDArray(storage, Shape(rows, cols))

    def toarray(self):
        """Materialize as a new numpy.ndarray of dtype int32 and the same shape."""
        return self._storage.data.reshape(self._shape.as_tuple()).copy()

    def __getitem__(self, key):
        return self.at(key)

    def __setitem__(self, key, value):
        self.set(key, value)

    def __matmul__(self, other):
        if isinstance(other, NDArray):
            return self.dot(other)
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, NDArray):
            self.add(other)
            return self
        return NotImplemented

    def __repr__(self):
        opts = _runtime.get_printoptions()
        shape = self._shape.as_tuple()
        if self.size <= opts["threshold"]:
            data = self.toarray().tolist()
        else:
            k = opts["edgeitems"]
            flat = self._storage.data
            head = ", ".join(str(int(x)) for x in flat[:k])
            tail = ", ".join(str(int(x)) for x in flat[-k:])
            data = f"[{head}, ..., {tail}]"
        return f"NDArray(shape={shape}, data={data})"

    def __str__(self):
        return self.__repr__()
