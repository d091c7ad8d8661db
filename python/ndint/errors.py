"""Errors raised by dense integer arrays.

The taxonomy is closed: every contract violation of an `NDArray` operation
raises one of the two concrete classes below. Both derive from `NDArrayError`
and from the builtin a numpy user would expect (`ValueError` for shape
problems, `IndexError` for out-of-range coordinates).
"""


class NDArrayError(Exception):
    """Base class for `NDArray` contract violations."""


class DimensionMismatch(NDArrayError, ValueError):
    """Ranks or axis sizes are incompatible.

    Parameters
    ----------
    expected : int
        Rank or axis size required by the receiving array.
    actual : int
        Rank or axis size that was supplied.
    message : str, optional
        Overrides the default message.
    """

    def __init__(self, expected, actual, message=None):
        self.expected = int(expected)
        self.actual = int(actual)
        if message is None:
            message = (
                f"Arrays do not have matching dimensions: {self.expected} vs. {self.actual}"
            )
        super().__init__(message)


class CoordinateOutOfRange(NDArrayError, IndexError):
    """A point coordinate is negative or not below its axis size.

    Parameters
    ----------
    axis : int
        First offending axis, scanning from axis 0 upward.
    """

    def __init__(self, axis):
        self.axis = int(axis)
        super().__init__(f"Index out of range at position {self.axis}")
