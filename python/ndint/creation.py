import logging

import numpy as np

from .dense import DTYPE, NDArray, _Storage
from .shape import Shape

logger = logging.getLogger(__name__)


def zeros(shape):
    """Create an array of zeros.

    Parameters
    ----------
    shape : Shape or tuple of int
        Array shape.

    Returns
    -------
    NDArray
        New array with freshly allocated storage.

    Examples
    --------
    >>> import ndint
    >>> ndint.zeros((2, 2)).at((1, 1))
    0
    """
    return NDArray.zeros(shape)


def ones(shape):
    """Create an array of ones. See `zeros`."""
    return NDArray.ones(shape)


def asarray(obj):
    """Build an array from nested sequences, a numpy array, or an `NDArray`.

    The result never aliases ``obj``: numpy input is copied and an `NDArray`
    input goes through `NDArray.copy`. Values are cast to int32, wrapping
    out-of-range integers.

    Parameters
    ----------
    obj : array_like of int or NDArray
        Source data with at least one axis and no empty axes.

    Returns
    -------
    NDArray

    Raises
    ------
    TypeError
        If the data is not integral.
    ValueError
        If the data is 0-dimensional or empty.
    """
    if isinstance(obj, NDArray):
        return obj.copy()
    arr = np.asarray(obj)
    if arr.dtype.kind not in "iub":
        raise TypeError(f"asarray requires integer data, got dtype {arr.dtype}")
    if arr.ndim == 0:
        raise ValueError("asarray requires at least one axis")
    if arr.size == 0:
        raise ValueError("asarray does not support empty axes")
    data = arr.astype(DTYPE, copy=True).reshape(-1)
    logger.debug("copied %d elements from %s input", data.size, arr.dtype)
    return NDArray(_Storage(data), Shape(arr.shape))
