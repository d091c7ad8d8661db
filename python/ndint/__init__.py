"""
ndint
~~~~~

Dense integer N-dimensional arrays with copy/view semantics, trailing-axis
broadcast accumulation, and 2D matrix products.
"""

import logging

from ._runtime import get_printoptions, reset_printoptions, set_printoptions
from .creation import asarray, ones, zeros
from .dense import NDArray
from .errors import CoordinateOutOfRange, DimensionMismatch, NDArrayError
from .linalg import dot, matmul
from .point import Point
from .shape import Shape

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Shape",
    "Point",
    "NDArray",
    "zeros",
    "ones",
    "asarray",
    "dot",
    "matmul",
    "NDArrayError",
    "DimensionMismatch",
    "CoordinateOutOfRange",
    "set_printoptions",
    "get_printoptions",
    "reset_printoptions",
]
