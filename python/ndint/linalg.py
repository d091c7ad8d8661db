from .dense import NDArray


def matmul(x, y):
    """Matrix product ``x @ y``; same contract as `NDArray.dot`."""
    if not isinstance(x, NDArray):
        raise TypeError("x must be NDArray")
    return x.dot(y)


dot = matmul
