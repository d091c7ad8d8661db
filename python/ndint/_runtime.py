import os

_default_threshold = 1000
_default_edgeitems = 3
_current_threshold = _default_threshold
_current_edgeitems = _default_edgeitems


def set_printoptions(threshold: int | None = None, edgeitems: int | None = None) -> None:
    """Configure how arrays are rendered by ``repr``.

    Parameters
    ----------
    threshold : int, optional
        Arrays with more elements than this are summarized.
    edgeitems : int, optional
        Number of leading and trailing flat elements shown when summarized.

    Raises
    ------
    ValueError
        If a given option is not positive.
    """
    global _current_threshold, _current_edgeitems
    if threshold is not None:
        if int(threshold) < 1:
            raise ValueError("threshold must be >= 1")
        _current_threshold = int(threshold)
    if edgeitems is not None:
        if int(edgeitems) < 1:
            raise ValueError("edgeitems must be >= 1")
        _current_edgeitems = int(edgeitems)


def get_printoptions() -> dict:
    # If user set env externally, honor it
    threshold = _current_threshold
    env = os.environ.get("NDINT_PRINT_THRESHOLD")
    if env:
        try:
            threshold = max(1, int(env))
        except ValueError:
            pass
    return {"threshold": threshold, "edgeitems": _current_edgeitems}


def reset_printoptions() -> None:
    global _current_threshold, _current_edgeitems
    _current_threshold = _default_threshold
    _current_edgeitems = _default_edgeitems
