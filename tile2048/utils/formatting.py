"""Compact score formatting for display."""

from math import floor


def _trim(number: float, suffix: str) -> str:
    if number == int(number):
        return f"{int(number)}{suffix}"
    return f"{number}{suffix}"


def format_score(score: int) -> str:
    """
    Format a score with K/M notation.

    Parameters
    ----------
    score : int
        The score to format.

    Returns
    -------
    str
        The score as is below 1000, then one decimal with a ``K`` or ``M`` suffix (``10.5K``, ``2M``).

    Notes
    -----
    - Below 10000 the value is rounded half up; from 10000 on it is floored so the display never overstates.
    - A trailing ``.0`` is dropped.

    Example
    -------
    >>> format_score(950)
    '950'
    >>> format_score(1500)
    '1.5K'
    >>> format_score(123456)
    '123.4K'
    """
    if score < 1000:
        return str(score)
    if score < 10000:
        # ##>: Round half up on integers, 1250 gives 1.3K.
        return _trim(((score + 50) // 100) / 10, "K")
    if score < 1_000_000:
        return _trim(floor(score / 100) / 10, "K")
    return _trim(floor(score / 100_000) / 10, "M")
