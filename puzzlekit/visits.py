"""Find the day on which cumulative visits reach a target."""

from itertools import accumulate


def first_day_reaching(visits, target):
    """Return the first zero-based day whose running total is at least ``target``.

    Returns None when the total never gets there.
    """
    return next(
        (day for day, total in enumerate(accumulate(visits)) if total >= target),
        None,
    )