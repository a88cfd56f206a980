"""Count windows of a number list that follow an up/equal/down pattern."""

from itertools import pairwise


def _step_matches(expected, current, following):
    if expected == 0:
        return current == following
    if expected == 1:
        return current <= following
    if expected == -1:
        return current >= following
    return True


def count_pattern_matches(numbers, pattern):
    """Count windows of ``len(pattern) + 1`` numbers matching ``pattern``.

    A ``1`` step accepts a rise or a level step, ``-1`` a fall or a level
    step, and ``0`` only a level step.
    """
    numbers = list(numbers)
    pattern = list(pattern)
    width = len(pattern) + 1
    return sum(
        1
        for start in range(len(numbers) - width + 1)
        if all(
            _step_matches(expected, current, following)
            for expected, (current, following) in zip(
                pattern, pairwise(numbers[start:start + width])
            )
        )
    )