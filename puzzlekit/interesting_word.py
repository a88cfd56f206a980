"""Find words holding a run of one letter of an exact length."""

from itertools import groupby


def is_interesting(word, n):
    """True when ``word`` has a maximal run of one letter exactly ``n`` long."""
    if n < 1:
        raise ValueError("run length must be at least 1")
    return any(sum(1 for _ in run) == n for _, run in groupby(word))


def count_interesting(words, n):
    """Count the words in ``words`` that are interesting for ``n``."""
    return sum(1 for word in words if is_interesting(word, n))