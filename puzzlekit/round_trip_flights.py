"""Plan consecutive round trips between two cities."""

from bisect import bisect_left

TRAVEL_TIME = 100


def last_round_trip(a2b, b2a, trips):
    """Return the arrival time back in the first city after ``trips`` round trips.

    ``a2b`` and ``b2a`` are sorted departure times; each leg takes the first
    flight leaving no earlier than the traveller is ready.
    """
    current = 0
    out_index = 0
    back_index = 0
    for _ in range(trips):
        out_index = bisect_left(a2b, current, lo=out_index)
        if out_index == len(a2b):
            raise ValueError("no outbound flight left")
        current = a2b[out_index] + TRAVEL_TIME

        back_index = bisect_left(b2a, current, lo=back_index)
        if back_index == len(b2a):
            raise ValueError("no return flight left")
        current = b2a[back_index] + TRAVEL_TIME
    return current