"""Simulate allocation in a circular array of memory slots."""


class CircularMemory:
    """A ring of memory slots that can be stored into and freed."""

    def __init__(self, total_slots):
        if total_slots <= 0:
            raise ValueError("total_slots must be positive")
        self._used = [False] * total_slots

    def _positions(self, start, count):
        size = len(self._used)
        return [(start + offset) % size for offset in range(count)]

    def store(self, start, count):
        """Allocate ``count`` slots at the first free place from ``start`` on.

        Returns the index where the block begins, or None when no place fits.
        """
        size = len(self._used)
        for shift in range(size):
            candidate = (start + shift) % size
            positions = self._positions(candidate, count)
            if not any(self._used[pos] for pos in positions):
                for pos in positions:
                    self._used[pos] = True
                return candidate
        return None

    def free(self, start, count):
        """Release ``count`` slots from ``start`` on and return ``count``."""
        for pos in self._positions(start, count):
            self._used[pos] = False
        return count


def process_requests(requests, total_slots):
    """Run ``[command, start, count]`` requests against a fresh memory.

    ``free`` requests yield the number of slots freed; any other request is a
    store and yields the starting index, or -1 when it cannot be placed.
    """
    memory = CircularMemory(total_slots)
    results = []
    for command, start, count in requests:
        start, count = int(start), int(count)
        if command == "free":
            results.append(memory.free(start, count))
        else:
            placed = memory.store(start, count)
            results.append(-1 if placed is None else placed)
    return results