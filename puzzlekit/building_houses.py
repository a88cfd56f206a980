"""Track the longest run of built houses on a number line."""


def longest_segments(queries):
    """Build a house at each queried position and report the longest run after each.

    Building on an already built position changes nothing.
    """
    ends_at = {}
    starts_at = {}
    built = set()
    longest = 0
    result = []
    for position in queries:
        if position not in built:
            built.add(position)
            left = position
            right = position
            if position - 1 in built:
                left -= ends_at[position - 1]
            if position + 1 in built:
                right += starts_at[position + 1]
            length = right - left + 1
            ends_at[right] = length
            starts_at[left] = length
            longest = max(longest, length)
        result.append(longest)
    return result