"""Rearrange a string by alternating characters from both ends."""


def interleave_ends(text):
    """Take the first, the last, the second, the second-last character and so on."""
    half = len(text) // 2
    pieces = [a + b for a, b in zip(text[:half], reversed(text[-half:] if half else ""))]
    if len(text) % 2:
        pieces.append(text[half])
    return "".join(pieces)