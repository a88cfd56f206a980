"""Count queries over a binary string that can be flipped as a whole."""

from itertools import accumulate

_FLIP = "flip"
_COUNT_PREFIX = "count:"


def answer_requests(binary_string, requests):
    """Answer ``count:<index>`` and ``flip`` requests against ``binary_string``.

    A count request gives the number of zeros at or before ``index`` (zero
    based). While the string is flipped, ones are counted instead. The
    answers are returned in request order.
    """
    zeros_upto = list(accumulate(ch == "0" for ch in binary_string))
    ones_upto = list(accumulate(ch == "1" for ch in binary_string))

    flipped = False
    answers = []
    for request in requests:
        if request == _FLIP:
            flipped = not flipped
            continue
        if not request.startswith(_COUNT_PREFIX):
            raise ValueError(f"unknown request: {request!r}")
        try:
            index = int(request[len(_COUNT_PREFIX):])
        except ValueError:
            raise ValueError(f"bad index in request: {request!r}") from None
        if not 0 <= index < len(binary_string):
            raise IndexError(f"index {index} out of range")
        table = ones_upto if flipped else zeros_upto
        answers.append(table[index])
    return answers