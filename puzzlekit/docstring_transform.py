"""Rewrite snake_case names inside backticks of a docstring as camelCase."""

_TICK = "`"


def is_upper_word(word):
    """True when every character is an ASCII capital letter or an underscore."""
    return all(ch == "_" or "A" <= ch <= "Z" for ch in word)


def to_camel_case(word):
    """Turn ``snake_case`` into ``camelCase``.

    The first piece is kept as is; every later piece has its first letter
    upper-cased. A single trailing underscore is dropped.
    """
    pieces = word.split("_")
    if pieces and pieces[-1] == "":
        pieces.pop()
    if not pieces:
        return ""
    head, *rest = pieces
    return head + "".join(piece[:1].upper() + piece[1:] for piece in rest)


def _convert_span(span):
    return " ".join(
        word if is_upper_word(word) else to_camel_case(word) for word in span.split()
    )


def transform_docstring(docstring):
    """Convert the names in every backtick span of ``docstring``.

    Words made only of capitals and underscores are left alone. Whitespace
    inside a span is collapsed to single spaces, and a span left open at the
    end of the text is closed.
    """
    parts = []
    pos = 0
    while True:
        opening = docstring.find(_TICK, pos)
        if opening == -1:
            parts.append(docstring[pos:])
            break
        parts.append(docstring[pos:opening])
        closing = docstring.find(_TICK, opening + 1)
        span = docstring[opening + 1:] if closing == -1 else docstring[opening + 1:closing]
        parts.append(_TICK + _convert_span(span) + _TICK)
        if closing == -1:
            break
        pos = closing + 1
    return "".join(parts)