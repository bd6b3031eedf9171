from collections.abc import Callable


def wrap_text(text: str, width: float, advance: Callable[[str], float]) -> list[str]:
    """
    Greedy word wrap of a single line.

    Breaks at the last space that still fits; a word wider than `width` is broken
    between characters. The space a line is broken at is dropped. `advance(ch)`
    returns the width of one character in the same unit as `width`.
    """
    if width <= 0:
        raise ValueError(f"wrap width must be positive, got {width}")

    wrapped: list[str] = []
    start = 0
    last_space = -1
    used = 0.0
    for i, ch in enumerate(text):
        if ch == " ":
            last_space = i
        used += advance(ch)
        if used <= width or i == start:
            continue
        if last_space > start:
            wrapped.append(text[start:last_space])
            start = last_space + 1
        else:
            wrapped.append(text[start:i])
            start = i
        last_space = -1
        used = sum(advance(c) for c in text[start : i + 1])

    if start < len(text) or not wrapped:
        wrapped.append(text[start:])
    return wrapped
