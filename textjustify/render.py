import logging
from typing import Sequence

from .types import Span

logger = logging.getLogger(__name__)


def padding_gaps(word_count: int, extra: int) -> list[int]:
    """Distributes extra spaces over the gaps of a line, one at a time from left to right, wrapping around.

    A line of one word has a single trailing gap that absorbs all the padding.
    """
    if word_count < 1:
        raise ValueError("A line needs at least one word.")
    elif extra < 0:
        raise ValueError(f"Cannot distribute a negative amount of padding ({extra}).")

    gap_count = max(word_count - 1, 1)
    counts = [0] * gap_count
    gap = 0
    for _ in range(extra):
        counts[gap] += 1
        gap = (gap + 1) % gap_count
    return counts


def render_line(words: Sequence[str], line_width: int) -> str:
    """Joins the words of one line with single spaces and pads the gaps until the line is exactly line_width long."""
    base_length = sum(len(w) for w in words) + len(words) - 1
    extra = line_width - base_length
    if extra < 0:
        raise ValueError(f"Line of length {base_length} does not fit width {line_width}.")
    elif extra == 0:
        return " ".join(words)

    counts = padding_gaps(len(words), extra)
    if len(words) == 1:
        return words[0] + " " * counts[0]

    parts = []
    for word, pad in zip(words, counts):
        parts.append(word)
        parts.append(" " * (1 + pad))
    parts.append(words[-1])
    return "".join(parts)


def render_lines(words: Sequence[str], spans: Sequence[Span], line_width: int) -> list[str]:
    """Renders each [start, end) span of words as one justified line. The last line is padded like any other."""
    lines = [render_line(words[a:b], line_width) for a, b in spans]
    logger.debug("Rendered %d lines of width %d", len(lines), line_width)
    return lines
