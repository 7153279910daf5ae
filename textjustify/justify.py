from typing import Sequence

from .cost import build_cost_table, check_line_width
from .errors import InvalidInput
from .measure import measure_words
from .optimize import Breaks, optimize_breaks
from .render import render_line, render_lines
from .types import IntVector
from .words import check_words, normalize_words, split_words


class TextJustifier:
    """Breaks a sequence of words into lines of a fixed width and pads every line to exactly that width."""

    words: tuple[str, ...]
    widths: IntVector

    def __init__(self, words: Sequence[str]):
        """Initializes the justifier with words that are already stripped of surrounding whitespace."""
        words = tuple(words)
        check_words(words)

        self.words = words
        self.widths = measure_words(words)

    def __len__(self) -> int:
        return len(self.words)

    def breaks(self, line_width: int) -> Breaks:
        """Returns the optimal break positions for the given line width."""
        if not self.words:
            raise ValueError("Cannot break an empty sequence of words.")

        return optimize_breaks(build_cost_table(self.widths, line_width))

    def justify(self, line_width: int) -> list[str]:
        """Justifies the words into lines that are each exactly line_width characters long.

        Raises InvalidInput if any single word is longer than the line.
        """
        line_width = check_line_width(line_width)
        n = len(self.words)

        if n == 0:
            return []
        elif n == 1:
            if self.widths[0] > line_width:
                raise InvalidInput(line_width)
            return [render_line(self.words, line_width)]

        spans = self.breaks(line_width).spans()
        return render_lines(self.words, spans, line_width)


def justify(words: Sequence[str], line_width: int) -> list[str]:
    return TextJustifier(words).justify(line_width)


def justify_text(text: str, line_width: int) -> list[str]:
    """Splits raw text on whitespace and justifies the resulting words."""
    return justify(normalize_words(split_words(text)), line_width)
