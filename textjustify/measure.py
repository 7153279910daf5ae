from typing import Sequence

import numpy as np

from .types import IntVector


def monospace_measure(word: str) -> int:
    return len(word)


def measure_words(words: Sequence[str]) -> IntVector:
    """Measures every word and returns the widths as an integer vector.

    Widths are in the same fixed logical units as the line width, one unit per character.
    """
    widths = np.fromiter((monospace_measure(w) for w in words), dtype=np.int64, count=len(words))
    if np.any(widths < 1):
        raise ValueError("Every word must measure at least one unit.")

    return widths
