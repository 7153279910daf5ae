import logging

import numpy as np

from .errors import InvalidInput
from .types import BoolVector, IntVector

logger = logging.getLogger(__name__)


def check_line_width(line_width: int) -> int:
    if isinstance(line_width, bool) or not isinstance(line_width, int | np.integer):
        raise ValueError(f"Line width must be an integer, got {line_width!r}.")
    elif line_width < 1:
        raise ValueError(f"Line width must be positive, got {line_width}.")
    return int(line_width)


class CostTable:
    """
    Squared slack of every line that can be formed from a contiguous run of words.

    Entry (i, j) is the cost of a line holding exactly words i through j (inclusive) separated by single spaces. Only
    the upper triangle is meaningful. Spans that do not fit the line width are marked in the `feasible` mask rather
    than with a sentinel value so that all costs stay exact integers.
    """

    line_width: int
    costs: IntVector  # (n, n) squared slack, zero where infeasible
    feasible: BoolVector  # (n, n) True where words i..j fit on one line

    def __init__(self, line_width: int, costs: IntVector, feasible: BoolVector):
        self.line_width = line_width
        self.costs = costs
        self.feasible = feasible

    def __len__(self) -> int:
        return len(self.costs)

    def is_feasible(self, i: int, j: int) -> bool:
        return bool(self.feasible[i, j])

    def cost(self, i: int, j: int) -> int | None:
        """Cost of the line spanning words i..j, or None if they do not fit."""
        if not self.feasible[i, j]:
            return None
        return int(self.costs[i, j])


def build_cost_table(widths: IntVector, line_width: int) -> CostTable:
    """Builds the cost table for words of the given widths.

    Every word is checked against the line width before any entry is computed, so an oversized word anywhere in the
    sequence raises InvalidInput and no partial table is produced.
    """
    line_width = check_line_width(line_width)
    widths = np.asarray(widths, dtype=np.int64)
    n = len(widths)

    if np.any(widths > line_width):
        raise InvalidInput(line_width)

    costs = np.zeros((n, n), dtype=np.int64)
    feasible = np.zeros((n, n), dtype=bool)

    # Every word contributes its width plus one separator, the separator after the last word is dropped per line
    offsets = np.zeros(n + 1, dtype=np.int64)
    offsets[1:] = (widths + 1).cumsum()

    for i in range(n):
        lengths = offsets[i + 1:] - offsets[i] - 1

        # Lengths grow strictly with k, so everything past the first overflow is infeasible as well
        end = i + int(np.searchsorted(lengths, line_width, side="right"))
        slack = line_width - lengths[: end - i]
        costs[i, i:end] = slack * slack
        feasible[i, i:end] = True

    logger.debug("Built %dx%d cost table for line width %d", n, n, line_width)
    return CostTable(line_width, costs, feasible)
