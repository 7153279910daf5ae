import logging

import numpy as np

from .cost import CostTable
from .types import BoolVector, IntVector, Span

logger = logging.getLogger(__name__)


class Breaks:
    """
    Result of the break optimizer.

    `positions[i]` is the exclusive end of the cheapest line starting at word i, i.e. the first word of the next line
    or the word count when i starts the last line. `best_costs[i]` is the minimum total cost of setting words i..n-1,
    with the explicit boundary entry `best_costs[n] = 0`. `reachable` marks which entries of `best_costs` hold a
    finite solution.
    """

    positions: IntVector
    best_costs: IntVector
    reachable: BoolVector

    def __init__(self, positions: IntVector, best_costs: IntVector, reachable: BoolVector):
        self.positions = positions
        self.best_costs = best_costs
        self.reachable = reachable

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def total_cost(self) -> int:
        return int(self.best_costs[0])

    def chain(self) -> list[int]:
        """Follows the break positions from word 0, returning [0, b1, ..., n]."""
        n = len(self.positions)
        chain = [0]
        while chain[-1] < n:
            nxt = int(self.positions[chain[-1]])
            if nxt <= chain[-1]:
                raise RuntimeError(f"Break position {nxt} does not advance past word {chain[-1]}.")
            chain.append(nxt)
        return chain

    def spans(self) -> list[Span]:
        chain = self.chain()
        return list(zip(chain[:-1], chain[1:]))


def optimize_breaks(table: CostTable) -> Breaks:
    """Chooses the break positions with the minimum total cost, sweeping from the last word back to the first.

    A start whose remaining words fit on one line always takes that line. Otherwise every end k is tried from the last
    word downwards and only a strictly cheaper total replaces the current best, so ties keep the longer line.
    """
    n = len(table)
    feasible = table.feasible
    costs = table.costs

    best_costs = np.zeros(n + 1, dtype=np.int64)
    reachable = np.zeros(n + 1, dtype=bool)
    reachable[n] = True
    positions = np.full(n, n, dtype=np.int64)

    for i in range(n - 1, -1, -1):
        if feasible[i, n - 1]:
            best_costs[i] = costs[i, n - 1]
            positions[i] = n
            reachable[i] = True
            continue

        best = None
        for k in range(n - 1, i - 1, -1):
            if not (feasible[i, k] and reachable[k + 1]):
                continue
            total = int(costs[i, k]) + int(best_costs[k + 1])
            if best is None or total < best:
                best = total
                positions[i] = k + 1

        if best is None:
            raise RuntimeError(f"No line starting at word {i} fits in width {table.line_width}.")

        best_costs[i] = best
        reachable[i] = True

    breaks = Breaks(positions, best_costs, reachable)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Optimal breaks %s with total cost %d", breaks.chain(), breaks.total_cost)
    return breaks


def line_costs(table: CostTable, spans: list[Span]) -> list[int]:
    """Cost of each line in a span list. Raises ValueError if a span does not fit."""
    out = []
    for start, end in spans:
        c = table.cost(start, end - 1)
        if c is None:
            raise ValueError(f"Words {start}..{end - 1} do not fit in width {table.line_width}.")
        out.append(c)
    return out
