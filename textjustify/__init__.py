from .cost import CostTable, build_cost_table
from .errors import InvalidInput
from .justify import TextJustifier, justify, justify_text
from .measure import measure_words, monospace_measure
from .optimize import Breaks, optimize_breaks
from .render import padding_gaps, render_line, render_lines
from .words import normalize_words, split_words

__all__ = [
    "Breaks",
    "CostTable",
    "InvalidInput",
    "TextJustifier",
    "build_cost_table",
    "justify",
    "justify_text",
    "measure_words",
    "monospace_measure",
    "normalize_words",
    "optimize_breaks",
    "padding_gaps",
    "render_line",
    "render_lines",
    "split_words",
]
