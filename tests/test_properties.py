import re

import pytest

from textjustify import InvalidInput, build_cost_table, justify, justify_text, measure_words, optimize_breaks
from textjustify.optimize import line_costs

TEXTS = [
    """
        Whether I shall turn out to be the hero of my own life, or whether that
        station will be held by anybody else, these pages must show. To begin my
        life with the beginning of my life, I record that I was born (as I have
        been informed and believe) on a Friday, at twelve o'clock at night.
        It was remarked that the clock began to strike, and I began to cry,
        simultaneously.
        """,
    """
        I need say nothing here, on the first head, because nothing can show
        better than my history whether that prediction was verified or falsified
        by the result. On the second branch of the question, I will only remark,
        that unless I ran through that part of my inheritance while I was still
        a baby, I have not come into it yet.
        """,
]

TEXTS = [re.sub(r"\s+", " ", x.strip()) for x in TEXTS]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("width", [16, 20, 30, 45])
def test_width_and_content(text, width):
    lines = justify_text(text, width)

    print("\n")
    print("\n".join([f"{len(l):02d}:  {l}" for l in lines]), end="\n\n")

    for line in lines:
        assert len(line) == width, f"This line has {len(line)} characters instead of {width}: {line}"

    assert [w for line in lines for w in line.split()] == text.split()


@pytest.mark.parametrize("text", TEXTS)
def test_never_worse_than_greedy(text):
    words = text.split()
    width = 30
    table = build_cost_table(measure_words(words), width)
    breaks = optimize_breaks(table)

    greedy = [0]
    length = -1
    for i, word in enumerate(words):
        if length + 1 + len(word) > width:
            greedy.append(i)
            length = -1
        length += 1 + len(word)
    greedy.append(len(words))
    greedy_cost = sum(line_costs(table, list(zip(greedy[:-1], greedy[1:]))))

    assert breaks.total_cost <= greedy_cost


def test_fails_only_for_oversized_words():
    words = TEXTS[0].split()
    longest = max(len(w) for w in words)

    assert justify(words, longest)
    with pytest.raises(InvalidInput):
        justify(words, longest - 1)


def test_duplicates_preserved():
    words = ["a", "a", "bb", "a", "bb", "bb", "a"]
    lines = justify(words, 5)
    assert [w for line in lines for w in line.split()] == words
