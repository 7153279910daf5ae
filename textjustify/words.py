import re
from typing import Iterable

re_words = re.compile(r"\S+")
re_space = re.compile(r"\s")


def split_words(text: str) -> list[str]:
    return re_words.findall(text)


def normalize_words(raw_words: Iterable[str]) -> list[str]:
    """Strips surrounding whitespace from raw tokens, dropping tokens that end up empty.

    A token with whitespace inside it cannot be treated as a single word and raises a ValueError.
    """
    words = []
    for raw in raw_words:
        word = raw.strip()
        if not word:
            continue
        if re_space.search(word):
            raise ValueError(f"Token {raw!r} contains whitespace between characters.")
        words.append(word)
    return words


def check_words(words: Iterable[str]) -> None:
    for word in words:
        if not word:
            raise ValueError("Words cannot be empty.")
        elif re_space.search(word):
            raise ValueError(f"Word {word!r} cannot contain whitespace.")
