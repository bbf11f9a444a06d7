"""String case helpers."""

from __future__ import annotations

import re

# Runs of letters and digits in any script; everything else separates words.
_RUN_RE = re.compile(r"[^\W_]+")


def _kind(ch: str) -> str:
    if ch.isdigit():
        return "digit"
    return "upper" if ch.isupper() else "lower"


def _split_run(run: str) -> list[str]:
    # Lower→upper ("drinkingWater"), acronym→word ("HTTPServer") and
    # letter↔digit boundaries start a new word.
    words = []
    start = 0
    for i in range(1, len(run)):
        prev, cur = _kind(run[i - 1]), _kind(run[i])
        nxt = _kind(run[i + 1]) if i + 1 < len(run) else None
        if prev == cur == "upper":
            boundary = nxt == "lower"
        else:
            boundary = prev != cur and not (prev == "upper" and cur == "lower")
        if boundary:
            words.append(run[start:i])
            start = i
    words.append(run[start:])
    return words


def split_words(value: str) -> list[str]:
    """Split a string on separators and case boundaries."""
    return [word for run in _RUN_RE.findall(value) for word in _split_run(run)]


def to_header_case(value: str) -> str:
    """'drinkingWater' -> 'Drinking Water', 'agricultural products' -> 'Agricultural Products'."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in split_words(value))
