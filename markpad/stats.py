"""Document statistics shown under the editor."""

import re
from typing import NamedTuple

from .constants import EditorConstants

_WORD_RE = re.compile(r"\b\w+\b")


class Stats(NamedTuple):
    words: int
    chars: int
    lines: int


def compute_stats(text: str) -> Stats:
    """Count words, characters and lines of ``text``.

    ``chars`` is the raw length including whitespace.  An empty buffer
    still has one line.
    """
    words = len(_WORD_RE.findall(text.strip()))
    return Stats(words=words, chars=len(text), lines=text.count("\n") + 1)


def format_stats(stats: Stats) -> str:
    return EditorConstants.STATS_FORMAT.format(
        words=stats.words, chars=stats.chars, lines=stats.lines
    )
