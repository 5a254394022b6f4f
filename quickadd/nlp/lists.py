from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from operator import attrgetter
from typing import TypeVar

from ..utils.text import tokenize
from .dates import Calendar
from .types import ParsedTask

logger = logging.getLogger(__name__)

HASHTAG_PAT = re.compile(r"#(\w+)")

T = TypeVar("T")


def extract_list_hint(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    m = HASHTAG_PAT.search(parsed.remaining)
    if not m:
        return parsed
    logger.debug("list hint %r", m.group(1))
    return parsed.consume(m.span(), list_hint=m.group(1))


def _word_overlap(a: list[str], b: list[str]) -> float:
    sa, sb = set(a), set(b)
    if not sa or not sb:
        return 0.0
    return len(sa & sb) / len(sa | sb)


def resolve_list(hint: str, lists: Sequence[T], name: Callable[[T], str] = attrgetter("name")) -> T | None:
    """Find the list a hashtag refers to.

    Case-insensitive, in falling order of confidence: exact name, name starts
    with the hint, name contains the hint, then shared words (best overlap
    wins, earlier lists win ties). Returns None when nothing matches.
    """
    wanted = hint.strip().lower()
    if not wanted:
        return None

    named = [(item, name(item).strip().lower()) for item in lists]
    tiers: list[Callable[[str], bool]] = [
        lambda n: n == wanted,
        lambda n: n.startswith(wanted),
        lambda n: wanted in n,
    ]
    for matches in tiers:
        for item, n in named:
            if matches(n):
                return item

    hint_words = tokenize(wanted)
    best, best_score = None, 0.0
    for item, n in named:
        score = _word_overlap(hint_words, tokenize(n))
        if score > best_score:
            best, best_score = item, score
    return best
