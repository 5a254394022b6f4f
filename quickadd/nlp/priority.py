from __future__ import annotations

import logging
import re

from .dates import Calendar
from .types import ParsedTask

logger = logging.getLogger(__name__)

# Tried top to bottom; the first entry that matches anywhere wins, even if a
# later entry would match earlier in the string. Words never match right
# after "!" so "!urgent" is left for its own symbol entry.
PRIORITY_PATTERNS: list[tuple[re.Pattern[str], int]] = [
    (re.compile(r"(?<!!)\b(?:high\s*priority|urgent|critical|asap)\b", re.I), 3),
    (re.compile(r"(?<!!)\b(?:medium\s*priority|important)\b", re.I), 2),
    (re.compile(r"(?<!!)\b(?:low\s*priority)\b", re.I), 1),
    (re.compile(r"!!!"), 3),
    (re.compile(r"!!"), 2),
    (re.compile(r"!high\b", re.I), 3),
    (re.compile(r"!urgent\b", re.I), 3),
    (re.compile(r"!medium\b", re.I), 2),
    (re.compile(r"!low\b", re.I), 1),
    (re.compile(r"(?<!!)!(?!!)"), 1),
]


def extract_priority(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    text = parsed.remaining
    for pattern, level in PRIORITY_PATTERNS:
        m = pattern.search(text)
        if m:
            logger.debug("priority %r -> %d", m.group(0), level)
            return parsed.consume(m.span(), priority=level)
    return parsed
