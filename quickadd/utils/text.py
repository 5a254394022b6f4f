import re
from collections.abc import Iterable

_WORD_RE = re.compile(r"[^a-z0-9]+", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")

Span = tuple[int, int]


def normalize(text: str) -> str:
    return _WORD_RE.sub(" ", text.lower()).strip()


def tokenize(text: str) -> list[str]:
    return [t for t in normalize(text).split() if t]


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def mask(text: str, spans: Iterable[Span]) -> str:
    """Blank out spans with spaces, keeping every other offset where it was."""
    chars = list(text)
    for start, end in spans:
        chars[start:end] = " " * (end - start)
    return "".join(chars)


def excise(text: str, spans: Iterable[Span]) -> str:
    """Drop the spans from text, in position order."""
    out: list[str] = []
    pos = 0
    for start, end in sorted(spans):
        if start > pos:
            out.append(text[pos:start])
        pos = max(pos, end)
    out.append(text[pos:])
    return "".join(out)
