from __future__ import annotations

import re


_HYPHEN_RE = re.compile(r"-")
_PUNCT_RE = re.compile(r"[.,\-/#?!$%^'\"&*;:{}=_`~()]")
_SPACE_RE = re.compile(r"\s+")
_EOL_RE = re.compile(r"[\r\n]")


def normalize(text: str) -> list[str]:
    """Turn raw text into lower-cased tokens.

    Hyphens become spaces, the rest of the punctuation set is dropped
    without replacement, then the text is split on runs of whitespace.
    Leading/trailing whitespace yields empty tokens, so callers filter.
    """
    text = _HYPHEN_RE.sub(" ", text)
    text = _PUNCT_RE.sub("", text)
    return _SPACE_RE.split(text.lower())


def tokens(text: str) -> list[str]:
    return [t for t in normalize(text) if t]


def strip_eol(word: str) -> str:
    return _EOL_RE.sub("", word)
