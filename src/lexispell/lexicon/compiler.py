from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from lexispell.io.sources import read_lines
from lexispell.lexicon.buckets import Lexicon
from lexispell.text.normalize import strip_eol


logger = logging.getLogger(__name__)


def compile_index(words: Iterable[str]) -> dict[int, list[str]]:
    """Group raw words by length; each bucket deduped and sorted."""
    grouped: dict[int, set[str]] = {}
    for raw in words:
        word = strip_eol(raw)
        if not word:
            continue
        grouped.setdefault(len(word), set()).add(word)
    return {n: sorted(grouped[n]) for n in sorted(grouped)}


def write_index(index: dict[int, list[str]], path: Path) -> None:
    """Write one `<length>\\t<concatenated words>` line per bucket."""
    lines = [f"{n}\t{''.join(index[n])}" for n in sorted(index) if index[n]]
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    logger.info("Wrote %d buckets to %s", len(lines), path)


def parse_index_line(line: str, lineno: int = 0) -> tuple[int, list[str]]:
    head, sep, payload = line.partition("\t")
    if not sep:
        raise ValueError(f"Index line {lineno}: missing tab separator")
    try:
        n = int(head)
    except ValueError:
        raise ValueError(f"Index line {lineno}: bad word length {head!r}") from None
    if n <= 0 or len(payload) % n:
        raise ValueError(f"Index line {lineno}: payload of {len(payload)} chars does not split into words of {n}")
    return n, [payload[i : i + n] for i in range(0, len(payload), n)]


def read_index(path: str | Path) -> dict[int, list[str]]:
    index: dict[int, list[str]] = {}
    for lineno, line in enumerate(read_lines(path), start=1):
        if not line:
            continue
        n, words = parse_index_line(line, lineno)
        index.setdefault(n, []).extend(words)
    return index


def load_index(lexicon: Lexicon, index: dict[int, list[str]]) -> int:
    return sum(lexicon.load_bucket(n, words) for n, words in index.items())
