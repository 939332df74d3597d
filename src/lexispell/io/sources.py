from __future__ import annotations

from pathlib import Path
from typing import Iterator

from lexispell.text.normalize import strip_eol


def read_lines(path: str | Path) -> Iterator[str]:
    """Yield each line of a UTF-8 text file without its line ending."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"No such text source: {p}")
    with open(p, "r", encoding="utf-8", newline="") as f:
        for line in f:
            yield strip_eol(line)


def read_words(path: str | Path) -> Iterator[str]:
    for line in read_lines(path):
        word = line.strip()
        if word:
            yield word
