from __future__ import annotations

from collections import Counter
from typing import Iterable

from lexispell.text.normalize import tokens


class FrequencyModel:
    """Occurrence counts of normalized tokens seen in training text."""

    def __init__(self) -> None:
        self.counts: Counter[str] = Counter()

    def observe(self, text: str) -> None:
        for tok in tokens(text):
            self.counts[tok] += 1

    def observe_all(self, lines: Iterable[str]) -> int:
        n = 0
        for line in lines:
            self.observe(line)
            n += 1
        return n

    def frequency_of(self, token: str) -> int | None:
        # never stores zero, so None means "never observed"
        return self.counts.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    @property
    def total(self) -> int:
        return sum(self.counts.values())
