from __future__ import annotations

import bisect
import logging
from typing import Iterable, Iterator

from lexispell.text.normalize import strip_eol


logger = logging.getLogger(__name__)


class Lexicon:
    """Recognized words, bucketed by length.

    Each bucket is a sorted list of distinct words that all have the
    bucket's length. Lookups binary-search the bucket by index.
    """

    def __init__(self) -> None:
        self._buckets: dict[int, list[str]] = {}

    def insert(self, word: str) -> bool:
        word = strip_eol(word)
        if not word:
            return False
        bucket = self._buckets.get(len(word))
        if bucket is None:
            self._buckets[len(word)] = [word]
            return True
        if self.exists(word):
            return False
        bisect.insort(bucket, word)
        return True

    def load_bucket(self, length: int, words: Iterable[str]) -> int:
        """Merge `words` into the bucket for `length`; the result is deduped and sorted."""
        if length <= 0:
            raise ValueError(f"Bucket length must be positive, got {length}")
        merged = set(self._buckets.get(length, ()))
        for w in words:
            if len(w) != length:
                raise ValueError(f"Word {w!r} does not belong in bucket {length}")
            merged.add(w)
        self._buckets[length] = sorted(merged)
        logger.debug("Loaded bucket %d with %d words", length, len(merged))
        return len(merged)

    def exists(self, word: str) -> bool:
        size = len(word)
        if size == 0:
            return False
        bucket = self._buckets.get(size)
        if not bucket:
            return False
        low, high = 0, len(bucket) - 1
        while low <= high:
            mid = (low + high) // 2
            found = bucket[mid]
            if word == found:
                return True
            if word < found:
                high = mid - 1
            else:
                low = mid + 1
        return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exists(word)

    def __len__(self) -> int:
        return sum(len(b) for b in self._buckets.values())

    def lengths(self) -> list[int]:
        return sorted(self._buckets)

    def bucket(self, length: int) -> tuple[str, ...]:
        return tuple(self._buckets.get(length, ()))

    def words(self) -> Iterator[str]:
        for length in self.lengths():
            yield from self._buckets[length]
