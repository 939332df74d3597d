from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from lexispell.lexicon.buckets import Lexicon
from lexispell.model.frequency import FrequencyModel


ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def edits1(word: str, letters: str = ALPHABET) -> Iterator[str]:
    """All strings one edit away from `word`, in generation order.

    Deletes, then transposes, then replaces, then inserts; positions
    ascend and letters follow alphabet order. Duplicates are kept.
    """
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    for L, R in splits:
        if R:
            yield L + R[1:]
    for L, R in splits:
        if len(R) > 1:
            yield L + R[1] + R[0] + R[2:]
    for L, R in splits:
        if R:
            for c in letters:
                yield L + c + R[1:]
    for L, R in splits:
        for c in letters:
            yield L + c + R


@dataclass(frozen=True)
class Candidate:
    term: str
    frequency: int


class SuggestionEngine:
    """Norvig-style corrector restricted to edit distance 1.

    A candidate survives only if it was observed in training and is in
    the lexicon; survivors are ranked by observed frequency.
    """

    def __init__(self, lexicon: Lexicon, model: FrequencyModel, letters: str = ALPHABET):
        self.lexicon = lexicon
        self.model = model
        self.letters = letters

    def candidates(self, word: str) -> list[Candidate]:
        out: list[Candidate] = []
        seen: set[str] = set()
        for cand in edits1(word, self.letters):
            if cand == word or cand in seen:
                continue
            freq = self.model.frequency_of(cand)
            if not freq or not self.lexicon.exists(cand):
                continue
            seen.add(cand)
            out.append(Candidate(term=cand, frequency=freq))
        return out

    def suggest(self, word: str) -> list[str]:
        if self.lexicon.exists(word):
            return []
        # sorted() is stable: ties keep generation order
        ranked = sorted(self.candidates(word), key=lambda c: -c.frequency)
        return [c.term for c in ranked]
