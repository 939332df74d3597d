from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from lexispell.correct.analyze import Analyzer
from lexispell.correct.suggest import SuggestionEngine
from lexispell.io.sources import read_lines, read_words
from lexispell.lexicon.buckets import Lexicon
from lexispell.lexicon.compiler import load_index, read_index
from lexispell.model.frequency import FrequencyModel
from lexispell.text.normalize import tokens


logger = logging.getLogger(__name__)


def _require_str(item: object, what: str) -> str:
    if not isinstance(item, str):
        raise TypeError(f"{what} must be str, got {type(item).__name__}")
    return item


class SpellChecker:
    """Spelling recognizer and edit-distance-1 corrector.

    Every instance owns its own lexicon and frequency model. Populate it
    with one of the `initialize_*` methods before querying; queries made
    during initialization see a partial lexicon.
    """

    def __init__(self) -> None:
        self.lexicon = Lexicon()
        self.model = FrequencyModel()
        self.engine = SuggestionEngine(self.lexicon, self.model)
        self.analyzer = Analyzer(self.lexicon, self.engine)

    def add_word(self, word: str) -> bool:
        return self.lexicon.insert(word)

    def train(self, text: str) -> None:
        self.model.observe(text)

    def create_index(self, text: str) -> int:
        """Add every distinct token of `text` to the lexicon without training on it."""
        added = 0
        for tok in dict.fromkeys(tokens(text)):
            if self.add_word(tok):
                added += 1
        return added

    def initialize_with(self, seed_words: Iterable[str], training_texts: Iterable[str] = ()) -> "SpellChecker":
        # validate everything first so a bad item leaves the instance untouched
        seed_words = [_require_str(w, "Seed word") for w in seed_words]
        training_texts = [_require_str(t, "Training text") for t in training_texts]
        for word in seed_words:
            self.add_word(word)
            self.train(word)
        for text in training_texts:
            self.train(text)
        logger.info("Initialized spell checker: %s", self.stats())
        return self

    def initialize_from_files(self, seed_path: str | Path, training_path: str | Path | None = None) -> "SpellChecker":
        training = read_lines(training_path) if training_path is not None else ()
        return self.initialize_with(read_words(seed_path), training)

    def initialize_from_index(self, index_path: str | Path, training_path: str | Path | None = None) -> "SpellChecker":
        loaded = load_index(self.lexicon, read_index(index_path))
        logger.debug("Loaded %d indexed words from %s", loaded, index_path)
        for word in self.lexicon.words():
            self.train(word)
        training = read_lines(training_path) if training_path is not None else ()
        return self.initialize_with((), training)

    def exists(self, word: str) -> bool:
        return self.lexicon.exists(word)

    def suggest(self, word: str) -> list[str]:
        return self.engine.suggest(word)

    def analyze(self, sentence: str) -> dict[str, list[str]]:
        return self.analyzer.analyze(sentence)

    def stats(self) -> dict[str, int]:
        return {
            "words": len(self.lexicon),
            "buckets": len(self.lexicon.lengths()),
            "tokens": len(self.model),
            "observations": self.model.total,
        }
