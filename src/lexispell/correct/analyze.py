from __future__ import annotations

import re

from lexispell.correct.suggest import SuggestionEngine
from lexispell.lexicon.buckets import Lexicon
from lexispell.text.normalize import normalize


# Leading-prefix integer parse: "42", "+7", "3rd" and "0x1f" count as numbers.
_NUMERIC_PREFIX_RE = re.compile(r"^[+-]?(?:0[xX][0-9a-fA-F]|(?!0[xX])[0-9])")


def looks_numeric(token: str) -> bool:
    return _NUMERIC_PREFIX_RE.match(token) is not None


class Analyzer:
    def __init__(self, lexicon: Lexicon, engine: SuggestionEngine):
        self.lexicon = lexicon
        self.engine = engine

    def analyze(self, sentence: str) -> dict[str, list[str]]:
        """Map every unrecognized, non-numeric token to its suggestions."""
        analysis: dict[str, list[str]] = {}
        for tok in normalize(sentence):
            if not tok or self.lexicon.exists(tok) or looks_numeric(tok):
                continue
            analysis[tok] = self.engine.suggest(tok)
        return analysis
