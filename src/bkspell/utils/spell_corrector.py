# spell_corrector.py
from typing import List, Optional, Tuple

from ..retrieval.engine import CorrectionEngine


class SpellCorrector:
    def __init__(self, engine: CorrectionEngine):
        """
        engine: a built CorrectionEngine; every token is looked up on its own.
        """
        self.engine = engine

    def _best(self, word: str, min_confidence: float) -> Optional[str]:
        corrections = self.engine.get_corrections(word)
        if not corrections:
            return None
        top = corrections[0]
        # distance 0 means the token is already a dictionary word
        if top.distance > 0 and top.confidence >= min_confidence:
            return top.word
        return None

    def correct_word(self, word: str, min_confidence: float = 0.0) -> str:
        if not word:
            return word
        return self._best(word, min_confidence) or word

    def suggest(self, text: str, min_confidence: float = 0.0) -> List[Tuple[str, Optional[str]]]:
        """(token, replacement or None) for each whitespace-separated token."""
        if not text:
            return []
        return [(w, self._best(w, min_confidence)) for w in str(text).split()]

    def correct_query(self, text: str, min_confidence: float = 0.0) -> str:
        if not text:
            return text
        return " ".join(fix or word for word, fix in self.suggest(text, min_confidence))
