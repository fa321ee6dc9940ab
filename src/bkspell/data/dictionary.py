from typing import Dict, ItemsView, Iterable, Optional

from ..config import WORD_RE
from ..logger import get_logger

logger = get_logger("data.dictionary")

BOOST_FACTOR = 1.2


class Dictionary:
    """
    Word -> frequency score, built once from a ranked word source.

    The word at rank i of N scores N - i. Boost terms are then set to
    1.2 * N, overriding whatever rank they had. max_frequency is N, the
    number of words the source returned.
    """

    def __init__(self, scores: Optional[Dict[str, float]] = None, max_frequency: float = 0):
        self.scores: Dict[str, float] = dict(scores or {})
        self.max_frequency = max_frequency

    @classmethod
    def from_source(cls, source, size: int, boost_terms: Iterable[str] = ()) -> "Dictionary":
        try:
            popular = list(source.most_popular(size))
        except Exception as e:
            logger.error(f"❌ Error loading dictionary: {e}")
            return cls()

        max_frequency = len(popular)
        scores: Dict[str, float] = {}
        for index, word in enumerate(popular):
            if WORD_RE.fullmatch(word):
                scores[word] = max_frequency - index

        boost = max_frequency * BOOST_FACTOR
        for term in boost_terms:
            term = term.strip().lower()
            if WORD_RE.fullmatch(term):
                scores[term] = boost

        logger.info(f"📚 Dictionary loaded with {len(scores)} words")
        return cls(scores, max_frequency)

    def __contains__(self, word: str) -> bool:
        return word in self.scores

    def __len__(self) -> int:
        return len(self.scores)

    def get(self, word: str, default: float = 0.0) -> float:
        return self.scores.get(word, default)

    def items(self) -> ItemsView[str, float]:
        return self.scores.items()
