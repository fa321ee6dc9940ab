# src/bkspell/retrieval/engine.py
"""
CorrectionEngine
- Loads the frequency dictionary from a ranked word source
- Builds the BK-tree once, read-only afterwards
- Ranks candidates by a blend of frequency and distance
- FIFO result cache for misspelled queries
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..config import WORD_SOURCE, EngineConfig
from ..data.dictionary import Dictionary
from ..data.loader import build_word_source
from ..logger import get_logger
from ..utils.distance import get_metric
from .bk_tree import BKTree, Candidate
from .cache import ResultCache

logger = get_logger("retrieval.engine")

MAX_SUGGESTIONS = 5
FREQUENCY_WEIGHT = 0.7
DISTANCE_WEIGHT = 0.3


@dataclass(frozen=True)
class Suggestion:
    word: str
    distance: float
    confidence: float


@dataclass(frozen=True)
class InitReport:
    word_count: int
    node_count: int


@dataclass(frozen=True)
class EngineStats:
    dictionary_size: int
    node_count: int
    max_edit_distance: float
    cache_size: int
    cache_capacity: int


class EngineListener:
    """Construction callbacks. Subclass and override what you need."""

    def on_dictionary_loaded(self, word_count: int) -> None:
        pass

    def on_bk_tree_built(self, node_count: int) -> None:
        pass


class CorrectionEngine:
    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        word_source=None,
        listeners: Iterable[EngineListener] = (),
    ):
        """
        Args:
            config: engine options, defaults come from the environment
            word_source: anything with most_popular(n); defaults to BKSPELL_WORD_SOURCE
            listeners: notified once each of dictionary load and tree build
        """
        self.config = config or EngineConfig()
        self.listeners = list(listeners)
        self.word_source = word_source if word_source is not None else build_word_source(WORD_SOURCE)

        # ---------- Dictionary ----------
        self.dictionary = Dictionary.from_source(
            self.word_source, self.config.dictionary_size, self.config.boost_terms
        )
        self._notify("on_dictionary_loaded", len(self.dictionary))

        # ---------- BK-tree ----------
        self.bk_tree = BKTree.build(self.dictionary.items(), get_metric(self.config.metric))
        if len(self.dictionary):
            logger.info(f"🌳 BK-tree built with {len(self.bk_tree)} nodes")
        self._notify("on_bk_tree_built", len(self.bk_tree))

        self.cache: ResultCache[Suggestion] = ResultCache(self.config.cache_size)
        self.report = InitReport(word_count=len(self.dictionary), node_count=len(self.bk_tree))

    def _notify(self, event: str, count: int) -> None:
        for listener in self.listeners:
            try:
                getattr(listener, event)(count)
            except Exception as e:
                logger.error(f"Listener {listener!r} failed on {event}: {e}")

    # ---------- Ranking ----------
    def _confidence(self, query: str, candidate: Candidate) -> float:
        max_freq = self.dictionary.max_frequency
        freq_score = math.log1p(candidate.frequency) / math.log1p(max_freq) if max_freq > 0 else 0.0
        # unclamped: negative when the distance exceeds the longer word's length
        dist_score = 1 - candidate.distance / max(len(query), len(candidate.word))
        return FREQUENCY_WEIGHT * freq_score + DISTANCE_WEIGHT * dist_score

    def rank(self, query: str, candidates: List[Candidate]) -> List[Suggestion]:
        scored = [
            Suggestion(c.word, c.distance, self._confidence(query, c))
            for c in candidates
        ]
        scored.sort(key=lambda s: s.confidence, reverse=True)
        return scored[:MAX_SUGGESTIONS]

    # ---------- Public query ----------
    def get_corrections(self, word: str) -> List[Suggestion]:
        lower = word.lower()

        cached = self.cache.get(lower)
        if cached is not None:
            logger.debug(f"Cache hit for '{lower}'")
            return cached

        if lower in self.dictionary:
            return [Suggestion(word, 0.0, 1.0)]

        candidates = self.bk_tree.search(lower, self.config.max_edit_distance)
        ranked = self.rank(lower, candidates)
        self.cache.put(lower, ranked)
        return ranked

    def check(self, word: str) -> List[Dict[str, Any]]:
        """get_corrections as plain dicts, for display."""
        return [asdict(s) for s in self.get_corrections(word)]

    def stats(self) -> EngineStats:
        return EngineStats(
            dictionary_size=len(self.dictionary),
            node_count=len(self.bk_tree),
            max_edit_distance=self.config.max_edit_distance,
            cache_size=len(self.cache),
            cache_capacity=self.cache.capacity,
        )
