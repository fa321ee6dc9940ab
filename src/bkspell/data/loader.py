"""
Ranked word sources for the dictionary.

Every source answers most_popular(n) with up to n words, most frequent first.
"""
from pathlib import Path
from typing import List, Optional

import nltk
import pandas as pd

from ..config import DATA_DIR
from ..logger import get_logger

logger = get_logger("data.loader")


class StaticWordSource:
    """In-memory ranked list."""

    def __init__(self, words: List[str]):
        self.words = list(words)

    def most_popular(self, n: int) -> List[str]:
        return self.words[:n]


class FileWordSource:
    """
    Ranked words from a local file.

    .txt  one word per line, most frequent first
    .csv  a `word` column; sorted by `count` descending when that column exists
    """

    def __init__(self, path):
        self.path = Path(path)

    def most_popular(self, n: Optional[int] = None) -> List[str]:
        if not self.path.exists():
            raise FileNotFoundError(f"Word list not found: {self.path}")

        if self.path.suffix == ".csv":
            df = pd.read_csv(self.path)
            if "word" not in df.columns:
                raise ValueError(f"{self.path} has no 'word' column")
            if "count" in df.columns:
                df = df.sort_values("count", ascending=False, kind="stable")
            words = df["word"].dropna().astype(str).str.strip().tolist()
        else:
            with open(self.path, "r", encoding="utf-8") as f:
                words = [line.strip() for line in f if line.strip()]
        return words[:n]


class NltkWordSource:
    """Words of an NLTK corpus ranked by frequency (lowercased, alphabetic only)."""

    def __init__(self, corpus: str = "brown"):
        self.corpus = corpus

    def _ensure_corpus(self):
        try:
            nltk.data.find(f"corpora/{self.corpus}")
        except LookupError:
            logger.info(f"Downloading NLTK corpus '{self.corpus}'")
            nltk.download(self.corpus, quiet=True)

    def most_popular(self, n: int) -> List[str]:
        self._ensure_corpus()
        reader = getattr(nltk.corpus, self.corpus)
        counts = nltk.FreqDist(w.lower() for w in reader.words() if w.isalpha())
        return [w for w, _ in counts.most_common(n)]


def build_word_source(spec: Optional[str] = None):
    """`None` or "nltk" selects the Brown corpus; anything else is a file path."""
    if not spec or spec == "nltk":
        return NltkWordSource()
    return FileWordSource(spec)


def load_word_list(filename="words.txt") -> List[str]:
    """Read a ranked word file from DATA_DIR; empty list when missing."""
    p = Path(DATA_DIR) / filename
    if not p.exists():
        logger.warning(f"Word list not found at {p}")
        return []
    words = FileWordSource(p).most_popular()
    logger.info(f"Loaded {len(words)} words from {p}")
    return words
