import os
import re
from dotenv import load_dotenv
from pathlib import Path
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent
DATA_DIR = os.environ.get("BKSPELL_DATA_DIR", str(BASE_DIR / "data"))
WORD_SOURCE = os.environ.get("BKSPELL_WORD_SOURCE", "nltk")
LOG_LEVEL = os.environ.get("BKSPELL_LOG_LEVEL", "INFO")

DEFAULT_DICTIONARY_SIZE = int(os.environ.get("BKSPELL_DICTIONARY_SIZE", 10000))
DEFAULT_MAX_EDIT_DISTANCE = float(os.environ.get("BKSPELL_MAX_EDIT_DISTANCE", 2))
DEFAULT_CACHE_SIZE = int(os.environ.get("BKSPELL_CACHE_SIZE", 1000))
DEFAULT_METRIC = os.environ.get("BKSPELL_METRIC", "sift3")

# Scored at 1.2x the top ranked word, overriding their rank
TECHNICAL_TERMS = [
    "javascript", "algorithm", "function", "variable", "console", "terminal",
    "autocorrect", "suggestion", "correction", "dictionary", "search", "fuzzy",
    "distance", "cache", "performance", "optimization", "implementation",
    "architecture", "efficient", "structure", "application", "system",
    "interface", "experience", "machine", "learning", "programming",
    "development", "software", "computer", "debugging", "testing", "hello",
]


WORD_RE = re.compile(r"[a-z]{2,}")


class EngineConfig(BaseModel):
    model_config = ConfigDict(validate_default=True)

    dictionary_size: int = Field(DEFAULT_DICTIONARY_SIZE, ge=1, description="Ranked words to ingest")
    max_edit_distance: float = Field(DEFAULT_MAX_EDIT_DISTANCE, ge=0, description="BK-tree search radius")
    cache_size: int = Field(DEFAULT_CACHE_SIZE, ge=0, description="Result cache capacity (0 disables)")
    metric: Literal["sift3", "levenshtein"] = DEFAULT_METRIC
    boost_terms: List[str] = Field(default_factory=lambda: list(TECHNICAL_TERMS))

    @field_validator("boost_terms")
    @classmethod
    def lowercase_words_only(cls, terms: List[str]) -> List[str]:
        normalized = [t.strip().lower() for t in terms]
        bad = [t for t in normalized if not WORD_RE.fullmatch(t)]
        if bad:
            raise ValueError(f"boost terms must be letters a-z, at least 2 long: {bad}")
        return normalized
