import pytest

from bkspell.config import EngineConfig
from bkspell.data.loader import StaticWordSource
from bkspell.retrieval.engine import CorrectionEngine


@pytest.fixture
def make_engine():
    def _make(words=("help", "world"), boost_terms=("hello",), listeners=(), **options):
        config = EngineConfig(boost_terms=list(boost_terms), **options)
        return CorrectionEngine(config, word_source=StaticWordSource(list(words)), listeners=listeners)
    return _make


@pytest.fixture
def engine(make_engine):
    # help=2, world=1, hello boosted to 2.4; tree: help -> {1.5: hello, 4.5: world}
    return make_engine(cache_size=3)
