"""
Pytest configuration and shared fixtures
"""

import pytest

from threadmr.aggregator import SharedAggregator


@pytest.fixture
def aggregator():
    """Fresh, unsealed aggregator"""
    return SharedAggregator()


@pytest.fixture
def sample_records():
    """Sample records for testing"""
    return [
        "The quick brown fox jumps over the lazy dog.",
        "The dog was really lazy.",
        "The fox was very quick and brown.",
        "Quick brown foxes are amazing animals.",
        "Lazy dogs sleep all day."
    ]


@pytest.fixture
def stress_records():
    """Many records that all map onto a handful of keys"""
    return ["alpha beta gamma alpha", "beta, BETA! delta", "gamma alpha."] * 2000


@pytest.fixture(autouse=True)
def clean_mapreduce_env(monkeypatch):
    """Keep MAPREDUCE_* settings from the developer's shell out of tests"""
    monkeypatch.delenv('MAPREDUCE_NUM_WORKERS', raising=False)
    monkeypatch.delenv('MAPREDUCE_DROP_EMPTY', raising=False)
