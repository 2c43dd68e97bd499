"""
Unit tests for SharedAggregator
"""

import threading

import pytest

from threadmr.aggregator import AggregatorSealedError, SharedAggregator


class TestMerge:
    """Tests for merging partial counts"""

    def test_creates_key_on_first_merge(self, aggregator):
        aggregator.merge("word", 1)
        aggregator.seal()
        assert aggregator.snapshot() == {"word": [1]}

    def test_appends_to_existing_key(self, aggregator):
        aggregator.merge("word")
        aggregator.merge("word", 3)
        aggregator.seal()
        assert aggregator.snapshot() == {"word": [1, 3]}

    def test_merge_all(self, aggregator):
        aggregator.merge_all([("a", 1), ("b", 1), ("a", 1)])
        aggregator.seal()
        assert aggregator.snapshot() == {"a": [1, 1], "b": [1]}
        assert aggregator.total_values() == 3

    def test_concurrent_merges_lose_nothing(self, aggregator):
        """Many threads hammering the same keys keep every value"""
        num_threads = 8
        merges_per_thread = 5000
        start = threading.Barrier(num_threads)

        def worker():
            start.wait()
            for i in range(merges_per_thread):
                aggregator.merge("hot" if i % 2 else "cold", 1)

        threads = [threading.Thread(target=worker) for _ in range(num_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        aggregator.seal()
        snapshot = aggregator.snapshot()
        assert len(snapshot["hot"]) == num_threads * merges_per_thread // 2
        assert len(snapshot["cold"]) == num_threads * merges_per_thread // 2
        assert aggregator.total_values() == num_threads * merges_per_thread

    def test_independent_aggregators_do_not_share_state(self):
        first = SharedAggregator()
        second = SharedAggregator()
        first.merge("a")
        first.seal()
        second.seal()
        assert first.snapshot() == {"a": [1]}
        assert second.snapshot() == {}


class TestSealing:
    """Tests for the map phase barrier discipline"""

    def test_read_before_seal_raises(self, aggregator):
        aggregator.merge("a")
        with pytest.raises(AggregatorSealedError):
            aggregator.snapshot()
        with pytest.raises(AggregatorSealedError):
            list(aggregator.items())
        with pytest.raises(AggregatorSealedError):
            len(aggregator)

    def test_merge_after_seal_raises(self, aggregator):
        aggregator.seal()
        with pytest.raises(AggregatorSealedError):
            aggregator.merge("a")

    def test_items_sorted_by_token(self, aggregator):
        aggregator.merge_all([("pear", 1), ("apple", 1), ("", 1)])
        aggregator.seal()
        assert [token for token, _ in aggregator.items()] == ["", "apple", "pear"]

    def test_snapshot_is_a_copy(self, aggregator):
        aggregator.merge("a")
        aggregator.seal()
        snapshot = aggregator.snapshot()
        snapshot["a"].append(99)
        assert aggregator.snapshot() == {"a": [1]}

    def test_truthiness_does_not_require_seal(self, aggregator):
        assert aggregator
        aggregator.merge("a")
        assert aggregator or None
        aggregator.seal()
        assert len(aggregator) == 1
