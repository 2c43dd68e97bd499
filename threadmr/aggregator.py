"""
Shared intermediate map written concurrently by map tasks.
"""

import threading
from typing import Dict, Iterable, Iterator, List, Tuple


class AggregatorSealedError(RuntimeError):
    """Raised on a write after sealing or a read before sealing"""


class SharedAggregator:
    """
    Maps each word to the list of partial counts merged for it.

    Every merge runs under the aggregator's own lock. Once the map phase
    barrier is crossed the owner calls seal(); from then on the map is read
    only and may be read without locking.
    """

    def __init__(self):
        self._intermediate: Dict[str, List[int]] = {}
        self._lock = threading.Lock()
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def merge(self, token: str, value: int = 1):
        """Append value to the list for token, creating the list if absent."""
        with self._lock:
            if self._sealed:
                raise AggregatorSealedError("Cannot merge into a sealed aggregator")
            self._intermediate.setdefault(token, []).append(value)

    def merge_all(self, pairs: Iterable[Tuple[str, int]]):
        """Merge each (token, value) pair, locking once per pair."""
        for token, value in pairs:
            self.merge(token, value)

    def seal(self):
        """Mark the map phase as finished."""
        with self._lock:
            self._sealed = True

    def _check_readable(self):
        if not self._sealed:
            raise AggregatorSealedError("Aggregator must be sealed before it is read")

    def items(self) -> Iterator[Tuple[str, List[int]]]:
        """Iterate (token, values) pairs in sorted token order."""
        self._check_readable()
        return iter(sorted(self._intermediate.items()))

    def snapshot(self) -> Dict[str, List[int]]:
        """Copy of the intermediate map."""
        self._check_readable()
        return {token: list(values) for token, values in self._intermediate.items()}

    def total_values(self) -> int:
        """Number of values appended across all tokens."""
        self._check_readable()
        return sum(len(values) for values in self._intermediate.values())

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        self._check_readable()
        return len(self._intermediate)
