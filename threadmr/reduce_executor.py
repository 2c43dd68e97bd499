#!/usr/bin/env python3
"""
Reduce Task Executor
Collapses each word's list of partial counts into its final total
"""

import time
import logging
from typing import Dict, Iterable

from threadmr.aggregator import SharedAggregator

logger = logging.getLogger(__name__)


def reduce_function(values: Iterable[int]) -> int:
    """Sum all counts for a word. An empty list sums to 0."""
    return sum(values)


class ReduceExecutor:
    """Executes the reduce phase over a sealed aggregator"""

    def __init__(self, aggregator: SharedAggregator):
        """
        Initialize the reduce executor

        Args:
            aggregator: Aggregator whose map phase has completed
        """
        self.aggregator = aggregator

    def execute(self) -> Dict[str, int]:
        """
        Execute the reduce phase

        Returns:
            Dictionary mapping word to total count, in sorted key order

        Raises:
            AggregatorSealedError: If the aggregator has not been sealed
        """
        start_time = time.time()

        final_result = {}
        for token, values in self.aggregator.items():  # Sorted for deterministic output
            final_result[token] = reduce_function(values)

        execution_time = int((time.time() - start_time) * 1000)
        logger.debug(f"Reduce phase: {len(final_result)} keys in {execution_time}ms")
        return final_result
