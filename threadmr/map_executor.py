#!/usr/bin/env python3
"""
Map Task Executor
Executes map tasks by tokenizing a contiguous range of input records and
merging the partial counts into the shared aggregator
"""

import time
import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from threadmr.aggregator import SharedAggregator
from threadmr.tokenizer import tokenize

logger = logging.getLogger(__name__)


def map_function(record: str, drop_empty: bool = False) -> List[Tuple[str, int]]:
    """
    Map function: emit (word, 1) for each word in the record.

    Args:
        record: Text record
        drop_empty: Skip words that are pure punctuation

    Returns:
        List of (word, 1) tuples, one per occurrence
    """
    return [(token, 1) for token in tokenize(record, drop_empty=drop_empty)]


@dataclass
class MapTaskResult:
    """Outcome of a single map task"""
    task_id: int
    records_processed: int
    pairs_emitted: int
    execution_time_ms: int


class MapExecutor:
    """Executes a single map task"""

    def __init__(self, task_id: int, records: Sequence[str], start: int,
                 end: int, aggregator: SharedAggregator,
                 drop_empty: bool = False):
        """
        Initialize the map executor

        Args:
            task_id: Unique ID for this map task
            records: Full input record collection (read only)
            start: Index of the first record this task processes
            end: Index one past the last record this task processes
            aggregator: Shared aggregator that receives partial counts
            drop_empty: Skip words that are pure punctuation
        """
        self.task_id = task_id
        self.records = records
        self.start = start
        self.end = end
        self.aggregator = aggregator
        self.drop_empty = drop_empty

    def execute(self) -> MapTaskResult:
        """
        Execute the map task

        Returns:
            MapTaskResult with the number of records and pairs handled

        Raises:
            Any exception raised while mapping or merging, after logging it
        """
        start_time = time.time()
        logger.debug(f"Map task {self.task_id}: processing records [{self.start}, {self.end})")

        pairs_emitted = 0
        try:
            for index in range(self.start, self.end):
                record = self.records[index]
                if not isinstance(record, str):
                    # Malformed records count as zero tokens
                    logger.warning(f"Map task {self.task_id}: skipping non-text record "
                                   f"at index {index} ({type(record).__name__})")
                    continue
                pairs = map_function(record, drop_empty=self.drop_empty)
                self.aggregator.merge_all(pairs)
                pairs_emitted += len(pairs)
        except Exception as e:
            logger.error(f"Map task {self.task_id} failed: {e}")
            raise

        execution_time = int((time.time() - start_time) * 1000)
        logger.debug(f"Map task {self.task_id}: emitted {pairs_emitted} pairs in {execution_time}ms")

        return MapTaskResult(
            task_id=self.task_id,
            records_processed=self.end - self.start,
            pairs_emitted=pairs_emitted,
            execution_time_ms=execution_time
        )
