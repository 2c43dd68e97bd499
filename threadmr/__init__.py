"""
threadmr: in-process parallel map-reduce word counting.
"""

from threadmr.aggregator import AggregatorSealedError, SharedAggregator
from threadmr.config import JobConfig, resolve_num_workers
from threadmr.job_manager import (
    JobManager,
    JobStatus,
    MapPhaseError,
    count_words,
    partition_ranges,
)
from threadmr.map_executor import map_function
from threadmr.reduce_executor import reduce_function
from threadmr.tokenizer import tokenize

__version__ = '0.1.0'

__all__ = [
    'AggregatorSealedError',
    'JobConfig',
    'JobManager',
    'JobStatus',
    'MapPhaseError',
    'SharedAggregator',
    'count_words',
    'map_function',
    'partition_ranges',
    'reduce_function',
    'resolve_num_workers',
    'tokenize',
]
