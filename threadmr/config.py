"""
Job configuration for threadmr.
"""

import os
from dataclasses import dataclass
from typing import Optional

import psutil

NUM_WORKERS_ENV = 'MAPREDUCE_NUM_WORKERS'
DROP_EMPTY_ENV = 'MAPREDUCE_DROP_EMPTY'

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def hardware_parallelism() -> Optional[int]:
    """Number of logical CPUs, or None when it cannot be determined."""
    return psutil.cpu_count(logical=True)


def resolve_num_workers(requested: Optional[int] = None) -> int:
    """
    Decide how many map workers to start.

    Args:
        requested: Explicit worker count, or None to use hardware parallelism

    Returns:
        Worker count, never less than 1
    """
    num_workers = hardware_parallelism() if requested is None else requested
    return max(1, num_workers or 0)


@dataclass
class JobConfig:
    """Settings for a word count job"""
    num_workers: Optional[int] = None
    drop_empty_tokens: bool = False

    @classmethod
    def from_env(cls) -> 'JobConfig':
        """Build a config from MAPREDUCE_* environment variables."""
        num_workers = os.getenv(NUM_WORKERS_ENV)
        drop_empty = os.getenv(DROP_EMPTY_ENV, '')
        return cls(
            num_workers=int(num_workers) if num_workers else None,
            drop_empty_tokens=drop_empty.strip().lower() in _TRUE_VALUES
        )
