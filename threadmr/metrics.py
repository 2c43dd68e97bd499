"""
Performance metrics collection for word count jobs.
"""

import time
from dataclasses import dataclass, asdict


@dataclass
class JobMetrics:
    """Metrics for a single job execution."""

    job_id: str
    num_workers: int
    num_records: int
    start_time: float = 0.0
    end_time: float = 0.0
    map_phase_start: float = 0.0
    map_phase_end: float = 0.0
    reduce_phase_start: float = 0.0
    reduce_phase_end: float = 0.0
    pairs_emitted: int = 0
    unique_keys: int = 0

    @property
    def total_time_seconds(self) -> float:
        """Total job execution time in seconds."""
        return self.end_time - self.start_time

    @property
    def map_phase_time_seconds(self) -> float:
        """Map phase execution time in seconds."""
        return self.map_phase_end - self.map_phase_start

    @property
    def reduce_phase_time_seconds(self) -> float:
        """Reduce phase execution time in seconds."""
        return self.reduce_phase_end - self.reduce_phase_start

    def start_map_phase(self):
        self.start_time = self.map_phase_start = time.time()

    def end_map_phase(self, pairs_emitted: int):
        self.map_phase_end = time.time()
        self.pairs_emitted = pairs_emitted

    def start_reduce_phase(self):
        self.reduce_phase_start = time.time()

    def end_job(self, unique_keys: int):
        self.reduce_phase_end = self.end_time = time.time()
        self.unique_keys = unique_keys

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return asdict(self)
