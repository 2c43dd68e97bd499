#!/usr/bin/env python3
"""
Job Manager for threadmr
Handles partitioning of input records, fork-join dispatch of map tasks,
the map phase barrier and the reduce phase
"""

import uuid
import logging
import threading
from enum import Enum
from dataclasses import dataclass, field
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

from threadmr.aggregator import SharedAggregator
from threadmr.config import JobConfig, resolve_num_workers
from threadmr.map_executor import MapExecutor
from threadmr.metrics import JobMetrics
from threadmr.reduce_executor import ReduceExecutor

logger = logging.getLogger(__name__)


class MapPhaseError(RuntimeError):
    """Raised after the map phase barrier when any map task failed"""

    def __init__(self, job_id: str, task_id: int, error: BaseException):
        super().__init__(f"Job {job_id}: map task {task_id} failed: {error}")
        self.job_id = job_id
        self.task_id = task_id


class JobStatus(Enum):
    """Status of a word count job"""
    PENDING = "pending"
    MAP_PHASE = "map_phase"
    REDUCE_PHASE = "reduce_phase"
    COMPLETED = "completed"
    FAILED = "failed"


class TaskStatus(Enum):
    """Status of individual map tasks"""
    PENDING = "pending"
    ASSIGNED = "assigned"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class MapTask:
    """Represents a single map task over records[start:end]"""
    task_id: int
    start: int
    end: int
    status: TaskStatus = TaskStatus.PENDING


@dataclass
class Job:
    """Represents a complete word count job"""
    job_id: str
    records: Sequence[str]
    num_workers: int
    drop_empty_tokens: bool
    status: JobStatus = JobStatus.PENDING
    map_tasks: List[MapTask] = field(default_factory=list)
    aggregator: SharedAggregator = field(default_factory=SharedAggregator)
    result: Optional[Dict[str, int]] = None
    metrics: Optional[JobMetrics] = None


def partition_ranges(total: int, num_workers: int) -> List[Tuple[int, int]]:
    """
    Split [0, total) into num_workers contiguous ranges.

    Every range but the last holds total // num_workers items; the last one
    also takes the remainder. Ranges may be empty when total < num_workers.

    Args:
        total: Number of records
        num_workers: Desired number of ranges, clamped to at least 1

    Returns:
        List of (start, end) tuples, end exclusive
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    num_workers = max(1, num_workers)
    base = total // num_workers

    ranges = []
    for i in range(num_workers):
        start = i * base
        end = total if i == num_workers - 1 else (i + 1) * base
        ranges.append((start, end))
    return ranges


class JobManager:
    """Manages word count jobs and their lifecycle"""

    def __init__(self):
        self.jobs: Dict[str, Job] = {}
        self.lock = threading.Lock()

    def create_job(self, records: Sequence[str], config: Optional[JobConfig] = None) -> Job:
        """Create new job over an in-memory record collection"""
        config = config or JobConfig()
        with self.lock:
            job = Job(
                job_id=str(uuid.uuid4()),
                records=records,
                num_workers=resolve_num_workers(config.num_workers),
                drop_empty_tokens=config.drop_empty_tokens
            )
            job.metrics = JobMetrics(
                job_id=job.job_id,
                num_workers=job.num_workers,
                num_records=len(records)
            )
            self.jobs[job.job_id] = job
            return job

    def generate_map_tasks(self, job: Job) -> List[MapTask]:
        """Split the records into one contiguous map task per worker"""
        job.map_tasks = [
            MapTask(task_id=i, start=start, end=end)
            for i, (start, end) in enumerate(partition_ranges(len(job.records), job.num_workers))
        ]
        return job.map_tasks

    def _set_task_status(self, task: MapTask, status: TaskStatus):
        with self.lock:
            task.status = status

    def _set_job_status(self, job: Job, status: JobStatus):
        with self.lock:
            job.status = status

    def run_map_phase(self, job: Job):
        """
        Run every map task in parallel and wait for all of them.

        The aggregator is sealed once every task has returned, whether or
        not they succeeded.

        Raises:
            MapPhaseError: If any map task raised; chained to the first fault
        """
        if not job.map_tasks:
            self.generate_map_tasks(job)

        self._set_job_status(job, JobStatus.MAP_PHASE)
        job.metrics.start_map_phase()
        logger.info(f"Job {job.job_id}: map phase with {len(job.map_tasks)} workers "
                    f"over {len(job.records)} records")

        futures = []
        with ThreadPoolExecutor(max_workers=len(job.map_tasks),
                                thread_name_prefix=f"map-{job.job_id[:8]}") as pool:
            for task in job.map_tasks:
                executor = MapExecutor(
                    task_id=task.task_id,
                    records=job.records,
                    start=task.start,
                    end=task.end,
                    aggregator=job.aggregator,
                    drop_empty=job.drop_empty_tokens
                )
                self._set_task_status(task, TaskStatus.ASSIGNED)
                futures.append((task, pool.submit(executor.execute)))
        # Leaving the pool context joins every worker thread

        job.aggregator.seal()

        pairs_emitted = 0
        failure = None
        for task, future in futures:
            error = future.exception()
            if error is not None:
                self._set_task_status(task, TaskStatus.FAILED)
                if failure is None:
                    failure = (task, error)
                continue
            self._set_task_status(task, TaskStatus.COMPLETED)
            pairs_emitted += future.result().pairs_emitted

        job.metrics.end_map_phase(pairs_emitted)

        if failure is not None:
            task, error = failure
            self._set_job_status(job, JobStatus.FAILED)
            logger.error(f"Job {job.job_id}: map phase failed in task {task.task_id}")
            raise MapPhaseError(job.job_id, task.task_id, error) from error

        logger.info(f"Job {job.job_id}: map phase emitted {pairs_emitted} pairs")

    def run_reduce_phase(self, job: Job) -> Dict[str, int]:
        """Sum each word's partial counts into the final result"""
        self._set_job_status(job, JobStatus.REDUCE_PHASE)
        job.metrics.start_reduce_phase()

        job.result = ReduceExecutor(job.aggregator).execute()

        job.metrics.end_job(unique_keys=len(job.result))
        self._set_job_status(job, JobStatus.COMPLETED)
        logger.info(f"Job {job.job_id}: completed with {len(job.result)} unique words "
                    f"in {job.metrics.total_time_seconds:.3f}s")
        return job.result

    def run_job(self, job: Job) -> Dict[str, int]:
        """Run map phase, barrier and reduce phase for a job"""
        self.run_map_phase(job)
        return self.run_reduce_phase(job)

    def get_job_status(self, job_id: str) -> Optional[Dict]:
        """Get current job status with progress"""
        with self.lock:
            job = self.jobs.get(job_id)
            if not job:
                return None

            return {
                'status': job.status.value,
                'num_workers': job.num_workers,
                'map_completed': sum(1 for t in job.map_tasks if t.status == TaskStatus.COMPLETED),
                'map_failed': sum(1 for t in job.map_tasks if t.status == TaskStatus.FAILED),
                'map_total': len(job.map_tasks)
            }


def count_words(records: Sequence[str], num_workers: Optional[int] = None,
                drop_empty_tokens: bool = False) -> Dict[str, int]:
    """
    Count word occurrences across records using parallel map workers.

    Args:
        records: Text records to count
        num_workers: Number of map workers; defaults to hardware parallelism
        drop_empty_tokens: Skip words that are pure punctuation

    Returns:
        Dictionary mapping word to total count, in sorted key order
    """
    manager = JobManager()
    job = manager.create_job(records, JobConfig(num_workers=num_workers,
                                                drop_empty_tokens=drop_empty_tokens))
    return manager.run_job(job)
