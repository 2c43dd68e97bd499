"""
Unit tests for JobMetrics
"""

from threadmr.metrics import JobMetrics


def test_phase_timings_are_ordered():
    metrics = JobMetrics(job_id="job-1", num_workers=2, num_records=10)
    metrics.start_map_phase()
    metrics.end_map_phase(pairs_emitted=42)
    metrics.start_reduce_phase()
    metrics.end_job(unique_keys=7)

    assert metrics.map_phase_time_seconds >= 0
    assert metrics.reduce_phase_time_seconds >= 0
    assert metrics.total_time_seconds >= metrics.map_phase_time_seconds
    assert metrics.map_phase_end <= metrics.reduce_phase_start


def test_to_dict():
    metrics = JobMetrics(job_id="job-1", num_workers=2, num_records=10)
    metrics.end_map_phase(pairs_emitted=42)
    data = metrics.to_dict()

    assert data['job_id'] == "job-1"
    assert data['num_workers'] == 2
    assert data['pairs_emitted'] == 42
    assert data['unique_keys'] == 0
