#!/usr/bin/env python3
"""
Command line client for threadmr.
Reads records, runs a word count job and prints the results.
"""

import sys
import logging
import argparse
from typing import List, Optional

from threadmr.config import JobConfig
from threadmr.job_manager import JobManager, MapPhaseError

logger = logging.getLogger(__name__)

DEMO_RECORDS = [
    "This is sentence one.",
    "This is sentence two.",
    "This is a sentence that ends with red.",
    "This is a sentence that ends with blue."
]


def read_records(path: str) -> List[str]:
    """Read one record per line from a text file."""
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        return [line.rstrip('\n') for line in f]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parallel map-reduce word count")
    parser.add_argument("--input", help="Input file, one record per line (default: demo sentences)")
    parser.add_argument("--num-workers", type=int,
                        help="Number of map workers (default: $MAPREDUCE_NUM_WORKERS or CPU count)")
    parser.add_argument("--drop-empty", action="store_true",
                        help="Skip words made only of punctuation")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = JobConfig.from_env()
    if args.num_workers is not None:
        config.num_workers = args.num_workers
    if args.drop_empty:
        config.drop_empty_tokens = True

    records = read_records(args.input) if args.input else DEMO_RECORDS

    manager = JobManager()
    job = manager.create_job(records, config)
    try:
        result = manager.run_job(job)
    except MapPhaseError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for word, count in result.items():
        print(f"{word}: {count}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
