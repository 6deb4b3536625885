"""Sharing data between threads and polling a worker's progress."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def offset_sums(numbers: Iterable[int] | None = None, workers: int = 8) -> list[int]:
    """Sum every ``workers``-th number in one thread per offset.

    The numbers default to 0..99. The result holds one sum per offset.
    """
    if workers < 1:
        raise ValueError("at least one worker is needed")
    shared = tuple(range(100)) if numbers is None else tuple(numbers)

    def worker(offset: int) -> int:
        total = sum(shared[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(worker, range(workers)))


@dataclass
class JobStatus:
    jobs_completed: int = 0


def run_jobs(
    jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5
) -> JobStatus:
    """Complete jobs in a worker thread while waiting for all of them to finish."""
    if jobs < 0:
        raise ValueError("the number of jobs cannot be negative")
    status = JobStatus()
    lock = threading.Lock()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                status.jobs_completed += 1

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while True:
        with lock:
            completed = status.jobs_completed
        if completed >= jobs:
            break
        print("waiting... ")
        time.sleep(poll_delay)
    worker.join()
    return status