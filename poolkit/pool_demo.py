"""Demonstration: run many sleeping tasks on a dynamically growing pool."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import List, Optional, TextIO

from .dynpool import DynamicPool

THREAD_COUNT_INIT = 4
THREAD_COUNT_MAX = 500
SLEEP_SECOND = 5.0
TASK_COUNT = 100

_print_lock = threading.Lock()


def run_task(
    msg: str,
    index: int,
    delay: float = SLEEP_SECOND,
    lock: Optional[threading.Lock] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Sleep for ``delay`` seconds, then print ``msg`` under ``lock``."""
    time.sleep(delay)
    with lock if lock is not None else _print_lock:
        print(msg, file=out if out is not None else sys.stdout)


def execute_with_threadpool(
    count: int = TASK_COUNT,
    initial_threads: int = THREAD_COUNT_INIT,
    max_threads: int = THREAD_COUNT_MAX,
    delay: float = SLEEP_SECOND,
    out: Optional[TextIO] = None,
) -> List[str]:
    """Schedule ``count`` tasks, wait for them all and return the pool's events."""
    stream = out if out is not None else sys.stdout
    events: List[str] = []

    def report(message: str) -> None:
        events.append(message)
        with _print_lock:
            print(f"prefix, {message}", file=stream)

    pool = DynamicPool(initial_threads, max_threads, report)
    index = 0
    for value in (str(i) for i in range(1, count + 1)):
        pool.schedule(
            lambda value=value: run_task(value, index, delay, _print_lock, stream)
        )
    pool.wait()
    print("end.", file=stream)
    pool.shutdown()
    print("release.", file=stream)
    return events


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run sleeping tasks on a dynamic pool.")
    parser.add_argument("--count", type=int, default=TASK_COUNT)
    parser.add_argument("--initial", type=int, default=THREAD_COUNT_INIT)
    parser.add_argument("--max", type=int, default=THREAD_COUNT_MAX)
    parser.add_argument("--delay", type=float, default=SLEEP_SECOND)
    args = parser.parse_args(argv)

    start = time.perf_counter()
    execute_with_threadpool(args.count, args.initial, args.max, args.delay)
    elapsed = time.perf_counter() - start
    print(f"ExecuteWithThreadpool:{elapsed:f}s ")
    return 0


if __name__ == "__main__":
    sys.exit(main())