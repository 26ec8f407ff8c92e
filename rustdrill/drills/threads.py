"""Thread drills: timed workers, a shared job counter and a two-sender queue."""

from __future__ import annotations

import queue as queue_module
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

_SENDERS = 2
_DONE = object()


def run_timed_workers(count: int, delay: float) -> list[int]:
    """Run ``count`` workers that each sleep ``delay`` seconds.

    Returns each worker's elapsed time in milliseconds, in worker order.
    """
    if count < 1:
        return []

    def work(index: int) -> int:
        start = time.monotonic()
        time.sleep(delay)
        print(f"thread {index} is complete")
        return int((time.monotonic() - start) * 1000)

    with ThreadPoolExecutor(max_workers=count) as pool:
        results = list(pool.map(work, range(count)))

    print()
    for index, elapsed in enumerate(results):
        print(f"thread {index} took {elapsed}ms")
    return results


@dataclass
class JobStatus:
    """A job counter shared between threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def complete(self) -> int:
        """Record one finished job and return the new total."""
        with self._lock:
            self.jobs_completed += 1
            return self.jobs_completed

    def snapshot(self) -> int:
        with self._lock:
            return self.jobs_completed


def run_jobs(count: int, delay: float) -> JobStatus:
    """Run ``count`` jobs in threads that each update a shared status."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        status.complete()

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        print(f"jobs completed {status.snapshot()}")
    return status


@dataclass
class Queue:
    """Values split into two halves, each sent by its own thread."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    delay: float = 1.0


def send_queue(queue: Queue, channel: queue_module.Queue) -> list[threading.Thread]:
    """Start one sender thread per half of ``queue``; each ends with a done marker."""

    def send(values: list[int]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                channel.put(value)
                time.sleep(queue.delay)
        finally:
            channel.put(_DONE)

    threads = [
        threading.Thread(target=send, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue, channel: queue_module.Queue) -> list[int]:
    """Send the queue's values and collect them until both senders finish.

    Raises RuntimeError when the number received differs from ``queue.length``.
    """
    send_queue(queue, channel)
    received: list[int] = []
    finished = 0
    while finished < _SENDERS:
        item = channel.get()
        if item is _DONE:
            finished += 1
            continue
        print(f"Got: {item}")
        received.append(item)

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} values, expected {queue.length}"
        )
    return received