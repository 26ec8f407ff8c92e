import queue

import pytest

from rustdrill.drills.threads import (
    JobStatus,
    Queue,
    receive_all,
    run_jobs,
    run_timed_workers,
    send_queue,
)


def test_timed_workers_return_one_result_each():
    delay = 0.02
    results = run_timed_workers(4, delay)
    assert len(results) == 4
    assert all(elapsed >= int(delay * 1000) - 1 for elapsed in results)


def test_timed_workers_none():
    assert run_timed_workers(0, 0.0) == []


def test_run_jobs_counts_every_job():
    status = run_jobs(10, 0.01)
    assert status.jobs_completed == 10


def test_job_status_complete_returns_total():
    status = JobStatus()
    assert status.complete() == 1
    assert status.complete() == 2
    assert status.snapshot() == 2


def test_queue_defaults_follow_source():
    q = Queue()
    assert q.length == 10
    assert q.first_half + q.second_half == list(range(1, 11))


def test_receive_all_gets_every_value():
    q = Queue(delay=0.0)
    received = receive_all(q, queue.Queue())
    assert sorted(received) == q.first_half + q.second_half
    assert len(received) == q.length


def test_receive_all_keeps_order_within_each_half():
    q = Queue(delay=0.0)
    received = receive_all(q, queue.Queue())
    assert [v for v in received if v in q.first_half] == q.first_half
    assert [v for v in received if v in q.second_half] == q.second_half


def test_receive_all_length_mismatch():
    q = Queue(length=3, delay=0.0)
    with pytest.raises(RuntimeError):
        receive_all(q, queue.Queue())


def test_send_queue_starts_two_senders():
    q = Queue(delay=0.0)
    channel = queue.Queue()
    threads = send_queue(q, channel)
    for thread in threads:
        thread.join()
    items = [channel.get_nowait() for _ in range(channel.qsize())]
    values = [item for item in items if isinstance(item, int)]
    assert len(threads) == 2
    assert sorted(values) == q.first_half + q.second_half
    assert len(items) - len(values) == len(threads)