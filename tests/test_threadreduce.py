import numpy as np
import pytest

from visodom.threadreduce import IndexThreadReduce


def scalar_factory():
    return np.zeros(1)


def test_sum_over_range():
    def add(start, end, stats, tid):
        stats[0] += sum(range(start, end))

    with IndexThreadReduce(scalar_factory, 4) as pool:
        result = pool.reduce(add, 0, 1000)
        assert result[0] == sum(range(1000))
        assert pool.stats[0] == sum(range(1000))


@pytest.mark.parametrize("step", [0, 1, 7, 50, 1000])
def test_every_index_visited_once(step):
    n = 300

    def mark(start, end, stats, tid):
        stats[start:end] += 1

    with IndexThreadReduce(lambda: np.zeros(n), 3) as pool:
        result = pool.reduce(mark, 0, n, step)
    assert np.array_equal(result, np.ones(n))


def test_chunks_respect_step_size():
    def record(start, end, stats, tid):
        stats[start] += end - start

    with IndexThreadReduce(lambda: np.zeros(100), 4) as pool:
        result = pool.reduce(record, 10, 95, 20)
    expected = np.zeros(100)
    expected[[10, 30, 50, 70, 90]] = [20, 20, 20, 20, 5]
    assert result.tolist() == expected.tolist()


def test_every_worker_called_at_least_once():
    def record(start, end, stats, tid):
        stats[tid] += 1

    with IndexThreadReduce(lambda: np.zeros(4), 4) as pool:
        result = pool.reduce(record, 0, 1)
    assert np.flatnonzero(result).tolist() == [0, 1, 2, 3]


def test_repeated_reduce_starts_from_zero():
    def count(start, end, stats, tid):
        stats[0] += end - start

    with IndexThreadReduce(scalar_factory, 2) as pool:
        first = pool.reduce(count, 0, 40)[0]
        second = pool.reduce(count, 0, 40)[0]
    assert first == second == 40


def test_exception_propagates_and_pool_stays_usable():
    def fail(start, end, stats, tid):
        raise ValueError("boom")

    def count(start, end, stats, tid):
        stats[0] += end - start

    with IndexThreadReduce(scalar_factory, 3) as pool:
        with pytest.raises(ValueError):
            pool.reduce(fail, 0, 10)
        assert pool.reduce(count, 0, 10)[0] == 10


def test_negative_step_rejected():
    with IndexThreadReduce(scalar_factory, 2) as pool:
        with pytest.raises(ValueError):
            pool.reduce(lambda *args: None, 0, 10, -1)


def test_reduce_after_close_raises():
    pool = IndexThreadReduce(scalar_factory, 2)
    pool.close()
    with pytest.raises(RuntimeError):
        pool.reduce(lambda *args: None, 0, 10)


def test_zero_threads_rejected():
    with pytest.raises(ValueError):
        IndexThreadReduce(scalar_factory, 0)