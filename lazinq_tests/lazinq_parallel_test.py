import threading
import time
import suite
from lazinq import L, from_range, ParallelEnumerable, ParallelOptions, InvalidArgumentError
from lazinq.config import DEGREE_ENV_VAR, default_degree

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("ordered parallel execution preserves source order")
def test_parallel_ordered():
    result = from_range(1, 10).as_parallel(degree=4, ordered=True).select(lambda x: x * 2).to.list()
    assert_that(result == [2, 4, 6, 8, 10, 12, 14, 16, 18, 20], f"ordered doubling: {result}")


@test("unordered parallel execution returns the same multiset")
def test_parallel_unordered():
    result = from_range(1, 10).as_parallel(degree=4).select(lambda x: x * 2).to.list()
    assert_that(sorted(result) == list(range(2, 21, 2)), f"unordered doubling: {result}")


@test("stages chain per partition")
def test_parallel_stage_chain():
    query = (from_range(1, 50).as_parallel(degree=3).as_ordered()
             .where(lambda x: x % 5 == 0)
             .select_many(lambda x: [x, -x])
             .select(lambda x: x * 10))
    expected = [v * 10 for x in range(1, 51) if x % 5 == 0 for v in (x, -x)]
    assert_that(query.to.list() == expected, "where, select_many and select in order")


@test("work runs on several worker threads")
def test_parallel_uses_workers():
    seen = set()
    lock = threading.Lock()
    def record(x):
        with lock:
            seen.add(threading.current_thread().name)
        time.sleep(0.01)
        return x
    from_range(0, 8).as_parallel(degree=4).select(record).to.list()
    assert_that(len(seen) > 1, f"expected more than one worker thread: {seen}")
    assert_that(all(name.startswith('lazinq') for name in seen), "work runs on the pool threads")


@test("a worker error propagates unchanged and stops the siblings")
def test_parallel_error():
    processed = []
    lock = threading.Lock()
    def explode(x):
        if x == 0:
            raise KeyError("bad element")
        time.sleep(0.005)
        with lock:
            processed.append(x)
        return x
    query = from_range(0, 400).as_parallel(degree=4, partition_size=100).select(explode)
    error = assert_raises(KeyError, lambda: query.to.list())
    assert_that(error.args == ("bad element",), f"original error expected: {error!r}")
    assert_that(len(processed) < 399, f"siblings should have been cancelled early: {len(processed)}")


@test("configuration wrappers return new queries")
def test_parallel_configuration():
    base = L([1, 2, 3]).as_parallel(degree=2)
    ordered = base.as_ordered().with_degree_of_parallelism(3).with_partition_size(1)
    assert_that(isinstance(ordered, ParallelEnumerable), "still a parallel query")
    assert_that(not base.options.ordered and base.options.degree == 2, "base options unchanged")
    assert_that(ordered.options == ParallelOptions(3, True, 1), f"derived options: {ordered.options}")
    assert_that(ordered.as_unordered().options.ordered is False, "back to unordered")


@test("as_sequential continues on the calling thread")
def test_as_sequential():
    result = (from_range(1, 6).as_parallel(degree=2, ordered=True)
              .select(lambda x: x + 1).as_sequential()
              .where(lambda x: x % 2 == 0).to.list())
    assert_that(result == [2, 4, 6], f"sequential tail: {result}")


@test("small and empty inputs are fine")
def test_parallel_small_inputs():
    assert_that(L([]).as_parallel(degree=8).select(lambda x: x).to.list() == [], "empty source")
    assert_that(L([7]).as_parallel(degree=8).select(lambda x: x + 1).to.list() == [8], "single element")


@test("invalid options fail when the query runs")
def test_parallel_invalid_options():
    query = from_range(1, 3).as_parallel(degree=0)
    assert_raises(InvalidArgumentError, lambda: query.to.list())
    assert_raises(InvalidArgumentError, lambda: from_range(1, 3).as_parallel(partition_size=0).to.list())


@test("partition sizing splits evenly across workers")
def test_partition_sizing():
    assert_that(ParallelOptions(degree=4).resolve(10).partition_size == 3, "ceil(10 / 4)")
    assert_that(ParallelOptions(degree=4).resolve(0).partition_size == 1, "never below one")
    assert_that(ParallelOptions(degree=4, partition_size=7).resolve(10).partition_size == 7, "explicit size wins")


@test("default degree follows the environment override")
def test_default_degree_env():
    import os
    previous = os.environ.get(DEGREE_ENV_VAR)
    try:
        os.environ[DEGREE_ENV_VAR] = '3'
        assert_that(default_degree() == 3, "environment override")
        os.environ[DEGREE_ENV_VAR] = 'lots'
        assert_that(default_degree() == (os.cpu_count() or 1), "invalid override falls back to cpu count")
    finally:
        if previous is None:
            os.environ.pop(DEGREE_ENV_VAR, None)
        else:
            os.environ[DEGREE_ENV_VAR] = previous


if __name__ == "__main__":
    suite.run(title="lazinq parallel execution test suite")
