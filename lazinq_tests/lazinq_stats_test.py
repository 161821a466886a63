import math
import suite
from sample_data import people
from lazinq import L, empty, EmptySequenceError, TypeMismatchError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

numbers = L([4, 8, 15, 16, 23, 42])


@test("sum handles integers, floats, selectors and empty input")
def test_sum():
    assert_that(numbers.stats.sum() == 108, "integer sum")
    assert_that(isinstance(numbers.stats.sum(), int), "integer sum stays integral")
    assert_that(math.isclose(L([0.5, 0.25]).stats.sum(), 0.75), "float sum")
    assert_that(L(['a', 'bb']).stats.sum(len) == 3, "sum with selector")
    assert_that(empty().stats.sum() == 0, "empty sum is zero")


@test("average is always a float")
def test_average():
    result = L([1, 2, 3, 4]).stats.average()
    assert_that(result == 2.5 and isinstance(result, float), f"average: {result!r}")
    whole = L([2, 4]).stats.average()
    assert_that(whole == 3.0 and isinstance(whole, float), f"integral average is still a float: {whole!r}")


@test("average rejects empty and non-numeric input")
def test_average_errors():
    assert_raises(EmptySequenceError, lambda: empty().stats.average())
    assert_raises(TypeMismatchError, lambda: L([1, 'two']).stats.average())
    assert_raises(TypeMismatchError, lambda: L([True, False]).stats.average(), "booleans are not numbers here")


@test("min and max on values and projections")
def test_min_max():
    assert_that(numbers.stats.min() == 4 and numbers.stats.max() == 42, "plain extremes")
    assert_that(L(['kiwi', 'fig', 'banana']).stats.max(len) == 6, "max of projected lengths")
    assert_raises(EmptySequenceError, lambda: empty().stats.min())
    assert_raises(EmptySequenceError, lambda: empty().stats.max(len))


@test("min_by and max_by return the first extreme element")
def test_min_by_max_by():
    words = L(['bb', 'a', 'cc', 'd'])
    assert_that(words.stats.max_by(len) == 'bb', "first longest word")
    assert_that(words.stats.min_by(len) == 'a', "first shortest word")
    assert_raises(EmptySequenceError, lambda: empty().stats.max_by(len))


@test("max_by on generated records")
def test_max_by_records():
    data = people(30)
    richest = L(data).stats.max_by(lambda p: p.salary)
    top = max(p.salary for p in data)
    assert_that(richest == next(p for p in data if p.salary == top), "first person with the top salary")


@test("median and standard deviation")
def test_median_std_dev():
    assert_that(L([3, 1, 2]).stats.median() == 2.0, "odd median")
    assert_that(L([4, 1, 3, 2]).stats.median() == 2.5, "even median")
    assert_that(math.isclose(L([2, 4, 4, 4, 5, 5, 7, 9]).stats.std_dev(), 2.0), "population std dev")
    assert_raises(EmptySequenceError, lambda: empty().stats.median())
    assert_raises(EmptySequenceError, lambda: empty().stats.std_dev())


if __name__ == "__main__":
    suite.run(title="lazinq statistics test suite")
