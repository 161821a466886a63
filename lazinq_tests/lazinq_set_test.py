import suite
from sample_data import people
from lazinq import L, defer, iterate

test = suite.test
assert_that = suite.assert_that


# --- distinct ---

@test("distinct removes duplicates while preserving order")
def test_distinct_basic():
    result = L([1, 2, 1, 3, 2, 4]).set.distinct().to.list()
    assert_that(result == [1, 2, 3, 4], "distinct should preserve first occurrence order")


@test("distinct is idempotent")
def test_distinct_idempotent():
    data = L([3, 1, 3, 2, 1, 5, 5])
    once = data.set.distinct().to.list()
    twice = data.set.distinct().set.distinct().to.list()
    assert_that(once == twice == [3, 1, 2, 5], f"distinct twice changed the result: {once} {twice}")


@test("distinct_by keeps the first element per key")
def test_distinct_by():
    data = people(25)
    first_per_city = L(data).set.distinct_by(lambda p: p.city).to.list()
    cities = [p.city for p in first_per_city]
    assert_that(len(cities) == len(set(cities)), "one element per city")
    for person in first_per_city:
        earliest = next(p for p in data if p.city == person.city)
        assert_that(person == earliest, f"{person.city} should keep its first person")


@test("distinct works with unhashable elements")
def test_distinct_unhashable():
    result = L([[1], [2], [1], {'a': 1}, {'a': 1}]).set.distinct().to.list()
    assert_that(result == [[1], [2], {'a': 1}], f"equality based dedup: {result}")


@test("distinct streams over an infinite sequence")
def test_distinct_lazy():
    result = iterate(0, lambda x: x + 1).select(lambda x: x % 3).set.distinct().take(3).to.list()
    assert_that(result == [0, 1, 2], f"first three distinct residues: {result}")


# --- union / intersect / except ---

@test("union deduplicates the concatenation in encounter order")
def test_union():
    result = L([1, 2, 2, 3]).set.union([3, 4, 1, 5]).to.list()
    assert_that(result == [1, 2, 3, 4, 5], f"union: {result}")


@test("union_by compares keys")
def test_union_by():
    left = L(['apple', 'avocado', 'banana'])
    result = left.set.union_by(['blueberry', 'cherry'], lambda s: s[0]).to.list()
    assert_that(result == ['apple', 'banana', 'cherry'], f"first word per initial: {result}")


@test("intersect keeps left order and removes duplicates")
def test_intersect():
    result = L([5, 1, 5, 3, 2, 1]).set.intersect([1, 2, 5, 9]).to.list()
    assert_that(result == [5, 1, 2], f"intersection: {result}")


@test("intersect_by and except_by apply the key to both sides")
def test_by_keyed_membership():
    words = L(['Apple', 'banana', 'apple', 'Cherry'])
    common = words.set.intersect_by(['APPLE', 'cherry'], str.lower).to.list()
    assert_that(common == ['Apple', 'Cherry'], f"case insensitive intersection: {common}")
    rest = words.set.except_by(['APPLE'], str.lower).to.list()
    assert_that(rest == ['banana', 'Cherry'], f"case insensitive difference: {rest}")


@test("except removes right elements and deduplicates")
def test_except():
    result = L([1, 2, 2, 3, 4, 4]).set.except_([2, 5]).to.list()
    assert_that(result == [1, 3, 4], f"difference: {result}")


@test("right side is buffered once per traversal while the left streams")
def test_right_side_buffered():
    right_runs = []
    def right():
        right_runs.append(1)
        yield from [2, 4, 6]
    left_pulled = []
    query = (iterate(1, lambda x: x + 1)
             .util.side_effect(left_pulled.append)
             .set.intersect(defer(right))
             .take(2))
    assert_that(right_runs == [], "nothing is buffered before enumeration")
    assert_that(query.to.list() == [2, 4], "intersection over an infinite left side")
    assert_that(right_runs == [1], "right side read once")
    assert_that(left_pulled == [1, 2, 3, 4], f"left side streamed only as far as needed: {left_pulled}")


# --- supplementary set operations ---

@test("symmetric difference and concat")
def test_symmetric_difference_concat():
    result = L([1, 2, 3, 3]).set.symmetric_difference([3, 4, 4, 5]).to.list()
    assert_that(result == [1, 2, 4, 5], f"symmetric difference: {result}")
    assert_that(L([1, 2]).set.concat([2, 1]).to.list() == [1, 2, 2, 1], "concat keeps everything")


@test("subset, superset and disjoint checks")
def test_set_checks():
    data = L([1, 2, 3])
    assert_that(data.set.is_subset_of([0, 1, 2, 3]), "subset")
    assert_that(not data.set.is_subset_of([1, 2]), "not a subset")
    assert_that(data.set.is_superset_of([3, 1]), "superset")
    assert_that(data.set.is_disjoint_with([7, 8]), "disjoint")
    assert_that(not data.set.is_disjoint_with([3]), "overlapping")


if __name__ == "__main__":
    suite.run(title="lazinq set operations test suite")
