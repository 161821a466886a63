from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..equality import KeyedSet

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _identity(item):
    return item


class SetAccessor(Generic[T]):
    """
    provides set-theoretic operations over sequences.
    the left side always streams. when an operation needs to know membership on
    the right side (intersect, except), the right side is buffered in full on the
    first pull, so it must be finite.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _first_occurrences(self, items: Iterable[T], key_selector: KeySelector[T, K],
                           keep: Optional[Predicate[K]] = None) -> Iterator[T]:
        """yields each item whose key has not been seen before (and passes keep, if given)"""
        seen = KeyedSet()
        for item in items:
            key = key_selector(item)
            if keep is not None and not keep(key):
                continue
            if seen.add(key):
                yield item

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        key = key_selector or _identity
        return Enumerable(lambda: self._first_occurrences(self._enumerable, key),
                          self._enumerable.element_type)

    def distinct_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """return the first element for each distinct key."""
        return self.distinct(key_selector)

    def union(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self.union_by(other, _identity)

    def union_by(self, other: Iterable[T], key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """union where elements are compared by key. the first element seen for a key wins."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._first_occurrences(chain(self._enumerable, other), key_selector),
                          self._enumerable.element_type)

    def intersect(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return distinct elements of this sequence that also appear in other, in this sequence's order."""
        return self.intersect_by(other, _identity)

    def intersect_by(self, other: Iterable[T], key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """intersection compared by key; the key selector is applied to both sides."""
        from ..enumerable import Enumerable
        def intersect_data():
            other_keys = KeyedSet(key_selector(item) for item in other)
            yield from self._first_occurrences(self._enumerable, key_selector,
                                               lambda key: key in other_keys)
        return Enumerable(intersect_data, self._enumerable.element_type)

    def except_(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return distinct elements from the first sequence not in the second (set difference)."""
        return self.except_by(other, _identity)

    def except_by(self, other: Iterable[T], key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """set difference compared by key; the key selector is applied to both sides."""
        from ..enumerable import Enumerable
        def except_data():
            other_keys = KeyedSet(key_selector(item) for item in other)
            yield from self._first_occurrences(self._enumerable, key_selector,
                                               lambda key: key not in other_keys)
        return Enumerable(except_data, self._enumerable.element_type)

    def symmetric_difference(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return distinct elements that are in one sequence or the other, but not both."""
        from ..enumerable import Enumerable
        def symmetric_difference_data():
            self_data = self._enumerable.to.list()
            other_data = list(other)
            self_set, other_set = KeyedSet(self_data), KeyedSet(other_data)
            yield from self._first_occurrences(self_data, _identity, lambda item: item not in other_set)
            yield from self._first_occurrences(other_data, _identity, lambda item: item not in self_set)
        return Enumerable(symmetric_difference_data, self._enumerable.element_type)

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self._enumerable, other), self._enumerable.element_type)

    # --- boolean set checks ---

    def is_subset_of(self, other: Iterable[T]) -> bool:
        """determines whether every element of this sequence appears in other."""
        other_set = KeyedSet(other)
        return all(item in other_set for item in self._enumerable)

    def is_superset_of(self, other: Iterable[T]) -> bool:
        """determines whether every element of other appears in this sequence."""
        self_set = KeyedSet(self._enumerable)
        return all(item in self_set for item in other)

    def is_disjoint_with(self, other: Iterable[T]) -> bool:
        """determines whether this sequence has no elements in common with another."""
        other_set = KeyedSet(other)
        return not any(item in other_set for item in self._enumerable)
