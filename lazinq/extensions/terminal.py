from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from itertools import islice
from ..types import *
from ..errors import (
    EmptySequenceError, MultipleElementsError, IndexOutOfRangeError, InvalidArgumentError
)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TerminalAccessor(Generic[T]):
    """
    eager operators: each call runs (part of) a traversal and returns a concrete value.
    a non-restartable upstream is left advanced or exhausted afterwards.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _default(self, default: Any) -> Any:
        return default_of(self._enumerable.element_type) if default is MISSING else default

    def _matching(self, predicate: Optional[Predicate[T]]) -> Iterable[T]:
        if predicate is None:
            return self._enumerable
        return (item for item in self._enumerable if predicate(item))

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. duplicate keys are an error rather than a silent overwrite."""
        val_sel = value_selector if value_selector else lambda item: item
        result = {}
        for item in self._enumerable:
            key = key_selector(item)
            if key in result:
                raise InvalidArgumentError(f"duplicate key {key!r} in dictionary conversion")
            result[key] = val_sel(item)
        return result

    def lookup(self, key_selector: KeySelector[T, K],
               value_selector: Optional[Selector[T, V]] = None) -> Dict[K, List[V]]:
        """convert to a key -> list mapping; keys in order of first appearance"""
        val_sel = value_selector if value_selector else lambda item: item
        result: Dict[K, List[V]] = {}
        for item in self._enumerable:
            result.setdefault(key_selector(item), []).append(val_sel(item))
        return result

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    # --- quantifiers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        count_func = self._enumerable._count_func
        if predicate is None and count_func is not None:
            return count_func()
        return sum(1 for _ in self._matching(predicate))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition (or, without one, if there is any element)"""
        for _ in self._matching(predicate):
            return True
        return False

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence."""
        return all(predicate(x) for x in self._enumerable)

    def contains(self, value: T) -> bool:
        """check whether value occurs in the sequence"""
        return any(item == value for item in self._enumerable)

    def sequence_equal(self, other: Iterable[T]) -> bool:
        """check that both sequences hold equal elements in the same order"""
        sentinel = object()
        left, right = iter(self._enumerable), iter(other)
        while True:
            a, b = next(left, sentinel), next(right, sentinel)
            if a is sentinel or b is sentinel:
                return a is b
            if a != b:
                return False

    # --- element operators ---

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        for item in self._matching(predicate):
            return item
        if predicate is None:
            raise EmptySequenceError()
        raise EmptySequenceError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Any = MISSING) -> Optional[T]:
        """get first element or default"""
        for item in self._matching(predicate):
            return item
        return self._default(default)

    def _last(self, predicate: Optional[Predicate[T]]) -> Any:
        # only the most recent match is kept
        result = MISSING
        for item in self._matching(predicate):
            result = item
        return result

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        result = self._last(predicate)
        if result is MISSING:
            raise EmptySequenceError() if predicate is None else EmptySequenceError("no element satisfies the condition")
        return result

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Any = MISSING) -> Optional[T]:
        """get last element or default"""
        result = self._last(predicate)
        return self._default(default) if result is MISSING else result

    def _single(self, predicate: Optional[Predicate[T]]) -> Any:
        # stops at the second match instead of draining the rest of the upstream
        matches = list(islice(self._matching(predicate), 2))
        if len(matches) > 1:
            raise MultipleElementsError()
        return matches[0] if matches else MISSING

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        result = self._single(predicate)
        if result is MISSING:
            raise EmptySequenceError("sequence contains no matching elements")
        return result

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default: Any = MISSING) -> Optional[T]:
        """get single element or default when there is none; more than one is still an error"""
        result = self._single(predicate)
        return self._default(default) if result is MISSING else result

    def element_at(self, index: int) -> T:
        """get the element at a zero-based position"""
        if index < 0:
            raise IndexOutOfRangeError(index)
        for item in islice(self._enumerable, index, index + 1):
            return item
        raise IndexOutOfRangeError(index)

    def element_at_or_default(self, index: int, default: Any = MISSING) -> Optional[T]:
        """get the element at a zero-based position, or default when out of range"""
        if index < 0:
            return self._default(default)
        for item in islice(self._enumerable, index, index + 1):
            return item
        return self._default(default)

    # --- folding ---

    def aggregate(self, accumulator: Accumulator[T, T], seed: Any = MISSING) -> T:
        """
        applies accumulator function over sequence, left to right.
        without a seed the first element is the seed and folding starts from the second.
        """
        if seed is not MISSING:
            return reduce(accumulator, self._enumerable, seed)
        iterator = iter(self._enumerable)
        for first in iterator:
            return reduce(accumulator, iterator, first)
        raise EmptySequenceError("cannot aggregate empty sequence without seed")

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(reduce(accumulator, self._enumerable, seed))
