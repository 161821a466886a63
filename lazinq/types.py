from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]


class _Missing:
    """marks an argument that was not supplied, where None is a legal value"""

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()

_TYPE_DEFAULTS = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: '',
    bytes: b'',
}


def default_of(element_type: Optional[type]) -> Any:
    """the 'empty' value used by the *_or_default terminals for a given element type"""
    if element_type is None:
        return None
    for candidate, value in _TYPE_DEFAULTS.items():
        if element_type is candidate:
            return value
    return None


class SortKey(NamedTuple):
    """one level of an ordering: applied only when all previous levels tie"""
    key_selector: Callable[[Any], Any]
    descending: bool
    comparer: Optional[Comparer] = None


class CastResult(Generic[T]):
    """typed-or-failure outcome of checking every element against a type"""

    def __init__(self, successes: List[T], failures: List[Any]):
        self.successes = successes
        self.failures = failures

    @property
    def has_failures(self) -> bool: return len(self.failures) > 0

    @property
    def success_count(self) -> int: return len(self.successes)

    @property
    def failure_count(self) -> int: return len(self.failures)

    def __repr__(self) -> str:
        return f"CastResult(successes={self.success_count}, failures={self.failure_count})"


class MemoizedEnumerable(Generic[T]):
    """
    explicitly materialized view over a source: elements are pulled from the source
    at most once and replayed from the cache on later traversals.
    supports partial materialization, so an infinite source can still be memoized.
    """

    def __init__(self, data_func: Callable[[], Iterable[T]]):
        self._source_func = data_func
        self._cache: List[T] = []
        self._source_iterator: Optional[Iterator[T]] = None
        self._is_fully_enumerated = False

    def _get_iterator(self) -> Iterator[T]:
        """get or create the source iterator"""
        if self._source_iterator is None:
            self._source_iterator = iter(self._source_func())
        return self._source_iterator

    def _materialize_to_index(self, target_index: int):
        """materialize the cache up to (and including) the target index"""
        if self._is_fully_enumerated:
            return

        iterator = self._get_iterator()
        while len(self._cache) <= target_index:
            try:
                self._cache.append(next(iterator))
            except StopIteration:
                self._is_fully_enumerated = True
                break

    def _materialize_all(self):
        """fully materialize the source into cache"""
        if self._is_fully_enumerated:
            return
        self._cache.extend(self._get_iterator())
        self._is_fully_enumerated = True

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    def __iter__(self) -> Iterator[T]:
        # index based so that interleaved traversals share one source pass
        index = 0
        while True:
            self._materialize_to_index(index)
            if index >= len(self._cache):
                return
            yield self._cache[index]
            index += 1

    def __getitem__(self, index):
        """support indexing by materializing up to the requested index"""
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            return [self[i] for i in range(start, stop, step)]

        if index < 0:
            self._materialize_all()
            if abs(index) > len(self._cache):
                raise IndexError("index out of range")
            return self._cache[index]

        self._materialize_to_index(index)

        if index < len(self._cache):
            return self._cache[index]
        raise IndexError("index out of range")

    def __len__(self):
        """get the length by fully materializing if necessary"""
        self._materialize_all()
        return len(self._cache)
