from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import cmp_to_key
from .types import *
from .equality import compare

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """begin a new, independent traversal"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    # operators that must drain their upstream before the first output set this
    is_buffered = False

    def __init__(self, iter_func: Callable[[], Iterable[T]],
                 element_type: Optional[type] = None,
                 count_func: Optional[Callable[[], int]] = None):
        """
        init with a function that starts a fresh traversal when called.
        nothing is cached: every iteration calls iter_func again, so the sequence is
        exactly as restartable as whatever iter_func reads from.
        """
        self._iter_func = iter_func
        self._element_type = element_type
        self._count_func = count_func

    @property
    def element_type(self) -> Optional[type]:
        return self._element_type

    def _get_data(self) -> List[T]:
        """run one complete traversal into a new list"""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        iterator = iter(self._iter_func())
        try:
            yield from iterator
        finally:
            # release generator resources whether the consumer finished or walked away
            close = getattr(iterator, 'close', None)
            if close is not None:
                close()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired, restartable sequence over python iterables."""
    def __init__(self, iter_func: Callable[[], Iterable[T]],
                 element_type: Optional[type] = None,
                 count_func: Optional[Callable[[], int]] = None):
        super().__init__(iter_func, element_type, count_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

# --- eager-then-lazy category ---

class BufferedEnumerable(Enumerable[T]):
    """
    a sequence that has to see its whole upstream before it can produce anything
    (reverse, sorting, grouping). declaring it is still free; the first pull drains
    the upstream into a buffer and the transform re-exposes that buffer lazily.
    never use it over an infinite upstream.
    """
    is_buffered = True

    def __init__(self, source: Iterable[Any], transform: Callable[[List[Any]], Iterable[T]],
                 element_type: Optional[type] = None,
                 count_func: Optional[Callable[[], int]] = None):
        self._source = source
        self._transform = transform
        super().__init__(self._drain_then_expose, element_type, count_func)

    def _drain_then_expose(self) -> Iterable[T]:
        buffer = list(self._source)
        logger.debug(f"{type(self).__name__} buffered {len(buffer)} elements")
        return self._transform(buffer)

# --- ordered enumerable class ---

class OrderedEnumerable(BufferedEnumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: 'Enumerable[T]', sort_keys: Tuple[SortKey, ...]):
        self._sort_keys = tuple(sort_keys)
        super().__init__(source, self._sort, source.element_type)

    @property
    def sort_keys(self) -> Tuple[SortKey, ...]:
        return self._sort_keys

    def _compare_items(self, left: T, right: T) -> int:
        # keys are pulled per comparison, and a level is only consulted when every earlier one ties
        for key_selector, descending, comparer in self._sort_keys:
            result = (comparer or compare)(key_selector(left), key_selector(right))
            if result:
                return -result if descending else result
        return 0

    def _sort(self, buffer: List[T]) -> List[T]:
        # sorted() is stable, and descending levels invert the comparison rather than the
        # output, so equal elements always keep their source order
        return sorted(buffer, key=cmp_to_key(self._compare_items))

    def _with_key(self, key: SortKey) -> 'OrderedEnumerable[T]':
        return OrderedEnumerable(self._source, self._sort_keys + (key,))

    def then_by(self, key_selector: KeySelector[T, K],
                comparer: Optional[Comparer] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        return self._with_key(SortKey(key_selector, False, comparer))

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return self._with_key(SortKey(key_selector, True, comparer))

# --- grouping ---

class Grouping(Enumerable[T], Generic[K, T]):
    """a key together with the elements that share it, in encounter order"""

    def __init__(self, key: K, elements: List[T], element_type: Optional[type] = None):
        self.key = key
        self._elements = elements
        super().__init__(lambda: elements, element_type, lambda: len(elements))

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, count={len(self._elements)})"
