from __future__ import annotations
import typing
from collections import deque
from ..types import *
from ..errors import InvalidArgumentError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, V]] = None) -> 'Enumerable[Grouping[K, V]]':
        """
        group elements by a key.
        a later element may still belong to an earlier key, so no group is emitted before the
        upstream is exhausted. groups come out in order of each key's first appearance.
        """
        from ..enumerable import BufferedEnumerable, Grouping
        def build_groups(buffer: List[T]) -> Iterator['Grouping[K, V]']:
            groups: Dict[K, List[V]] = {}
            for item in buffer:
                value = element_selector(item) if element_selector else item
                groups.setdefault(key_selector(item), []).append(value)
            element_type = None if element_selector else self._enumerable.element_type
            return (Grouping(key, items, element_type) for key, items in groups.items())
        return BufferedEnumerable(self._enumerable, build_groups)

    def partition(self, predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
        """partition elements based on predicate"""
        true_items, false_items = [], []
        for item in self._enumerable:
            (true_items if predicate(item) else false_items).append(item)
        return true_items, false_items

    def chunk(self, size: int) -> 'Enumerable[List[T]]':
        """
        split into consecutive lists of 'size' elements; the last one may be shorter.
        a size below 1 raises InvalidArgumentError once enumeration starts.
        """
        from ..enumerable import Enumerable
        def chunk_data():
            if size < 1:
                raise InvalidArgumentError(f"chunk size must be at least 1, got {size}")
            current = []
            for item in self._enumerable:
                current.append(item)
                if len(current) == size:
                    yield current
                    current = []
            if current:
                yield current
        return Enumerable(chunk_data)

    def window(self, size: int) -> 'Enumerable[List[T]]':
        """create sliding windows of specified size"""
        from ..enumerable import Enumerable
        def window_data():
            if size < 1:
                raise InvalidArgumentError(f"window size must be at least 1, got {size}")
            current = deque(maxlen=size)
            for item in self._enumerable:
                current.append(item)
                if len(current) == size:
                    yield list(current)
        return Enumerable(window_data)

    def pairwise(self) -> 'Enumerable[Tuple[T, T]]':
        """return consecutive pairs"""
        return self.window(2).select(tuple)
