from __future__ import annotations
import typing
from collections import deque
from itertools import chain, islice, takewhile, dropwhile
from ..types import *
from ..errors import TypeMismatchError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable
    from ..parallel import ParallelEnumerable


def _plus(count_func: Optional[Callable[[], int]], extra: int) -> Optional[Callable[[], int]]:
    """length oracle for a sequence that is `extra` elements longer than its upstream"""
    if count_func is None:
        return None
    return lambda: count_func() + extra


class _CoreOperations(Generic[T]):
    """
    filtering, projection and partitioning operators.
    every operator only captures its arguments; upstream is touched on the first pull,
    and every new traversal starts again from the upstream's own start.
    """

    # --- filtering ---

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        return Enumerable(filter_data, self._element_type)

    def where_with_index(self: 'Enumerable[T]', predicate: Callable[[T, int], bool]) -> 'Enumerable[T]':
        """filter elements using both the element and its position"""
        from ..enumerable import Enumerable
        def filter_with_index_data():
            for index, item in enumerate(self):
                if predicate(item, index):
                    yield item
        return Enumerable(filter_with_index_data, self._element_type)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: (item for item in self if isinstance(item, type_filter)), type_filter)

    def cast(self: 'Enumerable[T]', target_type: Type[U]) -> 'Enumerable[U]':
        """
        treat every element as target_type. no conversion happens: an element that is
        not an instance raises TypeMismatchError when enumeration reaches it.
        """
        from ..enumerable import Enumerable
        def cast_data():
            for item in self:
                if not isinstance(item, target_type):
                    raise TypeMismatchError(item, target_type)
                yield item
        return Enumerable(cast_data, target_type)

    # --- projection ---

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: map(selector, self))

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        def map_with_index_data():
            for index, item in enumerate(self):
                yield selector(item, index)
        return Enumerable(map_with_index_data)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        # chain.from_iterable flattens exactly one level, outer order first then inner
        return Enumerable(lambda: chain.from_iterable(map(selector, self)))

    def select_many_with_index(self: 'Enumerable[T]',
                               selector: Callable[[T, int], Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences, passing the outer element's index"""
        from ..enumerable import Enumerable
        def flat_map_with_index_data():
            for index, item in enumerate(self):
                yield from selector(item, index)
        return Enumerable(flat_map_with_index_data)

    # --- partitioning ---

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        def take_data():
            if count <= 0:
                return iter(())
            return islice(self, count)
        return Enumerable(take_data, self._element_type)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0), None), self._element_type)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: takewhile(predicate, self), self._element_type)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        # dropwhile stops calling the predicate after its first failure
        return Enumerable(lambda: dropwhile(predicate, self), self._element_type)

    def take_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """
        take the last 'count' elements.
        the end of the upstream is only known at exhaustion, so the first pull drains the
        whole upstream through a ring buffer of 'count' elements. never use on an infinite sequence.
        """
        from ..enumerable import Enumerable
        def take_last_data():
            if count <= 0:
                return
            yield from deque(self, maxlen=count)
        return Enumerable(take_last_data, self._element_type)

    def skip_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """
        skip the last 'count' elements.
        output lags 'count' elements behind the upstream, held in a ring buffer.
        """
        from ..enumerable import Enumerable
        def skip_last_data():
            if count <= 0:
                yield from self
                return
            window = deque()
            for item in self:
                if len(window) == count:
                    yield window.popleft()
                window.append(item)
        return Enumerable(skip_last_data, self._element_type)

    # --- composition ---

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self, (element,)), self._element_type, _plus(self._count_func, 1))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain((element,), self), self._element_type, _plus(self._count_func, 1))

    def default_if_empty(self: 'Enumerable[T]', default_value: Any = MISSING) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton sequence if it is empty"""
        from ..enumerable import Enumerable
        value = default_of(self._element_type) if default_value is MISSING else default_value
        def default_data():
            has_items = False
            for item in self:
                has_items = True
                yield item
            if not has_items:
                yield value
        return Enumerable(default_data, self._element_type)

    # --- buffering operators ---

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence (buffers the whole upstream)"""
        from ..enumerable import BufferedEnumerable
        return BufferedEnumerable(self, reversed, self._element_type, self._count_func)

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                 comparer: Optional[Comparer] = None) -> 'OrderedEnumerable[T]':
        """stable sort of the elements by a key"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, (SortKey(key_selector, False, comparer),))

    def order_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                            comparer: Optional[Comparer] = None) -> 'OrderedEnumerable[T]':
        """stable sort of the elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, (SortKey(key_selector, True, comparer),))

    # --- execution mode ---

    def as_parallel(self: 'Enumerable[T]', degree: Optional[int] = None, ordered: bool = False,
                    partition_size: Optional[int] = None) -> 'ParallelEnumerable[T]':
        """
        run the following where/select/select_many stages on a worker pool.
        degree defaults to the hardware concurrency; results arrive in completion
        order unless ordered is set.
        """
        from ..config import ParallelOptions
        from ..parallel import ParallelEnumerable
        if degree is None:
            options = ParallelOptions(ordered=ordered, partition_size=partition_size)
        else:
            options = ParallelOptions(degree, ordered, partition_size)
        return ParallelEnumerable(self, options)
