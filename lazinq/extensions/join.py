from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping


def _index(items: Iterable[U], key_selector: KeySelector[U, K]) -> Dict[K, List[U]]:
    """buffers items into a key -> list index, keeping encounter order within each key"""
    lookup: Dict[K, List[U]] = {}
    for item in items:
        lookup.setdefault(key_selector(item), []).append(item)
    return lookup


class JoinAccessor(Generic[T]):
    """
    hash joins. the inner sequence is buffered into a key index on the first pull;
    the outer sequence (this one) streams.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        from ..enumerable import Enumerable
        def join_data():
            inner_lookup = _index(inner, inner_key_selector)
            for outer_item in self._enumerable:
                for inner_item in inner_lookup.get(outer_key_selector(outer_item), ()):
                    yield result_selector(outer_item, inner_item)
        return Enumerable(join_data)

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, 'Grouping[K, U]'], V]) -> 'Enumerable[V]':
        """
        one result per outer element, paired with the (possibly empty) group of
        matching inner elements
        """
        from ..enumerable import Enumerable, Grouping
        def group_join_data():
            inner_lookup = _index(inner, inner_key_selector)
            for outer_item in self._enumerable:
                key = outer_key_selector(outer_item)
                yield result_selector(outer_item, Grouping(key, inner_lookup.get(key, [])))
        return Enumerable(group_join_data)

    def left_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                  inner_key_selector: KeySelector[U, K],
                  result_selector: Callable[[T, Optional[U]], V],
                  default_inner: Optional[U] = None) -> 'Enumerable[V]':
        """left outer join - includes all outer elements even without matches"""
        from ..enumerable import Enumerable
        def left_join_data():
            inner_lookup = _index(inner, inner_key_selector)
            for outer_item in self._enumerable:
                matched_inners = inner_lookup.get(outer_key_selector(outer_item))
                if matched_inners:
                    for inner_item in matched_inners:
                        yield result_selector(outer_item, inner_item)
                else:
                    yield result_selector(outer_item, default_inner)
        return Enumerable(left_join_data)

    def cross_join(self, inner: Iterable[U]) -> 'Enumerable[Tuple[T, U]]':
        """cartesian product of two sequences"""
        from ..enumerable import Enumerable
        def cross_join_data():
            inner_data = list(inner)
            for outer_item in self._enumerable:
                for inner_item in inner_data:
                    yield outer_item, inner_item
        return Enumerable(cross_join_data)
