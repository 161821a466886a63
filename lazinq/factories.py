import typing
from collections.abc import Iterator as _Iterator, Sized
from itertools import count as _count, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def _borrow(data: Iterable[T]) -> Iterator[T]:
    """walk a caller-owned iterator without taking ownership: abandoning it never closes data"""
    for item in data:
        yield item

def from_iterable(data: Iterable[T], element_type: Optional[type] = None) -> 'Enumerable[T]':
    """
    create enumerable from iterable.
    the sequence is as restartable as data: a list or range can be traversed any number
    of times, a generator or iterator only once (later traversals come out empty).
    """
    from .enumerable import Enumerable
    count_func = (lambda: len(data)) if isinstance(data, Sized) else None
    if isinstance(data, _Iterator):
        return Enumerable(lambda: _borrow(data), element_type, count_func)
    return Enumerable(lambda: data, element_type, count_func)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable of count consecutive integers"""
    from .enumerable import Enumerable
    numbers = range(start, start + max(count, 0))
    return Enumerable(lambda: numbers, int, lambda: len(numbers))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item; infinite when count is None"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: _repeat(item), type(item))
    return Enumerable(lambda: _repeat(item, max(count, 0)), type(item), lambda: max(count, 0))

def empty(element_type: Optional[type] = None) -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (), element_type, lambda: 0)

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate sequence by calling a function once per element; infinite when count is None"""
    from .enumerable import Enumerable
    def generate_data():
        calls = _count() if count is None else range(count)
        for _ in calls:
            yield generator_func()
    return Enumerable(generate_data)

def defer(generator_function: Callable[..., Iterable[T]], *args, **kwargs) -> 'Enumerable[T]':
    """restartable sequence over a generator function: every traversal calls it again"""
    from .enumerable import Enumerable
    return Enumerable(lambda: generator_function(*args, **kwargs))

def iterate(seed: T, step: Callable[[T], T]) -> 'Enumerable[T]':
    """infinite sequence seed, step(seed), step(step(seed)), ..."""
    from .enumerable import Enumerable
    def iterate_data():
        current = seed
        while True:
            yield current
            current = step(current)
    return Enumerable(iterate_data, type(seed))

# --- aliases ---
lazinq = from_iterable
L = from_iterable
