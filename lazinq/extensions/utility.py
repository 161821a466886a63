from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        for item in self._enumerable:
            action(item)
        return self._enumerable

    def side_effect(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs a side-effect action for each element as it passes through the sequence
        without modifying it. this operation is lazy and is primarily used for debugging
        pipelines without materializing the data.
        example: .where(...).util.side_effect(print).select(...)
        """
        from ..enumerable import Enumerable
        def side_effect_data():
            for item in self._enumerable:
                action(item)
                yield item
        return Enumerable(side_effect_data, self._enumerable.element_type)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .util.pipe(render_preview, limit=20)
        """
        return func(self._enumerable, *args, **kwargs)

    def memoize(self) -> 'Enumerable[T]':
        """
        returns a sequence that pulls each upstream element at most once and replays it
        from a cache afterwards. this is the explicit way to opt out of re-evaluation,
        e.g. to make a one-shot iterator source traversable more than once.
        still lazy: only what has been pulled so far is cached.
        """
        from ..enumerable import Enumerable
        cache = MemoizedEnumerable(self._enumerable.__iter__)
        return Enumerable(lambda: cache, self._enumerable.element_type)

    def try_cast(self, target_type: Type[U]) -> 'CastResult[U]':
        """
        checks every element against target_type, collecting the instances as successes
        and everything else as failures instead of raising.
        """
        successes, failures = [], []
        for item in self._enumerable:
            (successes if isinstance(item, target_type) else failures).append(item)
        return CastResult(successes, failures)
