from __future__ import annotations
import typing
import math
from numbers import Real
import numpy as np
from ..types import *
from ..errors import EmptySequenceError, TypeMismatchError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _values(self, selector: Optional[Selector[T, Any]] = None) -> Iterable[Any]:
        return self._enumerable if selector is None else map(selector, self._enumerable)

    def _numeric_values(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Iterator[Union[int, float]]:
        """helper that streams numeric values, rejecting anything that is not a number."""
        for value in self._values(selector):
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeMismatchError(value, Real)
            yield value

    def _calculate_stats_welford(self, selector: Optional[Selector[T, Union[int, float]]]) -> Tuple[int, float, float]:
        """calculates count, mean, and variance in a single pass. returns (count, mean, variance)."""
        count, mean, m2 = 0, 0.0, 0.0
        for x in self._numeric_values(selector):
            count += 1
            delta = x - mean
            mean += delta / count
            delta2 = x - mean
            m2 += delta * delta2
        # using population variance, as is common with numpy/pandas std dev default (ddof=0)
        variance = m2 / count if count > 0 else 0.0
        return count, mean, variance

    def sum(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Union[int, float]:
        """calc sum. an empty sequence sums to 0."""
        values = list(self._numeric_values(selector))
        if not values:
            return 0
        if all(isinstance(v, int) for v in values):
            # python ints never overflow, int64 arrays can
            return sum(values)
        result = np.sum(values)
        return result.item() if hasattr(result, 'item') else result

    def average(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> float:
        """calc average. always a float, even over integers."""
        count, total = 0, 0
        for value in self._numeric_values(selector):
            count += 1
            total += value
        if count == 0: raise EmptySequenceError("cannot calculate average of empty sequence")
        return float(total / count)

    def std_dev(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> float:
        """calculate population standard deviation"""
        count, _, variance = self._calculate_stats_welford(selector)
        if count == 0: raise EmptySequenceError("cannot calculate standard deviation of empty sequence")
        return math.sqrt(variance)

    def median(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> float:
        """calculate median value"""
        values = list(self._numeric_values(selector))
        if not values: raise EmptySequenceError("cannot calculate median of empty sequence")
        return float(np.median(values))

    def min(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """smallest element, or smallest projected value when a selector is given"""
        result = min(self._values(selector), default=MISSING)
        if result is MISSING: raise EmptySequenceError("cannot find minimum of empty sequence")
        return result

    def max(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """largest element, or largest projected value when a selector is given"""
        result = max(self._values(selector), default=MISSING)
        if result is MISSING: raise EmptySequenceError("cannot find maximum of empty sequence")
        return result

    def min_by(self, key_selector: KeySelector[T, K]) -> T:
        """element with the smallest key; the first one wins on ties"""
        result = min(self._enumerable, key=key_selector, default=MISSING)
        if result is MISSING: raise EmptySequenceError("cannot find minimum of empty sequence")
        return result

    def max_by(self, key_selector: KeySelector[T, K]) -> T:
        """element with the largest key; the first one wins on ties"""
        result = max(self._enumerable, key=key_selector, default=MISSING)
        if result is MISSING: raise EmptySequenceError("cannot find maximum of empty sequence")
        return result
