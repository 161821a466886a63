from typing import Any, Generic, Hashable, List, Set
from .types import T


def compare(left: Any, right: Any) -> int:
    """default three-way comparison built on the natural ordering"""
    if left < right: return -1
    if left > right: return 1
    return 0


class KeyedSet(Generic[T]):
    """
    membership container used by distinct and the set operators.
    hashable values go into a real set; unhashable ones (lists, dicts) fall back
    to a linear scan with ==, so equality alone is enough to take part.
    """

    def __init__(self, values=()):
        self._hashed: Set[Hashable] = set()
        self._unhashable: List[Any] = []
        for value in values:
            self.add(value)

    def add(self, value: T) -> bool:
        """adds value, returning True when it was not present yet"""
        try:
            if value in self._hashed:
                return False
            self._hashed.add(value)
            return True
        except TypeError:
            if value in self._unhashable:
                return False
            self._unhashable.append(value)
            return True

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._hashed
        except TypeError:
            return value in self._unhashable

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashable)
