r"""
    __              _
   / /  __ _ ___ __(_)_ __   __ _
  / /  / _` |_  / __| | '_ \ / _` |
 / /__| (_| |/ /\__ \ | | | | (_| |
 \____/\__,_/___|___/_|_| |_|\__, |
                                |_|
"""

import logging

# expose the main classes
from .enumerable import Enumerable, BufferedEnumerable, OrderedEnumerable, Grouping
from .parallel import ParallelEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    defer,
    iterate,
    lazinq,
    L
)

# expose supporting data classes and configuration
from .types import (
    SortKey,
    CastResult,
    MemoizedEnumerable,
    default_of
)
from .config import ParallelOptions

# expose error kinds
from .errors import (
    SequenceError,
    EmptySequenceError,
    MultipleElementsError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    TypeMismatchError
)

# the embedding application decides where log output goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "BufferedEnumerable",
    "OrderedEnumerable",
    "Grouping",
    "ParallelEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "defer",
    "iterate",
    "lazinq",
    "L",
    "SortKey",
    "CastResult",
    "MemoizedEnumerable",
    "default_of",
    "ParallelOptions",
    "SequenceError",
    "EmptySequenceError",
    "MultipleElementsError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "TypeMismatchError"
]
