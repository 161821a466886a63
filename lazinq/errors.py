"""error kinds raised by lazinq operators"""


class SequenceError(Exception):
    """base class for every error raised by the engine itself"""
    pass


class EmptySequenceError(SequenceError, ValueError):
    """a singular-result operator found no element and has no fallback"""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class MultipleElementsError(SequenceError, ValueError):
    """single() found more than one matching element"""

    def __init__(self, message: str = "sequence contains more than one matching element"):
        super().__init__(message)


class IndexOutOfRangeError(SequenceError, IndexError):
    def __init__(self, index: int):
        super().__init__(f"index {index} is out of range")
        self.index = index


class InvalidArgumentError(SequenceError, ValueError):
    pass


class TypeMismatchError(SequenceError, TypeError):
    """an element could not be treated as the requested type"""

    def __init__(self, value, expected: type):
        super().__init__(f"cannot cast {type(value).__name__} value {value!r} to {expected.__name__}")
        self.value = value
        self.expected = expected
