"""
This module defines core abstractions.
"""

import enum
from typing import Any, Sequence, Tuple

Set = Sequence[Any]
# One element per set, in set order.
Element = Tuple[Any, ...]
Coordinates = Tuple[int, ...]


class Mode(enum.Enum):
    """
    Strategy used to read set sizes.
      - LAZY: sizes are read from the live sets on every query.
      - PRECOMPUTED: sizes and factors are cached once, at construction.
    """

    LAZY = "lazy"
    PRECOMPUTED = "precomputed"


class OutOfRange(enum.Enum):
    """
    Policy for indices outside of `[0, count)`.
    """

    RAISE = "raise"
    WRAP = "wrap"


class LazyProductError(Exception):
    """
    Base class for errors raised by this package.
    """


class InvalidArgumentError(LazyProductError, ValueError):
    """
    Raised for construction arguments, options or indices
    of an unsupported type or value.
    """


class IndexRangeError(LazyProductError, IndexError):
    """
    Raised when an index falls outside of `[0, count)`.
    """

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        if count == 0:
            message = f"Index {index} is out of range: the product is empty"
        else:
            message = f"Index {index} is out of range [0, {count - 1}]"
        super().__init__(message)
