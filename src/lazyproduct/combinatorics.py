"""
Utils for mixed-radix positional numbers.

A position `n` in a Cartesian product is a number whose digit `j`
has radix `sizes[j]`. Digit 0 is the most significant, and the
last digit changes fastest as `n` increments.
"""

import dataclasses
from typing import Optional, Sequence, Tuple

from lazyproduct import core


@dataclasses.dataclass(frozen=True)
class Layout:
    """
    Sizes of each dimension, their strides (factors), and the
    total count of positions.
    """

    sizes: Tuple[int, ...]
    factors: Tuple[int, ...]
    count: int


def suffix_products(sizes: Sequence[int]) -> Tuple[int, ...]:
    """
    Computes, for each dimension `j`, the product of the sizes
    of all dimensions after `j`.

    Args:
        sizes: the radix of each digit.

    Returns:
        A tuple of factors, the last of which is 1.
    """
    factors = []
    factor = 1
    for size in reversed(sizes):
        factors.append(factor)
        factor *= size
    return tuple(reversed(factors))


def layout(sets: Sequence[core.Set]) -> Layout:
    """
    Reads the sizes of `sets` and builds their layout.
    With no sets, the count is 1 - the empty tuple.
    """
    sizes = tuple(len(values) for values in sets)
    factors = suffix_products(sizes)
    count = sizes[0] * factors[0] if sizes else 1
    return Layout(sizes=sizes, factors=factors, count=count)


def integer_to_sequence(
    sizes: Sequence[int], index: int, factors: Optional[Sequence[int]] = None
) -> core.Coordinates:
    """
    Uses the positional system of integers to generate the unique
    sequence of digits represented by the integer `index`.

    Based on https://2ality.com/2013/03/permutations.html,
    with a different radix per digit.

    Indices outside of `[0, count)` wrap around, since
    floor division and modulo are used to isolate each digit.

    Args:
        sizes: the radix of each digit.
        index: the index of the unique sequence.
        factors: the output of `suffix_products(sizes)`, if already known.
    """
    if 0 in sizes:
        raise core.InvalidArgumentError(
            f"Cannot decode {index} with an empty radix: {tuple(sizes)}"
        )
    if factors is None:
        factors = suffix_products(sizes)
    return tuple((index // factor) % size for size, factor in zip(sizes, factors))


def sequence_to_integer(sizes: Sequence[int], sequence: Sequence[int]) -> int:
    """
    Inverse of `integer_to_sequence`, for sequences of valid digits.

    Args:
        sizes: the radix of each digit.
        sequence: the digits, most significant first.
    """
    if len(sizes) != len(sequence):
        raise core.InvalidArgumentError(
            f"Expected {len(sizes)} digits. Got: {len(sequence)}"
        )
    id = 0
    for size, factor, digit in zip(sizes, suffix_products(sizes), sequence):
        if not 0 <= digit < size:
            raise core.InvalidArgumentError(
                f"Digit {digit} is out of range for radix {size}"
            )
        id = id + digit * factor
    return id
