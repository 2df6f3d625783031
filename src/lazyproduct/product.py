"""
Random access into the Cartesian product of a sequence of sets,
without generating the product, and without copying the sets.
"""

import logging
import operator
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from lazyproduct import combinatorics, core, options


class CartesianProduct:
    """
    Lazily computes the tuples of a Cartesian product.

    Tuples are ordered like the digits of a number: the last set
    cycles fastest. For sets `[a, b]` and `[x, y, z]`, positions
    0 to 5 are `(a, x), (a, y), (a, z), (b, x), (b, y), (b, z)`.

    Sets are held by reference. In the default lazy mode, their sizes are
    read on every call, so growing or shrinking a set is reflected in
    subsequent queries. In precomputed mode, sizes are read once, at
    construction, and changing a set afterwards leads to undefined results.

    Example:
        product = CartesianProduct(a, b, c)
        product = CartesianProduct(a, b, c, precomputed=True)
        product = CartesianProduct({"precomputed": True}, a, b, c)
    """

    # Positions are accessed with `get`, e.g. over `range(product.count())`.
    __iter__ = None

    def __init__(self, *args: Any, **kwargs: Any):
        """
        Args:
            args: the sets, in order. Option records - a `ProductOptions`
                or a mapping of options - can be given among them.
            kwargs: options; these take precedence over option records.
        """
        sets, opts = options.partition_args(args)
        if kwargs:
            opts = opts.replace(**kwargs)
        self._sets = tuple(sets)
        self._options = opts
        self._layout: Optional[combinatorics.Layout] = None
        if opts.mode == core.Mode.PRECOMPUTED:
            self._layout = combinatorics.layout(self._sets)
        logging.debug(
            "Created product of %d sets, in %s mode", len(self._sets), opts.mode.value
        )

    @property
    def sets(self) -> Sequence[core.Set]:
        """
        Returns the sets, as given. These are not copies.
        """
        return self._sets

    @property
    def options(self) -> options.ProductOptions:
        return self._options

    @property
    def mode(self) -> core.Mode:
        return self._options.mode

    @property
    def dimensions(self) -> int:
        """
        Returns the number of sets, i.e. the length of every tuple.
        """
        return len(self._sets)

    def count(self) -> int:
        """
        Returns the number of tuples in the product.
        This is 1 for a product of no sets, and 0 if any set is empty.
        """
        return self.layout().count

    def last_idx(self) -> int:
        """
        Returns the index of the last tuple in the product, so
        `range(product.last_idx() + 1)` covers every position.
        This is -1 if the product is empty.
        """
        return self.count() - 1

    def layout(self) -> combinatorics.Layout:
        """
        Returns the sizes and factors used to decode positions.
        """
        if self.mode == core.Mode.PRECOMPUTED:
            return self._layout
        return combinatorics.layout(self._sets)

    def indices(self, n: int) -> core.Coordinates:
        """
        Returns the index into each set of the tuple at position `n`.

        Raises:
            InvalidArgumentError: if `n` is not an integer.
            IndexRangeError: if the product is empty, or, unless
                indices wrap around, if `n` is outside of `[0, count)`.
        """
        index = _as_index(n)
        layout = self.layout()
        if layout.count == 0:
            raise core.IndexRangeError(index, layout.count)
        if (
            self._options.out_of_range == core.OutOfRange.RAISE
            and not 0 <= index < layout.count
        ):
            raise core.IndexRangeError(index, layout.count)
        return combinatorics.integer_to_sequence(
            layout.sizes, index, factors=layout.factors
        )

    def index_of(self, indices: Sequence[int]) -> int:
        """
        Returns the position of the tuple made of `indices`, one per set.
        Inverse of `indices`.
        """
        return combinatorics.sequence_to_integer(self.layout().sizes, indices)

    def get(self, n: int) -> core.Element:
        """
        Returns the tuple at position `n`, e.g. `foo, bar = product.get(3)`.
        Positions are zero based.
        """
        return tuple(self._pick(self.indices(n)))

    def get_list(self, n: int) -> List[Any]:
        """
        Returns the tuple at position `n`, as a new list.
        """
        return self._pick(self.indices(n))

    def sample(
        self,
        rng: Optional[Union[int, np.random.Generator]] = None,
        size: Optional[int] = None,
    ) -> Union[core.Element, List[core.Element]]:
        """
        Draws tuples uniformly at random, with replacement.
        Each set is sampled independently, which is equivalent to
        drawing positions in `[0, count)`, even when the count
        exceeds the range of fixed width integers.

        Args:
            rng: a random generator, or a seed for one.
            size: number of tuples to draw. A single tuple is
                returned if None.
        """
        generator = np.random.default_rng(rng)
        layout = self.layout()
        if layout.count == 0:
            raise core.IndexRangeError(0, layout.count)

        def draw() -> core.Element:
            indices = [
                int(generator.integers(0, set_size)) for set_size in layout.sizes
            ]
            return tuple(self._pick(indices))

        if size is None:
            return draw()
        return [draw() for _ in range(size)]

    def _pick(self, indices: Sequence[int]) -> List[Any]:
        return [values[index] for values, index in zip(self._sets, indices)]

    def __len__(self) -> int:
        """
        Same as `count`, but `len` cannot return counts of 2**63 or more;
        use `count` for those.
        """
        return self.count()

    def __getitem__(self, n: int) -> core.Element:
        return self.get(n)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimensions={self.dimensions}, mode={self.mode.value}, out_of_range={self._options.out_of_range.value})"


def _as_index(n: Any) -> int:
    if isinstance(n, (bool, np.bool_)):
        raise core.InvalidArgumentError(f"Index must be an integer. Got: {n!r}")
    try:
        return operator.index(n)
    except TypeError as err:
        raise core.InvalidArgumentError(
            f"Index must be an integer. Got: {type(n).__name__}"
        ) from err
