"""
This module has the options used to construct a product,
and the parsing of construction arguments.
"""

import collections.abc
import dataclasses
from typing import Any, List, Mapping, Sequence, Tuple, Union

from lazyproduct import core

# Name used by the Perl Set::CartesianProduct::Lazy module.
LEGACY_PRECOMPUTED_KEY = "less_lazy"


@dataclasses.dataclass(frozen=True)
class ProductOptions:
    """
    Class holds the options of a product.

    Args:
        precomputed: cache sizes and factors at construction.
            Faster queries, but later changes to the sets are not
            accounted for - results become undefined.
        out_of_range: what to do with an index outside of `[0, count)`.
    """

    precomputed: bool = False
    out_of_range: core.OutOfRange = core.OutOfRange.RAISE

    def __post_init__(self):
        if not isinstance(self.precomputed, bool):
            raise core.InvalidArgumentError(
                f"`precomputed` must be a bool. Got: {self.precomputed!r}"
            )
        # frozen, so we bypass __setattr__ to normalize string values
        object.__setattr__(self, "out_of_range", _out_of_range(self.out_of_range))

    @property
    def mode(self) -> core.Mode:
        return core.Mode.PRECOMPUTED if self.precomputed else core.Mode.LAZY

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ProductOptions":
        """
        Creates options from a mapping, e.g. `{"precomputed": True}`.
        """
        return cls(**_normalize_keys(mapping))

    def replace(self, **kwargs: Any) -> "ProductOptions":
        """
        Returns a copy of these options, updated with `kwargs`.
        """
        return dataclasses.replace(self, **_normalize_keys(kwargs))


def partition_args(
    args: Sequence[Any],
) -> Tuple[List[core.Set], ProductOptions]:
    """
    Splits construction arguments into sets and options.
    Option records can be mixed with sets, in any position;
    if there are several, later ones take precedence.

    Args:
        args: sets, and option records - `ProductOptions` or mappings.

    Returns:
        The sets in their given order, and the merged options.
    """
    sets: List[core.Set] = []
    options = ProductOptions()
    for position, arg in enumerate(args):
        if isinstance(arg, ProductOptions):
            options = options.replace(**dataclasses.asdict(arg))
        elif isinstance(arg, collections.abc.Mapping):
            options = dataclasses.replace(options, **_normalize_keys(arg))
        elif is_set(arg):
            sets.append(arg)
        else:
            raise core.InvalidArgumentError(
                f"Argument {position} is neither a sequence nor options: {type(arg).__name__}"
            )
    return sets, options


def is_set(value: Any) -> bool:
    """
    Returns True if `value` supports `len` and integer indexing,
    e.g. lists, tuples, ranges, strings and 1-D arrays.
    """
    if isinstance(value, collections.abc.Mapping):
        return False
    if isinstance(value, collections.abc.Sequence):
        return True
    return hasattr(value, "__len__") and hasattr(value, "__getitem__")


def _normalize_keys(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    fields = {field.name for field in dataclasses.fields(ProductOptions)}
    normalized = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            raise core.InvalidArgumentError(
                f"Option names must be strings. Got: {key!r}"
            )
        if key == LEGACY_PRECOMPUTED_KEY:
            key, value = "precomputed", bool(value)
        if key not in fields:
            raise core.InvalidArgumentError(
                f"Unknown option {key!r}. Expected one of: {sorted(fields)}"
            )
        normalized[key] = value
    return normalized


def _out_of_range(value: Union[str, core.OutOfRange]) -> core.OutOfRange:
    try:
        return core.OutOfRange(value)
    except ValueError as err:
        raise core.InvalidArgumentError(
            f"`out_of_range` must be one of {[policy.value for policy in core.OutOfRange]}. Got: {value!r}"
        ) from err
