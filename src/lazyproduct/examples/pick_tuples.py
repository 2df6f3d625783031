"""
Example on picking random tuples from a Cartesian product,
without generating it.
"""

import argparse
import dataclasses
import logging
from typing import Optional

import numpy as np

from lazyproduct import product

FIRST = ["foo", "bar", "baz", "bah"]
SECOND = ["wibble", "wobble", "weeble"]
THIRD = ["nip", "nop"]


@dataclasses.dataclass(frozen=True)
class Args:
    num_picks: int
    precomputed: bool
    seed: Optional[int]


def parse_args() -> Args:
    arg_parser = argparse.ArgumentParser(prog="Cartesian Product - Random Picks")
    arg_parser.add_argument("--num-picks", type=int, default=5)
    arg_parser.add_argument("--precomputed", action="store_true")
    arg_parser.add_argument("--seed", type=int, default=None)
    arg_parser.set_defaults(precomputed=False)
    args, _ = arg_parser.parse_known_args()
    return Args(**vars(args))


def main(args: Args):
    cartesian_product = product.CartesianProduct(
        FIRST, SECOND, THIRD, precomputed=args.precomputed
    )
    logging.info(
        "Count: %d, last index: %d, mode: %s",
        cartesian_product.count(),
        cartesian_product.last_idx(),
        cartesian_product.mode.value,
    )
    rng = np.random.default_rng(args.seed)
    for _ in range(args.num_picks):
        position = int(rng.integers(0, cartesian_product.count()))
        logging.info("Position %d: %s", position, cartesian_product.get(position))


if __name__ == "__main__":
    main(parse_args())
