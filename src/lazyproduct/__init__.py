__author__ = "guilherme"
__version__ = "0.1.0"
__email__ = "guilherme@dsv.su.se"
__description__ = "Lazy random access into Cartesian products"
__uri__ = "https://github.com/guidj/lazyproduct"

import logging.config

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
        },
        "handlers": {
            "default": {
                "level": "INFO",
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "loggers": {"": {"handlers": ["default"], "level": "INFO", "propagate": True}},
    }
)

from lazyproduct.core import (  # noqa: E402
    IndexRangeError,
    InvalidArgumentError,
    LazyProductError,
    Mode,
    OutOfRange,
)
from lazyproduct.options import ProductOptions  # noqa: E402
from lazyproduct.product import CartesianProduct  # noqa: E402

__all__ = [
    "CartesianProduct",
    "IndexRangeError",
    "InvalidArgumentError",
    "LazyProductError",
    "Mode",
    "OutOfRange",
    "ProductOptions",
]
