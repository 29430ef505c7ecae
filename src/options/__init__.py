import logging

from options.combinators import (
    as_nullable,
    as_unprotected,
    coalesce,
    get_value_or_default,
    get_value_or_throw,
    intersect,
    is_some,
    lift,
    transform,
)
from options.errors import NoneError
from options.option import Option

__all__ = [
    "NoneError",
    "Option",
    "as_nullable",
    "as_unprotected",
    "coalesce",
    "get_value_or_default",
    "get_value_or_throw",
    "intersect",
    "is_some",
    "lift",
    "transform",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
