"""Free functions over `Option`.

Every function here is built on `Option.handle` alone, so none of them can forget the empty case.
"""

from __future__ import annotations

__all__ = [
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

import logging
import typing as t

from options.errors import NoneError
from options.option import _NOT_SET, Option, _NotSet

T = t.TypeVar("T")
R = t.TypeVar("R")
T1 = t.TypeVar("T1")
T2 = t.TypeVar("T2")
E = t.TypeVar("E", bound=BaseException)

_LOGGER = logging.getLogger(__name__)


def transform(option: Option[T], func: t.Optional[t.Callable[[T], R]]) -> Option[R]:
    """Map the value of `option` with `func`, keeping it wrapped.

    If `func` is not set, the result is always empty.
    """
    return Option.from_nullable(func).handle(
        lambda f: option.handle(lambda v: Option[R].of(f(v)), Option[R].empty),
        Option[R].empty,
    )


def get_value_or_default(option: Option[T], default: T) -> T:
    return option.handle(lambda v: v, lambda: default)


@t.overload
def get_value_or_throw(option: Option[T]) -> T: ...


@t.overload
def get_value_or_throw(option: Option[T], create_error: t.Optional[t.Callable[[], E]]) -> T: ...


def get_value_or_throw(
    option: Option[T],
    create_error: t.Union[t.Optional[t.Callable[[], E]], _NotSet] = _NOT_SET,
) -> T:
    """Return the value of `option` or raise.

    Without `create_error` an empty option raises `NoneError`. With it, the error returned by `create_error()` is
    raised instead; the factory is only called when the option is empty.

    :raises TypeError: `create_error` was passed but is `None`.
    """

    factory: t.Callable[[], BaseException]
    if isinstance(create_error, _NotSet):
        factory = NoneError

    elif create_error is None:
        msg = "create_error must be set"
        raise TypeError(msg, "create_error")

    else:
        factory = create_error

    def raise_error() -> t.NoReturn:
        error = factory()
        _LOGGER.debug("option is empty, raising %r", error)
        raise error

    return option.handle(lambda v: v, raise_error)


def is_some(option: Option[T]) -> bool:
    return get_value_or_default(transform(option, lambda _: True), False)


def as_nullable(option: Option[T]) -> t.Optional[T]:
    return get_value_or_default(transform(option, lambda v: t.cast(t.Optional[T], v)), None)


def as_unprotected(option: Option[T]) -> t.Optional[T]:
    """Leave the option world: the value itself (which may be `None`), or `None` when empty."""
    return get_value_or_default(t.cast(Option[t.Optional[T]], option), None)


def intersect(first: Option[T1], second: Option[T2]) -> Option[tuple[T1, T2]]:
    """Pair up the values of both options; empty unless both are present.

    `second` is not inspected when `first` is empty.
    """
    return first.handle(
        lambda v1: transform(second, lambda v2: (v1, v2)),
        Option[tuple[T1, T2]].empty,
    )


def coalesce(options: t.Optional[t.Iterable[Option[T]]]) -> Option[T]:
    """Return the first present option from `options`, or an empty one.

    Iteration stops at the first present option, so `options` may be a lazy (even infinite) iterable.
    """
    if options is None:
        return Option[T].empty()

    for option in options:
        if is_some(option):
            return option

    _LOGGER.debug("no present option to coalesce")
    return Option[T].empty()


def lift(option: Option[T], selector: t.Optional[t.Callable[[T], Option[R]]]) -> Option[R]:
    """Chain `option` into `selector`, which returns an option of its own (monadic bind).

    The option returned by `selector` is passed through as is. If `selector` is not set, the result is empty.
    """
    if selector is None:
        return Option[R].empty()

    return get_value_or_default(transform(option, selector), Option[R].empty())
