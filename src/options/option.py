from __future__ import annotations

__all__ = ["Option"]

import typing as t

from typing_extensions import override

T = t.TypeVar("T")
R = t.TypeVar("R")


class _NotSet:
    __slots__ = ()

    @override
    def __str__(self) -> str:
        return "<NotSet>"

    __repr__ = __str__


_NOT_SET: t.Final[_NotSet] = _NotSet()


class Option(t.Generic[T]):
    """Zero or one value of type `T`.

    Absence is tracked with a private sentinel, so `Option.of(None)` is a present option that holds `None`. The only
    way to get the value out is `handle`, which forces the caller to say what happens when there is none.
    """

    __slots__ = ("__value",)

    @classmethod
    def empty(cls) -> Option[T]:
        return cls()

    @classmethod
    def of(cls, value: T) -> Option[T]:
        return cls(value)

    @classmethod
    def from_nullable(cls, value: t.Optional[T]) -> Option[T]:
        """Treat `None` as absence, anything else as a present value."""
        return cls(value) if value is not None else cls()

    def __init__(self, value: t.Union[T, _NotSet] = _NOT_SET) -> None:
        self.__value = value

    def handle(self, on_some: t.Optional[t.Callable[[T], R]], on_none: t.Callable[[], R]) -> R:
        """Call `on_some` with the value if there is one, otherwise call `on_none`; return the result.

        An unset `on_some` resolves to the `on_none` branch.
        """
        if on_none is None:
            msg = "on_none must be set"
            raise TypeError(msg, "on_none")

        value = self.__value
        if isinstance(value, _NotSet) or on_some is None:
            return on_none()

        return on_some(value)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented

        return self.__key() == other.__key()

    @override
    def __hash__(self) -> int:
        return hash(self.__key())

    @override
    def __str__(self) -> str:
        return f"<Option[{self.__value}]>"

    @override
    def __repr__(self) -> str:
        return f"Option({self.__value!r})" if not isinstance(self.__value, _NotSet) else "Option()"

    def __key(self) -> tuple[bool, object]:
        # NOTE: the sentinel is never compared, so `Option()` and `Option(None)` stay distinct.
        return (False, None) if isinstance(self.__value, _NotSet) else (True, self.__value)
