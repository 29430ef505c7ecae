import typing as t

import pytest

from options.option import Option


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(42, id="int"),
        pytest.param("foo", id="str"),
        pytest.param((1, 2), id="tuple"),
        pytest.param(None, id="none is a value"),
    ],
)
def test_handle_present_returns_on_some_result(value: object) -> None:
    assert Option.of(value).handle(lambda x: x, lambda: "default") == value


def test_handle_empty_returns_on_none_result() -> None:
    assert Option[int].empty().handle(lambda _: False, lambda: True) is True


def test_handle_calls_exactly_one_branch() -> None:
    calls = list[str]()

    def on_some(value: int) -> int:
        calls.append("some")
        return value

    def on_none() -> int:
        calls.append("none")
        return -1

    Option.of(1).handle(on_some, on_none)
    Option[int].empty().handle(on_some, on_none)

    assert calls == ["some", "none"]


@pytest.mark.parametrize(
    "option",
    [
        pytest.param(Option.of(1), id="present"),
        pytest.param(Option[int].empty(), id="empty"),
    ],
)
def test_handle_with_unset_on_some_resolves_to_on_none(option: Option[int]) -> None:
    assert option.handle(None, lambda: "none") == "none"


def test_handle_with_unset_on_none_raises_type_error() -> None:
    with pytest.raises(TypeError):
        Option.of(1).handle(lambda v: v, t.cast(t.Callable[[], int], None))


def test_handle_propagates_on_some_error() -> None:
    def fail(_: int) -> int:
        raise KeyError("boom")

    with pytest.raises(KeyError, match="boom"):
        Option.of(1).handle(fail, lambda: 0)


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        pytest.param(Option.of(1), Option.of(1), True, id="same values"),
        pytest.param(Option(1), Option.of(1), True, id="constructor and of"),
        pytest.param(Option(), Option[int].empty(), True, id="both empty"),
        pytest.param(Option.of(1), Option.of(2), False, id="different values"),
        pytest.param(Option.of(None), Option.empty(), False, id="none value is not empty"),
        pytest.param(Option.of(1), 1, False, id="not an option"),
    ],
)
def test_eq(left: Option[object], right: object, expected: bool) -> None:
    assert (left == right) is expected


def test_hash_is_consistent_with_eq() -> None:
    assert {Option.of(1), Option(1), Option.empty(), Option.of(None)} == {Option.of(1), Option.empty(), Option(None)}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param(None, Option.empty(), id="none"),
        pytest.param(0, Option.of(0), id="falsy value"),
        pytest.param("foo", Option.of("foo"), id="str"),
    ],
)
def test_from_nullable(value: t.Optional[object], expected: Option[object]) -> None:
    assert Option.from_nullable(value) == expected


@pytest.mark.parametrize(
    ("option", "expected"),
    [
        pytest.param(Option.of("foo"), "Option('foo')", id="present"),
        pytest.param(Option.of(None), "Option(None)", id="present none"),
        pytest.param(Option.empty(), "Option()", id="empty"),
    ],
)
def test_repr(option: Option[object], expected: str) -> None:
    assert repr(option) == expected


def test_is_immutable() -> None:
    option = Option.of(1)

    with pytest.raises(AttributeError):
        option.value = 2  # type: ignore[attr-defined]

    assert option == Option.of(1)
