import pytest

from fnkit import Either, Left, Right


@pytest.mark.parametrize("value", [1, "text", [0], True, -1])
def test_of_truthy_is_right(value) -> None:
    result = Either.of(value)
    assert isinstance(result, Right)
    assert result.value == value


@pytest.mark.parametrize("value", [0, "", False, None, []])
def test_of_falsy_is_left(value) -> None:
    result = Either.of(value)
    assert isinstance(result, Left)
    assert result.value == value


def test_left_map_returns_same_instance() -> None:
    left = Left.of("boom")
    assert left.map(lambda v: v + "!") is left


def test_failure_propagates_through_chain() -> None:
    calls = []

    def step(value):
        calls.append(value)
        return value

    result = Right.of(5).map(lambda v: None).map(step)
    assert result == Right(None)
    failed = Either.of(0).map(step).map(step).map(step)
    assert failed == Left(0)
    assert calls == [None]


def test_right_map_composition() -> None:
    def f(x):
        return x + 1

    def g(x):
        return x * 3

    assert Right.of(2).map(f).map(g) == Right.of(g(f(2)))


def test_right_unwrap_nested() -> None:
    assert Right.of(Right.of(Right.of("core"))).unwrap() == "core"
    assert Right.of(4).unwrap() == 4


def test_left_has_no_unwrap() -> None:
    assert not hasattr(Left.of(1), "unwrap")


def test_str() -> None:
    assert str(Left.of("bad")) == "Left(bad)"
    assert str(Right.of(3)) == "Right(3)"


def test_kind_tag_and_fold() -> None:
    assert Left.of(1).kind == "left"
    assert Right.of(1).kind == "right"
    assert Left.of(1).is_left() and not Left.of(1).is_right()
    assert Right.of(1).is_right()

    def describe(either):
        return either.fold(lambda e: f"error: {e}", lambda v: f"ok: {v}")

    assert describe(Either.of("")) == "error: "
    assert describe(Either.of(42)) == "ok: 42"


def test_either_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Either()  # type: ignore[abstract]
