from fnkit import Maybe


def test_is_nothing_only_for_none() -> None:
    assert Maybe.of(None).is_nothing()
    assert not Maybe.of(0).is_nothing()
    assert not Maybe.of("").is_nothing()


def test_map_on_value() -> None:
    assert Maybe.of(2).map(lambda v: v + 1) == Maybe.of(3)


def test_map_on_nothing_never_calls_fn() -> None:
    calls = []

    def fn(value):
        calls.append(value)
        return value

    result = Maybe.of(None).map(fn).map(fn)
    assert result.is_nothing()
    assert calls == []


def test_map_to_none_becomes_nothing() -> None:
    assert Maybe.of({"a": 1}).map(lambda d: d.get("b")).is_nothing()


def test_join_flattens_one_layer() -> None:
    nested = Maybe.of(Maybe.of(Maybe.of(5)))
    assert nested.join() == Maybe.of(Maybe.of(5))
    assert Maybe.of(None).join() == Maybe.of(None)


def test_chain() -> None:
    def half(n: int) -> Maybe[int]:
        return Maybe.of(n // 2 if n % 2 == 0 else None)

    assert Maybe.of(8).chain(half).chain(half) == Maybe.of(2)
    assert Maybe.of(6).chain(half).chain(half).is_nothing()


def test_unwrap_returns_innermost_container() -> None:
    assert Maybe.of(Maybe.of(Maybe.of(5))).unwrap() == Maybe.of(5)
    assert Maybe.of(5).unwrap() == Maybe.of(5)


def test_get_or_else_and_str() -> None:
    assert Maybe.of(None).get_or_else("default") == "default"
    assert Maybe.of(1).get_or_else("default") == 1
    assert str(Maybe.of(1)) == "Just(1)"
    assert str(Maybe.of(None)) == "Nothing"
