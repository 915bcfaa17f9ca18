"""Combinator primitives: partial, curry, compose, pipe, and branching helpers."""

# Combinators satisfy the following algebraic laws:
#
# 1. Identity: compose(f, identity) == compose(identity, f) == f
#
# 2. Associativity: compose(f, compose(g, h)) == compose(compose(f, g), h)
#
# 3. Duality: compose(f, g, h) == pipe(h, g, f)
#
# 4. Curry is arity-transparent: curry(f)(a)(b) == curry(f)(a, b) == f(a, b)
#
# 5. Tap is observationally identity: tap(f)(x) == x


from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

from .types import HOLE, Clause, Predicate, holds

T = TypeVar("T")
U = TypeVar("U")


def partial(fn: Callable[..., T], *partial_args: Any) -> Callable[..., T]:
    """Pre-fill ``fn``'s positional arguments, leaving ``HOLE`` gaps.

    Semantics:
        - Each HOLE is filled left-to-right by the call's arguments
        - Leftover call arguments are appended
        - Holes that remain unfilled are passed as HOLE

    Each call starts from the original argument list, so calls are
    independent of each other.

    Args:
        fn: The function to apply.
        *partial_args: Fixed arguments, with HOLE for positions to fill later.

    Returns:
        Callable[..., T]: A function taking the remaining arguments.
    """
    def applied(*args: Any) -> T:
        filled = list(partial_args)
        supplied = iter(args)
        for i, arg in enumerate(filled):
            if arg is HOLE:
                try:
                    filled[i] = next(supplied)
                except StopIteration:
                    break
        filled.extend(supplied)
        return fn(*filled)

    return applied


def curry(fn: Callable[..., T], arity: int | None = None) -> Callable[..., Any]:
    """Collect positional arguments across calls until ``arity`` is reached.

    Args:
        fn: The function to curry.
        arity: Number of arguments to collect. Defaults to the number of
            required positional parameters of ``fn``. Builtins without an
            introspectable signature (``max``, ``min``, ...) need it given.

    Returns:
        Callable[..., Any]: ``fn``'s result once enough arguments are
        collected, otherwise another collecting function.

    Raises:
        ValueError: If ``arity`` is negative, or omitted for a function
            whose signature cannot be inspected.
    """
    if arity is None:
        arity = _required_positional(fn)
    if arity < 0:
        raise ValueError("arity must be non-negative")

    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return fn(*args)
        return lambda *more: curried(*args, *more)

    return curried


def _required_positional(fn: Callable[..., Any]) -> int:
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Cannot infer the arity of {fn!r}; pass arity= explicitly"
        ) from exc
    return sum(
        1
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose(f, g, h)(x) == f(g(h(x)))"""
    ordered = tuple(reversed(fns))
    return lambda value: reduce(lambda acc, fn: fn(acc), ordered, value)


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """pipe(f, g, h)(x) == h(g(f(x)))"""
    return lambda value: reduce(lambda acc, fn: fn(acc), fns, value)


def identity(value: T) -> T:
    return value


def tap(fn: Callable[[T], Any] | None) -> Callable[[T], T]:
    """Run ``fn`` for its side effect and pass the value through."""
    def tapped(value: T) -> T:
        if callable(fn):
            fn(value)
        return value

    return tapped


def alt(f: Callable[[T], Any], g: Callable[[T], Any]) -> Callable[[T], Any]:
    return lambda value: f(value) or g(value)


def and_(f: Callable[[T], Any], g: Callable[[T], Any]) -> Callable[[T], Any]:
    return lambda value: f(value) and g(value)


def then(pred: Predicate, fn: Callable[[T], U]) -> Callable[[T], T | U]:
    """Apply ``fn`` when ``pred`` holds, otherwise pass the value through."""
    return lambda value: fn(value) if holds(pred, value) else value


def if_else(condition: Predicate, f: Callable[[T], U], g: Callable[[T], U]) -> Callable[[T], U]:
    return lambda value: f(value) if holds(condition, value) else g(value)


def cond(*clauses: Clause) -> Callable[[Any], Any]:
    """Dispatch to the first clause whose predicate holds.

    Semantics:
        - Clauses are ``(predicate, action)`` pairs checked in order
        - The first match returns ``action(value)``
        - With no match the value is returned unchanged

    Args:
        *clauses: ``(predicate, action)`` pairs.

    Returns:
        Callable[[Any], Any]: The dispatching function.
    """
    def dispatch(value: Any) -> Any:
        for pred, action in clauses:
            if holds(pred, value):
                return action(value)
        return value

    return dispatch


def when(pred: Callable[[T], Any], fn: Callable[[T], T]) -> Callable[[T], T]:
    """Apply ``fn`` repeatedly while ``pred`` holds.

    The caller guarantees that ``fn`` eventually makes ``pred`` false.
    """
    def loop(value: T) -> T:
        while pred(value):
            value = fn(value)
        return value

    return loop


def seq(*fns: Callable[[T], Any]) -> Callable[[T], None]:
    """Call every function with the value, discarding results."""
    def run_all(value: T) -> None:
        for fn in fns:
            fn(value)

    return run_all


def fork(join: Callable[[Any, Any], U], f: Callable[[T], Any], g: Callable[[T], Any]) -> Callable[[T], U]:
    return lambda value: join(f(value), g(value))


def functionalize(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Callable[[], T]:
    """Freeze a call into a zero-argument thunk."""
    return lambda: fn(*args, **kwargs)
