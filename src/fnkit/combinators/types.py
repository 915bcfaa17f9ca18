"""Combinator types and the partial-application placeholder."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, Union


class _Hole:
    """Placeholder marking a position ``partial`` fills on call."""

    _instance: _Hole | None = None

    def __new__(cls) -> _Hole:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "HOLE"


HOLE: Final = _Hole()

# A predicate is either evaluated against the value or used for its truthiness.
Predicate = Union[Callable[[Any], Any], Any]
Clause = tuple[Predicate, Callable[[Any], Any]]


def holds(pred: Predicate, value: Any) -> bool:
    """Evaluate a callable predicate against ``value``, or a plain one as-is."""
    return bool(pred(value)) if callable(pred) else bool(pred)
