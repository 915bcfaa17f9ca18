"""Combinators - higher-order function composition primitives."""

from .ops import (
    alt,
    and_,
    compose,
    cond,
    curry,
    fork,
    functionalize,
    identity,
    if_else,
    partial,
    pipe,
    seq,
    tap,
    then,
    when,
)
from .types import HOLE, Clause, Predicate

__all__ = [
    "HOLE",
    "Clause",
    "Predicate",
    # Application
    "partial",
    "curry",
    "functionalize",
    # Composition
    "compose",
    "pipe",
    "identity",
    "tap",
    # Branching
    "alt",
    "and_",
    "then",
    "if_else",
    "cond",
    "when",
    "seq",
    "fork",
]
