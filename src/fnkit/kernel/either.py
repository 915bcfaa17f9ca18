"""Either - disjoint success/failure container.

``Left`` carries a failure payload and ignores every ``map``; ``Right``
carries a success payload and transforms it. Each variant has a ``kind``
tag and ``fold`` dispatches on it, so callers never need ``isinstance``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, TypeVar

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")


class Either(ABC, Generic[L, R]):
    """Abstract base of the two variants."""

    kind: ClassVar[Literal["left", "right"]]
    value: Any

    @staticmethod
    def of(value: Any) -> Either[Any, Any]:
        """Right for truthy values, Left for falsy ones (0, "", None, ...)."""
        return Right.of(value) if value else Left.of(value)

    def is_left(self) -> bool:
        return self.kind == "left"

    def is_right(self) -> bool:
        return self.kind == "right"

    def fold(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        if self.kind == "left":
            return on_left(self.value)
        return on_right(self.value)

    @abstractmethod
    def map(self, fn: Callable[[R], U]) -> Either[L, U]:
        """Transform the success payload; failures pass through."""
        pass


@dataclass(frozen=True)
class Left(Either[L, R]):
    """Failure variant."""

    kind: ClassVar[Literal["left"]] = "left"
    value: L

    @staticmethod
    def of(value: L) -> Left[L, Any]:
        return Left(value)

    def map(self, fn: Callable[[R], U]) -> Left[L, U]:
        return self  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"Left({self.value})"


@dataclass(frozen=True)
class Right(Either[L, R]):
    """Success variant."""

    kind: ClassVar[Literal["right"]] = "right"
    value: R

    @staticmethod
    def of(value: R) -> Right[Any, R]:
        return Right(value)

    def map(self, fn: Callable[[R], U]) -> Right[L, U]:
        return Right(fn(self.value))

    def unwrap(self) -> Any:
        """Return the innermost payload of nested Right values."""
        current: Any = self.value
        while isinstance(current, Right):
            current = current.value
        return current

    def __str__(self) -> str:
        return f"Right({self.value})"
