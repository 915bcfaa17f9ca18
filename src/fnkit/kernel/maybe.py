"""Maybe - a container for a value that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """Optional value wrapper.

    ``None`` is the absent sentinel. Instances are immutable; ``map``
    always produces a new container.
    """

    value: T | None = None

    @staticmethod
    def of(value: T | None) -> Maybe[T]:
        return Maybe(value)

    def is_nothing(self) -> bool:
        return self.value is None

    def map(self, fn: Callable[[T], U]) -> Maybe[U]:
        if self.is_nothing():
            return Maybe.of(None)
        return Maybe.of(fn(self.value))  # type: ignore[arg-type]

    def join(self) -> Any:
        """Remove one layer of nesting."""
        if self.is_nothing():
            return Maybe.of(None)
        return self.value

    def chain(self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return self.map(fn).join()

    def unwrap(self) -> Maybe[Any]:
        """Return the innermost Maybe of a nested stack."""
        current: Maybe[Any] = self
        while isinstance(current.value, Maybe):
            current = current.value
        return current

    def get_or_else(self, default: U) -> T | U:
        return default if self.is_nothing() else self.value  # type: ignore[return-value]

    def __str__(self) -> str:
        return "Nothing" if self.is_nothing() else f"Just({self.value})"
