"""Port protocols - the host capabilities the kernel talks to."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class LinePort(Protocol):
    """Line-oriented output port (console, logger, ...)."""

    def write_line(self, *parts: Any) -> None:
        """Write one informational line."""
        ...

    def write_error_line(self, *parts: Any) -> None:
        """Write one error line."""
        ...


class DoneCallbackPort(Protocol):
    """A completion primitive with a single done-callback channel.

    ``asyncio.Future`` and ``concurrent.futures.Future`` both satisfy it.
    """

    def add_done_callback(self, fn: Callable[[Any], object], /) -> None: ...
    def cancelled(self) -> bool: ...
    def exception(self) -> BaseException | None: ...
    def result(self) -> Any: ...
