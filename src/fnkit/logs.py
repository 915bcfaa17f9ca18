"""Logging collaborator - deferred line writers.

``fn_log`` and ``fn_error`` build thunks; nothing is written until the
thunk is called. Output goes to a ``LinePort``, by default a stdlib
logger configured through ``LogConfig``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fnkit.combinators import functionalize
from fnkit.config import LogConfig
from fnkit.kernel.ports import LinePort


class LoggerLines(LinePort):
    """LinePort backed by a ``logging.Logger``; parts are joined with spaces."""

    def __init__(
        self,
        logger: logging.Logger,
        line_level: int = logging.INFO,
        error_level: int = logging.ERROR,
    ) -> None:
        self.logger = logger
        self.line_level = line_level
        self.error_level = error_level

    @classmethod
    def from_config(cls, config: LogConfig | None = None) -> LoggerLines:
        config = config or LogConfig()
        return cls(
            logging.getLogger(config.logger_name),
            line_level=config.level_number(config.line_level),
            error_level=config.level_number(config.error_level),
        )

    def write_line(self, *parts: Any) -> None:
        self.logger.log(self.line_level, _join(parts))

    def write_error_line(self, *parts: Any) -> None:
        self.logger.log(self.error_level, _join(parts))


def _join(parts: tuple[Any, ...]) -> str:
    return " ".join(str(part) for part in parts)


def fn_log(message: Any = "", *params: Any, lines: LinePort | None = None) -> Callable[[], None]:
    """Thunk writing ``[message, *params]`` as one line when called."""
    port = lines or LoggerLines.from_config()
    return functionalize(port.write_line, "" if message is None else message, *params)


def fn_error(message: Any = "", *params: Any, lines: LinePort | None = None) -> Callable[[], None]:
    """Thunk writing ``[message, *params]`` as one error line when called."""
    port = lines or LoggerLines.from_config()
    return functionalize(port.write_error_line, "" if message is None else message, *params)
