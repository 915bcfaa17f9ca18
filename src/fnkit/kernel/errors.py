"""Error types raised at the edges of the container algebra."""

from __future__ import annotations


class TaskRejected(Exception):
    """Raised by ``Task.run`` when the task settles through ``reject``.

    Inside a task chain rejection is a plain value; this exception only
    exists where a chain is bridged into ``await``.
    """

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__(f"Task rejected: {reason!r}")

    def __repr__(self) -> str:
        return f"TaskRejected(reason={self.reason!r})"
