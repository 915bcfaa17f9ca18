"""Kernel layer - the container algebra and the ports it depends on."""

from fnkit.kernel.either import Either, Left, Right
from fnkit.kernel.errors import TaskRejected
from fnkit.kernel.maybe import Maybe
from fnkit.kernel.ports import DoneCallbackPort, LinePort
from fnkit.kernel.task import Settlement, Task

__all__ = [
    "Maybe",
    "Either",
    "Left",
    "Right",
    "Task",
    "Settlement",
    "TaskRejected",
    # Ports
    "LinePort",
    "DoneCallbackPort",
]
