from .combinators import (
    HOLE,
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
from .config import LogConfig
from .kernel import Either, Left, Maybe, Right, Settlement, Task, TaskRejected
from .logs import LoggerLines, fn_error, fn_log

__all__ = [
    # Containers
    "Maybe",
    "Either",
    "Left",
    "Right",
    "Task",
    "Settlement",
    "TaskRejected",
    # Combinators
    "HOLE",
    "partial",
    "curry",
    "compose",
    "pipe",
    "identity",
    "tap",
    "alt",
    "and_",
    "then",
    "if_else",
    "cond",
    "when",
    "seq",
    "fork",
    "functionalize",
    # Logging
    "LogConfig",
    "LoggerLines",
    "fn_log",
    "fn_error",
]
