"""Task - deferred computation with explicit reject/resolve branching."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from fnkit.kernel.errors import TaskRejected
from fnkit.kernel.ports import DoneCallbackPort

logger = logging.getLogger(__name__)

E = TypeVar("E")
V = TypeVar("V")
R = TypeVar("R")

Reject = Callable[[Any], None]
Resolve = Callable[[Any], None]
Computation = Callable[[Reject, Resolve], None]


@dataclass
class Settlement:
    """Outcome tracker for one ``Task.fork`` invocation.

    States:
    - forked: the computation is running, no continuation called yet
    - rejected: ``reject`` was called first
    - resolved: ``resolve`` was called first

    Terminal states are final once their continuation returns. A
    continuation that raises leaves the settlement ``forked``, so the
    failure can still be delivered through ``reject``. A computation that
    never calls either continuation stays ``forked`` forever; that is the
    caller's contract and is not detected.
    """

    state: Literal["forked", "rejected", "resolved"] = "forked"
    value: Any = None

    @property
    def settled(self) -> bool:
        return self.state != "forked"

    def _settle(self, state: Literal["rejected", "resolved"], value: Any, callback: Callable[[Any], None]) -> None:
        if self.settled:
            verb = "reject" if state == "rejected" else "resolve"
            logger.warning("Ignoring %s(%r) on a task already %s", verb, value, self.state)
            return
        self.state = state
        self.value = value
        try:
            callback(value)
        except Exception:
            self.state = "forked"
            self.value = None
            raise


@dataclass(frozen=True)
class Task(Generic[E, V]):
    """Deferred computation.

    Wraps a computation ``(reject, resolve) -> None``. Building and chaining
    a Task does no work; the computation runs only when ``fork`` supplies
    concrete continuations. Every combinator returns a new Task closing
    over this one.

    Rejection is a value delivered to ``reject``. Exceptions raised by
    functions passed to ``map``/``chain``/``fold`` propagate out of ``fork``
    when the chain settles synchronously; use ``Task.attempt`` to route them
    into ``reject`` explicitly. Chains settled by a ``from_promised`` primitive
    deliver them to ``reject``.
    """

    computation: Computation

    def fork(self, reject: Reject, resolve: Resolve) -> Settlement:
        """Run the computation, exactly one continuation is honoured."""
        settlement = Settlement()
        self.computation(
            lambda reason: settlement._settle("rejected", reason, reject),
            lambda value: settlement._settle("resolved", value, resolve),
        )
        return settlement

    def map(self, f: Callable[[V], R]) -> Task[E, R]:
        def computation(reject: Reject, resolve: Resolve) -> None:
            self.fork(reject, lambda x: resolve(f(x)))

        return Task(computation)

    def chain(self, f: Callable[[V], Task[E, R]]) -> Task[E, R]:
        """Sequence ``f``'s task after this one resolves."""

        def computation(reject: Reject, resolve: Resolve) -> None:
            self.fork(reject, lambda x: f(x).fork(reject, resolve))

        return Task(computation)

    def apend(self, other: Task[E, Any]) -> Task[E, Any]:
        """Apply this task's resolved function to ``other``'s resolved value.

        ``other`` forks only after this task resolves.
        """

        def computation(reject: Reject, resolve: Resolve) -> None:
            self.fork(reject, lambda fn: other.fork(reject, lambda x: resolve(fn(x))))

        return Task(computation)

    def concat(self, other: Task[E, Any]) -> Task[E, list[Any]]:
        """Resolve with both results as one list, this task's first."""

        def computation(reject: Reject, resolve: Resolve) -> None:
            def on_left(x: Any) -> None:
                head = list(x) if isinstance(x, (list, tuple)) else [x]
                other.fork(reject, lambda y: resolve(head + (list(y) if isinstance(y, (list, tuple)) else [y])))

            self.fork(reject, on_left)

        return Task(computation)

    def concat_(self, other: Task[E, Any]) -> Task[E, Any]:
        """Like ``concat`` without coercion; both results must support ``+``."""

        def computation(reject: Reject, resolve: Resolve) -> None:
            self.fork(reject, lambda x: other.fork(reject, lambda y: resolve(x + y)))

        return Task(computation)

    def fold(self, f: Callable[[E], Task[Any, R]], g: Callable[[V], Task[Any, R]]) -> Task[Any, R]:
        """Redirect rejection into ``f``'s task and resolution into ``g``'s."""

        def computation(reject: Reject, resolve: Resolve) -> None:
            self.fork(
                lambda x: f(x).fork(reject, resolve),
                lambda x: g(x).fork(reject, resolve),
            )

        return Task(computation)

    async def run(self) -> V:
        """Fork on the running loop and await the outcome.

        Returns:
            The resolved value

        Raises:
            TaskRejected: If the task rejects
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[V] = loop.create_future()

        def set_result(value: V) -> None:
            if not future.done():
                future.set_result(value)

        def set_rejected(reason: Any) -> None:
            if future.done():
                return
            exc = TaskRejected(reason)
            if isinstance(reason, BaseException):
                exc.__cause__ = reason
            future.set_exception(exc)

        self.fork(
            lambda reason: loop.call_soon_threadsafe(set_rejected, reason),
            lambda value: loop.call_soon_threadsafe(set_result, value),
        )
        return await future

    @staticmethod
    def of(value: V) -> Task[Any, V]:
        return Task(lambda reject, resolve: resolve(value))

    @staticmethod
    def rejected(reason: E) -> Task[E, Any]:
        return Task(lambda reject, resolve: reject(reason))

    @staticmethod
    def attempt(fn: Callable[..., V], *args: Any, **kwargs: Any) -> Task[Exception, V]:
        """Task calling ``fn`` when forked; a raised Exception becomes a rejection."""

        def computation(reject: Reject, resolve: Resolve) -> None:
            try:
                value = fn(*args, **kwargs)
            except Exception as exc:
                reject(exc)
                return
            resolve(value)

        return Task(computation)

    @staticmethod
    def from_promised(fn: Callable[..., Any]) -> Callable[..., Task[BaseException, Any]]:
        """Adapt a function returning a future or awaitable into a Task factory.

        ``fn`` is called on every fork, not when the factory is called.
        Futures (anything with ``add_done_callback``) are attached as-is;
        other awaitables are scheduled on the running loop first.

        Completion arrives in a loop or worker callback with no caller to
        raise into, so an exception raised further down the chain (by a
        function given to ``map``, ``chain``, ``fold``, ...) is delivered
        to ``reject`` instead.

        Args:
            fn: Function returning an asyncio/concurrent future or an awaitable

        Returns:
            Function with ``fn``'s parameters that builds a Task
        """

        def factory(*args: Any, **kwargs: Any) -> Task[BaseException, Any]:
            def computation(reject: Reject, resolve: Resolve) -> None:
                _attach(fn(*args, **kwargs), reject, resolve)

            return Task(computation)

        return factory


def _attach(primitive: Any, reject: Reject, resolve: Resolve) -> None:
    """Route a host primitive's completion channels into reject/resolve."""
    if not callable(getattr(primitive, "add_done_callback", None)):
        if not inspect.isawaitable(primitive):
            raise TypeError(f"Expected a future or awaitable, got {type(primitive).__name__}")
        logger.debug("Scheduling %s on the running loop", type(primitive).__name__)
        primitive = asyncio.ensure_future(primitive)

    def on_done(done: DoneCallbackPort) -> None:
        if done.cancelled():
            reject(asyncio.CancelledError())
            return
        exc = done.exception()
        if exc is not None:
            reject(exc)
            return
        try:
            resolve(done.result())
        except Exception as exc:
            logger.debug("Continuation raised %r, rejecting", exc)
            reject(exc)

    primitive.add_done_callback(on_done)
