"""
One-shot tasks with explicit cancellation.

Asynchronous demonstrations (lazy image loading, cancellable uploads) run
their work as a Task. A task completes exactly once: done callbacks see a
single TaskOutcome, whether the work succeeded, failed or was cancelled.
"""

# pylint: disable=too-few-public-methods

import concurrent.futures
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class TaskState(Enum):
    """Terminal and non-terminal task states."""

    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TaskOutcome(Generic[T]):
    """Final result of a task.

    Attributes:
        state: SUCCEEDED, FAILED or CANCELLED
        value: Work result when the task succeeded
        error: Exception raised by the work when the task failed
    """

    state: TaskState
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.state == TaskState.SUCCEEDED

    @property
    def cancelled(self) -> bool:
        return self.state == TaskState.CANCELLED


DoneCallback = Callable[[TaskOutcome[Any]], None]


class CancellationToken:
    """Cooperative cancellation flag shared between a task and its caller."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Abort the current work if cancellation was requested.

        Raises:
            concurrent.futures.CancelledError: If the token is cancelled
        """
        if self._event.is_set():
            raise concurrent.futures.CancelledError()


class Task(Generic[T]):
    """A single logical operation with one-shot completion.

    Usage:
        task = Task(lambda token: fetch(token), name="fetch")
        task.add_done_callback(on_done)
        task.start()             # inline
        task.start(executor)     # or on a concurrent.futures executor
        outcome = task.result()
    """

    def __init__(
        self,
        work: Callable[[CancellationToken], T],
        token: Optional[CancellationToken] = None,
        name: str = "task",
    ) -> None:
        """Initialize the task.

        Args:
            work: Callable receiving the cancellation token and returning a value
            token: Token to observe (a fresh one is created if omitted)
            name: Name used in reprs and logs
        """
        self.name = name
        self.token = token or CancellationToken()
        self._work = work
        self._lock = threading.Lock()
        self._state = TaskState.PENDING
        self._outcome: Optional[TaskOutcome[T]] = None
        self._callbacks: List[DoneCallback] = []
        self._future: "concurrent.futures.Future[TaskOutcome[T]]" = (
            concurrent.futures.Future()
        )

    @property
    def state(self) -> TaskState:
        return self._state

    @property
    def done(self) -> bool:
        return self._outcome is not None

    def add_done_callback(self, callback: DoneCallback) -> None:
        """Register a completion callback.

        Callbacks added after completion are invoked immediately. Each callback
        is invoked exactly once.

        Args:
            callback: Function receiving the TaskOutcome
        """
        with self._lock:
            if self._outcome is None:
                self._callbacks.append(callback)
                return
            outcome = self._outcome
        callback(outcome)

    def cancel(self) -> bool:
        """Request cancellation.

        A task that has not started yet completes as cancelled right away; a
        running task completes as cancelled once its work returns.

        Returns:
            False if the task had already completed
        """
        if self.done:
            return False
        self.token.cancel()
        with self._lock:
            not_started = self._state == TaskState.PENDING
        if not_started:
            self._complete(TaskOutcome(TaskState.CANCELLED))
        return True

    def start(
        self, executor: Optional[concurrent.futures.Executor] = None
    ) -> "concurrent.futures.Future[TaskOutcome[T]]":
        """Run the work inline, or submit it to an executor.

        Args:
            executor: Executor to run on; None runs on the calling thread

        Returns:
            Future resolving to the TaskOutcome
        """
        with self._lock:
            if self._state != TaskState.PENDING:
                return self._future
            self._state = TaskState.RUNNING

        if executor is None:
            self._run()
        else:
            executor.submit(self._run)
        return self._future

    def result(self, timeout: Optional[float] = None) -> TaskOutcome[T]:
        """Block until the task completes and return its outcome."""
        return self._future.result(timeout=timeout)

    def _run(self) -> None:
        if self.token.is_cancelled:
            self._complete(TaskOutcome(TaskState.CANCELLED))
            return
        try:
            value = self._work(self.token)
        except concurrent.futures.CancelledError:
            self._complete(TaskOutcome(TaskState.CANCELLED))
        except Exception as exc:  # pylint: disable=broad-except
            self._complete(TaskOutcome(TaskState.FAILED, error=exc))
        else:
            if self.token.is_cancelled:
                self._complete(TaskOutcome(TaskState.CANCELLED))
            else:
                self._complete(TaskOutcome(TaskState.SUCCEEDED, value=value))

    def _complete(self, outcome: TaskOutcome[T]) -> bool:
        with self._lock:
            if self._outcome is not None:
                return False
            self._outcome = outcome
            self._state = outcome.state
            callbacks = list(self._callbacks)
            self._callbacks.clear()

        self._future.set_result(outcome)
        for callback in callbacks:
            callback(outcome)
        return True

    def __repr__(self) -> str:
        return f"Task({self.name!r}, state={self._state.value})"
