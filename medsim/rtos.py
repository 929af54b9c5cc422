"""A minimal cooperative task scheduler built on generators.

A task is a generator that yields :class:`Delay` requests; the scheduler
resumes it once the requested time has passed.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generator, List, Optional

TaskCoroutine = Generator["Delay", None, None]


@dataclass(frozen=True)
class Delay:
    """Request to suspend the current task for ``ms`` milliseconds."""

    ms: float


def task_delay(ms: float) -> Delay:
    """Return a request to block the yielding task for ``ms`` milliseconds."""
    return Delay(ms)


def task_yield() -> Delay:
    """Return a request to give up the processor until the next scheduler pass."""
    return Delay(0)


class Task:
    """A named cooperative task wrapping a generator."""

    def __init__(self, name: str, coroutine: TaskCoroutine) -> None:
        self.name = name
        self._coroutine = coroutine
        self._done = False

    def resume(self, scheduler: "Scheduler") -> None:
        """Run the task until it next blocks, registering the block with ``scheduler``."""
        if self._done:
            raise RuntimeError(f"task {self.name!r} has already finished")
        try:
            request = self._coroutine.send(None)
        except StopIteration:
            self._done = True
            return
        if not isinstance(request, Delay):
            raise TypeError(
                f"task {self.name!r} yielded {request!r}; expected a Delay"
            )
        scheduler._block(self, request)

    def done(self) -> bool:
        return self._done

    def __repr__(self) -> str:
        state = "done" if self._done else "alive"
        return f"Task({self.name!r}, {state})"


@dataclass
class _Blocked:
    task: Task
    deadline: float


class Scheduler:
    """Polls blocked tasks every ``tick`` seconds and resumes the overdue ones."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        tick: float = 0.1,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self.tick = tick
        self._blocked: List[_Blocked] = []

    def create_task(self, coroutine: TaskCoroutine, name: str = "") -> Task:
        """Wrap ``coroutine`` in a task; it does not run until resumed."""
        return Task(name, coroutine)

    def resume(self, task: Task) -> None:
        task.resume(self)

    def _block(self, task: Task, delay: Delay) -> None:
        self._blocked.append(_Blocked(task, self._clock() + delay.ms / 1000.0))

    def run_once(self) -> List[Task]:
        """Sleep one tick, then resume every overdue task; return those resumed."""
        self._sleep(self.tick)
        now = self._clock()
        due = [b for b in self._blocked if now >= b.deadline and not b.task.done()]
        self._blocked = [b for b in self._blocked if b not in due]
        for entry in due:
            entry.task.resume(self)
        return [entry.task for entry in due]

    def start(self, max_iterations: Optional[int] = None) -> None:
        """Run scheduler passes forever, or ``max_iterations`` times if given."""
        if max_iterations is None:
            while True:
                self.run_once()
        for _ in range(max_iterations):
            self.run_once()