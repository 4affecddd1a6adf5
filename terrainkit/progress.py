"""Callbacks for reporting progress of long operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


class Progress(ABC):
    """Receiver of progress reports, e.g. to drive a progress bar."""

    @abstractmethod
    def progress_start(self, steps: int, info: str) -> None:
        """An operation of the given number of steps is starting."""

    @abstractmethod
    def progress_stall(self, reason: str) -> None:
        """Progress is held up; the next step restores the original text."""

    @abstractmethod
    def progress_step(self, step: int) -> None:
        """The operation has reached the given step."""

    @abstractmethod
    def progress_complete(self, info: str) -> None:
        """The operation has finished."""


class ProgressScope:
    """Reports start on creation, each step, and completion on leaving a with block."""

    def __init__(self, steps: int, info: str, target: Progress | None) -> None:
        self.steps = steps
        self.info = info
        self._target = target
        self._step = 0
        if self._target is not None:
            self._target.progress_start(self.steps, self.info)

    @property
    def current_step(self) -> int:
        return self._step

    def step(self) -> None:
        """Advance by one step and report it."""
        self._step += 1
        if self._target is not None:
            self._target.progress_step(self._step)

    def __enter__(self) -> ProgressScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._target is not None:
            self._target.progress_complete(self.info + " completed")