"""Binary task outcome."""

from __future__ import annotations

from enum import Enum

from task_runner.context import RunnerContext


class TaskResult(str, Enum):
    """Outcome of one task run, derived from its context."""

    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def from_context(cls, context: RunnerContext) -> TaskResult:
        if context.successful is False:
            return cls.FAILURE
        return cls.SUCCESS

    @property
    def is_success(self) -> bool:
        return self is TaskResult.SUCCESS
