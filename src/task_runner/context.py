"""Per-invocation state handed to a task body."""

from __future__ import annotations

from dataclasses import dataclass, field

from task_runner.output import BufferedOutput, Output


@dataclass(slots=True)
class RunnerContext:
    """Mutable state of one task run.

    ``output`` collects whatever the task wants to print; the runner forwards it
    after the closing status line. ``successful`` stays ``None`` until the task
    gives an explicit verdict, which counts as success.
    """

    output: Output = field(default_factory=BufferedOutput)
    successful: bool | None = None
    status_message: str | None = None
    throw_exceptions: bool = True

    def mark_as_successful(self) -> None:
        self.successful = True

    def mark_as_failed(self) -> None:
        self.successful = False
