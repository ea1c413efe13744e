"""Progress-reporting wrapper around a single unit of work."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from task_runner.config import RunnerSettings
from task_runner.context import RunnerContext
from task_runner.decorator import ProgressDecorator, SimpleProgressDecorator
from task_runner.output import BufferedOutput, ConsoleOutput, Output, Verbosity
from task_runner.result import TaskResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskRunner:
    """Runs tasks between a progress message and a closing status line.

    Everything a task writes to ``context.output`` is held back and forwarded
    only after the closing line, so ``<message>... Done`` is never interrupted.
    The runner keeps no per-call state; one instance can run any number of tasks.
    """

    def __init__(
        self,
        output: Output,
        progress_decorator: ProgressDecorator | None = None,
        *,
        prefer_error_output: bool = True,
    ):
        self.output = output
        self.progress_decorator = progress_decorator or SimpleProgressDecorator()
        self.prefer_error_output = prefer_error_output

    @classmethod
    def from_settings(
        cls,
        settings: RunnerSettings | None = None,
        progress_decorator: ProgressDecorator | None = None,
    ) -> TaskRunner:
        """Build a console runner from explicit or environment settings."""

        settings = settings or RunnerSettings.from_env()
        return cls(
            ConsoleOutput(settings.verbosity, settings.decorated),
            progress_decorator,
            prefer_error_output=settings.prefer_error_output,
        )

    def run(
        self,
        message: str,
        task: Callable[[RunnerContext], Any],
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> TaskResult:
        """Run a side-effect task and return its derived result."""

        return self._execute(message, task, verbosity, return_value=False)

    def run_value(
        self,
        message: str,
        task: Callable[[RunnerContext], T],
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> T | TaskResult:
        """Run a task and return its value.

        ``TaskResult.FAILURE`` is returned instead when the task raised and
        disabled ``context.throw_exceptions``.
        """

        return self._execute(message, task, verbosity, return_value=True)

    def _execute(
        self,
        message: str,
        task: Callable[[RunnerContext], Any],
        verbosity: Verbosity,
        *,
        return_value: bool,
    ) -> Any:
        destination = self.output.error_output if self.prefer_error_output else self.output
        task_output = BufferedOutput(destination.verbosity, destination.decorated)
        context = RunnerContext(task_output)

        text, newline = self.progress_decorator.progress(message)
        destination.write(text, newline, verbosity)
        logger.debug("Running task %r", message)

        try:
            value = task(context)
            result = TaskResult.from_context(context)

            if context.status_message:
                destination.writeln(context.status_message, verbosity)
            elif result is TaskResult.SUCCESS:
                destination.writeln(self.progress_decorator.done(value), verbosity)
            else:
                destination.writeln(self.progress_decorator.failed(), verbosity)

            logger.debug("Task %r finished: %s", message, result.value)
            if return_value:
                return value
            return result
        except Exception as exc:
            destination.writeln(self.progress_decorator.failed(exc), verbosity)

            if not context.throw_exceptions:
                logger.info("Task %r failed, exception suppressed: %s", message, exc, exc_info=True)
                return TaskResult.FAILURE

            raise
        except BaseException as exc:
            # Interrupts and exits are never suppressed.
            destination.writeln(self.progress_decorator.failed(exc), verbosity)
            raise
        finally:
            destination.write_raw(task_output.fetch())
