"""Progress reporting for console tasks."""

from task_runner.config import RunnerSettings
from task_runner.context import RunnerContext
from task_runner.decorator import (
    DetailedProgressDecorator,
    ProgressDecorator,
    SimpleProgressDecorator,
)
from task_runner.output import BufferedOutput, ConsoleOutput, LoggerOutput, Output, Verbosity
from task_runner.result import TaskResult
from task_runner.runner import TaskRunner

__version__ = "0.1.0"

__all__ = [
    "BufferedOutput",
    "ConsoleOutput",
    "DetailedProgressDecorator",
    "LoggerOutput",
    "Output",
    "ProgressDecorator",
    "RunnerContext",
    "RunnerSettings",
    "SimpleProgressDecorator",
    "TaskResult",
    "TaskRunner",
    "Verbosity",
    "__version__",
]
