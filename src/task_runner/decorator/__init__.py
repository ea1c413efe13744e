"""Progress formatters."""

from task_runner.decorator.base import ProgressDecorator
from task_runner.decorator.detailed import DetailedProgressDecorator
from task_runner.decorator.simple import SimpleProgressDecorator

__all__ = [
    "DetailedProgressDecorator",
    "ProgressDecorator",
    "SimpleProgressDecorator",
]
