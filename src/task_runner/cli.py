"""Click helpers for commands that report progress through a task runner."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

import click

from task_runner.config import RunnerSettings
from task_runner.output import ConsoleOutput, Verbosity
from task_runner.runner import TaskRunner

_VERBOSE_LEVELS: tuple[Verbosity, ...] = (
    Verbosity.VERBOSE,
    Verbosity.VERY_VERBOSE,
    Verbosity.DEBUG,
)


def verbosity_from_flags(verbose: int, quiet: bool, default: Verbosity) -> Verbosity:
    """Translate ``-q`` / ``-v`` / ``-vv`` / ``-vvv`` into a verbosity level."""

    if quiet:
        return Verbosity.QUIET
    if verbose <= 0:
        return default
    return _VERBOSE_LEVELS[min(verbose, len(_VERBOSE_LEVELS)) - 1]


def task_runner_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add verbosity and color options to a command and pass it a ``runner``."""

    @click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity: -v verbose, -vv very verbose, -vvv debug.",
    )
    @click.option("-q", "--quiet", is_flag=True, default=False, help="Only show quiet-level lines.")
    @click.option(
        "--color/--no-color",
        default=None,
        help="Force or disable ANSI colors. Auto-detected by default.",
    )
    @functools.wraps(func)
    def wrapper(*args: Any, verbose: int, quiet: bool, color: bool | None, **kwargs: Any) -> Any:
        settings = RunnerSettings.from_env()
        output = ConsoleOutput(
            verbosity_from_flags(verbose, quiet, settings.verbosity),
            color if color is not None else settings.decorated,
        )
        runner = TaskRunner(output, prefer_error_output=settings.prefer_error_output)
        return func(*args, runner=runner, **kwargs)

    return wrapper
