"""Runtime configuration for console task runners."""

from __future__ import annotations

import os
from dataclasses import dataclass

from task_runner.output import Verbosity

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True)
class RunnerSettings:
    """Console output settings for a task runner."""

    verbosity: Verbosity = Verbosity.NORMAL
    decorated: bool | None = None
    prefer_error_output: bool = True

    @classmethod
    def from_env(cls) -> RunnerSettings:
        """Load settings from environment, falling back to terminal auto-detection."""

        return cls(
            verbosity=_env_verbosity("TASK_RUNNER_VERBOSITY", default=Verbosity.NORMAL),
            decorated=_collect_color_preference(),
            prefer_error_output=_env_bool("TASK_RUNNER_PREFER_STDERR", default=True),
        )


def _env_verbosity(name: str, default: Verbosity) -> Verbosity:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return Verbosity.parse(value)
    except ValueError as error:
        raise ValueError(f"Invalid {name} value: {error}") from error


def _collect_color_preference() -> bool | None:
    if os.getenv("TASK_RUNNER_COLOR") is not None:
        return _env_bool("TASK_RUNNER_COLOR", default=False)
    if os.getenv("NO_COLOR", "").strip():
        return False
    return None


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid {name} value: {value!r}. Expected one of 1/0, true/false, yes/no, on/off.",
    )
