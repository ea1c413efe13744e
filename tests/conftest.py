"""Shared test fixtures."""

from __future__ import annotations

import pytest

from task_runner.output import BufferedOutput
from task_runner.runner import TaskRunner

_ENV_VARS = (
    "TASK_RUNNER_VERBOSITY",
    "TASK_RUNNER_COLOR",
    "TASK_RUNNER_PREFER_STDERR",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep runner settings independent of the developer's shell."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def output() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture()
def runner(output: BufferedOutput) -> TaskRunner:
    return TaskRunner(output)
