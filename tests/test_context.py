from __future__ import annotations

import allure

from task_runner.context import RunnerContext
from task_runner.output import BufferedOutput

pytestmark = [
    allure.epic("Task Execution"),
    allure.feature("Runner Context"),
]


def test_context_starts_without_verdict() -> None:
    context = RunnerContext()

    assert context.successful is None
    assert context.status_message is None
    assert context.throw_exceptions is True
    assert isinstance(context.output, BufferedOutput)


def test_mark_as_successful_updates_success_state() -> None:
    context = RunnerContext()

    context.mark_as_successful()

    assert context.successful is True


def test_mark_as_failed_updates_success_state() -> None:
    context = RunnerContext()

    context.mark_as_failed()
    context.mark_as_failed()

    assert context.successful is False


def test_last_verdict_wins() -> None:
    context = RunnerContext()

    context.mark_as_failed()
    context.mark_as_successful()

    assert context.successful is True


def test_context_uses_supplied_output() -> None:
    output = BufferedOutput()
    context = RunnerContext(output)

    context.output.writeln("captured")

    assert output.fetch() == "captured\n"


def test_each_context_gets_its_own_output() -> None:
    first = RunnerContext()
    second = RunnerContext()

    first.output.write("only here")

    assert second.output.fetch() == ""
