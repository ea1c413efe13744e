from __future__ import annotations

import allure
import click

from task_runner.decorator import DetailedProgressDecorator, SimpleProgressDecorator

pytestmark = [
    allure.epic("Progress Output"),
    allure.feature("Decorators"),
]


def test_simple_progress_appends_ellipsis_without_newline() -> None:
    assert SimpleProgressDecorator().progress("Do something") == ("Do something... ", False)


def test_simple_done_returns_styled_done_marker() -> None:
    decorator = SimpleProgressDecorator()

    assert decorator.done() == click.style("Done", fg="green")
    assert click.unstyle(decorator.done("ignored value")) == "Done"


def test_simple_failed_returns_styled_failed_marker() -> None:
    decorator = SimpleProgressDecorator()

    assert decorator.failed() == click.style("Failed", fg="red")
    assert click.unstyle(decorator.failed(RuntimeError("boom"))) == "Failed"


def test_detailed_progress_requests_newline() -> None:
    assert DetailedProgressDecorator().progress("Do something") == ("Do something...", True)


def test_detailed_done_includes_result() -> None:
    decorator = DetailedProgressDecorator()

    assert click.unstyle(decorator.done()) == "Done"
    assert click.unstyle(decorator.done(3)) == "Done (3)"


def test_detailed_failed_includes_exception() -> None:
    decorator = DetailedProgressDecorator()

    assert click.unstyle(decorator.failed()) == "Failed"
    assert click.unstyle(decorator.failed(ValueError("bad input"))) == "Failed: ValueError: bad input"
