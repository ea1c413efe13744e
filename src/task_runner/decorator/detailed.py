"""Progress formatter that reports task results and failure reasons."""

from __future__ import annotations

from typing import Any

import click


class DetailedProgressDecorator:
    """Puts the closing status on its own line and includes result details.

    ``done`` appends the task's return value, ``failed`` the exception class and
    message, whenever one is available.
    """

    def progress(self, message: str) -> tuple[str, bool]:
        return f"{message}...", True

    def done(self, result: Any = None) -> str:
        text = click.style("Done", fg="green")
        if result is None:
            return text
        return f"{text} ({result})"

    def failed(self, exception: BaseException | None = None) -> str:
        text = click.style("Failed", fg="red")
        if exception is None:
            return text
        return f"{text}: {type(exception).__name__}: {exception}"
