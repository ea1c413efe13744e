"""Default single-line progress formatter."""

from __future__ import annotations

from typing import Any

import click


class SimpleProgressDecorator:
    """Renders ``<message>... Done`` on one line."""

    def progress(self, message: str) -> tuple[str, bool]:
        return f"{message}... ", False

    def done(self, result: Any = None) -> str:
        return click.style("Done", fg="green")

    def failed(self, exception: BaseException | None = None) -> str:
        return click.style("Failed", fg="red")
