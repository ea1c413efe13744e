"""Formatting contract for progress and status lines."""

from __future__ import annotations

from typing import Any, Protocol


class ProgressDecorator(Protocol):
    """Protocol implemented by progress formatters.

    Implementations must be pure and never raise.
    """

    def progress(self, message: str) -> tuple[str, bool]:
        """Return the in-progress text and whether a line break should follow it."""

    def done(self, result: Any = None) -> str:
        """Return the closing text for a successful task."""

    def failed(self, exception: BaseException | None = None) -> str:
        """Return the closing text for a failed task."""
