"""Output destinations the task runner writes progress lines into."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TextIO

import click


class Verbosity(IntEnum):
    """Console verbosity levels, lowest first."""

    QUIET = 16
    NORMAL = 32
    VERBOSE = 64
    VERY_VERBOSE = 128
    DEBUG = 256

    @classmethod
    def parse(cls, value: str) -> Verbosity:
        """Resolve a level from its case-insensitive name, e.g. ``very_verbose``."""

        normalized = value.strip().upper().replace("-", "_")
        try:
            return cls[normalized]
        except KeyError as error:
            allowed = ", ".join(level.name.lower() for level in cls)
            raise ValueError(
                f"Invalid verbosity {value!r}. Expected one of: {allowed}.",
            ) from error


class Output(ABC):
    """Narrow write interface shared by all destinations.

    ``write`` and ``writeln`` are gated by the destination's verbosity threshold,
    ``write_raw`` is not. Styling produced by ``click.style`` is removed when the
    destination is explicitly not decorated.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL, decorated: bool | None = None):
        self._verbosity = verbosity
        self.decorated = decorated

    @property
    def verbosity(self) -> Verbosity:
        return self._verbosity

    @property
    def error_output(self) -> Output:
        """Secondary channel for status lines; outputs without one return themselves."""

        return self

    def is_enabled(self, verbosity: Verbosity) -> bool:
        return verbosity <= self.verbosity

    def write(
        self,
        text: str,
        newline: bool = False,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        if not self.is_enabled(verbosity):
            return
        self._emit(self._format(text), newline, verbosity)

    def writeln(self, text: str, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self.write(text, True, verbosity)

    def write_raw(self, text: str) -> None:
        """Pass text through regardless of the verbosity threshold."""

        self._emit(self._format(text), False, None)

    def _format(self, text: str) -> str:
        if self.decorated is False:
            return click.unstyle(text)
        return text

    @abstractmethod
    def _emit(self, text: str, newline: bool, verbosity: Verbosity | None) -> None:
        """Deliver already formatted text; ``verbosity`` is None for raw writes."""


class ConsoleOutput(Output):
    """Terminal destination backed by ``click.echo``.

    With ``decorated=None`` click decides whether to keep ANSI styling based on
    whether the target stream is a terminal.
    """

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.NORMAL,
        decorated: bool | None = None,
        *,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        err: bool = False,
    ):
        super().__init__(verbosity, decorated)
        self._stream = stream
        self._error_stream = error_stream
        self._err = err

    @property
    def error_output(self) -> Output:
        if self._err:
            return self
        return ConsoleOutput(
            self.verbosity,
            self.decorated,
            stream=self._error_stream,
            err=True,
        )

    def _emit(self, text: str, newline: bool, verbosity: Verbosity | None) -> None:
        click.echo(text, file=self._stream, nl=newline, err=self._err, color=self.decorated)


class BufferedOutput(Output):
    """In-memory capture sink."""

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL, decorated: bool | None = False):
        super().__init__(verbosity, decorated)
        self._chunks: list[str] = []

    def fetch(self) -> str:
        """Return everything written so far and clear the buffer."""

        content = "".join(self._chunks)
        self._chunks.clear()
        return content

    def _emit(self, text: str, newline: bool, verbosity: Verbosity | None) -> None:
        self._chunks.append(text + "\n" if newline else text)


_LOG_LEVELS: dict[Verbosity, int] = {
    Verbosity.QUIET: logging.WARNING,
    Verbosity.NORMAL: logging.INFO,
    Verbosity.VERBOSE: logging.DEBUG,
    Verbosity.VERY_VERBOSE: logging.DEBUG,
    Verbosity.DEBUG: logging.DEBUG,
}


class LoggerOutput(Output):
    """Adapter writing progress lines as records of a stdlib logger.

    The logger's effective level acts as the verbosity threshold. Partial writes
    are joined until a line break arrives, so a progress message and its closing
    status end up in a single record.
    """

    def __init__(self, logger: logging.Logger):
        super().__init__(decorated=False)
        self.logger = logger
        self._pending = ""
        self._pending_level: int | None = None

    @staticmethod
    def level_for(verbosity: Verbosity) -> int:
        return _LOG_LEVELS[verbosity]

    @property
    def verbosity(self) -> Verbosity:
        effective = self.logger.getEffectiveLevel()
        if effective <= logging.DEBUG:
            return Verbosity.DEBUG
        if effective <= logging.INFO:
            return Verbosity.NORMAL
        return Verbosity.QUIET

    def is_enabled(self, verbosity: Verbosity) -> bool:
        return self.logger.isEnabledFor(_LOG_LEVELS[verbosity])

    def _emit(self, text: str, newline: bool, verbosity: Verbosity | None) -> None:
        if self._pending_level is not None:
            level = self._pending_level
        elif verbosity is None:
            level = max(self.logger.getEffectiveLevel(), logging.DEBUG)
        else:
            level = _LOG_LEVELS[verbosity]

        *lines, rest = (self._pending + text + ("\n" if newline else "")).split("\n")
        if verbosity is None and rest:
            lines.append(rest)
            rest = ""
        for line in lines:
            self.logger.log(level, line)

        self._pending = rest
        self._pending_level = level if rest else None
