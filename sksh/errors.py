"""Error reporting for the shell: every message carries the shell's prefix."""

from __future__ import annotations

import sys
from typing import TextIO

PREFIX = "sksh: "


class ShellError(Exception):
    """An error a shell command reports to the user, with its exit status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


def format_error(message: str) -> str:
    """Return *message* with the shell's prefix in front of it."""
    return f"{PREFIX}{message}"


def report(message: str, stream: TextIO | None = None) -> None:
    """Write *message*, prefixed, to *stream* (standard error by default)."""
    target = sys.stderr if stream is None else stream
    target.write(format_error(message))
    target.flush()