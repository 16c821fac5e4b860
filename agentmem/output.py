"""Human-facing terminal output with stable, ASCII-only prefixes."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from enum import Enum
from typing import Any, TextIO

from .errors import AgentMemoryError

__all__ = [
    "MessageLevel",
    "print_info",
    "print_success",
    "print_warning",
    "print_error",
    "print_line",
    "print_field",
    "print_heading",
    "print_blank_line",
    "format_error",
    "print_list",
]


class MessageLevel(Enum):
    """Severity of a rendered message; the value is its prefix."""

    INFO = "[info]"
    SUCCESS = "[ok]"
    WARNING = "[warn]"
    ERROR = "[error]"

    @property
    def prefix(self) -> str:
        return self.value


def _write_message(stream: TextIO, level: MessageLevel, message: str) -> None:
    print(f"{level.prefix} {message}", file=stream)


def print_info(message: str) -> None:
    """Write an informational message to stdout."""
    _write_message(sys.stdout, MessageLevel.INFO, message)


def print_success(message: str) -> None:
    """Write a success message to stdout."""
    _write_message(sys.stdout, MessageLevel.SUCCESS, message)


def print_warning(message: str) -> None:
    """Write a warning to stderr."""
    _write_message(sys.stderr, MessageLevel.WARNING, message)


def print_error(error: AgentMemoryError) -> None:
    """Write an error to stderr."""
    _write_message(sys.stderr, MessageLevel.ERROR, format_error(error))


def print_line(message: Any) -> None:
    """Write a plain line to stdout."""
    print(message, file=sys.stdout)


def print_field(label: Any, value: Any) -> None:
    """Write a label/value pair with the label padded to 18 columns."""
    print(f"{label!s:<18} {value}", file=sys.stdout)


def print_heading(title: str) -> None:
    """Write a title underlined with dashes."""
    print(title, file=sys.stdout)
    print("-" * len(title.encode("utf-8")), file=sys.stdout)


def print_blank_line() -> None:
    """Write an empty line to stdout."""
    print(file=sys.stdout)


def format_error(error: AgentMemoryError) -> str:
    """A concise user-facing rendering of an error."""
    return str(error)


def print_list(items: Iterable[Any]) -> None:
    """Write each item on its own line."""
    for item in items:
        print(item, file=sys.stdout)