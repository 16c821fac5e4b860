"""Interactive prompts for onboarding and destructive confirmations."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .errors import AgentIOError, InvalidFormatError, ValidationError
from .validation import validate_project_name, validate_store_path

__all__ = ["prompt_project_name", "prompt_store_path_default", "prompt_confirm"]


def _prompt_line(prompt: str) -> str:
    """Show ``prompt`` and read one line; an empty string means end of input."""
    try:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = sys.stdin.readline()
    except OSError as error:
        raise AgentIOError(error) from error
    if "\0" in line:
        raise InvalidFormatError("prompt_input", "must not contain NUL bytes")
    return line


def _end_of_input() -> AgentIOError:
    return AgentIOError(OSError("unexpected end of input"))


def prompt_project_name() -> str:
    """Ask for a project name until a valid one is entered."""
    while True:
        raw = _prompt_line("Project name: ")
        try:
            return validate_project_name(raw.strip())
        except ValidationError as error:
            if not raw:
                raise _end_of_input() from error
            print(f"[error] {error}", file=sys.stderr)


def prompt_store_path_default(default_path: str | os.PathLike[str]) -> Path:
    """Ask for a store path; an empty answer accepts ``default_path``."""
    default_path = Path(default_path)
    prompt = f"Store path [{default_path}]: "
    while True:
        raw = _prompt_line(prompt)
        candidate = raw.strip()
        resolved = Path(candidate) if candidate else default_path
        try:
            return validate_store_path(resolved)
        except ValidationError as error:
            if not raw:
                raise _end_of_input() from error
            print(f"[error] {error}", file=sys.stderr)


def prompt_confirm(question: str, default: bool) -> bool:
    """Ask a yes/no question; an empty answer selects ``default``."""
    suffix = "[Y/n]" if default else "[y/N]"
    prompt = f"{question} {suffix}: "
    while True:
        answer = _prompt_line(prompt).strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("[warn] please answer yes or no", file=sys.stderr)