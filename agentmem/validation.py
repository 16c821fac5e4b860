"""Validation rules for keys, namespaces, values, project names and store paths.

Every validator returns its input, normalised where that makes sense, when it
is acceptable, and raises a :class:`~agentmem.errors.ValidationError` subclass
otherwise. Lengths are measured in UTF-8 bytes.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path, PurePath

from .errors import (
    EmptyFieldError,
    InvalidCharacterError,
    InvalidEncodingError,
    InvalidFormatError,
    InvalidPathError,
    InvalidSegmentError,
    TooLongError,
    TooShortError,
)
from .limits import (
    MAX_KEY_LEN,
    MAX_KEY_SEGMENT_LEN,
    MAX_NAMESPACE_LEN,
    MAX_PROJECT_NAME_LEN,
    MAX_SEGMENT_COUNT,
    MAX_STORE_FILE_NAME_LEN,
    MAX_STORE_PATH_LEN,
    MAX_VALUE_LEN,
    MIN_KEY_LEN,
    MIN_KEY_SEGMENT_LEN,
    MIN_NAMESPACE_LEN,
    MIN_PROJECT_NAME_LEN,
    MIN_VALUE_LEN,
    within_range,
)

__all__ = [
    "validate_key",
    "validate_namespace",
    "validate_key_leaf",
    "validate_value",
    "validate_project_name",
    "validate_store_path",
]


def validate_key(text: str) -> str:
    """Validate a fully qualified key such as ``agent/claude/current_task``."""
    return _validate_path_like("key", "key_segments", text, MIN_KEY_LEN, MAX_KEY_LEN)


def validate_namespace(text: str) -> str:
    """Validate a namespace such as ``agent/claude``."""
    return _validate_path_like(
        "namespace", "namespace_segments", text, MIN_NAMESPACE_LEN, MAX_NAMESPACE_LEN
    )


def validate_key_leaf(text: str) -> str:
    """Validate a single leaf segment such as ``current_task``."""
    _validate_segment("key_leaf", text)
    return text


def validate_value(text: str) -> str:
    """Validate a stored text value."""
    _validate_common_text("value", text, MIN_VALUE_LEN, MAX_VALUE_LEN)
    return text


def validate_project_name(text: str) -> str:
    """Validate a project name."""
    _validate_common_text(
        "project_name", text, MIN_PROJECT_NAME_LEN, MAX_PROJECT_NAME_LEN
    )
    _check_characters("project_name", text, _is_name_char)
    if text.startswith("-") or text.endswith("-"):
        raise InvalidFormatError("project_name", "must not start or end with '-'")
    return text


def validate_store_path(path: str | os.PathLike[str]) -> Path:
    """Validate a store file path and return it as a :class:`Path`."""
    rendered = os.fspath(path)
    if isinstance(rendered, bytes):
        rendered = os.fsdecode(rendered)

    if not rendered:
        raise EmptyFieldError("store_path")

    length = len(rendered.encode("utf-8", "surrogatepass"))
    if length > MAX_STORE_PATH_LEN:
        raise TooLongError("store_path", length, MAX_STORE_PATH_LEN)

    pure = PurePath(rendered)
    file_name = pure.name
    if file_name in ("", ".."):
        raise InvalidPathError("store_path", "path must include a file name")

    if not file_name.strip():
        raise InvalidPathError("store_path", "file name must not be empty")

    name_length = len(file_name.encode("utf-8", "surrogatepass"))
    if name_length > MAX_STORE_FILE_NAME_LEN:
        raise TooLongError("store_file_name", name_length, MAX_STORE_FILE_NAME_LEN)

    parts = pure.parts[1:] if pure.anchor else pure.parts
    for part in parts:
        _validate_path_component(part)

    return Path(rendered)


def _validate_path_like(
    field: str, count_field: str, text: str, min_len: int, max_len: int
) -> str:
    _validate_common_text(field, text, min_len, max_len)

    if text.startswith("/") or text.endswith("/"):
        raise InvalidFormatError(field, "must not start or end with '/'")
    if "//" in text:
        raise InvalidFormatError(field, "must not contain empty path segments")

    segments = text.split("/")
    if len(segments) > MAX_SEGMENT_COUNT:
        raise TooLongError(count_field, len(segments), MAX_SEGMENT_COUNT)

    for segment in segments:
        _validate_segment(field, segment)
    return text


def _validate_segment(field: str, segment: str) -> None:
    _validate_common_text(field, segment, MIN_KEY_SEGMENT_LEN, MAX_KEY_SEGMENT_LEN)
    if segment in (".", ".."):
        raise InvalidSegmentError(field, "reserved segment is not allowed")
    _check_characters(field, segment, _is_segment_char)


def _utf8_len(field: str, text: str) -> int:
    try:
        return len(text.encode("utf-8"))
    except UnicodeEncodeError:
        raise InvalidEncodingError(field) from None


def _validate_common_text(field: str, text: str, min_len: int, max_len: int) -> None:
    length = _utf8_len(field, text)

    if length == 0 and min_len > 0:
        raise EmptyFieldError(field)

    if not within_range(length, min_len, max_len):
        if length < min_len:
            raise TooShortError(field, length, min_len)
        raise TooLongError(field, length, max_len)

    if "\0" in text:
        raise InvalidFormatError(field, "must not contain NUL bytes")


def _check_characters(field: str, text: str, allowed: Callable[[str], bool]) -> None:
    """Raise for the first disallowed character, reporting its byte index."""
    index = 0
    for character in text:
        if not allowed(character):
            raise InvalidCharacterError(field, character, index)
        index += len(character.encode("utf-8"))


def _validate_path_component(part: str) -> None:
    if part == "..":
        raise InvalidPathError("store_path", "parent traversal ('..') is not allowed")
    if not part.strip():
        raise InvalidPathError("store_path", "path segment must not be empty")
    if part == ".":
        raise InvalidPathError("store_path", "reserved path segment is not allowed")


def _is_segment_char(character: str) -> bool:
    return (character.isascii() and character.isalnum()) or character in "_-."


def _is_name_char(character: str) -> bool:
    return (character.isascii() and character.isalnum()) or character in "_-."