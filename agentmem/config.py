"""Validated project configuration and its on-disk JSON form."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs

from .errors import (
    AgentIOError,
    ConfigParseError,
    EmptyFieldError,
    InvalidPathError,
    InvalidProjectNameError,
    InvalidStorePathError,
    MissingFieldError,
    UnsupportedConfigVersionError,
    ValidationError,
)
from .validation import validate_project_name, validate_store_path

__all__ = [
    "CONFIG_VERSION",
    "DEFAULT_CONFIG_FILE_NAME",
    "DEFAULT_STATE_DIR_NAME",
    "DEFAULT_STORE_FILE_NAME",
    "Config",
    "ConfigDraft",
    "resolve_local_config_path",
    "resolve_local_store_path",
]

CONFIG_VERSION = 1
"""Current on-disk configuration format version."""

DEFAULT_CONFIG_FILE_NAME = "agentmem.json"
DEFAULT_STATE_DIR_NAME = ".agentmem"
DEFAULT_STORE_FILE_NAME = "store.json"

_APP_NAME = "agent-hashmap"
_APP_AUTHOR = "agent-memory"
_FIELDS = ("version", "project_name", "store_path")
_MAX_U32 = 0xFFFFFFFF


def _check_version(version: int) -> None:
    if version != CONFIG_VERSION:
        raise UnsupportedConfigVersionError(version)


def _parse_error(detail: str) -> ConfigParseError:
    return ConfigParseError(f"failed to parse configuration JSON: {detail}")


def _io_error(message: str, error: BaseException) -> AgentIOError:
    wrapped = OSError(f"{message}: {error}")
    wrapped.errno = getattr(error, "errno", None)
    return AgentIOError(wrapped)


@dataclass(frozen=True)
class Config:
    """Validated application configuration.

    ``project_name`` is a validated project name and ``store_path`` the
    validated path of the store file.
    """

    project_name: str
    store_path: Path
    version: int = field(default=CONFIG_VERSION, init=False)

    def __post_init__(self) -> None:
        _check_version(self.version)
        validate_project_name(self.project_name)
        object.__setattr__(self, "store_path", validate_store_path(self.store_path))

    def store_dir(self) -> Path | None:
        """The directory holding the store file, or None if there is none."""
        parent = self.store_path.parent
        return None if parent == self.store_path else parent

    def to_dict(self) -> dict[str, Any]:
        """The serializable representation of this config."""
        return {
            "version": self.version,
            "project_name": self.project_name,
            "store_path": str(self.store_path),
        }

    def to_json(self) -> str:
        """Serialize the config as pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, text: str) -> Config:
        """Parse and validate a config from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as error:
            raise _parse_error(str(error)) from error
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Validate an untrusted mapping and build a config from it."""
        if not isinstance(data, Mapping):
            raise _parse_error("expected a JSON object")
        for name in _FIELDS:
            if name not in data:
                raise _parse_error(f"missing field `{name}`")

        version = data["version"]
        if (
            isinstance(version, bool)
            or not isinstance(version, int)
            or not 0 <= version <= _MAX_U32
        ):
            raise _parse_error("field `version` must be an unsigned 32-bit integer")
        project_name = data["project_name"]
        if not isinstance(project_name, str):
            raise _parse_error("field `project_name` must be a string")
        store_path = data["store_path"]
        if not isinstance(store_path, str):
            raise _parse_error("field `store_path` must be a string")

        _check_version(version)

        try:
            validate_project_name(project_name)
        except EmptyFieldError:
            raise MissingFieldError("project_name") from None
        except ValidationError as error:
            raise InvalidProjectNameError(error.reason) from error

        try:
            validate_store_path(store_path)
        except EmptyFieldError:
            raise MissingFieldError("store_path") from None
        except ValidationError as error:
            raise InvalidStorePathError(error.reason) from error

        config = cls(project_name, Path(store_path))
        config.validate()
        return config

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Config:
        """Load a config from a JSON file."""
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise _io_error(f"failed to read config file {path}", error) from error
        return cls.from_json(raw)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the config atomically, creating the parent directory if needed."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise _io_error(
                f"failed to create config directory {path.parent}", error
            ) from error
        _write_atomic(path, self.to_json().encode("utf-8"))

    @staticmethod
    def project_config_path(project_root: str | os.PathLike[str]) -> Path:
        """``<root>/.agentmem/agentmem.json``."""
        return Path(project_root) / DEFAULT_STATE_DIR_NAME / DEFAULT_CONFIG_FILE_NAME

    @staticmethod
    def project_store_path(project_root: str | os.PathLike[str]) -> Path:
        """``<root>/.agentmem/store.json``."""
        return Path(project_root) / DEFAULT_STATE_DIR_NAME / DEFAULT_STORE_FILE_NAME

    @staticmethod
    def default_user_config_path() -> Path:
        """The per-user config file location; nothing is created."""
        directory = platformdirs.user_config_path(_APP_NAME, _APP_AUTHOR)
        return directory / DEFAULT_CONFIG_FILE_NAME

    @staticmethod
    def default_user_store_path() -> Path:
        """The per-user store file location; nothing is created."""
        directory = platformdirs.user_data_path(_APP_NAME, _APP_AUTHOR, roaming=False)
        return directory / DEFAULT_STORE_FILE_NAME

    @classmethod
    def for_project_root(
        cls, project_name: str, project_root: str | os.PathLike[str]
    ) -> Config:
        """A config whose store lives in the project's ``.agentmem`` directory."""
        return cls(project_name, cls.project_store_path(project_root))

    def validate(self) -> None:
        """Check that the config is internally coherent."""
        _check_version(self.version)
        if not self.project_name:
            raise EmptyFieldError("project_name")
        if not self.store_path.name:
            raise InvalidPathError("store_path", "store path must include a file name")


@dataclass(frozen=True)
class ConfigDraft:
    """Options collected during onboarding before a full config exists."""

    project_name: str
    store_path: Path

    def __post_init__(self) -> None:
        validate_project_name(self.project_name)
        object.__setattr__(self, "store_path", validate_store_path(self.store_path))

    def finalize(self) -> Config:
        """Turn the draft into a complete config."""
        return Config(self.project_name, self.store_path)


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as error:
        raise AgentIOError(error) from error


def resolve_local_config_path() -> Path:
    """The project-local config path for the current working directory."""
    return Config.project_config_path(_current_dir())


def resolve_local_store_path() -> Path:
    """The project-local store path for the current working directory."""
    return Config.project_store_path(_current_dir())


def _write_atomic(target: Path, data: bytes) -> None:
    """Write to a hidden sibling file, then rename it over the target."""
    if not target.name:
        raise InvalidPathError("config_path", "target path must have a file name")
    temp_path = target.parent / f".{target.name}.tmp"

    try:
        temp_path.write_bytes(data)
    except OSError as error:
        raise _io_error(
            f"failed to write temporary config file {temp_path}", error
        ) from error

    try:
        os.replace(temp_path, target)
    except OSError as error:
        raise _io_error(
            f"failed to atomically rename {temp_path} to {target}", error
        ) from error