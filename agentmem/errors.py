"""Error hierarchy shared by every part of agentmem.

All errors derive from :class:`AgentMemoryError`, so callers can catch one
base class or narrow down to a family (validation, config, store, lock) or a
single condition.
"""

from __future__ import annotations

import os
from pathlib import Path

_CHAR_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
}


def _quote_char(character: str) -> str:
    """Render a single character quoted and escaped for error messages."""
    escaped = _CHAR_ESCAPES.get(character)
    if escaped is None:
        escaped = character if character.isprintable() else f"\\u{{{ord(character):x}}}"
    return f"'{escaped}'"


class AgentMemoryError(Exception):
    """Base class for every error raised by agentmem."""


# --------------------------------------------------------------------------
# Validation
# --------------------------------------------------------------------------


class ValidationError(AgentMemoryError):
    """Invalid caller input: keys, namespaces, values, names or paths.

    Every instance carries ``field`` (the logical field name) and ``reason``
    (a short, field-independent description of the failure).
    """

    field: str
    reason: str


class EmptyFieldError(ValidationError):
    """A required field was empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must not be empty")
        self.field = field
        self.reason = "value must not be empty"


class TooLongError(ValidationError):
    """A value exceeded its maximum length."""

    def __init__(self, field: str, actual: int, maximum: int) -> None:
        super().__init__(
            f"{field} exceeds maximum length: actual={actual}, max={maximum}"
        )
        self.field = field
        self.actual = actual
        self.maximum = maximum
        self.reason = "value exceeds maximum length"


class TooShortError(ValidationError):
    """A value was shorter than its minimum length."""

    def __init__(self, field: str, actual: int, minimum: int) -> None:
        super().__init__(
            f"{field} is below minimum length: actual={actual}, min={minimum}"
        )
        self.field = field
        self.actual = actual
        self.minimum = minimum
        self.reason = "value is below minimum length"


class InvalidCharacterError(ValidationError):
    """A value contained a character not allowed for its field."""

    def __init__(self, field: str, character: str, index: int) -> None:
        super().__init__(
            f"{field} contains invalid character {_quote_char(character)} "
            f"at byte index {index}"
        )
        self.field = field
        self.character = character
        self.index = index
        self.reason = "value contains invalid characters"


class InvalidEncodingError(ValidationError):
    """A value contained an invalid byte sequence."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} contains invalid encoding")
        self.field = field
        self.reason = "value contains invalid encoding"


class InvalidPathError(ValidationError):
    """A path failed validation."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"invalid path for {field}: {reason}")
        self.field = field
        self.reason = reason


class InvalidSegmentError(ValidationError):
    """A namespace or key segment was malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"invalid segment in {field}: {reason}")
        self.field = field
        self.reason = reason


class InvalidFormatError(ValidationError):
    """A value was structurally invalid."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"invalid {field}: {reason}")
        self.field = field
        self.reason = reason


# --------------------------------------------------------------------------
# Configuration
# --------------------------------------------------------------------------


class ConfigError(AgentMemoryError):
    """The configuration on disk was invalid or incomplete."""


class MissingFieldError(ConfigError):
    """A required configuration field was missing."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing required configuration field: {field}")
        self.field = field


class UnsupportedConfigVersionError(ConfigError):
    """The configuration uses a schema version this release cannot read."""

    def __init__(self, version: int) -> None:
        super().__init__(f"unsupported configuration version: {version}")
        self.version = version


class MalformedConfigError(ConfigError):
    """The configuration was malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"malformed configuration: {reason}")
        self.reason = reason


class InvalidProjectNameError(ConfigError):
    """The configured project name failed validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid project name: {reason}")
        self.reason = reason


class InvalidStorePathError(ConfigError):
    """The configured store path failed validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid store path: {reason}")
        self.reason = reason


class ConfigParseError(ConfigError):
    """The configuration could not be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"failed to parse configuration: {message}")
        self.message = message


# --------------------------------------------------------------------------
# Store
# --------------------------------------------------------------------------


class StoreError(AgentMemoryError):
    """A storage or persistence operation failed."""


class StoreNotInitializedError(StoreError):
    """The store has not been initialized yet."""

    def __init__(self) -> None:
        super().__init__("store is not initialized")


class MissingStoreFileError(StoreError):
    """The store file does not exist."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"store file does not exist: {self.path}")


class MalformedStoreError(StoreError):
    """The store file was malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"store file is malformed: {reason}")
        self.reason = reason


class UnsupportedStoreVersionError(StoreError):
    """The store file uses an unsupported format version."""

    def __init__(self, version: int) -> None:
        super().__init__(f"unsupported store format version: {version}")
        self.version = version


class PreparePathError(StoreError):
    """The store path could not be created or prepared."""

    def __init__(self, path: str | os.PathLike[str], source: OSError) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"failed to prepare store path {self.path}: {source}")
        self.__cause__ = source


class StoreReadError(StoreError):
    """Reading the store failed."""

    def __init__(self, path: str | os.PathLike[str], source: OSError) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"failed to read store {self.path}: {source}")
        self.__cause__ = source


class StoreWriteError(StoreError):
    """Writing the store failed."""

    def __init__(self, path: str | os.PathLike[str], source: OSError) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"failed to write store {self.path}: {source}")
        self.__cause__ = source


class AtomicPersistError(StoreError):
    """Writing the temporary file or the final rename failed."""

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"atomic persist failed for {self.path}: {reason}")


class SerializeError(StoreError):
    """Serializing the store failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"failed to serialize store: {message}")
        self.message = message


class DeserializeError(StoreError):
    """Deserializing the store failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"failed to deserialize store: {message}")
        self.message = message


# --------------------------------------------------------------------------
# Locking
# --------------------------------------------------------------------------


class LockError(AgentMemoryError):
    """A lock could not be acquired or maintained."""


class LockAlreadyHeldError(LockError):
    """The lock is held by another process or owner."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"store lock is already held: {self.path}")


class LockTimeoutError(LockError):
    """Acquiring the lock timed out."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"timed out while acquiring lock: {self.path}")


class LockAcquireError(LockError):
    """Acquiring the lock failed with an I/O error."""

    def __init__(self, path: str | os.PathLike[str], source: OSError) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"failed to acquire lock for {self.path}: {source}")
        self.__cause__ = source


class LockReleaseError(LockError):
    """Releasing the lock failed with an I/O error."""

    def __init__(self, path: str | os.PathLike[str], source: OSError) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"failed to release lock for {self.path}: {source}")
        self.__cause__ = source


# --------------------------------------------------------------------------
# Miscellaneous
# --------------------------------------------------------------------------


class NotFoundError(AgentMemoryError):
    """An explicitly requested entity does not exist."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = str(identifier)


class AgentIOError(AgentMemoryError):
    """An I/O failure outside a more specific storage context."""

    def __init__(self, source: OSError) -> None:
        super().__init__(f"I/O error: {source}")
        self.source = source
        self.__cause__ = source


class CapacityOverflowError(AgentMemoryError):
    """A size or capacity calculation exceeded a defined limit."""

    def __init__(self, context: str) -> None:
        super().__init__(f"overflow while {context}")
        self.context = context


class InternalError(AgentMemoryError):
    """An internal invariant was violated."""

    def __init__(self, message: str) -> None:
        super().__init__(f"internal invariant violation: {message}")
        self.message = message