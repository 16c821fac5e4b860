from pathlib import Path

import pytest

from agentmem.errors import (
    EmptyFieldError,
    InvalidCharacterError,
    InvalidEncodingError,
    InvalidFormatError,
    InvalidPathError,
    InvalidSegmentError,
    TooLongError,
    ValidationError,
)
from agentmem.limits import (
    MAX_KEY_LEN,
    MAX_KEY_SEGMENT_LEN,
    MAX_NAMESPACE_LEN,
    MAX_SEGMENT_COUNT,
    MAX_STORE_FILE_NAME_LEN,
    MAX_STORE_PATH_LEN,
    MAX_VALUE_LEN,
)
from agentmem.validation import (
    validate_key,
    validate_key_leaf,
    validate_namespace,
    validate_project_name,
    validate_store_path,
    validate_value,
)


@pytest.mark.parametrize(
    "key",
    ["agent/claude/current_task", "project/demo/root", "session/2026-04-12/state", "a"],
)
def test_valid_keys_are_returned(key):
    assert validate_key(key) == key


def test_empty_key():
    with pytest.raises(EmptyFieldError) as info:
        validate_key("")
    assert info.value.field == "key"


def test_key_too_long():
    key = "/".join(["a" * 100] * 6)
    with pytest.raises(TooLongError) as info:
        validate_key(key)
    assert info.value.actual == len(key)
    assert info.value.maximum == MAX_KEY_LEN


@pytest.mark.parametrize("key", ["/agent", "agent/", "/"])
def test_key_edge_slashes(key):
    with pytest.raises(InvalidFormatError) as info:
        validate_key(key)
    assert info.value.reason == "must not start or end with '/'"


def test_key_empty_segment():
    with pytest.raises(InvalidFormatError) as info:
        validate_key("agent//task")
    assert info.value.reason == "must not contain empty path segments"


def test_key_too_many_segments():
    key = "/".join(["a"] * (MAX_SEGMENT_COUNT + 1))
    with pytest.raises(TooLongError) as info:
        validate_key(key)
    assert info.value.field == "key_segments"
    assert info.value.actual == MAX_SEGMENT_COUNT + 1
    assert info.value.maximum == MAX_SEGMENT_COUNT


def test_key_with_max_segments_passes():
    key = "/".join(["a"] * MAX_SEGMENT_COUNT)
    assert validate_key(key) == key


@pytest.mark.parametrize("key", ["agent/../task", "agent/./task", ".."])
def test_key_reserved_segments(key):
    with pytest.raises(InvalidSegmentError) as info:
        validate_key(key)
    assert info.value.reason == "reserved segment is not allowed"


def test_key_segment_too_long():
    with pytest.raises(TooLongError) as info:
        validate_key("agent/" + "a" * (MAX_KEY_SEGMENT_LEN + 1))
    assert info.value.maximum == MAX_KEY_SEGMENT_LEN


def test_key_invalid_character_reports_segment_index():
    with pytest.raises(InvalidCharacterError) as info:
        validate_key("agent/cl aude")
    assert info.value.character == " "
    assert info.value.index == 2
    assert info.value.field == "key"


def test_key_nul_rejected():
    with pytest.raises(InvalidFormatError):
        validate_key("agent/a\0b")


def test_lone_surrogate_is_invalid_encoding():
    with pytest.raises(InvalidEncodingError) as info:
        validate_key("agent/\ud800")
    assert info.value.field == "key"


def test_namespace_valid_and_too_long():
    assert validate_namespace("agent/claude") == "agent/claude"
    with pytest.raises(TooLongError) as info:
        validate_namespace("/".join(["a" * 100] * 4))
    assert info.value.maximum == MAX_NAMESPACE_LEN
    assert info.value.field == "namespace"


def test_namespace_too_many_segments_field():
    with pytest.raises(TooLongError) as info:
        validate_namespace("/".join(["n"] * (MAX_SEGMENT_COUNT + 1)))
    assert info.value.field == "namespace_segments"


def test_key_leaf():
    assert validate_key_leaf("run-001") == "run-001"
    with pytest.raises(InvalidCharacterError) as info:
        validate_key_leaf("a/b")
    assert info.value.field == "key_leaf"
    assert info.value.character == "/"


def test_value_rules():
    assert validate_value("") == ""
    assert validate_value("implement local index") == "implement local index"
    with pytest.raises(InvalidFormatError) as info:
        validate_value("a\0b")
    assert info.value.field == "value"


def test_value_length_counts_bytes():
    assert validate_value("x" * MAX_VALUE_LEN) == "x" * MAX_VALUE_LEN
    with pytest.raises(TooLongError) as info:
        validate_value("\u00e9" * (MAX_VALUE_LEN // 2 + 1))
    assert info.value.actual > MAX_VALUE_LEN
    assert info.value.maximum == MAX_VALUE_LEN


def test_project_name_rules():
    assert validate_project_name("example-basic") == "example-basic"
    for name in ("-demo", "demo-"):
        with pytest.raises(InvalidFormatError):
            validate_project_name(name)
    with pytest.raises(EmptyFieldError):
        validate_project_name("")


def test_project_name_byte_index_for_non_ascii():
    with pytest.raises(InvalidCharacterError) as info:
        validate_project_name("caf\u00e9")
    assert info.value.character == "\u00e9"
    assert info.value.index == 3


def test_store_path_valid():
    assert validate_store_path("/repo/.agentmem/store.json") == Path(
        "/repo/.agentmem/store.json"
    )
    assert validate_store_path(Path("store.json")) == Path("store.json")


def test_store_path_empty():
    with pytest.raises(EmptyFieldError) as info:
        validate_store_path("")
    assert info.value.field == "store_path"


@pytest.mark.parametrize("path", ["/", "dir/..", ".."])
def test_store_path_without_file_name(path):
    with pytest.raises(InvalidPathError) as info:
        validate_store_path(path)
    assert info.value.reason == "path must include a file name"


def test_store_path_parent_traversal():
    with pytest.raises(InvalidPathError) as info:
        validate_store_path("repo/../store.json")
    assert info.value.reason == "parent traversal ('..') is not allowed"


def test_store_path_blank_file_name():
    with pytest.raises(InvalidPathError) as info:
        validate_store_path("dir/ ")
    assert info.value.reason == "file name must not be empty"


def test_store_path_blank_segment():
    with pytest.raises(InvalidPathError) as info:
        validate_store_path("dir/ /store.json")
    assert info.value.reason == "path segment must not be empty"


def test_store_file_name_too_long():
    with pytest.raises(TooLongError) as info:
        validate_store_path("dir/" + "f" * (MAX_STORE_FILE_NAME_LEN + 1))
    assert info.value.field == "store_file_name"


def test_store_path_too_long():
    path = "/".join(["d" * 200] * 21) + "/s.json"
    with pytest.raises(TooLongError) as info:
        validate_store_path(path)
    assert info.value.field == "store_path"
    assert info.value.maximum == MAX_STORE_PATH_LEN


def test_all_validation_errors_share_base():
    with pytest.raises(ValidationError):
        validate_key("bad key")