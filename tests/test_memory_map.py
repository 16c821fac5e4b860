import pytest

from agentmem import memory_map
from agentmem.errors import (
    CapacityOverflowError,
    InvalidFormatError,
    NotFoundError,
    ValidationError,
)
from agentmem.memory_map import Entry, MapStats, MemoryMap


def test_insert_returns_previous_value():
    m = MemoryMap()
    assert m.insert("agent/codex/current_task", "first") is None
    assert m.insert("agent/codex/current_task", "second") == "first"
    assert m.get("agent/codex/current_task") == "second"
    assert len(m) == 1


def test_entries_sorted_by_key():
    m = MemoryMap()
    for key in ("b/x", "a/y", "c/z", "a/a"):
        m.insert(key, key.upper())
    assert m.keys() == sorted(["b/x", "a/y", "c/z", "a/a"])
    assert [e.key for e in m.entries()] == m.keys()
    assert m.values() == [k.upper() for k in m.keys()]
    assert list(m) == m.entries()


def test_get_missing_returns_none():
    assert MemoryMap().get("missing") is None


def test_require_and_remove_required_raise_not_found():
    m = MemoryMap()
    with pytest.raises(NotFoundError) as info:
        m.require("agent/task")
    assert info.value.kind == "key"
    assert info.value.identifier == "agent/task"
    with pytest.raises(NotFoundError):
        m.remove_required("agent/task")


def test_remove():
    m = MemoryMap([("k1", "v1"), ("k2", "v2")])
    assert m.remove("k1") == "v1"
    assert m.remove("k1") is None
    assert m.remove_required("k2") == "v2"
    assert len(m) == 0


def test_contains_and_clear():
    m = MemoryMap([("a", "1")])
    assert "a" in m
    assert "b" not in m
    m.clear()
    assert "a" not in m
    assert m.stats() == MapStats(entry_count=0, is_empty=True)


def test_first_and_last():
    m = MemoryMap()
    assert m.first() is None
    assert m.last() is None
    m.extend([("m", "mid"), ("a", "low"), ("z", "high")])
    assert m.first() == Entry("a", "low")
    assert m.last() == Entry("z", "high")


def test_stats():
    m = MemoryMap([("a", "1"), ("b", "2")])
    assert m.stats() == MapStats(entry_count=2, is_empty=False)


def test_construct_from_entries_equals_extend():
    pairs = [Entry("agent/claude/current_task", "review architecture"),
             Entry("agent/codex/current_task", "implement index query")]
    built = MemoryMap(pairs)
    extended = MemoryMap()
    extended.extend(pairs)
    assert built == extended
    assert built.entries() == pairs


def test_insert_validates_key_and_value():
    m = MemoryMap()
    with pytest.raises(ValidationError):
        m.insert("bad key", "value")
    with pytest.raises(InvalidFormatError):
        m.insert("good/key", "a\0b")
    assert len(m) == 0


def test_capacity_limit(monkeypatch):
    monkeypatch.setattr(memory_map, "MAX_ENTRY_COUNT", 2)
    m = MemoryMap()
    m.insert("a", "1")
    m.insert("b", "2")
    with pytest.raises(CapacityOverflowError) as info:
        m.insert("c", "3")
    assert info.value.context == "inserting beyond MAX_ENTRY_COUNT"
    assert m.keys() == ["a", "b"]