# agentmem

Building blocks for a local-first memory engine for AI coding agents. The
package validates namespace-style keys such as `agent/codex/current_task`,
keeps key/value pairs in a sorted in-memory map, and manages a project's
configuration in a hidden `.agentmem/` directory inside the project root.

## Modules

- `agentmem.validation` — rules for keys, namespaces, key leaves, values,
  project names and store paths: `validate_key`, `validate_namespace`,
  `validate_key_leaf`, `validate_value`, `validate_project_name` and
  `validate_store_path`. Each returns its input when it is valid
  (`validate_store_path` returns a `Path`) and raises a subclass of
  `agentmem.errors.ValidationError` otherwise.
- `agentmem.namespace` — helpers for `/`-separated keys:
  `is_key_within_namespace`, `join_namespace_and_leaf`, `parent_namespace`,
  `namespace_ancestors`, `namespace_depth`, `key_depth`, `namespace_leaf`,
  `key_leaf`, `split_key`, `common_namespace` and `trim_outer_separators`.
- `agentmem.memory_map` — `MemoryMap`, a map of validated keys to validated
  values that iterates in key order, with `Entry` (a `(key, value)` named
  tuple) and `MapStats`.
- `agentmem.config` — `Config`, the validated project configuration, saved
  as pretty-printed JSON through an atomic write, and `ConfigDraft`;
  `resolve_local_config_path()` and `resolve_local_store_path()` give the
  project-local paths for the current directory.
- `agentmem.limits` — the hard limits the validators enforce, and
  `within_range`.
- `agentmem.output` — terminal output with stable prefixes (`[info]`,
  `[ok]`, `[warn]`, `[error]`): `print_info`, `print_success`,
  `print_warning`, `print_error`, `print_line`, `print_field`,
  `print_heading`, `print_blank_line`, `print_list` and `format_error`.
- `agentmem.prompts` — `prompt_project_name`, `prompt_store_path_default`
  and `prompt_confirm`, which read answers from standard input.
- `agentmem.onboarding` — `run_onboarding()` and `run_onboarding_in()`, the
  interactive first-run setup, returning an `OnboardingResult`.
- `agentmem.errors` — the exception hierarchy, rooted at `AgentMemoryError`.

## Validating keys

```python
from agentmem.errors import ValidationError
from agentmem.validation import validate_key

validate_key("agent/claude/current_task")   # returns the key

try:
    validate_key("agent//current_task")
except ValidationError as error:
    print(error)   # invalid key: must not contain empty path segments
```

Key segments may contain ASCII letters, digits, `_`, `-` and `.`; a segment
of just `.` or `..` is reserved. A key is at most 512 bytes and 32 segments,
a segment at most 128 bytes. Values are text of up to 512 KiB without NUL
characters.

## Namespaces

```python
from agentmem.namespace import is_key_within_namespace, split_key

is_key_within_namespace("agent/claude/task", "agent/claude")     # True
is_key_within_namespace("agent/claudette/task", "agent/claude")  # False
split_key("agent/claude/task")   # ("agent/claude", "task")
split_key("agent")               # None
```

## The in-memory map

```python
from agentmem.memory_map import MemoryMap

memory = MemoryMap()
memory.insert("agent/codex/current_task", "implement local index")
memory.insert("agent/claude/current_task", "review architecture")

for entry in memory:                  # sorted by key
    print(f"{entry.key} = {entry.value}")

memory.require("agent/missing")       # raises NotFoundError
```

`insert` validates both key and value, returns the previous value if there
was one, and raises `CapacityOverflowError` once the map holds 1,000,000
entries.

## Project configuration

```python
from pathlib import Path

from agentmem.config import Config

root = Path.cwd()
config = Config.for_project_root("my-project", root)
config.save(Config.project_config_path(root))   # .agentmem/agentmem.json

loaded = Config.load(Config.project_config_path(root))
print(loaded.to_json())
```

The store path defaults to `.agentmem/store.json` in the project root.
`Config.default_user_config_path()` and `Config.default_user_store_path()`
give per-user locations instead; neither creates any directory. Loading a
file with a different schema version raises
`UnsupportedConfigVersionError`; unparsable JSON raises `ConfigParseError`.

## Interactive setup

`run_onboarding()` asks for a project name and a store path, shows a
preview and writes `.agentmem/agentmem.json` in the current directory once
confirmed; declining raises `InternalError`. `run_onboarding_in(project_root)`
does the same for a given directory.

## Errors

Every error derives from `AgentMemoryError`. Its families are
`ValidationError`, `ConfigError`, `StoreError` and `LockError`, alongside
`NotFoundError`, `AgentIOError`, `CapacityOverflowError` and `InternalError`.

## What this package does not do

- It installs no command-line program; the functions above are called from
  Python.
- It does not persist map entries: `MemoryMap` lives in memory only, and
  nothing reads or writes the store file that `Config.store_path` names.
  The `StoreError` and `LockError` families are defined but not raised by
  any function in the package.
- It has no file locking, no code index or search, and no background
  service.