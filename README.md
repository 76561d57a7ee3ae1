# dagtrack

`dagtrack` holds the logic of a task tracker in which tasks form a directed
acyclic graph. A task may depend on other tasks; the guards in
`dagtrack.state` allow a task to start only when it is pending, no other task
is in progress and every prerequisite is completed.

## What is in the package

- **`dagtrack.models`**: the `Task`, `Dependency`, `Artifact` and
  `TaskDetail` dataclasses, the `TaskStatus` enum (`pending`, `in_progress`,
  `completed`, `blocked`, `cancelled`, `split`) and the `EditAction` enum
  (`complete`, `stop`, `cancel`, `block`, `unblock`). `TaskStatus.from_db`
  and `EditAction.from_str` raise `InvalidStatusError` for unknown strings;
  `TaskStatus.display_char` gives the one-character symbol for a status.
  `Task`, `Artifact` and `TaskDetail` have `to_dict` for serialization.
- **`dagtrack.ordering`**: float-based manual ordering with a gap of
  `ORDER_GAP = 10.0`. `calculate_manual_order(tasks, after_id, before_id)`
  appends after the highest order, places a task after or before another, or
  takes the midpoint between two tasks. It raises `TaskNotFoundError` for an
  unknown id, `NotSupportedError` when the "after" task is not ordered before
  the "before" task, and `FloatPrecisionExhaustedError` when no value fits
  between them. `reindex_orders` returns `(id, order)` pairs 10.0, 20.0, ...
  in the current order.
- **`dagtrack.graph`**: `topological_sort` (ties broken by manual order,
  raising `CycleDetectedError` if tasks cannot be ordered),
  `would_create_cycle`, `find_cycle_path`, `transitive_dependencies` and
  `find_order_conflicts`.
- **`dagtrack.state`**: `validate_transition` and the guards
  `can_start_task`, `can_complete_task`, `can_stop_task`, `can_block_task`,
  `can_unblock_task` and `can_cancel_task`. Each returns its argument when the
  transition is allowed and raises an error from `dagtrack.errors` otherwise;
  for example a task without a definition of done raises `NoDodError` on
  completion.
- **`dagtrack.target`**: `compute_target_subgraph` (the target and its
  transitive prerequisites that are not completed), `is_target_reached`,
  `find_next_task`, `get_blocked_tasks` and `all_remaining_blocked`.
- **`dagtrack.mermaid`**: `write_mermaid(tasks, dependencies, output)` writes a
  `flowchart TD` to a text stream and `render_mermaid` returns it as a string.
  Edges point from a prerequisite to the task that depends on it.
- **`dagtrack.paths`**: the `.tt/` project layout (`get_tt_dir`,
  `get_db_path`) and an upward search for `.tt/tt.db` (`find_db_path`,
  `get_artifacts_dir`, `is_initialized`), each starting from a given directory
  or the current one.
- **`dagtrack.install`**: the `mcpServers` JSON configuration used by AI coding
  tools. `McpConfig` reads (`from_dict`, raising `ValueError` when malformed)
  and writes (`to_dict`, `to_json`) configurations of `StdioServer` and
  `HttpServer` entries. `config_path_for` gives the global or local config file
  for a tool in `InstallTool` (`claude`, `kilo`, `kimi`), `install_to_config`
  adds a `tt` server entry to a config file (replacing a malformed one) and,
  for a local install, adds the file name to `.gitignore` via
  `update_gitignore`. `run` prints general or per-tool instructions, or
  installs when a scope is given; asking for both scopes raises
  `InvalidArgumentError`.

## Example

```python
from dagtrack.models import Dependency, Task, TaskStatus
from dagtrack.graph import topological_sort, would_create_cycle
from dagtrack.ordering import calculate_manual_order
from dagtrack.target import find_next_task
from dagtrack.mermaid import render_mermaid


def task(task_id, order, status=TaskStatus.PENDING):
    return Task(id=task_id, title=f"Task {task_id}", status=status, manual_order=order)


tasks = [task(1, 10.0), task(2, 20.0), task(3, 30.0)]
deps = [Dependency(task_id=2, depends_on=1), Dependency(task_id=3, depends_on=2)]

[t.id for t in topological_sort(tasks, deps)]   # [1, 2, 3]
would_create_cycle(1, 3, deps)                   # True: 3 already needs 1
calculate_manual_order(tasks, 1, 2)              # 15.0
find_next_task(3, tasks, deps).id                # 1
print(render_mermaid(tasks, deps))
```

The last line prints:

```
flowchart TD
    t1["○ #1Task 1"]
    t2["○ #2Task 2"]
    t3["○ #3Task 3"]
    t1 --> t2
    t2 --> t3
```

## Errors

Every error the tracker raises is a subclass of
`dagtrack.errors.TrackerError`, so callers can catch the whole family or a
single case such as `CycleDetectedError`, `UnmetDependenciesError`,
`AnotherTaskActiveError` or `NoDodError`. The error objects carry the ids
involved (for instance `CycleDetectedError.path` and
`UnmetDependenciesError.dependencies`).

## What the package does not do

The package works on tasks and dependencies that you pass in; it does not
store them. It has no database layer (it only locates where `.tt/tt.db` would
be), no command-line program and no MCP server. The configuration written by
`dagtrack.install` points at an executable run with the argument `mcp`, which
this package does not provide.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.