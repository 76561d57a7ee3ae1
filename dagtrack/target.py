"""Focus target subgraph: the tasks still needed to reach a target."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from dagtrack.errors import CycleDetectedError
from dagtrack.graph import topological_sort
from dagtrack.models import Dependency, Task, TaskStatus


def compute_target_subgraph(
    target_id: int, tasks: Sequence[Task], deps: Sequence[Dependency]
) -> list[Task]:
    """Return the target and its transitive prerequisites that are not completed.

    Prerequisites are followed only through tasks that exist in ``tasks``.
    """
    task_map = {task.id: task for task in tasks}
    prereqs: dict[int, list[int]] = defaultdict(list)
    for dep in deps:
        prereqs[dep.task_id].append(dep.depends_on)

    visited: set[int] = set()
    stack = [target_id]
    result: list[Task] = []
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        task = task_map.get(current)
        if task is None:
            continue
        if task.status is not TaskStatus.COMPLETED:
            result.append(task)
        stack.extend(p for p in prereqs.get(current, ()) if p not in visited)
    return result


def is_target_reached(
    target_id: int, tasks: Sequence[Task], deps: Sequence[Dependency]
) -> bool:
    """Whether every task needed for the target is completed."""
    return not compute_target_subgraph(target_id, tasks, deps)


def find_next_task(
    target_id: int, tasks: Sequence[Task], deps: Sequence[Dependency]
) -> Task | None:
    """First pending task of the target subgraph, in dependency order, that is ready.

    A task is ready when all of its prerequisites are completed; a prerequisite
    that does not exist counts as completed. Returns None when no task is ready
    or the subgraph cannot be ordered.
    """
    subgraph = compute_target_subgraph(target_id, tasks, deps)
    if not subgraph:
        return None

    subgraph_ids = {task.id for task in subgraph}
    subgraph_deps = [
        dep
        for dep in deps
        if dep.task_id in subgraph_ids and dep.depends_on in subgraph_ids
    ]
    try:
        ordered = topological_sort(subgraph, subgraph_deps)
    except CycleDetectedError:
        return None

    status_of: dict[int, TaskStatus] = {}
    for task in tasks:
        status_of.setdefault(task.id, task.status)

    def prerequisites_done(task: Task) -> bool:
        return all(
            status_of.get(dep.depends_on, TaskStatus.COMPLETED) is TaskStatus.COMPLETED
            for dep in deps
            if dep.task_id == task.id
        )

    return next(
        (
            task
            for task in ordered
            if task.status is TaskStatus.PENDING and prerequisites_done(task)
        ),
        None,
    )


def get_blocked_tasks(
    target_id: int, tasks: Sequence[Task], deps: Sequence[Dependency]
) -> list[Task]:
    """Blocked tasks within the target subgraph."""
    return [
        task
        for task in compute_target_subgraph(target_id, tasks, deps)
        if task.status is TaskStatus.BLOCKED
    ]


def all_remaining_blocked(
    target_id: int, tasks: Sequence[Task], deps: Sequence[Dependency]
) -> bool:
    """Whether the subgraph is non-empty and every task left in it is blocked."""
    subgraph = compute_target_subgraph(target_id, tasks, deps)
    if not subgraph:
        return False
    return all(
        task.status in (TaskStatus.BLOCKED, TaskStatus.COMPLETED) for task in subgraph
    )