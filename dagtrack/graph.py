"""Graph operations on the task dependency DAG."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterable, Sequence

from dagtrack.errors import CycleDetectedError
from dagtrack.models import Dependency, Task


def _prerequisite_map(deps: Iterable[Dependency]) -> dict[int, list[int]]:
    """Map each task to the tasks it depends on."""
    prereqs: dict[int, list[int]] = defaultdict(list)
    for dep in deps:
        prereqs[dep.task_id].append(dep.depends_on)
    return prereqs


def topological_sort(tasks: Iterable[Task], deps: Sequence[Dependency]) -> list[Task]:
    """Sort tasks so prerequisites come first, breaking ties by manual order.

    Raises CycleDetectedError if some tasks cannot be ordered.
    """
    task_map = {task.id: task for task in tasks}
    if not task_map:
        return []

    dependents: dict[int, list[int]] = defaultdict(list)
    in_degrees: dict[int, int] = dict.fromkeys(task_map, 0)
    for dep in deps:
        dependents[dep.depends_on].append(dep.task_id)
        in_degrees[dep.task_id] = in_degrees.get(dep.task_id, 0) + 1

    ready = [
        (task_map[task_id].manual_order, task_id)
        for task_id, degree in in_degrees.items()
        if degree == 0 and task_id in task_map
    ]
    heapq.heapify(ready)

    result: list[Task] = []
    while ready:
        _, task_id = heapq.heappop(ready)
        result.append(task_map[task_id])
        for dependent_id in dependents.get(task_id, ()):
            in_degrees[dependent_id] -= 1
            if in_degrees[dependent_id] == 0 and dependent_id in task_map:
                heapq.heappush(ready, (task_map[dependent_id].manual_order, dependent_id))

    if len(result) != len(task_map):
        processed = {task.id for task in result}
        stuck = sorted(task_id for task_id in task_map if task_id not in processed)
        first = stuck[0] if stuck else 0
        second = stuck[1] if len(stuck) > 1 else 0
        raise CycleDetectedError(first, second, stuck)

    return result


def would_create_cycle(from_id: int, to_id: int, deps: Iterable[Dependency]) -> bool:
    """Whether making ``from_id`` depend on ``to_id`` would close a cycle."""
    if from_id == to_id:
        return True

    prereqs = _prerequisite_map(deps)
    visited: set[int] = set()
    stack = [to_id]
    while stack:
        current = stack.pop()
        if current == from_id:
            return True
        if current not in visited:
            visited.add(current)
            stack.extend(prereqs.get(current, ()))
    return False


def find_cycle_path(
    from_id: int, to_id: int, deps: Iterable[Dependency]
) -> list[int] | None:
    """Return the cycle ``[from, ..., from]`` that the new edge would close, if any."""
    if from_id == to_id:
        return [from_id, to_id]

    prereqs = _prerequisite_map(deps)
    visited: set[int] = set()
    parent: dict[int, int] = {}
    stack = [to_id]
    while stack:
        current = stack.pop()
        if current == from_id:
            path = [from_id]
            node = from_id
            while node in parent:
                node = parent[node]
                path.append(node)
                if node == to_id:
                    break
            path.append(from_id)
            return path

        if current not in visited:
            visited.add(current)
            for prereq in prereqs.get(current, ()):
                if prereq not in visited:
                    parent[prereq] = current
                    stack.append(prereq)
    return None


def transitive_dependencies(task_id: int, deps: Iterable[Dependency]) -> list[int]:
    """All tasks that ``task_id`` depends on, directly or indirectly."""
    prereqs = _prerequisite_map(deps)
    visited: set[int] = set()
    stack = [task_id]
    result: list[int] = []
    while stack:
        current = stack.pop()
        if current not in visited:
            visited.add(current)
            if current != task_id:
                result.append(current)
        stack.extend(p for p in prereqs.get(current, ()) if p not in visited)
    return result


def find_order_conflicts(
    tasks: Iterable[Task], deps: Iterable[Dependency]
) -> list[tuple[int, float, int, float]]:
    """Dependencies where the dependent is ordered before its prerequisite.

    Each conflict is ``(task_id, task_order, prereq_id, prereq_order)``.
    """
    task_map = {task.id: task for task in tasks}
    conflicts: list[tuple[int, float, int, float]] = []
    for dep in deps:
        task = task_map.get(dep.task_id)
        prereq = task_map.get(dep.depends_on)
        if task is None or prereq is None:
            continue
        if task.manual_order < prereq.manual_order:
            conflicts.append((task.id, task.manual_order, prereq.id, prereq.manual_order))
    return conflicts