"""Float-based manual ordering of tasks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from dagtrack.errors import (
    FloatPrecisionExhaustedError,
    NotSupportedError,
    TaskNotFoundError,
)
from dagtrack.models import Task

ORDER_GAP = 10.0


def _find_task(tasks: Iterable[Task], task_id: int) -> Task:
    task = next((t for t in tasks if t.id == task_id), None)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def calculate_manual_order(
    tasks: Sequence[Task],
    after_id: int | None = None,
    before_id: int | None = None,
) -> float:
    """Compute the order value for a new or moved task.

    With no hint the task goes after the highest order; after a task it gets
    that order plus the gap; before a task that order minus the gap; between
    two tasks the midpoint of their orders.
    """
    if after_id is None and before_id is None:
        max_order = max((t.manual_order for t in tasks), default=0.0)
        max_order = max(max_order, 0.0)
        return ORDER_GAP if max_order == 0.0 else max_order + ORDER_GAP

    if before_id is None:
        return _find_task(tasks, after_id).manual_order + ORDER_GAP

    if after_id is None:
        return _find_task(tasks, before_id).manual_order - ORDER_GAP

    low = _find_task(tasks, after_id).manual_order
    high = _find_task(tasks, before_id).manual_order
    if low >= high:
        raise NotSupportedError("After task must have lower order than before task")

    midpoint = (low + high) / 2.0
    if midpoint in (low, high):
        raise FloatPrecisionExhaustedError()
    return midpoint


def reindex_orders(tasks: Iterable[Task]) -> list[tuple[int, float]]:
    """Assign evenly spaced orders (10, 20, 30, ...) keeping the current order."""
    ranked = sorted(tasks, key=lambda t: t.manual_order)
    return [(task.id, position * ORDER_GAP) for position, task in enumerate(ranked, start=1)]