"""Task status transitions and the guards that protect them."""

from __future__ import annotations

from collections.abc import Sequence

from dagtrack.errors import (
    AnotherTaskActiveError,
    NoActiveTaskError,
    NoDodError,
    NotSupportedError,
    TaskNotPendingError,
    UnmetDependenciesError,
)
from dagtrack.models import Task, TaskStatus

_ALLOWED = frozenset(
    {
        (TaskStatus.PENDING, TaskStatus.IN_PROGRESS),
        (TaskStatus.IN_PROGRESS, TaskStatus.PENDING),
        (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED),
        (TaskStatus.PENDING, TaskStatus.BLOCKED),
        (TaskStatus.IN_PROGRESS, TaskStatus.BLOCKED),
        (TaskStatus.BLOCKED, TaskStatus.PENDING),
        (TaskStatus.PENDING, TaskStatus.CANCELLED),
        (TaskStatus.IN_PROGRESS, TaskStatus.CANCELLED),
        # Starting a task that is already in progress is a no-op.
        (TaskStatus.IN_PROGRESS, TaskStatus.IN_PROGRESS),
    }
)

_NOT_PENDING = frozenset(
    {
        (TaskStatus.PENDING, TaskStatus.COMPLETED),
        (TaskStatus.BLOCKED, TaskStatus.IN_PROGRESS),
        (TaskStatus.BLOCKED, TaskStatus.COMPLETED),
    }
)


def _status_name(status: TaskStatus) -> str:
    return "".join(part.capitalize() for part in status.value.split("_"))


def validate_transition(
    from_status: TaskStatus, to_status: TaskStatus, task_id: int
) -> TaskStatus:
    """Check that a task may move from one status to another.

    Returns the new status; raises when the transition is not allowed.
    """
    if (from_status, to_status) in _ALLOWED:
        return to_status
    if (from_status, to_status) in _NOT_PENDING:
        raise TaskNotPendingError(task_id)
    if from_status is TaskStatus.COMPLETED:
        raise NotSupportedError("Completed tasks cannot change status")
    if from_status is TaskStatus.CANCELLED:
        raise NotSupportedError("Cancelled tasks cannot change status")
    raise NotSupportedError(
        f"Cannot transition from {_status_name(from_status)} to {_status_name(to_status)}"
    )


def can_start_task(
    task: Task, active_task: Task | None, incomplete_deps: Sequence[int]
) -> Task:
    """Guard for starting a task; returns the task when it may start.

    The task must be pending (or already in progress), no other task may be
    active and every prerequisite must be completed.
    """
    if task.status is TaskStatus.IN_PROGRESS:
        return task
    if task.status is not TaskStatus.PENDING:
        raise TaskNotPendingError(task.id)
    if active_task is not None:
        raise AnotherTaskActiveError(active_task.id, active_task.title)
    if incomplete_deps:
        raise UnmetDependenciesError(task.id, incomplete_deps)
    return task


def can_complete_task(task: Task) -> Task:
    """Guard for completing a task: it must be in progress and have a DoD."""
    if task.status is not TaskStatus.IN_PROGRESS:
        raise NoActiveTaskError()
    if task.dod is None or not task.dod.strip():
        raise NoDodError(task.id)
    return task


def can_stop_task(task: Task) -> Task:
    """Guard for stopping a task: it must be in progress."""
    if task.status is not TaskStatus.IN_PROGRESS:
        raise NoActiveTaskError()
    return task


def can_block_task(task: Task) -> Task:
    """Guard for blocking a task: it must be pending or in progress."""
    if not task.status.can_block():
        raise NotSupportedError(
            f"Cannot block task with status {_status_name(task.status)}"
        )
    return task


def can_unblock_task(task: Task) -> Task:
    """Guard for unblocking a task: it must be blocked."""
    if not task.status.can_unblock():
        raise NotSupportedError(
            f"Cannot unblock task with status {_status_name(task.status)}"
        )
    return task


def can_cancel_task(task: Task) -> Task:
    """Guard for cancelling a task: it must be pending, in progress or blocked."""
    if not task.status.can_cancel():
        raise NotSupportedError(
            f"Cannot cancel task with status {_status_name(task.status)}"
        )
    return task


def transition_status(current: TaskStatus, target: TaskStatus) -> TaskStatus:
    """Status a task has after a transition to ``target``."""
    return target