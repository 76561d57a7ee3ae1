"""Exceptions raised by the task tracker."""

from __future__ import annotations

from collections.abc import Iterable


class TrackerError(Exception):
    """Base class for every error the tracker raises."""


class TaskNotFoundError(TrackerError):
    """No task exists with the requested id."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task #{task_id} not found")


class InvalidStatusError(TrackerError):
    """A status or action string could not be understood."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid status: {value}")


class InvalidArgumentError(TrackerError):
    """An argument was malformed or conflicts with another one."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid argument: {message}")


class NotSupportedError(TrackerError):
    """The requested operation is not allowed in the current state."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Not supported: {message}")


class FloatPrecisionExhaustedError(TrackerError):
    """No order value fits between two neighbouring tasks any more."""

    def __init__(self) -> None:
        super().__init__(
            "Float precision exhausted between adjacent tasks; reindex the task orders"
        )


class CycleDetectedError(TrackerError):
    """Adding a dependency would close a cycle in the task graph."""

    def __init__(self, from_id: int, to_id: int, path: Iterable[int]) -> None:
        self.from_id = from_id
        self.to_id = to_id
        self.path = list(path)
        chain = " -> ".join(f"#{node}" for node in self.path)
        super().__init__(
            f"Cycle detected: #{from_id} depending on #{to_id} would create cycle {chain}"
        )


class TaskNotPendingError(TrackerError):
    """The task is not in a status that allows the transition."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task #{task_id} is not pending")


class AnotherTaskActiveError(TrackerError):
    """A different task is already in progress."""

    def __init__(self, task_id: int, title: str) -> None:
        self.task_id = task_id
        self.title = title
        super().__init__(f"Another task is already active: #{task_id} ({title})")


class UnmetDependenciesError(TrackerError):
    """The task still has prerequisites that are not completed."""

    def __init__(self, task_id: int, dependencies: Iterable[int]) -> None:
        self.task_id = task_id
        self.dependencies = list(dependencies)
        ids = ", ".join(f"#{dep}" for dep in self.dependencies)
        super().__init__(f"Task #{task_id} has unmet dependencies: {ids}")


class NoActiveTaskError(TrackerError):
    """No task is currently in progress."""

    def __init__(self) -> None:
        super().__init__("No active task")


class NoDodError(TrackerError):
    """The task has no definition of done and cannot be completed."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task #{task_id} has no definition of done")


class TargetReachedError(TrackerError):
    """Every task needed for the focus target is completed."""

    def __init__(self, target_id: int) -> None:
        self.target_id = target_id
        super().__init__(f"Target #{target_id} reached: all tasks are completed")


class AllBlockedError(TrackerError):
    """Every remaining task towards the target is blocked."""

    def __init__(self, blocked_ids: Iterable[int]) -> None:
        self.blocked_ids = list(blocked_ids)
        ids = ", ".join(f"#{task_id}" for task_id in self.blocked_ids)
        super().__init__(f"All remaining tasks are blocked: {ids}")