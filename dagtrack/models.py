"""Data models: task status, edit actions, tasks, dependencies and artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dagtrack.errors import InvalidStatusError

_DISPLAY_CHARS = {
    "pending": "○",
    "in_progress": "●",
    "completed": "✓",
    "blocked": "✗",
    "cancelled": "✕",
    "split": "÷",
}


class TaskStatus(str, Enum):
    """Lifecycle status of a task; the value is its stored form."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"
    CANCELLED = "cancelled"
    SPLIT = "split"

    @classmethod
    def from_db(cls, value: str) -> TaskStatus:
        """Parse a stored status string."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatusError(value) from None

    def to_db(self) -> str:
        """Return the stored status string."""
        return self.value

    def can_start(self) -> bool:
        return self is TaskStatus.PENDING

    def can_block(self) -> bool:
        return self in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS)

    def can_unblock(self) -> bool:
        return self is TaskStatus.BLOCKED

    def can_cancel(self) -> bool:
        return self in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.BLOCKED)

    def is_terminal(self) -> bool:
        return self in (TaskStatus.COMPLETED, TaskStatus.CANCELLED, TaskStatus.SPLIT)

    def display_char(self) -> str:
        """Single character used to show the status on the command line."""
        return _DISPLAY_CHARS[self.value]

    def __str__(self) -> str:
        return self.value


class EditAction(str, Enum):
    """Actions that an edit can apply to a task."""

    COMPLETE = "complete"
    STOP = "stop"
    CANCEL = "cancel"
    BLOCK = "block"
    UNBLOCK = "unblock"

    @classmethod
    def from_str(cls, value: str) -> EditAction:
        """Parse an action name."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatusError(value) from None

    def __str__(self) -> str:
        return self.value


@dataclass
class Task:
    """A task as stored in the tracker."""

    id: int
    title: str
    description: str | None = None
    dod: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    manual_order: float = 0.0
    created_at: str = ""
    started_at: str | None = None
    completed_at: str | None = None
    last_touched_at: str = ""
    deleted: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serializable form; the deleted flag is left out."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dod": self.dod,
            "status": self.status.to_db(),
            "manual_order": self.manual_order,
            "created_at": self.created_at,
            "started_at": self.started_at,
            "completed_at": self.completed_at,
            "last_touched_at": self.last_touched_at,
        }


@dataclass(frozen=True)
class Dependency:
    """An edge: ``task_id`` depends on ``depends_on``."""

    task_id: int
    depends_on: int


@dataclass
class Artifact:
    """A file recorded against a task."""

    id: int
    task_id: int
    name: str
    file_path: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "task_id": self.task_id,
            "name": self.name,
            "file_path": self.file_path,
            "created_at": self.created_at,
        }


@dataclass
class TaskDetail:
    """A task together with its prerequisites, dependents and artifacts."""

    task: Task
    dependencies: list[Task] = field(default_factory=list)
    dependents: list[Task] = field(default_factory=list)
    artifacts: list[Artifact] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "task": self.task.to_dict(),
            "dependencies": [t.to_dict() for t in self.dependencies],
            "dependents": [t.to_dict() for t in self.dependents],
            "artifacts": [a.to_dict() for a in self.artifacts],
        }