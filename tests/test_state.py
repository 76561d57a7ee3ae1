import pytest

from dagtrack.errors import (
    AnotherTaskActiveError,
    NoActiveTaskError,
    NoDodError,
    NotSupportedError,
    TaskNotPendingError,
    UnmetDependenciesError,
)
from dagtrack.models import Task, TaskStatus
from dagtrack.state import (
    can_block_task,
    can_cancel_task,
    can_complete_task,
    can_start_task,
    can_stop_task,
    can_unblock_task,
    transition_status,
    validate_transition,
)


def make_task(task_id, status, dod=None):
    return Task(
        id=task_id,
        title=f"Task {task_id}",
        description=None,
        dod=dod,
        status=status,
        manual_order=10.0,
        created_at="2025-06-01T10:00:00",
        last_touched_at="2025-06-01T10:00:00",
    )


# --- validate_transition ---


@pytest.mark.parametrize(
    "from_status, to_status",
    [
        (TaskStatus.PENDING, TaskStatus.IN_PROGRESS),
        (TaskStatus.IN_PROGRESS, TaskStatus.PENDING),
        (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED),
        (TaskStatus.PENDING, TaskStatus.BLOCKED),
        (TaskStatus.IN_PROGRESS, TaskStatus.BLOCKED),
        (TaskStatus.BLOCKED, TaskStatus.PENDING),
    ],
)
def test_valid_transitions(from_status, to_status):
    assert validate_transition(from_status, to_status, 1) is to_status


def test_idempotent_start():
    result = validate_transition(TaskStatus.IN_PROGRESS, TaskStatus.IN_PROGRESS, 1)
    assert result is TaskStatus.IN_PROGRESS


def test_invalid_pending_to_completed():
    with pytest.raises(TaskNotPendingError) as info:
        validate_transition(TaskStatus.PENDING, TaskStatus.COMPLETED, 5)
    assert info.value.task_id == 5


def test_invalid_blocked_to_in_progress():
    with pytest.raises(TaskNotPendingError) as info:
        validate_transition(TaskStatus.BLOCKED, TaskStatus.IN_PROGRESS, 7)
    assert info.value.task_id == 7


def test_invalid_completed_transitions():
    with pytest.raises(NotSupportedError) as info:
        validate_transition(TaskStatus.COMPLETED, TaskStatus.PENDING, 1)
    assert info.value.message == "Completed tasks cannot change status"


def test_valid_pending_to_cancelled():
    result = validate_transition(TaskStatus.PENDING, TaskStatus.CANCELLED, 1)
    assert result is TaskStatus.CANCELLED


def test_valid_in_progress_to_cancelled():
    result = validate_transition(TaskStatus.IN_PROGRESS, TaskStatus.CANCELLED, 1)
    assert result is TaskStatus.CANCELLED


def test_invalid_cancelled_transitions():
    with pytest.raises(NotSupportedError) as info:
        validate_transition(TaskStatus.CANCELLED, TaskStatus.PENDING, 1)
    assert info.value.message == "Cancelled tasks cannot change status"


def test_blocked_to_cancelled_is_not_supported():
    with pytest.raises(NotSupportedError):
        validate_transition(TaskStatus.BLOCKED, TaskStatus.CANCELLED, 1)


def test_split_cannot_change_status():
    with pytest.raises(NotSupportedError):
        validate_transition(TaskStatus.SPLIT, TaskStatus.PENDING, 1)


# --- can_start_task ---


def test_can_start_pending_task():
    task = make_task(1, TaskStatus.PENDING)
    assert can_start_task(task, None, []) is task


def test_can_start_already_in_progress():
    task = make_task(1, TaskStatus.IN_PROGRESS)
    assert can_start_task(task, None, []) is task


def test_cannot_start_blocked_task():
    task = make_task(1, TaskStatus.BLOCKED)
    with pytest.raises(TaskNotPendingError) as info:
        can_start_task(task, None, [])
    assert info.value.task_id == 1


def test_cannot_start_with_active_task():
    task = make_task(1, TaskStatus.PENDING)
    active = make_task(2, TaskStatus.IN_PROGRESS)
    with pytest.raises(AnotherTaskActiveError) as info:
        can_start_task(task, active, [])
    assert info.value.task_id == 2
    assert info.value.title == "Task 2"


def test_cannot_start_with_unmet_dependencies():
    task = make_task(1, TaskStatus.PENDING)
    with pytest.raises(UnmetDependenciesError) as info:
        can_start_task(task, None, [5, 6])
    assert info.value.task_id == 1
    assert info.value.dependencies == [5, 6]


# --- can_complete_task ---


def test_can_complete_in_progress_with_dod():
    task = make_task(1, TaskStatus.IN_PROGRESS, "Definition of done")
    assert can_complete_task(task) is task


def test_cannot_complete_pending_task():
    task = make_task(1, TaskStatus.PENDING, "Definition of done")
    with pytest.raises(NoActiveTaskError):
        can_complete_task(task)


def test_cannot_complete_without_dod():
    task = make_task(1, TaskStatus.IN_PROGRESS)
    with pytest.raises(NoDodError) as info:
        can_complete_task(task)
    assert info.value.task_id == 1


def test_cannot_complete_with_empty_dod():
    task = make_task(1, TaskStatus.IN_PROGRESS, "   ")
    with pytest.raises(NoDodError) as info:
        can_complete_task(task)
    assert info.value.task_id == 1


# --- can_stop_task ---


def test_can_stop_in_progress_task():
    task = make_task(1, TaskStatus.IN_PROGRESS)
    assert can_stop_task(task) is task


def test_cannot_stop_pending_task():
    task = make_task(1, TaskStatus.PENDING)
    with pytest.raises(NoActiveTaskError):
        can_stop_task(task)


# --- can_block_task ---


@pytest.mark.parametrize("status", [TaskStatus.PENDING, TaskStatus.IN_PROGRESS])
def test_can_block(status):
    task = make_task(1, status)
    assert can_block_task(task) is task


@pytest.mark.parametrize("status", [TaskStatus.BLOCKED, TaskStatus.COMPLETED])
def test_cannot_block(status):
    with pytest.raises(NotSupportedError):
        can_block_task(make_task(1, status))


# --- can_unblock_task ---


def test_can_unblock_blocked_task():
    task = make_task(1, TaskStatus.BLOCKED)
    assert can_unblock_task(task) is task


@pytest.mark.parametrize("status", [TaskStatus.PENDING, TaskStatus.IN_PROGRESS])
def test_cannot_unblock(status):
    with pytest.raises(NotSupportedError):
        can_unblock_task(make_task(1, status))


# --- can_cancel_task ---


@pytest.mark.parametrize(
    "status", [TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.BLOCKED]
)
def test_can_cancel(status):
    task = make_task(1, status)
    assert can_cancel_task(task) is task


@pytest.mark.parametrize("status", [TaskStatus.COMPLETED, TaskStatus.CANCELLED])
def test_cannot_cancel(status):
    with pytest.raises(NotSupportedError):
        can_cancel_task(make_task(1, status))


def test_transition_status_returns_target():
    assert transition_status(TaskStatus.PENDING, TaskStatus.BLOCKED) is TaskStatus.BLOCKED