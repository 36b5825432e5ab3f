import pytest

from src.domain.entities import Task, TaskPriority, TaskStatus
from src.domain.exceptions import ValidationError


def make_task(**overrides):
    data = dict(name="Write checklist", project_id=1)
    data.update(overrides)
    return Task.create(**data)


def test_defaults():
    task = make_task()

    assert task.status == TaskStatus.pending
    assert task.priority == TaskPriority.low
    assert task.is_pending
    assert task.is_low_priority
    assert task.assigned_user_count == 0


def test_string_enums_are_accepted():
    task = make_task(status="in_progress", priority="high")

    assert task.is_in_progress
    assert task.is_high_priority


def test_invalid_status_and_priority():
    with pytest.raises(ValidationError) as exc_info:
        make_task(status="done")
    assert exc_info.value.message == "Invalid task status"

    with pytest.raises(ValidationError) as exc_info:
        make_task(priority="urgent")
    assert exc_info.value.message == "Invalid task priority"


def test_name_and_description_boundaries():
    assert make_task(name="n" * 255).name == "n" * 255
    assert make_task(description="d" * 5000).description == "d" * 5000
    assert make_task(description="").description == ""

    with pytest.raises(ValidationError):
        make_task(name="n" * 256)
    with pytest.raises(ValidationError):
        make_task(description="d" * 5001)


def test_happy_path_lifecycle():
    task = make_task()

    task.start()
    assert task.is_in_progress

    task.move_to_review()
    assert task.is_reviewing

    task.complete()
    assert task.is_completed

    task.archive()
    assert task.is_archived

    task.unarchive()
    assert task.is_completed


def test_in_progress_can_complete_directly():
    task = make_task()
    task.start()

    task.complete()

    assert task.is_completed


@pytest.mark.parametrize(
    "action, message",
    [
        ("move_to_review", "Only in-progress tasks can be moved to review"),
        ("complete", "Task cannot be completed"),
        ("archive", "Only completed tasks can be archived"),
        ("unarchive", "Task is not archived"),
    ],
)
def test_invalid_transitions_from_pending(action, message):
    task = make_task()

    with pytest.raises(ValidationError) as exc_info:
        getattr(task, action)()

    assert exc_info.value.message == message


def test_start_rejected_outside_pending():
    task = make_task(status=TaskStatus.completed)

    with pytest.raises(ValidationError) as exc_info:
        task.start()

    assert exc_info.value.message == "Task cannot be started"


def test_archived_task_is_read_only():
    task = make_task(status=TaskStatus.archived)

    with pytest.raises(ValidationError) as exc_info:
        task.update_name("Other")
    assert exc_info.value.message == "Cannot update archived task"

    with pytest.raises(ValidationError):
        task.assign_user(2)

    with pytest.raises(ValidationError) as exc_info:
        task.update_status(TaskStatus.pending)
    assert exc_info.value.message == "Cannot change status of archived task. Unarchive first."

    task.update_status(TaskStatus.archived)
    assert task.is_archived


def test_update_status_skips_transition_guards():
    task = make_task()

    task.update_status(TaskStatus.completed)

    assert task.is_completed


def test_deleted_task_rejects_changes():
    task = make_task()
    task.delete()

    with pytest.raises(ValidationError) as exc_info:
        task.update_status(TaskStatus.in_progress)
    assert exc_info.value.message == "Cannot update deleted task"

    assert not task.can_be_started()


def test_assignments():
    task = make_task()
    task.assign_user(2)

    assert task.is_assigned_to_user(2)

    with pytest.raises(ValidationError) as exc_info:
        task.assign_user(2)
    assert exc_info.value.message == "User is already assigned to this task"

    task.unassign_user(2)
    with pytest.raises(ValidationError) as exc_info:
        task.unassign_user(2)
    assert exc_info.value.message == "User is not assigned to this task"


def test_reconstitute_round_trip():
    task = make_task(assigned_user_ids=[3, 4])

    copy = Task.reconstitute(**task.to_dict())

    assert copy.to_dict() == task.to_dict()


def test_archive_requires_completion_and_unarchive_reopens_status():
    task = make_task()
    task.start()

    with pytest.raises(ValidationError) as exc_info:
        task.archive()
    assert exc_info.value.message == "Only completed tasks can be archived"

    task.complete()
    task.archive()

    with pytest.raises(ValidationError):
        task.update_status(TaskStatus.pending)

    task.unarchive()
    task.update_status(TaskStatus.pending)
    assert task.is_pending


def test_delete_and_restore_cycle():
    task = make_task()

    task.delete()
    with pytest.raises(ValidationError) as exc_info:
        task.delete()
    assert exc_info.value.message == "Task is already deleted"

    task.restore()
    with pytest.raises(ValidationError) as exc_info:
        task.restore()
    assert exc_info.value.message == "Task is not deleted"


def test_reconstitute_after_updates():
    task = make_task()
    task.start()
    task.update_priority(TaskPriority.high)
    task.assign_user(3)

    copy = Task.reconstitute(**task.to_dict())

    assert copy.to_dict() == task.to_dict()
