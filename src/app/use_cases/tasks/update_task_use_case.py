"""
Update Task Use Case

Partial update of a task's fields and assignees.
"""

from typing import List

from src.app.errors import validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.exceptions import ValidationError
from src.libs.result import Result, Return

from .access import load_task_for_viewer
from .assignees import resolve_assignees
from .dtos import AssigneeRef, UpdateTaskCommand, UpdateTaskResponse


class UpdateTaskUseCase:
    """
    Use case for updating a task.

    Business Rules:
    - Missing or deleted task/project -> NOT_FOUND
    - Creator and members may update tasks
    - Fields apply in order: name, description, status, priority, assignees;
      any entity rule violation rejects the whole update
    - Assignees must exist and be project members; already assigned users
      are left as they are
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, task_id: int, command: UpdateTaskCommand, user_id: int
    ) -> Result[UpdateTaskResponse]:
        async with self.uow:
            loaded = await load_task_for_viewer(
                self.uow, task_id, user_id, "You do not have access to this task"
            )
            if loaded.is_err():
                return loaded
            task, project = loaded.value

            assignees: List[User] = []
            if command.assign_to is not None:
                assignees_result = await resolve_assignees(
                    self.uow, project, command.assign_to
                )
                if assignees_result.is_err():
                    return assignees_result
                assignees = assignees_result.value

            try:
                if command.name is not None:
                    task.update_name(command.name)
                if command.description is not None:
                    task.update_description(command.description)
                if command.status is not None:
                    task.update_status(command.status)
                if command.priority is not None:
                    task.update_priority(command.priority)
                for user in assignees:
                    if not task.is_assigned_to_user(user.id):
                        task.assign_user(user.id)
            except ValidationError as exc:
                return Return.err(validation_error(exc))

            task = await self.uow.tasks.save(task)
            await self.uow.commit()

            return Return.ok(
                UpdateTaskResponse(
                    id=task.id,
                    name=task.name,
                    description=task.description,
                    status=task.status,
                    priority=task.priority,
                    assigned_members=[
                        AssigneeRef(username=user.username) for user in assignees
                    ],
                )
            )
