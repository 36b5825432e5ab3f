"""
Create Task Use Case

Creates a task inside a project, optionally assigning project members.
"""

from src.app.errors import FORBIDDEN, not_found, validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task
from src.domain.exceptions import ValidationError
from src.libs.result import Error, Result, Return

from .assignees import resolve_assignees
from .dtos import AssigneeRef, CreateTaskCommand, TaskResponse


class CreateTaskUseCase:
    """
    Use case for creating a task.

    Business Rules:
    - Missing or deleted project -> NOT_FOUND
    - Creator and members may create tasks
    - Every assignee must exist and be able to view the project
    - The new task id is recorded on the project
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateTaskCommand, user_id: int) -> Result[TaskResponse]:
        """
        Execute create task use case.

        Args:
            command: CreateTaskCommand with task fields and assignees
            user_id: ID of the authenticated user

        Returns:
            Result with TaskResponse, or Error
        """
        async with self.uow:
            project = await self.uow.projects.find_by_id(command.project_id)
            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_view(user_id):
                return Return.err(
                    Error(FORBIDDEN, "You do not have access to this project")
                )

            assignees_result = await resolve_assignees(
                self.uow, project, command.assign_to
            )
            if assignees_result.is_err():
                return assignees_result
            assignees = assignees_result.value

            try:
                task = await self.uow.tasks.save(
                    Task.create(
                        name=command.name,
                        project_id=project.id,
                        description=command.description,
                        status=command.status,
                        priority=command.priority,
                        assigned_user_ids=[user.id for user in assignees],
                    )
                )
                project.add_task(task.id)
            except ValidationError as exc:
                return Return.err(validation_error(exc))

            await self.uow.projects.save(project)
            await self.uow.commit()

            return Return.ok(
                TaskResponse(
                    id=task.id,
                    name=task.name,
                    description=task.description,
                    status=task.status,
                    priority=task.priority,
                    assigned_members=[
                        AssigneeRef(username=user.username) for user in assignees
                    ],
                    created_at=task.created_at,
                    updated_at=task.updated_at,
                )
            )
