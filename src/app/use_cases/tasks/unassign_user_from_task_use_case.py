from src.app.errors import not_found, validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import ValidationError
from src.libs.result import Result, Return

from .access import load_task_for_viewer
from .dtos import TaskActionResponse


class UnassignUserFromTaskUseCase:
    """
    Use case for removing a user, looked up by email, from a task.

    Business Rules:
    - Missing or deleted task/project/user -> NOT_FOUND
    - Creator and members may unassign
    - User not assigned, or task deleted/archived -> VALIDATION_ERROR
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, task_id: int, email: str, user_id: int
    ) -> Result[TaskActionResponse]:
        async with self.uow:
            loaded = await load_task_for_viewer(self.uow, task_id, user_id)
            if loaded.is_err():
                return loaded
            task, _ = loaded.value

            assignee = await self.uow.users.find_by_email(email)
            if assignee is None:
                return Return.err(not_found("User"))

            try:
                task.unassign_user(assignee.id)
            except ValidationError as exc:
                return Return.err(validation_error(exc))

            await self.uow.tasks.save(task)
            await self.uow.commit()

            return Return.ok(
                TaskActionResponse(
                    id=task.id, message="User unassigned from task successfully"
                )
            )
