from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import UserSummary
from src.libs.result import Result, Return

from .access import load_task_for_viewer
from .dtos import TaskAssignedUsersResponse


class GetTaskAssignedUsersUseCase:
    """
    Use case for listing the users assigned to a task.

    Assignees whose account was deleted are skipped.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_id: int, user_id: int) -> Result[TaskAssignedUsersResponse]:
        async with self.uow:
            loaded = await load_task_for_viewer(self.uow, task_id, user_id)
            if loaded.is_err():
                return loaded
            task, _ = loaded.value

            users = await self.uow.users.find_by_ids(task.assigned_user_ids)

            return Return.ok(
                TaskAssignedUsersResponse(
                    users=[UserSummary.from_entity(user) for user in users]
                )
            )
