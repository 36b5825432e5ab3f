from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .access import load_task_for_viewer
from .dtos import TaskDetailResponse


class GetTaskByIdUseCase:
    """Use case for reading a single task the user can see through its project."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_id: int, user_id: int) -> Result[TaskDetailResponse]:
        async with self.uow:
            loaded = await load_task_for_viewer(
                self.uow, task_id, user_id, "You do not have access to this task"
            )
            if loaded.is_err():
                return loaded
            task, _ = loaded.value

            return Return.ok(
                TaskDetailResponse(
                    id=task.id,
                    name=task.name,
                    description=task.description,
                    status=task.status,
                    priority=task.priority,
                    project_id=task.project_id,
                    created_at=task.created_at,
                    updated_at=task.updated_at,
                )
            )
