import logging

from src.app.errors import FORBIDDEN, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import TaskActionResponse

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """
    Use case for soft-deleting a task.

    Business Rules:
    - Missing or deleted task/project -> NOT_FOUND
    - Only the project creator may delete tasks
    - The task id is dropped from the project
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_id: int, user_id: int) -> Result[TaskActionResponse]:
        async with self.uow:
            task = await self.uow.tasks.find_by_id(task_id)
            if task is None:
                return Return.err(not_found("Task"))

            project = await self.uow.projects.find_by_id(task.project_id)
            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_edit(user_id):
                return Return.err(
                    Error(FORBIDDEN, "Only the project creator can delete tasks")
                )

            task.delete()
            await self.uow.tasks.save(task)
            project.remove_task(task.id)
            await self.uow.projects.save(project)
            await self.uow.commit()

        logger.info(f"Task {task_id} deleted by user {user_id}")

        return Return.ok(TaskActionResponse(id=task_id, message="Task deleted successfully"))
