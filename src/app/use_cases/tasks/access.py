from typing import Tuple

from src.app.errors import FORBIDDEN, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Project, Task
from src.libs.result import Error, Result, Return


async def load_task_for_viewer(
    uow: UnitOfWork,
    task_id: int,
    user_id: int,
    forbidden_message: str = "You do not have access to this project",
) -> Result[Tuple[Task, Project]]:
    """
    Load a task and its project for a user who must be able to view the project.

    Missing or deleted task/project -> NOT_FOUND, no view access -> FORBIDDEN.
    Must run inside ``async with uow``.
    """
    task = await uow.tasks.find_by_id(task_id)
    if task is None:
        return Return.err(not_found("Task"))

    project = await uow.projects.find_by_id(task.project_id)
    if project is None:
        return Return.err(not_found("Project"))

    if not project.can_user_view(user_id):
        return Return.err(Error(FORBIDDEN, forbidden_message))

    return Return.ok((task, project))
