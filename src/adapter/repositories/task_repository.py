from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func
from sqlmodel import select

from src.adapter.models import TaskAssigneeModel, TaskModel
from src.adapter.repositories.base import SqlRepository
from src.app.repositories.filters import TaskFilter
from src.app.repositories.task_repository import ITaskRepository
from src.domain.entities import Task


class TaskRepository(SqlRepository, ITaskRepository):
    """Task repository implementation using SQLModel"""

    sort_columns = {
        "created_at": TaskModel.created_at,
        "updated_at": TaskModel.updated_at,
        "name": TaskModel.name,
        "status": TaskModel.status,
        "priority": TaskModel.priority,
        "id": TaskModel.id,
    }

    async def _assignee_ids(self, task_ids: List[int]) -> Dict[int, List[int]]:
        stmt = (
            select(TaskAssigneeModel)
            .where(TaskAssigneeModel.task_id.in_(task_ids))
            .order_by(TaskAssigneeModel.id)
        )
        grouped: Dict[int, List[int]] = defaultdict(list)
        for link in (await self.session.exec(stmt)).all():
            grouped[link.task_id].append(link.user_id)
        return grouped

    async def _to_entities(self, records: List[TaskModel]) -> List[Task]:
        if not records:
            return []
        assignees = await self._assignee_ids([r.id for r in records])
        return [
            Task.reconstitute(
                id=r.id,
                name=r.name,
                project_id=r.project_id,
                description=r.description,
                status=r.status,
                priority=r.priority,
                assigned_user_ids=assignees.get(r.id, []),
                deleted_at=r.deleted_at,
                created_at=r.created_at,
                updated_at=r.updated_at,
            )
            for r in records
        ]

    async def _get_record(self, task_id: int) -> Optional[TaskModel]:
        stmt = select(TaskModel).where(TaskModel.id == task_id)
        return (await self.session.exec(stmt)).one_or_none()

    async def find_by_id(
        self, task_id: int, include_deleted: bool = False
    ) -> Optional[Task]:
        record = await self._get_record(task_id)
        if record is None or (record.deleted_at is not None and not include_deleted):
            return None
        return (await self._to_entities([record]))[0]

    async def find_all(self, filter: TaskFilter) -> Tuple[List[Task], int]:
        conditions = []
        if filter.only_deleted:
            conditions.append(TaskModel.deleted_at.is_not(None))
        elif not filter.include_deleted:
            conditions.append(TaskModel.deleted_at.is_(None))
        if filter.project_id is not None:
            conditions.append(TaskModel.project_id == filter.project_id)
        if filter.project_ids is not None:
            conditions.append(TaskModel.project_id.in_(filter.project_ids))
        if filter.status is not None:
            conditions.append(TaskModel.status == filter.status)
        if filter.priority is not None:
            conditions.append(TaskModel.priority == filter.priority)
        if filter.assigned_user_id is not None:
            assigned_tasks = select(TaskAssigneeModel.task_id).where(
                TaskAssigneeModel.user_id == filter.assigned_user_id
            )
            conditions.append(TaskModel.id.in_(assigned_tasks))

        count_stmt = select(func.count()).select_from(TaskModel).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            select(TaskModel)
            .where(*conditions)
            .order_by(self._order_by(filter))
            .offset(filter.offset)
            .limit(filter.limit)
        )
        records = (await self.session.exec(stmt)).all()
        return await self._to_entities(list(records)), total

    async def save(self, task: Task) -> Task:
        data = task.to_dict()
        assigned_user_ids = data.pop("assigned_user_ids")
        record = await self._get_record(task.id) if task.id else None
        if record is None:
            if not task.id:
                data.pop("id")
            record = TaskModel(**data)
        else:
            for key, value in data.items():
                setattr(record, key, value)
        await self._flush(record)
        await self._sync_assignees(record.id, assigned_user_ids)
        return await self.find_by_id(record.id, include_deleted=True)

    async def _sync_assignees(self, task_id: int, user_ids: List[int]) -> None:
        current = (await self._assignee_ids([task_id])).get(task_id, [])
        removed = [user_id for user_id in current if user_id not in user_ids]
        if removed:
            await self.session.execute(
                delete(TaskAssigneeModel).where(
                    TaskAssigneeModel.task_id == task_id,
                    TaskAssigneeModel.user_id.in_(removed),
                )
            )
        for user_id in user_ids:
            if user_id not in current:
                self.session.add(TaskAssigneeModel(task_id=task_id, user_id=user_id))
        await self.session.flush()

    async def delete(self, task_id: int) -> None:
        task = await self.find_by_id(task_id)
        if task is None:
            return
        task.delete()
        await self.save(task)

    async def exists_by_id(self, task_id: int) -> bool:
        return await self.find_by_id(task_id) is not None

    async def exists_by_name(
        self, name: str, project_id: int, exclude_id: Optional[int] = None
    ) -> bool:
        stmt = select(TaskModel.id).where(
            TaskModel.name == name.strip(),
            TaskModel.project_id == project_id,
            TaskModel.deleted_at.is_(None),
        )
        if exclude_id is not None:
            stmt = stmt.where(TaskModel.id != exclude_id)
        return (await self.session.exec(stmt)).first() is not None
