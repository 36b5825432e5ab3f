from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func
from sqlmodel import select

from src.adapter.models import ProjectMemberModel, ProjectModel, TaskModel
from src.adapter.repositories.base import SqlRepository
from src.app.repositories.filters import ProjectFilter
from src.app.repositories.project_repository import IProjectRepository
from src.domain.entities import Project


class ProjectRepository(SqlRepository, IProjectRepository):
    """
    Project repository implementation using SQLModel

    member_ids come from project_members in insertion order; task_ids are
    the ids of the project's non-deleted tasks.
    """

    sort_columns = {
        "created_at": ProjectModel.created_at,
        "updated_at": ProjectModel.updated_at,
        "name": ProjectModel.name,
        "id": ProjectModel.id,
    }

    async def _member_ids(self, project_ids: List[int]) -> Dict[int, List[int]]:
        stmt = (
            select(ProjectMemberModel)
            .where(ProjectMemberModel.project_id.in_(project_ids))
            .order_by(ProjectMemberModel.id)
        )
        grouped: Dict[int, List[int]] = defaultdict(list)
        for link in (await self.session.exec(stmt)).all():
            grouped[link.project_id].append(link.user_id)
        return grouped

    async def _task_ids(self, project_ids: List[int]) -> Dict[int, List[int]]:
        stmt = (
            select(TaskModel.id, TaskModel.project_id)
            .where(TaskModel.project_id.in_(project_ids), TaskModel.deleted_at.is_(None))
            .order_by(TaskModel.id)
        )
        grouped: Dict[int, List[int]] = defaultdict(list)
        for task_id, project_id in (await self.session.exec(stmt)).all():
            grouped[project_id].append(task_id)
        return grouped

    async def _to_entities(self, records: List[ProjectModel]) -> List[Project]:
        if not records:
            return []
        ids = [r.id for r in records]
        members = await self._member_ids(ids)
        tasks = await self._task_ids(ids)
        return [
            Project.reconstitute(
                id=r.id,
                name=r.name,
                slug=r.slug,
                created_by_id=r.created_by_id,
                description=r.description,
                member_ids=members.get(r.id, []),
                task_ids=tasks.get(r.id, []),
                deleted_at=r.deleted_at,
                created_at=r.created_at,
                updated_at=r.updated_at,
            )
            for r in records
        ]

    async def _get_record(self, project_id: int) -> Optional[ProjectModel]:
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        return (await self.session.exec(stmt)).one_or_none()

    async def find_by_id(
        self, project_id: int, include_deleted: bool = False
    ) -> Optional[Project]:
        record = await self._get_record(project_id)
        if record is None or (record.deleted_at is not None and not include_deleted):
            return None
        return (await self._to_entities([record]))[0]

    async def find_all(self, filter: ProjectFilter) -> Tuple[List[Project], int]:
        conditions = []
        if not filter.include_deleted:
            conditions.append(ProjectModel.deleted_at.is_(None))
        if filter.created_by_id is not None:
            conditions.append(ProjectModel.created_by_id == filter.created_by_id)
        if filter.member_id is not None:
            member_projects = select(ProjectMemberModel.project_id).where(
                ProjectMemberModel.user_id == filter.member_id
            )
            conditions.append(ProjectModel.id.in_(member_projects))

        count_stmt = select(func.count()).select_from(ProjectModel).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            select(ProjectModel)
            .where(*conditions)
            .order_by(self._order_by(filter))
            .offset(filter.offset)
            .limit(filter.limit)
        )
        records = (await self.session.exec(stmt)).all()
        return await self._to_entities(list(records)), total

    async def save(self, project: Project) -> Project:
        data = project.to_dict()
        member_ids = data.pop("member_ids")
        data.pop("task_ids")
        record = await self._get_record(project.id) if project.id else None
        if record is None:
            if not project.id:
                data.pop("id")
            record = ProjectModel(**data)
        else:
            for key, value in data.items():
                setattr(record, key, value)
        await self._flush(record)
        await self._sync_members(record.id, member_ids)
        return await self.find_by_id(record.id, include_deleted=True)

    async def _sync_members(self, project_id: int, member_ids: List[int]) -> None:
        current = (await self._member_ids([project_id])).get(project_id, [])
        removed = [user_id for user_id in current if user_id not in member_ids]
        if removed:
            await self.session.execute(
                delete(ProjectMemberModel).where(
                    ProjectMemberModel.project_id == project_id,
                    ProjectMemberModel.user_id.in_(removed),
                )
            )
        for user_id in member_ids:
            if user_id not in current:
                self.session.add(ProjectMemberModel(project_id=project_id, user_id=user_id))
        await self.session.flush()

    async def exists_by_id(self, project_id: int) -> bool:
        return await self.find_by_id(project_id) is not None

    async def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(ProjectModel.id).where(
            ProjectModel.name == name.strip(), ProjectModel.deleted_at.is_(None)
        )
        if exclude_id is not None:
            stmt = stmt.where(ProjectModel.id != exclude_id)
        return (await self.session.exec(stmt)).first() is not None
