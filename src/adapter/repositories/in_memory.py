"""
In-memory repository adapters.

Rows are stored as ``to_dict()`` snapshots and every read returns a freshly
reconstituted entity, so callers cannot mutate stored state without going
through ``save``. Ids are assigned per table starting at 1.
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Tuple

from src.app.repositories.exceptions import ConflictError
from src.app.repositories.filters import (
    ListFilter,
    PersonFilter,
    ProjectFilter,
    TaskFilter,
    UserFilter,
)
from src.app.repositories.person_repository import IPersonRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import Person, Project, SortOrder, Task, User


class InMemoryDatabase:
    """Table storage shared by the in-memory repositories of one unit of work"""

    TABLES = ("persons", "users", "projects", "tasks")

    def __init__(self):
        self.tables: Dict[str, Dict[int, Dict[str, Any]]] = {t: {} for t in self.TABLES}
        self.counters: Dict[str, int] = {t: 0 for t in self.TABLES}

    def next_id(self, table: str) -> int:
        self.counters[table] += 1
        return self.counters[table]

    def snapshot(self) -> Tuple[Dict, Dict]:
        return copy.deepcopy(self.tables), dict(self.counters)

    def load(self, state: Tuple[Dict, Dict]) -> None:
        tables, counters = state
        self.tables = copy.deepcopy(tables)
        self.counters = dict(counters)


def _paginate(
    rows: List[Dict[str, Any]], filter: ListFilter, default_sort: str
) -> Tuple[List[Dict[str, Any]], int]:
    sort_by = filter.sort_by if rows and filter.sort_by in rows[0] else default_sort
    reverse = filter.sort_order == SortOrder.desc
    # Rows with a null sort key go last in ascending order
    rows = sorted(
        rows,
        key=lambda r: (r[sort_by] is not None, r[sort_by], r["id"]),
        reverse=reverse,
    )
    return rows[filter.offset : filter.offset + filter.limit], len(rows)


def _deleted_matches(row: Dict[str, Any], filter: ListFilter) -> bool:
    if getattr(filter, "only_deleted", False):
        return row["deleted_at"] is not None
    return filter.include_deleted or row["deleted_at"] is None


class InMemoryRepository:
    table: str = ""
    entity: Any = None

    def __init__(self, db: InMemoryDatabase):
        self.db = db

    @property
    def rows(self) -> Dict[int, Dict[str, Any]]:
        return self.db.tables[self.table]

    def _to_entity(self, row: Dict[str, Any]):
        return self.entity.reconstitute(**copy.deepcopy(row))

    def _get(self, entity_id: int, include_deleted: bool):
        row = self.rows.get(entity_id)
        if row is None or (row["deleted_at"] is not None and not include_deleted):
            return None
        return self._to_entity(row)

    def _check_unique(self, data: Dict[str, Any], fields: Tuple[str, ...]) -> None:
        for row in self.rows.values():
            if row["id"] == data["id"]:
                continue
            for field in fields:
                if row[field] == data[field]:
                    raise ConflictError(f"{field} already exists")

    def _store(self, data: Dict[str, Any]) -> int:
        if not data["id"]:
            data["id"] = self.db.next_id(self.table)
        self.rows[data["id"]] = copy.deepcopy(data)
        return data["id"]

    def _select(self, predicate: Callable[[Dict[str, Any]], bool]) -> List[Dict[str, Any]]:
        return [row for row in self.rows.values() if predicate(row)]

    async def exists_by_id(self, entity_id: int) -> bool:
        return self._get(entity_id, include_deleted=False) is not None

    async def delete(self, entity_id: int) -> None:
        entity = self._get(entity_id, include_deleted=False)
        if entity is None:
            return
        entity.delete()
        await self.save(entity)


class InMemoryPersonRepository(InMemoryRepository, IPersonRepository):
    table = "persons"
    entity = Person

    async def find_by_id(
        self, person_id: int, include_deleted: bool = False
    ) -> Optional[Person]:
        return self._get(person_id, include_deleted)

    async def find_all(self, filter: PersonFilter) -> Tuple[List[Person], int]:
        rows = self._select(
            lambda r: _deleted_matches(r, filter)
            and (not filter.first_name or r["first_name"] == filter.first_name)
            and (not filter.last_name or r["last_name"] == filter.last_name)
        )
        page, total = _paginate(rows, filter, "created_at")
        return [self._to_entity(r) for r in page], total

    async def save(self, person: Person) -> Person:
        person_id = self._store(person.to_dict())
        return self._get(person_id, include_deleted=True)


class InMemoryUserRepository(InMemoryRepository, IUserRepository):
    table = "users"
    entity = User

    def _to_entity(self, row: Dict[str, Any]) -> User:
        data = copy.deepcopy(row)
        person_row = self.db.tables["persons"].get(data["person_id"])
        data["person"] = Person.reconstitute(**copy.deepcopy(person_row)) if person_row else None
        return User.reconstitute(**data)

    def _find_by(self, field: str, value: str, include_deleted: bool) -> Optional[User]:
        for row in self.rows.values():
            if row[field] == value.strip():
                if row["deleted_at"] is not None and not include_deleted:
                    return None
                return self._to_entity(row)
        return None

    async def find_by_id(
        self, user_id: int, include_deleted: bool = False
    ) -> Optional[User]:
        return self._get(user_id, include_deleted)

    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[User]:
        return self._find_by("email", email, include_deleted)

    async def find_by_username(
        self, username: str, include_deleted: bool = False
    ) -> Optional[User]:
        return self._find_by("username", username, include_deleted)

    async def find_by_ids(self, user_ids: List[int]) -> List[User]:
        users = [self._get(user_id, include_deleted=False) for user_id in user_ids]
        return [user for user in users if user is not None]

    async def find_all(self, filter: UserFilter) -> Tuple[List[User], int]:
        search = filter.search.strip().lower() if filter.search else None
        rows = self._select(
            lambda r: _deleted_matches(r, filter)
            and (search is None or search in r["email"].lower())
            and (filter.person_id is None or r["person_id"] == filter.person_id)
        )
        page, total = _paginate(rows, filter, "email")
        return [self._to_entity(r) for r in page], total

    async def save(self, user: User) -> User:
        data = user.to_dict()
        data.pop("person")
        self._check_unique(data, ("email", "username"))
        user_id = self._store(data)
        return self._get(user_id, include_deleted=True)

    async def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            r["email"] == email.strip() and r["id"] != exclude_id
            for r in self.rows.values()
        )

    async def exists_by_username(
        self, username: str, exclude_id: Optional[int] = None
    ) -> bool:
        return any(
            r["username"] == username.strip() and r["id"] != exclude_id
            for r in self.rows.values()
        )


class InMemoryProjectRepository(InMemoryRepository, IProjectRepository):
    table = "projects"
    entity = Project

    def _to_entity(self, row: Dict[str, Any]) -> Project:
        data = copy.deepcopy(row)
        data["task_ids"] = sorted(
            t["id"]
            for t in self.db.tables["tasks"].values()
            if t["project_id"] == row["id"] and t["deleted_at"] is None
        )
        return Project.reconstitute(**data)

    async def find_by_id(
        self, project_id: int, include_deleted: bool = False
    ) -> Optional[Project]:
        return self._get(project_id, include_deleted)

    async def find_all(self, filter: ProjectFilter) -> Tuple[List[Project], int]:
        rows = self._select(
            lambda r: _deleted_matches(r, filter)
            and (filter.member_id is None or filter.member_id in r["member_ids"])
            and (filter.created_by_id is None or r["created_by_id"] == filter.created_by_id)
        )
        page, total = _paginate(rows, filter, "created_at")
        return [self._to_entity(r) for r in page], total

    async def save(self, project: Project) -> Project:
        data = project.to_dict()
        data.pop("task_ids")
        self._check_unique(data, ("slug",))
        project_id = self._store(data)
        return self._get(project_id, include_deleted=True)

    async def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            r["name"] == name.strip() and r["id"] != exclude_id and r["deleted_at"] is None
            for r in self.rows.values()
        )


class InMemoryTaskRepository(InMemoryRepository, ITaskRepository):
    table = "tasks"
    entity = Task

    async def find_by_id(
        self, task_id: int, include_deleted: bool = False
    ) -> Optional[Task]:
        return self._get(task_id, include_deleted)

    async def find_all(self, filter: TaskFilter) -> Tuple[List[Task], int]:
        def matches(r: Dict[str, Any]) -> bool:
            return (
                _deleted_matches(r, filter)
                and (filter.project_id is None or r["project_id"] == filter.project_id)
                and (filter.project_ids is None or r["project_id"] in filter.project_ids)
                and (filter.status is None or r["status"] == filter.status)
                and (filter.priority is None or r["priority"] == filter.priority)
                and (
                    filter.assigned_user_id is None
                    or filter.assigned_user_id in r["assigned_user_ids"]
                )
            )

        page, total = _paginate(self._select(matches), filter, "created_at")
        return [self._to_entity(r) for r in page], total

    async def save(self, task: Task) -> Task:
        task_id = self._store(task.to_dict())
        return self._get(task_id, include_deleted=True)

    async def exists_by_name(
        self, name: str, project_id: int, exclude_id: Optional[int] = None
    ) -> bool:
        return any(
            r["name"] == name.strip()
            and r["project_id"] == project_id
            and r["id"] != exclude_id
            and r["deleted_at"] is None
            for r in self.rows.values()
        )
