from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import select

from src.adapter.models import PersonModel, UserModel
from src.adapter.repositories.base import SqlRepository
from src.adapter.repositories.person_repository import to_person
from src.app.repositories.filters import UserFilter
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


def to_user(record: UserModel, person: Optional[PersonModel] = None) -> User:
    return User.reconstitute(
        id=record.id,
        email=record.email,
        username=record.username,
        password=record.password,
        person_id=record.person_id,
        person=to_person(person) if person is not None else None,
        deleted_at=record.deleted_at,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class UserRepository(SqlRepository, IUserRepository):
    """User repository implementation using SQLModel"""

    sort_columns = {
        "email": UserModel.email,
        "username": UserModel.username,
        "created_at": UserModel.created_at,
        "updated_at": UserModel.updated_at,
        "id": UserModel.id,
    }

    def _select(self):
        return select(UserModel, PersonModel).join(
            PersonModel, PersonModel.id == UserModel.person_id, isouter=True
        )

    async def _find_one(self, condition, include_deleted: bool) -> Optional[User]:
        stmt = self._select().where(condition)
        if not include_deleted:
            stmt = stmt.where(UserModel.deleted_at.is_(None))
        row = (await self.session.exec(stmt)).first()
        if row is None:
            return None
        record, person = row
        return to_user(record, person)

    async def find_by_id(
        self, user_id: int, include_deleted: bool = False
    ) -> Optional[User]:
        return await self._find_one(UserModel.id == user_id, include_deleted)

    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[User]:
        return await self._find_one(UserModel.email == email.strip(), include_deleted)

    async def find_by_username(
        self, username: str, include_deleted: bool = False
    ) -> Optional[User]:
        return await self._find_one(
            UserModel.username == username.strip(), include_deleted
        )

    async def find_by_ids(self, user_ids: List[int]) -> List[User]:
        if not user_ids:
            return []
        stmt = self._select().where(
            UserModel.id.in_(user_ids), UserModel.deleted_at.is_(None)
        )
        rows = (await self.session.exec(stmt)).all()
        by_id = {record.id: to_user(record, person) for record, person in rows}
        return [by_id[user_id] for user_id in user_ids if user_id in by_id]

    async def find_all(self, filter: UserFilter) -> Tuple[List[User], int]:
        conditions = []
        if filter.only_deleted:
            conditions.append(UserModel.deleted_at.is_not(None))
        elif not filter.include_deleted:
            conditions.append(UserModel.deleted_at.is_(None))
        if filter.search:
            conditions.append(
                func.lower(UserModel.email).contains(filter.search.strip().lower())
            )
        if filter.person_id is not None:
            conditions.append(UserModel.person_id == filter.person_id)

        count_stmt = select(func.count()).select_from(UserModel).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            self._select()
            .where(*conditions)
            .order_by(self._order_by(filter))
            .offset(filter.offset)
            .limit(filter.limit)
        )
        rows = (await self.session.exec(stmt)).all()
        return [to_user(record, person) for record, person in rows], total

    async def save(self, user: User) -> User:
        data = user.to_dict()
        data.pop("person")
        stmt = select(UserModel).where(UserModel.id == user.id)
        record = (await self.session.exec(stmt)).one_or_none() if user.id else None
        if record is None:
            if not user.id:
                data.pop("id")
            record = UserModel(**data)
        else:
            for key, value in data.items():
                setattr(record, key, value)
        await self._flush(record)
        return await self.find_by_id(record.id, include_deleted=True)

    async def delete(self, user_id: int) -> None:
        user = await self.find_by_id(user_id)
        if user is None:
            return
        user.delete()
        await self.save(user)

    async def exists_by_id(self, user_id: int) -> bool:
        return await self.find_by_id(user_id) is not None

    async def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email.strip())
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)
        return (await self.session.exec(stmt)).first() is not None

    async def exists_by_username(
        self, username: str, exclude_id: Optional[int] = None
    ) -> bool:
        stmt = select(UserModel.id).where(UserModel.username == username.strip())
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)
        return (await self.session.exec(stmt)).first() is not None
