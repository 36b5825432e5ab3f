from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import select

from src.adapter.models import PersonModel
from src.adapter.repositories.base import SqlRepository
from src.app.repositories.filters import PersonFilter
from src.app.repositories.person_repository import IPersonRepository
from src.domain.entities import Person


def to_person(record: PersonModel) -> Person:
    return Person.reconstitute(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        deleted_at=record.deleted_at,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class PersonRepository(SqlRepository, IPersonRepository):
    """Person repository implementation using SQLModel"""

    sort_columns = {
        "created_at": PersonModel.created_at,
        "updated_at": PersonModel.updated_at,
        "first_name": PersonModel.first_name,
        "last_name": PersonModel.last_name,
        "id": PersonModel.id,
    }

    async def _get_record(self, person_id: int) -> Optional[PersonModel]:
        stmt = select(PersonModel).where(PersonModel.id == person_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_id(
        self, person_id: int, include_deleted: bool = False
    ) -> Optional[Person]:
        record = await self._get_record(person_id)
        if record is None or (record.deleted_at is not None and not include_deleted):
            return None
        return to_person(record)

    async def find_all(self, filter: PersonFilter) -> Tuple[List[Person], int]:
        conditions = []
        if filter.only_deleted:
            conditions.append(PersonModel.deleted_at.is_not(None))
        elif not filter.include_deleted:
            conditions.append(PersonModel.deleted_at.is_(None))
        if filter.first_name:
            conditions.append(PersonModel.first_name == filter.first_name)
        if filter.last_name:
            conditions.append(PersonModel.last_name == filter.last_name)

        count_stmt = select(func.count()).select_from(PersonModel).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            select(PersonModel)
            .where(*conditions)
            .order_by(self._order_by(filter))
            .offset(filter.offset)
            .limit(filter.limit)
        )
        records = (await self.session.exec(stmt)).all()
        return [to_person(r) for r in records], total

    async def save(self, person: Person) -> Person:
        data = person.to_dict()
        record = await self._get_record(person.id) if person.id else None
        if record is None:
            if not person.id:
                data.pop("id")
            record = PersonModel(**data)
        else:
            for key, value in data.items():
                setattr(record, key, value)
        await self._flush(record)
        return to_person(record)

    async def delete(self, person_id: int) -> None:
        person = await self.find_by_id(person_id)
        if person is None:
            return
        person.delete()
        await self.save(person)

    async def exists_by_id(self, person_id: int) -> bool:
        return await self.find_by_id(person_id) is not None
