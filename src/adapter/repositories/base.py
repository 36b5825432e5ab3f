from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.exceptions import ConflictError
from src.app.repositories.filters import ListFilter
from src.domain.entities import SortOrder


class SqlRepository:
    """Shared plumbing for SQLModel repositories"""

    # Filter sort_by value -> mapped column, first entry is the fallback
    sort_columns: Dict[str, Any] = {}

    def __init__(self, session: AsyncSession):
        self.session = session

    def _order_by(self, filter: ListFilter):
        column = self.sort_columns.get(filter.sort_by)
        if column is None:
            column = next(iter(self.sort_columns.values()))
        if filter.sort_order == SortOrder.asc:
            return column.asc()
        return column.desc()

    async def _flush(self, record: Any) -> None:
        self.session.add(record)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Resource already exists") from exc
        await self.session.refresh(record)
