from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.api.utils.query import sort_field
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import ListUsersCommand, ListUsersResponse, ListUsersUseCase
from src.depends import get_current_user_id, get_unit_of_work
from src.domain.entities import SortOrder

router = APIRouter(prefix="/users", tags=["User"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ListUsersResponse)
async def list_users(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    sort_by: Optional[Literal["email", "username", "createdAt", "updatedAt"]] = Query(
        None, alias="sortBy"
    ),
    sort_order: SortOrder = Query(SortOrder.asc, alias="sortOrder"),
    search: Optional[str] = Query(None, description="Substring of the email"),
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Browse non-deleted users, e.g. to pick project members."""
    command = ListUsersCommand(
        limit=limit,
        offset=offset,
        sort_by=sort_field(sort_by, "email"),
        sort_order=sort_order,
        search=search,
    )

    result = await ListUsersUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
