from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class UserModel(SQLModel, table=True):
    """
    User row.

    - Email and username are unique across all users, deleted or not
    - ``password`` holds the bcrypt hash (60 chars)
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    username: str = Field(unique=True, index=True, max_length=50)
    password: str = Field(max_length=255)
    person_id: int = Field(foreign_key="persons.id", index=True)

    # Soft delete support
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_deleted_at", "deleted_at"),)
