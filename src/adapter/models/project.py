from datetime import datetime
from typing import Optional

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class ProjectModel(SQLModel, table=True):
    """Project row. Members live in project_members, tasks in tasks."""

    __tablename__ = "projects"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(unique=True, index=True, max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    created_by_id: int = Field(foreign_key="users.id", index=True)

    # Soft delete support
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_project_deleted_at", "deleted_at"),)


class ProjectMemberModel(SQLModel, table=True):
    """
    Project membership link.

    The autoincrement id keeps members in the order they were added.
    """

    __tablename__ = "project_members"

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_member"),
    )
