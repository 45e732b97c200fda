"""SQLModel table models for folders and cars."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Column, Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Folder(SQLModel, table=True):
    """
    A named folder shown as one node of the spiral.

    `views` only ever grows; it is changed through an atomic increment, never
    assigned from request input.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    url: Optional[str] = None
    views: int = Field(default=0, ge=0)
    is_private: bool = False
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class Car(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    year: int
    engine: str
    hp: int
    features: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
