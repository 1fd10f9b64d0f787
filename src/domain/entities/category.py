"""
Category Entity

Groups risks for filtering and reporting.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import generate_uuid, utcnow


class Category(SQLModel, table=True):
    """Risk category - names are unique"""

    __tablename__ = "categories"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=36)
    name: str = Field(unique=True, index=True, max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
