"""
User Entity

Represents a person who can sign in and own risks.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import generate_uuid, utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - New registrations get role=member; admins are provisioned out of band
    """

    __tablename__ = "users"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=36)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    name: str = Field(max_length=255)

    role: UserRole = Field(default=UserRole.member)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
