"""
AuditLog Entity

Append-only record of one create/update/delete against one entity.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow
from .enums import AuditAction


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - immutable history of entity mutations.

    Business Rules:
    - Immutable (never updated or deleted)
    - No foreign key to the entity or the user: entries outlive both
    - changes holds the initial field values for "created", a sparse
      {field: {"from": old, "to": new}} map for "updated", and nothing for "deleted"
    - id is monotonic and breaks created_at ties in insertion order
    """

    __tablename__ = "audit_logs"

    id: Optional[int] = Field(default=None, primary_key=True)

    entity_type: str = Field(max_length=50)  # e.g., "risk"
    entity_id: str = Field(max_length=36)
    action: AuditAction
    changes: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    user_id: str = Field(max_length=36)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_audit_entity", "entity_type", "entity_id", "created_at"),
        Index("idx_audit_user_id", "user_id"),
    )
