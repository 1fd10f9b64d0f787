"""
Risk Entity

The central tracked hazard.
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import generate_uuid, utcnow
from .enums import RiskSeverity, RiskStatus


class Risk(SQLModel, table=True):
    """
    Risk entity - a tracked organizational risk.

    Business Rules:
    - title is required (1-255 chars)
    - owner_id references a user; enforced by the store
    - status defaults to open, severity defaults to medium
    - updated_at >= created_at; both equal on creation
    - deletion is physical, the audit trail keeps the history
    """

    __tablename__ = "risks"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=36)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    owner_id: str = Field(foreign_key="users.id", max_length=36)

    status: RiskStatus = Field(default=RiskStatus.open)
    severity: RiskSeverity = Field(default=RiskSeverity.medium)

    category_id: Optional[str] = Field(default=None, foreign_key="categories.id", max_length=36)
    review_date: Optional[date] = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))

    # Attribution
    created_by: str = Field(max_length=36)
    updated_by: str = Field(max_length=36)

    __table_args__ = (
        Index("idx_risk_status", "status"),
        Index("idx_risk_severity", "severity"),
        Index("idx_risk_owner_id", "owner_id"),
        Index("idx_risk_category_id", "category_id"),
        Index("idx_risk_created_at", "created_at"),
    )
