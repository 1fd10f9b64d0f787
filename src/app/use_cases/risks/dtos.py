"""
Risk Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the risk domain.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Risk, RiskSeverity, RiskStatus


# ============================================================================
# Commands
# ============================================================================


class CreateRiskCommand(BaseModel):
    """Validated intent to create a risk"""

    title: str
    description: Optional[str] = None
    owner_id: str
    status: RiskStatus = RiskStatus.open
    severity: RiskSeverity = RiskSeverity.medium
    category_id: Optional[str] = None
    review_date: Optional[date] = None


class UpdateRiskCommand(BaseModel):
    """
    Partial update of a risk.

    Only fields in model_fields_set were supplied by the caller; an unset
    field is absent, not empty. description, category_id and review_date
    may be explicitly cleared with None.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[str] = None
    status: Optional[RiskStatus] = None
    severity: Optional[RiskSeverity] = None
    category_id: Optional[str] = None
    review_date: Optional[date] = None


# ============================================================================
# Response DTOs
# ============================================================================


class RiskResponse(BaseModel):
    """Full risk representation"""

    id: str
    title: str
    description: Optional[str]
    owner_id: str
    status: str
    severity: str
    category_id: Optional[str]
    review_date: Optional[date]
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_entity(cls, risk: Risk) -> "RiskResponse":
        return cls(
            id=risk.id,
            title=risk.title,
            description=risk.description,
            owner_id=risk.owner_id,
            status=RiskStatus(risk.status).value,
            severity=RiskSeverity(risk.severity).value,
            category_id=risk.category_id,
            review_date=risk.review_date,
            created_at=risk.created_at,
            updated_at=risk.updated_at,
            created_by=risk.created_by,
            updated_by=risk.updated_by,
        )


class PageMeta(BaseModel):
    """Pagination metadata; total ignores pagination"""

    page: int
    limit: int
    total: int


class RiskListResponse(BaseModel):
    """One page of risks"""

    data: List[RiskResponse]
    meta: PageMeta
