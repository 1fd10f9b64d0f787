from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from pydantic import BaseModel, field_validator

from config import ApplicationConfig
from src.domain.entities import Risk, RiskSeverity, RiskStatus

DEFAULT_PAGE_SIZE = ApplicationConfig.RISK_PAGE_SIZE
MAX_PAGE_SIZE = ApplicationConfig.RISK_MAX_PAGE_SIZE
DEFAULT_SORT = "created_at"
DEFAULT_ORDER = "desc"
# Keeps (page - 1) * limit within a signed 64-bit OFFSET
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // MAX_PAGE_SIZE + 1


class RiskListQuery(BaseModel):
    """
    One risk list request.

    page < 1 becomes 1, page is capped at MAX_PAGE, and a limit outside
    1..MAX_PAGE_SIZE becomes DEFAULT_PAGE_SIZE; out-of-range values are never
    rejected. sort is only
    ever used as a lookup key into the repository's column allowlist.
    """

    status: Optional[RiskStatus] = None
    severity: Optional[RiskSeverity] = None
    category_id: Optional[str] = None
    owner_id: Optional[str] = None
    search: Optional[str] = None
    sort: str = DEFAULT_SORT
    order: str = DEFAULT_ORDER
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @field_validator("page", mode="before")
    @classmethod
    def clamp_page(cls, value):
        if value is None or int(value) < 1:
            return 1
        return min(int(value), MAX_PAGE)

    @field_validator("limit", mode="before")
    @classmethod
    def clamp_limit(cls, value):
        if value is None or not 1 <= int(value) <= MAX_PAGE_SIZE:
            return DEFAULT_PAGE_SIZE
        return int(value)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class IRiskRepository(ABC):
    """Risk repository interface - application layer"""

    @abstractmethod
    async def list(self, query: RiskListQuery) -> Tuple[List[Risk], int]:
        """
        Get one page of risks matching the query's filters.

        Returns:
            Tuple of (risks on the requested page, total matching risks
            ignoring pagination)
        """
        pass

    @abstractmethod
    async def get_by_id(self, risk_id: str) -> Optional[Risk]:
        """Get risk by ID"""
        pass

    @abstractmethod
    async def create(self, risk: Risk) -> Risk:
        """Create a new risk; created_at and updated_at are set to the same instant"""
        pass

    @abstractmethod
    async def update(self, risk: Risk) -> Optional[Risk]:
        """
        Overwrite every mutable column of the risk keyed by its id.

        Returns None when no row was affected (the risk was deleted).
        """
        pass

    @abstractmethod
    async def delete(self, risk_id: str) -> bool:
        """Delete risk by ID; False when no row was affected"""
        pass
