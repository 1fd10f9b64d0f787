"""
Audit API Routes

Handles audit trail retrieval endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import AuditLogEntryResponse, GetEntityAuditLogUseCase
from src.app.use_cases.risks.create_risk_use_case import RISK_ENTITY
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Identity

router = APIRouter(prefix="/risks", tags=["Audit"])


@router.get(
    "/{risk_id}/audit",
    status_code=status.HTTP_200_OK,
    response_model=List[AuditLogEntryResponse],
)
async def get_risk_audit_log(
    risk_id: str,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: Optional[int] = Query(
        ApplicationConfig.AUDIT_LIST_LIMIT, description="Maximum number of entries (1-100)"
    ),
):
    """
    Get Risk Audit Trail

    Returns the audit entries of a risk, newest first. Deleted risks keep
    their history.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    use_case = GetEntityAuditLogUseCase(uow)
    result = await use_case.execute(RISK_ENTITY, risk_id, limit=limit)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
