"""
Risk API Routes

Listing and role-gated mutation of risks. Every route requires a bearer token.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import ServerError, raise_for_error
from src.app.repositories.risk_repository import DEFAULT_ORDER, DEFAULT_PAGE_SIZE, DEFAULT_SORT, RiskListQuery
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.risks import (
    CreateRiskCommand,
    CreateRiskUseCase,
    DeleteRiskUseCase,
    GetRiskUseCase,
    ListRisksUseCase,
    RiskListResponse,
    RiskResponse,
    UpdateRiskCommand,
    UpdateRiskUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Identity, RiskSeverity, RiskStatus

router = APIRouter(prefix="/risks", tags=["Risks"])


class CreateRiskRequest(BaseModel):
    """POST /risks request payload"""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    owner_id: str = Field(..., min_length=1, max_length=36)
    status: Optional[RiskStatus] = None
    severity: Optional[RiskSeverity] = None
    category_id: Optional[str] = Field(default=None, max_length=36)
    review_date: Optional[date] = Field(default=None, description="YYYY-MM-DD")


class UpdateRiskRequest(BaseModel):
    """
    PUT /risks/{id} request payload

    Every field is optional; omitted fields are left unchanged. title,
    owner_id, status and severity cannot be cleared.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    owner_id: Optional[str] = Field(default=None, min_length=1, max_length=36)
    status: Optional[RiskStatus] = None
    severity: Optional[RiskSeverity] = None
    category_id: Optional[str] = Field(default=None, max_length=36)
    review_date: Optional[date] = Field(default=None, description="YYYY-MM-DD")

    @field_validator("title", "owner_id", "status", "severity")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


@router.get("", status_code=status.HTTP_200_OK, response_model=RiskListResponse)
async def list_risks(
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: int = Query(1, description="1-based page number; values below 1 become 1"),
    limit: int = Query(DEFAULT_PAGE_SIZE, description="Page size 1-100; other values become the default"),
    search: Optional[str] = Query(None, description="Case-insensitive match on title or description"),
    sort: str = Query(DEFAULT_SORT, description="Sort field; unknown values fall back to created_at"),
    order: str = Query(DEFAULT_ORDER, description="asc or desc"),
    risk_status: Optional[RiskStatus] = Query(None, alias="status"),
    severity: Optional[RiskSeverity] = Query(None),
    category_id: Optional[str] = Query(None),
    owner_id: Optional[str] = Query(None),
):
    """
    List Risks

    Returns:
        - data: risks on the requested page
        - meta: effective page and limit, total matching risks

    Raises:
        - 400 Bad Request: Non-integer page/limit or unknown status/severity
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    query = RiskListQuery(
        status=risk_status,
        severity=severity,
        category_id=category_id,
        owner_id=owner_id,
        search=search,
        sort=sort,
        order=order,
        page=page,
        limit=limit,
    )

    use_case = ListRisksUseCase(uow)
    result = await use_case.execute(query)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RiskResponse)
async def create_risk(
    request: CreateRiskRequest,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Risk

    status defaults to open and severity to medium. A "created" audit entry
    holding the initial field values is recorded.

    Raises:
        - 400 Bad Request: Invalid input or unknown owner/category
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    command = CreateRiskCommand(
        title=request.title,
        description=request.description,
        owner_id=request.owner_id,
        status=request.status or RiskStatus.open,
        severity=request.severity or RiskSeverity.medium,
        category_id=request.category_id,
        review_date=request.review_date,
    )

    use_case = CreateRiskUseCase(uow)
    result = await use_case.execute(command, acting_user_id=current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{risk_id}", status_code=status.HTTP_200_OK, response_model=RiskResponse)
async def get_risk(
    risk_id: str,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Risk

    Raises:
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 404 Not Found: Risk does not exist
    """
    use_case = GetRiskUseCase(uow)
    result = await use_case.execute(risk_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{risk_id}", status_code=status.HTTP_200_OK, response_model=RiskResponse)
async def update_risk(
    risk_id: str,
    request: UpdateRiskRequest,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Risk (partial)

    Only supplied fields are applied. An "updated" audit entry with a
    {from, to} pair per changed field is recorded when anything changed.

    Raises:
        - 400 Bad Request: Invalid input or unknown owner/category
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 404 Not Found: Risk does not exist (or was deleted concurrently)
        - 500 Internal Server Error: Server error
    """
    # exclude_unset keeps "absent" distinct from "explicitly null"
    command = UpdateRiskCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateRiskUseCase(uow)
    result = await use_case.execute(risk_id, command, acting_user_id=current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{risk_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_risk(
    risk_id: str,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Risk

    The "deleted" audit entry is recorded before the row is removed.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 404 Not Found: Risk does not exist
        - 500 Internal Server Error: Server error
    """
    use_case = DeleteRiskUseCase(uow)
    result = await use_case.execute(risk_id, acting_user_id=current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
