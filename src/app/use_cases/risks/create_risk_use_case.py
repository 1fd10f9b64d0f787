"""
Create Risk Use Case

Persists a new risk, then records its initial state in the audit trail.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.audit_trail import AuditTrail
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Risk
from .dtos import CreateRiskCommand, RiskResponse

logger = logging.getLogger(__name__)

RISK_ENTITY = "risk"


def initial_fields(risk: Risk) -> Dict[str, Any]:
    """Field set recorded for a created risk; unset optional references are left out"""
    fields = {
        "title": risk.title,
        "description": risk.description,
        "owner_id": risk.owner_id,
        "status": risk.status,
        "severity": risk.severity,
    }
    if risk.category_id is not None:
        fields["category_id"] = risk.category_id
    if risk.review_date is not None:
        fields["review_date"] = risk.review_date
    return fields


class CreateRiskUseCase:
    """
    Use case for creating a risk.

    Business Rules:
    - status defaults to open, severity to medium
    - creator and updater are the acting user
    - the risk is committed before the audit entry is written
    - an audit failure is logged and only fails the request when
      AUDIT_FAILURE_FATAL is enabled; the risk stays created either way
    """

    def __init__(self, uow: UnitOfWork, audit_failure_fatal: Optional[bool] = None):
        self.uow = uow
        if audit_failure_fatal is None:
            audit_failure_fatal = ApplicationConfig.AUDIT_FAILURE_FATAL
        self.audit_failure_fatal = audit_failure_fatal

    async def execute(self, command: CreateRiskCommand, acting_user_id: str) -> Result[RiskResponse]:
        """
        Execute create risk use case

        Args:
            command: Validated risk fields
            acting_user_id: User ID from JWT

        Returns:
            Result with the created risk, or Error(INVALID_REFERENCE) when the
            owner or category does not exist
        """
        async with self.uow:
            risk = Risk(
                title=command.title,
                description=command.description,
                owner_id=command.owner_id,
                status=command.status,
                severity=command.severity,
                category_id=command.category_id,
                review_date=command.review_date,
                created_by=acting_user_id,
                updated_by=acting_user_id,
            )

            try:
                risk = await self.uow.risks.create(risk)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(
                    Error("INVALID_REFERENCE", "Owner or category does not exist")
                )

            logger.info("Risk %s created by %s", risk.id, acting_user_id)

            # Snapshot before auditing; a failed audit write rolls back and expires the risk
            response = RiskResponse.from_entity(risk)
            fields = initial_fields(risk)

            audit = AuditTrail(self.uow)
            recorded = await audit.record_create(
                RISK_ENTITY, response.id, fields, acting_user_id
            )
            if not recorded and self.audit_failure_fatal:
                return Return.err(
                    Error("AUDIT_WRITE_FAILED", "Risk was created but its audit entry was not recorded")
                )

            return Return.ok(response)
