"""
Update Risk Use Case

Applies a partial update and records a sparse before/after diff.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.audit_trail import AuditTrail, field_change
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Risk
from .create_risk_use_case import RISK_ENTITY
from .dtos import RiskResponse, UpdateRiskCommand

logger = logging.getLogger(__name__)


def apply_changes(current: Risk, command: UpdateRiskCommand) -> Tuple[Dict[str, Any], Dict[str, Dict[str, Any]]]:
    """
    Merge the supplied fields of a partial update onto the current risk.

    Returns:
        (new field values, {field: {"from", "to"}} for every supplied field
        whose value actually differs)
    """
    values = current.model_dump()
    changes = {}
    for name, new_value in command.model_dump(exclude_unset=True).items():
        old_value = values[name]
        if old_value == new_value:
            continue
        changes[name] = field_change(old_value, new_value)
        values[name] = new_value
    return values, changes


class UpdateRiskUseCase:
    """
    Use case for partially updating a risk.

    Business Rules:
    - only fields present in the command are applied
    - the row is overwritten by id; a concurrent delete yields RISK_NOT_FOUND
    - one audit entry per update, holding only the fields that changed
    - no audit entry when nothing changed
    - an audit failure never reverses the update
    """

    def __init__(self, uow: UnitOfWork, audit_failure_fatal: Optional[bool] = None):
        self.uow = uow
        if audit_failure_fatal is None:
            audit_failure_fatal = ApplicationConfig.AUDIT_FAILURE_FATAL
        self.audit_failure_fatal = audit_failure_fatal

    async def execute(
        self, risk_id: str, command: UpdateRiskCommand, acting_user_id: str
    ) -> Result[RiskResponse]:
        """
        Execute update risk use case

        Args:
            risk_id: Risk to update
            command: Partial update; unset fields are left untouched
            acting_user_id: User ID from JWT

        Returns:
            Result with the updated risk, or Error(RISK_NOT_FOUND /
            INVALID_REFERENCE)
        """
        async with self.uow:
            current = await self.uow.risks.get_by_id(risk_id)
            if current is None:
                return Return.err(Error("RISK_NOT_FOUND", "Risk not found"))

            values, changes = apply_changes(current, command)
            values["updated_by"] = acting_user_id

            try:
                updated = await self.uow.risks.update(Risk(**values))
                if updated is None:
                    return Return.err(Error("RISK_NOT_FOUND", "Risk not found"))
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(
                    Error("INVALID_REFERENCE", "Owner or category does not exist")
                )

            logger.info(
                "Risk %s updated by %s (%d field(s) changed)",
                risk_id,
                acting_user_id,
                len(changes),
            )

            audit = AuditTrail(self.uow)
            recorded = await audit.record_update(RISK_ENTITY, risk_id, changes, acting_user_id)
            if not recorded and self.audit_failure_fatal:
                return Return.err(
                    Error("AUDIT_WRITE_FAILED", "Risk was updated but its audit entry was not recorded")
                )

            return Return.ok(RiskResponse.from_entity(updated))
