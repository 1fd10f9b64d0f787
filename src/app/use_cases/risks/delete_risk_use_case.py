"""
Delete Risk Use Case

Records the deletion in the audit trail, then physically deletes the risk.
"""

import logging
from typing import Optional

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.audit_trail import AuditTrail
from src.app.services.unit_of_work import UnitOfWork
from .create_risk_use_case import RISK_ENTITY

logger = logging.getLogger(__name__)


class DeleteRiskUseCase:
    """
    Use case for deleting a risk.

    Business Rules:
    - the "deleted" audit entry is written first, while the acting user and
      risk id are still known
    - deleting a missing risk returns RISK_NOT_FOUND and leaves the audit
      entry behind as an orphan
    - with AUDIT_FAILURE_FATAL enabled, a failed audit write aborts the delete
    """

    def __init__(self, uow: UnitOfWork, audit_failure_fatal: Optional[bool] = None):
        self.uow = uow
        if audit_failure_fatal is None:
            audit_failure_fatal = ApplicationConfig.AUDIT_FAILURE_FATAL
        self.audit_failure_fatal = audit_failure_fatal

    async def execute(self, risk_id: str, acting_user_id: str) -> Result[None]:
        """
        Execute delete risk use case

        Args:
            risk_id: Risk to delete
            acting_user_id: User ID from JWT

        Returns:
            Result with None, or Error(RISK_NOT_FOUND / AUDIT_WRITE_FAILED)
        """
        async with self.uow:
            audit = AuditTrail(self.uow)
            recorded = await audit.record_delete(RISK_ENTITY, risk_id, acting_user_id)
            if not recorded and self.audit_failure_fatal:
                return Return.err(
                    Error("AUDIT_WRITE_FAILED", "Audit entry could not be recorded, risk not deleted")
                )

            deleted = await self.uow.risks.delete(risk_id)
            if not deleted:
                return Return.err(Error("RISK_NOT_FOUND", "Risk not found"))

            await self.uow.commit()
            logger.info("Risk %s deleted by %s", risk_id, acting_user_id)

            return Return.ok(None)
