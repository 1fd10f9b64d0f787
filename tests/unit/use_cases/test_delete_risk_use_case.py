"""
Unit tests for Delete Risk Use Case
"""

import pytest
from unittest.mock import AsyncMock
from sqlalchemy.exc import OperationalError

from src.app.use_cases.risks import DeleteRiskUseCase
from src.domain.entities import AuditAction


@pytest.mark.asyncio
async def test_delete_records_audit_before_delete(mock_uow):
    order = []
    mock_uow.audit_logs.create = AsyncMock(side_effect=lambda entry: order.append("audit") or entry)
    mock_uow.risks.delete = AsyncMock(side_effect=lambda risk_id: order.append("delete") or True)

    use_case = DeleteRiskUseCase(mock_uow, audit_failure_fatal=False)
    result = await use_case.execute("risk-1", "u1")

    assert result.is_ok()
    assert order == ["audit", "delete"]

    entry = mock_uow.audit_logs.create.call_args.args[0]
    assert entry.action == AuditAction.deleted
    assert entry.entity_id == "risk-1"
    assert entry.user_id == "u1"
    assert entry.changes is None


@pytest.mark.asyncio
async def test_delete_missing_risk_keeps_orphan_audit(mock_uow):
    mock_uow.risks.delete = AsyncMock(return_value=False)

    use_case = DeleteRiskUseCase(mock_uow, audit_failure_fatal=False)
    result = await use_case.execute("missing", "u1")

    assert result.is_err()
    assert result.error.code == "RISK_NOT_FOUND"
    mock_uow.audit_logs.create.assert_called_once()


@pytest.mark.asyncio
async def test_delete_proceeds_when_audit_write_fails(mock_uow):
    mock_uow.audit_logs.create = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down")))

    use_case = DeleteRiskUseCase(mock_uow, audit_failure_fatal=False)
    result = await use_case.execute("risk-1", "u1")

    assert result.is_ok()
    mock_uow.risks.delete.assert_called_once_with("risk-1")


@pytest.mark.asyncio
async def test_delete_aborted_when_audit_failure_is_fatal(mock_uow):
    mock_uow.audit_logs.create = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down")))

    use_case = DeleteRiskUseCase(mock_uow, audit_failure_fatal=True)
    result = await use_case.execute("risk-1", "u1")

    assert result.is_err()
    assert result.error.code == "AUDIT_WRITE_FAILED"
    mock_uow.risks.delete.assert_not_called()
