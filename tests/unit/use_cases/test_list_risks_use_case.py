import pytest

from src.app.repositories.risk_repository import RiskListQuery
from src.app.use_cases.risks import ListRisksUseCase
from src.domain.entities import Risk


@pytest.mark.asyncio
async def test_meta_reports_effective_paging_and_total(mock_uow):
    risk = Risk(id="r1", title="Server outage", owner_id="u1", created_by="u1", updated_by="u1")
    mock_uow.risks.list.return_value = ([risk], 42)

    result = await ListRisksUseCase(mock_uow).execute(RiskListQuery(page=3, limit=500))

    assert result.is_ok()
    assert result.value.meta.page == 3
    assert result.value.meta.limit == 20
    assert result.value.meta.total == 42
    assert [r.id for r in result.value.data] == ["r1"]
