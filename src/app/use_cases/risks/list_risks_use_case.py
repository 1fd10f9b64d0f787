from libs.result import Result, Return
from src.app.repositories.risk_repository import RiskListQuery
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PageMeta, RiskListResponse, RiskResponse


class ListRisksUseCase:
    """
    Use case for listing risks with filters, search, sort and pagination.

    Business Rules:
    - total reflects all matching risks, not just the returned page
    - page and limit in the response are the effective (clamped) values
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: RiskListQuery) -> Result[RiskListResponse]:
        async with self.uow:
            risks, total = await self.uow.risks.list(query)

            return Return.ok(
                RiskListResponse(
                    data=[RiskResponse.from_entity(risk) for risk in risks],
                    meta=PageMeta(page=query.page, limit=query.limit, total=total),
                )
            )
