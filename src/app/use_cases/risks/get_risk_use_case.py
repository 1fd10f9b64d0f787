from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RiskResponse


class GetRiskUseCase:
    """Use case for fetching a single risk"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, risk_id: str) -> Result[RiskResponse]:
        async with self.uow:
            risk = await self.uow.risks.get_by_id(risk_id)
            if risk is None:
                return Return.err(Error("RISK_NOT_FOUND", "Risk not found"))

            return Return.ok(RiskResponse.from_entity(risk))
