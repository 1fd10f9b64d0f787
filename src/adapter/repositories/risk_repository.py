from typing import List, Optional, Tuple

from sqlalchemy import delete, func, or_, update
from sqlalchemy.orm.attributes import InstrumentedAttribute
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.risk_repository import (
    DEFAULT_ORDER,
    DEFAULT_SORT,
    IRiskRepository,
    RiskListQuery,
)
from src.domain.base import utcnow
from src.domain.entities import Risk

# Public sort name -> column. Only these columns can ever appear in ORDER BY.
SORTABLE_COLUMNS = {
    "title": Risk.title,
    "status": Risk.status,
    "severity": Risk.severity,
    "category": Risk.category_id,
    "category_id": Risk.category_id,
    "review_date": Risk.review_date,
    "updated_at": Risk.updated_at,
    "created_at": Risk.created_at,
}

# Columns written by update(); id and the creation attribution never change.
MUTABLE_COLUMNS = (
    "title",
    "description",
    "owner_id",
    "status",
    "severity",
    "category_id",
    "review_date",
    "updated_at",
    "updated_by",
)

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term only matches literally"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_filters(query: RiskListQuery) -> list:
    """Conjunction of the filters actually supplied; values are always bound parameters"""
    conditions = []
    if query.status is not None:
        conditions.append(col(Risk.status) == query.status)
    if query.severity is not None:
        conditions.append(col(Risk.severity) == query.severity)
    if query.category_id:
        conditions.append(col(Risk.category_id) == query.category_id)
    if query.owner_id:
        conditions.append(col(Risk.owner_id) == query.owner_id)
    if query.search:
        pattern = f"%{escape_like(query.search)}%"
        conditions.append(
            or_(
                col(Risk.title).ilike(pattern, escape=LIKE_ESCAPE),
                col(Risk.description).ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
    return conditions


def resolve_ordering(query: RiskListQuery) -> Tuple[InstrumentedAttribute, bool]:
    """
    Map the requested sort onto the allowlist.

    Returns (column, descending). An unknown sort name falls back to the
    default ordering (created_at descending) regardless of the order given.
    """
    column = SORTABLE_COLUMNS.get(query.sort)
    if column is None:
        return SORTABLE_COLUMNS[DEFAULT_SORT], DEFAULT_ORDER == "desc"
    return column, query.order.lower() != "asc"


class RiskRepository(IRiskRepository):
    """Risk repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self, query: RiskListQuery) -> Tuple[List[Risk], int]:
        conditions = build_filters(query)

        count_stmt = select(func.count()).select_from(Risk)
        data_stmt = select(Risk)
        for condition in conditions:
            count_stmt = count_stmt.where(condition)
            data_stmt = data_stmt.where(condition)

        total = (await self.session.exec(count_stmt)).one()

        column, descending = resolve_ordering(query)
        # id as tie-breaker keeps pages stable when sort values repeat
        if descending:
            data_stmt = data_stmt.order_by(col(column).desc(), col(Risk.id).desc())
        else:
            data_stmt = data_stmt.order_by(col(column).asc(), col(Risk.id).asc())
        data_stmt = data_stmt.offset(query.offset).limit(query.limit)

        result = await self.session.exec(data_stmt)
        return list(result.all()), total

    async def get_by_id(self, risk_id: str) -> Optional[Risk]:
        stmt = select(Risk).where(Risk.id == risk_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, risk: Risk) -> Risk:
        now = utcnow()
        risk.created_at = now
        risk.updated_at = now
        self.session.add(risk)
        await self.session.flush()
        await self.session.refresh(risk)
        return risk

    async def update(self, risk: Risk) -> Optional[Risk]:
        """
        Full-row UPDATE keyed by id.

        A concurrent delete shows up as zero affected rows; there is no
        separate existence check.
        """
        risk.updated_at = utcnow()
        values = {name: getattr(risk, name) for name in MUTABLE_COLUMNS}
        stmt = update(Risk).where(col(Risk.id) == risk.id).values(**values)
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return risk

    async def delete(self, risk_id: str) -> bool:
        stmt = delete(Risk).where(col(Risk.id) == risk_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
