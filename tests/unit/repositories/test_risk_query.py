"""
Unit tests for risk list query building
"""

from sqlmodel import select

from src.adapter.repositories.risk_repository import (
    SORTABLE_COLUMNS,
    build_filters,
    escape_like,
    resolve_ordering,
)
from src.app.repositories.risk_repository import MAX_PAGE, RiskListQuery
from src.domain.entities import Risk, RiskStatus


def test_page_and_limit_are_clamped():
    assert RiskListQuery(page=0, limit=500).page == 1
    assert RiskListQuery(page=-4).page == 1
    assert RiskListQuery(limit=500).limit == 20
    assert RiskListQuery(limit=0).limit == 20
    assert RiskListQuery(limit=100).limit == 100
    assert RiskListQuery(page=3, limit=10).offset == 20


def test_only_supplied_filters_are_applied():
    assert build_filters(RiskListQuery()) == []
    assert len(build_filters(RiskListQuery(status=RiskStatus.open, owner_id="u1"))) == 2
    assert len(build_filters(RiskListQuery(search="outage", category_id="c1", severity="high"))) == 3


def test_filter_values_are_bound_not_inlined():
    query = RiskListQuery(owner_id="u1' OR '1'='1", search="x'; DROP TABLE risks; --")
    stmt = select(Risk)
    for condition in build_filters(query):
        stmt = stmt.where(condition)

    compiled = stmt.compile()
    sql = str(compiled)

    assert "DROP TABLE" not in sql
    assert "'1'='1" not in sql
    assert "u1' OR '1'='1" in compiled.params.values()


def test_search_escapes_like_wildcards():
    assert escape_like("100%_done\\") == "100\\%\\_done\\\\"


def test_allowlisted_sort_is_used():
    column, descending = resolve_ordering(RiskListQuery(sort="title", order="asc"))

    assert column is SORTABLE_COLUMNS["title"]
    assert descending is False


def test_unknown_sort_falls_back_to_created_at_desc():
    column, descending = resolve_ordering(
        RiskListQuery(sort="title; DROP TABLE risks", order="asc")
    )

    assert column is SORTABLE_COLUMNS["created_at"]
    assert descending is True


def test_order_defaults_to_descending():
    _, descending = resolve_ordering(RiskListQuery(sort="severity", order="sideways"))

    assert descending is True


def test_huge_page_keeps_offset_within_64_bits():
    query = RiskListQuery(page=10**30, limit=100)

    assert query.page == MAX_PAGE
    assert query.offset <= 2**63 - 1
