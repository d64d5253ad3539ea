"""Aggregation engine for finance statistics.

Works on the full record set held in memory as a pandas DataFrame:

- finance stats: global expense/income totals and record count, the same
  two conditional sums per category, and per calendar month (ascending).
- category stats: expense and income records ranked by category total,
  highest first, with a record count per category.

Amounts that are missing or not JSON numbers (numeric strings included)
count as 0. Only ``type`` values ``expense`` and ``income`` contribute to
the sums; any other value still counts towards ``totalTransactions``.
Categories may be any JSON value and are grouped by value. Records whose
``date`` is not a string of the exact form ``YYYY-MM-DD`` are left out of
the monthly breakdown only.
"""

import json
import re
from typing import Any, Iterable, Optional

import pandas as pd
import structlog

from finance_api.domains.stats.schemas import (
    CategoryRanking,
    CategoryStats,
    CategoryTotals,
    FinanceStats,
    MonthlyTotals,
)

logger = structlog.get_logger()

EXPENSE = "expense"
INCOME = "income"
DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

_COLUMNS = ["amount", "category", "date", "type"]


def _amount(value: Any) -> float:
    """Only real numbers add up; strings, booleans and containers count as 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _group_key(value: Any) -> Optional[str]:
    """Hashable stand-in for a category value, which may be any JSON value."""
    if value is None or (isinstance(value, float) and value != value):
        return None
    return json.dumps(value, sort_keys=True)


def _to_frame(records: Iterable[dict[str, Any]]) -> pd.DataFrame:
    """Build the working frame with numeric amounts and per-type amount columns."""
    rows = list(records)
    df = pd.DataFrame(rows, columns=_COLUMNS)
    df["amount"] = pd.Series([_amount(row.get("amount")) for row in rows], index=df.index, dtype=float)
    df["kind"] = df["type"].map(lambda value: value if isinstance(value, str) else None)
    df["group"] = df["category"].map(_group_key)
    df["expense"] = df["amount"].where(df["kind"] == EXPENSE, 0.0)
    df["income"] = df["amount"].where(df["kind"] == INCOME, 0.0)
    return df


def _categories_by_key(df: pd.DataFrame) -> dict:
    return {key: value for key, value in zip(df["group"], df["category"]) if key is not None}


def _category_totals(df: pd.DataFrame) -> list[CategoryTotals]:
    if df.empty:
        return []
    categories = _categories_by_key(df)
    grouped = (
        df.groupby("group", dropna=False, sort=False)[["expense", "income"]]
        .sum()
        .reset_index()
    )
    return [
        CategoryTotals(
            category=None if pd.isna(row.group) else categories[row.group],
            total_expense=float(row.expense),
            total_income=float(row.income),
        )
        for row in grouped.itertuples(index=False)
    ]


def _parseable_date(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and DATE_PATTERN.fullmatch(value) else None


def _monthly_totals(df: pd.DataFrame) -> list[MonthlyTotals]:
    if df.empty:
        return []
    dates = df["date"].map(_parseable_date)
    parsed = pd.to_datetime(dates, format=DATE_FORMAT, errors="coerce")
    skipped = int(parsed.isna().sum())
    if skipped:
        logger.warning("monthly_stats_skipped_records", count=skipped, expected_format=DATE_FORMAT)

    dated = df.assign(year=parsed.dt.year, month=parsed.dt.month)[parsed.notna()]
    if dated.empty:
        return []
    grouped = (
        dated.groupby(["year", "month"], sort=True)[["expense", "income"]]
        .sum()
        .reset_index()
    )
    return [
        MonthlyTotals(
            year=int(row.year),
            month=int(row.month),
            total_expense=float(row.expense),
            total_income=float(row.income),
        )
        for row in grouped.itertuples(index=False)
    ]


def compute_finance_stats(records: Iterable[dict[str, Any]]) -> FinanceStats:
    """Global, per-category and per-month expense/income totals.

    An empty record set yields zero totals and empty breakdowns.
    """
    df = _to_frame(records)
    return FinanceStats(
        total_expense=float(df["expense"].sum()),
        total_income=float(df["income"].sum()),
        total_transactions=len(df),
        category_stats=_category_totals(df),
        monthly_stats=_monthly_totals(df),
    )


def _rank_categories(df: pd.DataFrame, kind: str) -> list[CategoryRanking]:
    subset = df[df["kind"] == kind]
    if subset.empty:
        return []
    categories = _categories_by_key(subset)
    ranked = (
        subset.groupby("group", dropna=False, sort=False)["amount"]
        .agg(category_count="count", total_amount="sum")
        .reset_index()
        .sort_values("total_amount", ascending=False, kind="stable")
    )
    return [
        CategoryRanking(
            category=None if pd.isna(row.group) else categories[row.group],
            category_count=int(row.category_count),
            total_amount=float(row.total_amount),
        )
        for row in ranked.itertuples(index=False)
    ]


def compute_category_stats(records: Iterable[dict[str, Any]]) -> CategoryStats:
    """Per-category count and total for expenses and incomes, largest total first."""
    df = _to_frame(records)
    return CategoryStats(
        expense_stats=_rank_categories(df, EXPENSE),
        income_stats=_rank_categories(df, INCOME),
    )
