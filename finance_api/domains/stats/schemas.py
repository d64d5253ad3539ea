"""Pydantic schemas for the statistics domain (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryTotals(_CamelModel):
    category: JsonValue = None
    total_expense: float = 0.0
    total_income: float = 0.0


class MonthlyTotals(_CamelModel):
    year: int
    month: int
    total_expense: float = 0.0
    total_income: float = 0.0


class FinanceStats(_CamelModel):
    """Global totals plus per-category and per-month breakdowns."""

    total_expense: float = 0.0
    total_income: float = 0.0
    total_transactions: int = 0
    category_stats: list[CategoryTotals] = Field(default_factory=list)
    monthly_stats: list[MonthlyTotals] = Field(default_factory=list)


class CategoryRanking(_CamelModel):
    category: JsonValue = None
    category_count: int
    total_amount: float


class CategoryStats(_CamelModel):
    expense_stats: list[CategoryRanking] = Field(default_factory=list)
    income_stats: list[CategoryRanking] = Field(default_factory=list)
