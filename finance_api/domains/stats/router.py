"""Statistics router: finance totals and category rankings.

Both endpoints recompute from the full record set on every call.
"""

import structlog
from fastapi import APIRouter, Depends

from finance_api.core.errors import AggregationFailedError
from finance_api.core.store import FinanceStore, get_store
from finance_api.domains.stats.schemas import CategoryStats, FinanceStats
from finance_api.domains.stats.service import compute_category_stats, compute_finance_stats

router = APIRouter(tags=["stats"])
logger = structlog.get_logger()


@router.get("/finance-stats", response_model=FinanceStats)
def get_finance_stats(store: FinanceStore = Depends(get_store)):
    """Totals, per-category totals and per-month totals."""
    try:
        return compute_finance_stats(store.find_all())
    except Exception as e:
        logger.error("finance_stats_failed", error=str(e))
        raise AggregationFailedError("Error fetching finance stats") from e


@router.get("/category-stats", response_model=CategoryStats)
def get_category_stats(store: FinanceStore = Depends(get_store)):
    """Expense and income categories ranked by total amount."""
    try:
        return compute_category_stats(store.find_all())
    except Exception as e:
        logger.error("category_stats_failed", error=str(e))
        raise AggregationFailedError("Error fetching category stats") from e
