"""Health check router: liveness + readiness.

The readiness check pings the record store from a worker thread with a
timeout, since the Supabase client is blocking.
"""

import asyncio

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from finance_api.core.errors import StoreError
from finance_api.core.store import FinanceStore, get_store

router = APIRouter(tags=["health"])
logger = structlog.get_logger()

@router.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness text for clients that only check the root path."""
    return "running"


@router.get("/health")
async def health_liveness():
    """Liveness check: returns 200 if the API process is running."""
    return {"status": "healthy", "service": "api"}


@router.get("/health/ready")
async def health_readiness(request: Request, store: FinanceStore = Depends(get_store)):
    """Readiness check: checks the record store answers within the timeout."""
    status = {
        "status": "healthy",
        "services": {
            "api": "up",
            "store": "unknown",
        },
    }
    timeout = request.app.state.settings.READINESS_TIMEOUT_SECONDS

    try:
        loop = asyncio.get_running_loop()
        await asyncio.wait_for(loop.run_in_executor(None, store.ping), timeout=timeout)
        status["services"]["store"] = "up"
    except asyncio.TimeoutError:
        status["services"]["store"] = "timeout"
        status["status"] = "degraded"
        logger.warning("store_health_timeout", timeout_s=timeout)
    except StoreError as e:
        status["services"]["store"] = "down"
        status["status"] = "degraded"
        logger.warning("store_health_failed", error=e.detail)

    return status
