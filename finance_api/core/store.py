"""Record store for transaction records, backed by a Supabase table.

One Supabase client is created at startup (see the application lifespan)
and shared by every request; supabase-py pools its HTTP connections, so the
same FinanceStore is safe to use from concurrent handlers.

Record ids are UUIDs generated by the database on insert.
"""

import uuid
from typing import Any, Optional

import httpx
import structlog
from fastapi import Request
from postgrest.exceptions import APIError
from supabase import Client, create_client

from finance_api.core.config import Settings
from finance_api.core.errors import InvalidIdentifierError, StoreError, StoreUnavailableError

logger = structlog.get_logger()


def parse_record_id(record_id: str) -> str:
    """Return the canonical form of a record id.

    Raises:
        InvalidIdentifierError: if the value is not a UUID.
    """
    try:
        return str(uuid.UUID(str(record_id)))
    except ValueError:
        raise InvalidIdentifierError(f"Invalid finance id: {record_id!r}") from None


class FinanceStore:
    """Thin wrapper over the finances table."""

    def __init__(self, client: Client, table: str = "finances"):
        self.client = client
        self.table = table

    def _query(self):
        return self.client.table(self.table)

    def _execute(self, query, operation: str):
        try:
            return query.execute()
        except httpx.TransportError as e:
            logger.error("store_unavailable", operation=operation, error=str(e))
            raise StoreUnavailableError() from e
        except APIError as e:
            logger.error("store_query_failed", operation=operation, code=e.code, error=e.message)
            raise StoreError(f"Record store rejected {operation}") from e

    def insert(self, row: dict[str, Any]) -> dict[str, Any]:
        """Insert one record; returns the stored row including its new id."""
        response = self._execute(self._query().insert(row), "insert")
        if not response.data:
            raise StoreError("Record store returned no row for insert")
        return response.data[0]

    def find_all(self) -> list[dict[str, Any]]:
        """Every record, in insertion order."""
        response = self._execute(self._query().select("*").order("created_at"), "find_all")
        return response.data or []

    def find_one(self, record_id: str) -> Optional[dict[str, Any]]:
        query = self._query().select("*").eq("id", parse_record_id(record_id)).limit(1)
        response = self._execute(query, "find_one")
        return response.data[0] if response.data else None

    def update(self, record_id: str, fields: dict[str, Any]) -> int:
        """Write ``fields`` onto the record; returns the number of rows matched."""
        query = self._query().update(fields).eq("id", parse_record_id(record_id))
        response = self._execute(query, "update")
        return len(response.data or [])

    def delete(self, record_id: str) -> int:
        """Remove the record; returns the number of rows removed (0 or 1)."""
        query = self._query().delete().eq("id", parse_record_id(record_id))
        response = self._execute(query, "delete")
        return len(response.data or [])

    def ping(self) -> None:
        """Round-trip a trivial query; raises a StoreError subclass on failure."""
        self._execute(self._query().select("id").limit(1), "ping")


def build_store(settings: Settings) -> FinanceStore:
    """Create the process-wide store from settings."""
    client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    logger.info("store_initialized", table=settings.FINANCE_TABLE)
    return FinanceStore(client, table=settings.FINANCE_TABLE)


def get_store(request: Request) -> FinanceStore:
    """FastAPI dependency returning the store created at startup."""
    return request.app.state.store
