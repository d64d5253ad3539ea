"""Shared pytest fixtures for the finance API tests."""

import os
import uuid

import pytest

# Settings are read at import time; give them something to read.
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-service-key")

from finance_api.core.store import parse_record_id  # noqa: E402


class InMemoryStore:
    """Dict-backed stand-in for FinanceStore with the same method surface."""

    def __init__(self):
        self.rows: dict[str, dict] = {}

    def insert(self, row):
        record_id = str(uuid.uuid4())
        stored = {"id": record_id, **row}
        self.rows[record_id] = stored
        return dict(stored)

    def find_all(self):
        return [dict(row) for row in self.rows.values()]

    def find_one(self, record_id):
        row = self.rows.get(parse_record_id(record_id))
        return dict(row) if row else None

    def update(self, record_id, fields):
        row = self.rows.get(parse_record_id(record_id))
        if row is None:
            return 0
        row.update(fields)
        return 1

    def delete(self, record_id):
        return 1 if self.rows.pop(parse_record_id(record_id), None) else 0

    def ping(self):
        return None


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def sample_records():
    """Two months, three categories, one record with an unknown type."""
    return [
        {"title": "Groceries", "amount": 100, "type": "expense", "category": "food", "date": "2024-01-15"},
        {"title": "Paycheck", "amount": 50, "type": "income", "category": "salary", "date": "2024-01-20"},
        {"title": "Dinner", "amount": 30, "type": "expense", "category": "food", "date": "2024-02-03"},
        {"title": "Bonus", "amount": 200, "type": "income", "category": "salary", "date": "2024-02-28"},
        {"title": "Refund", "amount": 999, "type": "transfer", "category": "food", "date": "2024-02-10"},
    ]
