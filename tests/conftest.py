from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.hr_portal.hr_portal.store.memory_store import InMemoryRecordStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()
