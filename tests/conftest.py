from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import pytest

from notion_devlog_mcp.storage import CreatedRecord


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class StubStore:
    def __init__(self, *, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def create_record(self, properties: dict[str, Any]) -> CreatedRecord:
        self.calls.append(properties)
        if self.error is not None:
            raise self.error
        return CreatedRecord(
            id=f"page-{len(self.calls)}",
            url=f"https://www.notion.so/page-{len(self.calls)}",
        )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime.fromisoformat("2025-03-14T09:30:00+00:00"))


@pytest.fixture
def store() -> StubStore:
    return StubStore()
