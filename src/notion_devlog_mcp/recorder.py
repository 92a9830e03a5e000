"""Session recording: derive metadata, map properties and create the page."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Protocol

from .commentary import generate_comment
from .errors import ErrorKind, SessionLogError
from .mapping import build_properties
from .models import RecordResult, SessionLogRequest, SessionState
from .storage import CreatedRecord

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    async def create_record(self, properties: dict[str, Any]) -> CreatedRecord:
        ...


def session_title(logged_at: datetime, session_number: int) -> str:
    return f"{logged_at.date().isoformat()} session #{session_number}"


def elapsed_minutes(since: datetime, until: datetime) -> int:
    """Whole minutes between two instants, rounding halves up."""

    return math.floor((until - since).total_seconds() / 60 + 0.5)


class SessionRecorder:
    """Turn a validated request into a Notion page and update session state."""

    def __init__(
        self,
        store: RecordStore,
        state: SessionState,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._state = state
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def state(self) -> SessionState:
        return self._state

    async def record(self, request: SessionLogRequest) -> RecordResult:
        # The counter tracks attempts; it is not rolled back when Notion fails.
        session_number = self._state.next_session()
        logged_at = self._clock()
        title = session_title(logged_at, session_number)

        commentary = request.claude_comment or generate_comment(
            request.purpose, request.changes, request.errors
        )
        properties = build_properties(
            request,
            title=title,
            commentary=commentary,
            logged_at=logged_at,
        )

        try:
            created = await self._store.create_record(properties)
        except Exception as exc:
            logger.error(
                "Failed to record session",
                extra={"session_number": session_number, "error": str(exc)},
            )
            raise SessionLogError(
                ErrorKind.EXTERNAL_CALL,
                f"Failed to record session in Notion: {exc}",
            ) from exc

        previous = self._state.mark_logged(logged_at)
        minutes = elapsed_minutes(previous, self._clock())

        logger.info(
            "Recorded session",
            extra={
                "session_number": session_number,
                "page_id": created.id,
                "generated_comment": request.claude_comment is None,
            },
        )

        return RecordResult(
            page_id=created.id,
            url=created.url,
            title=title,
            session_number=self._state.session_count,
            minutes_since_last_log=minutes,
        )


__all__ = ["RecordStore", "SessionRecorder", "elapsed_minutes", "session_title"]
