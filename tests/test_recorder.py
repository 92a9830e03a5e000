from __future__ import annotations

import asyncio

import pytest

from notion_devlog_mcp.commentary import (
    CLEAR_PURPOSE_REMARK,
    CLOSING_REMARK,
    SPECIFIC_CHANGES_REMARK,
)
from notion_devlog_mcp.errors import ErrorKind, SessionLogError
from notion_devlog_mcp.models import SessionLogRequest, SessionState
from notion_devlog_mcp.recorder import SessionRecorder, elapsed_minutes, session_title

from conftest import FakeClock, StubStore

SCENARIO_PURPOSE = (
    "Refactor the auth module to use a cleaner interface; this was decided after "
    "walking through options together."
)


def _request(**arguments) -> SessionLogRequest:
    return SessionLogRequest.from_arguments(arguments)


def _recorder(store, clock: FakeClock) -> SessionRecorder:
    return SessionRecorder(store, SessionState(last_log_time=clock()), clock=clock)


def test_first_session_scenario(store: StubStore, clock: FakeClock) -> None:
    recorder = _recorder(store, clock)

    result = asyncio.run(
        recorder.record(
            _request(
                purpose=SCENARIO_PURPOSE,
                changes="Updated file auth.ts and function validateToken",
            )
        )
    )

    assert result.session_number == 1
    assert result.title == "2025-03-14 session #1"
    assert result.page_id == "page-1"
    assert result.url == "https://www.notion.so/page-1"

    properties = store.calls[0]
    comment = properties["Claude Comment"]["rich_text"][0]["text"]["content"]
    assert CLEAR_PURPOSE_REMARK in comment
    assert SPECIFIC_CHANGES_REMARK in comment
    assert comment.endswith(CLOSING_REMARK)
    for key in ("Errors", "Learnings", "Next Actions", "Code Quality"):
        assert key not in properties


def test_explicit_comment_is_used_verbatim(store: StubStore, clock: FakeClock) -> None:
    recorder = _recorder(store, clock)

    asyncio.run(recorder.record(_request(purpose="p", changes="c", claudeComment="Solid work.")))

    assert store.calls[0]["Claude Comment"] == {"rich_text": [{"text": {"content": "Solid work."}}]}


def test_counter_and_title_advance_per_call(store: StubStore, clock: FakeClock) -> None:
    recorder = _recorder(store, clock)

    asyncio.run(recorder.record(_request(purpose="p", changes="c")))
    clock.advance(days=1)
    second = asyncio.run(recorder.record(_request(purpose="p", changes="c")))

    assert second.session_number == 2
    assert second.title == "2025-03-15 session #2"
    assert recorder.state.session_count == 2
    assert store.calls[1]["Date"] == {"date": {"start": "2025-03-15T09:30:00+00:00"}}


def test_elapsed_time_is_measured_from_previous_log(store: StubStore, clock: FakeClock) -> None:
    recorder = _recorder(store, clock)

    clock.advance(minutes=12)
    first = asyncio.run(recorder.record(_request(purpose="p", changes="c")))
    clock.advance(minutes=5)
    second = asyncio.run(recorder.record(_request(purpose="p", changes="c")))

    assert first.to_payload()["timeSinceLastLog"] == "12 minutes"
    assert second.to_payload()["timeSinceLastLog"] == "5 minutes"
    assert recorder.state.last_log_time == clock()


def test_failed_store_call_keeps_counter_and_timestamp(clock: FakeClock) -> None:
    store = StubStore(error=RuntimeError("rate limited"))
    recorder = _recorder(store, clock)
    before = recorder.state.last_log_time
    clock.advance(minutes=3)

    with pytest.raises(SessionLogError) as excinfo:
        asyncio.run(recorder.record(_request(purpose="p", changes="c")))

    assert excinfo.value.kind is ErrorKind.EXTERNAL_CALL
    assert "rate limited" in excinfo.value.message
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert recorder.state.session_count == 1
    assert recorder.state.last_log_time == before


def test_success_after_failure_uses_next_number(clock: FakeClock) -> None:
    store = StubStore(error=RuntimeError("unauthorized"))
    recorder = _recorder(store, clock)

    with pytest.raises(SessionLogError):
        asyncio.run(recorder.record(_request(purpose="p", changes="c")))
    store.error = None
    result = asyncio.run(recorder.record(_request(purpose="p", changes="c")))

    assert result.session_number == 2
    assert result.title.endswith("session #2")


def test_session_title_format(clock: FakeClock) -> None:
    assert session_title(clock(), 7) == "2025-03-14 session #7"


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, 0), (29, 0), (30, 1), (89, 1), (90, 2), (3600, 60)],
)
def test_elapsed_minutes_rounds_half_up(clock: FakeClock, seconds: int, expected: int) -> None:
    start = clock()
    assert elapsed_minutes(start, clock.advance(seconds=seconds)) == expected
