from __future__ import annotations

from datetime import datetime

import pytest

from notion_devlog_mcp.errors import ErrorKind, SessionLogError
from notion_devlog_mcp.models import RecordResult, SessionLogRequest, SessionState


def test_request_accepts_wire_names() -> None:
    request = SessionLogRequest.from_arguments(
        {
            "purpose": "p",
            "changes": "c",
            "nextActions": "ship it",
            "claudeComment": "looks good",
            "codeQuality": "A",
        }
    )

    assert request.next_actions == "ship it"
    assert request.claude_comment == "looks good"
    assert request.code_quality == "A"
    assert request.errors is None


@pytest.mark.parametrize("missing", ["purpose", "changes"])
def test_missing_required_field_is_validation_error(missing: str) -> None:
    arguments = {"purpose": "p", "changes": "c"}
    arguments.pop(missing)

    with pytest.raises(SessionLogError) as excinfo:
        SessionLogRequest.from_arguments(arguments)

    assert excinfo.value.kind is ErrorKind.VALIDATION
    assert excinfo.value.field == missing
    assert missing in excinfo.value.message


def test_unknown_code_quality_is_rejected() -> None:
    with pytest.raises(SessionLogError) as excinfo:
        SessionLogRequest.from_arguments({"purpose": "p", "changes": "c", "codeQuality": "D"})

    assert excinfo.value.kind is ErrorKind.VALIDATION
    assert excinfo.value.field == "codeQuality"


def test_none_arguments_are_rejected() -> None:
    with pytest.raises(SessionLogError):
        SessionLogRequest.from_arguments(None)


def test_empty_comment_means_generate() -> None:
    request = SessionLogRequest.from_arguments({"purpose": "p", "changes": "c", "claudeComment": ""})
    assert request.claude_comment is None


def test_state_counts_and_marks() -> None:
    start = datetime.fromisoformat("2025-01-01T00:00:00+00:00")
    later = datetime.fromisoformat("2025-01-01T01:00:00+00:00")
    state = SessionState(last_log_time=start)

    assert state.next_session() == 1
    assert state.next_session() == 2
    assert state.mark_logged(later) == start
    assert state.last_log_time == later


def test_result_payload_shape() -> None:
    result = RecordResult(
        page_id="abc",
        url="https://www.notion.so/abc",
        title="2025-01-01 session #3",
        session_number=3,
        minutes_since_last_log=7,
    )

    assert result.to_payload() == {
        "message": "Development session logged to Notion!",
        "success": True,
        "notionPageId": "abc",
        "notionUrl": "https://www.notion.so/abc",
        "title": "2025-01-01 session #3",
        "sessionNumber": 3,
        "timeSinceLastLog": "7 minutes",
    }
