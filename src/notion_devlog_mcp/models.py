"""Request, state and result models for session logging."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ErrorKind, SessionLogError

CodeQuality = Literal["A", "B", "C", "needs-improvement"]
CODE_QUALITY_VALUES: tuple[str, ...] = ("A", "B", "C", "needs-improvement")

SUCCESS_MESSAGE = "Development session logged to Notion!"


class SessionLogRequest(BaseModel):
    """Arguments of a ``log_session`` call."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    purpose: str = Field(..., description="Why the change was made.")
    changes: str = Field(..., description="Summary of what changed.")
    errors: str | None = Field(default=None, description="Problems encountered and how they were solved.")
    learnings: str | None = Field(default=None, description="Insights gained during the session.")
    next_actions: str | None = Field(
        default=None, alias="nextActions", description="Follow-up items."
    )
    claude_comment: str | None = Field(
        default=None,
        alias="claudeComment",
        description="Explicit commentary; generated when omitted.",
    )
    code_quality: CodeQuality | None = Field(
        default=None, alias="codeQuality", description="Code quality grade."
    )

    @field_validator("errors", "learnings", "next_actions", "claude_comment", "code_quality", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any):
        if value == "":
            return None
        return value

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any] | None) -> "SessionLogRequest":
        """Validate a raw tool argument map, raising a validation-kind error."""

        try:
            return cls.model_validate(arguments if arguments is not None else {})
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ())) or None
            detail = first.get("msg", "invalid value")
            if location:
                message = f"Invalid argument '{location}': {detail}"
            else:
                message = f"Invalid arguments: {detail}"
            raise SessionLogError(ErrorKind.VALIDATION, message, field=location) from exc


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class SessionState:
    """Counter and last-log timestamp kept for the lifetime of the process."""

    session_count: int = 0
    last_log_time: datetime = field(default_factory=_utcnow)

    def next_session(self) -> int:
        self.session_count += 1
        return self.session_count

    def mark_logged(self, at: datetime) -> datetime:
        """Move the last-log timestamp and return the value it replaced."""

        previous = self.last_log_time
        self.last_log_time = at
        return previous


@dataclass(slots=True)
class RecordResult:
    page_id: str
    url: str | None
    title: str
    session_number: int
    minutes_since_last_log: int

    @property
    def time_since_last_log(self) -> str:
        return f"{self.minutes_since_last_log} minutes"

    def to_payload(self) -> dict[str, Any]:
        return {
            "message": SUCCESS_MESSAGE,
            "success": True,
            "notionPageId": self.page_id,
            "notionUrl": self.url,
            "title": self.title,
            "sessionNumber": self.session_number,
            "timeSinceLastLog": self.time_since_last_log,
        }


__all__ = [
    "CODE_QUALITY_VALUES",
    "CodeQuality",
    "RecordResult",
    "SUCCESS_MESSAGE",
    "SessionLogRequest",
    "SessionState",
]
