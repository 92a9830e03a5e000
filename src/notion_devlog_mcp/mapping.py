"""Map session log requests onto Notion database page properties."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .models import SessionLogRequest

# Notion rejects text objects longer than this.
RICH_TEXT_CHUNK = 2000

TITLE_PROPERTY = "Name"
DATE_PROPERTY = "Date"
CATEGORY_PROPERTY = "Category"
PURPOSE_PROPERTY = "Purpose"
CHANGES_PROPERTY = "Changes"
ERRORS_PROPERTY = "Errors"
LEARNINGS_PROPERTY = "Learnings"
NEXT_ACTIONS_PROPERTY = "Next Actions"
COMMENT_PROPERTY = "Claude Comment"
CODE_QUALITY_PROPERTY = "Code Quality"

SESSION_CATEGORY = "Session"

OPTIONAL_PROPERTIES = (
    ERRORS_PROPERTY,
    LEARNINGS_PROPERTY,
    NEXT_ACTIONS_PROPERTY,
    CODE_QUALITY_PROPERTY,
)


def _text_objects(content: str) -> list[dict[str, Any]]:
    chunks = [content[i : i + RICH_TEXT_CHUNK] for i in range(0, len(content), RICH_TEXT_CHUNK)]
    return [{"text": {"content": chunk}} for chunk in chunks or [""]]


class PropertyBuilder:
    """Accumulates Notion page properties; optional values are skipped, never nulled."""

    def __init__(self) -> None:
        self._properties: dict[str, dict[str, Any]] = {}

    def title(self, name: str, content: str) -> "PropertyBuilder":
        self._properties[name] = {"title": _text_objects(content)}
        return self

    def date(self, name: str, value: datetime) -> "PropertyBuilder":
        self._properties[name] = {"date": {"start": value.isoformat()}}
        return self

    def select(self, name: str, option: str | None) -> "PropertyBuilder":
        if option:
            self._properties[name] = {"select": {"name": option}}
        return self

    def rich_text(
        self, name: str, content: str | None, *, required: bool = False
    ) -> "PropertyBuilder":
        if required or content:
            self._properties[name] = {"rich_text": _text_objects(content or "")}
        return self

    def build(self) -> dict[str, dict[str, Any]]:
        return dict(self._properties)


def build_properties(
    request: SessionLogRequest,
    *,
    title: str,
    commentary: str,
    logged_at: datetime,
) -> dict[str, dict[str, Any]]:
    """Return the property map for a session page."""

    builder = (
        PropertyBuilder()
        .title(TITLE_PROPERTY, title)
        .date(DATE_PROPERTY, logged_at)
        .select(CATEGORY_PROPERTY, SESSION_CATEGORY)
    )
    builder.rich_text(PURPOSE_PROPERTY, request.purpose, required=True)
    builder.rich_text(CHANGES_PROPERTY, request.changes, required=True)
    builder.rich_text(ERRORS_PROPERTY, request.errors)
    builder.rich_text(LEARNINGS_PROPERTY, request.learnings)
    builder.rich_text(NEXT_ACTIONS_PROPERTY, request.next_actions)
    builder.rich_text(COMMENT_PROPERTY, commentary, required=True)
    builder.select(CODE_QUALITY_PROPERTY, request.code_quality)
    return builder.build()


__all__ = ["OPTIONAL_PROPERTIES", "PropertyBuilder", "build_properties"]
