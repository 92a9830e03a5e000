"""Static description of the tools this server exposes."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from mcp import types

from ..models import CODE_QUALITY_VALUES

LOG_SESSION = "log_session"


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=copy.deepcopy(self.input_schema),
        )


LOG_SESSION_TOOL = ToolDescriptor(
    name=LOG_SESSION,
    description=(
        "Record a development session in Notion. Captures what changed since the "
        "previous log, why it changed, and what was learned along the way."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "purpose": {
                "type": "string",
                "description": "Purpose of and background to the change (e.g. what was decided while talking it through).",
            },
            "changes": {
                "type": "string",
                "description": (
                    "Summary of the changes: files touched, features added. "
                    "An outline is enough, no need to paste code."
                ),
            },
            "errors": {
                "type": "string",
                "description": "Errors or problems encountered and how they were resolved (optional).",
            },
            "learnings": {
                "type": "string",
                "description": "What was learned or noticed in this session (optional).",
            },
            "nextActions": {
                "type": "string",
                "description": "What to do next, TODOs (optional).",
            },
            "claudeComment": {
                "type": "string",
                "description": "Specific commentary from the assistant (generated automatically when omitted).",
            },
            "codeQuality": {
                "type": "string",
                "enum": list(CODE_QUALITY_VALUES),
                "description": "Code quality grade (optional).",
            },
        },
        "required": ["purpose", "changes"],
    },
)

TOOLS: tuple[ToolDescriptor, ...] = (LOG_SESSION_TOOL,)


def list_tools() -> list[dict[str, Any]]:
    """Return the tool descriptors in MCP ``tools/list`` shape."""

    return [tool.to_dict() for tool in TOOLS]


__all__ = ["LOG_SESSION", "LOG_SESSION_TOOL", "TOOLS", "ToolDescriptor", "list_tools"]
