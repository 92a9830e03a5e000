"""Route tool invocations to their handlers."""

from __future__ import annotations

import json
from typing import Any

from mcp.types import TextContent

from ..errors import ErrorKind, SessionLogError
from ..models import SessionLogRequest
from ..recorder import SessionRecorder
from .catalog import LOG_SESSION, list_tools


class RequestDispatcher:
    """Dispatch ``tools/call`` requests by tool name."""

    def __init__(self, recorder: SessionRecorder) -> None:
        self._recorder = recorder

    def list_tools(self) -> list[dict[str, Any]]:
        return list_tools()

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        if name != LOG_SESSION:
            raise SessionLogError(ErrorKind.UNKNOWN_TOOL, f"Unknown tool: {name}")

        request = SessionLogRequest.from_arguments(arguments)
        result = await self._recorder.record(request)
        return [
            TextContent(
                type="text",
                text=json.dumps(result.to_payload(), indent=2, ensure_ascii=False),
            )
        ]


__all__ = ["RequestDispatcher"]
