"""Tool registration for the Notion dev logger."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from fastmcp import FastMCP
from mcp import types

from ..errors import SessionLogError
from .catalog import LOG_SESSION, LOG_SESSION_TOOL, TOOLS, ToolDescriptor, list_tools
from .dispatch import RequestDispatcher

logger = logging.getLogger(__name__)

RequestHandler = Callable[[Any], Awaitable[types.ServerResult]]


@dataclass(slots=True)
class ToolHandles:
    list_tools: RequestHandler
    call_tool: RequestHandler
    dispatcher: RequestDispatcher


def register_tools(server: FastMCP, *, dispatcher: RequestDispatcher) -> ToolHandles:
    """Serve ``tools/list`` and ``tools/call`` from the catalog and dispatcher.

    Installed on the underlying MCP server in place of FastMCP's handlers;
    failures surface as JSON-RPC errors carrying their protocol code.
    """

    mcp_server = server._mcp_server

    async def _list_tools(request: types.ListToolsRequest) -> types.ServerResult:
        _emit_log(mcp_server, "debug", "Listing tools", extra={"count": len(TOOLS)})
        return types.ServerResult(types.ListToolsResult(tools=[tool.to_mcp_tool() for tool in TOOLS]))

    async def _call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        arguments = request.params.arguments
        try:
            content = await dispatcher.call_tool(name, arguments)
        except SessionLogError as exc:
            _emit_log(
                mcp_server,
                "warning",
                "Tool call failed",
                extra={"tool": name, "kind": exc.kind.value, "error": exc.message},
            )
            raise exc.to_mcp_error() from exc

        _emit_log(
            mcp_server,
            "info",
            "Logged session",
            extra={"tool": name, "fields": sorted(arguments or {})},
        )
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    mcp_server.request_handlers[types.ListToolsRequest] = _list_tools
    mcp_server.request_handlers[types.CallToolRequest] = _call_tool

    return ToolHandles(list_tools=_list_tools, call_tool=_call_tool, dispatcher=dispatcher)


def _current_request_id(mcp_server: Any) -> Any:
    try:
        return mcp_server.request_context.request_id
    except (LookupError, AttributeError):
        return None


def _emit_log(
    mcp_server: Any,
    level: str,
    message: str,
    *,
    extra: dict[str, Any] | None = None,
) -> None:
    """Log through the module logger, tagging the MCP request id when known."""

    payload = dict(extra or {})
    request_id = _current_request_id(mcp_server)
    if request_id is not None:
        payload["request_id"] = request_id

    log_method = getattr(logger, level, logger.info)
    log_method(message, extra=payload)


__all__ = [
    "LOG_SESSION",
    "LOG_SESSION_TOOL",
    "RequestDispatcher",
    "TOOLS",
    "ToolDescriptor",
    "ToolHandles",
    "list_tools",
    "register_tools",
]
