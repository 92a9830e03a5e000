"""Error types surfaced by the dev logger."""

from __future__ import annotations

from enum import Enum

from mcp import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UNKNOWN_TOOL = "unknown_tool"
    EXTERNAL_CALL = "external_call"
    CONFIGURATION = "configuration"


_PROTOCOL_CODES = {
    ErrorKind.VALIDATION: INVALID_PARAMS,
    ErrorKind.UNKNOWN_TOOL: METHOD_NOT_FOUND,
    ErrorKind.EXTERNAL_CALL: INTERNAL_ERROR,
    ErrorKind.CONFIGURATION: INTERNAL_ERROR,
}


class SessionLogError(RuntimeError):
    """Raised when a session cannot be logged; ``kind`` says why."""

    def __init__(self, kind: ErrorKind, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field

    @property
    def protocol_code(self) -> int:
        return _PROTOCOL_CODES[self.kind]

    def to_mcp_error(self) -> McpError:
        """Translate into the MCP error envelope returned to the caller."""

        return McpError(ErrorData(code=self.protocol_code, message=self.message))

    def __repr__(self) -> str:
        return f"SessionLogError(kind={self.kind.value!r}, message={self.message!r})"


__all__ = ["ErrorKind", "SessionLogError"]
