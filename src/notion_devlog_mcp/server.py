"""FastMCP server bootstrap for the Notion dev logger."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Callable, Optional

from fastmcp import Context, FastMCP
from pydantic import ValidationError

from . import __version__
from .config import DevLoggerSettings, get_settings, require_credentials
from .errors import SessionLogError
from .models import SessionState
from .recorder import RecordStore, SessionRecorder
from .storage import NotionStore
from .tools import TOOLS, RequestDispatcher, register_tools


def configure_logging(level: str) -> None:
    """Configure root logging for the dev logger server."""

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def create_server(
    settings: Optional[DevLoggerSettings] = None,
    store: RecordStore | None = None,
    *,
    state: SessionState | None = None,
    clock: Callable[[], datetime] | None = None,
) -> FastMCP:
    """Instantiate the FastMCP server with the log_session tool and status resource."""

    settings = settings or get_settings()
    clock = clock or (lambda: datetime.now(timezone.utc))
    state = state or SessionState(last_log_time=clock())

    if store is None:
        require_credentials(settings)
        store = NotionStore(settings.notion_api_key, settings.notion_database_id)

    recorder = SessionRecorder(store, state, clock=clock)
    dispatcher = RequestDispatcher(recorder)

    server = FastMCP(
        name=settings.server_name,
        version=__version__,
        instructions=(
            "Records development sessions in a Notion database. Call log_session once "
            "per logical session with the purpose and a summary of the changes."
        ),
    )

    handles = register_tools(server, dispatcher=dispatcher)

    def status_payload(request_id: object = None) -> dict:
        return {
            "timestamp": clock().isoformat(),
            "server_version": __version__,
            "log_level": settings.log_level,
            "notion": {
                "database_id": settings.notion_database_id,
                "credentials_configured": not settings.missing_credentials(),
            },
            "session": {
                "count": state.session_count,
                "last_log_time": state.last_log_time.isoformat(),
            },
            "tools": [tool.name for tool in TOOLS],
            "request_id": request_id,
        }

    @server.resource(
        "resource://notion-devlog/status",
        name="devlog_status",
        title="Notion Dev Logger Status",
        description="Provides the current runtime status for the Notion dev logger.",
        mime_type="application/json",
        tags={"status", "health"},
    )
    def status_resource(context: Context) -> str:
        """Return a JSON string summarizing basic runtime state."""

        return json.dumps(status_payload(getattr(context, "request_id", None)))

    setattr(server, "session_state", state)
    setattr(server, "recorder", recorder)
    setattr(server, "dispatcher", dispatcher)
    setattr(server, "tool_handles", handles)
    setattr(server, "status_payload", status_payload)
    return server


def main() -> None:
    """Entry point for running the dev logger MCP server via CLI."""

    log = logging.getLogger(__name__)
    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging("INFO")
        log.error("Invalid configuration: %s", exc)
        sys.exit(1)
    configure_logging(settings.log_level)

    try:
        server = create_server(settings)
    except SessionLogError as exc:
        log.error("Configuration error: %s", exc.message)
        sys.exit(1)

    log.info(
        "Launching Notion dev logger MCP server",
        extra={
            "version": __version__,
            "log_level": settings.log_level,
            "database_id": settings.notion_database_id,
        },
    )
    server.run()


if __name__ == "__main__":
    main()
