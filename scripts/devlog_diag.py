"""Notion dev logger diagnostics CLI."""

from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone

from notion_devlog_mcp.commentary import generate_comment
from notion_devlog_mcp.config import DevLoggerSettings
from notion_devlog_mcp.errors import SessionLogError
from notion_devlog_mcp.mapping import build_properties
from notion_devlog_mcp.models import CODE_QUALITY_VALUES, SessionLogRequest
from notion_devlog_mcp.recorder import session_title
from notion_devlog_mcp.tools import list_tools


def cmd_config(args: argparse.Namespace) -> None:
    settings = DevLoggerSettings()
    missing = settings.missing_credentials()
    report = {
        "NOTION_API_KEY": "missing" if "NOTION_API_KEY" in missing else "set",
        "NOTION_DATABASE_ID": settings.notion_database_id or "missing",
        "DEVLOGGER_LOG_LEVEL": settings.log_level,
    }
    print(json.dumps(report, indent=2))
    if missing:
        print(f"Missing configuration: {', '.join(missing)}")
        raise SystemExit(1)


def cmd_tools(args: argparse.Namespace) -> None:
    print(json.dumps(list_tools(), indent=2, ensure_ascii=False))


def cmd_preview(args: argparse.Namespace) -> None:
    arguments = {
        "purpose": args.purpose,
        "changes": args.changes,
        "errors": args.errors,
        "learnings": args.learnings,
        "nextActions": args.next_actions,
        "claudeComment": args.comment,
        "codeQuality": args.code_quality,
    }
    try:
        request = SessionLogRequest.from_arguments(
            {key: value for key, value in arguments.items() if value is not None}
        )
    except SessionLogError as exc:
        print(exc.message)
        raise SystemExit(1)

    logged_at = datetime.now(timezone.utc)
    commentary = request.claude_comment or generate_comment(
        request.purpose, request.changes, request.errors
    )
    properties = build_properties(
        request,
        title=session_title(logged_at, args.session_number),
        commentary=commentary,
        logged_at=logged_at,
    )
    print(json.dumps(properties, indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Notion dev logger diagnostics")
    sub = parser.add_subparsers(dest="cmd")

    p_config = sub.add_parser("config", help="Check required Notion settings")
    p_config.set_defaults(func=cmd_config)

    p_tools = sub.add_parser("tools", help="Print the tool catalog")
    p_tools.set_defaults(func=cmd_tools)

    p_preview = sub.add_parser(
        "preview",
        help="Print the Notion properties a log_session call would send",
    )
    p_preview.add_argument("--purpose", required=True)
    p_preview.add_argument("--changes", required=True)
    p_preview.add_argument("--errors")
    p_preview.add_argument("--learnings")
    p_preview.add_argument("--next-actions")
    p_preview.add_argument("--comment")
    p_preview.add_argument("--code-quality", choices=CODE_QUALITY_VALUES)
    p_preview.add_argument("--session-number", type=int, default=1)
    p_preview.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()
