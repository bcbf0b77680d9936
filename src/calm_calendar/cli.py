from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import orjson

from .api import get_api_functions
from .bootstrap import configure_logging
from .config import get_settings
from .services.http import run_local_server


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=f"{settings.ui.app_name} command line interface.")
    parser.add_argument("--log-level", default=None, help="Override CALM_CALENDAR_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the HTTP server exposing the schedule API.")
    api_parser.add_argument("--host", default=settings.server.host)
    api_parser.add_argument("--port", type=int, default=settings.server.port)

    subparsers.add_parser("tools", help="Print the registered API functions as JSON.")

    return parser


def print_tools() -> None:
    tools = [func.as_tool() for func in sorted(get_api_functions(), key=lambda item: item.name)]
    sys.stdout.write(orjson.dumps({"tools": tools}, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)
    logging.getLogger(__name__).info("Calm Calendar CLI starting")

    if args.command == "api":
        run_local_server(host=args.host, port=args.port)
    elif args.command == "tools":
        print_tools()
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
