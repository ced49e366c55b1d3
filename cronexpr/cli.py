"""cronexpr CLI -- the `cronexpr` command.

Usage:
    cronexpr parse EXPR [--json]     Print the canonical (or JSON) form
    cronexpr match EXPR [--at TIME]  Check one instant, exit 1 if no match
    cronexpr due [--at TIME]         List configured schedules matching TIME

TIME is ISO 8601 (e.g. 2024-05-06T09:30:00) and defaults to local now.
Expressions are checked once; nothing here waits or repeats.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from cronexpr.config import AppConfig, load_config
from cronexpr.errors import CronParseError
from cronexpr.parser import parse

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def setup_logging(level: str) -> None:
    """Configure logging for the command line."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _at(args: argparse.Namespace) -> datetime:
    return args.at if args.at is not None else datetime.now()


def cmd_parse(args: argparse.Namespace, config: AppConfig) -> int:
    expr = parse(args.expression, config.parser)
    if args.json:
        print(expr.model_dump_json(indent=2))
    else:
        print(expr.to_text())
    return EXIT_MATCH


def cmd_match(args: argparse.Namespace, config: AppConfig) -> int:
    expr = parse(args.expression, config.parser)
    if expr.matches(_at(args)):
        print("match")
        return EXIT_MATCH
    print("no match")
    return EXIT_NO_MATCH


def cmd_due(args: argparse.Namespace, config: AppConfig) -> int:
    """Print every configured schedule that matches the instant."""
    at = _at(args)
    status = EXIT_MATCH

    if not config.schedules:
        print("  No schedules configured.")
        return status

    for name, text in config.schedules.items():
        try:
            expr = parse(text, config.parser)
        except CronParseError as e:
            logger.error("Schedule %s has an invalid expression: %s", name, e)
            print(f"  {name}: invalid ({e})", file=sys.stderr)
            status = EXIT_ERROR
            continue
        if expr.matches(at):
            print(name)

    return status


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cronexpr",
        description="cronexpr -- parse, format and check six-field cron expressions",
    )
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to config.yaml")
    parser.add_argument("--env", type=str, default=None, help="Path to .env file")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from config, else WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Print the canonical form of an expression")
    parse_parser.add_argument("expression", type=str)
    parse_parser.add_argument("--json", action="store_true", help="Print the structured form as JSON")

    # match
    match_parser = sub.add_parser("match", help="Check whether an expression matches a time")
    match_parser.add_argument("expression", type=str)
    match_parser.add_argument("--at", type=datetime.fromisoformat, default=None, help="ISO 8601 time")

    # due
    due_parser = sub.add_parser("due", help="List configured schedules that match a time")
    due_parser.add_argument("--at", type=datetime.fromisoformat, default=None, help="ISO 8601 time")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_MATCH

    setup_logging(args.log_level or "WARNING")

    # parse/match only read a config file when pointed at one
    if args.command == "due" or args.config is not None:
        config = load_config(args.config, args.env)
        if args.log_level is None:
            logging.getLogger().setLevel(getattr(logging, config.logging.level.upper(), logging.WARNING))
    else:
        config = AppConfig()

    commands = {
        "parse": cmd_parse,
        "match": cmd_match,
        "due": cmd_due,
    }

    try:
        return commands[args.command](args, config)
    except CronParseError as e:
        print(f"  {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
