#!/usr/bin/env python3
"""
Command-line interface for Academy Analytics

Runs dashboard queries against a snapshot file and prints the result as
JSON.

Usage:
    python -m cli.main --data snapshot.json admin --from 2025-11-01 --to 2025-11-30
    python -m cli.main --data snapshot.json player player-1
    python -m cli.main --data snapshot.json queue coach-1 --now 2025-12-01T09:00
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from typing import Any

from loguru import logger
from pydantic import ValidationError

from academy_analytics.config import load_config
from academy_analytics.models.dataset import EntityNotFoundError
from academy_analytics.models.filters import AnalyticsFilters, DateRange
from academy_analytics.models.timestamps import to_naive_utc
from academy_analytics.service.data_loader import DatasetLoader
from academy_analytics.service.orchestrator import AnalyticsService


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI usage."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")
    else:
        logger.add(sys.stderr, level="WARNING")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="academy-analytics",
        description="Academy analytics dashboards over a snapshot file",
    )
    parser.add_argument("--data", required=True, help="Snapshot file (.json, .yaml)")
    parser.add_argument("--config", default=None, help="Analytics config YAML")
    parser.add_argument(
        "--now", default=None, help="Reference time (ISO-8601, UTC if no offset), default: now"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    scope = argparse.ArgumentParser(add_help=False)
    scope.add_argument("--from", dest="date_from", default=None, help="First day (YYYY-MM-DD)")
    scope.add_argument("--to", dest="date_to", default=None, help="Last day (YYYY-MM-DD)")
    scope.add_argument("--centre", default=None, help="Centre id")
    scope.add_argument("--squad", default=None, help="Squad id")

    commands = parser.add_subparsers(dest="command", required=True)

    admin = commands.add_parser("admin", parents=[scope], help="Admin dashboard")
    admin.add_argument("--granularity", choices=["week", "month"], default="week")

    player = commands.add_parser("player", parents=[scope], help="Player dashboard")
    player.add_argument("player_id")

    coach = commands.add_parser("coach", parents=[scope], help="Coach dashboard")
    coach.add_argument("coach_id")

    queue = commands.add_parser("queue", help="Coach feedback queue")
    queue.add_argument("coach_id")

    commands.add_parser("forecast", help="Active player forecast")
    return parser


def build_filters(args: argparse.Namespace) -> AnalyticsFilters:
    """Translate scope flags into filters."""
    date_range = None
    date_from = getattr(args, "date_from", None)
    date_to = getattr(args, "date_to", None)
    if date_from or date_to:
        date_range = DateRange.for_days(
            date.fromisoformat(date_from) if date_from else date.min,
            date.fromisoformat(date_to) if date_to else date.max,
        )
    return AnalyticsFilters(
        date_range=date_range,
        centre_id=getattr(args, "centre", None),
        squad_id=getattr(args, "squad", None),
    )


def to_payload(result: Any) -> Any:
    """Turn dataclass results into JSON-ready structures."""
    if is_dataclass(result):
        return asdict(result)
    if isinstance(result, list):
        return [to_payload(item) for item in result]
    return result


def run(args: argparse.Namespace) -> Any:
    """Execute the selected command and return its result."""
    config = load_config(args.config)
    dataset = DatasetLoader().load(args.data)

    now = to_naive_utc(datetime.fromisoformat(args.now)) if args.now else None
    service = AnalyticsService(dataset, config, clock=(lambda: now) if now else None)

    if args.command == "admin":
        return service.admin_dashboard(build_filters(args), args.granularity)
    if args.command == "player":
        return service.player_dashboard(args.player_id, build_filters(args))
    if args.command == "coach":
        return service.coach_dashboard(args.coach_id, build_filters(args))
    if args.command == "queue":
        return service.feedback_queue(args.coach_id)
    return service.active_players_forecast()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        result = run(args)
    except (EntityNotFoundError, FileNotFoundError, ValidationError, ValueError) as e:
        logger.error(str(e))
        return 1

    print(json.dumps(to_payload(result), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
