import sys
import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Settings/Logging ---
from tba_rankings.config.settings import settings
from tba_rankings.logging.setup import setup_logging

from loguru import logger

# --- End Settings/Logging ---

from tba_rankings.conversion.converter import (
    UnsupportedSeasonError,
    build_rankings_payload,
    is_valid_event_code,
    is_valid_year,
)
from tba_rankings.models.ranking import RankingsPayload

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

COMMON_COLUMNS = ["team_key", "rank", "played", "dqs"]

console = Console(stderr=True)


def load_records(path: Path) -> List[Dict[str, Any]]:
    """Reads ranking records from a JSON list or an object with a 'rankings' list."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("rankings")
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a list of ranking records")
    return data


def render_table(payload: RankingsPayload, title: str) -> Table:
    table = Table(title=title)
    columns = COMMON_COLUMNS + payload.breakdowns
    for column in columns:
        table.add_column(column)
    for row in payload.rankings:
        table.add_row(*(str(row.get(column, "")) for column in columns))
    return table


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert FMS ranking records to The Blue Alliance rankings format"
    )
    parser.add_argument("input", type=Path, help="JSON file of ranking records")
    parser.add_argument(
        "--year",
        default=settings.default_year,
        help="Season year (default: DEFAULT_YEAR setting)",
    )
    parser.add_argument("--event", default=None, help="Event code, e.g. 2019casj")
    parser.add_argument(
        "--output", type=Path, default=None, help="Write JSON here instead of stdout"
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.year is None:
        logger.error("No season given. Pass --year or set DEFAULT_YEAR.")
        return 1
    if not is_valid_year(args.year):
        logger.error(f"Unsupported season year: {args.year}")
        return 1
    if args.event is not None and not is_valid_event_code(args.event):
        logger.error(f"Invalid event code '{args.event}' (must start with the year)")
        return 1

    try:
        records = load_records(args.input)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Failed to read ranking records from {args.input}: {e}")
        return 1

    try:
        payload = build_rankings_payload(records, args.year)
    except UnsupportedSeasonError as e:
        logger.error(str(e))
        return 1
    except ValidationError as e:
        logger.error(f"Malformed ranking record in {args.input}: {e}")
        return 1

    output_json = payload.model_dump_json(indent=settings.output_indent)
    if args.output:
        try:
            args.output.write_text(output_json + "\n", encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write rankings to {args.output}: {e}")
            return 1
        logger.success(f"Saved {len(payload.rankings)} rankings to {args.output}")
    else:
        sys.stdout.write(output_json + "\n")

    title = f"{args.event} rankings" if args.event else f"{args.year} rankings"
    console.print(render_table(payload, title))
    console.print(
        Panel(
            f"Season: {args.year}\nTeams: {len(payload.rankings)}",
            title=args.event or "TBA rankings",
        )
    )
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
