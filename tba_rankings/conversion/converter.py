import re
from typing import Any, Iterable, List, Mapping, Union

from loguru import logger

from tba_rankings.conversion.seasons import RANKING_NAMES, SEASON_SCHEMAS
from tba_rankings.models.enums import Season
from tba_rankings.models.ranking import (
    ExternalRankingRow,
    RankingsPayload,
    TeamRankingRecord,
)
from tba_rankings.models.schema import RECORD_COLUMN, SeasonSchema
from tba_rankings.utils.misc_utils import format_record, format_team_key, parse_year

RecordInput = Union[TeamRankingRecord, Mapping[str, Any]]

_EVENT_CODE = re.compile(r"[0-9]+")


class UnsupportedSeasonError(ValueError):
    """Raised when asked to convert rankings for a year with no schema."""

    def __init__(self, year: Any):
        self.year = year
        super().__init__(f"No ranking schema registered for year {year!r}")


def is_valid_event_code(code: Any) -> bool:
    """True if the event code starts with its year digits (e.g. '2024casj')."""
    return isinstance(code, str) and bool(_EVENT_CODE.match(code))


def is_valid_year(year: Any) -> bool:
    """True if the year parses as an integer with a registered schema."""
    parsed = parse_year(year)
    return parsed is not None and parsed in RANKING_NAMES


def get_season_schema(year: Any) -> SeasonSchema:
    """Looks up the schema for a year, raising UnsupportedSeasonError if none."""
    if isinstance(year, Season):
        season = year
    else:
        parsed = parse_year(year)
        try:
            season = Season(parsed)
        except ValueError:
            logger.warning(f"Refusing to convert rankings for unsupported year {year!r}")
            raise UnsupportedSeasonError(year) from None
    return SEASON_SCHEMAS[season]


def _coerce_record(record: RecordInput) -> TeamRankingRecord:
    if isinstance(record, TeamRankingRecord):
        return record
    return TeamRankingRecord.model_validate(record)


def _convert_with_schema(
    record: TeamRankingRecord, schema: SeasonSchema
) -> ExternalRankingRow:
    row: ExternalRankingRow = {
        "team_key": format_team_key(record.team),
        "rank": record.rank,
        "played": record.played,
        "dqs": record.dq,
        RECORD_COLUMN: format_record(record.wins, record.losses, record.ties),
    }
    # Only the sort fields the season names are read
    for position, column in enumerate(schema.sort_columns, start=1):
        row[column] = record.sort_value(position)
    return row


def convert(record: RecordInput, year: Any) -> ExternalRankingRow:
    """Converts one FMS ranking record into a TBA rankings row.

    Args:
        record: A TeamRankingRecord, or a mapping with the same keys.
            Field values are copied as-is; missing ones become None.
        year: Season year as an int, numeric string or Season.

    Returns:
        A new dict with the common fields followed by the season's
        columns in schema order.

    Raises:
        UnsupportedSeasonError: No schema is registered for ``year``.
        pydantic.ValidationError: ``record`` is not a mapping.
    """
    schema = get_season_schema(year)
    row = _convert_with_schema(_coerce_record(record), schema)
    logger.debug(f"Converted {row['team_key']} for {schema.year}")
    return row


def convert_all(records: Iterable[RecordInput], year: Any) -> List[ExternalRankingRow]:
    """Converts a full rankings table, preserving order."""
    schema = get_season_schema(year)
    rows = [_convert_with_schema(_coerce_record(r), schema) for r in records]
    logger.info(f"Converted {len(rows)} ranking rows for {schema.year}")
    return rows


def build_rankings_payload(
    records: Iterable[RecordInput], year: Any
) -> RankingsPayload:
    """Builds the body for a TBA event rankings update."""
    schema = get_season_schema(year)
    return RankingsPayload(
        breakdowns=list(schema.labels),
        rankings=convert_all(records, schema.season),
    )
