# tba_rankings/utils/misc_utils.py
import re
from typing import Any, Optional

TEAM_KEY_PREFIX = "frc"

# Longer digit runs can't be a season and would hit int()'s digit limit
MAX_YEAR_DIGITS = 9

# Same prefix rule as JavaScript's parseInt: whitespace, sign, digits
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")


def parse_year(value: Any) -> Optional[int]:
    """Parses the leading integer of a year value, or None if there isn't one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    sign, digits = match.groups()
    if len(digits) > MAX_YEAR_DIGITS:
        return None
    return int(sign + digits)


def format_team_key(team: Any) -> str:
    """Builds a TBA team key (e.g. 254 -> 'frc254')."""
    return TEAM_KEY_PREFIX + str(team)


def format_record(wins: Any, losses: Any, ties: Any) -> str:
    """Formats a W-L-T record string (e.g. '12-3-1')."""
    return "-".join(str(count) for count in (wins, losses, ties))
