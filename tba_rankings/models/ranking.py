from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

# Row in the format expected by The Blue Alliance rankings endpoint
ExternalRankingRow = Dict[str, Any]


class TeamRankingRecord(BaseModel):
    """One team's line of an FMS rankings report.

    Fields are deliberately loose: values are carried through untouched
    (no coercion, no type checks) and anything missing stays ``None``.
    Validating the report is the caller's job.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    team: Any = None
    rank: Any = None
    played: Any = None
    dq: Any = None
    wins: Any = None
    losses: Any = None
    ties: Any = None

    # Season-specific tiebreakers, in FMS report order
    sort1: Any = None
    sort2: Any = None
    sort3: Any = None
    sort4: Any = None
    sort5: Any = None

    def sort_value(self, position: int) -> Any:
        """Return the 1-based positional sort field."""
        return getattr(self, f"sort{position}")


class RankingsPayload(BaseModel):
    """Body of a TBA trusted-API event rankings update."""

    breakdowns: List[str] = Field(
        ..., description="Season column names, in display order."
    )
    rankings: List[ExternalRankingRow] = Field(
        default_factory=list, description="Converted rows, in rank order."
    )
