"""Registry of the ranking schemas TBA accepts for each season.

Column names must match TBA's ranking sort orders exactly:
https://github.com/the-blue-alliance/the-blue-alliance/blob/py3/src/backend/common/consts/ranking_sort_orders.py
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from tba_rankings.models.enums import Season
from tba_rankings.models.schema import SeasonSchema

SEASON_SCHEMAS: Mapping[Season, SeasonSchema] = MappingProxyType(
    {
        Season.Y2018: SeasonSchema(
            season=Season.Y2018,
            sort_columns=(
                "Ranking Score",
                "End Game",
                "Auto",
                "Ownership",
                "Vault",
            ),
        ),
        Season.Y2019: SeasonSchema(
            season=Season.Y2019,
            sort_columns=(
                "Ranking Score",
                "Cargo",
                "Hatch Panel",
                "HAB Climb",
                "Sandstorm Bonus",
            ),
        ),
        Season.Y2022: SeasonSchema(
            season=Season.Y2022,
            sort_columns=(
                "Ranking Score",
                "Avg Match",
                "Avg Hangar",
                "Avg Taxi + Auto Cargo",
            ),
        ),
    }
)

# Year -> ordered column labels, for rendering headers
RANKING_NAMES: Mapping[int, Tuple[str, ...]] = MappingProxyType(
    {schema.year: schema.labels for schema in SEASON_SCHEMAS.values()}
)
