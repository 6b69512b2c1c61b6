from typing import Tuple

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

from .enums import Season

RECORD_COLUMN = "Record (W-L-T)"
MAX_SORT_FIELDS = 5


class SeasonSchema(BaseModel):
    """Ordered ranking-criteria column names used by one competition year."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    season: Season
    # Column for sortN is sort_columns[N - 1]
    sort_columns: Tuple[str, ...]

    @field_validator("sort_columns")
    @classmethod
    def check_sort_columns(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        # FMS reports carry at most five sort fields
        if not 0 < len(v) <= MAX_SORT_FIELDS:
            raise ValueError(
                f"expected 1-{MAX_SORT_FIELDS} sort columns, got {len(v)}"
            )
        if RECORD_COLUMN in v:
            raise ValueError(f"'{RECORD_COLUMN}' is added automatically")
        return v

    @computed_field  # type: ignore[misc]
    @property
    def labels(self) -> Tuple[str, ...]:
        """Display order of the breakdown columns, record last."""
        return self.sort_columns + (RECORD_COLUMN,)

    @property
    def year(self) -> int:
        return int(self.season)
