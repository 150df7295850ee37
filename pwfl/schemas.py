"""Pydantic schemas for JSON data validation."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import DEFAULT_TEAM_NAME
from .models import Category, TeamTotals


class CategorySpec(BaseModel):
    """Scoring category entry in league_config.json."""

    key: str = Field(..., min_length=1)
    field: str
    label: str = Field(..., min_length=1)
    higher_is_better: bool = True

    @field_validator('field')
    @classmethod
    def validate_field(cls, v):
        """Ensure the category reads an existing totals field."""
        if v not in TeamTotals.field_names():
            raise ValueError(f'Unknown totals field: {v}')
        return v

    def to_category(self) -> Category:
        return Category(
            key=self.key,
            field=self.field,
            label=self.label,
            higher_is_better=self.higher_is_better,
        )

    @classmethod
    def from_category(cls, category: Category) -> 'CategorySpec':
        return cls(
            key=category.key,
            field=category.field,
            label=category.label,
            higher_is_better=category.higher_is_better,
        )

    class Config:
        extra = 'forbid'


class LeagueConfig(BaseModel):
    """League configuration settings."""

    league_name: str = Field('PWFL', min_length=1)
    default_team_name: str = Field(DEFAULT_TEAM_NAME, min_length=1)
    manifest_path: str = 'data/teams_index.json'
    categories: list[CategorySpec] = Field(..., min_length=1)

    @field_validator('categories')
    @classmethod
    def validate_unique_keys(cls, v):
        """Ensure category keys are unique."""
        seen = set()
        for category in v:
            if category.key in seen:
                raise ValueError(f'Duplicate category key: {category.key}')
            seen.add(category.key)
        return v

    def to_categories(self) -> tuple[Category, ...]:
        return tuple(spec.to_category() for spec in self.categories)

    class Config:
        extra = 'forbid'


class ManifestEntry(BaseModel):
    """One team in teams_index.json."""

    file: str | None = None
    url: str | None = None
    label: str | None = None

    @model_validator(mode='after')
    def validate_location(self):
        """Ensure the entry points somewhere."""
        if not self.file and not self.url:
            raise ValueError('Manifest entry needs a file or url')
        return self

    class Config:
        extra = 'allow'


class TeamManifest(BaseModel):
    """Complete teams_index.json file structure."""

    teams: list[ManifestEntry] = Field(default_factory=list)

    class Config:
        extra = 'allow'


class TeamStanding(BaseModel):
    """One team's row in standings.json."""

    rank: int = Field(..., ge=1)
    team_name: str
    season_id: Any = None
    skaters: int = Field(..., ge=0)
    goalies: int = Field(..., ge=0)
    totals: dict[str, int | float | None]
    category_ranks: dict[str, int]
    category_points: dict[str, int]
    fantasy_score: int = Field(..., ge=0)
    roster: list[dict[str, Any]] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class StandingsFile(BaseModel):
    """Complete standings.json file structure."""

    updated_at: str
    categories: list[CategorySpec]
    standings: list[TeamStanding]

    class Config:
        extra = 'forbid'
