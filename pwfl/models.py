"""Data models for PWFL standings."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Category:
    """A scoring dimension: which totals field it reads and which way is better."""
    key: str
    field: str
    label: str
    higher_is_better: bool = True


@dataclass(frozen=True)
class TeamTotals:
    """Aggregated team stats.

    Goalie averages are None when the team has no active goalies, so a
    genuine 0.0 average can be told apart from missing data.
    """
    goals: int = 0
    assists: int = 0
    power_play_points: int = 0
    hits: int = 0
    shots: int = 0
    penalty_minutes: int = 0
    avg_save_pct: Optional[float] = None
    avg_gaa: Optional[float] = None

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def value(self, field_name: str) -> float:
        """Numeric value used for ranking; missing data ranks as 0."""
        raw = getattr(self, field_name, None)
        return raw if raw is not None else 0


@dataclass(frozen=True)
class TeamSummary:
    """Container for one fantasy team's roster and totals."""
    team_name: str
    season_id: Any
    players: Tuple[Any, ...] = ()  # full listing, missing players included
    skaters: Tuple[Dict[str, Any], ...] = ()
    goalies: Tuple[Dict[str, Any], ...] = ()
    totals: TeamTotals = field(default_factory=TeamTotals)

    @property
    def has_goalie_data(self) -> bool:
        return bool(self.goalies)


@dataclass(frozen=True)
class ScoredTeam:
    """A team summary with its category ranks, points and fantasy score."""
    summary: TeamSummary
    category_ranks: Dict[str, int] = field(default_factory=dict)
    category_points: Dict[str, int] = field(default_factory=dict)
    fantasy_score: int = 0

    @property
    def team_name(self) -> str:
        return self.summary.team_name

    @property
    def totals(self) -> TeamTotals:
        return self.summary.totals


@dataclass(frozen=True)
class Standing:
    """Overall league position of a scored team."""
    rank: int  # 1-based
    team: ScoredTeam
