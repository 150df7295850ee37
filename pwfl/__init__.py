from .models import Category, TeamTotals, TeamSummary, ScoredTeam, Standing
from .constants import DEFAULT_CATEGORIES, DEFAULT_TEAM_NAME
from .summarizer import summarize_team, partition_roster
from .scorer import score_teams, rank_category, rank_teams
from .roster import roster_rows, sort_roster, player_display_name
from .league import (
    load_manifest,
    load_team_summaries,
    score_league,
    save_standings,
    load_standings,
    standings_frame,
)
from .validators import (
    validate_team_payload,
    validate_category_scores,
    validate_standings,
)

__all__ = [
    # Models
    'Category',
    'TeamTotals',
    'TeamSummary',
    'ScoredTeam',
    'Standing',
    # Configuration
    'DEFAULT_CATEGORIES',
    'DEFAULT_TEAM_NAME',
    # Summarizing
    'summarize_team',
    'partition_roster',
    # Scoring
    'score_teams',
    'rank_category',
    'rank_teams',
    # Roster listing
    'roster_rows',
    'sort_roster',
    'player_display_name',
    # League driver
    'load_manifest',
    'load_team_summaries',
    'score_league',
    'save_standings',
    'load_standings',
    'standings_frame',
    # Validation
    'validate_team_payload',
    'validate_category_scores',
    'validate_standings',
]
