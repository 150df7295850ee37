"""Constants and mappings for PWFL standings."""

from .models import Category

# Fallback label when neither the manifest nor the team file names a team
DEFAULT_TEAM_NAME = 'Unnamed Team'

# Position groups as published by the stats provider
SKATER = 'skater'
GOALIE = 'goalie'
POSITION_GROUPS = (SKATER, GOALIE)

# Fantasy roles and their listing order (unknown roles sort last)
ROLE_ORDER = {
    'forward': 1,
    'defence': 2,
    'goalie': 3,
}
UNKNOWN_ROLE_ORDER = 99

# Raw player record field names (owned by the upstream data provider)
FIELD_POSITION_GROUP = 'stats_position_group'
FIELD_ROLE = 'fantasy_role'
FIELD_MISSING = 'missing'
FIELD_GOALS = 'goals'
FIELD_ASSISTS = 'assists'
FIELD_PP_GOALS = 'power_play_goals'
FIELD_PP_ASSISTS = 'power_play_assists'
FIELD_HITS = 'hits'
FIELD_SHOTS = 'shots'
FIELD_PIM = 'penalty_minutes'
FIELD_SAVE_PCT = 'save_percentage'
FIELD_GAA = 'goals_against_average'
FIELD_GAMES_PLAYED = 'games_played'

# Name fields, in lookup order
PLAYER_NAME_FIELDS = ('matched_name', 'name', 'requested_name')
UNKNOWN_PLAYER_NAME = '(unknown player)'

# Scoring categories used when no league config is supplied
DEFAULT_CATEGORIES = (
    Category('goals', 'goals', 'Goals', True),
    Category('assists', 'assists', 'Assists', True),
    Category('pp_points', 'power_play_points', 'PP Points', True),
    Category('hits', 'hits', 'Hits', True),
    Category('shots', 'shots', 'Shots on Goal', True),
    Category('pim', 'penalty_minutes', 'PIM', True),
    Category('save_pct', 'avg_save_pct', 'Save % (avg)', True),
    Category('gaa', 'avg_gaa', 'GAA (avg)', False),
)
