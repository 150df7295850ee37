"""Per-player roster rows handed to the display layer."""

import unicodedata
from collections.abc import Mapping
from typing import Any

from .constants import (
    FIELD_ASSISTS,
    FIELD_GAA,
    FIELD_GAMES_PLAYED,
    FIELD_GOALS,
    FIELD_HITS,
    FIELD_MISSING,
    FIELD_PIM,
    FIELD_POSITION_GROUP,
    FIELD_ROLE,
    FIELD_SAVE_PCT,
    FIELD_SHOTS,
    GOALIE,
    PLAYER_NAME_FIELDS,
    ROLE_ORDER,
    UNKNOWN_PLAYER_NAME,
    UNKNOWN_ROLE_ORDER,
)
from .models import TeamSummary
from .utils import to_float, to_int


def player_display_name(player: Mapping[str, Any]) -> str:
    """Matched name, then listed name, then requested name."""
    for name_field in PLAYER_NAME_FIELDS:
        name = player.get(name_field)
        if name:
            return str(name)
    return UNKNOWN_PLAYER_NAME


def name_sort_key(name: str) -> str:
    """Accent- and case-insensitive sort key ('Émilie' sorts with 'emilie')."""
    nfkd = unicodedata.normalize('NFKD', name)
    return ''.join(c for c in nfkd if not unicodedata.combining(c)).casefold()


def role_order(player: Mapping[str, Any]) -> int:
    role = player.get(FIELD_ROLE)
    if not isinstance(role, str):
        return UNKNOWN_ROLE_ORDER
    return ROLE_ORDER.get(role, UNKNOWN_ROLE_ORDER)


def sort_roster(players: list[Any]) -> list[Mapping[str, Any]]:
    """
    Order players forwards first, then defence, then goalies, by name.

    Entries that aren't player records are dropped.
    """
    records = [p for p in players if isinstance(p, Mapping)]
    return sorted(
        records,
        key=lambda p: (
            role_order(p),
            name_sort_key(player_display_name(p)),
            player_display_name(p),
        ),
    )


def roster_row(player: Mapping[str, Any]) -> dict[str, Any]:
    """Coerced stat line for one player; goalie-only stats are None for skaters."""
    is_goalie = player.get(FIELD_POSITION_GROUP) == GOALIE
    goals = to_int(player.get(FIELD_GOALS))
    assists = to_int(player.get(FIELD_ASSISTS))

    return {
        'name': player_display_name(player),
        'role': player.get(FIELD_ROLE),
        'position_group': player.get(FIELD_POSITION_GROUP),
        'missing': bool(player.get(FIELD_MISSING)),
        'games_played': to_int(player.get(FIELD_GAMES_PLAYED)),
        'goals': goals,
        'assists': assists,
        'points': goals + assists,
        'shots': 0 if is_goalie else to_int(player.get(FIELD_SHOTS)),
        'hits': 0 if is_goalie else to_int(player.get(FIELD_HITS)),
        'penalty_minutes': to_int(player.get(FIELD_PIM)),
        'save_pct': to_float(player.get(FIELD_SAVE_PCT)) if is_goalie else None,
        'gaa': to_float(player.get(FIELD_GAA)) if is_goalie else None,
    }


def roster_rows(summary: TeamSummary) -> list[dict[str, Any]]:
    """Rows for the full roster listing, missing players included."""
    return [roster_row(p) for p in sort_roster(list(summary.players))]
