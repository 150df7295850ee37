"""Team summarizer: turns one team's roster payload into totals."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from .constants import (
    DEFAULT_TEAM_NAME,
    FIELD_ASSISTS,
    FIELD_GAA,
    FIELD_GOALS,
    FIELD_HITS,
    FIELD_MISSING,
    FIELD_PIM,
    FIELD_POSITION_GROUP,
    FIELD_PP_ASSISTS,
    FIELD_PP_GOALS,
    FIELD_SAVE_PCT,
    FIELD_SHOTS,
    GOALIE,
    SKATER,
)
from .models import TeamSummary, TeamTotals
from .utils import to_float, to_int

logger = logging.getLogger('pwfl.summarizer')


def is_active(player: Any, position_group: str) -> bool:
    """True if the record belongs to the position group and isn't flagged missing."""
    return (
        isinstance(player, Mapping)
        and player.get(FIELD_POSITION_GROUP) == position_group
        and not player.get(FIELD_MISSING)
    )


def partition_roster(players: list[Any]) -> tuple[list[dict], list[dict]]:
    """
    Split a roster into active skaters and active goalies.

    Missing players and entries that aren't records land in neither list.

    Returns:
        Tuple of (skaters, goalies)
    """
    skaters = [p for p in players if is_active(p, SKATER)]
    goalies = [p for p in players if is_active(p, GOALIE)]
    return skaters, goalies


def _average(values: list[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def compute_totals(skaters: list[dict], goalies: list[dict]) -> TeamTotals:
    """
    Aggregate skater counting stats and goalie rate stats.

    Power play points are derived as PP goals + PP assists. Goalie stats
    are averaged rather than summed, and are None with no goalies.
    """
    goals = sum(to_int(p.get(FIELD_GOALS)) for p in skaters)
    assists = sum(to_int(p.get(FIELD_ASSISTS)) for p in skaters)
    pp_goals = sum(to_int(p.get(FIELD_PP_GOALS)) for p in skaters)
    pp_assists = sum(to_int(p.get(FIELD_PP_ASSISTS)) for p in skaters)

    return TeamTotals(
        goals=goals,
        assists=assists,
        power_play_points=pp_goals + pp_assists,
        hits=sum(to_int(p.get(FIELD_HITS)) for p in skaters),
        shots=sum(to_int(p.get(FIELD_SHOTS)) for p in skaters),
        penalty_minutes=sum(to_int(p.get(FIELD_PIM)) for p in skaters),
        avg_save_pct=_average([to_float(g.get(FIELD_SAVE_PCT)) for g in goalies]),
        avg_gaa=_average([to_float(g.get(FIELD_GAA)) for g in goalies]),
    )


def resolve_team_name(
    payload: Mapping[str, Any],
    override_label: Optional[str] = None,
    default_name: str = DEFAULT_TEAM_NAME,
) -> str:
    """Override label wins, then the payload's team_name, then the placeholder."""
    return str(override_label or payload.get('team_name') or default_name)


def summarize_team(
    payload: Optional[Mapping[str, Any]],
    override_label: Optional[str] = None,
    default_name: str = DEFAULT_TEAM_NAME,
) -> TeamSummary:
    """
    Build a TeamSummary from a raw team payload.

    Never raises for malformed stats: unparseable values count as zero and
    an absent player list is an empty roster.

    Args:
        payload: Raw team JSON with team_name, season_id and players
        override_label: Label from the manifest; beats the payload's own name
        default_name: Placeholder when no name is available

    Returns:
        TeamSummary with partitioned rosters and totals

    Example:
        summary = summarize_team(team_json, override_label='Ice Queens')
        print(summary.totals.goals)
    """
    payload = payload or {}
    players = payload.get('players') or []
    if not isinstance(players, (list, tuple)):
        players = []

    skaters, goalies = partition_roster(players)
    totals = compute_totals(skaters, goalies)
    team_name = resolve_team_name(payload, override_label, default_name)

    logger.debug(
        f'Summarized {team_name}: {len(skaters)} skaters, {len(goalies)} goalies, '
        f'{len(players) - len(skaters) - len(goalies)} excluded'
    )

    return TeamSummary(
        team_name=team_name,
        season_id=payload.get('season_id'),
        players=tuple(players),
        skaters=tuple(skaters),
        goalies=tuple(goalies),
        totals=totals,
    )
