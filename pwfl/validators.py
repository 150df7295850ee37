"""Validation functions for team payloads, category scores and standings."""

from collections.abc import Mapping, Sequence
from typing import Any

from .constants import FIELD_POSITION_GROUP, POSITION_GROUPS
from .models import Category, ScoredTeam, Standing
from .roster import player_display_name


def validate_team_payload(payload: Any, label: str = 'team') -> list[str]:
    """
    Check a raw team payload for roster problems.

    Checks:
    - Payload is a record with a players list
    - Every player entry is a record with a known position group
    - No duplicate player names

    None of these stop summarizing; they flag data worth a second look.

    Args:
        payload: Raw team JSON
        label: Name used in messages

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings: list[str] = []

    if not isinstance(payload, Mapping):
        return [f'{label} payload is not a JSON object']

    players = payload.get('players')
    if players is None:
        warnings.append(f'{label} has no players list')
        return warnings
    if not isinstance(players, list):
        warnings.append(f'{label} players is not a list')
        return warnings

    seen = set()
    duplicates = set()
    for index, player in enumerate(players):
        if not isinstance(player, Mapping):
            warnings.append(f'{label} player #{index + 1} is not a record')
            continue

        group = player.get(FIELD_POSITION_GROUP)
        name = player_display_name(player)
        if group not in POSITION_GROUPS:
            warnings.append(f'{label} player {name} has unknown position group: {group!r}')

        if name in seen:
            duplicates.add(name)
        seen.add(name)

    if duplicates:
        warnings.append(f'{label} has duplicate players: {", ".join(sorted(duplicates))}')

    return warnings


def validate_category_scores(
    scored: Sequence[ScoredTeam], categories: Sequence[Category]
) -> list[str]:
    """
    Check that category scoring is internally consistent.

    Checks:
    - Each category assigns ranks 1..N exactly once
    - Each category's points sum to N(N+1)/2
    - Each fantasy score equals the sum of its category points
    - Each fantasy score lies in [C, C*N]

    Args:
        scored: Output of score_teams()
        categories: Categories the teams were scored on

    Returns:
        List of error messages (empty if consistent)
    """
    errors: list[str] = []
    n_teams = len(scored)
    n_categories = len(categories)
    expected_ranks = set(range(1, n_teams + 1))
    expected_points = n_teams * (n_teams + 1) // 2

    for category in categories:
        ranks = [team.category_ranks.get(category.key) for team in scored]
        if sorted(r for r in ranks if r is not None) != sorted(expected_ranks) or None in ranks:
            errors.append(f'{category.key} ranks are not 1..{n_teams}: {ranks}')

        points_total = sum(team.category_points.get(category.key, 0) for team in scored)
        if points_total != expected_points:
            errors.append(
                f'{category.key} points sum to {points_total} (expected {expected_points})'
            )

    for team in scored:
        points_sum = sum(team.category_points.values())
        if team.fantasy_score != points_sum:
            errors.append(
                f'{team.team_name} score {team.fantasy_score} != category points {points_sum}'
            )
        if not n_categories <= team.fantasy_score <= n_categories * n_teams:
            errors.append(
                f'{team.team_name} score {team.fantasy_score} outside '
                f'[{n_categories}, {n_categories * n_teams}]'
            )

    return errors


def validate_standings(standings: Sequence[Standing]) -> list[str]:
    """
    Check overall standings ordering.

    Checks:
    - Overall ranks are 1..N in order
    - Fantasy scores never increase down the table
    """
    errors: list[str] = []

    ranks = [s.rank for s in standings]
    if ranks != list(range(1, len(standings) + 1)):
        errors.append(f'Standings ranks are not 1..{len(standings)}: {ranks}')

    for above, below in zip(standings, standings[1:]):
        if below.team.fantasy_score > above.team.fantasy_score:
            errors.append(
                f'{below.team.team_name} ({below.team.fantasy_score}) ranked below '
                f'{above.team.team_name} ({above.team.fantasy_score})'
            )

    return errors
