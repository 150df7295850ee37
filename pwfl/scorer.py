"""Category rank scoring across all teams in the league."""

import logging
from collections.abc import Sequence

from .constants import DEFAULT_CATEGORIES
from .models import Category, ScoredTeam, Standing, TeamSummary

logger = logging.getLogger('pwfl.scorer')


def rank_category(
    summaries: Sequence[TeamSummary], category: Category
) -> list[tuple[int, int, int]]:
    """
    Rank every team in a single category.

    Teams are ordered by the category's totals field (missing data counts
    as 0), best first. Equal values keep their input order, so every team
    gets a distinct rank. Points run from N for rank 1 down to 1.

    Args:
        summaries: All team summaries in the league
        category: Category to rank

    Returns:
        List of (index into summaries, rank, points) tuples in rank order
    """
    n_teams = len(summaries)
    # sorted() is stable, also with reverse=True, so ties keep input order
    order = sorted(
        range(n_teams),
        key=lambda i: summaries[i].totals.value(category.field),
        reverse=category.higher_is_better,
    )
    return [(i, position, n_teams - position + 1) for position, i in enumerate(order, 1)]


def score_teams(
    summaries: Sequence[TeamSummary],
    categories: Sequence[Category] = DEFAULT_CATEGORIES,
) -> list[ScoredTeam]:
    """
    Score all teams by category rank.

    Each call starts from empty ranks and points, so scoring the same
    summaries twice gives the same result. Summaries are not modified.

    Scoring:
        - Per category: rank 1 (best) earns N points, rank N earns 1 point
        - Fantasy score: sum of category points, in [C, C * N]

    Args:
        summaries: Every team summary in the league (all peers are needed)
        categories: Scoring categories, in scoring order

    Returns:
        ScoredTeam per summary, in input order

    Raises:
        ValueError: If summaries or categories are empty, or category keys repeat
    """
    if not summaries:
        raise ValueError('Cannot score an empty league: no team summaries given')
    if not categories:
        raise ValueError('Cannot score without categories')

    keys = [category.key for category in categories]
    duplicates = sorted({key for key in keys if keys.count(key) > 1})
    if duplicates:
        raise ValueError(f'Duplicate category keys: {", ".join(duplicates)}')

    ranks: list[dict[str, int]] = [{} for _ in summaries]
    points: list[dict[str, int]] = [{} for _ in summaries]

    for category in categories:
        ranking = rank_category(summaries, category)
        for i, rank, pts in ranking:
            ranks[i][category.key] = rank
            points[i][category.key] = pts

        logger.debug(
            f'{category.key} order: ' + ', '.join(summaries[i].team_name for i, _, _ in ranking)
        )

    scored = [
        ScoredTeam(
            summary=summary,
            category_ranks=ranks[i],
            category_points=points[i],
            fantasy_score=sum(points[i].values()),
        )
        for i, summary in enumerate(summaries)
    ]

    logger.info(f'Scored {len(summaries)} teams across {len(categories)} categories')
    return scored


def rank_teams(scored: Sequence[ScoredTeam]) -> list[Standing]:
    """
    Order scored teams by fantasy score, highest first.

    Teams with equal scores keep their input order.
    """
    ordered = sorted(scored, key=lambda t: t.fantasy_score, reverse=True)
    return [Standing(rank=rank, team=team) for rank, team in enumerate(ordered, 1)]
