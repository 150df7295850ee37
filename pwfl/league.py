"""League driver: load every team, summarize, score and rank.

Team files are listed in a manifest (teams_index.json). Each entry is
summarized independently; scoring waits until every team is loaded,
since category ranks depend on the full set of peers.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

import polars as pl

from .constants import DEFAULT_CATEGORIES, DEFAULT_TEAM_NAME
from .models import Category, Standing, TeamSummary
from .roster import roster_rows
from .schemas import CategorySpec, ManifestEntry, StandingsFile, TeamManifest
from .scorer import rank_teams, score_teams
from .summarizer import summarize_team
from .utils import load_json, save_json
from .validators import validate_team_payload

logger = logging.getLogger('pwfl.league')


def load_manifest(manifest_path: str | Path) -> TeamManifest:
    """Load and validate the team manifest."""
    return load_json(manifest_path, schema=TeamManifest)


def resolve_team_path(entry: ManifestEntry, manifest_dir: Path) -> Path:
    """
    Locate a team file.

    An explicit url wins over the file name; both are read as local paths,
    relative ones resolved against the manifest's directory.
    """
    return manifest_dir / str(entry.url or entry.file)


def load_team_summaries(
    manifest_path: str | Path,
    default_name: str = DEFAULT_TEAM_NAME,
) -> list[TeamSummary]:
    """Summarize every team listed in the manifest.

    A team file that can't be read or parsed is logged and skipped.

    Args:
        manifest_path: Path to teams_index.json
        default_name: Placeholder for teams without a name

    Returns:
        Team summaries in manifest order

    Raises:
        ValueError: If no team could be loaded
    """
    manifest_path = Path(manifest_path)
    manifest = load_manifest(manifest_path)

    summaries = []
    for entry in manifest.teams:
        team_path = resolve_team_path(entry, manifest_path.parent)
        try:
            payload = load_json(team_path)
        except (OSError, ValueError) as e:
            logger.error(f'Failed to load team file {team_path}: {e}')
            continue

        label = entry.label or team_path.stem
        for warning in validate_team_payload(payload, label):
            logger.warning(warning)

        if not isinstance(payload, dict):
            logger.error(f'Skipping {team_path}: team file is not a JSON object')
            continue

        summaries.append(summarize_team(payload, entry.label, default_name))

    logger.info(f'Loaded {len(summaries)} of {len(manifest.teams)} teams from {manifest_path}')

    if not summaries:
        raise ValueError(f'No team summaries could be loaded from {manifest_path}')

    return summaries


def score_league(
    manifest_path: str | Path,
    categories: Sequence[Category] = DEFAULT_CATEGORIES,
    default_name: str = DEFAULT_TEAM_NAME,
) -> list[Standing]:
    """Load, summarize, score and rank every team in the manifest.

    Returns:
        Standings, best team first
    """
    summaries = load_team_summaries(manifest_path, default_name)
    scored = score_teams(summaries, categories)
    return rank_teams(scored)


def standing_to_dict(standing: Standing) -> dict[str, Any]:
    """Flatten one standing into the standings.json team shape."""
    team = standing.team
    summary = team.summary
    totals = team.totals
    return {
        'rank': standing.rank,
        'team_name': team.team_name,
        'season_id': summary.season_id,
        'skaters': len(summary.skaters),
        'goalies': len(summary.goalies),
        'totals': {name: getattr(totals, name) for name in totals.field_names()},
        'category_ranks': dict(team.category_ranks),
        'category_points': dict(team.category_points),
        'fantasy_score': team.fantasy_score,
        'roster': roster_rows(summary),
    }


def build_standings_document(
    standings: Sequence[Standing],
    categories: Sequence[Category] = DEFAULT_CATEGORIES,
) -> StandingsFile:
    """Build the validated standings.json document."""
    return StandingsFile(
        updated_at=datetime.now(timezone.utc).isoformat(),
        categories=[CategorySpec.from_category(c) for c in categories],
        standings=[standing_to_dict(s) for s in standings],
    )


def save_standings(
    output_path: str | Path,
    standings: Sequence[Standing],
    categories: Sequence[Category] = DEFAULT_CATEGORIES,
) -> StandingsFile:
    """Write standings to JSON and return the document written."""
    document = build_standings_document(standings, categories)
    save_json(output_path, document)
    logger.info(f'Standings saved to {output_path}')
    return document


def load_standings(standings_path: str | Path) -> StandingsFile:
    """Load a standings.json file written by save_standings()."""
    return load_json(standings_path, schema=StandingsFile)


def standings_frame(
    standings: Sequence[Standing],
    categories: Sequence[Category] = DEFAULT_CATEGORIES,
    include_values: bool = True,
) -> pl.DataFrame:
    """
    One row per team: overall rank, name, fantasy score, and per category
    the raw value (optional), rank and points.

    Example:
        standings_frame(standings).write_csv('standings.csv')
    """
    rows = []
    for standing in standings:
        team = standing.team
        row: dict[str, Optional[Any]] = {
            'rank': standing.rank,
            'team': team.team_name,
            'fantasy_score': team.fantasy_score,
        }
        for category in categories:
            if include_values:
                row[category.key] = getattr(team.totals, category.field)
            row[f'{category.key}_rank'] = team.category_ranks.get(category.key)
            row[f'{category.key}_points'] = team.category_points.get(category.key)
        rows.append(row)

    return pl.DataFrame(rows, infer_schema_length=None)
