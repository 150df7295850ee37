#!/usr/bin/env python3
"""
PWFL Standings CLI

Scores every fantasy team listed in the team manifest by category rank
and prints the league standings.
Team files come from data/teams_index.json (or --manifest)
Scoring categories come from data/league_config.json (or --config)

Usage:
    python score_league.py
    python score_league.py --manifest data/teams_index.json --output web/data/standings.json
    python score_league.py --csv standings.csv --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from pwfl import (
    DEFAULT_CATEGORIES,
    DEFAULT_TEAM_NAME,
    save_standings,
    score_league,
    standings_frame,
    validate_category_scores,
    validate_standings,
)
from pwfl.config import DEFAULT_CONFIG_PATH, get_config
from pwfl.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="PWFL category-rank fantasy standings")
    parser.add_argument(
        "--manifest", "-m",
        default=None,
        help="Path to team manifest (defaults to the config's manifest_path)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help=f"Path to league config JSON (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write standings JSON to this path",
    )
    parser.add_argument(
        "--csv",
        default=None,
        help="Write a standings table (ranks and points per category) as CSV",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also write a timestamped log file to this directory",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show per-category ranks for each team",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors",
    )

    args = parser.parse_args()

    level = logging.ERROR if args.quiet else (logging.DEBUG if args.verbose else logging.INFO)
    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=level,
        log_to_file=bool(args.log_dir),
    )

    # Load league config
    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    if config_path.exists():
        try:
            config = get_config(config_path)
        except ValueError as e:
            print(f"❌ {e}")
            sys.exit(1)
        categories = config.to_categories()
        league_name = config.league_name
        default_name = config.default_team_name
        manifest_default = config.manifest_path
    elif args.config:
        print(f"❌ Config file not found: {config_path}")
        sys.exit(1)
    else:
        categories = DEFAULT_CATEGORIES
        league_name = "PWFL"
        default_name = DEFAULT_TEAM_NAME
        manifest_default = "data/teams_index.json"

    manifest_path = Path(args.manifest or manifest_default)
    if not manifest_path.exists():
        print(f"❌ Manifest not found: {manifest_path}")
        sys.exit(1)

    try:
        standings = score_league(manifest_path, categories, default_name)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    problems = validate_category_scores([s.team for s in standings], categories)
    problems += validate_standings(standings)
    for problem in problems:
        print(f"⚠️  {problem}")

    n_teams = len(standings)
    print("\n" + "="*60)
    print(f"{league_name} FINAL STANDINGS")
    print("="*60)

    for standing in standings:
        team = standing.team
        print(f"  {standing.rank}. {team.team_name}: {team.fantasy_score} pts")
        if args.verbose:
            for category in categories:
                rank = team.category_ranks.get(category.key)
                points = team.category_points.get(category.key)
                value = getattr(team.totals, category.field)
                print(f"      {category.label}: {value} (rank {rank} of {n_teams}, {points} pts)")

    if args.output:
        save_standings(args.output, standings, categories)
        print(f"Standings saved to {args.output}")

    if args.csv:
        csv_path = Path(args.csv)
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        standings_frame(standings, categories).write_csv(csv_path)
        print(f"Standings table saved to {csv_path}")


if __name__ == "__main__":
    main()
