"""Integration tests for end-to-end workflows."""

import json

import polars as pl
import pytest

from pwfl.config import DEFAULT_CONFIG_PATH, get_categories, get_config, get_default_team_name
from pwfl.constants import DEFAULT_CATEGORIES
from pwfl.league import (
    load_manifest,
    load_standings,
    load_team_summaries,
    save_standings,
    score_league,
    standings_frame,
)
from pwfl.validators import validate_category_scores, validate_standings


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def temp_data_dir(tmp_path):
    """Create temporary data directory with a manifest and three team files."""
    data_dir = tmp_path / 'data'

    write_json(data_dir / 'teams' / 'ice.json', {
        'team_name': 'Ice Queens',
        'season_id': 5,
        'players': [
            {'matched_name': 'Marie-Philip Poulin', 'stats_position_group': 'skater',
             'fantasy_role': 'forward', 'games_played': 20, 'goals': 12, 'assists': 10,
             'power_play_goals': 4, 'power_play_assists': 3, 'hits': 15, 'shots': 80,
             'penalty_minutes': 6},
            {'matched_name': 'Renata Fast', 'stats_position_group': 'skater',
             'fantasy_role': 'defence', 'games_played': 20, 'goals': 3, 'assists': 14,
             'power_play_goals': 0, 'power_play_assists': 5, 'hits': 30, 'shots': 50,
             'penalty_minutes': 10},
            {'matched_name': 'Ann-Renee Desbiens', 'stats_position_group': 'goalie',
             'fantasy_role': 'goalie', 'games_played': 15, 'save_percentage': '0.935',
             'goals_against_average': '1.80'},
        ],
    })
    write_json(data_dir / 'teams' / 'blades.json', {
        'team_name': 'Blade Runners',
        'season_id': 5,
        'players': [
            {'matched_name': 'Sarah Nurse', 'stats_position_group': 'skater',
             'fantasy_role': 'forward', 'goals': 9, 'assists': 8, 'power_play_goals': 2,
             'power_play_assists': 2, 'hits': 25, 'shots': 70, 'penalty_minutes': 14},
            {'matched_name': 'Hilary Knight', 'stats_position_group': 'skater',
             'fantasy_role': 'forward', 'missing': True, 'goals': 15},
            {'matched_name': 'Aerin Frankel', 'stats_position_group': 'goalie',
             'fantasy_role': 'goalie', 'save_percentage': 0.928, 'goals_against_average': 2.05},
        ],
    })
    write_json(data_dir / 'teams' / 'skaters_only.json', {
        'season_id': 5,
        'players': [
            {'matched_name': 'Alex Carpenter', 'stats_position_group': 'skater',
             'fantasy_role': 'forward', 'goals': 7, 'assists': 6, 'hits': 5, 'shots': 60,
             'penalty_minutes': 2},
        ],
    })

    write_json(data_dir / 'teams_index.json', {
        'teams': [
            {'file': 'teams/ice.json'},
            {'file': 'teams/blades.json', 'label': 'Blades'},
            {'file': 'teams/skaters_only.json'},
        ],
    })
    return data_dir


class TestManifestLoading:
    """Tests for loading teams listed in the manifest."""

    def test_load_manifest(self, temp_data_dir):
        """Test the manifest loads every entry."""
        manifest = load_manifest(temp_data_dir / 'teams_index.json')
        assert len(manifest.teams) == 3
        assert manifest.teams[1].label == 'Blades'

    def test_load_team_summaries(self, temp_data_dir):
        """Test summaries come back in manifest order with resolved names."""
        summaries = load_team_summaries(temp_data_dir / 'teams_index.json')
        assert [s.team_name for s in summaries] == ['Ice Queens', 'Blades', 'Unnamed Team']
        assert summaries[0].totals.goals == 15
        assert summaries[0].totals.power_play_points == 12
        assert summaries[1].totals.goals == 9  # missing player excluded
        assert len(summaries[1].players) == 3
        assert summaries[2].totals.avg_gaa is None

    def test_bad_team_files_skipped(self, temp_data_dir):
        """Test unreadable, missing and malformed team files are skipped, not fatal."""
        (temp_data_dir / 'teams' / 'broken.json').write_text('{"players": [')
        (temp_data_dir / 'teams' / 'latin1.json').write_bytes(b'{"team_name": "\xff\xfe"}')
        (temp_data_dir / 'teams' / 'a_directory').mkdir()
        write_json(temp_data_dir / 'teams_index.json', {
            'teams': [
                {'file': 'teams/ice.json'},
                {'file': 'teams/does_not_exist.json'},
                {'file': 'teams/broken.json'},
                {'file': 'teams/latin1.json'},
                {'file': 'teams/a_directory'},
            ],
        })
        summaries = load_team_summaries(temp_data_dir / 'teams_index.json')
        assert [s.team_name for s in summaries] == ['Ice Queens']

    def test_url_entry(self, temp_data_dir):
        """Test an entry url is used as the team file location."""
        ice_path = temp_data_dir / 'teams' / 'ice.json'
        write_json(temp_data_dir / 'teams_index.json', {
            'teams': [{'url': str(ice_path), 'label': 'From URL'}],
        })
        [summary] = load_team_summaries(temp_data_dir / 'teams_index.json')
        assert summary.team_name == 'From URL'

    def test_relative_url_entry(self, temp_data_dir):
        """Test a relative url resolves against the manifest directory, like file."""
        write_json(temp_data_dir / 'teams_index.json', {
            'teams': [{'url': 'teams/blades.json', 'file': 'teams/ice.json'}],
        })
        [summary] = load_team_summaries(temp_data_dir / 'teams_index.json')
        assert summary.team_name == 'Blade Runners'

    def test_no_teams_loaded(self, temp_data_dir):
        """Test an empty manifest is an error rather than an empty league."""
        write_json(temp_data_dir / 'teams_index.json', {'teams': []})
        with pytest.raises(ValueError, match='No team summaries'):
            load_team_summaries(temp_data_dir / 'teams_index.json')


class TestLeagueScoring:
    """Tests for the load -> summarize -> score -> rank flow."""

    def test_score_league(self, temp_data_dir):
        """Test the full league ranks consistently."""
        standings = score_league(temp_data_dir / 'teams_index.json')

        assert [s.rank for s in standings] == [1, 2, 3]
        assert validate_standings(standings) == []
        assert validate_category_scores([s.team for s in standings], DEFAULT_CATEGORIES) == []
        assert sum(s.team.fantasy_score for s in standings) == len(DEFAULT_CATEGORIES) * 6

    def test_expected_order(self, temp_data_dir):
        """Test the fixture league's standings."""
        standings = score_league(temp_data_dir / 'teams_index.json')
        scores = {s.team.team_name: s.team.fantasy_score for s in standings}
        # goals I,B,U | assists I,B,U | pp I,B,U | hits I,B,U | shots I,B,U
        # pim I,B,U | sv% I,B,U | gaa U,I,B
        assert scores == {'Ice Queens': 23, 'Blades': 15, 'Unnamed Team': 10}
        assert standings[0].team.team_name == 'Ice Queens'

    def test_repeatable(self, temp_data_dir):
        """Test scoring the same files twice gives the same standings."""
        first = score_league(temp_data_dir / 'teams_index.json')
        second = score_league(temp_data_dir / 'teams_index.json')
        assert first == second

    def test_save_and_load_standings(self, temp_data_dir, tmp_path):
        """Test standings JSON is written and validates on reload."""
        standings = score_league(temp_data_dir / 'teams_index.json')
        output = tmp_path / 'web' / 'standings.json'
        save_standings(output, standings)

        loaded = load_standings(output)
        assert [t.team_name for t in loaded.standings] == ['Ice Queens', 'Blades', 'Unnamed Team']
        assert [c.key for c in loaded.categories] == [c.key for c in DEFAULT_CATEGORIES]
        top = loaded.standings[0]
        assert top.fantasy_score == 23
        assert top.skaters == 2
        assert top.goalies == 1
        assert top.totals['avg_save_pct'] == pytest.approx(0.935)
        assert top.roster[0]['name'] == 'Marie-Philip Poulin'
        assert loaded.standings[2].totals['avg_gaa'] is None

    def test_standings_frame(self, temp_data_dir):
        """Test the standings table has one row per team and per-category columns."""
        standings = score_league(temp_data_dir / 'teams_index.json')
        frame = standings_frame(standings)

        assert isinstance(frame, pl.DataFrame)
        assert frame.height == 3
        assert frame['team'].to_list() == ['Ice Queens', 'Blades', 'Unnamed Team']
        assert frame['gaa_rank'].to_list() == [2, 3, 1]
        assert frame['goals_points'].to_list() == [3, 2, 1]
        assert frame['gaa'].null_count() == 1


class TestConfigIntegration:
    """Test configuration integration with scoring."""

    def test_shipped_config_matches_defaults(self):
        """Test data/league_config.json carries the reference categories."""
        assert get_categories(DEFAULT_CONFIG_PATH) == DEFAULT_CATEGORIES
        assert get_default_team_name(DEFAULT_CONFIG_PATH) == 'Unnamed Team'
        assert get_config(DEFAULT_CONFIG_PATH).league_name == 'PWFL'

    def test_custom_config(self, temp_data_dir):
        """Test a config with fewer categories and a custom placeholder."""
        config_path = write_json(temp_data_dir / 'league_config.json', {
            'default_team_name': 'Mystery Team',
            'categories': [
                {'key': 'gaa', 'field': 'avg_gaa', 'label': 'GAA', 'higher_is_better': False},
            ],
        })
        categories = get_categories(config_path)
        standings = score_league(
            temp_data_dir / 'teams_index.json', categories, get_default_team_name(config_path)
        )
        assert standings[0].team.team_name == 'Mystery Team'
        assert standings[0].team.fantasy_score == 3

    def test_config_rejects_unknown_field(self, temp_data_dir):
        """Test a category reading a non-existent totals field is rejected."""
        config_path = write_json(temp_data_dir / 'bad_config.json', {
            'categories': [{'key': 'blocks', 'field': 'blocked_shots', 'label': 'Blocks'}],
        })
        with pytest.raises(ValueError, match='Unknown totals field'):
            get_config(config_path)

    def test_config_rejects_duplicate_keys(self, temp_data_dir):
        """Test duplicate category keys are rejected."""
        config_path = write_json(temp_data_dir / 'dup_config.json', {
            'categories': [
                {'key': 'goals', 'field': 'goals', 'label': 'Goals'},
                {'key': 'goals', 'field': 'assists', 'label': 'Assists'},
            ],
        })
        with pytest.raises(ValueError, match='Duplicate category key'):
            get_config(config_path)
