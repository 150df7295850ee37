"""League configuration management."""

from functools import lru_cache
from pathlib import Path

from .models import Category
from .schemas import LeagueConfig
from .utils import load_json

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'


@lru_cache(maxsize=4)
def get_config(path: Path | str | None = None) -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Configuration is cached per path after first load.

    Args:
        path: Optional config file path (default: data/league_config.json)

    Returns:
        LeagueConfig object with validated settings

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from pwfl.config import get_config
        config = get_config()
        print(f"Scoring {len(config.categories)} categories")
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    return load_json(config_path, schema=LeagueConfig)


def get_categories(path: Path | str | None = None) -> tuple[Category, ...]:
    """Get the scoring categories, in scoring order."""
    return get_config(path).to_categories()


def get_default_team_name(path: Path | str | None = None) -> str:
    """Get the placeholder name for unnamed teams."""
    return get_config(path).default_team_name
