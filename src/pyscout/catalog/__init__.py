"""Read-only data providers for players and teams."""

from .players import (
    DEFAULT_PLAYERS,
    PlayerCatalog,
    UnknownPlayerError,
    default_catalog,
    load_players_csv,
    normalize_position,
)
from .teams import (
    DEFAULT_CLUBS,
    PREMIER_LEAGUE_TEAMS,
    TeamDirectory,
    TeamStatsCatalog,
    default_team_catalog,
    default_team_directory,
)

__all__ = [
    "DEFAULT_CLUBS",
    "DEFAULT_PLAYERS",
    "PREMIER_LEAGUE_TEAMS",
    "PlayerCatalog",
    "TeamDirectory",
    "TeamStatsCatalog",
    "UnknownPlayerError",
    "default_catalog",
    "default_team_catalog",
    "default_team_directory",
    "load_players_csv",
    "normalize_position",
]
