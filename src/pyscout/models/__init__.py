"""Canonical records shared by the catalogs, calculators and API."""

from .player import POSITIONS, PlayerRecord, Position
from .team import TeamForm, TeamInfo, TeamProfile

__all__ = ["POSITIONS", "PlayerRecord", "Position", "TeamForm", "TeamInfo", "TeamProfile"]
