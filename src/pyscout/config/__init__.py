"""Configuration helpers for squad rules and formations."""

from .formations import Formation, get_formation, has_formation, iter_formations
from .squad import DEFAULT_SQUAD_RULES, SquadRules

__all__ = [
    "DEFAULT_SQUAD_RULES",
    "Formation",
    "SquadRules",
    "get_formation",
    "has_formation",
    "iter_formations",
]
