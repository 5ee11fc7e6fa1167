"""Rule set and threshold tables for squad analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


GROUPS: Tuple[str, ...] = ("goalkeeping", "defense", "midfield", "attack")

GROUP_POSITIONS: Mapping[str, str] = {
    "goalkeeping": "GK",
    "defense": "DEF",
    "midfield": "MID",
    "attack": "FWD",
}


@dataclass(frozen=True)
class SquadRules:
    min_size: int = 11
    max_size: int = 25
    position_minimums: Mapping[str, int] = field(
        default_factory=lambda: {"GK": 1, "DEF": 3, "MID": 3, "FWD": 1}
    )
    group_caps: Mapping[str, int] = field(
        default_factory=lambda: {"goalkeeping": 1, "defense": 4, "midfield": 4, "attack": 3}
    )
    group_weights: Mapping[str, float] = field(
        default_factory=lambda: {"goalkeeping": 0.15, "defense": 0.30, "midfield": 0.30, "attack": 0.25}
    )
    empty_group_score: float = 50.0
    depth_bonus_per_player: float = 0.5
    depth_bonus_max: float = 5.0
    peak_age: Tuple[float, float] = (24.0, 30.0)
    rating_bounds: Tuple[float, float] = (40.0, 95.0)
    confidence_bounds: Tuple[float, float] = (50.0, 95.0)
    league_size: int = 20
    position_spread: int = 3

    def __post_init__(self) -> None:
        # Rule mappings are stored as read-only views.
        for name in ("position_minimums", "group_caps", "group_weights"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))


DEFAULT_SQUAD_RULES = SquadRules()


# Evaluated top-down; the first floor the rating reaches wins.
PLACEMENT_TABLE: Tuple[Tuple[float, int], ...] = (
    (88.0, 1),
    (85.0, 2),
    (82.0, 4),
    (78.0, 7),
    (74.0, 10),
    (70.0, 13),
    (65.0, 16),
)
PLACEMENT_FALLBACK = 19

# group -> (>= 80 message, >= 75 message), in reporting order.
STRENGTH_TABLE: Tuple[Tuple[str, str, str], ...] = (
    ("attack", "Exceptional attacking threat", "Strong attacking options"),
    ("defense", "Solid defensive foundation", "Reliable defense"),
    ("midfield", "Dominant midfield control", "Strong midfield presence"),
    ("goalkeeping", "World-class goalkeeper", "Reliable goalkeeper"),
)
STRENGTH_ELITE = 80.0
STRENGTH_GOOD = 75.0

# group -> message when the balance score drops below WEAKNESS_FLOOR.
WEAKNESS_TABLE: Tuple[Tuple[str, str], ...] = (
    ("attack", "Lacks attacking threat"),
    ("defense", "Defensive vulnerabilities"),
    ("midfield", "Weak midfield control"),
    ("goalkeeping", "Goalkeeper concerns"),
)
WEAKNESS_FLOOR = 65.0

HIGH_PACE = 75.0
LOW_PACE = 60.0
EXPERIENCED_AGE = 28.0
YOUNG_AGE = 24.0
AGING_AGE = 32.0
INEXPERIENCED_AGE = 21.0
THIN_SQUAD_SIZE = 16

STRENGTH_MESSAGES: Mapping[str, str] = {
    "pace": "High team pace",
    "experienced": "Experienced squad",
    "young": "Young and energetic",
    "fallback": "Balanced squad composition",
}

WEAKNESS_MESSAGES: Mapping[str, str] = {
    "depth": "Limited squad depth",
    "aging": "Aging squad",
    "inexperienced": "Lacks experience",
    "pace": "Lacks pace",
    "fallback": "No significant weaknesses identified",
}

CONFIDENCE_BASE = 70.0
CONFIDENCE_TARGET_RATING = 75.0
CONFIDENCE_VARIANCE_PIVOT = 20.0
CONFIDENCE_VARIANCE_LIMIT = 10.0
CONFIDENCE_DEEP_SQUAD = 20
CONFIDENCE_SHALLOW_SQUAD = 14
CONFIDENCE_STEP = 5.0
