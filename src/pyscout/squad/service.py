"""Squad strength analysis and league placement prediction."""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from pyscout.config.squad import (
    AGING_AGE,
    CONFIDENCE_BASE,
    CONFIDENCE_DEEP_SQUAD,
    CONFIDENCE_SHALLOW_SQUAD,
    CONFIDENCE_STEP,
    CONFIDENCE_TARGET_RATING,
    CONFIDENCE_VARIANCE_LIMIT,
    CONFIDENCE_VARIANCE_PIVOT,
    DEFAULT_SQUAD_RULES,
    EXPERIENCED_AGE,
    GROUP_POSITIONS,
    GROUPS,
    HIGH_PACE,
    INEXPERIENCED_AGE,
    LOW_PACE,
    PLACEMENT_FALLBACK,
    PLACEMENT_TABLE,
    STRENGTH_ELITE,
    STRENGTH_GOOD,
    STRENGTH_MESSAGES,
    STRENGTH_TABLE,
    THIN_SQUAD_SIZE,
    WEAKNESS_FLOOR,
    WEAKNESS_MESSAGES,
    WEAKNESS_TABLE,
    YOUNG_AGE,
    SquadRules,
)
from pyscout.models import PlayerRecord


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)


class ValidationReason(str, Enum):
    TOO_FEW = "too_few"
    TOO_MANY = "too_many"
    MISSING_GOALKEEPER = "missing_goalkeeper"
    MISSING_DEFENDERS = "missing_defenders"
    MISSING_MIDFIELDERS = "missing_midfielders"
    MISSING_FORWARDS = "missing_forwards"

    def describe(self, rules: SquadRules = DEFAULT_SQUAD_RULES) -> str:
        minimums = rules.position_minimums
        messages = {
            ValidationReason.TOO_FEW: f"Squad must have at least {rules.min_size} players",
            ValidationReason.TOO_MANY: f"Squad cannot have more than {rules.max_size} players",
            ValidationReason.MISSING_GOALKEEPER: f"Squad must have at least {minimums['GK']} goalkeeper",
            ValidationReason.MISSING_DEFENDERS: f"Squad must have at least {minimums['DEF']} defenders",
            ValidationReason.MISSING_MIDFIELDERS: f"Squad must have at least {minimums['MID']} midfielders",
            ValidationReason.MISSING_FORWARDS: f"Squad must have at least {minimums['FWD']} forward",
        }
        return messages[self]


# Position checks run in this order after the size checks.
_POSITION_REASONS = (
    ("GK", ValidationReason.MISSING_GOALKEEPER),
    ("DEF", ValidationReason.MISSING_DEFENDERS),
    ("MID", ValidationReason.MISSING_MIDFIELDERS),
    ("FWD", ValidationReason.MISSING_FORWARDS),
)


class SquadValidationError(ValueError):
    def __init__(self, reason: ValidationReason, rules: SquadRules = DEFAULT_SQUAD_RULES):
        self.reason = reason
        self.message = reason.describe(rules)
        super().__init__(self.message)


@dataclass(frozen=True)
class SquadBalance:
    goalkeeping: float
    defense: float
    midfield: float
    attack: float

    def scores(self) -> List[float]:
        return [getattr(self, group) for group in GROUPS]

    def rounded(self) -> "SquadBalance":
        return SquadBalance(**{group: round_half_up(getattr(self, group)) for group in GROUPS})


@dataclass(frozen=True)
class PositionRange:
    best_case: int
    worst_case: int


@dataclass(frozen=True)
class SquadAnalysis:
    overall_rating: int
    predicted_position: int
    position_range: PositionRange
    strengths: List[str]
    weaknesses: List[str]
    squad_balance: SquadBalance
    confidence: int

    def to_dict(self) -> dict:
        return asdict(self)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, bounds: Sequence[float]) -> float:
    low, high = bounds
    return max(low, min(high, value))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _mean_age(players: Sequence[PlayerRecord]) -> float:
    return _mean([player.age for player in players])


def _mean_pace(players: Sequence[PlayerRecord]) -> float:
    return _mean([player.pace for player in players])


def _in_peak_age(age: float, rules: SquadRules) -> bool:
    low, high = rules.peak_age
    return low <= age <= high


def validate_squad(
    players: Sequence[PlayerRecord],
    rules: SquadRules = DEFAULT_SQUAD_RULES,
) -> Optional[ValidationReason]:
    """Return the first rule the squad violates, or ``None`` when it is valid."""

    if len(players) < rules.min_size:
        return ValidationReason.TOO_FEW
    if len(players) > rules.max_size:
        return ValidationReason.TOO_MANY

    counts = Counter(player.position for player in players)
    for position, reason in _POSITION_REASONS:
        if counts.get(position, 0) < rules.position_minimums[position]:
            return reason
    return None


def calculate_squad_balance(
    players: Sequence[PlayerRecord],
    rules: SquadRules = DEFAULT_SQUAD_RULES,
) -> SquadBalance:
    """Average the top-rated players of each position group.

    ``sorted`` is stable, so equally rated players keep their squad order
    when the group cap cuts between them.
    """

    scores: Dict[str, float] = {}
    for group in GROUPS:
        position = GROUP_POSITIONS[group]
        members = [player for player in players if player.position == position]
        if not members:
            scores[group] = rules.empty_group_score
            continue
        ranked = sorted(members, key=lambda player: player.overall_rating, reverse=True)
        selected = ranked[: rules.group_caps[group]]
        scores[group] = _mean([player.overall_rating for player in selected])
    return SquadBalance(**scores)


def calculate_overall_rating(
    players: Sequence[PlayerRecord],
    balance: SquadBalance,
    rules: SquadRules = DEFAULT_SQUAD_RULES,
) -> float:
    """Weighted group rating plus depth and age adjustments, clamped but unrounded."""

    weighted = sum(getattr(balance, group) * rules.group_weights[group] for group in GROUPS)
    depth_bonus = min(
        rules.depth_bonus_max,
        (len(players) - rules.min_size) * rules.depth_bonus_per_player,
    )

    avg_age = _mean_age(players)
    if _in_peak_age(avg_age, rules):
        age_bonus = 2.0
    elif avg_age < rules.peak_age[0]:
        age_bonus = 1.0
    else:
        age_bonus = -1.0

    return _clamp(weighted + depth_bonus + age_bonus, rules.rating_bounds)


def predict_league_position(overall_rating: float) -> int:
    for floor, position in PLACEMENT_TABLE:
        if overall_rating >= floor:
            return position
    return PLACEMENT_FALLBACK


def position_range(position: int, rules: SquadRules = DEFAULT_SQUAD_RULES) -> PositionRange:
    return PositionRange(
        best_case=max(1, position - rules.position_spread),
        worst_case=min(rules.league_size, position + rules.position_spread),
    )


def identify_strengths(balance: SquadBalance, players: Sequence[PlayerRecord]) -> List[str]:
    strengths: List[str] = []
    for group, elite, good in STRENGTH_TABLE:
        score = getattr(balance, group)
        if score >= STRENGTH_ELITE:
            strengths.append(elite)
        elif score >= STRENGTH_GOOD:
            strengths.append(good)

    if _mean_pace(players) >= HIGH_PACE:
        strengths.append(STRENGTH_MESSAGES["pace"])

    avg_age = _mean_age(players)
    if avg_age >= EXPERIENCED_AGE:
        strengths.append(STRENGTH_MESSAGES["experienced"])
    elif avg_age <= YOUNG_AGE:
        strengths.append(STRENGTH_MESSAGES["young"])

    return strengths or [STRENGTH_MESSAGES["fallback"]]


def identify_weaknesses(balance: SquadBalance, players: Sequence[PlayerRecord]) -> List[str]:
    weaknesses: List[str] = []
    for group, message in WEAKNESS_TABLE:
        if getattr(balance, group) < WEAKNESS_FLOOR:
            weaknesses.append(message)

    if len(players) < THIN_SQUAD_SIZE:
        weaknesses.append(WEAKNESS_MESSAGES["depth"])

    avg_age = _mean_age(players)
    if avg_age >= AGING_AGE:
        weaknesses.append(WEAKNESS_MESSAGES["aging"])
    elif avg_age <= INEXPERIENCED_AGE:
        weaknesses.append(WEAKNESS_MESSAGES["inexperienced"])

    if _mean_pace(players) < LOW_PACE:
        weaknesses.append(WEAKNESS_MESSAGES["pace"])

    return weaknesses or [WEAKNESS_MESSAGES["fallback"]]


def calculate_confidence(
    balance: SquadBalance,
    players: Sequence[PlayerRecord],
    rules: SquadRules = DEFAULT_SQUAD_RULES,
) -> float:
    confidence = CONFIDENCE_BASE

    variance = _mean([(score - CONFIDENCE_TARGET_RATING) ** 2 for score in balance.scores()])
    spread = (CONFIDENCE_VARIANCE_PIVOT - variance) / 2
    confidence += max(-CONFIDENCE_VARIANCE_LIMIT, min(CONFIDENCE_VARIANCE_LIMIT, spread))

    if len(players) >= CONFIDENCE_DEEP_SQUAD:
        confidence += CONFIDENCE_STEP
    elif len(players) < CONFIDENCE_SHALLOW_SQUAD:
        confidence -= CONFIDENCE_STEP

    if _in_peak_age(_mean_age(players), rules):
        confidence += CONFIDENCE_STEP

    return _clamp(confidence, rules.confidence_bounds)


def analyze_squad(
    players: Sequence[PlayerRecord],
    rules: SquadRules = DEFAULT_SQUAD_RULES,
) -> SquadAnalysis:
    """Validate a squad and predict its strength and league finish.

    Raises :class:`SquadValidationError` before any computation when the
    squad breaks a composition rule.
    """

    players = list(players)
    reason = validate_squad(players, rules)
    if reason is not None:
        raise SquadValidationError(reason, rules)

    balance = calculate_squad_balance(players, rules)
    rating = calculate_overall_rating(players, balance, rules)
    predicted = predict_league_position(rating)

    analysis = SquadAnalysis(
        overall_rating=round_half_up(rating),
        predicted_position=predicted,
        position_range=position_range(predicted, rules),
        strengths=identify_strengths(balance, players),
        weaknesses=identify_weaknesses(balance, players),
        squad_balance=balance.rounded(),
        confidence=round_half_up(calculate_confidence(balance, players, rules)),
    )
    logger.info(
        "Analyzed squad of %s players: rating=%s position=%s confidence=%s",
        len(players),
        analysis.overall_rating,
        analysis.predicted_position,
        analysis.confidence,
    )
    return analysis
