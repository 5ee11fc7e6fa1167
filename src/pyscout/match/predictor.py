"""Match score prediction from season record and recent form."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Sequence

from pyscout.catalog.teams import TeamStatsCatalog, default_team_catalog
from pyscout.models import TeamForm
from pyscout.squad.service import round_half_up


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

HOME_ADVANTAGE = 0.3
FORM_WEIGHTS = (0.4, 0.3, 0.2, 0.1, 0.05)
FORM_POINTS = {"W": 3, "D": 1, "L": 0}
FORM_FACTOR_BOUNDS = (0.5, 1.5)
MAX_GOALS = 5
CONFIDENCE_BOUNDS = (60.0, 95.0)


@dataclass(frozen=True)
class WinProbability:
    home: int
    draw: int
    away: int


@dataclass(frozen=True)
class MatchPrediction:
    home_team: str
    away_team: str
    predicted_home_score: int
    predicted_away_score: int
    confidence: int
    win_probability: WinProbability

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_form_factor(form: Sequence[str]) -> float:
    """Weight the five most recent results, newest first, into [0.5, 1.5]."""

    score = 0.0
    for weight, result in zip(FORM_WEIGHTS, form):
        score += FORM_POINTS.get(result, 0) * weight
    low, high = FORM_FACTOR_BOUNDS
    return max(low, min(high, score / 3))


def calculate_win_probabilities(home_score: int, away_score: int) -> WinProbability:
    margin = abs(home_score - away_score)
    if home_score > away_score:
        home, draw, away = 60 + margin * 10, 25, 15 - margin * 5
    elif away_score > home_score:
        home, draw, away = 15 - margin * 5, 25, 60 + margin * 10
    else:
        home, draw, away = 30, 40, 30

    home = max(5, min(80, home))
    away = max(5, min(80, away))
    draw = max(10, min(50, draw))

    total = home + draw + away
    return WinProbability(
        home=round_half_up(home / total * 100),
        draw=round_half_up(draw / total * 100),
        away=round_half_up(away / total * 100),
    )


def _per_match(total: int, team: TeamForm) -> float:
    played = team.matches_played
    return total / played if played else 0.0


def _expected_goals(value: float) -> int:
    return round_half_up(max(0.0, min(float(MAX_GOALS), value)))


def predict_match_score(
    home_team: str,
    away_team: str,
    catalog: TeamStatsCatalog | None = None,
) -> MatchPrediction:
    if home_team == away_team:
        raise ValueError("Home team and away team must be different")

    catalog = catalog or default_team_catalog()
    home = catalog.get(home_team)
    away = catalog.get(away_team)

    home_form = calculate_form_factor(home.form)
    away_form = calculate_form_factor(away.form)
    home_boost = (1 + HOME_ADVANTAGE) * home_form

    home_goals = max(
        0.0,
        _per_match(home.goals_for, home) * home_boost - _per_match(away.goals_against, away) * away_form,
    )
    away_goals = max(
        0.0,
        _per_match(away.goals_for, away) * away_form - _per_match(home.goals_against, home) * home_boost,
    )

    home_score = _expected_goals(home_goals)
    away_score = _expected_goals(away_goals)

    low, high = CONFIDENCE_BOUNDS
    confidence = max(low, min(high, 75 + (home_form + away_form) * 10))

    prediction = MatchPrediction(
        home_team=home_team,
        away_team=away_team,
        predicted_home_score=home_score,
        predicted_away_score=away_score,
        confidence=round_half_up(confidence),
        win_probability=calculate_win_probabilities(home_score, away_score),
    )
    if not (catalog.has_stats(home_team) and catalog.has_stats(away_team)):
        logger.info("Using fallback form for %s vs %s", home_team, away_team)
    logger.info(
        "Predicted %s %s-%s %s (confidence %s)",
        home_team,
        home_score,
        away_score,
        away_team,
        prediction.confidence,
    )
    return prediction
