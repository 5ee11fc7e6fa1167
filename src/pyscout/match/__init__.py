"""Match score prediction."""

from .predictor import (
    MatchPrediction,
    WinProbability,
    calculate_form_factor,
    calculate_win_probabilities,
    predict_match_score,
)

__all__ = [
    "MatchPrediction",
    "WinProbability",
    "calculate_form_factor",
    "calculate_win_probabilities",
    "predict_match_score",
]
