"""Squad validation, balance and league placement prediction."""

from .service import (
    PositionRange,
    SquadAnalysis,
    SquadBalance,
    SquadValidationError,
    ValidationReason,
    analyze_squad,
    calculate_confidence,
    calculate_overall_rating,
    calculate_squad_balance,
    identify_strengths,
    identify_weaknesses,
    position_range,
    predict_league_position,
    validate_squad,
)

__all__ = [
    "PositionRange",
    "SquadAnalysis",
    "SquadBalance",
    "SquadValidationError",
    "ValidationReason",
    "analyze_squad",
    "calculate_confidence",
    "calculate_overall_rating",
    "calculate_squad_balance",
    "identify_strengths",
    "identify_weaknesses",
    "position_range",
    "predict_league_position",
    "validate_squad",
]
