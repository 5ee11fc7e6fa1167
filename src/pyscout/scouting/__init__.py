"""Team scouting reports and recruitment recommendations."""

from .report import (
    SCOUTING_PRESETS,
    PlayerRecommendation,
    ScoutingReport,
    TeamAnalysis,
    analyze_team_balance,
    generate_scout_report,
    get_preset,
    suggest_formation,
    tactical_suggestions,
)

__all__ = [
    "SCOUTING_PRESETS",
    "PlayerRecommendation",
    "ScoutingReport",
    "TeamAnalysis",
    "analyze_team_balance",
    "generate_scout_report",
    "get_preset",
    "suggest_formation",
    "tactical_suggestions",
]
