"""Pydantic models for API I/O."""

from .match import (
    MatchPredictionEnvelope,
    MatchPredictionRequest,
    MatchPredictionResponse,
    WinProbabilityResponse,
)
from .player import FormationResponse, PlayerResponse
from .scouting import PlayerRecommendationResponse, ScoutingReportResponse, TeamAnalysisResponse
from .squad import (
    PositionRangeResponse,
    SquadAnalysisRequest,
    SquadAnalysisResponse,
    SquadBalanceResponse,
    SquadRulesResponse,
)

__all__ = [
    "FormationResponse",
    "MatchPredictionEnvelope",
    "MatchPredictionRequest",
    "MatchPredictionResponse",
    "PlayerRecommendationResponse",
    "PlayerResponse",
    "PositionRangeResponse",
    "ScoutingReportResponse",
    "SquadAnalysisRequest",
    "SquadAnalysisResponse",
    "SquadBalanceResponse",
    "SquadRulesResponse",
    "TeamAnalysisResponse",
    "WinProbabilityResponse",
]
