from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class MatchPredictionRequest(BaseModel):
    home_team: str = Field(..., min_length=1)
    away_team: str = Field(..., min_length=1)


class WinProbabilityResponse(BaseModel):
    home: int
    draw: int
    away: int


class MatchPredictionResponse(BaseModel):
    home_team: str
    away_team: str
    predicted_home_score: int = Field(..., ge=0, le=5)
    predicted_away_score: int = Field(..., ge=0, le=5)
    confidence: int
    win_probability: WinProbabilityResponse


class MatchPredictionEnvelope(BaseModel):
    success: bool = True
    data: MatchPredictionResponse
    timestamp: datetime
