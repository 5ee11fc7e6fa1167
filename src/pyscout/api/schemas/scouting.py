from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class PlayerRecommendationResponse(BaseModel):
    position: str
    player_type: str
    key_attributes: List[str]
    reasoning: str
    urgency: Literal["High", "Medium", "Low"]
    suggested_players: List[str] = Field(default_factory=list)


class TeamAnalysisResponse(BaseModel):
    strengths: List[str]
    weaknesses: List[str]
    overall_balance: int


class ScoutingReportResponse(BaseModel):
    priority_needs: List[PlayerRecommendationResponse]
    secondary_needs: List[PlayerRecommendationResponse]
    team_analysis: TeamAnalysisResponse
    recommended_formation: str
    tactical_suggestions: List[str]
