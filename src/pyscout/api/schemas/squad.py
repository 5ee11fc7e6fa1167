from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class SquadAnalysisRequest(BaseModel):
    player_ids: List[str] = Field(..., min_length=1)


class SquadBalanceResponse(BaseModel):
    attack: int
    midfield: int
    defense: int
    goalkeeping: int


class PositionRangeResponse(BaseModel):
    best_case: int
    worst_case: int


class SquadAnalysisResponse(BaseModel):
    overall_rating: int = Field(..., ge=40, le=95)
    predicted_position: int = Field(..., ge=1, le=20)
    position_range: PositionRangeResponse
    strengths: List[str]
    weaknesses: List[str]
    squad_balance: SquadBalanceResponse
    confidence: int = Field(..., ge=50, le=95)


class SquadRulesResponse(BaseModel):
    min_size: int
    max_size: int
    position_minimums: Dict[str, int]
    group_caps: Dict[str, int]
    group_weights: Dict[str, float]
    placement_table: List[List[float]]
