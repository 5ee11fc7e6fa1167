from __future__ import annotations

from typing import List

from pydantic import BaseModel


class PlayerResponse(BaseModel):
    player_id: str
    name: str
    position: str
    overall_rating: float
    pace: float
    shooting: float
    passing: float
    defending: float
    dribbling: float
    physicality: float
    age: float
    market_value: int
    team: str | None = None


class FormationResponse(BaseModel):
    name: str
    defenders: int
    midfielders: int
    forwards: int
    slots: List[str]
