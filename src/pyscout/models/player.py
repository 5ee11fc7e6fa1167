"""Canonical player model shared across catalog and analysis layers."""

from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Position = Literal["GK", "DEF", "MID", "FWD"]

POSITIONS: Tuple[str, ...] = ("GK", "DEF", "MID", "FWD")


class PlayerRecord(BaseModel):
    """Normalized player payload read from a catalog."""

    player_id: str = Field(..., min_length=1)
    name: str
    position: Position
    overall_rating: float = Field(..., ge=0.0, le=100.0)
    pace: float = Field(..., ge=0.0, le=100.0)
    shooting: float = Field(..., ge=0.0, le=100.0)
    passing: float = Field(..., ge=0.0, le=100.0)
    defending: float = Field(..., ge=0.0, le=100.0)
    dribbling: float = Field(..., ge=0.0, le=100.0)
    physicality: float = Field(..., ge=0.0, le=100.0)
    age: float = Field(..., gt=0.0)
    market_value: int = Field(default=0, ge=0)
    team: Optional[str] = None

    model_config = ConfigDict(frozen=True)
