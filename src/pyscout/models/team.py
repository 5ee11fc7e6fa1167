"""Team-level inputs for match prediction and scouting."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Result = Literal["W", "D", "L"]


class TeamForm(BaseModel):
    """Season record plus recent results, most recent first."""

    name: str = Field(..., min_length=1)
    goals_for: int = Field(..., ge=0)
    goals_against: int = Field(..., ge=0)
    wins: int = Field(..., ge=0)
    draws: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    form: List[Result] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def matches_played(self) -> int:
        return self.wins + self.draws + self.losses


class TeamProfile(BaseModel):
    """Ten 0-100 scouting attributes describing how a team plays."""

    name: str = Field(..., min_length=1)
    midfield_passing: float = Field(..., ge=0.0, le=100.0)
    midfield_buildup: float = Field(..., ge=0.0, le=100.0)
    midfield_defense: float = Field(..., ge=0.0, le=100.0)
    midfield_physicality: float = Field(..., ge=0.0, le=100.0)
    defense_strength: float = Field(..., ge=0.0, le=100.0)
    defense_pace: float = Field(..., ge=0.0, le=100.0)
    attack_finishing: float = Field(..., ge=0.0, le=100.0)
    attack_pace: float = Field(..., ge=0.0, le=100.0)
    attack_creativity: float = Field(..., ge=0.0, le=100.0)
    goalkeeping_quality: float = Field(..., ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)


class TeamInfo(BaseModel):
    """Club directory entry."""

    team_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    short_name: str
    tla: str = Field(..., min_length=3, max_length=3)
    venue: str
    founded: int
    club_colors: str = ""
    website: str = ""

    model_config = ConfigDict(frozen=True)
