"""REST API for the pyscout calculators."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Query

from pyscout.api.schemas import (
    FormationResponse,
    MatchPredictionEnvelope,
    MatchPredictionRequest,
    MatchPredictionResponse,
    PlayerResponse,
    ScoutingReportResponse,
    SquadAnalysisRequest,
    SquadAnalysisResponse,
    SquadRulesResponse,
)
from pyscout.catalog import (
    PlayerCatalog,
    TeamDirectory,
    TeamStatsCatalog,
    UnknownPlayerError,
    default_catalog,
    default_team_catalog,
    default_team_directory,
)
from pyscout.config import DEFAULT_SQUAD_RULES, get_formation, has_formation, iter_formations
from pyscout.config.squad import PLACEMENT_TABLE
from pyscout.match import predict_match_score
from pyscout.models import PlayerRecord, TeamInfo, TeamProfile
from pyscout.scouting import SCOUTING_PRESETS, generate_scout_report, get_preset
from pyscout.squad import SquadValidationError, analyze_squad


logger = logging.getLogger("uvicorn.error")

PLAYERS_CSV_ENV = "PYSCOUT_PLAYERS_CSV"


def _load_player_catalog() -> PlayerCatalog:
    raw = os.getenv(PLAYERS_CSV_ENV)
    if not raw:
        return default_catalog()
    path = Path(raw)
    if not path.is_file():
        logger.warning("%s=%s does not exist; using built-in roster", PLAYERS_CSV_ENV, raw)
        return default_catalog()
    return PlayerCatalog.from_csv(path)


def _player_to_response(player: PlayerRecord) -> PlayerResponse:
    return PlayerResponse.model_validate(player.model_dump())


def create_app(
    player_catalog: PlayerCatalog | None = None,
    team_catalog: TeamStatsCatalog | None = None,
    team_directory: TeamDirectory | None = None,
) -> FastAPI:
    app = FastAPI(title="pyscout")
    players = player_catalog if player_catalog is not None else _load_player_catalog()
    teams = team_catalog if team_catalog is not None else default_team_catalog()
    clubs = team_directory if team_directory is not None else default_team_directory()
    app.state.player_catalog = players
    app.state.team_catalog = teams
    app.state.team_directory = clubs
    rules = DEFAULT_SQUAD_RULES

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=list[PlayerResponse])
    async def list_players(
        q: str | None = Query(None, description="Name or position substring"),
        position: str | None = Query(None, description="GK, DEF, MID or FWD"),
        team: str | None = Query(None, description="Club name"),
    ) -> list[PlayerResponse]:
        results = players.search(q) if q else players.all()
        if position:
            try:
                wanted = {player.player_id for player in players.by_position(position)}
            except ValueError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            results = [player for player in results if player.player_id in wanted]
        if team:
            members = {player.player_id for player in players.by_team(team)}
            results = [player for player in results if player.player_id in members]
        return [_player_to_response(player) for player in results]

    @app.get("/players/{player_id}", response_model=PlayerResponse)
    async def get_player(player_id: str) -> PlayerResponse:
        player = players.get(player_id)
        if player is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return _player_to_response(player)

    @app.get("/teams", response_model=list[TeamInfo])
    async def list_teams() -> list[TeamInfo]:
        return clubs.all()

    @app.get("/teams/{team_id}", response_model=TeamInfo)
    async def get_team(team_id: int) -> TeamInfo:
        club = clubs.get(team_id)
        if club is None:
            raise HTTPException(status_code=404, detail="Team not found")
        return club

    @app.get("/teams/{team_id}/players", response_model=list[PlayerResponse])
    async def team_players(team_id: int) -> list[PlayerResponse]:
        club = clubs.get(team_id)
        if club is None:
            raise HTTPException(status_code=404, detail="Team not found")
        return [_player_to_response(player) for player in players.by_team(club.name)]

    @app.get("/squad/rules", response_model=SquadRulesResponse)
    async def squad_rules() -> SquadRulesResponse:
        return SquadRulesResponse(
            min_size=rules.min_size,
            max_size=rules.max_size,
            position_minimums=dict(rules.position_minimums),
            group_caps=dict(rules.group_caps),
            group_weights=dict(rules.group_weights),
            placement_table=[[floor, position] for floor, position in PLACEMENT_TABLE],
        )

    @app.post("/squad/analysis", response_model=SquadAnalysisResponse)
    async def squad_analysis(request: SquadAnalysisRequest) -> SquadAnalysisResponse:
        try:
            squad = players.resolve(request.player_ids)
        except UnknownPlayerError as exc:
            raise HTTPException(status_code=404, detail=exc.message) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        try:
            analysis = analyze_squad(squad, rules)
        except SquadValidationError as exc:
            raise HTTPException(
                status_code=400,
                detail={"reason": exc.reason.value, "message": exc.message},
            ) from exc
        return SquadAnalysisResponse.model_validate(analysis.to_dict())

    @app.get("/match/teams")
    async def match_teams() -> dict[str, list[str]]:
        return {"teams": teams.team_names()}

    @app.get("/match/prediction")
    async def match_prediction_usage() -> dict[str, Any]:
        return {
            "message": "Score Prediction API",
            "usage": "POST /match/prediction with { home_team: string, away_team: string }",
            "example": {"home_team": "Manchester City", "away_team": "Arsenal"},
        }

    @app.post("/match/prediction", response_model=MatchPredictionEnvelope)
    async def match_prediction(request: MatchPredictionRequest) -> MatchPredictionEnvelope:
        try:
            prediction = predict_match_score(request.home_team, request.away_team, teams)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return MatchPredictionEnvelope(
            data=MatchPredictionResponse.model_validate(prediction.to_dict()),
            timestamp=datetime.now(timezone.utc),
        )

    @app.get("/scouting/presets", response_model=list[TeamProfile])
    async def scouting_presets() -> list[TeamProfile]:
        return list(SCOUTING_PRESETS.values())

    @app.get("/scouting/presets/{name}", response_model=TeamProfile)
    async def scouting_preset(name: str) -> TeamProfile:
        try:
            return get_preset(name)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Preset not found") from exc

    @app.post("/scouting/report", response_model=ScoutingReportResponse)
    async def scouting_report(profile: TeamProfile) -> ScoutingReportResponse:
        report = generate_scout_report(profile)
        return ScoutingReportResponse.model_validate(report.to_dict())

    @app.get("/formations", response_model=list[FormationResponse])
    async def formations() -> list[FormationResponse]:
        return [FormationResponse.model_validate(asdict(item)) for item in iter_formations()]

    @app.get("/formations/{name}", response_model=FormationResponse)
    async def formation(name: str) -> FormationResponse:
        if not has_formation(name):
            raise HTTPException(status_code=404, detail="Formation not found")
        return FormationResponse.model_validate(asdict(get_formation(name)))

    return app
