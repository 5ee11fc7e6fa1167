"""Read-only player catalogs and CSV ingestion."""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from pyscout.models import POSITIONS, PlayerRecord


logger = logging.getLogger(__name__)

POSITION_ALIASES: Dict[str, str] = {
    "GK": "GK",
    "G": "GK",
    "GOALKEEPER": "GK",
    "DEF": "DEF",
    "D": "DEF",
    "DF": "DEF",
    "CB": "DEF",
    "LB": "DEF",
    "RB": "DEF",
    "DEFENDER": "DEF",
    "MID": "MID",
    "M": "MID",
    "MF": "MID",
    "CM": "MID",
    "CDM": "MID",
    "CAM": "MID",
    "MIDFIELDER": "MID",
    "FWD": "FWD",
    "F": "FWD",
    "FW": "FWD",
    "ST": "FWD",
    "CF": "FWD",
    "FORWARD": "FWD",
}

DEFAULT_PLAYERS_MAPPING = {
    "player_id": "id",
    "name": "name",
    "position": "position",
    "overall_rating": "overall_rating",
    "pace": "pace",
    "shooting": "shooting",
    "passing": "passing",
    "defending": "defending",
    "dribbling": "dribbling",
    "physicality": "physicality",
    "age": "age",
    "market_value": "market_value",
    "team": "team",
}

_NUMERIC_FIELDS = (
    "overall_rating",
    "pace",
    "shooting",
    "passing",
    "defending",
    "dribbling",
    "physicality",
    "age",
)


class UnknownPlayerError(KeyError):
    def __init__(self, player_ids: Sequence[str]):
        self.player_ids = list(player_ids)
        self.message = f"Unknown player ids: {', '.join(self.player_ids)}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class PlayerRow(BaseModel):
    """Raw CSV row before numeric parsing."""

    raw_id: str
    raw_name: str
    raw_position: str
    raw_values: Dict[str, str]
    raw_market_value: Optional[str] = None
    raw_team: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "PlayerRow":
        def extract(key: str) -> Optional[str]:
            column = mapping.get(key)
            if column is None:
                return None
            value = row.get(column)
            return value.strip() if value is not None else None

        return cls(
            raw_id=extract("player_id") or "",
            raw_name=extract("name") or "",
            raw_position=extract("position") or "",
            raw_values={name: extract(name) or "" for name in _NUMERIC_FIELDS},
            raw_market_value=extract("market_value"),
            raw_team=extract("team"),
        )


def normalize_position(raw: str) -> str:
    token = re.sub(r"[^A-Z]", "", raw.upper())
    if token not in POSITION_ALIASES:
        raise ValueError(f"position '{raw}' is not one of {', '.join(POSITIONS)}")
    return POSITION_ALIASES[token]


def _parse_number(raw: str, field: str) -> float:
    text = raw.strip()
    if not text:
        raise ValueError(f"{field} is missing")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"{field} '{raw}' is not numeric") from None


def _parse_market_value(raw: Optional[str]) -> int:
    if not raw:
        return 0
    # Drops currency symbols and thousands separators, keeps sign and decimals.
    text = re.sub(r"[^0-9.\-]", "", raw)
    if not text:
        return 0
    try:
        return int(float(text))
    except ValueError:
        raise ValueError(f"market_value '{raw}' is not numeric") from None


def row_to_record(row: PlayerRow) -> PlayerRecord:
    values = {name: _parse_number(raw, name) for name, raw in row.raw_values.items()}
    return PlayerRecord(
        player_id=row.raw_id,
        name=row.raw_name,
        position=normalize_position(row.raw_position),
        market_value=_parse_market_value(row.raw_market_value),
        team=row.raw_team or None,
        **values,
    )


def load_players_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    """Load player records from a CSV file, naming the offending line on bad data."""

    mapping = {**DEFAULT_PLAYERS_MAPPING, **(mapping or {})}
    records: List[PlayerRecord] = []
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for line_no, raw in enumerate(reader, start=2):
            row = PlayerRow.from_mapping(raw, mapping)
            try:
                records.append(row_to_record(row))
            except (ValueError, ValidationError) as exc:
                raise ValueError(f"{path.name} line {line_no}: {exc}") from exc
    logger.info("Loaded %s players from %s", len(records), path)
    return records


class PlayerCatalog:
    """Read-only lookup over a fixed set of players."""

    def __init__(self, players: Iterable[PlayerRecord]):
        self._players: Dict[str, PlayerRecord] = {}
        for player in players:
            if player.player_id in self._players:
                raise ValueError(f"Duplicate player id {player.player_id!r} in catalog")
            self._players[player.player_id] = player

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def all(self) -> List[PlayerRecord]:
        return list(self._players.values())

    def get(self, player_id: str) -> Optional[PlayerRecord]:
        return self._players.get(player_id)

    def resolve(self, player_ids: Sequence[str]) -> List[PlayerRecord]:
        """Return players in request order; every unknown id is reported at once."""

        seen: set[str] = set()
        duplicates: list[str] = []
        for pid in player_ids:
            if pid in seen and pid not in duplicates:
                duplicates.append(pid)
            seen.add(pid)
        if duplicates:
            raise ValueError(f"Duplicate player ids in squad: {', '.join(duplicates)}")
        missing = [pid for pid in player_ids if pid not in self._players]
        if missing:
            raise UnknownPlayerError(missing)
        return [self._players[pid] for pid in player_ids]

    def search(self, query: str) -> List[PlayerRecord]:
        needle = query.strip().lower()
        return [
            player
            for player in self._players.values()
            if needle in player.name.lower() or needle in player.position.lower()
        ]

    def by_position(self, position: str) -> List[PlayerRecord]:
        code = normalize_position(position)
        return [player for player in self._players.values() if player.position == code]

    def by_team(self, team: str) -> List[PlayerRecord]:
        needle = team.strip().lower()
        return [player for player in self._players.values() if player.team and player.team.lower() == needle]

    @classmethod
    def from_csv(cls, path: Path, *, mapping: Mapping[str, str] | None = None) -> "PlayerCatalog":
        return cls(load_players_csv(path, mapping=mapping))


def _player(
    pid: str,
    name: str,
    position: str,
    rating: int,
    attrs: Sequence[int],
    age: int,
    value: int,
    team: str,
) -> PlayerRecord:
    pace, shooting, passing, defending, dribbling, physicality = attrs
    return PlayerRecord(
        player_id=pid,
        name=name,
        position=position,
        overall_rating=rating,
        pace=pace,
        shooting=shooting,
        passing=passing,
        defending=defending,
        dribbling=dribbling,
        physicality=physicality,
        age=age,
        market_value=value,
        team=team,
    )


DEFAULT_PLAYERS: tuple[PlayerRecord, ...] = (
    _player("1", "Alisson Becker", "GK", 89, (45, 25, 78, 85, 65, 88), 30, 60_000_000, "Liverpool"),
    _player("2", "Ederson", "GK", 88, (50, 30, 85, 82, 70, 85), 29, 55_000_000, "Manchester City"),
    _player("3", "Virgil van Dijk", "DEF", 90, (70, 45, 85, 95, 75, 92), 32, 70_000_000, "Liverpool"),
    _player("4", "Ruben Dias", "DEF", 88, (65, 40, 82, 92, 70, 88), 26, 80_000_000, "Manchester City"),
    _player("5", "Trent Alexander-Arnold", "DEF", 87, (78, 70, 92, 78, 82, 75), 25, 75_000_000, "Liverpool"),
    _player("6", "Kevin De Bruyne", "MID", 91, (75, 88, 95, 65, 88, 78), 32, 90_000_000, "Manchester City"),
    _player("7", "Bruno Fernandes", "MID", 86, (70, 85, 90, 68, 82, 75), 29, 70_000_000, "Manchester United"),
    _player("8", "Declan Rice", "MID", 84, (72, 65, 80, 88, 75, 85), 24, 85_000_000, "Arsenal"),
    _player("9", "Erling Haaland", "FWD", 91, (89, 94, 70, 35, 80, 92), 23, 150_000_000, "Manchester City"),
    _player("10", "Mohamed Salah", "FWD", 89, (90, 87, 78, 45, 90, 75), 31, 65_000_000, "Liverpool"),
    _player("11", "Harry Kane", "FWD", 88, (70, 92, 85, 50, 82, 88), 30, 80_000_000, "Bayern Munich"),
)


def default_catalog() -> PlayerCatalog:
    """Catalog of the built-in demonstration roster."""

    return PlayerCatalog(DEFAULT_PLAYERS)
