"""Persist and load CLI squad selections."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class SquadSelection:
    player_ids: List[str]
    name: str = ""
    formation: str | None = None
    notes: dict = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "SquadSelection":
        data = json.loads(path.read_text(encoding="utf-8"))
        player_ids = data.get("player_ids", [])
        if not isinstance(player_ids, list):
            raise ValueError(f"{path}: player_ids must be a list")
        return cls(
            player_ids=[str(pid) for pid in player_ids],
            name=data.get("name", ""),
            formation=data.get("formation"),
            notes=data.get("notes", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "name": self.name,
            "formation": self.formation,
            "player_ids": self.player_ids,
            "notes": self.notes,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
