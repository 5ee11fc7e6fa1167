"""Formation catalogue used by the squad builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class Formation:
    name: str
    defenders: int
    midfielders: int
    forwards: int
    slots: Tuple[str, ...]


def _formation(name: str, defenders: int, midfielders: int, forwards: int, slots: str) -> Formation:
    return Formation(name, defenders, midfielders, forwards, tuple(slots.split()))


_FORMATIONS: Dict[str, Formation] = {
    formation.name: formation
    for formation in (
        _formation("4-3-3", 4, 3, 3, "GK RB CB CB LB CDM CM CM RW ST LW"),
        _formation("4-4-2", 4, 4, 2, "GK RB CB CB LB RM CM CM LM ST ST"),
        _formation("4-2-3-1", 4, 5, 1, "GK RB CB CB LB CDM CDM CAM RW LW ST"),
        _formation("3-5-2", 3, 5, 2, "GK CB CB CB RWB LWB CM CM CM ST ST"),
        _formation("3-4-3", 3, 4, 3, "GK CB CB CB RWB LWB CM CM RW ST LW"),
        _formation("5-3-2", 5, 3, 2, "GK RB CB CB CB LB CM CM CM ST ST"),
        _formation("4-1-2-1-2", 4, 4, 2, "GK RB CB CB LB CDM CM CM CAM ST ST"),
        _formation("4-3-1-2", 4, 4, 2, "GK RB CB CB LB CM CM CM CAM ST ST"),
        _formation("3-4-1-2", 3, 5, 2, "GK CB CB CB RWB LWB CM CM CAM ST ST"),
        _formation("4-5-1", 4, 5, 1, "GK RB CB CB LB RM CM CM CM LM ST"),
        _formation("5-4-1", 5, 4, 1, "GK RB CB CB CB LB RM CM CM LM ST"),
    )
}

DEFAULT_FORMATION = "4-3-3"


def iter_formations() -> Iterable[Formation]:
    """Return formations in catalogue order."""

    return _FORMATIONS.values()


def get_formation(name: str) -> Formation:
    """Look up a formation, falling back to 4-3-3 for unknown names."""

    return _FORMATIONS.get(name.strip(), _FORMATIONS[DEFAULT_FORMATION])


def has_formation(name: str) -> bool:
    return name.strip() in _FORMATIONS
