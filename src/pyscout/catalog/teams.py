"""Team form data for the match predictor and the club directory."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pyscout.models import TeamForm, TeamInfo


PREMIER_LEAGUE_TEAMS: tuple[str, ...] = (
    "Manchester City",
    "Arsenal",
    "Liverpool",
    "Chelsea",
    "Manchester United",
    "Tottenham",
    "Newcastle United",
    "Brighton",
    "West Ham",
    "Aston Villa",
    "Crystal Palace",
    "Fulham",
    "Brentford",
    "Wolves",
    "Everton",
    "Nottingham Forest",
    "Burnley",
    "Sheffield United",
    "Luton Town",
    "Bournemouth",
)


def _form(name: str, goals_for: int, goals_against: int, record: tuple[int, int, int], form: str) -> TeamForm:
    wins, draws, losses = record
    return TeamForm(
        name=name,
        goals_for=goals_for,
        goals_against=goals_against,
        wins=wins,
        draws=draws,
        losses=losses,
        form=list(form),
    )


DEFAULT_TEAM_FORMS: tuple[TeamForm, ...] = (
    _form("Manchester City", 45, 18, (14, 3, 2), "WWWDW"),
    _form("Arsenal", 42, 22, (12, 4, 3), "WLWWD"),
    _form("Liverpool", 48, 25, (13, 3, 3), "WWDWW"),
    _form("Chelsea", 35, 28, (10, 5, 4), "DWLWD"),
    _form("Manchester United", 32, 30, (9, 6, 4), "LDWDL"),
    _form("Tottenham", 38, 32, (10, 4, 5), "WLWWL"),
)


class TeamStatsCatalog:
    """Read-only team form lookup with a league-average fallback."""

    def __init__(self, teams: Iterable[TeamForm], *, known_teams: Iterable[str] = PREMIER_LEAGUE_TEAMS):
        self._teams: Dict[str, TeamForm] = {team.name: team for team in teams}
        self._known = list(dict.fromkeys([*known_teams, *self._teams]))

    def team_names(self) -> List[str]:
        return list(self._known)

    def has_stats(self, name: str) -> bool:
        return name in self._teams

    def get(self, name: str) -> TeamForm:
        """Return stored form, or the fallback record under the requested name."""

        team = self._teams.get(name)
        if team is not None:
            return team
        return _form(name, 25, 35, (6, 5, 8), "LDLWD")


def default_team_catalog() -> TeamStatsCatalog:
    return TeamStatsCatalog(DEFAULT_TEAM_FORMS)


def _club(
    team_id: int,
    name: str,
    short_name: str,
    tla: str,
    venue: str,
    founded: int,
    club_colors: str,
    website: str,
) -> TeamInfo:
    return TeamInfo(
        team_id=team_id,
        name=name,
        short_name=short_name,
        tla=tla,
        venue=venue,
        founded=founded,
        club_colors=club_colors,
        website=website,
    )


DEFAULT_CLUBS: tuple[TeamInfo, ...] = (
    _club(1, "Manchester City", "Man City", "MCI", "Etihad Stadium", 1880, "Sky Blue / White", "https://www.mancity.com"),
    _club(2, "Arsenal", "Arsenal", "ARS", "Emirates Stadium", 1886, "Red / White", "https://www.arsenal.com"),
    _club(3, "Liverpool", "Liverpool", "LIV", "Anfield", 1892, "Red / White", "https://www.liverpoolfc.com"),
    _club(4, "Manchester United", "Man United", "MUN", "Old Trafford", 1878, "Red / White / Black", "https://www.manutd.com"),
    _club(5, "Chelsea", "Chelsea", "CHE", "Stamford Bridge", 1905, "Blue / White", "https://www.chelseafc.com"),
    _club(6, "Tottenham Hotspur", "Tottenham", "TOT", "Tottenham Hotspur Stadium", 1882, "White / Navy Blue", "https://www.tottenhamhotspur.com"),
    _club(7, "Barcelona", "Barça", "FCB", "Spotify Camp Nou", 1899, "Blue / Garnet", "https://www.fcbarcelona.com"),
    _club(8, "Real Madrid", "Real Madrid", "RMA", "Estadio Santiago Bernabéu", 1902, "White / Purple", "https://www.realmadrid.com"),
    _club(9, "Bayern Munich", "Bayern", "FCB", "Allianz Arena", 1900, "Red / White / Blue", "https://www.fcbayern.de"),
    _club(10, "Paris Saint-Germain", "PSG", "PSG", "Parc des Princes", 1970, "Blue / Red / White", "https://www.psg.fr"),
)


class TeamDirectory:
    """Read-only club lookup by numeric id or name."""

    def __init__(self, clubs: Iterable[TeamInfo]):
        self._clubs: Dict[int, TeamInfo] = {}
        for club in clubs:
            if club.team_id in self._clubs:
                raise ValueError(f"Duplicate team id {club.team_id} in directory")
            self._clubs[club.team_id] = club

    def __len__(self) -> int:
        return len(self._clubs)

    def all(self) -> List[TeamInfo]:
        return list(self._clubs.values())

    def get(self, team_id: int) -> Optional[TeamInfo]:
        return self._clubs.get(team_id)

    def find(self, name: str) -> Optional[TeamInfo]:
        """Match a full or short club name, ignoring case."""

        needle = name.strip().lower()
        for club in self._clubs.values():
            if needle in (club.name.lower(), club.short_name.lower()):
                return club
        return None


def default_team_directory() -> TeamDirectory:
    return TeamDirectory(DEFAULT_CLUBS)
