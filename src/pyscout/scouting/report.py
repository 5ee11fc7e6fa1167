"""Rule-based scouting reports built from a team's attribute profile."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Callable, Dict, List, Literal, Tuple

from pyscout.models import TeamProfile
from pyscout.squad.service import round_half_up


Urgency = Literal["High", "Medium", "Low"]

STRONG_ATTRIBUTE = 80.0
WEAK_ATTRIBUTE = 60.0

# attribute -> (strength message, weakness message), in reporting order.
ATTRIBUTE_TABLE: Tuple[Tuple[str, str, str], ...] = (
    ("midfield_passing", "Excellent passing ability in midfield", "Poor midfield passing and distribution"),
    ("midfield_buildup", "Strong buildup play from midfield", "Struggles with buildup play and progression"),
    ("midfield_defense", "Solid defensive midfield presence", "Lacks defensive protection in midfield"),
    ("midfield_physicality", "Physically dominant midfield", "Lacks physicality and presence in midfield"),
    ("defense_strength", "Rock-solid defensive foundation", "Vulnerable defensive line"),
    ("defense_pace", "Pacey defense capable of high line", "Slow defense vulnerable to pace"),
    ("attack_finishing", "Clinical finishing in front of goal", "Poor conversion rate and finishing"),
    ("attack_pace", "Lightning-fast attacking transitions", "Lacks pace in attacking areas"),
    ("attack_creativity", "Highly creative attacking play", "Lacks creativity and chance creation"),
    ("goalkeeping_quality", "World-class goalkeeping", "Goalkeeping concerns and inconsistency"),
)


@dataclass(frozen=True)
class PlayerRecommendation:
    position: str
    player_type: str
    key_attributes: List[str]
    reasoning: str
    urgency: Urgency
    suggested_players: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class TeamAnalysis:
    strengths: List[str]
    weaknesses: List[str]
    overall_balance: int


@dataclass(frozen=True)
class ScoutingReport:
    priority_needs: List[PlayerRecommendation]
    secondary_needs: List[PlayerRecommendation]
    team_analysis: TeamAnalysis
    recommended_formation: str
    tactical_suggestions: List[str]

    def to_dict(self) -> dict:
        return asdict(self)


Rule = Callable[[TeamProfile, TeamAnalysis], bool]


def _rec(position: str, player_type: str, attributes: str, reasoning: str, urgency: Urgency, players: str) -> PlayerRecommendation:
    return PlayerRecommendation(
        position=position,
        player_type=player_type,
        key_attributes=[item.strip() for item in attributes.split(",")],
        reasoning=reasoning,
        urgency=urgency,
        suggested_players=[item.strip() for item in players.split(",")],
    )


PRIORITY_RULES: Tuple[Tuple[Rule, PlayerRecommendation], ...] = (
    (
        lambda s, a: s.midfield_defense <= 50 and (s.midfield_passing >= 75 or s.midfield_buildup >= 75),
        _rec(
            "Defensive Midfielder",
            "Box-to-Box Destroyer",
            "Tackling, Interceptions, Physicality, Work Rate",
            "Your midfield excels at passing and buildup but lacks defensive protection. "
            "A defensive midfielder would provide the shield your creative players need.",
            "High",
            "Declan Rice, Casemiro, Fabinho",
        ),
    ),
    (
        lambda s, a: s.midfield_physicality <= 50 and s.midfield_passing >= 75,
        _rec(
            "Central Midfielder",
            "Physical Presence",
            "Physicality, Aerial Ability, Stamina, Passing",
            "Your midfield has excellent technical ability but lacks the physical presence "
            "to compete in intense matches.",
            "High",
            "Yves Bissouma, Moises Caicedo, Tyler Adams",
        ),
    ),
    (
        lambda s, a: s.defense_pace <= 50 and s.attack_pace >= 75,
        _rec(
            "Centre-Back",
            "Pacey Defender",
            "Pace, Recovery Speed, Positioning, Passing",
            "Your attacking pace creates opportunities but your slow defense is vulnerable "
            "to counter-attacks.",
            "High",
            "Josko Gvardiol, Alessandro Bastoni, Jurrien Timber",
        ),
    ),
    (
        lambda s, a: s.defense_strength <= 50,
        _rec(
            "Centre-Back",
            "Defensive Leader",
            "Defending, Aerial Ability, Leadership, Positioning",
            "Your defense lacks the fundamental strength and organization needed for "
            "Premier League competition.",
            "High",
            "Virgil van Dijk, Ruben Dias, William Saliba",
        ),
    ),
    (
        lambda s, a: s.attack_finishing <= 50 and (s.attack_creativity >= 70 or s.midfield_passing >= 70),
        _rec(
            "Striker",
            "Clinical Finisher",
            "Finishing, Positioning, Composure, Movement",
            "Your team creates chances but lacks a reliable finisher to convert them into goals.",
            "High",
            "Erling Haaland, Harry Kane, Ivan Toney",
        ),
    ),
    (
        lambda s, a: s.goalkeeping_quality <= 55,
        _rec(
            "Goalkeeper",
            "Reliable Shot-Stopper",
            "Shot Stopping, Distribution, Command of Area, Consistency",
            "Goalkeeping inconsistency is costing points. A reliable keeper would provide "
            "the foundation for defensive stability.",
            "High",
            "Alisson Becker, Ederson, Aaron Ramsdale",
        ),
    ),
)

SECONDARY_RULES: Tuple[Tuple[Rule, PlayerRecommendation], ...] = (
    (
        lambda s, a: 60 <= s.midfield_passing <= 75,
        _rec(
            "Central Midfielder",
            "Deep-Lying Playmaker",
            "Passing, Vision, Ball Retention, Positioning",
            "Upgrading your midfield passing would improve overall team fluidity and control.",
            "Medium",
            "Rodri, Jorginho, Thiago Alcantara",
        ),
    ),
    (
        lambda s, a: 60 <= s.attack_creativity <= 75,
        _rec(
            "Attacking Midfielder/Winger",
            "Creative Playmaker",
            "Creativity, Dribbling, Passing, Pace",
            "Additional creativity would unlock more scoring opportunities and improve "
            "attacking variety.",
            "Medium",
            "Kevin De Bruyne, Bruno Fernandes, Martin Odegaard",
        ),
    ),
    (
        lambda s, a: 60 <= s.attack_pace <= 75,
        _rec(
            "Winger",
            "Pacey Wide Player",
            "Pace, Dribbling, Crossing, Direct Running",
            "Adding pace on the wings would stretch defenses and create more space for "
            "central players.",
            "Medium",
            "Mohamed Salah, Bukayo Saka, Luis Diaz",
        ),
    ),
    (
        lambda s, a: a.overall_balance >= 70,
        _rec(
            "Utility Player",
            "Versatile Squad Player",
            "Versatility, Work Rate, Consistency, Team Player",
            "Your squad has good balance but could benefit from versatile players for "
            "rotation and tactical flexibility.",
            "Low",
            "James Milner, Oleksandr Zinchenko, Emile Smith Rowe",
        ),
    ),
)

# Conditions receive (midfield, attack, defense) group averages plus the profile.
FORMATION_TABLE: Tuple[Tuple[Callable[[float, float, float, TeamProfile], bool], str], ...] = (
    (lambda mid, att, dfn, s: mid >= 75 and att >= 70, "4-3-3 (Possession-based)"),
    (lambda mid, att, dfn, s: dfn >= 75 and s.midfield_defense >= 70, "5-3-2 (Defensive Stability)"),
    (lambda mid, att, dfn, s: att >= 75, "4-2-3-1 (Attack-minded)"),
    (lambda mid, att, dfn, s: mid >= 70, "4-4-2 (Balanced)"),
)
FALLBACK_FORMATION = "5-4-1 (Defensive)"

TACTICAL_TABLE: Tuple[Tuple[Callable[[TeamProfile], bool], str], ...] = (
    (lambda s: s.midfield_passing >= 75, "Focus on possession-based football to utilize your passing strengths"),
    (lambda s: s.attack_pace >= 75, "Implement quick counter-attacking strategies"),
    (lambda s: s.defense_strength >= 75, "Use a high defensive line to compress the game"),
    (lambda s: s.midfield_defense <= 60, "Consider playing with two defensive midfielders for extra protection"),
    (lambda s: s.attack_creativity <= 60, "Focus on set-piece situations to create scoring opportunities"),
    (lambda s: s.midfield_physicality >= 75, "Use direct, physical play to dominate midfield battles"),
)
FALLBACK_TACTIC = "Focus on balanced team development"


def analyze_team_balance(profile: TeamProfile) -> TeamAnalysis:
    strengths: List[str] = []
    weaknesses: List[str] = []
    for attribute, strong, weak in ATTRIBUTE_TABLE:
        value = getattr(profile, attribute)
        if value >= STRONG_ATTRIBUTE:
            strengths.append(strong)
        elif value <= WEAK_ATTRIBUTE:
            weaknesses.append(weak)

    values = [getattr(profile, attribute) for attribute, _, _ in ATTRIBUTE_TABLE]
    return TeamAnalysis(
        strengths=strengths,
        weaknesses=weaknesses,
        overall_balance=round_half_up(sum(values) / len(values)),
    )


def _apply_rules(
    rules: Tuple[Tuple[Rule, PlayerRecommendation], ...],
    profile: TeamProfile,
    analysis: TeamAnalysis,
) -> List[PlayerRecommendation]:
    # Table entries are templates; every report gets its own lists.
    return [
        replace(
            template,
            key_attributes=list(template.key_attributes),
            suggested_players=list(template.suggested_players),
        )
        for rule, template in rules
        if rule(profile, analysis)
    ]


def suggest_formation(profile: TeamProfile) -> str:
    midfield = (profile.midfield_passing + profile.midfield_buildup + profile.midfield_defense) / 3
    attack = (profile.attack_finishing + profile.attack_pace + profile.attack_creativity) / 3
    defense = (profile.defense_strength + profile.defense_pace) / 2
    for condition, formation in FORMATION_TABLE:
        if condition(midfield, attack, defense, profile):
            return formation
    return FALLBACK_FORMATION


def tactical_suggestions(profile: TeamProfile) -> List[str]:
    suggestions = [text for condition, text in TACTICAL_TABLE if condition(profile)]
    return suggestions or [FALLBACK_TACTIC]


def generate_scout_report(profile: TeamProfile) -> ScoutingReport:
    analysis = analyze_team_balance(profile)
    return ScoutingReport(
        priority_needs=_apply_rules(PRIORITY_RULES, profile, analysis),
        secondary_needs=_apply_rules(SECONDARY_RULES, profile, analysis),
        team_analysis=analysis,
        recommended_formation=suggest_formation(profile),
        tactical_suggestions=tactical_suggestions(profile),
    )


def _profile(name: str, *values: float) -> TeamProfile:
    attributes = [attribute for attribute, _, _ in ATTRIBUTE_TABLE]
    return TeamProfile(name=name, **dict(zip(attributes, values)))


SCOUTING_PRESETS: Dict[str, TeamProfile] = {
    profile.name: profile
    for profile in (
        _profile("Manchester City", 92, 90, 75, 70, 85, 78, 88, 82, 90, 88),
        _profile("Arsenal", 88, 85, 70, 65, 80, 75, 82, 85, 88, 82),
        _profile("Burnley", 65, 60, 78, 85, 75, 60, 65, 62, 58, 70),
    )
}


def get_preset(name: str) -> TeamProfile:
    if name not in SCOUTING_PRESETS:
        raise KeyError(f"No scouting preset named {name!r}")
    return SCOUTING_PRESETS[name]
