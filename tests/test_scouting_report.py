import pytest
from pydantic import ValidationError

from pyscout.models import TeamProfile
from pyscout.scouting import (
    SCOUTING_PRESETS,
    analyze_team_balance,
    generate_scout_report,
    get_preset,
    suggest_formation,
    tactical_suggestions,
)


ATTRIBUTES = (
    "midfield_passing",
    "midfield_buildup",
    "midfield_defense",
    "midfield_physicality",
    "defense_strength",
    "defense_pace",
    "attack_finishing",
    "attack_pace",
    "attack_creativity",
    "goalkeeping_quality",
)


def _profile(base: float = 70, **overrides) -> TeamProfile:
    values = {attribute: base for attribute in ATTRIBUTES}
    values.update(overrides)
    return TeamProfile(name="Test FC", **values)


def test_presets_available():
    assert set(SCOUTING_PRESETS) == {"Manchester City", "Arsenal", "Burnley"}
    assert get_preset("Arsenal").attack_pace == 85
    with pytest.raises(KeyError):
        get_preset("Real Madrid")


def test_manchester_city_report():
    report = generate_scout_report(get_preset("Manchester City"))

    assert report.team_analysis.overall_balance == 84
    assert len(report.team_analysis.strengths) == 7
    assert report.team_analysis.weaknesses == []
    assert report.priority_needs == []
    assert [need.position for need in report.secondary_needs] == ["Utility Player"]
    assert report.secondary_needs[0].urgency == "Low"
    assert report.recommended_formation == "4-3-3 (Possession-based)"
    assert report.tactical_suggestions == [
        "Focus on possession-based football to utilize your passing strengths",
        "Implement quick counter-attacking strategies",
        "Use a high defensive line to compress the game",
    ]


def test_burnley_report():
    report = generate_scout_report(get_preset("Burnley"))

    assert report.team_analysis.strengths == ["Physically dominant midfield"]
    assert report.team_analysis.weaknesses == [
        "Struggles with buildup play and progression",
        "Slow defense vulnerable to pace",
        "Lacks creativity and chance creation",
    ]
    assert report.team_analysis.overall_balance == 68
    assert [need.player_type for need in report.secondary_needs] == ["Deep-Lying Playmaker", "Pacey Wide Player"]
    assert report.recommended_formation == "5-4-1 (Defensive)"
    assert report.tactical_suggestions == [
        "Use a high defensive line to compress the game",
        "Focus on set-piece situations to create scoring opportunities",
        "Use direct, physical play to dominate midfield battles",
    ]


def test_priority_needs_in_rule_order():
    profile = _profile(
        midfield_defense=45,
        midfield_passing=80,
        midfield_physicality=45,
        defense_strength=45,
        defense_pace=45,
        attack_pace=80,
        attack_finishing=45,
        attack_creativity=75,
        goalkeeping_quality=50,
    )

    needs = generate_scout_report(profile).priority_needs

    assert [need.position for need in needs] == [
        "Defensive Midfielder",
        "Central Midfielder",
        "Centre-Back",
        "Centre-Back",
        "Striker",
        "Goalkeeper",
    ]
    assert {need.urgency for need in needs} == {"High"}
    assert needs[0].suggested_players == ["Declan Rice", "Casemiro", "Fabinho"]
    assert needs[0].key_attributes == ["Tackling", "Interceptions", "Physicality", "Work Rate"]


def test_attribute_thresholds_are_inclusive():
    analysis = analyze_team_balance(_profile(midfield_passing=80, attack_pace=60))
    assert analysis.strengths == ["Excellent passing ability in midfield"]
    assert analysis.weaknesses == ["Lacks pace in attacking areas"]


@pytest.mark.parametrize(
    "overrides, formation",
    [
        ({}, "4-4-2 (Balanced)"),
        ({"midfield_passing": 80, "midfield_buildup": 80, "midfield_defense": 80}, "4-3-3 (Possession-based)"),
        ({"defense_strength": 80, "defense_pace": 80, "midfield_passing": 60}, "5-3-2 (Defensive Stability)"),
        ({"attack_finishing": 80, "attack_pace": 80, "attack_creativity": 80, "midfield_passing": 60}, "4-2-3-1 (Attack-minded)"),
        ({"midfield_passing": 60}, "5-4-1 (Defensive)"),
    ],
)
def test_formation_table(overrides, formation):
    assert suggest_formation(_profile(**overrides)) == formation


def test_tactical_fallback():
    assert tactical_suggestions(_profile()) == ["Focus on balanced team development"]


def test_profile_attributes_bounded():
    with pytest.raises(ValidationError):
        _profile(attack_pace=120)


def test_report_serializes():
    payload = generate_scout_report(get_preset("Arsenal")).to_dict()
    assert set(payload) == {
        "priority_needs",
        "secondary_needs",
        "team_analysis",
        "recommended_formation",
        "tactical_suggestions",
    }
    assert isinstance(payload["team_analysis"]["overall_balance"], int)


def test_reports_do_not_share_recommendations():
    city = get_preset("Manchester City")
    first = generate_scout_report(city)
    first.secondary_needs[0].suggested_players.append("Someone Else")
    first.secondary_needs[0].key_attributes.clear()

    second = generate_scout_report(city)
    assert second.secondary_needs[0].suggested_players == [
        "James Milner",
        "Oleksandr Zinchenko",
        "Emile Smith Rowe",
    ]
    assert second.secondary_needs[0].key_attributes == [
        "Versatility",
        "Work Rate",
        "Consistency",
        "Team Player",
    ]
