import random

import pytest

from pyscout.models import PlayerRecord
from pyscout.squad import (
    SquadBalance,
    SquadValidationError,
    ValidationReason,
    analyze_squad,
    calculate_confidence,
    calculate_overall_rating,
    calculate_squad_balance,
    identify_strengths,
    identify_weaknesses,
    position_range,
    predict_league_position,
    validate_squad,
)


def _player(pid: str, position: str, rating: float = 75, *, age: float = 26, pace: float = 70) -> PlayerRecord:
    return PlayerRecord(
        player_id=pid,
        name=f"Player {pid}",
        position=position,
        overall_rating=rating,
        pace=pace,
        shooting=60,
        passing=60,
        defending=60,
        dribbling=60,
        physicality=60,
        age=age,
    )


def _squad(gk: int = 1, df: int = 4, mf: int = 4, fw: int = 2, **kwargs) -> list[PlayerRecord]:
    players: list[PlayerRecord] = []
    for position, count in (("GK", gk), ("DEF", df), ("MID", mf), ("FWD", fw)):
        for i in range(count):
            players.append(_player(f"{position.lower()}{i}", position, **kwargs))
    return players


def _balance(value: float) -> SquadBalance:
    return SquadBalance(goalkeeping=value, defense=value, midfield=value, attack=value)


@pytest.mark.parametrize(
    "counts, reason",
    [
        ((1, 4, 4, 1), ValidationReason.TOO_FEW),
        ((0, 2, 2, 5), ValidationReason.TOO_FEW),
        ((3, 9, 9, 5), ValidationReason.TOO_MANY),
        ((0, 2, 4, 5), ValidationReason.MISSING_GOALKEEPER),
        ((1, 2, 2, 6), ValidationReason.MISSING_DEFENDERS),
        ((1, 3, 2, 5), ValidationReason.MISSING_MIDFIELDERS),
        ((1, 5, 5, 0), ValidationReason.MISSING_FORWARDS),
    ],
)
def test_validate_squad_reports_first_violation(counts, reason):
    squad = _squad(*counts)
    assert validate_squad(squad) is reason

    with pytest.raises(SquadValidationError) as excinfo:
        analyze_squad(squad)
    assert excinfo.value.reason is reason


def test_validate_squad_accepts_minimum_squad():
    assert validate_squad(_squad(1, 3, 3, 4)) is None


def test_validation_messages():
    assert ValidationReason.TOO_FEW.describe() == "Squad must have at least 11 players"
    assert ValidationReason.TOO_MANY.describe() == "Squad cannot have more than 25 players"
    assert ValidationReason.MISSING_DEFENDERS.describe() == "Squad must have at least 3 defenders"
    assert str(SquadValidationError(ValidationReason.MISSING_GOALKEEPER)) == "Squad must have at least 1 goalkeeper"


def test_balance_uses_top_players_per_group():
    squad = [
        _player("g1", "GK", 60),
        _player("g2", "GK", 85),
        *[_player(f"d{i}", "DEF", rating) for i, rating in enumerate((90, 80, 70, 60, 50))],
        *[_player(f"m{i}", "MID", rating) for i, rating in enumerate((70, 74, 78))],
        *[_player(f"f{i}", "FWD", rating) for i, rating in enumerate((10, 90, 80, 70))],
    ]

    balance = calculate_squad_balance(squad)

    assert balance.goalkeeping == 85
    assert balance.defense == pytest.approx(75.0)
    assert balance.midfield == pytest.approx(74.0)
    assert balance.attack == pytest.approx(80.0)


def test_balance_defaults_empty_group_to_fifty():
    squad = _squad(1, 4, 4, 0, rating=80)
    balance = calculate_squad_balance(squad)
    assert balance.attack == 50
    assert balance.goalkeeping == 80


def test_balance_ignores_squad_order():
    squad = _squad(2, 6, 6, 4)
    squad[1] = _player("gk-best", "GK", 88)
    squad[5] = _player("df-best", "DEF", 91)
    shuffled = list(squad)
    random.Random(7).shuffle(shuffled)

    assert calculate_squad_balance(squad) == calculate_squad_balance(shuffled)


@pytest.mark.parametrize(
    "size, expected",
    [(11, 77.0), (15, 79.0), (21, 82.0), (25, 82.0)],
)
def test_overall_rating_depth_bonus(size, expected):
    squad = _squad(1, 4, 4, size - 9)
    balance = _balance(75)
    assert calculate_overall_rating(squad, balance) == pytest.approx(expected)


@pytest.mark.parametrize(
    "age, bonus",
    [(23.9, 1.0), (24, 2.0), (27, 2.0), (30, 2.0), (30.5, -1.0)],
)
def test_overall_rating_age_bonus(age, bonus):
    squad = _squad(age=age)
    assert calculate_overall_rating(squad, _balance(70)) == pytest.approx(70 + bonus)


def test_overall_rating_is_clamped():
    squad = _squad(3, 8, 8, 6)
    assert calculate_overall_rating(squad, _balance(100)) == 95
    assert calculate_overall_rating(_squad(age=35), _balance(10)) == 40


@pytest.mark.parametrize(
    "rating, position",
    [
        (95, 1),
        (88, 1),
        (87.99, 2),
        (85, 2),
        (82, 4),
        (78, 7),
        (77.6, 10),
        (74, 10),
        (70, 13),
        (65, 16),
        (64.9, 19),
        (40, 19),
    ],
)
def test_predict_league_position_thresholds(rating, position):
    assert predict_league_position(rating) == position


def test_position_range_is_clamped_to_league():
    assert position_range(1).best_case == 1
    assert position_range(1).worst_case == 4
    assert (position_range(10).best_case, position_range(10).worst_case) == (7, 13)
    assert position_range(19).worst_case == 20


def test_strengths_by_threshold():
    balance = SquadBalance(goalkeeping=75, defense=80, midfield=74.9, attack=81)
    strengths = identify_strengths(balance, _squad())
    assert strengths == ["Exceptional attacking threat", "Solid defensive foundation", "Reliable goalkeeper"]


def test_strengths_pace_and_age():
    fast_veterans = _squad(pace=75, age=28)
    assert identify_strengths(_balance(70), fast_veterans) == ["High team pace", "Experienced squad"]

    youngsters = _squad(age=24)
    assert identify_strengths(_balance(70), youngsters) == ["Young and energetic"]


def test_strengths_fallback():
    assert identify_strengths(_balance(70), _squad(age=26)) == ["Balanced squad composition"]


def test_weaknesses_by_threshold():
    balance = SquadBalance(goalkeeping=40, defense=64.9, midfield=65, attack=50)
    weaknesses = identify_weaknesses(balance, _squad(1, 5, 5, 5))
    assert weaknesses == ["Lacks attacking threat", "Defensive vulnerabilities", "Goalkeeper concerns"]


def test_weaknesses_depth_age_and_pace():
    assert identify_weaknesses(_balance(70), _squad(age=32, pace=59)) == [
        "Limited squad depth",
        "Aging squad",
        "Lacks pace",
    ]
    assert identify_weaknesses(_balance(70), _squad(2, 5, 5, 4, age=21)) == ["Lacks experience"]


def test_weaknesses_fallback():
    assert identify_weaknesses(_balance(70), _squad(2, 5, 5, 4)) == ["No significant weaknesses identified"]


def test_confidence_components():
    # variance 0 -> +10, size 11 -> -5, peak age -> +5
    assert calculate_confidence(_balance(75), _squad()) == 80
    # variance 100 -> -10, size 20 -> +5, age outside peak
    assert calculate_confidence(_balance(85), _squad(2, 7, 7, 4, age=31)) == 65
    # variance 16 -> +2, size 16 -> 0
    assert calculate_confidence(_balance(79), _squad(2, 5, 5, 4, age=22)) == pytest.approx(72)


def test_confidence_worst_case_stays_in_bounds():
    # -10 variance, -5 thin squad, no age bonus
    assert calculate_confidence(_balance(20), _squad(age=40)) == 55


def test_analyze_eleven_even_players():
    analysis = analyze_squad(_squad(rating=75, age=26, pace=70))

    assert analysis.squad_balance == SquadBalance(goalkeeping=75, defense=75, midfield=75, attack=75)
    assert analysis.overall_rating == 77
    assert analysis.predicted_position == 10
    assert (analysis.position_range.best_case, analysis.position_range.worst_case) == (7, 13)
    assert analysis.confidence == 80
    assert analysis.strengths == [
        "Strong attacking options",
        "Reliable defense",
        "Strong midfield presence",
        "Reliable goalkeeper",
    ]
    assert analysis.weaknesses == ["Limited squad depth"]


def test_analyze_full_elite_squad():
    analysis = analyze_squad(_squad(3, 8, 8, 6, rating=90, age=27))

    assert analysis.overall_rating == 95
    assert analysis.predicted_position == 1
    assert (analysis.position_range.best_case, analysis.position_range.worst_case) == (1, 4)
    # variance penalty -10, size bonus +5, age bonus +5
    assert analysis.confidence == 70
    assert analysis.weaknesses == ["No significant weaknesses identified"]


def test_analyze_weak_goalkeeper():
    squad = _squad()
    squad[0] = _player("keeper", "GK", 40)
    analysis = analyze_squad(squad)

    assert analysis.squad_balance.goalkeeping == 40
    assert "Goalkeeper concerns" in analysis.weaknesses


def test_placement_uses_unrounded_rating():
    analysis = analyze_squad(_squad(rating=75.6, age=26))
    assert analysis.overall_rating == 78
    assert analysis.predicted_position == 10


def test_analysis_rounds_half_up():
    squad = _squad(1, 4, 4, 2)
    squad[-1] = _player("fwd-low", "FWD", 74)
    analysis = analyze_squad(squad)
    assert analysis.squad_balance.attack == 75


def test_analyze_squad_is_idempotent():
    squad = _squad(2, 6, 6, 5, rating=81, age=25, pace=77)
    assert analyze_squad(squad).to_dict() == analyze_squad(squad).to_dict()


def test_analysis_bounds_hold_for_random_squads():
    rng = random.Random(42)
    for _ in range(50):
        counts = (rng.randint(1, 3), rng.randint(3, 8), rng.randint(3, 8), rng.randint(1, 6))
        squad = []
        for position, count in zip(("GK", "DEF", "MID", "FWD"), counts):
            for i in range(count):
                squad.append(
                    _player(
                        f"{position}{i}",
                        position,
                        rng.uniform(30, 99),
                        age=rng.uniform(17, 38),
                        pace=rng.uniform(30, 99),
                    )
                )
        if validate_squad(squad) is not None:
            continue
        analysis = analyze_squad(squad)
        assert 40 <= analysis.overall_rating <= 95
        assert 50 <= analysis.confidence <= 95
        assert analysis.predicted_position in {1, 2, 4, 7, 10, 13, 16, 19}
        assert 1 <= analysis.position_range.best_case <= analysis.predicted_position
        assert analysis.predicted_position <= analysis.position_range.worst_case <= 20
        assert analysis.strengths and analysis.weaknesses
