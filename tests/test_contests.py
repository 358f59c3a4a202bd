import pytest

from contestkit.contests import (
    advancing_teams,
    arrange_bottles,
    cornhusker_yield,
    swerc_beauty,
)


def test_advancing_teams_school_limit():
    teams = [(1, 1), (2, 1), (3, 2), (4, 3)]
    assert advancing_teams(teams, 3, 1) == [1, 3, 4]


def test_advancing_teams_fills_leftover_places():
    teams = [(1, 1), (2, 1), (3, 1), (4, 2)]
    assert advancing_teams(teams, 3, 1) == [1, 2, 4]


def test_advancing_teams_no_limit_takes_top():
    teams = [(10, 1), (20, 1), (30, 1), (40, 1)]
    assert advancing_teams(teams, 2, 100) == [10, 20]


def test_advancing_teams_keeps_ranking_order():
    teams = [(5, 1), (6, 1), (7, 2), (8, 2), (9, 3)]
    result = advancing_teams(teams, 4, 1)
    ranking = [team for team, _ in teams]
    assert len(result) == 4
    assert result == sorted(result, key=ranking.index)


def test_swerc_beauty_all_difficulties():
    beauties = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    problems = [(b, d) for d, b in enumerate(beauties, start=1)]
    problems.append((1, 1))
    assert swerc_beauty(problems) == sum(beauties)


def test_swerc_beauty_missing_difficulty():
    problems = [(5, d) for d in range(1, 10)]
    assert swerc_beauty(problems) is None


def test_arrange_bottles_possible():
    result = arrange_bottles(6, [(1, 2), (3, 1)])
    assert len(result) == 6
    assert result.count("W") == 2
    assert result == "R" * 4 + "W" * 2


def test_arrange_bottles_impossible():
    assert arrange_bottles(3, [(2, 0), (0, 2)]) is None


def test_cornhusker_sample():
    assert cornhusker_yield([(1, 1)] * 5, 10, 10) == 1


def test_cornhusker_requires_five_fields():
    with pytest.raises(ValueError):
        cornhusker_yield([(1, 1)] * 4, 10, 10)