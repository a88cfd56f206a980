import pytest

from puzzlekit.competition import TeamRecord, top_two_teams


def test_worked_example():
    wins = [3, 1, 2, 2]
    draws = [1, 5, 4, 4]
    scored = [30, 10, 20, 40]
    conceded = [32, 13, 18, 37]
    assert top_two_teams(wins, draws, scored, conceded) == [3, 2]


def test_goal_difference_breaks_points_tie():
    assert top_two_teams([1, 1], [0, 0], [1, 5], [0, 0]) == [1, 0]


def test_equal_teams_keep_order():
    result = top_two_teams([2, 2, 2], [1, 1, 1], [5, 5, 5], [3, 3, 3])
    assert result == sorted(result)
    assert len(set(result)) == 2


def test_points_outrank_goal_difference():
    # team 1 has the better goal difference but fewer points
    result = top_two_teams([2, 1, 0], [0, 0, 0], [2, 50, 0], [2, 0, 9])
    assert result[0] == 0


def test_rank_key_orders_better_first():
    better = TeamRecord(index=5, points=10, goal_difference=1)
    worse = TeamRecord(index=0, points=10, goal_difference=-1)
    assert better.rank_key < worse.rank_key


def test_single_team_rejected():
    with pytest.raises(ValueError):
        top_two_teams([1], [1], [1], [1])


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        top_two_teams([1, 2], [1], [1, 2], [1, 2])