"""Rank teams of a league by points and goal difference."""

from dataclasses import dataclass

_POINTS_FOR_WIN = 3
_POINTS_FOR_DRAW = 1


@dataclass(frozen=True)
class TeamRecord:
    """One team's standing: its index, points and goal difference."""

    index: int
    points: int
    goal_difference: int

    @property
    def rank_key(self):
        """Key under which better teams sort first."""
        return (-self.points, -self.goal_difference)


def top_two_teams(wins, draws, scored, conceded):
    """Return the indices of the winning team and the runner-up.

    Teams are ranked by points (three per win, one per draw), then by goal
    difference; teams equal on both keep their original order.
    """
    try:
        rows = list(zip(wins, draws, scored, conceded, strict=True))
    except ValueError:
        raise ValueError("all metric sequences must have the same length") from None
    if len(rows) < 2:
        raise ValueError("at least two teams are needed")
    records = [
        TeamRecord(
            index=i,
            points=w * _POINTS_FOR_WIN + d * _POINTS_FOR_DRAW,
            goal_difference=s - c,
        )
        for i, (w, d, s, c) in enumerate(rows)
    ]
    first, second = sorted(records, key=lambda record: record.rank_key)[:2]
    return [first.index, second.index]