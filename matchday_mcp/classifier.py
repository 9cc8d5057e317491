"""
Win/draw/loss classification of finished matches.

The perspective team is identified by its id, not by its name.
"""

from enum import Enum

from .schemas import Match

HOME = "home"
AWAY = "away"


class MatchResult(str, Enum):
    WIN = "W"
    DRAW = "D"
    LOSS = "L"

    def __str__(self) -> str:
        return self.value


def team_side(match: Match, team_id: int) -> str:
    """Return "home" or "away" for ``team_id`` in ``match``."""
    if match.home_team.id == team_id:
        return HOME
    if match.away_team.id == team_id:
        return AWAY
    raise ValueError(f"Team {team_id} did not play in match {match.id}")


def classify_result(match: Match, team_id: int) -> MatchResult:
    """Classify a finished match from the point of view of ``team_id``."""
    if not match.is_finished:
        raise ValueError(f"Match {match.id} is not finished (status={match.status})")

    home_goals = match.score.full_time.home
    away_goals = match.score.full_time.away
    if home_goals is None or away_goals is None:
        raise ValueError(f"Match {match.id} has no full-time score")

    if team_side(match, team_id) == HOME:
        scored, conceded = home_goals, away_goals
    else:
        scored, conceded = away_goals, home_goals

    if scored > conceded:
        return MatchResult.WIN
    if scored < conceded:
        return MatchResult.LOSS
    return MatchResult.DRAW
