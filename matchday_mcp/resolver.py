"""Team name resolution against a roster."""

from typing import Optional, Sequence

from .schemas import Team


def find_team_in_list(teams: Sequence[Team], team_name: str) -> Optional[Team]:
    """Return the first team whose name contains ``team_name``, ignoring case.

    Roster order breaks ties, so "arsenal" picks "Arsenal FC" over
    "Arsenal Women" when the API lists it first. An empty query matches the
    first entry; callers enforce a minimum length.
    """
    query = team_name.lower()
    return next((team for team in teams if query in team.name.lower()), None)
