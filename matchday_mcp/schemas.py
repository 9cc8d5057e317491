"""
Pydantic schemas for football-data.org v4 payloads.

Every gateway response is validated into one of these models, so the
formatters never deal with raw dictionaries or silently missing fields.
API field names are camelCase; the models expose snake_case attributes and
accept either spelling on input.

Usage:
    from matchday_mcp.schemas import Match

    match = Match.model_validate(payload["matches"][0])
    match.score.full_time.home
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

FINISHED = "FINISHED"


class ApiModel(BaseModel):
    """Base model mapping camelCase API fields to snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# =============================================================================
# Teams & Players
# =============================================================================

class Team(ApiModel):
    """A club as listed in the /teams roster."""

    id: int = Field(description="Team identifier, unique within a roster")
    name: str = Field(min_length=1, description="Full team name (e.g., 'Arsenal FC')")
    short_name: Optional[str] = Field(None, description="Short display name (e.g., 'Arsenal')")
    tla: Optional[str] = Field(None, description="Three-letter abbreviation")
    founded: Optional[int] = Field(None, description="Year the club was founded")
    club_colors: Optional[str] = Field(None, description="Club colours (e.g., 'Red / White')")
    venue: Optional[str] = Field(None, description="Home stadium")
    website: Optional[str] = Field(None, description="Official website URL")
    address: Optional[str] = Field(None, description="Postal address")

    @property
    def display_name(self) -> str:
        return self.short_name or self.name


class Player(ApiModel):
    """A squad member."""

    id: int = Field(description="Player identifier")
    name: str = Field(description="Player name")
    position: Optional[str] = Field(None, description="Goalkeeper, Defence, Midfield, Offence, ...")
    date_of_birth: Optional[str] = Field(None, description="Birth date in YYYY-MM-DD format")
    nationality: Optional[str] = Field(None, description="Nationality")
    shirt_number: Optional[int] = Field(None, description="Shirt number")

    @property
    def birth_year(self) -> Optional[int]:
        if not self.date_of_birth:
            return None
        try:
            return int(self.date_of_birth[:4])
        except ValueError:
            return None


class TeamDetail(Team):
    """A single team lookup (/teams/{id}) including its squad."""

    squad: List[Player] = Field(default_factory=list, description="Registered players")


class TeamsResponse(ApiModel):
    teams: List[Team] = Field(default_factory=list)


# =============================================================================
# Matches
# =============================================================================

class MatchTeam(ApiModel):
    """Team subset embedded in a match. Empty for undecided knockout slots."""

    id: Optional[int] = None
    name: Optional[str] = None
    short_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or "TBD"

    @property
    def display_short_name(self) -> str:
        return self.short_name or self.name or "TBD"


class ScoreLine(ApiModel):
    home: Optional[int] = Field(None, ge=0, description="Home goals (None if not played)")
    away: Optional[int] = Field(None, ge=0, description="Away goals (None if not played)")


class Score(ApiModel):
    winner: Optional[str] = None
    full_time: ScoreLine = Field(default_factory=ScoreLine)
    half_time: ScoreLine = Field(default_factory=ScoreLine)


class CompetitionRef(ApiModel):
    id: Optional[int] = None
    name: str = ""
    code: Optional[str] = None


class Match(ApiModel):
    """A fixture or result."""

    id: int = Field(description="Match identifier")
    utc_date: str = Field(description="Kick-off time in ISO-8601 UTC")
    status: str = Field(description="SCHEDULED, TIMED, IN_PLAY, PAUSED, FINISHED, ...")
    minute: Optional[Union[int, str]] = Field(None, description="Current minute (live matches)")
    matchday: Optional[int] = None
    home_team: MatchTeam = Field(default_factory=MatchTeam)
    away_team: MatchTeam = Field(default_factory=MatchTeam)
    score: Score = Field(default_factory=Score)
    competition: Optional[CompetitionRef] = None

    @model_validator(mode="after")
    def _finished_has_score(self) -> "Match":
        if self.status == FINISHED:
            full_time = self.score.full_time
            if full_time.home is None or full_time.away is None:
                raise ValueError(f"finished match {self.id} has no full-time score")
        return self

    @property
    def is_finished(self) -> bool:
        return self.status == FINISHED

    @property
    def date(self) -> str:
        """Calendar date part of utc_date (YYYY-MM-DD)."""
        return self.utc_date.split("T")[0]

    @property
    def competition_name(self) -> str:
        return self.competition.name if self.competition else ""


class MatchesResponse(ApiModel):
    matches: List[Match] = Field(default_factory=list)


# =============================================================================
# Competitions, Standings & Scorers
# =============================================================================

class Competition(ApiModel):
    id: int = Field(description="Competition identifier")
    name: str = Field(description="Competition name")
    code: Optional[str] = Field(None, description="Short code (e.g., 'PL', 'CL')")
    type: Optional[str] = Field(None, description="LEAGUE, CUP, ...")


class CompetitionsResponse(ApiModel):
    competitions: List[Competition] = Field(default_factory=list)


class StandingTeam(ApiModel):
    id: int
    name: str
    short_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.short_name or self.name


class Standing(ApiModel):
    """A team's row in a league table."""

    position: int = Field(ge=1, description="League position (1 = first place)")
    team: StandingTeam
    played_games: int = Field(description="Games played")
    form: Optional[str] = Field(None, description="Recent results as reported by the API")
    won: int
    draw: int
    lost: int
    points: int
    goals_for: int
    goals_against: int
    goal_difference: int


class StandingsTable(ApiModel):
    stage: Optional[str] = None
    type: Optional[str] = Field(None, description="TOTAL, HOME or AWAY")
    group: Optional[str] = None
    table: List[Standing] = Field(default_factory=list)


class StandingsResponse(ApiModel):
    competition: Optional[CompetitionRef] = None
    standings: List[StandingsTable] = Field(default_factory=list)

    def main_table(self) -> List[Standing]:
        """Rows of the overall table; falls back to the first table listed."""
        for table in self.standings:
            if table.type == "TOTAL":
                return table.table
        return self.standings[0].table if self.standings else []


class ScorerPlayer(ApiModel):
    id: int
    name: str


class ScorerTeam(ApiModel):
    id: int
    name: str
    short_name: Optional[str] = None


class Scorer(ApiModel):
    player: ScorerPlayer
    team: ScorerTeam
    played_matches: Optional[int] = None
    goals: int = Field(ge=0)
    assists: Optional[int] = None
    penalties: Optional[int] = None


class ScorersResponse(ApiModel):
    competition: Optional[CompetitionRef] = None
    scorers: List[Scorer] = Field(default_factory=list)
