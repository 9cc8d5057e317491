"""
Text renderers for every report the server returns.

All functions are pure: they take validated models (plus any derived
aggregates) and return a string. Tables use fixed-width columns, source
ordering is preserved unless stated otherwise, and dates are rendered in
UTC so the same payload always produces the same text.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from .classifier import MatchResult, classify_result
from .schemas import Competition, Match, Player, Scorer, Standing, Team

NO_LIVE_MATCHES = "No live matches currently playing"
POSITION_ORDER = ("Goalkeeper", "Defence", "Midfield", "Offence")
OTHER_POSITION = "Other"
MISSING_SCORE = "-"
DATE_RULE = "─" * 50


# =============================================================================
# Helpers
# =============================================================================

def _parse_utc(utc_date: str) -> datetime:
    return datetime.fromisoformat(utc_date.replace("Z", "+00:00"))


def format_match_date(utc_date: str) -> str:
    """Short date like 1/20/2024."""
    dt = _parse_utc(utc_date)
    return f"{dt.month}/{dt.day}/{dt.year}"


def format_long_date(date: str) -> str:
    """Heading date like Saturday, January 20, 2024."""
    dt = datetime.strptime(date, "%Y-%m-%d")
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year}"


def format_kickoff_time(utc_date: str) -> str:
    return _parse_utc(utc_date).strftime("%I:%M %p")


def format_goal_difference(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def _or_dash(value: Optional[int]) -> str:
    return MISSING_SCORE if value is None else str(value)


# =============================================================================
# Matches
# =============================================================================

def format_next_match(team: Team, match: Match) -> str:
    line = (
        f"Next match for {team.name}: {match.home_team.display_name} vs "
        f"{match.away_team.display_name} on {format_match_date(match.utc_date)}"
    )
    if match.competition_name:
        line += f" ({match.competition_name})"
    return line


def format_live_matches(matches: Sequence[Match]) -> str:
    if not matches:
        return NO_LIVE_MATCHES

    blocks = []
    for index, match in enumerate(matches, start=1):
        full_time = match.score.full_time
        half_time = match.score.half_time
        home_score = next((s for s in (full_time.home, half_time.home) if s is not None), 0)
        away_score = next((s for s in (full_time.away, half_time.away) if s is not None), 0)
        minute = match.minute if match.minute not in (None, "") else "HT"
        blocks.append(
            f"{index}. {match.home_team.display_name} {home_score}-{away_score} "
            f"{match.away_team.display_name}\n"
            f"   {match.competition_name} - {minute}'\n"
            f"   Status: {match.status}"
        )
    return "Live Matches:\n\n" + "\n\n".join(blocks)


def group_matches_by_date(matches: Sequence[Match]) -> List[Tuple[str, List[Match]]]:
    """Group by calendar date, dates ascending, source order within a date."""
    groups: Dict[str, List[Match]] = {}
    for match in matches:
        groups.setdefault(match.date, []).append(match)
    return sorted(groups.items())


def format_matches_by_date(matches: Sequence[Match], date_from: str, date_to: str) -> str:
    if not matches:
        return f"No matches found between {date_from} and {date_to}"

    lines = [f"Matches from {date_from} to {date_to}:", ""]
    for date, day_matches in group_matches_by_date(matches):
        lines.append(f"📅 {format_long_date(date)}")
        lines.append(DATE_RULE)
        for match in day_matches:
            full_time = match.score.full_time
            lines.append(
                f"{format_kickoff_time(match.utc_date)} | "
                f"{match.home_team.display_short_name} {_or_dash(full_time.home)}-"
                f"{_or_dash(full_time.away)} {match.away_team.display_short_name}"
            )
            lines.append(f"     {match.competition_name} - {match.status}")
            lines.append("")
    return "\n".join(lines).strip()


def _result_line(index: int, match: Match, result: MatchResult, short_names: bool) -> str:
    if short_names:
        home, away = match.home_team.display_short_name, match.away_team.display_short_name
    else:
        home, away = match.home_team.display_name, match.away_team.display_name
    full_time = match.score.full_time
    return (
        f"{index}. {home} {_or_dash(full_time.home)}-{_or_dash(full_time.away)} {away} "
        f"({result.value}) - {format_match_date(match.utc_date)}"
    )


def format_team_results(team: Team, matches: Sequence[Match]) -> str:
    if not matches:
        return f"No recent results found for team '{team.name}'"

    lines = [f"Recent results for {team.name}:", ""]
    for index, match in enumerate(matches, start=1):
        lines.append(_result_line(index, match, classify_result(match, team.id), short_names=False))
    return "\n".join(lines)


# =============================================================================
# Form
# =============================================================================

@dataclass(frozen=True)
class FormSummary:
    """Results of a team's recent matches, oldest first."""

    matches: Tuple[Match, ...]
    results: Tuple[MatchResult, ...]

    @property
    def played(self) -> int:
        return len(self.results)

    @property
    def wins(self) -> int:
        return self.results.count(MatchResult.WIN)

    @property
    def draws(self) -> int:
        return self.results.count(MatchResult.DRAW)

    @property
    def losses(self) -> int:
        return self.results.count(MatchResult.LOSS)

    @property
    def points(self) -> int:
        return self.wins * 3 + self.draws

    @property
    def max_points(self) -> int:
        return self.played * 3

    @property
    def win_rate(self) -> str:
        if not self.played:
            return "0.0"
        return f"{self.wins / self.played * 100:.1f}"

    @property
    def form_string(self) -> str:
        return "".join(result.value for result in self.results)


def summarize_form(matches: Sequence[Match], team_id: int) -> FormSummary:
    """Aggregate newest-first finished matches into a chronological summary."""
    chronological = tuple(reversed(matches))
    results = tuple(classify_result(match, team_id) for match in chronological)
    return FormSummary(matches=chronological, results=results)


def format_team_form(team: Team, summary: FormSummary) -> str:
    if not summary.played:
        return f"No recent matches found for team '{team.name}'"

    lines = [
        f"Team Form for {team.name} (Last {summary.played} matches):",
        "",
        f"Form: {summary.form_string}",
        f"Wins: {summary.wins} | Draws: {summary.draws} | Losses: {summary.losses}",
        f"Points: {summary.points}/{summary.max_points}",
        f"Win Rate: {summary.win_rate}%",
        "",
        "Recent Results:",
    ]
    for index, (match, result) in enumerate(zip(summary.matches, summary.results), start=1):
        lines.append(_result_line(index, match, result, short_names=True))
    return "\n".join(lines)


# =============================================================================
# Teams
# =============================================================================

def _player_line(player: Player, current_year: int) -> str:
    shirt = f" #{player.shirt_number}" if player.shirt_number else ""
    birth_year = player.birth_year
    age = f"{current_year - birth_year} years old" if birth_year else "age unknown"
    nationality = player.nationality or "Unknown"
    return f"  • {player.name}{shirt} ({nationality}, {age})"


def format_team_squad(team: Team, squad: Sequence[Player], current_year: int) -> str:
    if not squad:
        return f"No squad information available for team '{team.name}'"

    by_position: Dict[str, List[Player]] = {}
    for player in squad:
        by_position.setdefault(player.position or OTHER_POSITION, []).append(player)

    ordered = [p for p in POSITION_ORDER if p in by_position]
    ordered += [p for p in by_position if p not in POSITION_ORDER]

    lines = [f"Squad for {team.name}:", ""]
    for position in ordered:
        lines.append(f"{position}s:")
        lines.extend(_player_line(player, current_year) for player in by_position[position])
        lines.append("")
    return "\n".join(lines).strip()


def format_team_info(team: Team) -> str:
    return "\n".join([
        f"Team Information for {team.name}:",
        f"- Full Name: {team.name}",
        f"- Short Name: {team.short_name or team.name}",
        f"- Founded: {team.founded or 'Unknown'}",
        f"- Colors: {team.club_colors or 'Unknown'}",
        f"- Venue: {team.venue or 'Unknown'}",
        f"- Website: {team.website or 'Not available'}",
    ])


# =============================================================================
# Competitions
# =============================================================================

_STANDINGS_HEADER = (
    f"{'Pos':>3} | {'Team':<24} | {'P':>2} | {'W':>2} | {'D':>2} | {'L':>2} | "
    f"{'GF':>3} | {'GA':>3} | {'GD':>4} | {'Pts':>3} | Form"
)
_SCORERS_HEADER = (
    f"{'Pos':>3} | {'Player':<26} | {'Team':<23} | {'Goals':>5} | {'Assists':>7} | {'Pens':>4}"
)


def _rule(header: str) -> str:
    return "|".join("-" * len(column) for column in header.split("|"))


def format_standings(competition_code: str, table: Sequence[Standing]) -> str:
    code = competition_code.upper()
    if not table:
        return f"No table data found for competition '{code}'"

    lines = [f"League Table for {code}:", "", _STANDINGS_HEADER, _rule(_STANDINGS_HEADER)]
    for row in table:
        line = (
            f"{row.position:>3} | {row.team.display_name:<24} | {row.played_games:>2} | "
            f"{row.won:>2} | {row.draw:>2} | {row.lost:>2} | {row.goals_for:>3} | "
            f"{row.goals_against:>3} | {format_goal_difference(row.goal_difference):>4} | "
            f"{row.points:>3} | {row.form or ''}"
        )
        lines.append(line.rstrip())
    return "\n".join(lines)


def format_top_scorers(competition_code: str, scorers: Sequence[Scorer]) -> str:
    code = competition_code.upper()
    if not scorers:
        return f"No scorer data found for competition '{code}'"

    lines = [f"Top Scorers in {code}:", "", _SCORERS_HEADER, _rule(_SCORERS_HEADER)]
    for index, scorer in enumerate(scorers, start=1):
        lines.append(
            f"{index:>3} | {scorer.player.name:<26} | {scorer.team.name:<23} | "
            f"{scorer.goals:>5} | {_or_dash(scorer.assists):>7} | "
            f"{_or_dash(scorer.penalties):>4}"
        )
    return "\n".join(lines)


def format_competitions(competitions: Sequence[Competition]) -> str:
    if not competitions:
        return "No competitions found"

    blocks = []
    for index, comp in enumerate(competitions, start=1):
        code = f" ({comp.code})" if comp.code else ""
        blocks.append(
            f"{index}. {comp.name}{code}\n"
            f"   Type: {comp.type or 'Unknown'}\n"
            f"   ID: {comp.id}"
        )
    return "Available Competitions:\n\n" + "\n\n".join(blocks)
