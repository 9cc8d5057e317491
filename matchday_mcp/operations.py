"""
Tool orchestrators.

Each coroutine takes a gateway plus primitive arguments and returns a
``ToolOutcome``. The sequence is always: resolve the team (when the tool is
team based), fetch the primary payload, format it. Gateway failures are
caught here and mapped onto the outcome taxonomy; nothing is raised to the
caller.
"""

import logging
import re
from datetime import date, datetime, timezone
from typing import Optional

from .config import (
    DEFAULT_FORM_LIMIT,
    DEFAULT_RESULTS_LIMIT,
    DEFAULT_SCORERS_LIMIT,
    MAX_DATE_MATCHES,
    MAX_FORM_MATCHES,
    MAX_RESULTS_LIMIT,
    MAX_SCORERS_LIMIT,
    ROSTER_LIMIT,
    SUGGESTED_CODES,
)
from .formatters import (
    format_competitions,
    format_live_matches,
    format_matches_by_date,
    format_next_match,
    format_standings,
    format_team_form,
    format_team_info,
    format_team_results,
    format_team_squad,
    format_top_scorers,
    summarize_form,
)
from .gateway import FootballDataClient, GatewayError
from .outcomes import ToolOutcome
from .resolver import find_team_in_list
from .schemas import Team

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
INVALID_DATE_FORMAT = "Error: Dates must be in YYYY-MM-DD format (e.g., 2024-01-15)"

SCHEDULED = "SCHEDULED"
LIVE = "LIVE"
FINISHED = "FINISHED"


# =============================================================================
# Helpers
# =============================================================================

def clamp_limit(limit: int, upper: int, lower: int = 1) -> int:
    return max(lower, min(upper, limit))


def _team_not_found(team_name: str) -> ToolOutcome:
    return ToolOutcome.not_found(f"Team '{team_name}' not found")


def _competition_not_found(code: str) -> ToolOutcome:
    return ToolOutcome.not_found(
        f"Competition '{code}' not found. Try: {', '.join(SUGGESTED_CODES)}"
    )


def _inconsistent_payload(error: ValueError, subject: str) -> ToolOutcome:
    logger.warning("Inconsistent %s payload: %s", subject, error)
    return ToolOutcome.unknown(subject)


async def _resolve_team(gateway: FootballDataClient, team_name: str) -> Optional[Team]:
    teams = await gateway.list_teams(limit=ROSTER_LIMIT)
    team = find_team_in_list(teams, team_name)
    if team is None:
        logger.info("No team matching %r among %d teams", team_name, len(teams))
    else:
        logger.debug("Resolved %r to %s (id=%s)", team_name, team.name, team.id)
    return team


def validate_date_range(date_from: str, date_to: str) -> Optional[ToolOutcome]:
    """Return a validation outcome when the range is unusable, else None."""
    if not (_DATE_PATTERN.fullmatch(date_from) and _DATE_PATTERN.fullmatch(date_to)):
        return ToolOutcome.invalid(INVALID_DATE_FORMAT)
    try:
        start = date.fromisoformat(date_from)
        end = date.fromisoformat(date_to)
    except ValueError as e:
        return ToolOutcome.invalid(f"Error: Invalid date: {e}")
    if start > end:
        return ToolOutcome.invalid(
            f"Error: dateFrom ({date_from}) must not be after dateTo ({date_to})"
        )
    return None


# =============================================================================
# Matches
# =============================================================================

async def team_next_match(gateway: FootballDataClient, team_name: str) -> ToolOutcome:
    """Next scheduled match for a team."""
    try:
        team = await _resolve_team(gateway, team_name)
        if team is None:
            return _team_not_found(team_name)
        matches = await gateway.get_team_matches(team.id, status=SCHEDULED, limit=1)
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "match data")

    if not matches:
        return ToolOutcome.not_found(f"No upcoming matches found for team '{team.name}'")
    return ToolOutcome.success(format_next_match(team, matches[0]))


async def live_matches(gateway: FootballDataClient) -> ToolOutcome:
    try:
        matches = await gateway.get_matches(status=LIVE)
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "live matches")

    text = format_live_matches(matches)
    return ToolOutcome.success(text) if matches else ToolOutcome.not_found(text)


async def matches_by_date(gateway: FootballDataClient, date_from: str, date_to: str) -> ToolOutcome:
    """Matches between two dates (inclusive), grouped by day."""
    invalid = validate_date_range(date_from, date_to)
    if invalid is not None:
        return invalid

    try:
        matches = await gateway.get_matches(
            date_from=date_from, date_to=date_to, limit=MAX_DATE_MATCHES
        )
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "matches")

    text = format_matches_by_date(matches, date_from, date_to)
    return ToolOutcome.success(text) if matches else ToolOutcome.not_found(text)


# =============================================================================
# Teams
# =============================================================================

async def team_results(
    gateway: FootballDataClient,
    team_name: str,
    limit: int = DEFAULT_RESULTS_LIMIT,
) -> ToolOutcome:
    """Most recent finished matches for a team, each marked W/D/L."""
    limit = clamp_limit(limit, MAX_RESULTS_LIMIT)
    try:
        team = await _resolve_team(gateway, team_name)
        if team is None:
            return _team_not_found(team_name)
        matches = await gateway.get_team_matches(team.id, status=FINISHED, limit=limit)
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "match results")

    try:
        text = format_team_results(team, matches)
    except ValueError as e:
        return _inconsistent_payload(e, "match results")
    return ToolOutcome.success(text) if matches else ToolOutcome.not_found(text)


async def team_form(
    gateway: FootballDataClient,
    team_name: str,
    limit: int = DEFAULT_FORM_LIMIT,
) -> ToolOutcome:
    """Form string, record, points and win rate over recent matches."""
    limit = clamp_limit(limit, MAX_FORM_MATCHES)
    try:
        team = await _resolve_team(gateway, team_name)
        if team is None:
            return _team_not_found(team_name)
        matches = await gateway.get_team_matches(team.id, status=FINISHED, limit=limit)
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "team form")

    try:
        summary = summarize_form(matches, team.id)
    except ValueError as e:
        return _inconsistent_payload(e, "team form")

    text = format_team_form(team, summary)
    if not summary.played:
        return ToolOutcome.not_found(text)
    logger.debug(
        "%s form %s (%d/%d pts)",
        team.name,
        summary.form_string,
        summary.points,
        summary.max_points,
    )
    return ToolOutcome.success(text)


async def team_squad(gateway: FootballDataClient, team_name: str) -> ToolOutcome:
    try:
        team = await _resolve_team(gateway, team_name)
        if team is None:
            return _team_not_found(team_name)
        detail = await gateway.get_team(team.id)
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "team squad")

    current_year = datetime.now(timezone.utc).year
    text = format_team_squad(detail, detail.squad, current_year)
    return ToolOutcome.success(text) if detail.squad else ToolOutcome.not_found(text)


async def team_info(gateway: FootballDataClient, team_name: str) -> ToolOutcome:
    try:
        team = await _resolve_team(gateway, team_name)
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "team information")

    if team is None:
        return _team_not_found(team_name)
    return ToolOutcome.success(format_team_info(team))


# =============================================================================
# Competitions
# =============================================================================

async def standings(gateway: FootballDataClient, competition_code: str) -> ToolOutcome:
    """League table for a competition code such as PL or BL1."""
    code = competition_code.strip().upper()
    try:
        response = await gateway.get_standings(code)
    except GatewayError as e:
        if e.status == 404:
            return _competition_not_found(code)
        return ToolOutcome.from_gateway_error(e, "standings")

    if not response.standings:
        return ToolOutcome.not_found(f"No standings found for competition '{code}'")
    table = response.main_table()
    text = format_standings(code, table)
    return ToolOutcome.success(text) if table else ToolOutcome.not_found(text)


async def top_scorers(
    gateway: FootballDataClient,
    competition_code: str,
    limit: int = DEFAULT_SCORERS_LIMIT,
) -> ToolOutcome:
    code = competition_code.strip().upper()
    limit = clamp_limit(limit, MAX_SCORERS_LIMIT)
    try:
        scorers = await gateway.get_scorers(code, limit=limit)
    except GatewayError as e:
        if e.status == 404:
            return _competition_not_found(code)
        return ToolOutcome.from_gateway_error(e, "top scorers")

    text = format_top_scorers(code, scorers)
    return ToolOutcome.success(text) if scorers else ToolOutcome.not_found(text)


async def competitions(gateway: FootballDataClient) -> ToolOutcome:
    try:
        items = await gateway.list_competitions()
    except GatewayError as e:
        return ToolOutcome.from_gateway_error(e, "competitions")

    text = format_competitions(items)
    return ToolOutcome.success(text) if items else ToolOutcome.not_found(text)
