#!/usr/bin/env python3
"""
MatchDay MCP Server

Football statistics from football-data.org exposed as MCP tools. Every tool
returns a plain-text report.

Setup:
    1. Get a free API key from https://www.football-data.org/
    2. Set environment variable: FOOTBALL_API_KEY=your_key

Usage:
    matchday-mcp            # or: python -m matchday_mcp.server

Then register in your MCP client config:
{
  "mcpServers": {
    "matchday": {
      "command": "matchday-mcp",
      "env": {"FOOTBALL_API_KEY": "your_key"}
    }
  }
}
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import operations
from .config import (
    COMPETITIONS,
    DEFAULT_FORM_LIMIT,
    DEFAULT_RESULTS_LIMIT,
    DEFAULT_SCORERS_LIMIT,
    MAX_FORM_MATCHES,
    MAX_RESULTS_LIMIT,
    MAX_SCORERS_LIMIT,
    SERVER_NAME,
    load_settings,
)
from .gateway import FootballDataClient
from .outcomes import ToolOutcome

MIN_NAME_LENGTH = 2
TEAM_NAME_ERROR = "Error: Team name must be at least 2 characters long"
COMPETITION_CODE_ERROR = "Error: Competition code must be at least 2 characters long"
DATE_ARGUMENT_ERROR = "Error: date_from and date_to are required (YYYY-MM-DD)"

logger = logging.getLogger(SERVER_NAME)

app = Server(SERVER_NAME)


# =============================================================================
# Tool Definitions
# =============================================================================

_COMPETITION_HINT = ", ".join(f"{code} ({name})" for code, name in COMPETITIONS.items())

_TEAM_NAME_PROPERTY = {
    "type": "string",
    "description": "Team name or part of it, at least 2 characters (e.g., 'Arsenal', 'Bayern')",
}

_COMPETITION_PROPERTY = {
    "type": "string",
    "description": f"Competition code. Common options: {_COMPETITION_HINT}",
}


def _limit_property(default: int, maximum: int, what: str) -> Dict[str, Any]:
    # Out-of-range values are clamped by the server, not rejected
    return {
        "type": "integer",
        "default": default,
        "description": f"Number of {what} (1-{maximum}, default {default})",
    }


def _object_schema(properties: Dict[str, Any], required: List[str]) -> Dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(
            name="get_team_next_match",
            description="Get the next scheduled match for a football team.",
            inputSchema=_object_schema({"team_name": _TEAM_NAME_PROPERTY}, ["team_name"]),
        ),
        Tool(
            name="get_live_matches",
            description="Get currently live football matches with scores, minute and status.",
            inputSchema=_object_schema({}, []),
        ),
        Tool(
            name="get_matches_by_date",
            description="Get football matches and results between two dates, grouped by day.",
            inputSchema=_object_schema(
                {
                    "date_from": {
                        "type": "string",
                        "description": "Start date in YYYY-MM-DD format",
                    },
                    "date_to": {
                        "type": "string",
                        "description": "End date in YYYY-MM-DD format",
                    },
                },
                ["date_from", "date_to"],
            ),
        ),
        Tool(
            name="get_team_results",
            description="Get recent match results for a football team, each marked W/D/L.",
            inputSchema=_object_schema(
                {
                    "team_name": _TEAM_NAME_PROPERTY,
                    "limit": _limit_property(DEFAULT_RESULTS_LIMIT, MAX_RESULTS_LIMIT, "results"),
                },
                ["team_name"],
            ),
        ),
        Tool(
            name="get_team_form",
            description="Get a team's recent form: W/D/L string, record, points and win rate.",
            inputSchema=_object_schema(
                {
                    "team_name": _TEAM_NAME_PROPERTY,
                    "limit": _limit_property(DEFAULT_FORM_LIMIT, MAX_FORM_MATCHES, "matches to analyse"),
                },
                ["team_name"],
            ),
        ),
        Tool(
            name="get_team_squad",
            description="Get a team's squad grouped by position, with nationality and age.",
            inputSchema=_object_schema({"team_name": _TEAM_NAME_PROPERTY}, ["team_name"]),
        ),
        Tool(
            name="get_team_info",
            description="Get club information: full name, founding year, colours, venue and website.",
            inputSchema=_object_schema({"team_name": _TEAM_NAME_PROPERTY}, ["team_name"]),
        ),
        Tool(
            name="get_standings",
            description="Get the current league table for a competition.",
            inputSchema=_object_schema({"competition_code": _COMPETITION_PROPERTY}, ["competition_code"]),
        ),
        Tool(
            name="get_top_scorers",
            description="Get the top goal scorers in a competition.",
            inputSchema=_object_schema(
                {
                    "competition_code": _COMPETITION_PROPERTY,
                    "limit": _limit_property(DEFAULT_SCORERS_LIMIT, MAX_SCORERS_LIMIT, "scorers"),
                },
                ["competition_code"],
            ),
        ),
        Tool(
            name="list_competitions",
            description="List the competitions available to the configured API key.",
            inputSchema=_object_schema({}, []),
        ),
    ]


# =============================================================================
# Argument Validation
# =============================================================================

def _name_argument(arguments: Dict[str, Any], key: str) -> Optional[str]:
    value = arguments.get(key)
    if not isinstance(value, str) or len(value.strip()) < MIN_NAME_LENGTH:
        return None
    return value.strip()


def _limit_argument(arguments: Dict[str, Any], default: int) -> int:
    value = arguments.get("limit", default)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def _outcome_result(outcome: ToolOutcome) -> CallToolResult:
    return _text_result(outcome.text, is_error=outcome.is_error)


# =============================================================================
# Tool Dispatcher
# =============================================================================

async def dispatch(
    name: str,
    arguments: Dict[str, Any],
    gateway: FootballDataClient,
) -> CallToolResult:
    """Validate arguments and run the orchestrator behind tool ``name``."""
    if name in ("get_team_next_match", "get_team_results", "get_team_form",
                "get_team_squad", "get_team_info"):
        team_name = _name_argument(arguments, "team_name")
        if team_name is None:
            logger.warning("Invalid input: team_name=%r", arguments.get("team_name"))
            return _text_result(TEAM_NAME_ERROR, is_error=True)

        if name == "get_team_next_match":
            outcome = await operations.team_next_match(gateway, team_name)
        elif name == "get_team_results":
            limit = _limit_argument(arguments, DEFAULT_RESULTS_LIMIT)
            outcome = await operations.team_results(gateway, team_name, limit)
        elif name == "get_team_form":
            limit = _limit_argument(arguments, DEFAULT_FORM_LIMIT)
            outcome = await operations.team_form(gateway, team_name, limit)
        elif name == "get_team_squad":
            outcome = await operations.team_squad(gateway, team_name)
        else:
            outcome = await operations.team_info(gateway, team_name)
        return _outcome_result(outcome)

    if name in ("get_standings", "get_top_scorers"):
        code = _name_argument(arguments, "competition_code")
        if code is None:
            logger.warning("Invalid input: competition_code=%r", arguments.get("competition_code"))
            return _text_result(COMPETITION_CODE_ERROR, is_error=True)

        if name == "get_standings":
            outcome = await operations.standings(gateway, code)
        else:
            limit = _limit_argument(arguments, DEFAULT_SCORERS_LIMIT)
            outcome = await operations.top_scorers(gateway, code, limit)
        return _outcome_result(outcome)

    if name == "get_matches_by_date":
        date_from = arguments.get("date_from")
        date_to = arguments.get("date_to")
        if not isinstance(date_from, str) or not isinstance(date_to, str):
            return _text_result(DATE_ARGUMENT_ERROR, is_error=True)
        outcome = await operations.matches_by_date(gateway, date_from.strip(), date_to.strip())
        return _outcome_result(outcome)

    if name == "get_live_matches":
        return _outcome_result(await operations.live_matches(gateway))

    if name == "list_competitions":
        return _outcome_result(await operations.competitions(gateway))

    return _text_result(f"Unknown tool: {name}", is_error=True)


@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
    logger.info("Tool called: %s with args: %s", name, arguments)
    gateway = FootballDataClient.from_env()

    try:
        result = await dispatch(name, arguments or {}, gateway)
    except Exception as e:
        logger.exception("Tool %s failed", name)
        return _text_result(f"Error: {e}", is_error=True)

    logger.info("Tool %s finished (error=%s)", name, result.isError)
    return result


# =============================================================================
# Entry Point
# =============================================================================

async def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(name)s - %(message)s")

    if not settings.api_key:
        logger.error("FOOTBALL_API_KEY environment variable is required")
        sys.exit(1)

    logger.info("Starting %s MCP server (%s)...", SERVER_NAME, settings.base_url)
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options(),
        )


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
