"""
Configuration for the MatchDay MCP server.

Settings come from the environment and are read when a gateway is built,
so every tool call sees the current values:

    FOOTBALL_API_KEY        football-data.org token (required)
    FOOTBALL_API_BASE_URL   API root (default: https://api.football-data.org/v4)
    FOOTBALL_API_TIMEOUT    request timeout in seconds (default: 10)
    MATCHDAY_LOG_LEVEL      logging level for the server (default: INFO)
"""

import os
from typing import NamedTuple

SERVER_NAME = "matchday"

DEFAULT_BASE_URL = "https://api.football-data.org/v4"
DEFAULT_TIMEOUT = 10

# API limits
ROSTER_LIMIT = 100
MAX_RESULTS_LIMIT = 20
MAX_SCORERS_LIMIT = 20
MAX_FORM_MATCHES = 10
MAX_DATE_MATCHES = 50

DEFAULT_RESULTS_LIMIT = 5
DEFAULT_FORM_LIMIT = 5
DEFAULT_SCORERS_LIMIT = 10

# Popular competition codes
COMPETITIONS = {
    "PL": "Premier League",
    "BL1": "Bundesliga",
    "SA": "Serie A",
    "FL1": "Ligue 1",
    "PD": "La Liga",
    "CL": "Champions League",
    "EL": "Europa League",
    "DED": "Eredivisie",
    "EC": "European Championship",
    "WC": "World Cup",
}

# Codes suggested when a competition lookup fails
SUGGESTED_CODES = ("PL", "BL1", "SA", "FL1", "CL", "EL")


class Settings(NamedTuple):
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment."""
    timeout_raw = os.environ.get("FOOTBALL_API_TIMEOUT", "").strip()
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        timeout = DEFAULT_TIMEOUT
    return Settings(
        api_key=os.environ.get("FOOTBALL_API_KEY", "").strip(),
        base_url=os.environ.get("FOOTBALL_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        timeout=timeout,
        log_level=os.environ.get("MATCHDAY_LOG_LEVEL", "INFO").upper(),
    )
