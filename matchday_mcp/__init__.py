"""MatchDay MCP: football-data.org statistics exposed as MCP tools."""

__version__ = "1.0.0"
