"""
Tool outcomes.

Orchestrators return a ``ToolOutcome``: a kind from the error taxonomy plus
the text shown to the client. The server flattens it into a
``CallToolResult`` at the MCP boundary.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .gateway import GatewayError

logger = logging.getLogger(__name__)

AUTH_ERROR_TEXT = "Authentication error: Please check your API key"
RATE_LIMITED_TEXT = "Rate limit exceeded: Please try again later"
UPSTREAM_ERROR_TEXT = "Server error: Football API is temporarily unavailable"


class OutcomeKind(str, Enum):
    OK = "ok"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    AUTH_ERROR = "auth_error"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_ERROR = "upstream_error"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class ToolOutcome:
    kind: OutcomeKind
    text: str

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @property
    def is_error(self) -> bool:
        """True for failures the client should flag; not-found is a normal answer."""
        return self.kind not in (OutcomeKind.OK, OutcomeKind.NOT_FOUND)

    @classmethod
    def success(cls, text: str) -> "ToolOutcome":
        return cls(OutcomeKind.OK, text)

    @classmethod
    def invalid(cls, text: str) -> "ToolOutcome":
        return cls(OutcomeKind.VALIDATION_ERROR, text)

    @classmethod
    def not_found(cls, text: str) -> "ToolOutcome":
        return cls(OutcomeKind.NOT_FOUND, text)

    @classmethod
    def unknown(cls, subject: str) -> "ToolOutcome":
        return cls(OutcomeKind.UNKNOWN_ERROR, f"Error fetching {subject} from API")

    @classmethod
    def from_gateway_error(cls, error: GatewayError, subject: str) -> "ToolOutcome":
        """Map a gateway failure onto the error taxonomy.

        ``subject`` names what was being fetched (e.g. "match data") and is
        only used for the unclassified message.
        """
        status = error.status
        logger.warning("API request failed (%s, status=%s): %s", error.path, status, error)
        if status in (401, 403):
            return cls(OutcomeKind.AUTH_ERROR, AUTH_ERROR_TEXT)
        if status == 429:
            return cls(OutcomeKind.RATE_LIMITED, RATE_LIMITED_TEXT)
        if status is not None and status >= 500:
            return cls(OutcomeKind.UPSTREAM_ERROR, UPSTREAM_ERROR_TEXT)
        return cls.unknown(subject)
