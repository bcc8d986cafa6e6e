"""Default extension points for request integrity and idle keep-alive.

Both are placeholders: a real deployment computes a cryptographic hash over
the request and session material, and performs an actual anti-idle action.
They are kept as separate, replaceable objects so that the gap stays visible.
"""

import logging

logger = logging.getLogger(__name__)

PLACEHOLDER_REQUEST_HASH = "placeholder-stub-request-hash"
PLACEHOLDER_CONFIG_KEY = "stub-value"


class PlaceholderRequestHashProvider:
    """Returns fixed stub values for the integrity headers."""

    def request_hash(self, url: str) -> str:  # noqa: ARG002
        return PLACEHOLDER_REQUEST_HASH

    def config_key(self) -> str:
        return PLACEHOLDER_CONFIG_KEY


class LoggingKeepAlive:
    """Keep-alive action that only records the tick."""

    def __init__(self) -> None:
        self.ticks = 0

    def __call__(self) -> None:
        self.ticks += 1
        logger.debug("Keep-alive ping to prevent idle")
