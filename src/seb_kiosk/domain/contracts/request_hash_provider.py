"""Protocol for the values carried by the integrity headers."""

from typing import Protocol


class RequestHashProviderProtocol(Protocol):
    """Supplies the request-integrity hash and the config key."""

    def request_hash(self, url: str) -> str:
        """Compute the integrity hash for a request.

        Args:
            url: Destination URL of the request.

        Returns:
            Header value for the request hash.
        """
        ...

    def config_key(self) -> str:
        """Return the config-identifier header value."""
        ...
