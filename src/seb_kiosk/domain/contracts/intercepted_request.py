"""Protocol for an outbound request held by the network layer."""

from typing import Protocol


class InterceptedRequestProtocol(Protocol):
    """An outbound request that has not been dispatched yet."""

    @property
    def url(self) -> str:
        """Full destination URL."""
        ...

    @property
    def host(self) -> str:
        """Host component of the destination URL, without port."""
        ...

    def block(self) -> None:
        """Stop the request; no bytes are sent."""
        ...

    def set_header(self, name: str, value: str) -> None:
        """Set an HTTP header on the outgoing request.

        Args:
            name: Header name.
            value: Header value.
        """
        ...
