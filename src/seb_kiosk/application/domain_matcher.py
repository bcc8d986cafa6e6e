"""Allow-list host matching shared by the request and navigation gates.

A host is allowed when it equals an allow-list entry or is a subdomain of
one ("cdn.example.com" under "example.com"). The relation is one-way: an
entry for a subdomain never admits its parent.

No case folding, IDN normalization or port stripping happens here; callers
pass the bare host component exactly as the engine reports it.
"""

from collections.abc import Iterable, Sequence


def is_allowed(host: str, allow_list: Iterable[str]) -> bool:
    """Return True if ``host`` is an allow-list entry or a subdomain of one."""
    for entry in allow_list:
        if host == entry or host.endswith("." + entry):
            return True
    return False


class HostFilter:
    """Host-filter capability bound to one allow-list.

    Both gates hold the same kind of filter rather than sharing a base class,
    so request-level and navigation-level enforcement stay independent.
    """

    def __init__(self, allow_list: Sequence[str]) -> None:
        self._allow_list = tuple(allow_list)

    @property
    def allow_list(self) -> tuple[str, ...]:
        return self._allow_list

    def allows(self, host: str) -> bool:
        return is_allowed(host, self._allow_list)
