"""Navigation request and decision domain models."""

from pydantic import BaseModel, ConfigDict


class NavigationRequest(BaseModel):
    """A page transition as reported by the browsing engine."""

    model_config = ConfigDict(frozen=True)

    url: str
    host: str
    is_main_frame: bool = True


class NavigationDecision(BaseModel):
    """Outcome of a navigation check.

    When ``accepted`` is False, ``block_page_html`` holds the page to show in
    place of the refused destination.
    """

    model_config = ConfigDict(frozen=True)

    accepted: bool
    block_page_html: str | None = None
