"""Page URL and title question."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Literal

from webplay.abilities.browse_the_web import BrowseTheWeb
from webplay.questions import Question
from webscope.exceptions import InvalidSpec

if TYPE_CHECKING:
    from webplay.actor import Actor


class Page(Question):
    """Check the URL or title of the actor's page.

    Strings must match exactly; patterns are searched.
    """

    def __init__(self, positive: bool) -> None:
        self.positive = positive
        self.mode: Literal["url", "title"] | None = None
        self.expected: str | re.Pattern = ""
        self.timeout_ms: int | None = None

    @classmethod
    def to_have(cls) -> Page:
        return cls(True)

    @classmethod
    def not_to_have(cls) -> Page:
        return cls(False)

    def url(self, expected: str | re.Pattern, timeout_ms: int | None = None) -> Page:
        self.mode, self.expected, self.timeout_ms = "url", expected, timeout_ms
        return self

    def title(self, expected: str | re.Pattern, timeout_ms: int | None = None) -> Page:
        self.mode, self.expected, self.timeout_ms = "title", expected, timeout_ms
        return self

    async def answered_by(self, actor: Actor) -> bool:
        ability = BrowseTheWeb.of(actor)
        mode = "has" if self.positive else "has_not"
        if self.mode == "url":
            return await ability.check_page_url(mode, self.expected, self.timeout_ms)
        if self.mode == "title":
            return await ability.check_page_title(mode, self.expected, self.timeout_ms)
        raise InvalidSpec("Page question has no check mode; call url() or title()")
