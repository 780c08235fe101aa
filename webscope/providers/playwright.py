"""Playwright-backed scope provider."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from webscope.models import TextMatcher
from webscope.scope import ScopeProvider
from webscope.text import normalize_text

if TYPE_CHECKING:
    from playwright.async_api import Locator, Page

    from webscope.handle import Handle

# Node checks run inside a polling loop, so they must not block on Playwright's
# own actionability waits for long.
_NODE_TIMEOUT_MS = 1000

_SELECTED_VALUES_JS = """
el => (el.tagName === 'SELECT' && el.multiple)
    ? Array.from(el.selectedOptions).map(o => o.value)
    : null
"""


def native_text_filter(matcher: TextMatcher | None) -> re.Pattern | None:
    """Translate a text filter into Playwright's ``has_text`` argument.

    Playwright matches plain strings case-insensitively, so strings are
    turned into an escaped pattern to keep substring matching case-sensitive.
    """
    if matcher is None:
        return None
    if isinstance(matcher, re.Pattern):
        return matcher
    return re.compile(re.escape(normalize_text(matcher)))


class PlaywrightScope(ScopeProvider):
    """Resolve handles against a Playwright page.

    Text filters here run through Playwright's native ``has_text``, which
    matches the element's ``textContent`` and so also sees hidden text. The
    base :meth:`ScopeProvider.materialize` filters on :meth:`text_of`
    (``innerText``), which only covers rendered text. State checks such as
    ``has-text`` still compare ``innerText``.
    """

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def root(self) -> Page:
        return self._page

    def to_locator(self, handle: Handle) -> Locator:
        """Compile a handle into one chained Playwright locator (no I/O)."""
        locator: Any = self._page
        for link in handle.links():
            text = native_text_filter(link.text_filter)
            if text is None:
                locator = locator.locator(link.query)
            else:
                locator = locator.locator(link.query, has_text=text)
        return locator

    async def materialize(self, handle: Handle) -> list[Locator]:
        return await self.to_locator(handle).all()

    async def query(self, scope: Any, query: str) -> list[Locator]:
        return await scope.locator(query).all()

    async def text_of(self, node: Locator) -> str:
        return await node.inner_text(timeout=_NODE_TIMEOUT_MS)

    async def is_visible(self, node: Locator) -> bool:
        return await node.is_visible()

    async def is_enabled(self, node: Locator) -> bool:
        return await node.is_enabled(timeout=_NODE_TIMEOUT_MS)

    async def is_editable(self, node: Locator) -> bool:
        return await node.is_editable(timeout=_NODE_TIMEOUT_MS)

    async def value_of(self, node: Locator) -> str:
        return await node.input_value(timeout=_NODE_TIMEOUT_MS)

    async def values_of(self, node: Locator) -> list[str] | None:
        return await node.evaluate(_SELECTED_VALUES_JS)
