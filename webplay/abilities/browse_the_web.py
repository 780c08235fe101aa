"""The ability to drive a browser page."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Literal

from webplay.abilities import Ability
from webscope.config import EngineConfig
from webscope.exceptions import InvalidSpec
from webscope.handle import Handle
from webscope.logger import get_logger
from webscope.models import ResolveOptions, StateKind
from webscope.providers.playwright import PlaywrightScope
from webscope.resolver import SelectorResolver
from webscope.scope import ScopeProvider
from webscope.text import equals_text
from webscope.waiter import poll_until

if TYPE_CHECKING:
    from playwright.async_api import Page, Response

log = get_logger(__name__)

Options = ResolveOptions | dict | None
StorageArea = Literal["localStorage", "sessionStorage"]

_GET_STORAGE_JS = """
([area, key]) => {
    const value = window[area].getItem(key);
    return value ? JSON.parse(value) : undefined;
}
"""
_SET_STORAGE_JS = "([area, key, value]) => window[area].setItem(key, JSON.stringify(value))"
_REMOVE_STORAGE_JS = "([area, key]) => window[area].removeItem(key)"

_VISIBILITY_MODES = {"visible": StateKind.VISIBLE, "hidden": StateKind.HIDDEN}
_ENABLED_MODES = {"enabled": StateKind.ENABLED, "disabled": StateKind.DISABLED}
_EDITABLE_MODES = {
    "editable": StateKind.EDITABLE,
    "not_editable": StateKind.NOT_EDITABLE,
}
_HAS_MODES = {"has": False, "has_not": True}


def _pick(modes: dict[str, Any], mode: str) -> Any:
    if mode not in modes:
        raise InvalidSpec(f"unknown mode {mode!r}, expected one of {sorted(modes)}")
    return modes[mode]


class BrowseTheWeb(Ability):
    """Drive a Playwright page, locating elements through the resolver.

    Interactions wait for their target to be visible unless the selector
    or options ask for another state.
    """

    def __init__(
        self,
        page: Page,
        scope: ScopeProvider | None = None,
        resolver: SelectorResolver | None = None,
    ) -> None:
        self._page = page
        self._scope = scope or PlaywrightScope(page)
        self._resolver = resolver or SelectorResolver()

    @classmethod
    def using(cls, page: Page, config: EngineConfig | None = None) -> BrowseTheWeb:
        """Create the ability for an already opened page."""
        return cls(page, resolver=SelectorResolver(config))

    def get_page(self) -> Page:
        return self._page

    @property
    def scope(self) -> ScopeProvider:
        return self._scope

    # --- Navigation ---

    async def goto(self, url: str) -> Response | None:
        log.debug("navigate", url=url)
        return await self._page.goto(url)

    async def wait_for_load_state(
        self, status: Literal["load", "domcontentloaded", "networkidle"] = "load"
    ) -> None:
        await self._page.wait_for_load_state(status)

    async def press(self, keys: str) -> None:
        """Press a key or a ``+`` separated combination on the keyboard."""
        await self._page.keyboard.press(keys)

    # --- Locating ---

    async def locate(
        self,
        selector: Any,
        options: Options = None,
        *,
        state: StateKind | None = None,
        expected: Any = None,
        negate: bool = False,
    ) -> Handle:
        """Build the handle for ``selector`` and wait for a state.

        ``state`` forces the state to wait for; otherwise the state from the
        selector/options is used, falling back to ``visible``.
        """
        handle = self._resolver.build(self._scope, selector, options)
        wanted = state or handle.state or StateKind.VISIBLE
        await self._resolver.wait_policy.wait(
            handle, wanted, expected, negate=negate
        )
        return handle

    async def _element(self, selector: Any, options: Options) -> tuple[Handle, Any]:
        handle = await self.locate(selector, options)
        node = await handle.element(strict=self._resolver.wait_policy.strict)
        return handle, node

    @staticmethod
    def _modifiers(handle: Handle) -> list[str] | None:
        if not handle.modifiers:
            return None
        return sorted(m.value for m in handle.modifiers)

    async def wait_for_selector(self, selector: Any, options: Options = None) -> Handle:
        return await self.locate(selector, options)

    # --- Interactions ---

    async def hover(self, selector: Any, options: Options = None) -> None:
        handle, node = await self._element(selector, options)
        await node.hover(modifiers=self._modifiers(handle))

    async def click(self, selector: Any, options: Options = None) -> None:
        handle, node = await self._element(selector, options)
        await node.click(modifiers=self._modifiers(handle))

    async def dblclick(self, selector: Any, options: Options = None) -> None:
        handle, node = await self._element(selector, options)
        await node.dblclick(modifiers=self._modifiers(handle))

    async def check_box(self, selector: Any, options: Options = None) -> None:
        _, node = await self._element(selector, options)
        await node.check()

    async def fill(self, selector: Any, value: str, options: Options = None) -> None:
        _, node = await self._element(selector, options)
        await node.fill(value)

    async def type(self, selector: Any, value: str, options: Options = None) -> None:
        """Focus the element and send one key event per character."""
        _, node = await self._element(selector, options)
        await node.press_sequentially(value)

    async def select_option(
        self,
        selector: Any,
        option: str | dict[str, Any],
        options: Options = None,
    ) -> list[str]:
        """Select an option by value/label string or by ``{value|label|index}``."""
        _, node = await self._element(selector, options)
        if isinstance(option, dict):
            return await node.select_option(**option)
        return await node.select_option(option)

    async def drag_and_drop(
        self,
        source: Any,
        target: Any,
        source_options: Options = None,
        target_options: Options = None,
    ) -> None:
        _, target_node = await self._element(target, target_options)
        _, source_node = await self._element(source, source_options)
        await source_node.drag_to(target_node, target_position={"x": 0, "y": 0})

    # --- Element checks ---

    async def check_visibility_state(
        self,
        selector: Any,
        mode: Literal["visible", "hidden"],
        options: Options = None,
    ) -> bool:
        await self.locate(selector, options, state=_pick(_VISIBILITY_MODES, mode))
        return True

    async def check_enabled_state(
        self,
        selector: Any,
        mode: Literal["enabled", "disabled"],
        options: Options = None,
    ) -> bool:
        await self.locate(selector, options, state=_pick(_ENABLED_MODES, mode))
        return True

    async def check_editable_state(
        self,
        selector: Any,
        mode: Literal["editable", "not_editable"],
        options: Options = None,
    ) -> bool:
        await self.locate(selector, options, state=_pick(_EDITABLE_MODES, mode))
        return True

    async def check_selector_text(
        self,
        selector: Any,
        text: str | re.Pattern | list[str | re.Pattern],
        mode: Literal["has", "has_not"],
        options: Options = None,
    ) -> bool:
        await self.locate(
            selector,
            options,
            state=StateKind.HAS_TEXT,
            expected=text,
            negate=_pick(_HAS_MODES, mode),
        )
        return True

    async def check_selector_value(
        self,
        selector: Any,
        value: str | re.Pattern | list[str | re.Pattern],
        mode: Literal["has", "has_not"],
        options: Options = None,
    ) -> bool:
        """Check an input value; a list checks the selection of a multi-select."""
        await self.locate(
            selector,
            options,
            state=StateKind.HAS_VALUE,
            expected=value,
            negate=_pick(_HAS_MODES, mode),
        )
        return True

    # --- Page checks ---

    async def check_page_url(
        self,
        mode: Literal["has", "has_not"],
        expected: str | re.Pattern,
        timeout_ms: int | None = None,
    ) -> bool:
        negate = _pick(_HAS_MODES, mode)

        async def _matches() -> bool:
            return equals_text(self._page.url, expected) != negate

        return await self._poll_page(_matches, "url", expected, timeout_ms)

    async def check_page_title(
        self,
        mode: Literal["has", "has_not"],
        expected: str | re.Pattern,
        timeout_ms: int | None = None,
    ) -> bool:
        negate = _pick(_HAS_MODES, mode)

        async def _matches() -> bool:
            return equals_text(await self._page.title(), expected) != negate

        return await self._poll_page(_matches, "title", expected, timeout_ms)

    async def _poll_page(
        self, check: Any, what: str, expected: Any, timeout_ms: int | None
    ) -> bool:
        policy = self._resolver.wait_policy
        return await poll_until(
            check,
            timeout_ms=policy.default_timeout_ms if timeout_ms is None else timeout_ms,
            poll_interval_ms=policy.poll_interval_ms,
            target="page",
            state=f"{what} {expected!r}",
        )

    # --- Cookies ---

    async def get_cookies(self, urls: str | list[str] | None = None) -> list[dict]:
        return await self._page.context.cookies(urls)

    async def add_cookies(self, cookies: list[dict]) -> None:
        await self._page.context.add_cookies(cookies)

    async def clear_cookies(self) -> None:
        await self._page.context.clear_cookies()

    # --- Web storage (values are JSON encoded) ---

    async def get_storage_item(self, area: StorageArea, key: str) -> Any:
        return await self._page.evaluate(_GET_STORAGE_JS, [area, key])

    async def set_storage_item(self, area: StorageArea, key: str, value: Any) -> None:
        await self._page.evaluate(_SET_STORAGE_JS, [area, key, value])

    async def remove_storage_item(self, area: StorageArea, key: str) -> None:
        await self._page.evaluate(_REMOVE_STORAGE_JS, [area, key])

    async def get_local_storage_item(self, key: str) -> Any:
        return await self.get_storage_item("localStorage", key)

    async def set_local_storage_item(self, key: str, value: Any) -> None:
        await self.set_storage_item("localStorage", key, value)

    async def remove_local_storage_item(self, key: str) -> None:
        await self.remove_storage_item("localStorage", key)

    async def get_session_storage_item(self, key: str) -> Any:
        return await self.get_storage_item("sessionStorage", key)

    async def set_session_storage_item(self, key: str, value: Any) -> None:
        await self.set_storage_item("sessionStorage", key, value)

    async def remove_session_storage_item(self, key: str) -> None:
        await self.remove_storage_item("sessionStorage", key)
