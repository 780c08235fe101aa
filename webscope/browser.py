"""Playwright browser manager."""

from __future__ import annotations

from pathlib import Path

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from webscope.config import EngineConfig
from webscope.exceptions import BrowserError
from webscope.logger import get_logger

log = get_logger(__name__)

_BROWSER_TYPES = ("chromium", "firefox", "webkit")


class BrowserManager:
    """Manages Playwright browser lifecycle."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        self._playwright = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def start(self, headless: bool | None = None) -> None:
        """Launch the configured browser with one context and page."""
        browser_name = self._config.browser
        if browser_name not in _BROWSER_TYPES:
            raise BrowserError(f"Unknown browser type: {browser_name}")
        if headless is None:
            headless = self._config.headless
        try:
            self._playwright = await async_playwright().start()
            launcher = getattr(self._playwright, browser_name)
            self._browser = await launcher.launch(headless=headless)
            self._context = await self._browser.new_context()
            self._page = await self._context.new_page()
            log.info("browser_started", browser=browser_name, headless=headless)
        except Exception as exc:
            raise BrowserError(f"Failed to start browser: {exc}") from exc

    async def stop(self) -> None:
        """Close browser and cleanup."""
        try:
            if self._page and not self._page.is_closed():
                await self._page.close()
            if self._context:
                await self._context.close()
            if self._browser:
                await self._browser.close()
            if self._playwright:
                await self._playwright.stop()
        except Exception as exc:
            log.warning("browser_stop_error", error=str(exc))
        finally:
            self._page = None
            self._context = None
            self._browser = None
            self._playwright = None
            log.info("browser_stopped")

    async def __aenter__(self) -> BrowserManager:
        await self.start()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.stop()

    async def new_context(
        self, cookies: list[dict] | None = None
    ) -> BrowserContext:
        """Create a new browser context, optionally with cookies."""
        if not self._browser:
            raise BrowserError("Browser not started")
        ctx = await self._browser.new_context()
        if cookies:
            await ctx.add_cookies(cookies)
        return ctx

    async def new_page(self) -> Page:
        """Open a page in a fresh context, e.g. one page per actor."""
        ctx = await self.new_context()
        return await ctx.new_page()

    async def get_page(self) -> Page:
        """Get the current page, reopening it if it was closed."""
        if self._page and not self._page.is_closed():
            return self._page
        if self._context:
            self._page = await self._context.new_page()
            return self._page
        raise BrowserError("Browser not started, call start() first")

    async def screenshot(self, path: str | None = None) -> bytes:
        """Take a screenshot of the current page."""
        page = await self.get_page()
        kwargs: dict = {"full_page": False, "type": "png"}
        if path:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            kwargs["path"] = path
        return await page.screenshot(**kwargs)

    @property
    def current_url(self) -> str:
        """Current page URL."""
        if self._page and not self._page.is_closed():
            return self._page.url
        return ""
