"""Cookie and web storage actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from webplay.abilities.browse_the_web import BrowseTheWeb, StorageArea
from webplay.actions import Action

if TYPE_CHECKING:
    from webplay.actor import Actor


class Add(Action):
    """Add cookies to the browser context of the actor's page."""

    def __init__(self, cookies: list[dict]) -> None:
        self.payload = cookies

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).add_cookies(self.payload)

    @classmethod
    def cookies(cls, cookies: list[dict]) -> Add:
        return cls(cookies)


class Clear(Action):
    """Clear all cookies of the browser context."""

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).clear_cookies()

    @classmethod
    def cookies(cls) -> Clear:
        return cls()


class Get(Action):
    """Read cookies or a web storage item."""

    def __init__(
        self,
        area: StorageArea | None = None,
        key: str | None = None,
        urls: str | list[str] | None = None,
    ) -> None:
        self.area = area
        self.key = key
        self.urls = urls

    async def perform_as(self, actor: Actor) -> Any:
        ability = BrowseTheWeb.of(actor)
        if self.area is None:
            return await ability.get_cookies(self.urls)
        return await ability.get_storage_item(self.area, self.key)

    @classmethod
    def cookies(cls, urls: str | list[str] | None = None) -> Get:
        return cls(urls=urls)

    @classmethod
    def session_storage_item(cls, key: str) -> Get:
        return cls("sessionStorage", key)

    @classmethod
    def local_storage_item(cls, key: str) -> Get:
        return cls("localStorage", key)


class Set(Action):
    """Create or overwrite a web storage item."""

    def __init__(self, area: StorageArea, key: str, value: Any) -> None:
        self.area = area
        self.key = key
        self.value = value

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).set_storage_item(self.area, self.key, self.value)

    @classmethod
    def session_storage_item(cls, key: str, value: Any) -> Set:
        return cls("sessionStorage", key, value)

    @classmethod
    def local_storage_item(cls, key: str, value: Any) -> Set:
        return cls("localStorage", key, value)


class Remove(Action):
    """Delete a web storage item if it exists."""

    def __init__(self, area: StorageArea, key: str) -> None:
        self.area = area
        self.key = key

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).remove_storage_item(self.area, self.key)

    @classmethod
    def session_storage_item(cls, key: str) -> Remove:
        return cls("sessionStorage", key)

    @classmethod
    def local_storage_item(cls, key: str) -> Remove:
        return cls("localStorage", key)
