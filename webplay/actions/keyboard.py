"""Form and keyboard actions: fill, type, check, select, press."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from webplay.abilities.browse_the_web import BrowseTheWeb, Options
from webplay.actions import Action

if TYPE_CHECKING:
    from webplay.actor import Actor


class Fill(Action):
    """Replace the value of an input in one go."""

    def __init__(self, selector: Any, value: str, options: Options = None) -> None:
        self.selector = selector
        self.value = value
        self.options = options

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).fill(self.selector, self.value, self.options)

    @classmethod
    def into(cls, selector: Any, value: str, options: Options = None) -> Fill:
        return cls(selector, value, options)


class Type(Fill):
    """Type into an input character by character."""

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).type(self.selector, self.value, self.options)


class Check(Action):
    """Tick a checkbox or radio button."""

    def __init__(self, selector: Any, options: Options = None) -> None:
        self.selector = selector
        self.options = options

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).check_box(self.selector, self.options)

    @classmethod
    def element(cls, selector: Any, options: Options = None) -> Check:
        return cls(selector, options)


class Select(Action):
    """Choose an option of a ``<select>``."""

    def __init__(
        self, selector: Any, option: str | dict[str, Any], options: Options = None
    ) -> None:
        self.selector = selector
        self.choice = option
        self.options = options

    async def perform_as(self, actor: Actor) -> list[str]:
        return await BrowseTheWeb.of(actor).select_option(
            self.selector, self.choice, self.options
        )

    @classmethod
    def option(
        cls, selector: Any, option: str | dict[str, Any], options: Options = None
    ) -> Select:
        return cls(selector, option, options)


class Press(Action):
    """Press keys on the page keyboard, e.g. ``Control+A``."""

    def __init__(self, keys: str) -> None:
        self.keys = keys

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).press(self.keys)

    @classmethod
    def key(cls, keys: str) -> Press:
        return cls(keys)

