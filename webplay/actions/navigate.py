"""Navigation and wait actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from webplay.abilities.browse_the_web import BrowseTheWeb, Options
from webplay.actions import Action

if TYPE_CHECKING:
    from webplay.actor import Actor

LoadState = Literal["load", "domcontentloaded", "networkidle"]


class Navigate(Action):
    """Open a URL in the actor's page."""

    def __init__(self, url: str) -> None:
        self.url = url

    async def perform_as(self, actor: Actor) -> Any:
        return await BrowseTheWeb.of(actor).goto(self.url)

    @classmethod
    def to(cls, url: str) -> Navigate:
        return cls(url)


class Wait(Action):
    """Wait for a page load state or for an element to reach a state.

    Example::

        Wait.for_selector({"base": "#table1", "sub_selector": {"base": "tr", "has_text": "Conway"}})
    """

    def __init__(
        self,
        load_state: LoadState | None = None,
        selector: Any = None,
        options: Options = None,
    ) -> None:
        self.load_state = load_state
        self.selector = selector
        self.options = options

    async def perform_as(self, actor: Actor) -> Any:
        ability = BrowseTheWeb.of(actor)
        if self.selector is not None:
            return await ability.wait_for_selector(self.selector, self.options)
        return await ability.wait_for_load_state(self.load_state or "load")

    @classmethod
    def for_load_state(cls, state: LoadState) -> Wait:
        return cls(load_state=state)

    @classmethod
    def for_selector(cls, selector: Any, options: Options = None) -> Wait:
        return cls(selector=selector, options=options)
