"""Pointer actions: click, double click, hover, drag and drop."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from webplay.abilities.browse_the_web import BrowseTheWeb, Options
from webplay.actions import Action

if TYPE_CHECKING:
    from webplay.actor import Actor


class Click(Action):
    """Click an element.

    Example::

        Click.on("button", {"has_text": "Add Element", "modifiers": ["Shift"]})
    """

    def __init__(self, selector: Any, options: Options = None) -> None:
        self.selector = selector
        self.options = options

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).click(self.selector, self.options)

    @classmethod
    def on(cls, selector: Any, options: Options = None) -> Click:
        return cls(selector, options)


class DoubleClick(Click):
    """Double click an element."""

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).dblclick(self.selector, self.options)


class Hover(Action):
    """Move the mouse over an element."""

    def __init__(self, selector: Any, options: Options = None) -> None:
        self.selector = selector
        self.options = options

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).hover(self.selector, self.options)

    @classmethod
    def over(cls, selector: Any, options: Options = None) -> Hover:
        return cls(selector, options)


class DragAndDrop(Action):
    """Drag one element onto another."""

    def __init__(
        self,
        source: Any,
        target: Any,
        source_options: Options = None,
        target_options: Options = None,
    ) -> None:
        self.source = source
        self.target = target
        self.source_options = source_options
        self.target_options = target_options

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.of(actor).drag_and_drop(
            self.source, self.target, self.source_options, self.target_options
        )

    @classmethod
    def execute(
        cls,
        source: Any,
        target: Any,
        source_options: Options = None,
        target_options: Options = None,
    ) -> DragAndDrop:
        return cls(source, target, source_options, target_options)
