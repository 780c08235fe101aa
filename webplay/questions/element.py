"""Element state question."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Literal

from webplay.abilities.browse_the_web import BrowseTheWeb, Options
from webplay.questions import Question
from webscope.exceptions import InvalidSpec

if TYPE_CHECKING:
    from webplay.actor import Actor

Mode = Literal["visible", "enabled", "editable", "text", "value"]
TextPayload = str | re.Pattern | list[str | re.Pattern]


class Element(Question):
    """Check the state of an element.

    Start from a polarity, then pick what to check::

        Element.to_be().visible("h3", {"has_text": "Data Tables"})
        Element.not_to_be().enabled("[aria-label='Redo']", {"timeout_ms": 1000})
        Element.to_have().text("#status", re.compile("ok|done"))

    A failed check raises (``LookupTimeout``) instead of answering False.
    """

    def __init__(self, positive: bool) -> None:
        self.positive = positive
        self.mode: Mode | None = None
        self.selector: Any = None
        self.payload: Any = None
        self.options: Options = None

    @classmethod
    def to_be(cls) -> Element:
        return cls(True)

    @classmethod
    def not_to_be(cls) -> Element:
        return cls(False)

    @classmethod
    def to_have(cls) -> Element:
        return cls(True)

    @classmethod
    def not_to_have(cls) -> Element:
        return cls(False)

    def _set(self, mode: Mode, selector: Any, options: Options, payload: Any = None) -> Element:
        self.mode = mode
        self.selector = selector
        self.options = options
        self.payload = payload
        return self

    def visible(self, selector: Any, options: Options = None) -> Element:
        return self._set("visible", selector, options)

    def enabled(self, selector: Any, options: Options = None) -> Element:
        return self._set("enabled", selector, options)

    def editable(self, selector: Any, options: Options = None) -> Element:
        return self._set("editable", selector, options)

    def text(self, selector: Any, text: TextPayload, options: Options = None) -> Element:
        """A list checks the texts of all matched elements, in order."""
        return self._set("text", selector, options, text)

    def value(self, selector: Any, value: TextPayload, options: Options = None) -> Element:
        """A list checks the selected values of a multi-select."""
        return self._set("value", selector, options, value)

    async def answered_by(self, actor: Actor) -> bool:
        ability = BrowseTheWeb.of(actor)
        has_mode = "has" if self.positive else "has_not"
        if self.mode == "visible":
            return await ability.check_visibility_state(
                self.selector, "visible" if self.positive else "hidden", self.options
            )
        if self.mode == "enabled":
            return await ability.check_enabled_state(
                self.selector, "enabled" if self.positive else "disabled", self.options
            )
        if self.mode == "editable":
            return await ability.check_editable_state(
                self.selector,
                "editable" if self.positive else "not_editable",
                self.options,
            )
        if self.mode == "text":
            return await ability.check_selector_text(
                self.selector, self.payload, has_mode, self.options
            )
        if self.mode == "value":
            return await ability.check_selector_value(
                self.selector, self.payload, has_mode, self.options
            )
        raise InvalidSpec("Element question has no check mode; call visible(), text(), ...")
