"""Shared test fixtures: an in-memory DOM and a scope provider over it."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from webscope.config import EngineConfig
from webscope.resolver import SelectorResolver
from webscope.scope import ScopeProvider
from webscope.waiter import WaitPolicy

# Path to test fixtures
FIXTURES_DIR = Path(__file__).parent / "fixtures"
MOCK_PAGES_DIR = FIXTURES_DIR / "mock_pages"

_SIMPLE_QUERY = re.compile(
    r"^(?P<tag>[a-zA-Z][\w-]*|\*)?(?:#(?P<id>[\w-]+))?(?:\.(?P<cls>[\w-]+))?$"
)


@dataclass(eq=False)
class FakeNode:
    """A DOM-ish node that records the interactions performed on it."""

    tag: str
    id: str | None = None
    classes: tuple[str, ...] = ()
    text: str = ""
    children: list[FakeNode] = field(default_factory=list)
    visible: bool = True
    enabled: bool = True
    editable: bool = False
    value: str = ""
    selected: list[str] | None = None
    calls: list[tuple[str, Any]] = field(default_factory=list)

    def descendants(self) -> list[FakeNode]:
        """Descendants in document order."""
        found: list[FakeNode] = []
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            found.append(node)
            stack.extend(reversed(node.children))
        return found

    def rendered_text(self) -> str:
        parts = [self.text] + [n.text for n in self.descendants()]
        return " ".join(p for p in parts if p)

    def matches(self, query: str) -> bool:
        m = _SIMPLE_QUERY.match(query.strip())
        if not m or not any(m.groupdict().values()):
            raise ValueError(f"fake DOM cannot evaluate {query!r}")
        tag, node_id, cls = m.group("tag"), m.group("id"), m.group("cls")
        if tag and tag != "*" and tag != self.tag:
            return False
        if node_id and node_id != self.id:
            return False
        if cls and cls not in self.classes:
            return False
        return True

    # Playwright Locator-shaped interaction methods.

    async def click(self, **kwargs: Any) -> None:
        self.calls.append(("click", kwargs))

    async def dblclick(self, **kwargs: Any) -> None:
        self.calls.append(("dblclick", kwargs))

    async def hover(self, **kwargs: Any) -> None:
        self.calls.append(("hover", kwargs))

    async def check(self) -> None:
        self.calls.append(("check", None))

    async def fill(self, value: str) -> None:
        self.value = value
        self.calls.append(("fill", value))

    async def press_sequentially(self, value: str) -> None:
        self.value += value
        self.calls.append(("type", value))

    async def select_option(self, *args: Any, **kwargs: Any) -> list[str]:
        self.calls.append(("select_option", args or kwargs))
        chosen = list(args) or [str(v) for v in kwargs.values()]
        self.selected = chosen
        return chosen

    async def drag_to(self, target: FakeNode, **kwargs: Any) -> None:
        self.calls.append(("drag_to", target))


def el(tag: str, *children: FakeNode | str, **attrs: Any) -> FakeNode:
    """Build a node; string children become the node's own text."""
    text = " ".join(c for c in children if isinstance(c, str))
    kids = [c for c in children if isinstance(c, FakeNode)]
    if "cls" in attrs:
        attrs["classes"] = tuple(attrs.pop("cls").split())
    return FakeNode(tag, text=text, children=kids, **attrs)


class FakeScope(ScopeProvider):
    """Scope provider over a :class:`FakeNode` tree; counts queries."""

    def __init__(self, root: FakeNode) -> None:
        self._root = root
        self.queries: list[str] = []

    @property
    def root(self) -> FakeNode:
        return self._root

    async def query(self, scope: FakeNode, query: str) -> list[FakeNode]:
        self.queries.append(query)
        return [n for n in scope.descendants() if n.matches(query)]

    async def text_of(self, node: FakeNode) -> str:
        return node.rendered_text()

    async def is_visible(self, node: FakeNode) -> bool:
        return node.visible

    async def is_enabled(self, node: FakeNode) -> bool:
        return node.enabled

    async def is_editable(self, node: FakeNode) -> bool:
        return node.editable and node.enabled

    async def value_of(self, node: FakeNode) -> str:
        return node.value

    async def values_of(self, node: FakeNode) -> list[str] | None:
        return node.selected


@pytest.fixture
def fast_config() -> EngineConfig:
    """Short timeouts and tight polling for wait tests."""
    return EngineConfig(default_timeout_ms=500, poll_interval_ms=10)


@pytest.fixture
def resolver(fast_config: EngineConfig) -> SelectorResolver:
    return SelectorResolver(fast_config)


@pytest.fixture
def policy(fast_config: EngineConfig) -> WaitPolicy:
    return WaitPolicy.from_config(fast_config)


@pytest.fixture
def shop_page() -> FakeScope:
    """A small page with a product table and a form."""
    root = el(
        "html",
        el(
            "body",
            el("div", el("span", "Foo"), id="a"),
            el(
                "table",
                el("tr", el("td", "Alice"), el("td", "$50.00"), cls="row"),
                el("tr", el("td", "Bob"), el("td", "$51.00"), cls="row"),
                el("tr", el("td", "Conway"), el("td", "$50.00"), cls="row"),
                id="table1",
            ),
            el(
                "form",
                el("input", id="username", editable=True),
                el("input", id="locked", editable=True, enabled=False),
                el("select", id="colors", selected=["red"]),
                el("button", "Save", id="save"),
                el("button", "Cancel", id="cancel", visible=False),
                id="login",
            ),
        ),
    )
    return FakeScope(root)


@pytest.fixture
def shop_html_path() -> Path:
    """Path to the shop test page used with a real browser."""
    return MOCK_PAGES_DIR / "shop.html"
