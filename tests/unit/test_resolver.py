"""Tests for SelectorResolver chain composition and resolution."""

import re

import pytest

from conftest import FakeScope, el
from webscope.config import EngineConfig
from webscope.exceptions import InvalidSpec, LookupTimeout
from webscope.models import Chain, Modifier, Query, StateKind
from webscope.resolver import SelectorResolver, resolve


def _deep_spec(depth: int) -> Chain:
    spec = Query(value="span")
    for _ in range(depth):
        spec = Chain(base="div", sub_selector=spec)
    return spec


class TestBuild:
    def test_build_does_not_query(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        resolver.build(shop_page, {"base": "#a", "sub_selector": {"base": "span", "has_text": "Foo"}})
        assert shop_page.queries == []

    def test_bare_query(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        handle = resolver.build(shop_page, "#save")
        assert handle.depth == 1
        assert handle.query == "#save"
        assert handle.parent is None
        assert handle.state is None

    def test_links_follow_chain_order(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        handle = resolver.build(
            shop_page,
            {"base": "#table1", "sub_selector": {"base": "tr", "has_text": "Bob", "sub_selector": "td"}},
        )
        assert [(link.query, link.text_filter) for link in handle.links()] == [
            ("#table1", None),
            ("tr", "Bob"),
            ("td", None),
        ]
        assert handle.describe() == '#table1 >> tr [has-text="Bob"] >> td'

    def test_options_filter_applies_to_first_level_only(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(shop_page, {"base": "#a", "sub_selector": "span"}, {"has_text": "Foo"})
        first, second = handle.links()
        assert first.text_filter == "Foo"
        assert second.text_filter is None

    def test_own_filter_beats_options_filter(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(shop_page, {"base": "tr", "has_text": "Bob"}, {"has_text": "Alice"})
        assert handle.text_filter == "Bob"

    def test_inner_values_take_precedence(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        spec = {
            "base": "#login",
            "state": "visible",
            "timeout_ms": 200,
            "modifiers": ["Shift"],
            "sub_selector": {"base": "#locked", "state": "disabled"},
        }
        handle = resolver.build(shop_page, spec, {"state": "attached", "timeout_ms": 100})
        assert handle.state is StateKind.DISABLED
        assert handle.timeout_ms == 200
        assert handle.modifiers == frozenset({Modifier.SHIFT})

    def test_options_fill_in_when_chain_is_silent(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(
            shop_page,
            {"base": "#login", "sub_selector": "#save"},
            {"state": "enabled", "timeout_ms": 50, "modifiers": ["Control"]},
        )
        assert handle.state is StateKind.ENABLED
        assert handle.timeout_ms == 50
        assert handle.modifiers == frozenset({Modifier.CONTROL})

    def test_only_final_handle_carries_options(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(shop_page, {"base": "#a", "sub_selector": "span"}, {"state": "visible"})
        assert handle.parent.state is None
        assert handle.state is StateKind.VISIBLE

    def test_handle_as_scope(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        table = resolver.build(shop_page, "#table1")
        rows = resolver.build(table, "tr")
        assert rows.depth == 2
        assert rows == resolver.build(shop_page, {"base": "#table1", "sub_selector": "tr"})

    def test_same_spec_same_scope(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        spec = {"base": "#table1", "sub_selector": {"base": "tr", "has_text": re.compile(r"\$50")}}
        first = resolver.build(shop_page, spec)
        second = resolver.build(shop_page, spec)
        assert first == second
        assert hash(first) == hash(second)
        assert first.scope_key() == second.scope_key()

    def test_different_filters_differ(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        a = resolver.build(shop_page, {"base": "tr", "has_text": "Bob"})
        b = resolver.build(shop_page, {"base": "tr", "has_text": "Alice"})
        assert a != b

    def test_invalid_spec(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        with pytest.raises(InvalidSpec):
            resolver.build(shop_page, {"sub_selector": "span"})

    def test_invalid_scope(self, resolver: SelectorResolver) -> None:
        with pytest.raises(TypeError, match="ScopeProvider"):
            resolver.build("page", "#a")

    def test_very_deep_chain(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        handle = resolver.build(shop_page, _deep_spec(3000))
        assert handle.depth == 3001
        assert handle.query == "span"
        assert handle.describe().count(" >> ") == 3000

    def test_very_deep_mapping(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        spec: object = "span"
        for _ in range(2000):
            spec = {"base": "div", "sub_selector": spec}
        handle = resolver.build(shop_page, spec)
        assert handle.depth == 2001
        assert handle.query == "span"

    def test_links_match_narrowing(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        built = resolver.build(
            shop_page, {"base": "#table1", "sub_selector": {"base": "tr", "has_text": "Conway", "sub_selector": "td"}}
        )
        manual = resolver.build(shop_page, "#table1").narrow("tr", "Conway").narrow("td")
        assert built == manual
        assert [link.query for link in built.links()] == ["#table1", "tr", "td"]
        assert built.parent.parent.parent is None

    def test_narrowing_from_handle_scope(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        table = resolver.build(shop_page, "#table1")
        rows = resolver.build(table, {"base": "tr", "has_text": "Conway"})
        assert rows.parent is table
        assert rows == table.narrow("tr", "Conway")


class TestMaterialize:
    async def test_nested_text_filter(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        handle = resolver.build(shop_page, {"base": "#a", "sub_selector": {"base": "span", "has_text": "Foo"}})
        nodes = await handle.nodes()
        assert len(nodes) == 1
        assert nodes[0].text == "Foo"

    async def test_chain_equals_manual_narrowing(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        chained = resolver.build(
            shop_page, {"base": "#table1", "sub_selector": {"base": "tr", "has_text": "Conway", "sub_selector": "td"}}
        )
        manual = resolver.build(shop_page, "#table1").narrow("tr", "Conway").narrow("td")
        assert await chained.nodes() == await manual.nodes()
        assert [n.text for n in await chained.nodes()] == ["Conway", "$50.00"]

    async def test_filter_keeps_every_match(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        handle = resolver.build(shop_page, {"base": "#table1", "sub_selector": {"base": "tr", "has_text": "$50.00"}})
        rows = await handle.nodes()
        assert len(rows) == 2
        assert [r.children[0].text for r in rows] == ["Alice", "Conway"]

    async def test_filter_ignores_whitespace_differences(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(shop_page, {"base": "tr", "has_text": "  Bob\n  $51.00 "})
        assert await handle.count() == 1

    async def test_filter_is_case_sensitive(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        lower = resolver.build(shop_page, {"base": "#a", "sub_selector": {"base": "span", "has_text": "foo"}})
        assert await lower.count() == 0

    async def test_pattern_filter_flags(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        spec = {"base": "#a", "sub_selector": {"base": "span", "has_text": re.compile("foo", re.IGNORECASE)}}
        assert await resolver.build(shop_page, spec).count() == 1

    async def test_overlapping_scopes_are_deduplicated(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(shop_page, {"base": "*", "sub_selector": "td"})
        assert await handle.count() == 6

    async def test_empty_level_stops_querying(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(shop_page, {"base": "#nowhere", "sub_selector": {"base": "tr", "sub_selector": "td"}})
        assert await handle.nodes() == []
        assert shop_page.queries == ["#nowhere"]

    async def test_very_deep_chain_materializes(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = resolver.build(shop_page, _deep_spec(3000))
        assert await handle.count() == 0

    async def test_deeply_nested_document(self, resolver: SelectorResolver) -> None:
        node = el("span", "leaf")
        for _ in range(1500):
            node = el("div", node)
        page = FakeScope(el("html", el("body", node)))
        spec = _deep_spec(1)
        handle = resolver.build(page, spec)
        assert await handle.count() == 1

    async def test_element_strictness(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        rows = resolver.build(shop_page, "tr")
        first = await rows.element(strict=False)
        assert first.children[0].text == "Alice"


class TestResolve:
    async def test_resolve_waits_for_state(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = await resolver.resolve(shop_page, "#save", {"state": "enabled"})
        assert handle.state is StateKind.ENABLED

    async def test_resolve_without_state_is_lazy(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = await resolver.resolve(shop_page, "#missing")
        assert shop_page.queries == []
        assert await handle.count() == 0

    async def test_resolve_times_out(self, resolver: SelectorResolver, shop_page: FakeScope) -> None:
        with pytest.raises(LookupTimeout) as exc_info:
            await resolver.resolve(shop_page, {"base": "#missing", "state": "attached", "timeout_ms": 0})
        assert exc_info.value.timeout_ms == 0
        assert "#missing" in exc_info.value.target

    async def test_resolve_content_state(
        self, resolver: SelectorResolver, shop_page: FakeScope
    ) -> None:
        handle = await resolver.resolve(shop_page, {"base": "#save", "state": "has-text"}, expected="Save")
        assert handle.query == "#save"

    async def test_module_level_resolve(self, shop_page: FakeScope) -> None:
        config = EngineConfig(default_timeout_ms=200, poll_interval_ms=10)
        handle = await resolve(shop_page, {"base": "#a", "sub_selector": "span"}, {"state": "visible"}, config=config)
        assert await handle.count() == 1
