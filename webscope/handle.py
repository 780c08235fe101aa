"""Lazy element handles."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from webscope.exceptions import ResolutionError
from webscope.models import Modifier, StateKind, TextMatcher
from webscope.text import describe_matcher, matcher_key

if TYPE_CHECKING:
    from webscope.scope import ScopeProvider


@dataclass(frozen=True, eq=False, repr=False)
class Handle:
    """A query bound to a scope, materialized only when used.

    ``parent`` is the handle of the previous chain link; a handle without
    a parent is scoped to the provider root. Only the final handle of a
    resolution carries the effective state, timeout and modifiers.
    """

    provider: ScopeProvider
    query: str
    text_filter: TextMatcher | None = None
    parent: Handle | None = None
    state: StateKind | None = None
    timeout_ms: int | None = None
    modifiers: frozenset[Modifier] = frozenset()

    @property
    def scope(self) -> Any:
        """The node set this handle queries inside."""
        if self.parent is not None:
            return self.parent
        return self.provider.root

    def links(self) -> list[Handle]:
        """All links from the root-most handle down to this one."""
        chain: list[Handle] = []
        current: Handle | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        chain.reverse()
        return chain

    @property
    def depth(self) -> int:
        return len(self.links())

    def narrow(self, query: str, text_filter: TextMatcher | None = None) -> Handle:
        """Return a child handle scoped to this one."""
        return Handle(self.provider, query, text_filter, parent=self)

    def with_options(
        self,
        state: StateKind | None = None,
        timeout_ms: int | None = None,
        modifiers: frozenset[Modifier] | None = None,
    ) -> Handle:
        return replace(
            self,
            state=state,
            timeout_ms=timeout_ms,
            modifiers=modifiers or frozenset(),
        )

    def scope_key(self) -> tuple:
        """Identity of the effective scope: root plus every (query, filter)."""
        return (
            id(self.provider.root),
            tuple((link.query, matcher_key(link.text_filter)) for link in self.links()),
        )

    def describe(self) -> str:
        parts = []
        for link in self.links():
            if link.text_filter is None:
                parts.append(link.query)
            else:
                parts.append(f"{link.query} [has-text={describe_matcher(link.text_filter)}]")
        return " >> ".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented
        return (
            self.scope_key() == other.scope_key()
            and self.state == other.state
            and self.timeout_ms == other.timeout_ms
            and self.modifiers == other.modifiers
        )

    def __hash__(self) -> int:
        return hash((self.scope_key(), self.state, self.timeout_ms, self.modifiers))

    def __repr__(self) -> str:
        return f"Handle({self.describe()!r}, state={self.state}, timeout_ms={self.timeout_ms})"

    # --- Query time ---

    async def nodes(self) -> list[Any]:
        """Run the query chain and return every matching node."""
        return await self.provider.materialize(self)

    async def count(self) -> int:
        return len(await self.nodes())

    async def element(self, strict: bool = True) -> Any:
        """Return the single node this handle points at.

        Raises:
            ResolutionError: No node matches, or several match in strict mode.
        """
        nodes = await self.nodes()
        if not nodes or (strict and len(nodes) > 1):
            raise ResolutionError(self.describe(), len(nodes))
        return nodes[0]
