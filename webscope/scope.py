"""Scope provider interface.

A scope provider is the only thing the resolver talks to when a handle is
finally materialized: it runs opaque query strings against a scope (the
root page or a node found by a previous link) and answers simple
per-node questions used by the state predicates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Hashable
from typing import TYPE_CHECKING, Any

from webscope.text import contains_text
from webscope.waiter import poll_until

if TYPE_CHECKING:
    from webscope.handle import Handle


class ScopeProvider(ABC):
    """Base class for queryable scopes."""

    @property
    @abstractmethod
    def root(self) -> Any:
        """The outermost scope (usually the page)."""

    @abstractmethod
    async def query(self, scope: Any, query: str) -> list[Any]:
        """Return the descendants of ``scope`` matching ``query``."""

    @abstractmethod
    async def text_of(self, node: Any) -> str:
        """Return the rendered text of a node."""

    @abstractmethod
    async def is_visible(self, node: Any) -> bool:
        """Whether the node is rendered and visible."""

    @abstractmethod
    async def is_enabled(self, node: Any) -> bool:
        """Whether the node accepts interaction."""

    @abstractmethod
    async def is_editable(self, node: Any) -> bool:
        """Whether the node accepts text input."""

    @abstractmethod
    async def value_of(self, node: Any) -> str:
        """Return the input value of a form control."""

    async def values_of(self, node: Any) -> list[str] | None:
        """Return selected values of a multi-value control.

        ``None`` means the node cannot hold several values.
        """
        return None

    def node_key(self, node: Any) -> Hashable:
        """Identity used to de-duplicate nodes reached through overlapping scopes."""
        return id(node)

    async def materialize(self, handle: Handle) -> list[Any]:
        """Run every link of ``handle`` from the root and return the final nodes.

        Each link queries inside every node kept by the previous link, then
        applies its text filter. Links are walked in a loop, so chain depth
        is not limited by the interpreter stack.
        """
        current: list[Any] = [self.root]
        for link in handle.links():
            matched: list[Any] = []
            seen: set[Hashable] = set()
            for scope in current:
                for node in await self.query(scope, link.query):
                    key = self.node_key(node)
                    if key in seen:
                        continue
                    seen.add(key)
                    matched.append(node)
            if link.text_filter is not None:
                matched = [
                    node
                    for node in matched
                    if contains_text(await self.text_of(node), link.text_filter)
                ]
            if not matched:
                return []
            current = matched
        return current

    async def wait_for_predicate(
        self,
        handle: Handle,
        predicate: Callable[[Handle], Awaitable[bool]],
        timeout_ms: int,
        poll_interval_ms: int,
    ) -> bool:
        """Suspend until ``predicate(handle)`` holds or the timeout expires.

        Raises:
            LookupTimeout: If the predicate never held within ``timeout_ms``.
        """
        return await poll_until(
            lambda: predicate(handle),
            timeout_ms=timeout_ms,
            poll_interval_ms=poll_interval_ms,
            target=handle.describe(),
            state=str(predicate),
        )
