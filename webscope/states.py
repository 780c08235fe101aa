"""State predicates evaluated against a resolved handle."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from webscope.exceptions import InvalidSpec, ResolutionError
from webscope.models import StateKind
from webscope.text import describe_matcher, equals_text

if TYPE_CHECKING:
    from webscope.handle import Handle

_CONTENT_STATES = (StateKind.HAS_TEXT, StateKind.HAS_VALUE)


def _is_matcher(value: Any) -> bool:
    return isinstance(value, (str, re.Pattern))


def _value_matches(actual: str, expected: str | re.Pattern) -> bool:
    if isinstance(expected, re.Pattern):
        return expected.search(actual) is not None
    return actual == expected


@dataclass(frozen=True)
class StatePredicate:
    """One state check; awaiting the instance evaluates it once."""

    state: StateKind
    expected: Any = None
    negate: bool = False
    strict: bool = True

    @classmethod
    def build(
        cls,
        state: StateKind | str,
        expected: Any = None,
        *,
        negate: bool = False,
        strict: bool = True,
    ) -> StatePredicate:
        """Validate a state request.

        Raises:
            InvalidSpec: Unknown state, or a content state with a missing or
                unusable expected value.
        """
        try:
            kind = StateKind(state)
        except ValueError as exc:
            raise InvalidSpec(f"unknown state {state!r}") from exc
        if kind in _CONTENT_STATES:
            if expected is None:
                raise InvalidSpec(f"state '{kind.value}' needs an expected value")
            if isinstance(expected, (list, tuple)):
                expected = tuple(expected)
                if not all(_is_matcher(item) for item in expected):
                    raise InvalidSpec("expected values must be strings or patterns")
            elif not _is_matcher(expected):
                raise InvalidSpec("expected value must be a string or a pattern")
        elif negate:
            raise InvalidSpec(f"state '{kind.value}' cannot be negated")
        return cls(kind, expected, negate, strict)

    def __str__(self) -> str:
        label = self.state.value
        if self.state in _CONTENT_STATES:
            if isinstance(self.expected, tuple):
                shown = ", ".join(describe_matcher(e) for e in self.expected)
                label = f"{label} [{shown}]"
            else:
                label = f"{label} {describe_matcher(self.expected)}"
            if self.negate:
                label = f"not {label}"
        return label

    async def __call__(self, handle: Handle) -> bool:
        kind = self.state
        if kind is StateKind.HAS_TEXT and isinstance(self.expected, tuple):
            return await self._texts_match(handle) != self.negate

        node = await self._target(handle)
        if kind is StateKind.ATTACHED:
            return node is not None
        if kind is StateKind.HIDDEN:
            return node is None or not await handle.provider.is_visible(node)

        if node is None or not await handle.provider.is_visible(node):
            return False
        provider = handle.provider
        if kind is StateKind.VISIBLE:
            return True
        if kind is StateKind.ENABLED:
            return await provider.is_enabled(node)
        if kind is StateKind.DISABLED:
            return not await provider.is_enabled(node)
        if kind is StateKind.EDITABLE:
            return await provider.is_editable(node)
        if kind is StateKind.NOT_EDITABLE:
            return not await provider.is_editable(node)
        if kind is StateKind.HAS_TEXT:
            matched = equals_text(await provider.text_of(node), self.expected)
            return matched != self.negate
        return await self._value_state(handle, node) != self.negate

    async def _target(self, handle: Handle) -> Any:
        nodes = await handle.nodes()
        if not nodes:
            return None
        if len(nodes) > 1 and self.strict:
            raise ResolutionError(handle.describe(), len(nodes))
        return nodes[0]

    async def _texts_match(self, handle: Handle) -> bool:
        nodes = await handle.nodes()
        if len(nodes) != len(self.expected):
            return False
        for node, expected in zip(nodes, self.expected):
            if not equals_text(await handle.provider.text_of(node), expected):
                return False
        return True

    async def _value_state(self, handle: Handle, node: Any) -> bool:
        if not isinstance(self.expected, tuple):
            return _value_matches(await handle.provider.value_of(node), self.expected)
        values = await handle.provider.values_of(node)
        if values is None:
            raise InvalidSpec(
                f"'{handle.describe()}' cannot hold multiple values"
            )
        if len(values) != len(self.expected):
            return False
        return all(
            _value_matches(actual, expected)
            for actual, expected in zip(values, self.expected)
        )

