"""Selector resolution engine."""

from __future__ import annotations

from typing import Any

from webscope.config import EngineConfig
from webscope.handle import Handle
from webscope.logger import get_logger
from webscope.models import Query, ResolveOptions, as_options, as_spec
from webscope.scope import ScopeProvider
from webscope.waiter import WaitPolicy

log = get_logger(__name__)


class SelectorResolver:
    """Turns selector specs into scoped handles, waiting for states on request."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        wait_policy: WaitPolicy | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.wait_policy = wait_policy or WaitPolicy.from_config(self.config)

    def build(
        self,
        scope: ScopeProvider | Handle,
        spec: Any,
        options: ResolveOptions | dict | None = None,
    ) -> Handle:
        """Compose the handle for ``spec`` without touching the live tree.

        Each level binds its base query and text filter to the handle of the
        previous level. State, timeout and modifiers flow from the options
        (outermost) down through the chain; a level's own value replaces
        what it inherited.

        Raises:
            InvalidSpec: If the selector or options are malformed.
        """
        current = as_spec(spec)
        opts = as_options(options)

        if isinstance(scope, Handle):
            provider, parent = scope.provider, scope
        elif isinstance(scope, ScopeProvider):
            provider, parent = scope, None
        else:
            raise TypeError(
                f"scope must be a ScopeProvider or Handle, not {type(scope).__name__}"
            )

        state, timeout_ms, modifiers = opts.state, opts.timeout_ms, opts.modifiers
        inherited_text = opts.has_text

        while True:
            if isinstance(current, Query):
                base, text_filter, nxt = current.value, inherited_text, None
            else:
                base = current.base
                text_filter = (
                    current.has_text if current.has_text is not None else inherited_text
                )
                nxt = current.sub_selector
                if current.state is not None:
                    state = current.state
                if current.timeout_ms is not None:
                    timeout_ms = current.timeout_ms
                if current.modifiers is not None:
                    modifiers = current.modifiers
            inherited_text = None
            if parent is None:
                handle = Handle(provider, base, text_filter)
            else:
                handle = parent.narrow(base, text_filter)
            if nxt is None:
                break
            parent, current = handle, nxt

        return handle.with_options(state, timeout_ms, modifiers)

    async def resolve(
        self,
        scope: ScopeProvider | Handle,
        spec: Any,
        options: ResolveOptions | dict | None = None,
        *,
        expected: Any = None,
        negate: bool = False,
    ) -> Handle:
        """Build the handle and, if it carries a state, wait for that state.

        ``expected`` / ``negate`` are only used by the ``has-text`` and
        ``has-value`` states.

        Raises:
            InvalidSpec: Malformed spec, options or state request.
            LookupTimeout: The requested state did not hold in time.
            ResolutionError: Strict mode and the target matched several nodes.
        """
        handle = self.build(scope, spec, options)
        if handle.state is not None:
            await self.wait_policy.wait(
                handle, handle.state, expected, negate=negate
            )
        log.debug(
            "selector_resolved",
            target=handle.describe(),
            depth=handle.depth,
            state=handle.state.value if handle.state else None,
        )
        return handle


async def resolve(
    scope: ScopeProvider | Handle,
    spec: Any,
    options: ResolveOptions | dict | None = None,
    *,
    config: EngineConfig | None = None,
    expected: Any = None,
    negate: bool = False,
) -> Handle:
    """Resolve ``spec`` against ``scope`` with a resolver built from ``config``."""
    return await SelectorResolver(config).resolve(
        scope, spec, options, expected=expected, negate=negate
    )
