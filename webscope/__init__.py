"""WebScope: declarative selector resolution with bounded state waits."""

from webscope.config import EngineConfig
from webscope.exceptions import (
    BrowserError,
    InvalidSpec,
    LookupTimeout,
    ResolutionError,
    WebScopeError,
)
from webscope.handle import Handle
from webscope.models import (
    Chain,
    Modifier,
    Query,
    ResolveOptions,
    SelectorSpec,
    StateKind,
    as_options,
    as_spec,
    chain,
)
from webscope.resolver import SelectorResolver, resolve
from webscope.scope import ScopeProvider
from webscope.states import StatePredicate
from webscope.waiter import WaitPolicy, poll_until

__version__ = "0.1.0"

__all__ = [
    "BrowserError",
    "Chain",
    "EngineConfig",
    "Handle",
    "InvalidSpec",
    "LookupTimeout",
    "Modifier",
    "Query",
    "ResolutionError",
    "ResolveOptions",
    "ScopeProvider",
    "SelectorResolver",
    "SelectorSpec",
    "StateKind",
    "StatePredicate",
    "WaitPolicy",
    "WebScopeError",
    "as_options",
    "as_spec",
    "chain",
    "poll_until",
    "resolve",
    "__version__",
]
