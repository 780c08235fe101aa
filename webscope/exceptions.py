"""WebScope exception hierarchy."""


class WebScopeError(Exception):
    """Base exception for all WebScope errors."""


class InvalidSpec(WebScopeError, ValueError):
    """Raised when a selector spec or wait request is malformed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid selector spec: {detail}")


class LookupTimeout(WebScopeError):
    """Raised when a bounded state wait runs out of time."""

    def __init__(
        self,
        target: str,
        state: str,
        elapsed_ms: float,
        timeout_ms: int,
    ) -> None:
        self.target = target
        self.state = state
        self.elapsed_ms = elapsed_ms
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Timed out after {elapsed_ms:.0f}ms (limit {timeout_ms}ms) "
            f"waiting for '{target}' to be {state}"
        )


class ResolutionError(WebScopeError):
    """Raised when a handle does not match exactly one node when used."""

    def __init__(self, target: str, count: int) -> None:
        self.target = target
        self.count = count
        if count == 0:
            msg = f"No element matches '{target}'"
        else:
            msg = f"'{target}' is ambiguous: {count} elements match"
        super().__init__(msg)


class BrowserError(WebScopeError):
    """Raised on browser lifecycle errors."""
