"""Rendered-text normalization and matching."""

from __future__ import annotations

import re

from webscope.models import TextMatcher

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Collapse whitespace runs and strip the ends."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


def contains_text(text: str | None, matcher: TextMatcher) -> bool:
    """Filter semantics: case-sensitive substring, or ``search`` for patterns."""
    normalized = normalize_text(text)
    if isinstance(matcher, re.Pattern):
        return matcher.search(normalized) is not None
    return normalize_text(matcher) in normalized


def equals_text(text: str | None, matcher: TextMatcher) -> bool:
    """Assertion semantics: full normalized equality, or ``search`` for patterns."""
    normalized = normalize_text(text)
    if isinstance(matcher, re.Pattern):
        return matcher.search(normalized) is not None
    return normalize_text(matcher) == normalized


def matcher_key(matcher: TextMatcher | None) -> tuple | None:
    """Hashable identity of a text matcher, used to compare handle scopes."""
    if matcher is None:
        return None
    if isinstance(matcher, re.Pattern):
        return ("pattern", matcher.pattern, matcher.flags)
    return ("text", matcher)


def describe_matcher(matcher: TextMatcher) -> str:
    if isinstance(matcher, re.Pattern):
        return f"/{matcher.pattern}/"
    return f'"{matcher}"'
