"""Selector spec models.

A selector spec is either a :class:`Query` (one opaque query string) or a
:class:`Chain` (base query, optional text filter, optional nested spec and
optional required state). Query strings are never parsed here; they are
handed to the scope provider verbatim.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from webscope.exceptions import InvalidSpec

TextMatcher = Union[str, re.Pattern]


class StateKind(str, Enum):
    """UI conditions a resolved handle can be waited on."""

    ATTACHED = "attached"
    VISIBLE = "visible"
    HIDDEN = "hidden"
    ENABLED = "enabled"
    DISABLED = "disabled"
    EDITABLE = "editable"
    NOT_EDITABLE = "not-editable"
    HAS_TEXT = "has-text"
    HAS_VALUE = "has-value"


class Modifier(str, Enum):
    """Keyboard modifiers held during pointer interactions."""

    ALT = "Alt"
    CONTROL = "Control"
    META = "Meta"
    SHIFT = "Shift"


def _usable_query(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"query must be a non-blank string, got {value!r}")
    return value


class Query(BaseModel):
    """A bare query string in the host query language."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _check_value(cls, value: Any) -> str:
        return _usable_query(value)


class Chain(BaseModel):
    """A base query with optional text filter, nested spec and state."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: str
    has_text: str | re.Pattern[str] | None = None
    sub_selector: Query | Chain | None = None
    state: StateKind | None = None
    timeout_ms: int | None = Field(default=None, ge=0)
    modifiers: frozenset[Modifier] | None = None

    @field_validator("base", mode="before")
    @classmethod
    def _check_base(cls, value: Any) -> str:
        return _usable_query(value)

    @field_validator("sub_selector", mode="before")
    @classmethod
    def _coerce_sub_selector(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Query(value=_usable_query(value))
        if value is None or isinstance(value, (Query, Chain, Mapping)):
            return value
        raise ValueError(f"sub_selector must be a selector spec, got {value!r}")


SelectorSpec = Union[Query, Chain]
Chain.model_rebuild()


class ResolveOptions(BaseModel):
    """Per-call options; they act as the outermost level of a chain."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    has_text: str | re.Pattern[str] | None = None
    state: StateKind | None = None
    timeout_ms: int | None = Field(default=None, ge=0)
    modifiers: frozenset[Modifier] | None = None


def as_spec(value: Any) -> SelectorSpec:
    """Coerce a string, mapping or model into a selector spec.

    Raises:
        InvalidSpec: If the value cannot describe a selector.
    """
    if isinstance(value, (Query, Chain)):
        return value
    if isinstance(value, Mapping):
        return _chain_from_mapping(value)
    if isinstance(value, str):
        try:
            return Query(value=value)
        except ValidationError as exc:
            raise InvalidSpec(_first_error(exc)) from exc
    raise InvalidSpec(f"unsupported selector type {type(value).__name__}")


def _chain_from_mapping(value: Mapping) -> Chain:
    """Validate nested mappings innermost first, one level per call.

    Each level is validated with its child already built, so nesting depth
    never reaches pydantic's recursion guard.
    """
    levels: list[Mapping] = []
    current: Any = value
    while isinstance(current, Mapping):
        levels.append(current)
        current = current.get("sub_selector")

    built: Any = current
    for depth in range(len(levels) - 1, -1, -1):
        fields = dict(levels[depth])
        if "sub_selector" in fields:
            fields["sub_selector"] = built
        try:
            built = Chain.model_validate(fields)
        except ValidationError as exc:
            detail = _first_error(exc)
            if depth:
                detail = f"level {depth}: {detail}"
            raise InvalidSpec(detail) from exc
    return built


def as_options(value: Any) -> ResolveOptions:
    """Coerce ``None``, a mapping or a model into resolve options."""
    if value is None:
        return ResolveOptions()
    if isinstance(value, ResolveOptions):
        return value
    if isinstance(value, Mapping):
        try:
            return ResolveOptions.model_validate(value)
        except ValidationError as exc:
            raise InvalidSpec(_first_error(exc)) from exc
    raise InvalidSpec(f"unsupported options type {type(value).__name__}")


def chain(
    base: str,
    *,
    has_text: TextMatcher | None = None,
    sub_selector: Any = None,
    state: StateKind | str | None = None,
    timeout_ms: int | None = None,
    modifiers: set[Modifier] | frozenset[Modifier] | None = None,
) -> Chain:
    """Build a :class:`Chain`, reporting bad input as :class:`InvalidSpec`."""
    if isinstance(sub_selector, Mapping):
        sub_selector = _chain_from_mapping(sub_selector)
    try:
        return Chain(
            base=base,
            has_text=has_text,
            sub_selector=sub_selector,
            state=state,
            timeout_ms=timeout_ms,
            modifiers=frozenset(modifiers) if modifiers is not None else None,
        )
    except ValidationError as exc:
        raise InvalidSpec(_first_error(exc)) from exc


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]
