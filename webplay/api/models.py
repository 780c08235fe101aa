"""HTTP request and response models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel

ResponseBodyFormat = Literal["json", "text", "buffer", "none"]


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"


class ApiResponse(BaseModel):
    """What an API request action returns."""

    status: int
    body: Any = None
    headers: dict[str, str] = {}
    duration_ms: float = 0.0
