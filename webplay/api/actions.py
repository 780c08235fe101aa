"""HTTP request actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from webplay.actions import Action
from webplay.api.ability import UseAPI
from webplay.api.models import ApiResponse, RequestMethod, ResponseBodyFormat

if TYPE_CHECKING:
    from webplay.actor import Actor

R = TypeVar("R", bound="Request")


class Request(Action):
    """Base class for request actions; configure with the ``with_*`` chain.

    Example::

        Post.to("/users").with_headers({"X-Token": "t"}).with_data({"name": "Ada"})
    """

    method: RequestMethod

    def __init__(self, url: str) -> None:
        self.url = url
        self.headers: dict[str, str] = {}
        self.data: Any = None
        self.response_format: ResponseBodyFormat = "json"

    def with_headers(self: R, headers: dict[str, str]) -> R:
        self.headers = headers
        return self

    def with_data(self: R, data: Any) -> R:
        self.data = data
        return self

    def with_response_format(self: R, response_format: ResponseBodyFormat) -> R:
        self.response_format = response_format
        return self

    async def perform_as(self, actor: Actor) -> ApiResponse:
        return await UseAPI.of(actor).send_request(
            self.method,
            self.url,
            self.headers or None,
            self.data,
            self.response_format,
        )


class Get(Request):
    method = RequestMethod.GET

    @classmethod
    def from_url(cls, url: str) -> Get:
        return cls(url)


class Delete(Request):
    method = RequestMethod.DELETE

    @classmethod
    def from_url(cls, url: str) -> Delete:
        return cls(url)


class Head(Request):
    method = RequestMethod.HEAD

    @classmethod
    def from_url(cls, url: str) -> Head:
        return cls(url)


class Post(Request):
    method = RequestMethod.POST

    @classmethod
    def to(cls, url: str) -> Post:
        return cls(url)


class Put(Request):
    method = RequestMethod.PUT

    @classmethod
    def to(cls, url: str) -> Put:
        return cls(url)


class Patch(Request):
    method = RequestMethod.PATCH

    @classmethod
    def to(cls, url: str) -> Patch:
        return cls(url)
