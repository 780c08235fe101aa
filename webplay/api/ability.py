"""The ability to call HTTP APIs."""

from __future__ import annotations

import time
from typing import Any

import httpx

from webplay.abilities import Ability
from webplay.api.models import ApiResponse, RequestMethod, ResponseBodyFormat
from webplay.exceptions import RequestError
from webscope.logger import get_logger

log = get_logger(__name__)


class UseAPI(Ability):
    """Send HTTP requests through an ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str = "",
        timeout: float = 30.0,
    ) -> None:
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    @classmethod
    def using(cls, client: httpx.AsyncClient) -> UseAPI:
        return cls(client)

    def get_client(self) -> httpx.AsyncClient:
        return self._client

    async def close(self) -> None:
        await self._client.aclose()

    async def send_request(
        self,
        method: RequestMethod | str,
        url: str,
        headers: dict[str, str] | None = None,
        data: Any = None,
        response_format: ResponseBodyFormat = "json",
    ) -> ApiResponse:
        """Send a request and decode the body as ``response_format``.

        Mappings and lists are sent as JSON; strings and bytes as raw content.

        Raises:
            RequestError: On transport errors or an undecodable body.
        """
        method = RequestMethod(method)
        kwargs: dict[str, Any] = {"headers": headers}
        if isinstance(data, (dict, list)):
            kwargs["json"] = data
        elif data is not None:
            kwargs["content"] = data

        start = time.monotonic()
        try:
            response = await self._client.request(method.value, url, **kwargs)
        except httpx.HTTPError as exc:
            raise RequestError(method.value, url, str(exc)) from exc
        duration_ms = (time.monotonic() - start) * 1000

        body: Any = None
        if method is not RequestMethod.HEAD:
            try:
                body = self._decode(response, response_format)
            except ValueError as exc:
                raise RequestError(
                    method.value, url, f"cannot decode body as {response_format}"
                ) from exc

        log.debug(
            "api_request",
            method=method.value,
            url=url,
            status=response.status_code,
            duration_ms=round(duration_ms, 1),
        )
        return ApiResponse(
            status=response.status_code,
            body=body,
            headers=dict(response.headers),
            duration_ms=duration_ms,
        )

    @staticmethod
    def _decode(response: httpx.Response, response_format: ResponseBodyFormat) -> Any:
        if response_format == "none":
            return None
        if response_format == "buffer":
            return response.content
        if response_format == "text":
            return response.text
        if not response.content:
            return None
        return response.json()
