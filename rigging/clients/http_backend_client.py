from typing import Any, TypeVar

import httpx
import msgspec

from rigging.errors import BackendRequestError


T = TypeVar("T")


class HTTPBackendClient:
    backend: str = "backend"

    def __init__(
        self,
        address: str,
        timeout: float = 5.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.address = address
        self._client = httpx.AsyncClient(
            base_url=address,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )
        self._closed = False

    async def close(self) -> None:
        if self._closed:
            return

        self._closed = True
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, str] | None = None,
        allow_not_found: bool = False,
    ) -> httpx.Response | None:
        content = msgspec.json.encode(body) if body is not None else None

        try:
            response = await self._client.request(
                method,
                path,
                content=content,
                params=params,
                headers={"Content-Type": "application/json"} if content else None,
            )

        except httpx.HTTPError as err:
            raise BackendRequestError(
                self.backend,
                method,
                path,
                body=str(err),
            ) from err

        if allow_not_found and response.status_code == 404:
            return None

        if response.is_success is False:
            raise BackendRequestError(
                self.backend,
                method,
                path,
                status_code=response.status_code,
                body=response.text,
            )

        return response

    async def _request_as(
        self,
        response_type: type[T],
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, str] | None = None,
    ) -> T:
        response = await self._request(
            method,
            path,
            body=body,
            params=params,
        )

        try:
            return msgspec.json.decode(response.content, type=response_type)

        except (msgspec.DecodeError, msgspec.ValidationError) as err:
            raise BackendRequestError(
                self.backend,
                method,
                path,
                status_code=response.status_code,
                body=f"malformed response: {err}",
            ) from err
