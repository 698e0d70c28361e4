from typing import Any

import httpx
import msgspec

from rigging.errors import BackendRequestError
from rigging.models import MountInput, SecretData, SecretsHealth

from .http_backend_client import HTTPBackendClient


class HTTPSecretsClient(HTTPBackendClient):
    backend = "secrets"

    def __init__(
        self,
        address: str,
        token: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            address,
            timeout=timeout,
            headers={"X-Vault-Token": token},
            transport=transport,
        )

    async def health(self) -> SecretsHealth:
        return await self._request_as(
            SecretsHealth,
            "GET",
            "/v1/sys/health",
        )

    async def mount(self, path: str, mount: MountInput) -> None:
        await self._request(
            "POST",
            f"/v1/sys/mounts/{path.strip('/')}",
            body=mount,
        )

    async def write(
        self,
        path: str,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        response = await self._request(
            "POST",
            f"/v1/{path.strip('/')}",
            body=data,
        )

        return self._decode_data(response, "POST", path)

    async def read(self, path: str) -> dict[str, Any] | None:
        response = await self._request(
            "GET",
            f"/v1/{path.strip('/')}",
            allow_not_found=True,
        )

        if response is None:
            return None

        return self._decode_data(response, "GET", path)

    async def delete(self, path: str) -> None:
        await self._request(
            "DELETE",
            f"/v1/{path.strip('/')}",
        )

    def _decode_data(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> dict[str, Any] | None:
        if response.status_code == 204 or not response.content:
            return None

        try:
            return msgspec.json.decode(response.content, type=SecretData).data

        except (msgspec.DecodeError, msgspec.ValidationError) as err:
            raise BackendRequestError(
                self.backend,
                method,
                path,
                status_code=response.status_code,
                body=f"malformed response: {err}",
            ) from err
