from typing import Any

from rigging.errors import FixtureOperationError, RiggingError
from rigging.logging import FixtureError, Logger
from rigging.models import MountInput
from rigging.registry import ClientRegistry


class SecretsFixture:
    """
    Test-time helper for a key/value mount on the secrets backend.

    Failures are logged and raised to the calling test as
    FixtureOperationError. They never abort the run and the helper
    stays usable afterwards.
    """

    def __init__(
        self,
        registry: ClientRegistry,
        mount_path: str,
        logger: Logger | None = None,
    ) -> None:
        self._registry = registry
        self.mount_path = mount_path.strip("/")
        self.version = "1"
        self._logger = logger or Logger()

    async def mount(self, version: str = "1") -> None:
        try:
            await self._registry.default().secrets.mount(
                self.mount_path,
                MountInput(
                    type="kv",
                    description="test mount",
                    options={"version": version},
                ),
            )

        except RiggingError as err:
            raise await self._failed("mount", self.mount_path, err) from err

        self.version = version

    async def create_secret(self, path: str, data: dict[str, Any]) -> None:
        body = {"data": data} if self.version == "2" else data

        try:
            await self._registry.default().secrets.write(
                self._data_path(path),
                body,
            )

        except RiggingError as err:
            raise await self._failed("create_secret", path, err) from err

    async def read_secret(self, path: str) -> dict[str, Any] | None:
        try:
            data = await self._registry.default().secrets.read(
                self._data_path(path),
            )

        except RiggingError as err:
            raise await self._failed("read_secret", path, err) from err

        if data is not None and self.version == "2":
            return data.get("data")

        return data

    async def delete_secret(self, path: str) -> None:
        try:
            await self._registry.default().secrets.delete(
                self._data_path(path),
            )

        except RiggingError as err:
            raise await self._failed("delete_secret", path, err) from err

    def _data_path(self, path: str) -> str:
        path = path.strip("/")
        if self.version == "2":
            return f"{self.mount_path}/data/{path}"

        return f"{self.mount_path}/{path}"

    async def _failed(
        self,
        operation: str,
        path: str,
        err: Exception,
    ) -> FixtureOperationError:
        await self._logger.log(FixtureError(
            message=f"Secrets fixture {operation} failed",
            fixture="secrets",
            operation=operation,
            path=path,
            error=str(err),
        ))

        return FixtureOperationError("secrets", operation, path, str(err))
