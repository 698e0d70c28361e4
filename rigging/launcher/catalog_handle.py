import asyncio
import shutil

from rigging.runtime import ProcessHandle
from rigging.tenancy import TenancyKey


class CatalogHandle:
    def __init__(
        self,
        process: ProcessHandle | None,
        key: TenancyKey,
        http_address: str,
        datacenter: str,
        node_name: str,
        data_directory: str | None = None,
        stop_timeout: float = 10.0,
    ) -> None:
        self.process = process
        self.key = key
        self.http_address = http_address
        self.datacenter = datacenter
        self.node_name = node_name
        self.data_directory = data_directory
        self._stop_timeout = stop_timeout
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    async def stop(self) -> None:
        if self._stopped:
            return

        self._stopped = True

        try:
            if self.process is not None:
                await self.process.stop(timeout=self._stop_timeout)

        finally:
            if self.data_directory:
                await asyncio.to_thread(
                    shutil.rmtree,
                    self.data_directory,
                    ignore_errors=True,
                )
