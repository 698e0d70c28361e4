from rigging.runtime import ProcessHandle


class SecretsServiceHandle:
    def __init__(
        self,
        process: ProcessHandle | None,
        address: str,
        root_token: str,
        mount_path: str | None = None,
        stop_timeout: float = 10.0,
    ) -> None:
        self.process = process
        self.address = address
        self.root_token = root_token
        self.mount_path = mount_path
        self._stop_timeout = stop_timeout
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    async def stop(self) -> None:
        if self._stopped:
            return

        self._stopped = True

        if self.process is None:
            return

        await self.process.stop(timeout=self._stop_timeout)
