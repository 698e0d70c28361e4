import asyncio

from rigging.runtime import ProcessHandle


class SchedulerServiceHandle:
    """
    Owns the scheduler process and the background task bootstrapping
    it. Stopping the handle cancels a bootstrap still in flight.
    """

    def __init__(
        self,
        process: ProcessHandle | None,
        address: str,
        bootstrap_task: asyncio.Task | None = None,
        stop_timeout: float = 10.0,
    ) -> None:
        self.process = process
        self.address = address
        self.bootstrap_task = bootstrap_task
        self._stop_timeout = stop_timeout
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    async def stop(self) -> None:
        if self._stopped:
            return

        self._stopped = True

        if self.bootstrap_task is not None and self.bootstrap_task.done() is False:
            self.bootstrap_task.cancel()
            await asyncio.gather(
                self.bootstrap_task,
                return_exceptions=True,
            )

        if self.process is None:
            return

        await self.process.stop(timeout=self._stop_timeout)
