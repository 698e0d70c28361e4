from typing import Awaitable, Callable

from rigging.launcher import SchedulerServiceHandle, SecretsServiceHandle
from rigging.logging import Logger, TeardownError, TeardownInfo
from rigging.registry import ClientRegistry


class TeardownCoordinator:
    """
    Stops every backend resource exactly once, in a fixed order:
    secrets, scheduler, each catalog, then each ClientSet.

    Each step runs even if an earlier one failed. Failures are logged
    and returned. The second call does nothing and returns an empty
    list.
    """

    def __init__(
        self,
        registry: ClientRegistry,
        logger: Logger | None = None,
    ) -> None:
        self._registry = registry
        self.secrets: SecretsServiceHandle | None = None
        self.scheduler: SchedulerServiceHandle | None = None
        self._stopped = False
        self._logger = logger or Logger()

    @property
    def stopped(self) -> bool:
        return self._stopped

    async def stop(self) -> list[Exception]:
        if self._stopped:
            return []

        self._stopped = True
        self._registry.seal()

        errors: list[Exception] = []

        if self.secrets is not None:
            await self._run_step("secrets", self.secrets.stop, errors)

        if self.scheduler is not None:
            await self._run_step("scheduler", self.scheduler.stop, errors)

        for handle in self._registry.catalogs():
            await self._run_step(
                f"catalog:{handle.key.partition}",
                handle.stop,
                errors,
            )

        for client_set in self._registry.all():
            await self._run_step(
                f"clients:{client_set.key.partition}",
                client_set.stop,
                errors,
            )

        self._registry.drain()

        await self._logger.log(TeardownInfo(
            message=f"Teardown complete with {len(errors)} error(s)",
            step="complete",
        ))

        return errors

    async def _run_step(
        self,
        step: str,
        stop: Callable[[], Awaitable[None]],
        errors: list[Exception],
    ) -> None:
        try:
            await stop()

            await self._logger.log(TeardownInfo(
                message=f"Stopped {step}",
                step=step,
            ))

        except Exception as err:
            errors.append(err)

            await self._logger.log(TeardownError(
                message=f"Failed stopping {step}",
                step=step,
                error=str(err),
            ))
