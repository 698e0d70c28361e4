import asyncio
import pathlib
from typing import Any

import msgspec

from rigging.clients import SchedulerClient
from rigging.errors import (
    BackendRequestError,
    CanaryAllocationError,
    FixtureFileError,
    NotReadyError,
    SchedulerInitError,
)
from rigging.logging import BootstrapDebug, BootstrapInfo, Logger
from rigging.models import AllocationStub, CanaryJob
from rigging.runtime import Clock

from .init_future import AsyncInitFuture
from .polling import poll_until


def compile_task_states(allocation: AllocationStub) -> str:
    """Render ``task: [EventType, EventType]`` for each task in the allocation."""
    out = ""
    for name, state in (allocation.task_states or {}).items():
        events = ", ".join(event.type for event in state.events or [])
        out += f"{name}: [{events}] "

    return out


class SchedulerBootstrap:
    """
    Brings the scheduler to a usable state by submitting a canary job
    and waiting for exactly one running allocation of it.
    """

    def __init__(
        self,
        client: SchedulerClient,
        canary_job_path: str,
        clock: Clock | None = None,
        interval: float = 0.1,
        timeout: float = 30.0,
        logger: Logger | None = None,
    ) -> None:
        self._client = client
        self._canary_job_path = canary_job_path
        self._clock = clock or Clock()
        self._interval = interval
        self._timeout = timeout
        self._logger = logger or Logger()

    async def run(self, future: AsyncInitFuture) -> None:
        try:
            job_document, job = await self._load_job()

            agent = await poll_until(
                self._client.agent_self,
                self._interval,
                self._timeout,
                self._clock,
                description="scheduler agent",
            )

            await self._logger.log(BootstrapInfo(
                message=f"Scheduler v{agent.build} responding",
                job_id=job.id,
            ))

            try:
                await self._client.register_job(job_document)

            except BackendRequestError as err:
                raise SchedulerInitError(
                    f"Err. - failed registering canary job '{job.id}': {err}"
                ) from err

            allocation = await poll_until(
                lambda: self._running_allocation(job.id),
                self._interval,
                self._timeout,
                self._clock,
                description=f"canary job '{job.id}' allocation",
            )

            await self._logger.log(BootstrapInfo(
                message=f"Scheduler started: {compile_task_states(allocation)}",
                job_id=job.id,
            ))

            future.resolve()

        except asyncio.CancelledError:
            if future.resolved is False:
                future.resolve(
                    SchedulerInitError("Err. - scheduler bootstrap was cancelled")
                )

            raise

        except SchedulerInitError as err:
            future.resolve(err)

        except Exception as err:
            error = SchedulerInitError(f"Err. - scheduler bootstrap failed: {err}")
            error.__cause__ = err
            future.resolve(error)

        finally:
            await self._client.close()

    async def _load_job(self) -> tuple[dict[str, Any], CanaryJob]:
        path = pathlib.Path(self._canary_job_path)

        try:
            data = await asyncio.to_thread(path.read_bytes)

        except OSError as err:
            raise FixtureFileError(str(path), str(err)) from err

        try:
            document = msgspec.json.decode(data, type=dict[str, Any])
            job = msgspec.convert(document, CanaryJob)

        except (msgspec.DecodeError, msgspec.ValidationError) as err:
            raise FixtureFileError(str(path), str(err)) from err

        if not job.id:
            raise FixtureFileError(str(path), "job has no ID")

        return document, job

    async def _running_allocation(self, job_id: str) -> AllocationStub:
        allocations = await self._client.job_allocations(job_id, all=True)

        if len(allocations) > 1:
            raise CanaryAllocationError(
                job_id,
                len(allocations),
                f"{compile_task_states(allocations[0])}\n{compile_task_states(allocations[1])}",
            )

        elif len(allocations) == 0:
            await self._logger.log(BootstrapDebug(
                message="Waiting for canary allocation",
                job_id=job_id,
                allocations=0,
            ))

            raise NotReadyError("Err. - expected 1 scheduler allocation but found none")

        allocation = allocations[0]
        if allocation.client_status != "running":
            await self._logger.log(BootstrapDebug(
                message="Waiting for canary allocation to run",
                job_id=job_id,
                allocations=1,
                status=allocation.client_status,
            ))

            raise NotReadyError(
                f"Err. - expected scheduler allocation running but found '{allocation.client_status}'\n{compile_task_states(allocation)}"
            )

        return allocation
