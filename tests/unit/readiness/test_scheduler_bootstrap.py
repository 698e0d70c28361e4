import pytest

from rigging.errors import (
    CanaryAllocationError,
    DeadlineExceededError,
    FixtureFileError,
    SchedulerInitError,
)
from rigging.readiness import AsyncInitFuture, SchedulerBootstrap, compile_task_states

from tests.unit.mocks import (
    FakeClock,
    MockClientFactory,
    SchedulerState,
    allocation,
)


async def run_bootstrap(
    factory: MockClientFactory,
    canary_job_path: str,
    clock: FakeClock,
):
    client = factory.scheduler()
    future = AsyncInitFuture("scheduler")
    bootstrap = SchedulerBootstrap(
        client,
        canary_job_path,
        clock=clock,
        interval=0.1,
        timeout=30,
    )

    await bootstrap.run(future)
    result = await future.wait(timeout=1)

    return result, client


class TestSchedulerBootstrap:
    @pytest.mark.asyncio
    async def test_resolves_after_running_allocation(
        self,
        client_factory: MockClientFactory,
        scheduler_state: SchedulerState,
        canary_job_path: str,
        fake_clock: FakeClock,
    ) -> None:
        scheduler_state.agent_failures = 2
        scheduler_state.allocations = [
            [],
            [allocation(status="pending")],
            [allocation(status="running")],
        ]

        result, client = await run_bootstrap(client_factory, canary_job_path, fake_clock)

        assert result.ok
        assert scheduler_state.agent_polls == 3
        assert scheduler_state.allocation_polls == 3
        assert scheduler_state.registered_jobs[0]["ID"] == "example"
        assert scheduler_state.registered_jobs[0]["TaskGroups"][0]["Name"] == "group"
        assert client.closed

    @pytest.mark.asyncio
    async def test_more_than_one_allocation_fails_immediately(
        self,
        client_factory: MockClientFactory,
        scheduler_state: SchedulerState,
        canary_job_path: str,
        fake_clock: FakeClock,
    ) -> None:
        scheduler_state.allocations = [
            [
                allocation(alloc_id="a", events=["Received", "Started"]),
                allocation(alloc_id="b", events=["Received"]),
            ],
        ]

        result, client = await run_bootstrap(client_factory, canary_job_path, fake_clock)

        assert isinstance(result.error, CanaryAllocationError)
        assert result.error.allocations == 2
        assert "task: [Received, Started]" in result.error.diagnostics
        assert scheduler_state.allocation_polls == 1
        assert client.closed

    @pytest.mark.asyncio
    async def test_pending_until_deadline_is_not_success(
        self,
        client_factory: MockClientFactory,
        scheduler_state: SchedulerState,
        canary_job_path: str,
        fake_clock: FakeClock,
    ) -> None:
        scheduler_state.allocations = [[allocation(status="pending")]]

        result, _ = await run_bootstrap(client_factory, canary_job_path, fake_clock)

        assert result.ok is False
        assert isinstance(result.error, SchedulerInitError)
        assert isinstance(result.error.__cause__, DeadlineExceededError)
        assert scheduler_state.allocation_polls > 1

    @pytest.mark.asyncio
    async def test_rejected_job_fails_future(
        self,
        client_factory: MockClientFactory,
        scheduler_state: SchedulerState,
        canary_job_path: str,
        fake_clock: FakeClock,
    ) -> None:
        scheduler_state.reject_job = True

        result, _ = await run_bootstrap(client_factory, canary_job_path, fake_clock)

        assert isinstance(result.error, SchedulerInitError)
        assert scheduler_state.allocation_polls == 0

    @pytest.mark.asyncio
    async def test_missing_job_file_fails_future(
        self,
        client_factory: MockClientFactory,
        scheduler_state: SchedulerState,
        tmp_path,
        fake_clock: FakeClock,
    ) -> None:
        result, client = await run_bootstrap(
            client_factory,
            str(tmp_path / "missing.json"),
            fake_clock,
        )

        assert isinstance(result.error, SchedulerInitError)
        assert isinstance(result.error.__cause__, FixtureFileError)
        assert scheduler_state.agent_polls == 0
        assert client.closed

    @pytest.mark.asyncio
    async def test_job_without_id_fails_future(
        self,
        client_factory: MockClientFactory,
        tmp_path,
        fake_clock: FakeClock,
    ) -> None:
        job_file = tmp_path / "job.json"
        job_file.write_text('{"Name": "example"}')

        result, _ = await run_bootstrap(client_factory, str(job_file), fake_clock)

        assert isinstance(result.error.__cause__, FixtureFileError)

    @pytest.mark.asyncio
    async def test_malformed_job_file_fails_future(
        self,
        client_factory: MockClientFactory,
        tmp_path,
        fake_clock: FakeClock,
    ) -> None:
        job_file = tmp_path / "job.json"
        job_file.write_text("{not json")

        result, _ = await run_bootstrap(client_factory, str(job_file), fake_clock)

        assert isinstance(result.error.__cause__, FixtureFileError)


def test_compile_task_states() -> None:
    stub = allocation(events=["Received", "Task Setup", "Started"])

    assert compile_task_states(stub) == "task: [Received, Task Setup, Started] "
