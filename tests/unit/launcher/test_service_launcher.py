import asyncio
import json
import os

import pytest

from rigging.env import Env
from rigging.errors import BackendNotReadyError, ExecutableNotFoundError
from rigging.launcher import (
    CatalogHandle,
    SchedulerServiceHandle,
    SecretsServiceHandle,
    ServiceLauncher,
    allocate_ports,
)
from rigging.tenancy import TenancyKey

from tests.unit.mocks import (
    CatalogState,
    FakeClock,
    MockClientFactory,
    MockProcessSpawner,
)


@pytest.fixture
def launcher(
    env: Env,
    client_factory: MockClientFactory,
    spawner: MockProcessSpawner,
    fake_clock: FakeClock,
) -> ServiceLauncher:
    return ServiceLauncher(
        env,
        factory=client_factory,
        spawner=spawner,
        clock=fake_clock,
    )


# =============================================================================
# Secrets
# =============================================================================


class TestStartSecretsService:
    @pytest.mark.asyncio
    async def test_spawns_dev_server_with_root_token(
        self,
        launcher: ServiceLauncher,
        spawner: MockProcessSpawner,
    ) -> None:
        handle = await launcher.start_secrets_service()

        process = spawner.by_name("vault")[0]
        assert process.args == [
            "server",
            "-dev",
            "-dev-root-token-id",
            "a_token",
            "-dev-no-store-token",
        ]
        assert handle.root_token == "a_token"
        assert handle.address == "http://127.0.0.1:8200"

    @pytest.mark.asyncio
    async def test_missing_executable_is_fatal(
        self,
        env: Env,
        client_factory: MockClientFactory,
        fake_clock: FakeClock,
    ) -> None:
        launcher = ServiceLauncher(
            env,
            factory=client_factory,
            spawner=MockProcessSpawner(missing={"vault"}),
            clock=fake_clock,
        )

        with pytest.raises(ExecutableNotFoundError):
            await launcher.start_secrets_service()


# =============================================================================
# Scheduler
# =============================================================================


class TestStartSchedulerService:
    @pytest.mark.asyncio
    async def test_returns_handle_and_future(
        self,
        launcher: ServiceLauncher,
        spawner: MockProcessSpawner,
    ) -> None:
        handle, future = await launcher.start_scheduler_service()

        process = spawner.by_name("nomad")[0]
        assert process.args[:3] == ["agent", "-dev", "-node=test"]
        assert "-vault-enabled=false" in process.args
        assert "-log-level=error" in process.args
        assert handle.bootstrap_task is not None

        result = await future.wait(timeout=5)
        assert result.ok

        await handle.stop()

    @pytest.mark.asyncio
    async def test_stop_cancels_running_bootstrap(
        self,
        launcher: ServiceLauncher,
        client_factory: MockClientFactory,
    ) -> None:
        client_factory.scheduler_state.agent_failures = 10_000

        handle, future = await launcher.start_scheduler_service()
        await asyncio.sleep(0)
        await handle.stop()

        assert handle.bootstrap_task.cancelled()
        assert future.resolved
        assert client_factory.scheduler_clients[0].closed


# =============================================================================
# Catalog
# =============================================================================


class TestStartCatalogService:
    @pytest.mark.asyncio
    async def test_default_partition_uses_dc1(
        self,
        launcher: ServiceLauncher,
        spawner: MockProcessSpawner,
    ) -> None:
        handle = await launcher.start_catalog_service(TenancyKey.default())

        try:
            assert handle.datacenter == "dc1"
            assert handle.node_name == "ct-test-default"

            process = spawner.by_name("consul")[0]
            config_arg = process.args[1]
            assert process.args[0] == "agent"
            assert config_arg.startswith("-config-file=")

            with open(config_arg.split("=", 1)[1]) as config_file:
                config = json.load(config_file)

            assert config["node_name"] == "ct-test-default"
            assert config["datacenter"] == "dc1"
            assert config["log_level"] == "warn"
            assert config["connect"]["enabled"] is True
            assert handle.http_address == f"http://127.0.0.1:{config['ports']['http']}"

        finally:
            await handle.stop()

        assert os.path.exists(handle.data_directory) is False

    @pytest.mark.asyncio
    async def test_partition_names_its_datacenter(
        self,
        launcher: ServiceLauncher,
    ) -> None:
        handle = await launcher.start_catalog_service(TenancyKey("p1"))
        await handle.stop()

        assert handle.datacenter == "p1"
        assert handle.node_name == "ct-test-p1"

    @pytest.mark.asyncio
    async def test_never_ready_stops_process(
        self,
        env: Env,
        spawner: MockProcessSpawner,
        fake_clock: FakeClock,
    ) -> None:
        factory = MockClientFactory(catalog=CatalogState(leader=""))
        launcher = ServiceLauncher(
            env,
            factory=factory,
            spawner=spawner,
            clock=fake_clock,
        )

        with pytest.raises(BackendNotReadyError):
            await launcher.start_catalog_service(TenancyKey.default())

        process = spawner.by_name("consul")[0]
        assert process.stop_calls == 1
        assert fake_clock.now == pytest.approx(2.0)
        assert all(client.closed for client in factory.catalog_clients)


# =============================================================================
# Handles
# =============================================================================


class TestHandles:
    @pytest.mark.asyncio
    async def test_never_started_handles_stop_cleanly(self) -> None:
        handles = [
            SecretsServiceHandle(None, "http://127.0.0.1:8200", "a_token"),
            SchedulerServiceHandle(None, "http://127.0.0.1:4646"),
            CatalogHandle(None, TenancyKey.default(), "http://127.0.0.1:8500", "dc1", "ct-test-default"),
        ]

        for handle in handles:
            await handle.stop()
            await handle.stop()
            assert handle.stopped

    @pytest.mark.asyncio
    async def test_stop_is_idempotent(
        self,
        launcher: ServiceLauncher,
        spawner: MockProcessSpawner,
    ) -> None:
        handle = await launcher.start_secrets_service()

        await handle.stop()
        await handle.stop()

        assert spawner.by_name("vault")[0].stop_calls == 1


def test_allocate_ports_are_distinct() -> None:
    ports = allocate_ports(6)

    assert len(set(ports)) == 6
    assert all(port > 0 for port in ports)
