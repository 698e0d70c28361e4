import pytest

from rigging.clients import ClientSet
from rigging.errors import RegistrySealedError
from rigging.launcher import CatalogHandle, SchedulerServiceHandle, SecretsServiceHandle
from rigging.registry import ClientRegistry
from rigging.teardown import TeardownCoordinator
from rigging.tenancy import TenancyKey

from tests.unit.mocks import MockClientFactory, MockProcessSpawner


async def populate(
    registry: ClientRegistry,
    spawner: MockProcessSpawner,
    factory: MockClientFactory,
    partitions: list[str],
) -> TeardownCoordinator:
    coordinator = TeardownCoordinator(registry)
    coordinator.secrets = SecretsServiceHandle(
        await spawner.spawn("/usr/local/bin/vault", []),
        "http://127.0.0.1:8200",
        "a_token",
    )
    coordinator.scheduler = SchedulerServiceHandle(
        await spawner.spawn("/usr/local/bin/nomad", []),
        "http://127.0.0.1:4646",
    )

    for partition in partitions:
        key = TenancyKey(partition)
        registry.put_catalog(
            key,
            CatalogHandle(
                await spawner.spawn("/usr/local/bin/consul", []),
                key,
                "http://127.0.0.1:8500",
                "dc1",
                f"ct-test-{partition}",
            ),
        )

        client_set = ClientSet(key, factory)
        client_set.connect_catalog("http://127.0.0.1:8500")
        client_set.connect_secrets()
        client_set.connect_scheduler()
        registry.put(key, client_set)

    return coordinator


def stops(events: list[str]) -> list[str]:
    return [event for event in events if event.startswith("stop:")]


class TestTeardownCoordinator:
    @pytest.mark.asyncio
    async def test_stops_in_fixed_order(
        self,
        registry: ClientRegistry,
        spawner: MockProcessSpawner,
        client_factory: MockClientFactory,
        events: list[str],
    ) -> None:
        coordinator = await populate(registry, spawner, client_factory, ["default", "p1"])

        errors = await coordinator.stop()

        assert errors == []
        assert stops(events) == [
            "stop:vault",
            "stop:nomad",
            "stop:consul",
            "stop:consul",
        ]
        assert all(client.closed for client in client_factory.catalog_clients)
        assert all(client.closed for client in client_factory.secrets_clients)
        assert all(client.closed for client in client_factory.scheduler_clients)
        assert registry.all() == []
        assert registry.catalogs() == []

    @pytest.mark.asyncio
    async def test_second_stop_is_a_no_op(
        self,
        registry: ClientRegistry,
        spawner: MockProcessSpawner,
        client_factory: MockClientFactory,
        events: list[str],
    ) -> None:
        coordinator = await populate(registry, spawner, client_factory, ["default"])

        await coordinator.stop()
        recorded = list(events)

        assert await coordinator.stop() == []
        assert events == recorded
        assert all(process.stop_calls == 1 for process in spawner.spawned)

    @pytest.mark.asyncio
    async def test_failed_step_does_not_abort_later_steps(
        self,
        registry: ClientRegistry,
        client_factory: MockClientFactory,
        events: list[str],
    ) -> None:
        spawner = MockProcessSpawner(events=events, failing_stops={"vault"})
        coordinator = await populate(registry, spawner, client_factory, ["default"])

        errors = await coordinator.stop()

        assert len(errors) == 1
        assert isinstance(errors[0], OSError)
        assert stops(events) == ["stop:vault", "stop:nomad", "stop:consul"]

    @pytest.mark.asyncio
    async def test_missing_handles_are_skipped(self, registry: ClientRegistry) -> None:
        coordinator = TeardownCoordinator(registry)

        assert await coordinator.stop() == []
        assert coordinator.stopped

    @pytest.mark.asyncio
    async def test_registry_is_sealed(
        self,
        registry: ClientRegistry,
        client_factory: MockClientFactory,
    ) -> None:
        coordinator = TeardownCoordinator(registry)
        await coordinator.stop()

        with pytest.raises(RegistrySealedError):
            registry.put(TenancyKey("p1"), ClientSet(TenancyKey("p1"), client_factory))
