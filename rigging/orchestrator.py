from typing import Awaitable, Callable

from rigging.clients import ClientFactory, ClientSet
from rigging.env import Env, load_env
from rigging.errors import (
    BackendNotReadyError,
    BackendRequestError,
    SetupFatalError,
)
from rigging.launcher import CatalogHandle, ServiceLauncher
from rigging.logging import Logger, LoggingConfig, SetupFatal, SetupInfo
from rigging.registry import ClientRegistry
from rigging.runtime import Clock, ProcessSpawner
from rigging.seeding import ResourceSeeder
from rigging.teardown import TeardownCoordinator
from rigging.tenancy import TenancyHelper, TenancyKey


TestRun = Callable[[ClientRegistry], Awaitable[int]]


class Orchestrator:
    """
    Owns one full backend lifecycle for a test run.

    ``async with Orchestrator() as orchestrator`` runs setup on entry
    and teardown on every exit path. When setup fails inside
    ``__aenter__`` teardown runs before the error propagates.
    """

    def __init__(
        self,
        env: Env | None = None,
        factory: ClientFactory | None = None,
        spawner: ProcessSpawner | None = None,
        clock: Clock | None = None,
    ) -> None:
        if env is None:
            env = load_env()

        self.env = env
        self.registry = ClientRegistry()

        self.logger = Logger()
        self._clock = clock or Clock()
        self._factory = factory or ClientFactory(env)
        self._launcher = ServiceLauncher(
            env,
            factory=self._factory,
            spawner=spawner,
            clock=self._clock,
            logger=self.logger,
        )
        self._teardown = TeardownCoordinator(self.registry, logger=self.logger)
        self.seeder: ResourceSeeder | None = None
        self.helper: TenancyHelper | None = None

        self._poll_interval = env.seconds("RIGGING_POLL_INTERVAL")
        self._poll_timeout = env.seconds("RIGGING_POLL_TIMEOUT")
        self._bootstrap_timeout = 2 * self._poll_timeout + env.seconds("RIGGING_REQUEST_TIMEOUT")

        LoggingConfig().update(
            log_directory=env.RIGGING_LOGS_DIRECTORY,
            log_level=env.RIGGING_LOG_LEVEL,
            log_output=env.RIGGING_LOG_OUTPUT,
        )
    async def __aenter__(self):
        try:
            await self.setup()

        except SetupFatalError as err:
            await self.report_setup_failure(err)
            await self.teardown()
            raise

        except BaseException:
            await self.teardown()
            raise

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.teardown()
        return False

    async def setup(self) -> ClientRegistry:
        scheduler, scheduler_ready = await self._launcher.start_scheduler_service()
        self._teardown.scheduler = scheduler

        self._teardown.secrets = await self._launcher.start_secrets_service()

        default_key = self.registry.default_key
        default_clients = await self._start_partition(default_key)

        try:
            self.helper = await TenancyHelper.create(
                default_clients.catalog,
                test_partitions=self.env.test_partitions,
                test_namespaces=self.env.test_namespaces,
            )

        except BackendRequestError as err:
            raise BackendNotReadyError(
                f"catalog ({default_key.partition})",
                str(err),
            ) from err

        self.seeder = ResourceSeeder(
            self.registry,
            self.helper,
            clock=self._clock,
            settle_delay=self.env.seconds("RIGGING_SEED_SETTLE_DELAY"),
            poll_interval=self._poll_interval,
            poll_timeout=self._poll_timeout,
            logger=self.logger,
        )

        for partition in self.helper.partitions():
            key = TenancyKey(partition=partition)
            if key == default_key:
                continue

            await self._start_partition(key)
            await self.seeder.create_partition(partition)

        await self.seeder.create_namespaces()
        await self.seeder.setup_secrets_pki(default_clients.secrets)
        await self.seeder.seed()

        result = await scheduler_ready.wait(timeout=self._bootstrap_timeout)
        result.unwrap()

        self.registry.verify()

        await self.logger.log(SetupInfo(
            message=f"Setup complete for partitions: {', '.join(str(key) for key in self.registry.keys())}",
            backend="all",
        ))

        return self.registry

    async def teardown(self) -> list[Exception]:
        errors = await self._teardown.stop()
        await self.logger.close()

        return errors

    async def run(self, test_run: TestRun) -> int:
        """
        Set up, hand the registry to ``test_run`` and tear down.

        Returns the test run's status, or 1 when setup fails. Anything
        the test run raises is re-raised once teardown has finished.
        """
        try:
            await self.setup()

        except SetupFatalError as err:
            await self.report_setup_failure(err)
            await self.teardown()
            return 1

        except BaseException:
            await self.teardown()
            raise

        try:
            status = await test_run(self.registry)

        finally:
            await self.teardown()

        return status

    async def report_setup_failure(self, err: SetupFatalError) -> None:
        await self.logger.log(SetupFatal(
            message=f"Setup failed: {err}",
            stage=err.stage,
            error=str(err),
        ))

    async def _start_partition(self, key: TenancyKey) -> ClientSet:
        handle = await self._launcher.start_catalog_service(key)
        self.registry.put_catalog(key, handle)

        client_set = self._connect(key, handle)
        self.registry.put(key, client_set)

        return client_set

    def _connect(self, key: TenancyKey, handle: CatalogHandle) -> ClientSet:
        client_set = ClientSet(key, self._factory)
        client_set.connect_catalog(handle.http_address)
        client_set.connect_secrets()
        client_set.connect_scheduler()

        return client_set
