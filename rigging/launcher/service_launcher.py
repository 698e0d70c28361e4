import asyncio
import os
import shutil
import tempfile

import msgspec

from rigging.clients import CatalogClient, ClientFactory
from rigging.env import Env
from rigging.errors import BackendNotReadyError, NotReadyError
from rigging.logging import Logger, ProcessInfo, SetupDebug, SetupError
from rigging.models import CatalogAgentConfig, CatalogAgentPorts
from rigging.readiness import AsyncInitFuture, SchedulerBootstrap, poll_until
from rigging.runtime import Clock, ProcessSpawner
from rigging.tenancy import TenancyKey

from .catalog_handle import CatalogHandle
from .ports import allocate_ports
from .scheduler_service_handle import SchedulerServiceHandle
from .secrets_service_handle import SecretsServiceHandle


class ServiceLauncher:
    """
    Starts each backend as a managed child process.

    A missing executable or failed spawn is setup-fatal for every
    backend. The scheduler additionally bootstraps in a background
    task whose outcome is reported through an AsyncInitFuture.
    """

    def __init__(
        self,
        env: Env,
        factory: ClientFactory | None = None,
        spawner: ProcessSpawner | None = None,
        clock: Clock | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._env = env
        self._factory = factory or ClientFactory(env)
        self._spawner = spawner or ProcessSpawner()
        self._clock = clock or Clock()
        self._logger = logger or Logger()

        self._poll_interval = env.seconds("RIGGING_POLL_INTERVAL")
        self._poll_timeout = env.seconds("RIGGING_POLL_TIMEOUT")
        self._catalog_ready_timeout = env.seconds("RIGGING_CATALOG_READY_TIMEOUT")
        self._stop_timeout = env.seconds("RIGGING_STOP_TIMEOUT")

    async def start_secrets_service(self) -> SecretsServiceHandle:
        path = self._spawner.locate(self._env.RIGGING_SECRETS_EXECUTABLE)
        process = await self._spawner.spawn(
            path,
            [
                "server",
                "-dev",
                "-dev-root-token-id",
                self._env.RIGGING_SECRETS_ROOT_TOKEN,
                "-dev-no-store-token",
            ],
        )

        await self._logger.log(ProcessInfo(
            message="Started secrets service",
            backend="secrets",
            executable=path,
            pid=process.pid,
        ))

        return SecretsServiceHandle(
            process,
            self._env.RIGGING_SECRETS_ADDRESS,
            self._env.RIGGING_SECRETS_ROOT_TOKEN,
            stop_timeout=self._stop_timeout,
        )

    async def start_scheduler_service(
        self,
    ) -> tuple[SchedulerServiceHandle, AsyncInitFuture]:
        path = self._spawner.locate(self._env.RIGGING_SCHEDULER_EXECUTABLE)
        process = await self._spawner.spawn(
            path,
            [
                "agent",
                "-dev",
                f"-node={self._env.RIGGING_SCHEDULER_NODE_NAME}",
                "-vault-enabled=false",
                "-consul-auto-advertise=false",
                "-consul-client-auto-join=false",
                "-consul-server-auto-join=false",
                "-network-speed=100",
                "-log-level=error",
            ],
        )

        await self._logger.log(ProcessInfo(
            message="Started scheduler service",
            backend="scheduler",
            executable=path,
            pid=process.pid,
        ))

        future = AsyncInitFuture("scheduler")
        bootstrap = SchedulerBootstrap(
            self._factory.scheduler(self._env.RIGGING_SCHEDULER_ADDRESS),
            self._env.RIGGING_CANARY_JOB_PATH,
            clock=self._clock,
            interval=self._poll_interval,
            timeout=self._poll_timeout,
            logger=self._logger,
        )

        handle = SchedulerServiceHandle(
            process,
            self._env.RIGGING_SCHEDULER_ADDRESS,
            bootstrap_task=asyncio.create_task(bootstrap.run(future)),
            stop_timeout=self._stop_timeout,
        )

        return handle, future

    async def start_catalog_service(self, key: TenancyKey) -> CatalogHandle:
        path = self._spawner.locate(self._env.RIGGING_CATALOG_EXECUTABLE)

        node_name = f"ct-test-{key.partition}"
        datacenter = "dc1" if key.is_default else key.partition

        data_directory = await asyncio.to_thread(
            tempfile.mkdtemp,
            prefix=f"rigging-catalog-{key.partition}-",
        )

        try:
            http_port, dns_port, grpc_port, serf_lan_port, serf_wan_port, server_port = allocate_ports(6)

            config = CatalogAgentConfig(
                node_name=node_name,
                datacenter=datacenter,
                data_dir=os.path.join(data_directory, "data"),
                log_level=self._env.RIGGING_CATALOG_LOG_LEVEL,
                ports=CatalogAgentPorts(
                    http=http_port,
                    dns=dns_port,
                    grpc=grpc_port,
                    serf_lan=serf_lan_port,
                    serf_wan=serf_wan_port,
                    server=server_port,
                ),
            )

            config_path = os.path.join(data_directory, "config.json")
            await asyncio.to_thread(
                _write_config,
                config_path,
                msgspec.json.encode(config),
            )

            process = await self._spawner.spawn(
                path,
                ["agent", f"-config-file={config_path}"],
            )

        except BaseException:
            await asyncio.to_thread(
                shutil.rmtree,
                data_directory,
                ignore_errors=True,
            )
            raise

        handle = CatalogHandle(
            process,
            key,
            f"http://{config.bind_addr}:{http_port}",
            datacenter,
            node_name,
            data_directory=data_directory,
            stop_timeout=self._stop_timeout,
        )

        await self._logger.log(ProcessInfo(
            message=f"Started catalog service for partition {key.partition}",
            backend="catalog",
            executable=path,
            pid=process.pid,
        ))

        client = self._factory.catalog(handle.http_address)

        try:
            await poll_until(
                lambda: self._catalog_ready(client),
                self._poll_interval,
                self._catalog_ready_timeout,
                self._clock,
                description=f"catalog '{key.partition}' readiness",
            )

        except asyncio.CancelledError:
            await handle.stop()
            raise

        except Exception as err:
            await self._logger.log(SetupError(
                message="Catalog service never became ready",
                backend="catalog",
                partition=key.partition,
                error=str(err),
            ))

            await handle.stop()

            raise BackendNotReadyError(
                f"catalog ({key.partition})",
                str(err),
            ) from err

        finally:
            await client.close()

        await self._logger.log(SetupDebug(
            message=f"Catalog ready at {handle.http_address}",
            backend="catalog",
            partition=key.partition,
        ))

        return handle

    async def _catalog_ready(self, client: CatalogClient) -> None:
        await client.agent_self()

        if not await client.leader():
            raise NotReadyError("Err. - catalog has no leader yet")


def _write_config(path: str, data: bytes) -> None:
    with open(path, "wb") as config_file:
        config_file.write(data)
