from rigging.clients import SecretsClient
from rigging.errors import (
    BackendRequestError,
    NamespaceNotFoundError,
    NotReadyError,
    SeedingError,
)
from rigging.logging import Logger, SetupDebug, SetupInfo
from rigging.models import (
    MountInput,
    NamespaceRecord,
    PartitionRecord,
    PeeringTokenRequest,
)
from rigging.readiness import poll_until
from rigging.registry import ClientRegistry
from rigging.runtime import Clock
from rigging.tenancy import Tenancy, TenancyHelper, TenancyKey

from .service_registrations import build_registrations

PEERING_NAMES = ("foo", "bar")
PKI_MOUNT = "pki"
PKI_ROLE = "example-dot-com"
PKI_DOMAIN = "example.com"


class ResourceSeeder:
    """
    Creates the shared catalog and secrets resources tests read.

    Order matters. Partitions come first, then namespaces, then the
    per-tenancy registrations that live inside them. Registering into
    a namespace this seeder has not created fails before any backend
    call is made.
    """

    def __init__(
        self,
        registry: ClientRegistry,
        helper: TenancyHelper,
        clock: Clock | None = None,
        settle_delay: float = 2.0,
        poll_interval: float = 0.1,
        poll_timeout: float = 30.0,
        logger: Logger | None = None,
    ) -> None:
        self._registry = registry
        self._helper = helper
        self._clock = clock or Clock()
        self._settle_delay = settle_delay
        self._poll_interval = poll_interval
        self._poll_timeout = poll_timeout
        self._logger = logger or Logger()

        self._namespaces: set[tuple[str, str]] = set()

    @property
    def namespaces(self) -> set[tuple[str, str]]:
        return set(self._namespaces)

    async def create_partition(self, partition: str) -> None:
        client_set = self._registry.get(TenancyKey(partition=partition))
        if client_set is None:
            raise SeedingError(
                f"Err. - no client set registered for partition '{partition}'"
            )

        try:
            await client_set.catalog.create_partition(
                PartitionRecord(name=partition)
            )

        except BackendRequestError as err:
            raise SeedingError(
                f"Err. - failed creating partition '{partition}': {err}"
            ) from err

        await self._logger.log(SetupInfo(
            message=f"Created partition {partition}",
            backend="catalog",
            partition=partition,
        ))

    async def create_namespaces(self) -> None:
        if self._helper.enterprise is False:
            return

        for tenancy in self._helper.test_tenancies():
            if tenancy.has_default_namespace:
                self._namespaces.add((tenancy.partition, tenancy.namespace))
                continue

            client_set = self._registry.get(tenancy.key)
            if client_set is None:
                raise SeedingError(
                    f"Err. - no client set registered for partition '{tenancy.partition}'"
                )

            try:
                await client_set.catalog.create_namespace(
                    NamespaceRecord(
                        name=tenancy.namespace,
                        partition=tenancy.partition,
                    )
                )

            except BackendRequestError as err:
                raise SeedingError(
                    f"Err. - failed creating namespace '{tenancy}': {err}"
                ) from err

            self._namespaces.add((tenancy.partition, tenancy.namespace))

            await self._logger.log(SetupInfo(
                message=f"Created namespace {tenancy}",
                backend="catalog",
                partition=tenancy.partition,
            ))

    async def seed(self) -> None:
        for tenancy in self._helper.test_tenancies():
            await self.seed_tenancy(tenancy)
            await self._clock.sleep(self._settle_delay)

    async def seed_tenancy(self, tenancy: Tenancy) -> None:
        enterprise = self._helper.enterprise

        if enterprise and (tenancy.partition, tenancy.namespace) not in self._namespaces:
            raise NamespaceNotFoundError(tenancy.partition, tenancy.namespace)

        client_set = self._registry.get(tenancy.key)
        if client_set is None:
            raise SeedingError(
                f"Err. - no client set registered for partition '{tenancy.partition}'"
            )

        catalog = client_set.catalog
        default_catalog = self._registry.default().catalog

        try:
            node = await catalog.node_name()

            for registration in build_registrations(tenancy, node, enterprise):
                await catalog.register(registration)

            for peer_name in PEERING_NAMES:
                await default_catalog.generate_peering_token(
                    PeeringTokenRequest(
                        peer_name=peer_name,
                        partition=tenancy.partition,
                    )
                )

        except BackendRequestError as err:
            raise SeedingError(
                f"Err. - failed seeding tenancy '{tenancy}': {err}"
            ) from err

        await self._logger.log(SetupDebug(
            message=f"Seeded catalog resources for {tenancy}",
            backend="catalog",
            partition=tenancy.partition,
        ))

    async def setup_secrets_pki(self, client: SecretsClient) -> None:
        await poll_until(
            lambda: self._secrets_ready(client),
            self._poll_interval,
            self._poll_timeout,
            self._clock,
            description="secrets health",
        )

        try:
            await client.mount(
                PKI_MOUNT,
                MountInput(
                    type="pki",
                    description="test pki",
                ),
            )

            await client.write(
                f"{PKI_MOUNT}/root/generate/internal",
                {
                    "common_name": PKI_DOMAIN,
                    "ttl": "24h",
                },
            )

            await client.write(
                f"{PKI_MOUNT}/roles/{PKI_ROLE}",
                {
                    "allowed_domains": PKI_DOMAIN,
                    "allow_subdomains": True,
                    "max_ttl": "72h",
                },
            )

        except BackendRequestError as err:
            raise SeedingError(
                f"Err. - failed configuring secrets PKI: {err}"
            ) from err

        await self._logger.log(SetupInfo(
            message="Configured secrets PKI",
            backend="secrets",
        ))

    async def _secrets_ready(self, client: SecretsClient) -> None:
        health = await client.health()
        if health.ready is False:
            raise NotReadyError("Err. - secrets backend is not initialized or is sealed")
