from __future__ import annotations

from typing import TYPE_CHECKING

from .tenancy import DEFAULT_NAMESPACE, Tenancy
from .tenancy_key import DEFAULT_PARTITION

if TYPE_CHECKING:
    from rigging.clients.protocols import CatalogClient


class TenancyHelper:
    """
    Works out which isolation scopes the run covers from what the
    default catalog instance reports about itself.

    Partitions and namespaces only exist on the enterprise edition.
    On the community edition every test runs in the single
    ``default/default`` tenancy and registrations omit both fields.
    """

    def __init__(
        self,
        enterprise: bool,
        discovered_partitions: list[str],
        test_partitions: list[str] | None = None,
        test_namespaces: list[str] | None = None,
    ) -> None:
        self.enterprise = enterprise
        self._discovered = list(discovered_partitions)
        self._test_partitions = list(test_partitions or [])
        self._test_namespaces = list(test_namespaces or [DEFAULT_NAMESPACE])

    @classmethod
    async def create(
        cls,
        client: CatalogClient,
        test_partitions: list[str] | None = None,
        test_namespaces: list[str] | None = None,
    ) -> TenancyHelper:
        agent = await client.agent_self()
        enterprise = "ent" in agent.config.version_metadata

        discovered: list[str] = []
        if enterprise:
            discovered = [
                partition.name for partition in await client.list_partitions()
            ]

        return cls(
            enterprise,
            discovered,
            test_partitions=test_partitions,
            test_namespaces=test_namespaces,
        )

    def partitions(self) -> list[str]:
        names = {DEFAULT_PARTITION, *self._discovered}

        if self.enterprise:
            names.update(self._test_partitions)

        return sorted(
            names,
            key=lambda name: (name != DEFAULT_PARTITION, name),
        )

    def namespaces(self) -> list[str]:
        if self.enterprise is False:
            return [DEFAULT_NAMESPACE]

        names = list(dict.fromkeys(self._test_namespaces))
        if DEFAULT_NAMESPACE in names:
            names.remove(DEFAULT_NAMESPACE)

        return [DEFAULT_NAMESPACE, *names]

    def test_tenancies(self) -> list[Tenancy]:
        if self.enterprise is False:
            return [Tenancy.default()]

        return [
            Tenancy(partition=partition, namespace=namespace)
            for partition in self.partitions()
            for namespace in self.namespaces()
        ]
