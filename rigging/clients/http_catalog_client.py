from rigging.models import (
    CatalogAgentSelf,
    CatalogRegistration,
    NamespaceRecord,
    PartitionRecord,
    PeeringToken,
    PeeringTokenRequest,
)

from .http_backend_client import HTTPBackendClient


class HTTPCatalogClient(HTTPBackendClient):
    backend = "catalog"

    async def agent_self(self) -> CatalogAgentSelf:
        return await self._request_as(
            CatalogAgentSelf,
            "GET",
            "/v1/agent/self",
        )

    async def node_name(self) -> str:
        agent = await self.agent_self()
        return agent.config.node_name

    async def leader(self) -> str:
        return await self._request_as(
            str,
            "GET",
            "/v1/status/leader",
        )

    async def list_partitions(self) -> list[PartitionRecord]:
        return await self._request_as(
            list[PartitionRecord],
            "GET",
            "/v1/partitions",
        )

    async def create_partition(self, partition: PartitionRecord) -> None:
        await self._request(
            "PUT",
            "/v1/partition",
            body=partition,
        )

    async def create_namespace(self, namespace: NamespaceRecord) -> None:
        params = {"partition": namespace.partition} if namespace.partition else None

        await self._request(
            "PUT",
            "/v1/namespace",
            body=namespace,
            params=params,
        )

    async def register(self, registration: CatalogRegistration) -> None:
        params = {"partition": registration.partition} if registration.partition else None

        await self._request(
            "PUT",
            "/v1/catalog/register",
            body=registration,
            params=params,
        )

    async def generate_peering_token(
        self,
        request: PeeringTokenRequest,
    ) -> PeeringToken:
        return await self._request_as(
            PeeringToken,
            "POST",
            "/v1/peering/token",
            body=request,
        )
