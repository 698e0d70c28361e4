"""
Narrow client APIs the orchestration core consumes, one per backend.
Concrete implementations live beside this module; tests substitute
in-memory stubs.
"""

from typing import Any, Protocol

from rigging.models import (
    AllocationStub,
    CatalogAgentSelf,
    CatalogRegistration,
    MountInput,
    NamespaceRecord,
    PartitionRecord,
    PeeringToken,
    PeeringTokenRequest,
    SchedulerAgentSelf,
    SchedulerNamespace,
    SecretsHealth,
    VariableRecord,
)


class CatalogClient(Protocol):
    """Protocol for the key/value and service-catalog backend."""

    async def agent_self(self) -> CatalogAgentSelf:
        ...

    async def node_name(self) -> str:
        ...

    async def leader(self) -> str:
        """Address of the current raft leader, or an empty string."""
        ...

    async def list_partitions(self) -> list[PartitionRecord]:
        ...

    async def create_partition(self, partition: PartitionRecord) -> None:
        ...

    async def create_namespace(self, namespace: NamespaceRecord) -> None:
        ...

    async def register(self, registration: CatalogRegistration) -> None:
        ...

    async def generate_peering_token(
        self,
        request: PeeringTokenRequest,
    ) -> PeeringToken:
        ...

    async def close(self) -> None:
        ...


class SecretsClient(Protocol):
    """Protocol for the secrets engine."""

    async def health(self) -> SecretsHealth:
        ...

    async def mount(self, path: str, mount: MountInput) -> None:
        ...

    async def write(
        self,
        path: str,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        ...

    async def read(self, path: str) -> dict[str, Any] | None:
        """Return the secret's ``data`` block, or None when absent."""
        ...

    async def delete(self, path: str) -> None:
        ...

    async def close(self) -> None:
        ...


class SchedulerClient(Protocol):
    """Protocol for the job scheduler."""

    async def agent_self(self) -> SchedulerAgentSelf:
        ...

    async def register_job(self, job_document: dict[str, Any]) -> None:
        ...

    async def job_allocations(
        self,
        job_id: str,
        all: bool = True,
    ) -> list[AllocationStub]:
        ...

    async def update_variable(self, variable: VariableRecord) -> None:
        ...

    async def delete_variable(
        self,
        path: str,
        namespace: str | None = None,
    ) -> None:
        ...

    async def register_namespace(self, namespace: SchedulerNamespace) -> None:
        ...

    async def close(self) -> None:
        ...
