from typing import Any

from rigging.models import (
    AllocationStub,
    SchedulerAgentSelf,
    SchedulerNamespace,
    VariableRecord,
)

from .http_backend_client import HTTPBackendClient


class HTTPSchedulerClient(HTTPBackendClient):
    backend = "scheduler"

    async def agent_self(self) -> SchedulerAgentSelf:
        return await self._request_as(
            SchedulerAgentSelf,
            "GET",
            "/v1/agent/self",
        )

    async def register_job(self, job_document: dict[str, Any]) -> None:
        await self._request(
            "PUT",
            "/v1/jobs",
            body={"Job": job_document},
        )

    async def job_allocations(
        self,
        job_id: str,
        all: bool = True,
    ) -> list[AllocationStub]:
        return await self._request_as(
            list[AllocationStub],
            "GET",
            f"/v1/job/{job_id}/allocations",
            params={"all": "true" if all else "false"},
        )

    async def update_variable(self, variable: VariableRecord) -> None:
        params = {"namespace": variable.namespace} if variable.namespace else None

        await self._request(
            "PUT",
            f"/v1/var/{variable.path.strip('/')}",
            body=variable,
            params=params,
        )

    async def delete_variable(
        self,
        path: str,
        namespace: str | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            f"/v1/var/{path.strip('/')}",
            params={"namespace": namespace} if namespace else None,
        )

    async def register_namespace(self, namespace: SchedulerNamespace) -> None:
        await self._request(
            "PUT",
            "/v1/namespace",
            body=namespace,
        )
