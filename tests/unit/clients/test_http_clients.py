import json

import httpx
import pytest

from rigging.clients import (
    ClientSet,
    HTTPCatalogClient,
    HTTPSchedulerClient,
    HTTPSecretsClient,
)
from rigging.errors import BackendRequestError
from rigging.models import (
    CatalogRegistration,
    AgentService,
    MountInput,
    PeeringTokenRequest,
    VariableRecord,
)
from rigging.tenancy import TenancyKey

from tests.unit.mocks import MockClientFactory


class Recorder:
    """Records requests and answers from a route table."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes.get(
            (request.method, request.url.path),
            httpx.Response(404, text="not found"),
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


# =============================================================================
# Catalog
# =============================================================================


class TestHTTPCatalogClient:
    @pytest.mark.asyncio
    async def test_agent_self_and_node_name(self) -> None:
        recorder = Recorder({
            ("GET", "/v1/agent/self"): httpx.Response(200, json={
                "Config": {
                    "Datacenter": "dc1",
                    "NodeName": "ct-test-default",
                    "VersionMetadata": "ent",
                },
                "Member": {"Name": "ct-test-default"},
            }),
        })
        client = HTTPCatalogClient("http://catalog", transport=recorder.transport)

        agent = await client.agent_self()

        assert agent.config.version_metadata == "ent"
        assert await client.node_name() == "ct-test-default"
        await client.close()

    @pytest.mark.asyncio
    async def test_register_encodes_backend_casing(self) -> None:
        recorder = Recorder({
            ("PUT", "/v1/catalog/register"): httpx.Response(200, json=True),
        })
        client = HTTPCatalogClient("http://catalog", transport=recorder.transport)

        await client.register(CatalogRegistration(
            node="node-1",
            address="127.0.0.1",
            partition="p1",
            service=AgentService(id="svc", service="svc", port=80),
        ))

        request = recorder.requests[0]
        body = json.loads(request.content)
        assert request.url.params["partition"] == "p1"
        assert body == {
            "Node": "node-1",
            "Address": "127.0.0.1",
            "Service": {"ID": "svc", "Service": "svc", "Port": 80},
            "Partition": "p1",
        }
        await client.close()

    @pytest.mark.asyncio
    async def test_peering_token(self) -> None:
        recorder = Recorder({
            ("POST", "/v1/peering/token"): httpx.Response(200, json={"PeeringToken": "abc"}),
        })
        client = HTTPCatalogClient("http://catalog", transport=recorder.transport)

        token = await client.generate_peering_token(
            PeeringTokenRequest(peer_name="foo", partition="default")
        )

        assert token.peering_token == "abc"
        assert json.loads(recorder.requests[0].content) == {
            "PeerName": "foo",
            "Partition": "default",
        }
        await client.close()

    @pytest.mark.asyncio
    async def test_error_status_raises_backend_request_error(self) -> None:
        recorder = Recorder({
            ("GET", "/v1/status/leader"): httpx.Response(500, text="no leader"),
        })
        client = HTTPCatalogClient("http://catalog", transport=recorder.transport)

        with pytest.raises(BackendRequestError) as raised:
            await client.leader()

        assert raised.value.status_code == 500
        assert raised.value.body == "no leader"
        assert raised.value.path == "/v1/status/leader"
        await client.close()

    @pytest.mark.asyncio
    async def test_transport_failure_raises_backend_request_error(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HTTPCatalogClient("http://catalog", transport=httpx.MockTransport(refuse))

        with pytest.raises(BackendRequestError) as raised:
            await client.leader()

        assert raised.value.status_code is None
        await client.close()


# =============================================================================
# Secrets
# =============================================================================


class TestHTTPSecretsClient:
    @pytest.mark.asyncio
    async def test_token_header_and_mount(self) -> None:
        recorder = Recorder({
            ("POST", "/v1/sys/mounts/secret"): httpx.Response(204),
        })
        client = HTTPSecretsClient("http://secrets", "a_token", transport=recorder.transport)

        await client.mount("secret", MountInput(type="kv", options={"version": "2"}))

        request = recorder.requests[0]
        assert request.headers["X-Vault-Token"] == "a_token"
        assert json.loads(request.content) == {"type": "kv", "options": {"version": "2"}}
        await client.close()

    @pytest.mark.asyncio
    async def test_read_missing_returns_none(self) -> None:
        client = HTTPSecretsClient(
            "http://secrets",
            "a_token",
            transport=Recorder({}).transport,
        )

        assert await client.read("secret/missing") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_read_returns_data_block(self) -> None:
        recorder = Recorder({
            ("GET", "/v1/secret/foo"): httpx.Response(200, json={
                "lease_duration": 0,
                "data": {"zip": "zap"},
            }),
        })
        client = HTTPSecretsClient("http://secrets", "a_token", transport=recorder.transport)

        assert await client.read("/secret/foo") == {"zip": "zap"}
        await client.close()


# =============================================================================
# Scheduler
# =============================================================================


class TestHTTPSchedulerClient:
    @pytest.mark.asyncio
    async def test_job_allocations(self) -> None:
        recorder = Recorder({
            ("GET", "/v1/job/example/allocations"): httpx.Response(200, json=[
                {
                    "ID": "a1",
                    "JobID": "example",
                    "ClientStatus": "running",
                    "TaskStates": {
                        "task": {
                            "State": "running",
                            "Events": [{"Type": "Started", "Time": 1}],
                        },
                    },
                },
            ]),
        })
        client = HTTPSchedulerClient("http://scheduler", transport=recorder.transport)

        allocations = await client.job_allocations("example")

        assert recorder.requests[0].url.params["all"] == "true"
        assert allocations[0].client_status == "running"
        assert allocations[0].task_states["task"].events[0].type == "Started"
        await client.close()

    @pytest.mark.asyncio
    async def test_register_job_wraps_document(self) -> None:
        recorder = Recorder({
            ("PUT", "/v1/jobs"): httpx.Response(200, json={"EvalID": "e1"}),
        })
        client = HTTPSchedulerClient("http://scheduler", transport=recorder.transport)

        await client.register_job({"ID": "example"})

        assert json.loads(recorder.requests[0].content) == {"Job": {"ID": "example"}}
        await client.close()

    @pytest.mark.asyncio
    async def test_update_variable(self) -> None:
        recorder = Recorder({
            ("PUT", "/v1/var/nomad/jobs/example"): httpx.Response(200, json={}),
        })
        client = HTTPSchedulerClient("http://scheduler", transport=recorder.transport)

        await client.update_variable(VariableRecord(
            path="nomad/jobs/example",
            items={"k": "v"},
            namespace="dev",
        ))

        request = recorder.requests[0]
        assert request.url.params["namespace"] == "dev"
        assert json.loads(request.content) == {
            "Path": "nomad/jobs/example",
            "Items": {"k": "v"},
            "Namespace": "dev",
        }
        await client.close()


# =============================================================================
# ClientSet
# =============================================================================


class TestClientSet:
    @pytest.mark.asyncio
    async def test_stop_on_partial_set_is_safe(self) -> None:
        factory = MockClientFactory()
        client_set = ClientSet(TenancyKey.default(), factory)
        client_set.connect_catalog("http://catalog")

        await client_set.stop()
        await client_set.stop()

        assert client_set.stopped
        assert factory.catalog_clients[0].closed

    @pytest.mark.asyncio
    async def test_unconnected_client_raises(self) -> None:
        client_set = ClientSet(TenancyKey.default(), MockClientFactory())

        with pytest.raises(RuntimeError):
            client_set.secrets

    @pytest.mark.asyncio
    async def test_ping_touches_every_backend(self) -> None:
        factory = MockClientFactory()
        client_set = ClientSet(TenancyKey.default(), factory)
        client_set.connect_catalog("http://catalog")
        client_set.connect_secrets()
        client_set.connect_scheduler()

        await client_set.ping()

        assert "leader" in factory.catalog_state.calls
        assert factory.scheduler_state.agent_polls == 1
