import msgspec

from .backend_case import pascal_case


class ServiceAddress(msgspec.Struct, rename=pascal_case, kw_only=True):
    address: str
    port: int


class AgentServiceConnect(msgspec.Struct, rename=pascal_case, kw_only=True):
    native: bool = False


class ConnectProxyConfig(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    destination_service_name: str
    destination_service_id: str | None = None
    local_service_address: str | None = None
    local_service_port: int | None = None


class AgentService(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    id: str
    service: str
    kind: str | None = None
    tags: list[str] | None = None
    meta: dict[str, str] | None = None
    port: int | None = None
    address: str | None = None
    tagged_addresses: dict[str, ServiceAddress] | None = None
    connect: AgentServiceConnect | None = None
    proxy: ConnectProxyConfig | None = None
    namespace: str | None = None
    partition: str | None = None


class CatalogRegistration(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    node: str
    address: str
    service: AgentService
    datacenter: str | None = None
    skip_node_update: bool = False
    namespace: str | None = None
    partition: str | None = None


class PeeringTokenRequest(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    peer_name: str
    partition: str | None = None


class PeeringToken(msgspec.Struct, rename=pascal_case, kw_only=True):
    peering_token: str


class PartitionRecord(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    name: str
    description: str | None = None


class NamespaceRecord(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    name: str
    partition: str | None = None
    description: str | None = None


class CatalogAgentDetails(msgspec.Struct, rename=pascal_case, kw_only=True):
    datacenter: str = ""
    node_name: str = ""
    node_id: str = ""
    version: str = ""
    version_metadata: str = ""


class CatalogAgentSelf(msgspec.Struct, rename=pascal_case, kw_only=True):
    config: CatalogAgentDetails = msgspec.field(
        default_factory=CatalogAgentDetails,
    )
