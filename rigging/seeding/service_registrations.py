from rigging.models import (
    AgentService,
    AgentServiceConnect,
    CatalogRegistration,
    ConnectProxyConfig,
    ServiceAddress,
)
from rigging.tenancy import Tenancy

SERVICE_ADDRESS = "127.0.0.1"


def build_registrations(
    tenancy: Tenancy,
    node: str,
    enterprise: bool,
) -> list[CatalogRegistration]:
    """
    The four catalog registrations every test tenancy carries. Partition
    and namespace are only set on the enterprise edition.
    """
    suffix = f"{tenancy.partition}-{tenancy.namespace}"
    partition = tenancy.partition if enterprise else None
    namespace = tenancy.namespace if enterprise else None

    meta_service = f"service-meta-{suffix}"
    tagged_service = f"service-taggedAddresses-{suffix}"
    connect_service = f"conn-enabled-service-{suffix}"
    proxy_service = f"conn-enabled-service-proxy-{suffix}"

    services = [
        AgentService(
            id=meta_service,
            service=meta_service,
            tags=["tag1"],
            meta={"meta1": "value1"},
            partition=partition,
            namespace=namespace,
        ),
        AgentService(
            id=tagged_service,
            service=tagged_service,
            tagged_addresses={
                "lan": ServiceAddress(address="192.0.2.1", port=80),
                "wan": ServiceAddress(address="192.0.2.2", port=443),
            },
            partition=partition,
            namespace=namespace,
        ),
        AgentService(
            id=connect_service,
            service=connect_service,
            port=12345,
            connect=AgentServiceConnect(),
            partition=partition,
            namespace=namespace,
        ),
        AgentService(
            kind="connect-proxy",
            id=proxy_service,
            service=proxy_service,
            port=21999,
            proxy=ConnectProxyConfig(
                destination_service_name=connect_service,
            ),
            partition=partition,
            namespace=namespace,
        ),
    ]

    return [
        CatalogRegistration(
            node=node,
            address=SERVICE_ADDRESS,
            service=service,
            partition=partition,
        )
        for service in services
    ]
