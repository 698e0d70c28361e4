import msgspec


class CatalogAgentPorts(msgspec.Struct, kw_only=True):
    http: int
    https: int = -1
    dns: int
    grpc: int
    grpc_tls: int = -1
    serf_lan: int
    serf_wan: int
    server: int


class CatalogAgentConnect(msgspec.Struct, kw_only=True):
    enabled: bool = True


class CatalogAgentPeering(msgspec.Struct, kw_only=True):
    enabled: bool = True


class CatalogAgentConfig(msgspec.Struct, kw_only=True):
    """
    The catalog agent's own JSON configuration file. Keys match
    the agent's snake_case file format.
    """

    node_name: str
    datacenter: str
    data_dir: str
    log_level: str
    ports: CatalogAgentPorts
    bind_addr: str = "127.0.0.1"
    client_addr: str = "127.0.0.1"
    advertise_addr: str = "127.0.0.1"
    server: bool = True
    bootstrap_expect: int = 1
    disable_update_check: bool = True
    connect: CatalogAgentConnect = msgspec.field(
        default_factory=CatalogAgentConnect,
    )
    peering: CatalogAgentPeering = msgspec.field(
        default_factory=CatalogAgentPeering,
    )
