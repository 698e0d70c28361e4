from rigging.env import Env

from .http_catalog_client import HTTPCatalogClient
from .http_scheduler_client import HTTPSchedulerClient
from .http_secrets_client import HTTPSecretsClient
from .protocols import CatalogClient, SchedulerClient, SecretsClient


class ClientFactory:
    def __init__(self, env: Env) -> None:
        self._env = env
        self._timeout = env.seconds("RIGGING_REQUEST_TIMEOUT")

    def catalog(self, address: str) -> CatalogClient:
        return HTTPCatalogClient(
            address,
            timeout=self._timeout,
        )

    def secrets(
        self,
        address: str | None = None,
        token: str | None = None,
    ) -> SecretsClient:
        return HTTPSecretsClient(
            address or self._env.RIGGING_SECRETS_ADDRESS,
            token or self._env.RIGGING_SECRETS_ROOT_TOKEN,
            timeout=self._timeout,
        )

    def scheduler(self, address: str | None = None) -> SchedulerClient:
        return HTTPSchedulerClient(
            address or self._env.RIGGING_SCHEDULER_ADDRESS,
            timeout=self._timeout,
        )
