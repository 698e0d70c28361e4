from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from rigging.tenancy import TenancyKey

from .protocols import CatalogClient, SchedulerClient, SecretsClient

if TYPE_CHECKING:
    from .client_factory import ClientFactory


class ClientSet:
    """
    One connection to each backend for a single tenancy key. Owned
    by its registry entry and never shared across keys.
    """

    def __init__(
        self,
        key: TenancyKey,
        factory: ClientFactory,
    ) -> None:
        self.key = key
        self._factory = factory

        self._catalog: CatalogClient | None = None
        self._secrets: SecretsClient | None = None
        self._scheduler: SchedulerClient | None = None
        self._stopped = False

    def connect_catalog(self, address: str) -> CatalogClient:
        self._catalog = self._factory.catalog(address)
        return self._catalog

    def connect_secrets(
        self,
        address: str | None = None,
        token: str | None = None,
    ) -> SecretsClient:
        self._secrets = self._factory.secrets(
            address=address,
            token=token,
        )
        return self._secrets

    def connect_scheduler(self, address: str | None = None) -> SchedulerClient:
        self._scheduler = self._factory.scheduler(address=address)
        return self._scheduler

    @property
    def catalog(self) -> CatalogClient:
        if self._catalog is None:
            raise RuntimeError(f"Err. - catalog client for '{self.key}' is not connected")

        return self._catalog

    @property
    def secrets(self) -> SecretsClient:
        if self._secrets is None:
            raise RuntimeError(f"Err. - secrets client for '{self.key}' is not connected")

        return self._secrets

    @property
    def scheduler(self) -> SchedulerClient:
        if self._scheduler is None:
            raise RuntimeError(f"Err. - scheduler client for '{self.key}' is not connected")

        return self._scheduler

    @property
    def stopped(self) -> bool:
        return self._stopped

    async def ping(self) -> None:
        await asyncio.gather(
            self.catalog.leader(),
            self.secrets.health(),
            self.scheduler.agent_self(),
        )

    async def stop(self) -> None:
        if self._stopped:
            return

        self._stopped = True

        clients = [
            client
            for client in (self._catalog, self._secrets, self._scheduler)
            if client is not None
        ]

        results = await asyncio.gather(
            *[client.close() for client in clients],
            return_exceptions=True,
        )

        errors = [result for result in results if isinstance(result, Exception)]
        if errors:
            raise errors[0]
