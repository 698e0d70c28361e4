from __future__ import annotations

from typing import TYPE_CHECKING

from rigging.clients import ClientSet
from rigging.errors import (
    DuplicateTenancyKeyError,
    RegistryError,
    RegistrySealedError,
)
from rigging.tenancy import TenancyKey

if TYPE_CHECKING:
    from rigging.launcher import CatalogHandle


class ClientRegistry:
    """
    Maps each tenancy key to its ClientSet and catalog handle.

    Entries are write-once and are only inserted during setup. Once
    ``seal()`` is called teardown owns the registry and any further
    insert raises. Entries inserted before a setup failure stay
    visible so teardown can release them.
    """

    def __init__(self, default_key: TenancyKey | None = None) -> None:
        self.default_key = default_key or TenancyKey.default()
        self._clients: dict[TenancyKey, ClientSet] = {}
        self._catalogs: dict[TenancyKey, CatalogHandle] = {}
        self._sealed = False
        self.ready = False

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, key: TenancyKey) -> bool:
        return key in self._clients

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, key: TenancyKey) -> ClientSet | None:
        return self._clients.get(key)

    def put(self, key: TenancyKey, client_set: ClientSet) -> None:
        if self._sealed:
            raise RegistrySealedError(key.partition)

        if key in self._clients:
            raise DuplicateTenancyKeyError(key.partition)

        self._clients[key] = client_set

    def get_catalog(self, key: TenancyKey) -> CatalogHandle | None:
        return self._catalogs.get(key)

    def put_catalog(self, key: TenancyKey, handle: CatalogHandle) -> None:
        if self._sealed:
            raise RegistrySealedError(key.partition)

        if key in self._catalogs:
            raise DuplicateTenancyKeyError(key.partition)

        self._catalogs[key] = handle

    def default(self) -> ClientSet:
        client_set = self._clients.get(self.default_key)
        if client_set is None:
            raise RegistryError(
                f"Err. - no client set registered for default tenancy '{self.default_key}'"
            )

        return client_set

    def all(self) -> list[ClientSet]:
        return [self._clients[key] for key in sorted(self._clients)]

    def catalogs(self) -> list[CatalogHandle]:
        return [self._catalogs[key] for key in sorted(self._catalogs)]

    def keys(self) -> list[TenancyKey]:
        return sorted(self._clients)

    def verify(self) -> None:
        missing = [key.partition for key in self._clients if key not in self._catalogs]
        if missing:
            raise RegistryError(
                f"Err. - no catalog handle registered for: {', '.join(sorted(missing))}"
            )

        self.ready = True

    def seal(self) -> None:
        self._sealed = True
        self.ready = False

    def drain(self) -> None:
        self._clients.clear()
        self._catalogs.clear()
