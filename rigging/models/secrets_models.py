from typing import Any

import msgspec


class MountInput(msgspec.Struct, kw_only=True, omit_defaults=True):
    type: str
    description: str = ""
    options: dict[str, str] | None = None


class SecretsHealth(msgspec.Struct, kw_only=True):
    initialized: bool = False
    sealed: bool = True
    standby: bool = False
    version: str = ""

    @property
    def ready(self) -> bool:
        return self.initialized and self.sealed is False


class SecretData(msgspec.Struct, kw_only=True):
    data: dict[str, Any] | None = None
