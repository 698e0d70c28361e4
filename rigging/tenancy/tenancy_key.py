from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PARTITION = "default"


@dataclass(slots=True, frozen=True, order=True)
class TenancyKey:
    """
    Registry key for one isolation scope. Backends are provisioned
    per partition, so the namespace is not part of the key.
    """

    partition: str

    @classmethod
    def default(cls) -> TenancyKey:
        return cls(partition=DEFAULT_PARTITION)

    @property
    def is_default(self) -> bool:
        return self.partition == DEFAULT_PARTITION

    def __str__(self) -> str:
        return self.partition
