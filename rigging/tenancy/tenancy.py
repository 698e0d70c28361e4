from __future__ import annotations

from dataclasses import dataclass

from .tenancy_key import DEFAULT_PARTITION, TenancyKey

DEFAULT_NAMESPACE = "default"


@dataclass(slots=True, frozen=True, order=True)
class Tenancy:
    partition: str
    namespace: str

    @classmethod
    def default(cls) -> Tenancy:
        return cls(
            partition=DEFAULT_PARTITION,
            namespace=DEFAULT_NAMESPACE,
        )

    @property
    def key(self) -> TenancyKey:
        return TenancyKey(partition=self.partition)

    @property
    def has_default_namespace(self) -> bool:
        return self.namespace == DEFAULT_NAMESPACE

    def __str__(self) -> str:
        return f"{self.partition}/{self.namespace}"
