from __future__ import annotations

from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictStr

from .time_parser import TimeParser

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    RIGGING_SECRETS_EXECUTABLE: StrictStr = "vault"
    RIGGING_SECRETS_ADDRESS: StrictStr = "http://127.0.0.1:8200"
    RIGGING_SECRETS_ROOT_TOKEN: StrictStr = "a_token"
    RIGGING_SCHEDULER_EXECUTABLE: StrictStr = "nomad"
    RIGGING_SCHEDULER_ADDRESS: StrictStr = "http://127.0.0.1:4646"
    RIGGING_SCHEDULER_NODE_NAME: StrictStr = "test"
    RIGGING_CANARY_JOB_PATH: StrictStr = "tests/fixtures/canary_job.json"
    RIGGING_CATALOG_EXECUTABLE: StrictStr = "consul"
    RIGGING_CATALOG_LOG_LEVEL: StrictStr = "warn"
    RIGGING_CATALOG_READY_TIMEOUT: StrictStr = "10s"
    RIGGING_POLL_INTERVAL: StrictStr = "100ms"
    RIGGING_POLL_TIMEOUT: StrictStr = "30s"
    RIGGING_SEED_SETTLE_DELAY: StrictStr = "2s"
    RIGGING_STOP_TIMEOUT: StrictStr = "10s"
    RIGGING_REQUEST_TIMEOUT: StrictStr = "5s"
    RIGGING_TEST_PARTITIONS: StrictStr = "foo"
    RIGGING_TEST_NAMESPACES: StrictStr = "default,foo"
    RIGGING_LOG_LEVEL: StrictStr = "info"
    RIGGING_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    RIGGING_LOGS_DIRECTORY: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "RIGGING_SECRETS_EXECUTABLE": str,
            "RIGGING_SECRETS_ADDRESS": str,
            "RIGGING_SECRETS_ROOT_TOKEN": str,
            "RIGGING_SCHEDULER_EXECUTABLE": str,
            "RIGGING_SCHEDULER_ADDRESS": str,
            "RIGGING_SCHEDULER_NODE_NAME": str,
            "RIGGING_CANARY_JOB_PATH": str,
            "RIGGING_CATALOG_EXECUTABLE": str,
            "RIGGING_CATALOG_LOG_LEVEL": str,
            "RIGGING_CATALOG_READY_TIMEOUT": str,
            "RIGGING_POLL_INTERVAL": str,
            "RIGGING_POLL_TIMEOUT": str,
            "RIGGING_SEED_SETTLE_DELAY": str,
            "RIGGING_STOP_TIMEOUT": str,
            "RIGGING_REQUEST_TIMEOUT": str,
            "RIGGING_TEST_PARTITIONS": str,
            "RIGGING_TEST_NAMESPACES": str,
            "RIGGING_LOG_LEVEL": str,
            "RIGGING_LOG_OUTPUT": str,
            "RIGGING_LOGS_DIRECTORY": str,
        }

    def seconds(self, field_name: str) -> float:
        """Parse a duration field (e.g. ``"100ms"``, ``"30s"``) to seconds."""
        return TimeParser().parse(getattr(self, field_name))

    @property
    def test_partitions(self) -> list[str]:
        return _split_csv(self.RIGGING_TEST_PARTITIONS)

    @property
    def test_namespaces(self) -> list[str]:
        return _split_csv(self.RIGGING_TEST_NAMESPACES)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
