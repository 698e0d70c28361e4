import pathlib

import pytest

from rigging.env import Env
from rigging.logging import LoggingConfig
from rigging.registry import ClientRegistry

from tests.unit.mocks import (
    CatalogState,
    FakeClock,
    MockClientFactory,
    MockProcessSpawner,
    SchedulerState,
    SecretsState,
)


CANARY_JOB = pathlib.Path(__file__).parent / "fixtures" / "canary_job.json"


@pytest.fixture(autouse=True)
def configure_log_level():
    config = LoggingConfig()
    config.update(log_level="error")
    yield
    config.update(log_level="error")


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def spawner(events: list[str]) -> MockProcessSpawner:
    return MockProcessSpawner(events=events)


@pytest.fixture
def catalog_state() -> CatalogState:
    return CatalogState()


@pytest.fixture
def secrets_state() -> SecretsState:
    return SecretsState()


@pytest.fixture
def scheduler_state() -> SchedulerState:
    return SchedulerState()


@pytest.fixture
def client_factory(
    catalog_state: CatalogState,
    secrets_state: SecretsState,
    scheduler_state: SchedulerState,
) -> MockClientFactory:
    return MockClientFactory(
        catalog=catalog_state,
        secrets=secrets_state,
        scheduler=scheduler_state,
    )


@pytest.fixture
def canary_job_path() -> str:
    return str(CANARY_JOB)


@pytest.fixture
def env(canary_job_path: str) -> Env:
    return Env(
        RIGGING_CANARY_JOB_PATH=canary_job_path,
        RIGGING_TEST_PARTITIONS="",
        RIGGING_TEST_NAMESPACES="default",
        RIGGING_SEED_SETTLE_DELAY="0s",
        RIGGING_CATALOG_READY_TIMEOUT="2s",
        RIGGING_LOG_LEVEL="error",
    )


@pytest.fixture
def registry() -> ClientRegistry:
    return ClientRegistry()
