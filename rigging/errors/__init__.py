from .base import RiggingError as RiggingError
from .base import SetupFatalError as SetupFatalError
from .client_errors import BackendRequestError as BackendRequestError
from .client_errors import NotReadyError as NotReadyError
from .fixture_errors import FixtureOperationError as FixtureOperationError
from .future_errors import FutureAlreadyObservedError as FutureAlreadyObservedError
from .future_errors import FutureAlreadyResolvedError as FutureAlreadyResolvedError
from .setup_errors import (
    BackendNotReadyError as BackendNotReadyError,
    CanaryAllocationError as CanaryAllocationError,
    DeadlineExceededError as DeadlineExceededError,
    DuplicateTenancyKeyError as DuplicateTenancyKeyError,
    ExecutableNotFoundError as ExecutableNotFoundError,
    FixtureFileError as FixtureFileError,
    NamespaceNotFoundError as NamespaceNotFoundError,
    ProcessSpawnError as ProcessSpawnError,
    RegistryError as RegistryError,
    RegistrySealedError as RegistrySealedError,
    SchedulerInitError as SchedulerInitError,
    SeedingError as SeedingError,
)
