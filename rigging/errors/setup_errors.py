from .base import SetupFatalError


class ExecutableNotFoundError(SetupFatalError):
    stage = "launch"

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"Err. - executable '{executable}' not found on PATH")


class ProcessSpawnError(SetupFatalError):
    stage = "launch"

    def __init__(self, executable: str, message: str):
        self.executable = executable
        super().__init__(f"Err. - failed to spawn '{executable}': {message}")


class FixtureFileError(SetupFatalError):
    stage = "bootstrap"

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Err. - fixture file '{path}' is unusable: {message}")


class DeadlineExceededError(SetupFatalError):
    stage = "readiness"

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(
            f"Err. - {operation} did not complete within {timeout:.2f}s"
        )


class BackendNotReadyError(SetupFatalError):
    stage = "launch"

    def __init__(self, backend: str, message: str):
        self.backend = backend
        super().__init__(f"Err. - {backend} backend never became ready: {message}")


class SchedulerInitError(SetupFatalError):
    stage = "bootstrap"


class CanaryAllocationError(SchedulerInitError):
    """Raised when the canary job reports more than one allocation."""

    def __init__(self, job_id: str, allocations: int, diagnostics: str):
        self.job_id = job_id
        self.allocations = allocations
        self.diagnostics = diagnostics
        super().__init__(
            f"Err. - canary job '{job_id}' reported {allocations} allocations, expected one\n{diagnostics}"
        )


class SeedingError(SetupFatalError):
    stage = "seeding"


class NamespaceNotFoundError(SeedingError):

    def __init__(self, partition: str, namespace: str):
        self.partition = partition
        self.namespace = namespace
        super().__init__(
            f"Err. - namespace '{namespace}' in partition '{partition}' does not exist yet"
        )


class RegistryError(SetupFatalError):
    stage = "registry"


class DuplicateTenancyKeyError(RegistryError):

    def __init__(self, partition: str):
        self.partition = partition
        super().__init__(f"Err. - tenancy key '{partition}' is already registered")


class RegistrySealedError(RegistryError):

    def __init__(self, partition: str):
        self.partition = partition
        super().__init__(
            f"Err. - cannot register '{partition}', teardown has already begun"
        )
