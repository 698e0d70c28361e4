from .models import Entry, LogLevel


class SetupInfo(Entry, kw_only=True):
    backend: str
    partition: str | None = None
    level: LogLevel = LogLevel.INFO

class SetupDebug(Entry, kw_only=True):
    backend: str
    partition: str | None = None
    level: LogLevel = LogLevel.DEBUG

class SetupError(Entry, kw_only=True):
    backend: str
    partition: str | None = None
    error: str
    level: LogLevel = LogLevel.ERROR

class SetupFatal(Entry, kw_only=True):
    stage: str
    error: str
    level: LogLevel = LogLevel.FATAL

class ProcessInfo(Entry, kw_only=True):
    backend: str
    executable: str
    pid: int
    level: LogLevel = LogLevel.INFO

class TeardownInfo(Entry, kw_only=True):
    step: str
    level: LogLevel = LogLevel.INFO

class TeardownError(Entry, kw_only=True):
    step: str
    error: str
    level: LogLevel = LogLevel.ERROR

class BootstrapInfo(Entry, kw_only=True):
    job_id: str
    level: LogLevel = LogLevel.INFO

class BootstrapDebug(Entry, kw_only=True):
    job_id: str
    allocations: int
    status: str | None = None
    level: LogLevel = LogLevel.DEBUG

class FixtureError(Entry, kw_only=True):
    fixture: str
    operation: str
    path: str
    error: str
    level: LogLevel = LogLevel.ERROR
