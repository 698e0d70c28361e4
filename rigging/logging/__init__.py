from .rigging_logging_models import (
    BootstrapDebug as BootstrapDebug,
    BootstrapInfo as BootstrapInfo,
    FixtureError as FixtureError,
    ProcessInfo as ProcessInfo,
    SetupDebug as SetupDebug,
    SetupError as SetupError,
    SetupFatal as SetupFatal,
    SetupInfo as SetupInfo,
    TeardownError as TeardownError,
    TeardownInfo as TeardownInfo,
)
from .config import LoggingConfig as LoggingConfig
from .models import Entry as Entry
from .models import Log as Log
from .models import LogLevel as LogLevel
from .models import LogLevelName as LogLevelName
from .streams import Logger as Logger
