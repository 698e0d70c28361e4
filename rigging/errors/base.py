class RiggingError(Exception):
    """Root of every error raised by rigging."""
    pass


class SetupFatalError(RiggingError):
    """
    Aborts the whole run. Teardown still executes before the
    error is reported and the process exits non-zero.
    """

    stage: str = "setup"
