from .base import RiggingError


class FixtureOperationError(RiggingError):
    """
    A test-time fixture call failed. The failure belongs to the
    calling test; the helper stays usable for later calls.
    """

    def __init__(self, fixture: str, operation: str, path: str, message: str):
        self.fixture = fixture
        self.operation = operation
        self.path = path
        super().__init__(f"Err. - {fixture}.{operation}({path}) failed: {message}")
