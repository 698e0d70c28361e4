from .base import RiggingError


class NotReadyError(RiggingError):
    """Transient: the backend answered but is not ready yet."""
    pass


class BackendRequestError(RiggingError):

    def __init__(
        self,
        backend: str,
        method: str,
        path: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.backend = backend
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body

        status = status_code if status_code is not None else "no response"
        message = f"Err. - {backend} {method} {path} failed ({status})"
        if body:
            message = f"{message}: {body.strip()}"

        super().__init__(message)
