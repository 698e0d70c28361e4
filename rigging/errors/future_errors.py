from .base import RiggingError


class FutureAlreadyResolvedError(RiggingError):

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Err. - future '{name}' was already resolved")


class FutureAlreadyObservedError(RiggingError):

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Err. - future '{name}' was already awaited")
