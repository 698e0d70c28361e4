from dataclasses import dataclass


@dataclass(slots=True)
class InitResult:
    name: str
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> None:
        if self.error is not None:
            raise self.error
