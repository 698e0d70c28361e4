import asyncio

from rigging.errors import (
    DeadlineExceededError,
    FutureAlreadyObservedError,
    FutureAlreadyResolvedError,
)

from .init_result import InitResult


class AsyncInitFuture:
    """
    Single-shot completion signal for a background initialization.

    The producer calls ``resolve()`` exactly once, with an error on
    failure. The consumer calls ``wait()`` exactly once. A wait that
    times out yields a deadline-exceeded result but leaves the future
    unresolved so the producer can still finish.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._event = asyncio.Event()
        self._error: BaseException | None = None
        self._resolved = False
        self._observed = False

    @property
    def resolved(self) -> bool:
        return self._resolved

    def resolve(self, error: BaseException | None = None) -> None:
        if self._resolved:
            raise FutureAlreadyResolvedError(self.name)

        self._resolved = True
        self._error = error
        self._event.set()

    async def wait(self, timeout: float | None = None) -> InitResult:
        if self._observed:
            raise FutureAlreadyObservedError(self.name)

        self._observed = True

        try:
            await asyncio.wait_for(
                self._event.wait(),
                timeout=timeout,
            )

        except asyncio.TimeoutError:
            return InitResult(
                self.name,
                error=DeadlineExceededError(
                    f"waiting for {self.name}",
                    timeout,
                ),
            )

        return InitResult(
            self.name,
            error=self._error,
        )
