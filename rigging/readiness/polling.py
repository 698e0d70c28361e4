from typing import Awaitable, Callable, TypeVar

from rigging.errors import BackendRequestError, DeadlineExceededError, NotReadyError
from rigging.runtime import Clock


T = TypeVar("T")

TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    NotReadyError,
    BackendRequestError,
)


async def poll_until(
    operation: Callable[[], Awaitable[T]],
    interval: float,
    timeout: float,
    clock: Clock,
    retry_on: tuple[type[Exception], ...] = TRANSIENT_ERRORS,
    description: str = "poll",
) -> T:
    """
    Call ``operation`` every ``interval`` seconds until it returns.

    Exceptions listed in ``retry_on`` are transient and polling keeps
    going. Anything else propagates on the spot. Once the absolute
    deadline passes the last transient error is chained to a
    DeadlineExceededError.
    """
    deadline = clock.deadline(timeout)
    last_error: Exception | None = None

    while True:
        try:
            return await operation()

        except retry_on as err:
            last_error = err

        if deadline.expired():
            raise DeadlineExceededError(description, timeout) from last_error

        await clock.sleep(min(interval, deadline.remaining()))
