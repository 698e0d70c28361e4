import asyncio
import time
from dataclasses import dataclass


@dataclass(slots=True)
class Deadline:
    clock: "Clock"
    expires_at: float
    timeout: float

    def expired(self) -> bool:
        return self.clock.monotonic() >= self.expires_at

    def remaining(self) -> float:
        return max(self.expires_at - self.clock.monotonic(), 0.0)


class Clock:
    """Monotonic time source. Tests substitute a fake that advances on sleep."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    def deadline(self, seconds: float) -> Deadline:
        return Deadline(
            clock=self,
            expires_at=self.monotonic() + seconds,
            timeout=seconds,
        )
