import asyncio
import signal

import psutil


class ProcessHandle:
    def __init__(
        self,
        process: asyncio.subprocess.Process,
        executable: str,
    ) -> None:
        self._process = process
        self.executable = executable

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def running(self) -> bool:
        return self._process.returncode is None

    @property
    def returncode(self) -> int | None:
        return self._process.returncode

    def signal(self, sig: signal.Signals) -> None:
        if self.running:
            try:
                self._process.send_signal(sig)

            except ProcessLookupError:
                pass

    async def wait(self, timeout: float | None = None) -> int | None:
        try:
            return await asyncio.wait_for(
                self._process.wait(),
                timeout=timeout,
            )

        except asyncio.TimeoutError:
            return None

    async def stop(self, timeout: float = 10.0) -> int | None:
        """
        Interrupt the process and wait for it to exit. A process still
        alive after ``timeout`` is killed along with any children it
        left behind.
        """
        if self.running is False:
            return self._process.returncode

        children = self._children()

        self.signal(signal.SIGINT)
        returncode = await self.wait(timeout=timeout)

        if returncode is None:
            try:
                self._process.kill()

            except ProcessLookupError:
                pass

            returncode = await self.wait(timeout=timeout)

        self._reap(children)

        return returncode

    def _children(self) -> list[psutil.Process]:
        try:
            return psutil.Process(self._process.pid).children(recursive=True)

        except psutil.Error:
            return []

    def _reap(self, children: list[psutil.Process]) -> None:
        for child in children:
            try:
                if child.is_running():
                    child.kill()

            except psutil.Error:
                pass
