import asyncio
import shutil

from rigging.errors import ExecutableNotFoundError, ProcessSpawnError

from .process_handle import ProcessHandle


class ProcessSpawner:
    def locate(self, name: str) -> str:
        path = shutil.which(name)
        if not path:
            raise ExecutableNotFoundError(name)

        return path

    async def spawn(self, path: str, args: list[str]) -> ProcessHandle:
        try:
            process = await asyncio.create_subprocess_exec(
                path,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )

        except OSError as err:
            raise ProcessSpawnError(path, str(err)) from err

        return ProcessHandle(process, path)
