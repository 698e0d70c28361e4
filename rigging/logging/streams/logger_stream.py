import asyncio
import datetime
import io
import os
import pathlib
import sys
import threading
from collections import defaultdict
from typing import (
    Callable,
    Dict,
    TypeVar,
)

import msgspec

from rigging.logging.config.logging_config import LoggingConfig
from rigging.logging.config.stream_type import StreamType
from rigging.logging.models import Entry, Log


T = TypeVar('T', bound=Entry)

DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"
DEFAULT_LOGFILE = "logs.json"


class LoggerStream:
    """
    Renders log records to stdout or stderr and, when a directory is
    known, appends them as JSON lines. Open files stay open until
    ``close()``.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        self._name = name or "default"
        self._default_template = template
        self._default_logfile = filename
        self._default_log_directory = directory

        self._init_lock = asyncio.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None

        self._files: Dict[str, io.BufferedWriter] = {}
        self._file_locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._cwd: str | None = None

        self._config = LoggingConfig()
        self._initialized: bool = False

    @property
    def open_files(self) -> list[str]:
        return [
            logfile_path
            for logfile_path, logfile in self._files.items()
            if logfile.closed is False
        ]

    async def initialize(self):
        async with self._init_lock:
            if self._initialized:
                return

            self._loop = asyncio.get_running_loop()

            if self._cwd is None:
                self._cwd = await self._loop.run_in_executor(None, os.getcwd)

            self._initialized = True

    async def open_file(
        self,
        filename: str,
        directory: str | None = None,
    ):
        if self._initialized is False:
            await self.initialize()

        logfile_path = self._to_logfile_path(filename, directory=directory)

        async with self._file_locks[logfile_path]:
            logfile = self._files.get(logfile_path)
            if logfile is None or logfile.closed:
                self._files[logfile_path] = await self._loop.run_in_executor(
                    None,
                    _append_to,
                    logfile_path,
                )

        return logfile_path

    async def close(self):
        if self._loop is not None:
            await asyncio.gather(*[
                self._close_file(logfile_path) for logfile_path in self.open_files
            ])

        self._initialized = False

    async def _close_file(self, logfile_path: str):
        async with self._file_locks[logfile_path]:
            await self._loop.run_in_executor(
                None,
                self._files[logfile_path].close,
            )

    def _to_logfile_path(
        self,
        filename: str,
        directory: str | None = None,
    ):
        if pathlib.Path(filename).suffix != ".json":
            raise ValueError("Err. - file must be JSON file for logs.")

        directory = self._config.directory or directory or self._cwd

        return os.path.join(directory, filename)

    async def log(
        self,
        log: Log[T],
        template: str | None = None,
        path: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        entry = log.entry

        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if self._initialized is False:
            await self.initialize()

        filename = self._default_logfile
        directory = self._default_log_directory

        if path:
            logfile_path = pathlib.Path(path)
            if logfile_path.suffix:
                filename = logfile_path.name
                directory = str(logfile_path.parent.absolute())

            else:
                directory = str(logfile_path.absolute())

        self._write_line(log, template or self._default_template or DEFAULT_TEMPLATE)

        directory = directory or self._config.directory
        if filename or directory:
            await self._log_to_file(log, filename or DEFAULT_LOGFILE, directory)

    def _write_line(self, log: Log[T], template: str):
        stream = sys.stdout if self._config.output == StreamType.STDOUT else sys.stderr
        context = {
            "filename": log.filename,
            "function_name": log.function_name,
            "line_number": log.line_number,
            "thread_id": threading.get_native_id(),
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
        }

        try:
            stream.write(log.entry.to_template(template, context=context) + "\n")
            stream.flush()

        except (KeyError, ValueError, OSError) as err:
            if sys.stderr.closed is False:
                sys.stderr.write(
                    log.entry.to_template(
                        ERROR_TEMPLATE,
                        context={**context, "error": str(err)},
                    ) + "\n"
                )

    async def _log_to_file(
        self,
        log: Log[T],
        filename: str,
        directory: str | None,
    ):
        logfile_path = await self.open_file(filename, directory=directory)

        async with self._file_locks[logfile_path]:
            await self._loop.run_in_executor(
                None,
                self._write_to_file,
                log,
                logfile_path,
            )

    def _write_to_file(
        self,
        log: Log[T],
        logfile_path: str,
    ):
        logfile = self._files.get(logfile_path)
        if logfile is None or logfile.closed:
            return

        try:
            logfile.write(msgspec.json.encode(log) + b"\n")
            logfile.flush()

        except OSError as err:
            if sys.stderr.closed is False:
                sys.stderr.write(f"Err. - could not write log to {logfile_path}: {err}\n")


def _append_to(logfile_path: str):
    path = pathlib.Path(logfile_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    return open(path, "ab+")
