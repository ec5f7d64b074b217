"""Native executor: run the real libtool for the classified mode.

This is the fallback path taken when no cached artifact can be substituted.
"""

from __future__ import annotations

import os
import subprocess
import time

import structlog

from xclibtool.config import DEFAULT_LIBTOOL, DEFAULT_TIMEOUT, Settings
from xclibtool.exceptions import ExecutorError
from xclibtool.executor.base import BuildExecutor, ExecutionResult
from xclibtool.models.mode import CreateLibrary, CreateUniversalBinary, ModeDescriptor

log = structlog.get_logger("xclibtool.executor.native")


class NativeLibtoolExecutor(BuildExecutor):
    """
    Rebuild the libtool command line from a mode descriptor and run it.

        CreateLibrary         -> libtool -static -o OUT -filelist FL -dependency_info DEP
        CreateUniversalBinary -> libtool -static -o OUT IN1 IN2 ...
    """

    def __init__(self, libtool_path: str = DEFAULT_LIBTOOL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._libtool_path = libtool_path
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> NativeLibtoolExecutor:
        return cls(libtool_path=settings.libtool_path, timeout=settings.timeout)

    @property
    def name(self) -> str:
        return "native"

    def build_command(self, mode: ModeDescriptor) -> list[str]:
        if isinstance(mode, CreateLibrary):
            return [
                self._libtool_path,
                "-static",
                "-o",
                mode.output,
                "-filelist",
                mode.filelist,
                "-dependency_info",
                mode.dependency_info,
            ]
        if isinstance(mode, CreateUniversalBinary):
            return [self._libtool_path, "-static", "-o", mode.output, *mode.inputs]
        raise ExecutorError(f"Unknown mode descriptor: {mode!r}")

    def run(self, mode: ModeDescriptor) -> ExecutionResult:
        cmd = self.build_command(mode)
        log.info("executor.native.start", kind=mode.kind, output=mode.output, command=cmd)

        start = time.monotonic()
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            raise ExecutorError(f"libtool timed out after {self._timeout}s") from e
        except OSError as e:
            raise ExecutorError(f"Could not run {self._libtool_path}: {e}") from e
        duration = round(time.monotonic() - start, 2)

        if result.returncode != 0:
            raise ExecutorError(
                f"libtool failed (rc={result.returncode}): {result.stderr[-1000:]}"
            )

        log.info("executor.native.done", output=mode.output, duration=duration)
        return ExecutionResult(
            mode=mode,
            strategy="native",
            duration_seconds=duration,
            detail=" ".join(cmd),
        )

    def check_prerequisites(self) -> list[str]:
        if os.path.isfile(self._libtool_path) and os.access(self._libtool_path, os.X_OK):
            return []
        return [f"libtool executable ({self._libtool_path})"]
