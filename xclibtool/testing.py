"""Test doubles for xclibtool: use in integration tests of build tooling.

Usage::

    from xclibtool.testing import FakeBuildExecutor

    executor = FakeBuildExecutor()                        # always succeeds (cached)
    executor = FakeBuildExecutor(strategy="native")       # always succeeds (native)
    executor = FakeBuildExecutor(error=ExecutorError("x"))  # always raises
"""

from __future__ import annotations

from xclibtool.executor.base import BuildExecutor, ExecutionResult
from xclibtool.models.mode import ModeDescriptor


class FakeBuildExecutor(BuildExecutor):
    """Drop-in BuildExecutor that records modes instead of running libtool.

    Parameters
    ----------
    strategy:
        Strategy reported in the returned ExecutionResult.
    error:
        If set, ``run`` raises this exception after recording the mode.
    """

    def __init__(self, *, strategy: str = "cached", error: Exception | None = None) -> None:
        self._strategy = strategy
        self._error = error
        self._calls: list[ModeDescriptor] = []

    @property
    def name(self) -> str:
        return "fake"

    @property
    def calls(self) -> list[ModeDescriptor]:
        """Modes received: useful for assertions in tests."""
        return self._calls

    def run(self, mode: ModeDescriptor) -> ExecutionResult:
        self._calls.append(mode)
        if self._error is not None:
            raise self._error
        return ExecutionResult(mode=mode, strategy=self._strategy)
