"""Core data types and abstract base class for build executors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from xclibtool.models.mode import ModeDescriptor


@dataclass
class ExecutionResult:
    """
    Outcome reported by a build executor.
    strategy tells which path was taken: "cached" when a previously built
    artifact was materialized at the output path, "native" when the real
    libtool ran.
    """

    mode: ModeDescriptor
    strategy: str  # "cached" | "native"
    duration_seconds: float = 0.0
    detail: str = ""


class BuildExecutor(ABC):
    """
    Abstract base class for build executors.
    An executor consumes exactly one ModeDescriptor and either produces the
    artifact at mode.output or raises ExecutorError.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Executor identifier, e.g. 'native'."""
        ...

    @abstractmethod
    def run(self, mode: ModeDescriptor) -> ExecutionResult:
        """
        Perform the requested libtool operation.

        Raises:
            ExecutorError: the operation failed.
        """
        ...

    def check_prerequisites(self) -> list[str]:
        """
        Check prerequisites.
        Returns list of missing items (empty = can run).
        """
        return []
