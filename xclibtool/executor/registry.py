"""Executor registry: select the build executor by name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import structlog

from xclibtool.config import Settings
from xclibtool.exceptions import ExecutorNotFoundError
from xclibtool.executor.base import BuildExecutor

log = structlog.get_logger("xclibtool.executor.registry")


@dataclass
class ExecutorDescriptor:
    """Executor registration entry."""

    name: str
    factory: Callable[[Settings], BuildExecutor]
    prerequisites: list[str] = field(default_factory=list)  # human-readable, for diagnostics


class ExecutorRegistry:
    """Executor registration center."""

    def __init__(self) -> None:
        self._executors: dict[str, ExecutorDescriptor] = {}

    def register(self, descriptor: ExecutorDescriptor) -> None:
        self._executors[descriptor.name] = descriptor
        log.debug("executor.registered", name=descriptor.name)

    def get(self, name: str) -> ExecutorDescriptor | None:
        return self._executors.get(name)

    def list_all(self) -> list[ExecutorDescriptor]:
        return list(self._executors.values())

    def create(self, name: str, settings: Settings) -> BuildExecutor:
        """Instantiate the executor registered as ``name``."""
        desc = self.get(name)
        if desc is None:
            known = ", ".join(sorted(d.name for d in self.list_all())) or "none"
            raise ExecutorNotFoundError(f"Unknown executor '{name}' (registered: {known})")
        executor = desc.factory(settings)
        missing = executor.check_prerequisites()
        if missing:
            # Warn only; run() raises ExecutorError if the tool is really absent
            log.warning(
                "executor.prerequisites_missing",
                name=name,
                missing=missing,
                requires=desc.prerequisites,
            )
        return executor


def create_default_registry() -> ExecutorRegistry:
    """Create registry with the native libtool executor registered."""
    from xclibtool.executor.native import NativeLibtoolExecutor

    registry = ExecutorRegistry()
    registry.register(
        ExecutorDescriptor(
            name="native",
            factory=NativeLibtoolExecutor.from_settings,
            prerequisites=["libtool (Xcode command line tools)"],
        )
    )
    return registry
