"""xclibtool: libtool wrapper that classifies invocations for a caching build executor."""

__version__ = "0.1.0"

from xclibtool.classifier import classify
from xclibtool.driver import run
from xclibtool.exceptions import (
    ClassificationError,
    ExecutorError,
    ExecutorNotFoundError,
    MissingOutputError,
    TruncatedArgumentError,
    UnsupportedModeError,
    XCLibtoolError,
)
from xclibtool.executor.base import BuildExecutor, ExecutionResult
from xclibtool.models.mode import (
    CreateLibrary,
    CreateUniversalBinary,
    ModeDescriptor,
    ScanResult,
)
from xclibtool.scanner import scan

__all__ = [
    "BuildExecutor",
    "ClassificationError",
    "CreateLibrary",
    "CreateUniversalBinary",
    "ExecutionResult",
    "ExecutorError",
    "ExecutorNotFoundError",
    "MissingOutputError",
    "ModeDescriptor",
    "ScanResult",
    "TruncatedArgumentError",
    "UnsupportedModeError",
    "XCLibtoolError",
    "classify",
    "run",
    "scan",
]
