"""Process driver: scan -> classify -> execute, for a single invocation."""

from __future__ import annotations

from typing import Sequence

import structlog

from xclibtool.classifier import classify
from xclibtool.exceptions import ExecutorError
from xclibtool.executor.base import BuildExecutor, ExecutionResult
from xclibtool.scanner import scan

log = structlog.get_logger("xclibtool.driver")


def run(args: Sequence[str], executor: BuildExecutor) -> ExecutionResult:
    """Classify ``args`` and hand the resulting mode to ``executor``.

    Classification errors and ExecutorError propagate unchanged. Any other
    exception escaping the executor is wrapped in ExecutorError.
    """
    mode = classify(scan(args))
    log.info("driver.mode_selected", kind=mode.kind, output=mode.output, executor=executor.name)

    try:
        result = executor.run(mode)
    except ExecutorError:
        raise
    except Exception as e:
        raise ExecutorError(f"Failed with: {e}") from e

    log.info("driver.done", strategy=result.strategy, duration=result.duration_seconds)
    return result
