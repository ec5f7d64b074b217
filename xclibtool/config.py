"""Runtime settings, read from XCLIBTOOL_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

import structlog

log = structlog.get_logger("xclibtool.config")

DEFAULT_EXECUTOR = "native"
# Absolute path so the wrapper never resolves to itself through PATH
DEFAULT_LIBTOOL = "/usr/bin/libtool"
DEFAULT_TIMEOUT = 600.0


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "console"  # "console" | "json"
    executor: str = DEFAULT_EXECUTOR
    libtool_path: str = DEFAULT_LIBTOOL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (default: ``os.environ``).

        Supported variables:
            XCLIBTOOL_LOG_LEVEL: log level (default: INFO)
            XCLIBTOOL_LOG_FORMAT: console | json (default: console)
            XCLIBTOOL_EXECUTOR: executor registry name (default: native)
            XCLIBTOOL_LIBTOOL: real libtool binary (default: /usr/bin/libtool)
            XCLIBTOOL_TIMEOUT: seconds allowed for the native call (default: 600)
        """
        env = os.environ if environ is None else environ
        log_level, log_format = log_options_from_env(env)
        return cls(
            log_level=log_level,
            log_format=log_format,
            executor=env.get("XCLIBTOOL_EXECUTOR", DEFAULT_EXECUTOR) or DEFAULT_EXECUTOR,
            libtool_path=env.get("XCLIBTOOL_LIBTOOL", DEFAULT_LIBTOOL) or DEFAULT_LIBTOOL,
            timeout=_parse_timeout(env.get("XCLIBTOOL_TIMEOUT")),
        )


def log_options_from_env(environ: Mapping[str, str] | None = None) -> tuple[str, str]:
    """Return (level, format) for setup_logging, read before anything else logs."""
    env = os.environ if environ is None else environ
    return (
        env.get("XCLIBTOOL_LOG_LEVEL", "INFO").upper(),
        env.get("XCLIBTOOL_LOG_FORMAT", "console").lower(),
    )


def _parse_timeout(raw: str | None) -> float:
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        log.warning("config.invalid_timeout", value=raw, fallback=DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value
