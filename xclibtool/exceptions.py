"""Custom exceptions for xclibtool."""


class XCLibtoolError(Exception):
    """Base exception for all xclibtool errors."""


class ClassificationError(XCLibtoolError):
    """Raised when the argument vector does not describe a supported invocation."""


class MissingOutputError(ClassificationError):
    """Raised when no output path (-o) was supplied."""

    def __init__(self) -> None:
        super().__init__("Missing 'output' argument")


class UnsupportedModeError(ClassificationError):
    """Raised when neither library creation nor universal binary signals are present."""

    def __init__(self) -> None:
        super().__init__("Unsupported mode")


class TruncatedArgumentError(ClassificationError):
    """Raised when a value-bearing flag is the last element of the argument vector."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"Missing value for '{flag}' argument")


class ExecutorError(XCLibtoolError):
    """Raised when the build executor fails."""


class ExecutorNotFoundError(XCLibtoolError):
    """Raised when no executor is registered under the requested name."""
