"""Data models for scanned libtool invocations and mode descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class ScanResult:
    """Fields extracted from a libtool argument vector."""

    output: str | None = None  # last -o value
    input_libraries: tuple[str, ...] = ()  # positional *.a, encounter order
    filelist: str | None = None  # last -filelist value
    dependency_info: str | None = None  # last -dependency_info value


@dataclass(frozen=True)
class CreateLibrary:
    """libtool is creating a static library from a filelist of objects."""

    kind: ClassVar[str] = "create_library"

    output: str
    filelist: str
    dependency_info: str

    def __post_init__(self) -> None:
        for name in ("output", "filelist", "dependency_info"):
            if not getattr(self, name):
                raise ValueError(f"CreateLibrary.{name} must be a non-empty string")


@dataclass(frozen=True)
class CreateUniversalBinary:
    """libtool is merging several static libraries into a universal binary."""

    kind: ClassVar[str] = "create_universal_binary"

    output: str
    inputs: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.output:
            raise ValueError("CreateUniversalBinary.output must be a non-empty string")
        if not self.inputs:
            raise ValueError("CreateUniversalBinary.inputs must not be empty")
        # Accept any sequence but store a tuple
        object.__setattr__(self, "inputs", tuple(self.inputs))


ModeDescriptor = Union[CreateLibrary, CreateUniversalBinary]
