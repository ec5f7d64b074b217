"""Mode classification: decide which libtool operation was requested.

libtool is overloaded: the same executable creates a static library from a
filelist (with a dependency-info file) or merges several ``.a`` inputs into a
universal binary. The two flag clusters are the only reliable discriminators.
"""

from __future__ import annotations

from xclibtool.exceptions import MissingOutputError, UnsupportedModeError
from xclibtool.models.mode import (
    CreateLibrary,
    CreateUniversalBinary,
    ModeDescriptor,
    ScanResult,
)


def classify(scan: ScanResult) -> ModeDescriptor:
    """
    Build a mode descriptor from a scan result.

    Priority order:
      1. no output -> MissingOutputError
      2. filelist + dependency_info -> CreateLibrary
      3. any input libraries -> CreateUniversalBinary
      4. otherwise -> UnsupportedModeError

    Empty-string values count as absent.
    """
    if not scan.output:
        raise MissingOutputError()

    if scan.filelist and scan.dependency_info:
        # libtool is creating a library; stray .a inputs are ignored
        return CreateLibrary(
            output=scan.output,
            filelist=scan.filelist,
            dependency_info=scan.dependency_info,
        )

    if scan.input_libraries:
        return CreateUniversalBinary(output=scan.output, inputs=scan.input_libraries)

    raise UnsupportedModeError()
