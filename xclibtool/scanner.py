"""Argument scanner: single left-to-right pass over a libtool argument vector."""

from __future__ import annotations

from typing import Sequence

from xclibtool.exceptions import TruncatedArgumentError
from xclibtool.models.mode import ScanResult

OUTPUT_FLAG = "-o"
FILELIST_FLAG = "-filelist"
DEPENDENCY_INFO_FLAG = "-dependency_info"

# Flags whose value is the following element
VALUE_FLAGS: tuple[str, ...] = (OUTPUT_FLAG, FILELIST_FLAG, DEPENDENCY_INFO_FLAG)

STATIC_LIBRARY_SUFFIX = ".a"


def scan(args: Sequence[str]) -> ScanResult:
    """Extract output, filelist, dependency info and input libraries from ``args``.

    The vector is walked with an explicit index: a value-bearing flag
    consumes the next element, so a value is never re-read as a flag
    (``-o -filelist`` sets the output to ``"-filelist"``). Repeated flags
    keep the last value. Positional arguments ending in ``.a`` are collected
    in encounter order; everything else is ignored.

    Raises:
        TruncatedArgumentError: a value-bearing flag is the last element.
    """
    values: dict[str, str] = {}
    input_libraries: list[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in VALUE_FLAGS:
            if i + 1 >= len(args):
                raise TruncatedArgumentError(arg)
            values[arg] = args[i + 1]
            i += 2
            continue
        if arg.endswith(STATIC_LIBRARY_SUFFIX):
            input_libraries.append(arg)
        i += 1

    return ScanResult(
        output=values.get(OUTPUT_FLAG),
        input_libraries=tuple(input_libraries),
        filelist=values.get(FILELIST_FLAG),
        dependency_info=values.get(DEPENDENCY_INFO_FLAG),
    )
