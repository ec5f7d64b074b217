"""Tests for the argument scanner: pure, no filesystem."""

from __future__ import annotations

import pytest

from xclibtool.exceptions import TruncatedArgumentError
from xclibtool.models.mode import ScanResult
from xclibtool.scanner import scan


class TestScanBasics:
    def test_empty_vector(self):
        assert scan([]) == ScanResult()

    def test_value_flags(self):
        result = scan(["-o", "libFoo.a", "-filelist", "sources.txt", "-dependency_info", "deps.d"])
        assert result.output == "libFoo.a"
        assert result.filelist == "sources.txt"
        assert result.dependency_info == "deps.d"

    def test_flag_values_are_not_inputs(self):
        """The -o value ends in .a but must not be collected as an input library."""
        result = scan(["-o", "libFoo.a", "-filelist", "sources.txt", "-dependency_info", "deps.d"])
        assert result.input_libraries == ()

    def test_input_libraries_in_order(self):
        result = scan(["-o", "libUniversal.a", "libArm.a", "libX86.a"])
        assert result.output == "libUniversal.a"
        assert result.input_libraries == ("libArm.a", "libX86.a")

    def test_duplicate_inputs_preserved(self):
        result = scan(["a/libFoo.a", "-o", "out.a", "a/libFoo.a"])
        assert result.input_libraries == ("a/libFoo.a", "a/libFoo.a")

    def test_accepts_tuple(self):
        assert scan(("-o", "out.a")).output == "out.a"


class TestScanOverrides:
    def test_last_output_wins(self):
        assert scan(["-o", "first.a", "-o", "second.a"]).output == "second.a"

    def test_last_filelist_wins(self):
        assert scan(["-filelist", "a.txt", "-filelist", "b.txt"]).filelist == "b.txt"

    def test_last_dependency_info_wins(self):
        result = scan(["-dependency_info", "a.d", "-dependency_info", "b.d"])
        assert result.dependency_info == "b.d"


class TestScanCursor:
    def test_value_spelled_like_flag(self):
        """A flag value is consumed, never re-interpreted as another flag."""
        result = scan(["-o", "-filelist", "deps.txt"])
        assert result.output == "-filelist"
        assert result.filelist is None

    def test_value_spelled_like_output_flag(self):
        result = scan(["-filelist", "-o", "-o", "out.a"])
        assert result.filelist == "-o"
        assert result.output == "out.a"


class TestScanIgnored:
    def test_unknown_flags_ignored(self):
        result = scan(
            [
                "-static",
                "-arch_only",
                "arm64",
                "-no_warning_for_no_symbols",
                "-o",
                "out.a",
                "-L/usr/lib",
                "-lz",
                "foo.o",
            ]
        )
        assert result == ScanResult(output="out.a")

    def test_suffix_must_be_exact(self):
        result = scan(["libFoo.a.tmp", "libFoo.dylib", "libFoo.A", "libFoo.a"])
        assert result.input_libraries == ("libFoo.a",)


class TestScanTruncated:
    @pytest.mark.parametrize("flag", ["-o", "-filelist", "-dependency_info"])
    def test_trailing_value_flag(self, flag: str):
        with pytest.raises(TruncatedArgumentError) as exc_info:
            scan(["libA.a", flag])
        assert exc_info.value.flag == flag
        assert flag in str(exc_info.value)

    def test_value_flag_alone(self):
        with pytest.raises(TruncatedArgumentError):
            scan(["-o"])
