"""Shared pytest fixtures for xclibtool tests."""

import pytest

from xclibtool.config import Settings
from xclibtool.testing import FakeBuildExecutor

# Stand-in for libtool: creates the -o path ($3 after "-static -o")
_FAKE_LIBTOOL = '#!/bin/sh\ntouch "$3"\n'


@pytest.fixture
def fake_executor():
    return FakeBuildExecutor()


@pytest.fixture
def fake_libtool(tmp_path):
    libtool = tmp_path / "libtool"
    libtool.write_text(_FAKE_LIBTOOL)
    libtool.chmod(0o755)
    return libtool


@pytest.fixture
def settings(fake_libtool):
    return Settings(libtool_path=str(fake_libtool), timeout=5.0)
