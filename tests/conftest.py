# tests/conftest.py
import os
import sys

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, PROJECT_ROOT)

# Keep the audit log out of the working tree while testing.
os.environ.setdefault("NETPLUS_LOG_FILE", os.devnull)

from fakes import FakeRunner  # noqa: E402


@pytest.fixture
def fake_runner():
    return FakeRunner()
