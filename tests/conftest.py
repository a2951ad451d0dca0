import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cavegen import CaveMap  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_cavegen_env(monkeypatch):
    """Keep developer CAVEGEN_* settings from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("CAVEGEN_"):
            monkeypatch.delenv(key)


@pytest.fixture(scope="session")
def small_cave():
    return CaveMap(width=40, height=30, seed=12345)
