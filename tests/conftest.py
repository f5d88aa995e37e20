"""Configure pytest environment for all tests."""

import os
import sys
from pathlib import Path

import pytest


# Get absolute paths
PROJECT_ROOT = Path(__file__).parent.parent.absolute()
SRC_PATH = PROJECT_ROOT / "src"

# Make the package importable without installing it
for path in (SRC_PATH, PROJECT_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test against default configuration.

    Points PRIVY_CONFIG at a file that does not exist and drops PRIVY_*
    variables so a developer's local settings cannot leak into a test.
    """
    from privy.core.config import reset_config

    for key in list(os.environ):
        if key.startswith("PRIVY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("PRIVY_CONFIG", str(tmp_path / "missing-privy.yaml"))
    reset_config()
    yield
    reset_config()
