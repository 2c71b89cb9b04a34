import logging
import os
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Each test starts without inputs or runner state."""
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name)
    for name in ("GITHUB_ACTIONS", "GITHUB_ENV", "KUBECONFIG", "RUNNER_DEBUG"):
        # set first so the value exported by a test is undone as well
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("RUNNER_TEMP", str(tmp_path / "runner"))
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture
def set_inputs(monkeypatch):
    def _set(**inputs):
        for name, value in inputs.items():
            monkeypatch.setenv(f"INPUT_{name.replace('_', '-').upper()}", value)
    return _set


@pytest.fixture
def sample_secret():
    return (FIXTURES / "sample-secret.yml").read_text()
