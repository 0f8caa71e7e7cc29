"""Shared fixtures."""
import pytest

from eventprogress.core.config import set_config
from eventprogress.progress import ProgressCounter, ProgressTracker


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Isolate every test from the process-wide config and env overrides."""
    for var in (
        "EVENTPROGRESS_LOG_LEVEL",
        "EVENTPROGRESS_LOGS_DIR",
        "EVENTPROGRESS_UNKNOWN_NAME",
        "EVENTPROGRESS_JOB_DESCRIPTION_KEY",
    ):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def counter():
    return ProgressCounter.empty()


@pytest.fixture
def tracker():
    return ProgressTracker()
