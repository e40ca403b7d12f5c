from __future__ import annotations
import pytest
from tableui.config import reset_settings
from sample_models import Player

@pytest.fixture(autouse=True)
def _env_isolation(monkeypatch):
    """
    Settings come from defaults only unless a test sets them, and the cached
    instance never leaks between tests.
    """
    for name in ("TABLES_CONFIG", "TABLES_KEY_FIELD", "TABLES_KEY_DIRECTION", "TABLES_DEFAULT_DIRECTION"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()

@pytest.fixture
def players():
    return [Player(1, "Zeta", "red"), Player(2, "Alpha", "blue"), Player(3, "Mira", None)]
