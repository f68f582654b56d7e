import importlib
import pytest
from library_core import config

@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)

def test_defaults(monkeypatch, reload_config):
    for var in ["LOAN_DAYS", "LARGE_BOOK_PAGES", "LIBRARY_NAME"]:
        monkeypatch.delenv(var, raising=False)
    cfg = reload_config()
    assert cfg.settings.LOAN_DAYS == 14
    assert cfg.settings.LARGE_BOOK_PAGES == 300
    assert cfg.settings.LIBRARY_NAME == "Biblioteca Central"

def test_env_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("LOAN_DAYS", "21")
    monkeypatch.setenv("LARGE_BOOK_PAGES", " ")
    cfg = reload_config()
    assert cfg.settings.LOAN_DAYS == 21
    assert cfg.settings.LARGE_BOOK_PAGES == 300
