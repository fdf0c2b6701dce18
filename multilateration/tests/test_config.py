import importlib

from multilateration import config


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv('MLAT_LOG_LEVEL', 'debug')
    try:
        importlib.reload(config)
        assert config.LOG_LEVEL == 'DEBUG'
    finally:
        monkeypatch.delenv('MLAT_LOG_LEVEL')
        importlib.reload(config)
