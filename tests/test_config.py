"""Tests for panevim.config — env var loading and validation."""

import logging

import pytest

from panevim.config import Config


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("PANEVIM_DEFAULT_SESSION", "PANEVIM_LOG_LEVEL", "PANEVIM_TMUX", "PANEVIM_EDITOR"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestDefaults:
    def test_defaults(self, clean_env):
        cfg = Config()
        assert cfg.tmux_bin == "tmux"
        assert cfg.editor_command == "vim"
        assert cfg.default_session == "default"
        assert cfg.log_level == "WARNING"

    def test_overrides(self, clean_env):
        clean_env.setenv("PANEVIM_EDITOR", "nvim")
        clean_env.setenv("PANEVIM_DEFAULT_SESSION", "work")
        clean_env.setenv("PANEVIM_LOG_LEVEL", "debug")
        cfg = Config()
        assert cfg.editor_command == "nvim"
        assert cfg.default_session == "work"
        assert cfg.log_level == "DEBUG"


class TestLogLevel:
    def test_unknown_level_falls_back(self, clean_env, caplog):
        clean_env.setenv("PANEVIM_LOG_LEVEL", "verbose")
        with caplog.at_level(logging.WARNING, logger="panevim.config"):
            cfg = Config()
        assert cfg.log_level == "WARNING"
        assert "PANEVIM_LOG_LEVEL" in caplog.text

    def test_fallback_level_is_accepted_by_logging(self, clean_env):
        clean_env.setenv("PANEVIM_LOG_LEVEL", "verbose")
        logging.getLogger("panevim.test").setLevel(Config().log_level)


class TestDefaultSession:
    @pytest.mark.parametrize("value", ["", "my session", "a=b", "x/y"])
    def test_invalid_name_falls_back(self, clean_env, caplog, value: str):
        clean_env.setenv("PANEVIM_DEFAULT_SESSION", value)
        with caplog.at_level(logging.WARNING, logger="panevim.config"):
            cfg = Config()
        assert cfg.default_session == "default"
        assert "PANEVIM_DEFAULT_SESSION" in caplog.text
