"""Tests for menu_app/config.py - debug log path resolution."""

from menu_app import config


def test_default_debug_log_path(monkeypatch):
    monkeypatch.delenv("MENU_APP_DEBUG_LOG", raising=False)
    assert config.resolve_debug_log_path() == config.DEBUG_LOG_PATH


def test_env_override(monkeypatch, tmp_path):
    target = tmp_path / "menu.log"
    monkeypatch.setenv("MENU_APP_DEBUG_LOG", str(target))
    assert config.resolve_debug_log_path() == str(target)


def test_blank_env_override_ignored(monkeypatch):
    monkeypatch.setenv("MENU_APP_DEBUG_LOG", "   ")
    assert config.resolve_debug_log_path() == config.DEBUG_LOG_PATH
