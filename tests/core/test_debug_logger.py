"""
test_debug_logger.py
--------------------
Tests for category and level filtering of console log output.
"""

import pytest

from wrath.core.debug.debug_logger import DebugLogger, LoggerConfig


@pytest.fixture
def logging_on(monkeypatch):
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", {"storage": True, "collision": False})


class Saver:
    def save(self):
        DebugLogger.warn("disk full", category="storage")


def test_enabled_category_prints_with_caller_class(logging_on, capsys):
    Saver().save()
    out = capsys.readouterr().out
    assert "[Saver][WARN] disk full" in out


def test_disabled_category_is_silent(logging_on, capsys):
    DebugLogger.warn("hidden", category="collision")
    assert capsys.readouterr().out == ""


def test_unknown_category_is_silent(logging_on, capsys):
    DebugLogger.system("hidden", category="nonexistent")
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("level, trace_shown, warn_shown", [
    ("NONE", False, False),
    ("WARN", False, True),
    ("INFO", False, True),
    ("VERBOSE", True, True),
])
def test_log_level_gates_kinds(logging_on, monkeypatch, level, trace_shown, warn_shown):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", level)
    assert DebugLogger.enabled("storage", "TRACE") is trace_shown
    assert DebugLogger.enabled("storage", "WARN") is warn_shown


def test_master_switch_silences_everything(capsys):
    # quiet_logger fixture has ENABLE_LOGGING off
    DebugLogger.section("Startup")
    DebugLogger.init_entry("DrawManager")
    DebugLogger.warn("nope")
    assert capsys.readouterr().out == ""


def test_init_entry_aligns_status():
    line = DebugLogger.format_entry("InputManager", "OK")
    assert "> InputManager" in line
    assert line.endswith("[OK]\033[0m")
    assert "...." in line
